"""
Client side of the todo service.

``TodoApiClient`` wraps the three remote operations over HTTP. ``TodoBoard``
is the view state a UI renders from: a local cache of records that changes
only when one of those operations returns successfully.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from .exceptions import TodoError, TodoNotFoundError
from .schemas import TodoOut

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1/todos"

_TODO = TypeAdapter(TodoOut)
_TODO_LIST = TypeAdapter(List[TodoOut])


class TodoApiError(TodoError):
    """Raised for a non-2xx response that is not a NotFound, or a 2xx body that is not a todo payload."""

    def __init__(self, status_code: int, body: Any) -> None:
        super().__init__(f"Todo API returned {status_code}: {body}")
        self.status_code = status_code
        self.body = body


# PUBLIC_INTERFACE
class TodoApiClient:
    """HTTP client for the todo service.

    Either pass ``base_url`` or an already configured ``httpx.Client`` (for
    example FastAPI's ``TestClient``). A client passed in is not closed by
    ``close()``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        http: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ) -> None:
        if http is None:
            if base_url is None:
                raise ValueError("either base_url or http must be given")
            http = httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout)
            self._owns_http = True
        else:
            self._owns_http = False
        self._http = http

    def _send(
        self,
        method: str,
        path: str,
        adapter: TypeAdapter,
        json: Any = None,
        todo_id: Optional[int] = None,
    ) -> Any:
        resp = self._http.request(method, path, json=json)
        try:
            body = resp.json()
        except ValueError:
            body = None
        if resp.is_error:
            if resp.status_code == 404 and isinstance(body, dict) and body.get("error") == "NotFound":
                detail = body.get("detail")
                raise TodoNotFoundError(detail.get("id", todo_id) if isinstance(detail, dict) else todo_id)
            raise TodoApiError(resp.status_code, resp.text if body is None else body)
        if body is None:
            raise TodoApiError(resp.status_code, resp.text)
        try:
            return adapter.validate_python(body)
        except ValidationError as exc:
            raise TodoApiError(resp.status_code, resp.text) from exc

    def get_todos(self) -> List[TodoOut]:
        """getTodos: every todo in creation order."""
        return self._send("GET", f"{API_PREFIX}/", _TODO_LIST)

    def create_todo(self, text: str) -> TodoOut:
        """createTodo: create an incomplete todo with ``text``."""
        return self._send("POST", f"{API_PREFIX}/", _TODO, json={"text": text})

    def update_todo_completion(self, todo_id: int, completed: bool) -> TodoOut:
        """updateTodoCompletion: set the completed flag of todo ``todo_id``.

        Raises:
            TodoNotFoundError: the server has no todo with that id.
        """
        return self._send(
            "POST",
            f"{API_PREFIX}/completion",
            _TODO,
            json={"id": todo_id, "completed": completed},
            todo_id=todo_id,
        )

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> TodoApiClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


# PUBLIC_INTERFACE
class TodoBoard:
    """
    Client-held list of todos, split into incomplete and completed groups.

    The cache is written only from the responses of ``load``, ``add`` and
    ``toggle``. Any failure is logged, the action returns False and the cache
    keeps its previous contents.

    ``is_loading`` is set while ``load`` is in flight and ``is_submitting``
    while ``add`` is; a second ``add`` during a submit is refused.
    """

    def __init__(self, api: TodoApiClient) -> None:
        self._api = api
        self._todos: List[TodoOut] = []
        self.is_loading = False
        self.is_submitting = False

    @property
    def todos(self) -> List[TodoOut]:
        return list(self._todos)

    @property
    def incomplete(self) -> List[TodoOut]:
        return [t for t in self._todos if not t.completed]

    @property
    def completed(self) -> List[TodoOut]:
        return [t for t in self._todos if t.completed]

    @property
    def is_empty(self) -> bool:
        return not self._todos

    def summary(self) -> str:
        return f"{len(self.incomplete)} remaining • {len(self.completed)} completed"

    def load(self) -> bool:
        """Replace the cache with the server's list."""
        self.is_loading = True
        try:
            todos = self._api.get_todos()
        except (TodoError, httpx.HTTPError):
            logger.exception("Failed to load todos")
            return False
        finally:
            self.is_loading = False
        self._todos = todos
        return True

    def add(self, text: str) -> bool:
        """Create a todo from ``text``; blank input is ignored without a call."""
        text = text.strip()
        if not text or self.is_submitting:
            return False
        self.is_submitting = True
        try:
            created = self._api.create_todo(text)
        except (TodoError, httpx.HTTPError):
            logger.exception("Failed to create todo")
            return False
        finally:
            self.is_submitting = False
        self._todos = [*self._todos, created]
        return True

    def toggle(self, todo_id: int, completed: bool) -> bool:
        """Set the completion of ``todo_id`` and cache the server's copy."""
        try:
            updated = self._api.update_todo_completion(todo_id, completed)
        except TodoNotFoundError:
            logger.warning("Todo %s no longer exists on the server", todo_id)
            return False
        except (TodoError, httpx.HTTPError):
            logger.exception("Failed to update todo %s", todo_id)
            return False
        self._todos = [updated if t.id == todo_id else t for t in self._todos]
        return True
