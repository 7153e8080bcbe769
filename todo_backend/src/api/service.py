from __future__ import annotations

import logging
from typing import List

from fastapi import Depends

from .exceptions import TodoNotFoundError
from .models import TodoEntity
from .repositories import Repository, get_repository

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class TodoService:
    """
    The three todo operations on top of a Repository.

    Store failures are not caught here; they reach the caller unchanged.
    """

    def __init__(self, repository: Repository) -> None:
        self._repo = repository

    def list_todos(self) -> List[TodoEntity]:
        """Return every todo in insertion order."""
        todos = self._repo.list()
        logger.debug("Listed %d todos", len(todos))
        return todos

    def create_todo(self, text: str) -> TodoEntity:
        """
        Insert a new incomplete todo and return it with its generated id and
        created_at. The text is stored as given; trimming and emptiness checks
        belong to the caller.
        """
        created = self._repo.create(text)
        logger.info("Created todo %s", created["id"])
        return created

    def set_completion(self, todo_id: int, completed: bool) -> TodoEntity:
        """
        Set the completed flag of an existing todo and return the stored record.

        Raises:
            TodoNotFoundError: no todo with ``todo_id`` exists.
        """
        updated = self._repo.set_completed(todo_id, completed)
        if updated is None:
            logger.warning("Completion update for missing todo %s", todo_id)
            raise TodoNotFoundError(todo_id)
        logger.info("Set todo %s completed=%s", todo_id, completed)
        return updated


# PUBLIC_INTERFACE
def get_todo_service(repo: Repository = Depends(get_repository)) -> TodoService:
    """FastAPI dependency returning a TodoService bound to the configured repository."""
    return TodoService(repo)
