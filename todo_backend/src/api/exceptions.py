from __future__ import annotations


class TodoError(Exception):
    """Base class for todo domain errors."""


# PUBLIC_INTERFACE
class TodoNotFoundError(TodoError):
    """Raised when an operation references a todo id with no stored record."""

    def __init__(self, todo_id: int) -> None:
        super().__init__(f"Todo {todo_id} not found")
        self.todo_id = todo_id
