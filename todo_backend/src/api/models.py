from __future__ import annotations

from datetime import datetime
from typing import TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A lightweight domain model representing a Todo record as held by the
    storage backends.

    Fields:
    - id: Unique integer identifier, assigned by the store
    - text: Task text (non-empty, trimmed on input via schemas); never edited
    - completed: Boolean completion flag; the only mutable field
    - created_at: UTC creation timestamp (datetime); never edited
    """

    id: int
    text: str
    completed: bool
    created_at: datetime
