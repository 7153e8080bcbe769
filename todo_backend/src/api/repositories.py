from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from functools import lru_cache
from threading import RLock
from typing import List, Optional

from .models import TodoEntity
from .settings import get_settings


def utc_now() -> datetime:
    """Timestamp used for created_at by every backend."""
    return datetime.now(timezone.utc)


# PUBLIC_INTERFACE
class Repository(ABC):
    """Abstract repository contract for todo storage backends."""

    @abstractmethod
    def create(self, text: str) -> TodoEntity:
        """Insert a new incomplete TodoEntity stamped with the current time and return it."""

    @abstractmethod
    def get(self, todo_id: int) -> Optional[TodoEntity]:
        """Return a TodoEntity by id, or None if not found."""

    @abstractmethod
    def set_completed(self, todo_id: int, completed: bool) -> Optional[TodoEntity]:
        """
        Write the completed flag of an existing TodoEntity, leaving every other
        field untouched. Return the stored entity, or None if not found.
        """

    @abstractmethod
    def list(self) -> List[TodoEntity]:
        """Return every TodoEntity in insertion (id ascending) order."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored todos."""


class InMemoryRepository(Repository):
    """
    Thread-safe in-memory repository suitable for testing and default runtime.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: dict[int, TodoEntity] = {}
        self._next_id = 1

    def _allocate_id(self) -> int:
        with self._lock:
            i = self._next_id
            self._next_id += 1
            return i

    def create(self, text: str) -> TodoEntity:
        entity: TodoEntity = {
            "id": self._allocate_id(),
            "text": text,
            "completed": False,
            "created_at": utc_now(),
        }
        with self._lock:
            self._items[entity["id"]] = entity
        return entity.copy()

    def get(self, todo_id: int) -> Optional[TodoEntity]:
        with self._lock:
            item = self._items.get(todo_id)
            return None if item is None else item.copy()

    def set_completed(self, todo_id: int, completed: bool) -> Optional[TodoEntity]:
        with self._lock:
            existing = self._items.get(todo_id)
            if existing is None:
                return None
            updated = existing.copy()
            updated["completed"] = completed
            self._items[todo_id] = updated
            return updated.copy()

    def list(self) -> List[TodoEntity]:
        with self._lock:
            # Ids are allocated in increasing order, so id order is insertion order
            return [self._items[i].copy() for i in sorted(self._items)]

    def count(self) -> int:
        with self._lock:
            return len(self._items)


def build_repository() -> Repository:
    """
    Build a new repository for the configured backend.
    - memory: InMemoryRepository
    - sqlite: SQLiteRepository at settings.sqlite_db_path
    """
    settings = get_settings()
    if settings.persistence_backend == "sqlite":
        from .db import SQLiteRepository

        return SQLiteRepository(settings.sqlite_db_path)
    return InMemoryRepository()


# PUBLIC_INTERFACE
@lru_cache(maxsize=1)
def get_repository() -> Repository:
    """
    Return the process-wide repository for the configured backend.

    Every request must see the same store, so the instance is built once.
    Call ``get_repository.cache_clear()`` after changing the settings.
    """
    return build_repository()
