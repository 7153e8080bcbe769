from __future__ import annotations

import os
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import Generator, List, Optional

from .models import TodoEntity
from .repositories import Repository, utc_now


@dataclass(frozen=True)
class _Cols:
    table: str = "todos"
    id: str = "id"
    text: str = "text"
    completed: str = "completed"
    created_at: str = "created_at"


_COLS = _Cols()

# SQLite INTEGER is a signed 64-bit value; larger ids cannot be stored
_MAX_ID = 2**63 - 1


class SQLiteRepository(Repository):
    """
    Lightweight SQLite repository implementing the Repository interface.

    Each public call is one unit of work: a fresh connection, committed on
    success and rolled back if the call raises.
    """

    def __init__(self, db_path: str) -> None:
        os.makedirs(os.path.dirname(db_path) or ".", exist_ok=True)
        self._db_path = db_path
        self._init_db()

    @contextmanager
    def _conn(self) -> Generator[sqlite3.Connection, None, None]:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_db(self) -> None:
        with self._conn() as conn:
            conn.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {_COLS.table} (
                    {_COLS.id} INTEGER PRIMARY KEY AUTOINCREMENT,
                    {_COLS.text} TEXT NOT NULL,
                    {_COLS.completed} INTEGER NOT NULL DEFAULT 0,
                    {_COLS.created_at} TEXT NOT NULL
                )
                """
            )

    def _row_to_entity(self, row: sqlite3.Row) -> TodoEntity:
        return {
            "id": int(row[_COLS.id]),
            "text": str(row[_COLS.text]),
            "completed": bool(row[_COLS.completed]),
            "created_at": datetime.fromisoformat(row[_COLS.created_at]),
        }

    def _select(self, conn: sqlite3.Connection, todo_id: int) -> Optional[sqlite3.Row]:
        return conn.execute(
            f"SELECT * FROM {_COLS.table} WHERE {_COLS.id} = ?", (todo_id,)
        ).fetchone()

    def create(self, text: str) -> TodoEntity:
        with self._conn() as conn:
            cur = conn.execute(
                f"INSERT INTO {_COLS.table} ({_COLS.text}, {_COLS.completed}, {_COLS.created_at}) VALUES (?, 0, ?)",
                (text, utc_now().isoformat()),
            )
            row = self._select(conn, cur.lastrowid)
            assert row is not None
            return self._row_to_entity(row)

    def get(self, todo_id: int) -> Optional[TodoEntity]:
        if not -_MAX_ID - 1 <= todo_id <= _MAX_ID:
            return None
        with self._conn() as conn:
            row = self._select(conn, todo_id)
            return self._row_to_entity(row) if row else None

    def set_completed(self, todo_id: int, completed: bool) -> Optional[TodoEntity]:
        if not -_MAX_ID - 1 <= todo_id <= _MAX_ID:
            return None
        with self._conn() as conn:
            cur = conn.execute(
                f"UPDATE {_COLS.table} SET {_COLS.completed} = ? WHERE {_COLS.id} = ?",
                (1 if completed else 0, todo_id),
            )
            if cur.rowcount == 0:
                return None
            row = self._select(conn, todo_id)
            assert row is not None
            return self._row_to_entity(row)

    def list(self) -> List[TodoEntity]:
        with self._conn() as conn:
            rows = conn.execute(f"SELECT * FROM {_COLS.table} ORDER BY {_COLS.id} ASC").fetchall()
            return [self._row_to_entity(r) for r in rows]

    def count(self) -> int:
        with self._conn() as conn:
            row = conn.execute(f"SELECT COUNT(*) AS cnt FROM {_COLS.table}").fetchone()
            return int(row["cnt"]) if row else 0
