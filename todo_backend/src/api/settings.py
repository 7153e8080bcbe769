from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - PERSISTENCE_BACKEND: 'memory' (default) or 'sqlite'
    - SQLITE_DB_PATH: path to sqlite db file. Default './data/todos.db'
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - LOG_LEVEL: logging level name for the application loggers. Default 'INFO'
    """

    persistence_backend: str
    sqlite_db_path: str
    cors_allow_origins: List[str]
    log_level: str


def _env(name: str, default: str) -> str:
    # Unset and whitespace-only both mean "use the default"
    value = (os.getenv(name) or "").strip()
    return value or default


def _parse_origins(raw: str) -> List[str]:
    """
    Split CORS_ALLOW_ORIGINS on commas. A bare '*', or a value that lists no
    origin at all, opens the API to every origin.
    """
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    if not origins or "*" in origins:
        return ["*"]
    return origins


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    backend = _env("PERSISTENCE_BACKEND", "memory").lower()
    if backend not in {"memory", "sqlite"}:
        # Fallback to memory if unsupported
        backend = "memory"

    sqlite_path = _env("SQLITE_DB_PATH", "./data/todos.db")
    origins = _parse_origins(_env("CORS_ALLOW_ORIGINS", "*"))
    log_level = _env("LOG_LEVEL", "INFO").upper()

    return Settings(
        persistence_backend=backend,
        sqlite_db_path=sqlite_path,
        cors_allow_origins=origins,
        log_level=log_level,
    )
