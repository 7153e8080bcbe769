import json
import logging

from src.api.db import SQLiteRepository
from src.api.generate_openapi import generate_openapi
from src.api.logging_config import LOGGER_NAME, configure_logging
from src.api.repositories import InMemoryRepository, build_repository, get_repository
from src.api.settings import get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("PERSISTENCE_BACKEND", "SQLITE_DB_PATH", "CORS_ALLOW_ORIGINS", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = get_settings()
        assert settings.persistence_backend == "memory"
        assert settings.sqlite_db_path == "./data/todos.db"
        assert settings.cors_allow_origins == ["*"]
        assert settings.log_level == "INFO"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("PERSISTENCE_BACKEND", " SQLite ")
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test,")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = get_settings()
        assert settings.persistence_backend == "sqlite"
        assert settings.cors_allow_origins == ["http://a.test", "http://b.test"]
        assert settings.log_level == "DEBUG"

    def test_origins_without_entries_allow_all(self, monkeypatch):
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", " , ")
        assert get_settings().cors_allow_origins == ["*"]
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test,*")
        assert get_settings().cors_allow_origins == ["*"]

    def test_unknown_backend_falls_back_to_memory(self, monkeypatch):
        monkeypatch.setenv("PERSISTENCE_BACKEND", "postgres")
        assert get_settings().persistence_backend == "memory"


class TestRepositoryFactory:
    def test_builds_sqlite_backend(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PERSISTENCE_BACKEND", "sqlite")
        monkeypatch.setenv("SQLITE_DB_PATH", str(tmp_path / "todos.db"))
        assert isinstance(build_repository(), SQLiteRepository)

    def test_builds_memory_backend(self, monkeypatch):
        monkeypatch.setenv("PERSISTENCE_BACKEND", "memory")
        assert isinstance(build_repository(), InMemoryRepository)

    def test_repository_is_shared(self, monkeypatch):
        monkeypatch.setenv("PERSISTENCE_BACKEND", "memory")
        get_repository.cache_clear()
        try:
            assert get_repository() is get_repository()
        finally:
            get_repository.cache_clear()


class TestLogging:
    def test_configure_is_idempotent(self):
        logger = configure_logging("DEBUG")
        configure_logging("DEBUG")
        assert logger.name == LOGGER_NAME
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
        configure_logging("INFO")

    def test_unknown_level_falls_back_to_info(self):
        assert configure_logging("chatty").level == logging.INFO


class TestOpenAPI:
    def test_schema_lists_the_three_operations(self, tmp_path):
        path = generate_openapi(str(tmp_path / "interfaces" / "openapi.json"))
        with open(path, encoding="utf-8") as f:
            schema = json.load(f)
        operation_ids = {
            op["operationId"] for item in schema["paths"].values() for op in item.values()
        }
        assert {"getTodos", "createTodo", "updateTodoCompletion"} <= operation_ids
        assert {t["name"] for t in schema["tags"]} >= {"health", "todos"}
