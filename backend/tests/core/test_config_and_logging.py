"""Settings and structured logging.

Tests:
    - database_url driver rewriting for PostgreSQL and SQLite
    - fixed default port
    - JSONFormatter surfaces extra fields and exceptions
    - setup_logging replaces its own handler instead of stacking
"""

import json
import logging
import sys

from fleet.config import Settings
from fleet.infrastructure.observability import JSONFormatter, setup_logging


def test_postgres_url_gets_asyncpg_driver():
    s = Settings(database_url="postgresql://u:p@db:5432/fleet")
    assert s.database_url == "postgresql+asyncpg://u:p@db:5432/fleet"


def test_sqlite_url_gets_aiosqlite_driver():
    s = Settings(database_url="sqlite:///./cars.db")
    assert s.database_url == "sqlite+aiosqlite:///./cars.db"


def test_explicit_driver_is_kept():
    s = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert s.database_url == "sqlite+aiosqlite:///:memory:"


def test_default_port(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert Settings().port == 8080


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("fleet.test", logging.WARNING, __file__, 1, msg, None, None)
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_extra_fields():
    line = JSONFormatter().format(
        _record("Car BTS812 rented", registration="BTS812", error_code="X"),
    )
    payload = json.loads(line)
    assert payload["message"] == "Car BTS812 rented"
    assert payload["level"] == "WARNING"
    assert payload["registration"] == "BTS812"
    assert payload["error_code"] == "X"
    assert "path" not in payload


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record("failed")
        record.exc_info = sys.exc_info()
    payload = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in payload["exception"]


def test_setup_logging_does_not_stack_handlers():
    first = setup_logging("DEBUG", "json")
    second = setup_logging("INFO", "text")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert logging.root.level == logging.INFO
    finally:
        logging.root.removeHandler(second)


def test_cors_is_opt_in(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert Settings().cors_origins == []
