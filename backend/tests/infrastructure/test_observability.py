"""Structured logging and settings — JSON formatter fields, setup idempotence, URL normalisation."""

import json
import logging

from roommates.config import Settings
from roommates.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "roommates.test", logging.INFO, __file__, 1, "Member removed", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "roommates.test"
    assert log["message"] == "Member removed"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(group_id="g1", action="remove_member", password="hunter2"),
    ))
    assert log["group_id"] == "g1"
    assert log["action"] == "remove_member"
    assert "password" not in log


def test_setup_logging_replaces_its_own_handler():
    first = setup_logging("DEBUG", "text")
    after_first = len(logging.root.handlers)
    second = setup_logging("INFO", "json")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert len(logging.root.handlers) == after_first
        assert isinstance(second.formatter, JSONFormatter)
        assert logging.root.level == logging.INFO
    finally:
        logging.root.removeHandler(second)


def test_settings_normalise_postgres_url():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_settings_keep_sqlite_url():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url.startswith("sqlite+aiosqlite")
