"""Structured Logging: JSON formatter surfaces known extra fields."""

import json
import logging

from eventboard.infrastructure.observability import JSONFormatter


def _record(**extra):
    record = logging.LogRecord(
        "eventboard.test", logging.INFO, __file__, 1, "User created", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "eventboard.test"
    assert log["message"] == "User created"
    assert "timestamp" in log


def test_json_formatter_surfaces_extras_and_skips_unknown():
    log = json.loads(JSONFormatter().format(
        _record(entity_kind="User", record_id="u1", topic=None, secret="x"),
    ))
    assert log["entity_kind"] == "User"
    assert log["record_id"] == "u1"
    assert "topic" not in log
    assert "secret" not in log
