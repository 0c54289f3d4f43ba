"""Structured Logging — JSONFormatter output."""

import json
import logging

from cookmate.infrastructure.observability import JSONFormatter


def _record(msg="hello", **extra):
    record = logging.LogRecord(
        "cookmate.test", logging.INFO, __file__, 1, msg, None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "cookmate.test"
    assert out["message"] == "hello"
    assert "timestamp" in out


def test_includes_known_extra_fields():
    out = json.loads(JSONFormatter().format(
        _record(subject_id="abc", status_code=404, duration_ms=1.5),
    ))
    assert out["subject_id"] == "abc"
    assert out["status_code"] == 404
    assert out["duration_ms"] == 1.5


def test_ignores_unknown_extra_fields():
    out = json.loads(JSONFormatter().format(_record(authorization="Bearer x")))
    assert "authorization" not in out
