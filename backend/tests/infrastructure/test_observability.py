"""Structured logging — JSON formatter tests."""

import json
import logging

from notifier.infrastructure.observability import JSONFormatter


def _record(**extra):
    record = logging.LogRecord(
        "notifier.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None,
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_formats_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "WARNING"
    assert out["logger"] == "notifier.test"
    assert out["message"] == "hello world"
    assert "timestamp" in out


def test_surfaces_domain_extras():
    out = json.loads(JSONFormatter().format(
        _record(user_id="1001", provider_code=89, category="revoked", unrelated="x"),
    ))
    assert out["user_id"] == "1001"
    assert out["provider_code"] == 89
    assert out["category"] == "revoked"
    assert "unrelated" not in out


def test_timestamp_comes_from_record_creation():
    record = _record()
    record.created = 0.0
    out = json.loads(JSONFormatter().format(record))
    assert out["timestamp"] == "1970-01-01T00:00:00+00:00"
