"""JSONFormatter: structured fields surface only when present."""

import json
import logging
import sys

from catalog.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "catalog.test", logging.INFO, __file__, 1, "[API] GET /api/partners", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "catalog.test"
    assert log["message"] == "[API] GET /api/partners"
    assert "timestamp" in log
    assert "operation" not in log


def test_operation_fields_included():
    log = json.loads(JSONFormatter().format(
        _record(operation="GET /api/partners", elapsed_ms=3.2, record_count=5),
    ))
    assert log["operation"] == "GET /api/partners"
    assert log["elapsed_ms"] == 3.2
    assert log["record_count"] == 5


def test_zero_record_count_is_kept():
    log = json.loads(JSONFormatter().format(_record(record_count=0)))
    assert log["record_count"] == 0


def test_exception_is_formatted():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in log["exception"]
