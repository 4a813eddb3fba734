"""
test_logging.py — Console and JSON log formatting.

Run with:
    pytest tests/test_logging.py -v
"""

from __future__ import annotations

import json
import logging
import sys

from alerthub.app.core.logging_config import (
    ConsoleFormatter,
    JSONFormatter,
    RequestContextFilter,
    bind_request_context,
    reset_request_context,
)


def _record_with_exception(msg: str = "Store failure during 'fetch alerts'") -> logging.LogRecord:
    try:
        raise RuntimeError("connection reset")
    except RuntimeError:
        exc_info = sys.exc_info()
    return logging.LogRecord(
        "alerthub.app.core.database", logging.ERROR, __file__, 1, msg, None, exc_info,
    )


class TestConsoleFormatter:

    def test_exception_keeps_traceback(self):
        line = ConsoleFormatter().format(_record_with_exception())
        assert "Store failure during 'fetch alerts'" in line
        assert "Traceback (most recent call last)" in line
        assert "RuntimeError: connection reset" in line

    def test_request_id_prefix(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)
        token = bind_request_context(request_id="abcdef0123456789")
        try:
            RequestContextFilter().filter(record)
        finally:
            reset_request_context(token)
        assert "[abcdef01]" in ConsoleFormatter().format(record)

    def test_domain_tags_appended(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "created", None, None)
        record.alert_id = 7
        record.severity = "watch"
        line = ConsoleFormatter().format(record)
        assert line.endswith("created alert_id=7 severity=watch")


class TestJSONFormatter:

    def test_exception_and_extras(self):
        record = _record_with_exception()
        record.alert_id = 3
        entry = json.loads(JSONFormatter().format(record))
        assert entry["level"] == "ERROR"
        assert entry["alert_id"] == 3
        assert "RuntimeError: connection reset" in entry["exc"]
