"""
Logging setup for the alert hub.

Two output modes, picked from ENVIRONMENT:
    • production  — one JSON object per line for the log shipper
    • otherwise   — coloured single-line console output

Every record is stamped with the current request (id, client, method, path)
by RequestContextFilter, so repository and route logs can be correlated with
the access line written by RequestLoggingMiddleware.

Usage:
    from alerthub.app.core.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__)
    logger.info("Alert created", extra={"alert_id": 7, "severity": "watch"})
"""

from __future__ import annotations

import json
import logging
import sys
from contextvars import ContextVar, Token
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from alerthub.app.core.config import settings

_request_context: ContextVar[Optional[Dict[str, Any]]] = ContextVar(
    "alerthub_request_context", default=None
)

# Domain attributes passed through `extra=` that are worth keeping in JSON output
_DOMAIN_FIELDS = (
    "alert_id", "entity", "entity_id", "severity", "seeded",
    "duration_ms", "status_code", "endpoint",
)

# Third-party loggers and the level they are held at
_QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "aiosqlite": logging.WARNING,
    "asyncpg": logging.WARNING,
}


def bind_request_context(**fields: Any) -> Token:
    """Attach request fields to every record logged in this context."""
    return _request_context.set(fields)


def reset_request_context(token: Token) -> None:
    _request_context.reset(token)


def get_request_context() -> Dict[str, Any]:
    return _request_context.get() or {}


class RequestContextFilter(logging.Filter):
    """Copies the bound request fields onto the record as `request`."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request = get_request_context()
        return True


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        request = getattr(record, "request", None)
        if request:
            entry["request"] = request
        entry.update(
            (key, getattr(record, key)) for key in _DOMAIN_FIELDS if hasattr(record, key)
        )
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Coloured console lines for development."""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[1;31m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelname, "")
        request = getattr(record, "request", None) or {}
        rid = f" [{request['request_id'][:8]}]" if request.get("request_id") else ""
        tags = "".join(
            f" {key}={getattr(record, key)}"
            for key in ("alert_id", "entity_id", "severity")
            if hasattr(record, key)
        )
        line = (
            f"{self.formatTime(record, '%H:%M:%S')} "
            f"{color}{record.levelname:<8}{self.RESET}{rid} "
            f"{record.name}: {record.getMessage()}{tags}"
        )
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(level: Optional[str] = None) -> None:
    """Install a single stdout handler on the root logger."""
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestContextFilter())
    handler.setFormatter(JSONFormatter() if settings.is_production else ConsoleFormatter())
    root.addHandler(handler)

    for name, lvl in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(lvl)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DATABASE_ECHO else logging.WARNING
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
