"""
Access logging middleware.

Each request gets a correlation id (taken from the client's X-Request-ID
header when present), which is bound to the logging context for the
duration of the request and echoed back with the elapsed time.
"""

from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from alerthub.app.core.logging_config import bind_request_context, reset_request_context

logger = logging.getLogger("alerthub.access")

# Probe and docs traffic is served but not logged
_UNLOGGED_PATHS = ("/health/live", "/docs", "/redoc", "/openapi.json", "/favicon.ico")


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Correlation id, X-Process-Time header and one access line per request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:16]
        client = request.client.host if request.client else "-"
        path = request.url.path
        token = bind_request_context(
            request_id=request_id, client_ip=client, method=request.method, path=path,
        )
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                "%s %s failed after %.1fms", request.method, path, _elapsed_ms(started),
                extra={"status_code": 500, "endpoint": path},
            )
            raise
        else:
            elapsed = _elapsed_ms(started)
            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{elapsed:.1f}ms"
            if path not in _UNLOGGED_PATHS:
                logger.log(
                    logging.WARNING if response.status_code >= 400 else logging.INFO,
                    "%s %s %d %.1fms", request.method, path, response.status_code, elapsed,
                    extra={
                        "status_code": response.status_code,
                        "duration_ms": round(elapsed, 1),
                        "endpoint": path,
                    },
                )
            return response
        finally:
            reset_request_context(token)
