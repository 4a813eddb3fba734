"""
Centralised error handling — exception hierarchy + FastAPI handlers.

Provides:
    • Domain-specific exception classes
    • Consistent JSON error response format
    • Conversion of request validation failures into itemized field errors
    • Automatic logging of unhandled errors
    • Request context in error responses (non-production)

Usage:
    from alerthub.app.core.errors import (
        AlertHubError,
        NotFoundError,
        ValidationError,
        StoreError,
        register_error_handlers,
    )

    raise NotFoundError("Alert", id=42)

Every error body carries a top-level "message" so the client can surface it
in a toast without inspecting the code.
"""

from __future__ import annotations

import logging
import traceback
from typing import Any, Dict, List, Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from alerthub.app.core.config import settings

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# Exception Hierarchy
# ═══════════════════════════════════════════════════════════════════════════

class AlertHubError(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        *,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}


class NotFoundError(AlertHubError):
    """Resource not found (404)."""

    def __init__(self, resource: str, **identifiers: Any):
        details = {"resource": resource, **identifiers}
        super().__init__(
            message=f"{resource} not found",
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class ValidationError(AlertHubError):
    """Input failed schema validation (400) — carries one entry per field."""

    def __init__(
        self,
        message: str = "Invalid request data",
        *,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
        )
        self.errors = errors or []

    @classmethod
    def from_pydantic(
        cls, raw_errors: Sequence[Dict[str, Any]], message: str = "Invalid request data",
    ) -> "ValidationError":
        """Flatten pydantic/FastAPI error dicts into {field, message, type}."""
        items = []
        for err in raw_errors:
            loc = [str(part) for part in err.get("loc", ()) if part != "body"]
            items.append({
                "field": ".".join(loc) or None,
                "message": err.get("msg", ""),
                "type": err.get("type", "value_error"),
            })
        return cls(message, errors=items)


class StoreError(AlertHubError):
    """Persistence failure (500) — internal detail never reaches the client."""

    def __init__(self, action: str):
        super().__init__(
            message=f"Failed to {action}",
            status_code=500,
            error_code="STORE_ERROR",
        )
        self.action = action


# ═══════════════════════════════════════════════════════════════════════════
# Error Response Builder
# ═══════════════════════════════════════════════════════════════════════════

def _build_error_response(
    status_code: int,
    error_code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    request: Optional[Request] = None,
    errors: Optional[List[Dict[str, Any]]] = None,
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: Dict[str, Any] = {
        "message": message,
        "code": error_code,
        "status": status_code,
    }

    if errors is not None:
        body["errors"] = errors

    if details:
        body["details"] = details

    # Include request path in non-production
    if request and not settings.is_production:
        body["path"] = str(request.url.path)
        body["method"] = request.method

    return JSONResponse(status_code=status_code, content=body)


# ═══════════════════════════════════════════════════════════════════════════
# FastAPI Exception Handlers
# ═══════════════════════════════════════════════════════════════════════════

_HTTP_ERROR_CODES = {
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.info("Validation failed: %s | errors=%s", exc.message, exc.errors)
        return _build_error_response(
            exc.status_code, exc.error_code, exc.message,
            request=request, errors=exc.errors,
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        converted = ValidationError.from_pydantic(exc.errors())
        return await handle_validation_error(request, converted)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        # Routing failures (unknown path, wrong method) raised by the framework
        response = _build_error_response(
            exc.status_code,
            _HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
            str(exc.detail),
            request=request,
        )
        response.headers.update(exc.headers or {})
        return response

    @app.exception_handler(AlertHubError)
    async def handle_app_error(request: Request, exc: AlertHubError):
        log = logger.error if exc.status_code >= 500 else logger.info
        log(
            "API Error [%s]: %s | details=%s",
            exc.error_code, exc.message, exc.details,
        )
        return _build_error_response(
            exc.status_code, exc.error_code, exc.message,
            exc.details, request,
        )

    @app.exception_handler(Exception)
    async def handle_unhandled(request: Request, exc: Exception):
        logger.critical(
            "Unhandled exception: %s\n%s",
            exc, traceback.format_exc(),
        )
        message = str(exc) if settings.DEBUG else "Internal server error"
        details = (
            {"traceback": traceback.format_exc().split("\n")}
            if settings.DEBUG else None
        )
        return _build_error_response(
            500, "INTERNAL_ERROR", message, details, request,
        )
