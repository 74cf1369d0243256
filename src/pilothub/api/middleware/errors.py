"""
Error-handling middleware: maps ops-layer errors to ``{"error": ...}`` bodies.
"""

from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pilothub.api.schemas.common import ErrorDetail, ErrorResponse
from pilothub.core.logging import get_logger

logger = get_logger(__name__)

# ── Error code → HTTP status mapping ─────────────────────────────────────

ERROR_CODE_TO_STATUS: dict[str, int] = {
    "VALIDATION_FAILED": 400,
    "INVALID_INPUT": 400,
    "UNAUTHORIZED": 401,
    "NOT_FOUND": 404,
    "CONFLICT": 409,
    "INTERNAL": 500,
}


def status_for_error_code(code: str) -> int:
    """Resolve an ops error code to HTTP status, defaulting to 500."""
    return ERROR_CODE_TO_STATUS.get(code, 500)


def error_response(
    *,
    status: int,
    message: str,
    errors: list[dict[str, Any]] | None = None,
) -> JSONResponse:
    """Build the JSON error envelope.  ``errors`` is omitted when empty."""
    body = ErrorResponse(error=message, errors=[ErrorDetail(**e) for e in errors or []])
    content = body.model_dump()
    if not body.errors:
        del content["errors"]
    return JSONResponse(status_code=status, content=content)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report body-parsing failures (e.g. malformed JSON) as 400 validation errors."""
    details: list[dict[str, Any]] = []
    parts: list[str] = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        path = ".".join(loc)
        details.append({"code": err.get("type", "invalid"), "message": err.get("msg", ""), "field": path or None})
        parts.append(f'{err.get("msg", "")} at "{path}"' if path else err.get("msg", ""))
    return error_response(status=400, message=f"Validation error: {'; '.join(parts)}", errors=details)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions: 500 with a generic message."""
    logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
    return error_response(
        status=500,
        message=str(exc) if request.app.state.settings.debug else "An unexpected error occurred.",
    )
