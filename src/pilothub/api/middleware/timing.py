"""Timing middleware: adds ``X-Process-Time-Ms`` and logs each request.

Requests slower than ``slow_ms`` are logged at warning level.
"""

from __future__ import annotations

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from pilothub.core.logging import get_logger

logger = get_logger(__name__)


class TimingMiddleware(BaseHTTPMiddleware):
    """Measure and expose request processing time in milliseconds."""

    def __init__(self, app: ASGIApp, slow_ms: float = 500.0) -> None:
        super().__init__(app)
        self.slow_ms = slow_ms

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
        response.headers["X-Process-Time-Ms"] = str(elapsed_ms)

        log = logger.warning if elapsed_ms >= self.slow_ms else logger.debug
        log(
            "request.completed",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            elapsed_ms=elapsed_ms,
        )
        return response
