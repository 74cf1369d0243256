"""
Operation result envelope.

Provides :class:`OperationResult`, the typed success/failure envelope every
operation function returns.  Callers branch on ``success``; failures carry
an :class:`OperationError` whose ``code`` the API layer maps to an HTTP
status (``NOT_FOUND`` → 404, ``VALIDATION_FAILED`` → 400, ...).
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any

from pilothub.core.errors import ErrorCategory, PilotHubError


@dataclass(frozen=True, slots=True)
class OperationError:
    """Structured error detail for failed operations.

    Attributes:
        code: Machine-readable code (``NOT_FOUND``, ``VALIDATION_FAILED``, ...).
        message: Human-readable description, safe to return to clients.
        category: Optional :class:`ErrorCategory` for logging.
        details: Field-level errors (``{"code", "message", "field"}`` dicts).
    """

    code: str
    message: str
    category: ErrorCategory | None = None
    details: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class OperationResult[T]:
    """Envelope returned by every operation function.

    Use :meth:`ok`, :meth:`fail` and :meth:`from_error` instead of the
    constructor.
    """

    success: bool
    data: T | None = None
    error: OperationError | None = None
    elapsed_ms: float = 0.0

    @classmethod
    def ok(cls, data: T, *, elapsed_ms: float = 0.0) -> OperationResult[T]:
        """Create a successful result."""
        return cls(success=True, data=data, elapsed_ms=elapsed_ms)

    @classmethod
    def fail(
        cls,
        code: str,
        message: str,
        *,
        category: ErrorCategory | None = None,
        details: list[dict[str, Any]] | None = None,
        elapsed_ms: float = 0.0,
    ) -> OperationResult[T]:
        """Create a failed result."""
        return cls(
            success=False,
            error=OperationError(
                code=code,
                message=message,
                category=category,
                details=details or [],
            ),
            elapsed_ms=elapsed_ms,
        )

    @classmethod
    def from_error(cls, exc: PilotHubError, *, elapsed_ms: float = 0.0) -> OperationResult[T]:
        """Create a failed result from a raised :class:`PilotHubError`."""
        return cls.fail(
            exc.code,
            exc.message,
            category=exc.category,
            details=getattr(exc, "errors", None),
            elapsed_ms=elapsed_ms,
        )


class _Timer:
    """Minimal stopwatch for timing operations."""

    __slots__ = ("_start",)

    def __init__(self) -> None:
        self._start = time.perf_counter()

    @property
    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self._start) * 1000


def start_timer() -> _Timer:
    """Return a lightweight timer.  Use ``timer.elapsed_ms`` when done."""
    return _Timer()
