"""
Structured error types for pilothub.

Every error raised by pilothub code derives from :class:`PilotHubError` and
carries a :class:`ErrorCategory` plus a machine-readable ``code`` that the
operations layer maps onto its result envelope (and the API layer onto an
HTTP status).

Hierarchy::

    PilotHubError (INTERNAL)
    ├── ValidationError         VALIDATION_FAILED   payload rejected, per-field errors
    ├── InvalidIdentifierError  INVALID_INPUT       non-numeric record id
    └── ClientError             (server status)     raised by pilothub.client

Usage:
    from pilothub.core.errors import ValidationError

    raise ValidationError(
        'Validation error: Field required at "name"',
        errors=[{"code": "missing", "message": "Field required", "field": "name"}],
    )
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and logging."""

    VALIDATION = "VALIDATION"  # Malformed or missing payload fields
    AUTH = "AUTH"  # Login failures
    STORAGE = "STORAGE"  # Document files on disk
    NETWORK = "NETWORK"  # Client-side HTTP failures
    INTERNAL = "INTERNAL"  # Bugs, unexpected state


class PilotHubError(Exception):
    """Base exception for all pilothub errors.

    Subclasses set ``default_category`` and ``default_code``; both can be
    overridden per instance.

    Args:
        message: Human-readable description.
        category: Override of the class default category.
        code: Override of the class default machine-readable code.
        cause: Underlying exception, kept for chaining.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_code: str = "INTERNAL"

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        code: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.code = code or self.default_code
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Serialise for logging / JSON responses."""
        result: dict[str, Any] = {
            "error_type": type(self).__name__,
            "message": self.message,
            "category": self.category.value,
            "code": self.code,
        }
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code!r})"


class ValidationError(PilotHubError):
    """A request payload failed schema validation.

    ``errors`` holds one ``{"code", "message", "field"}`` dict per violated
    constraint, in the order the validator reported them.
    """

    default_category = ErrorCategory.VALIDATION
    default_code = "VALIDATION_FAILED"

    def __init__(self, message: str, *, errors: list[dict[str, Any]] | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.errors = errors or []

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["errors"] = self.errors
        return result


class InvalidIdentifierError(PilotHubError):
    """A path identifier that should be an integer could not be parsed."""

    default_category = ErrorCategory.VALIDATION
    default_code = "INVALID_INPUT"

    def __init__(self, raw: str, **kwargs: Any) -> None:
        super().__init__("Invalid ID", **kwargs)
        self.raw = raw


class ConflictError(PilotHubError):
    """A create would violate a uniqueness rule (e.g. a taken username)."""

    default_category = ErrorCategory.VALIDATION
    default_code = "CONFLICT"


class ClientError(PilotHubError):
    """A client call failed.

    ``status_code`` is the HTTP status for non-2xx answers and ``None`` when
    the response arrived but its payload could not be used.
    """

    default_category = ErrorCategory.NETWORK
    default_code = "CLIENT_ERROR"

    def __init__(self, message: str, *, status_code: int | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["status_code"] = self.status_code
        return result
