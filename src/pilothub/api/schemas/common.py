"""
Common API schemas: the error envelope.

Every non-2xx response body is an :class:`ErrorResponse`::

    {"error": "Page not found"}

Validation failures add one :class:`ErrorDetail` per violated field::

    {
        "error": "Validation error: Field required at \\"name\\"; ...",
        "errors": [{"code": "missing", "message": "Field required", "field": "name"}]
    }
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Structured error detail for a single field."""

    code: str = Field(description="Machine-readable error code (e.g. 'missing', 'string_type')")
    message: str = Field(description="Human-readable error description")
    field: str | None = Field(default=None, description="Field path if error is field-specific")


class ErrorResponse(BaseModel):
    """Canonical error envelope for all non-2xx responses."""

    error: str = Field(description="Human-readable error summary")
    errors: list[ErrorDetail] = Field(
        default_factory=list,
        description="Field-level validation errors (omitted when empty)",
    )
