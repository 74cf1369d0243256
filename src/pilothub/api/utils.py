"""
Shared API router utilities.

- ``_dc()``: convert a store record (dataclass) to a camelCase wire dict
- ``_handle_error()``: convert a failed OperationResult to an error response
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import Any

from pydantic.alias_generators import to_camel

from pilothub.api.middleware.errors import error_response, status_for_error_code
from pilothub.core.timestamps import to_iso8601


def _dc(obj: Any) -> dict[str, Any]:
    """Convert a dataclass (or dict) to a dict with camelCase keys.

    Datetimes become ISO 8601 strings.

    Returns an empty dict for objects that are neither dataclasses nor dicts.
    """
    if hasattr(obj, "__dataclass_fields__"):
        obj = asdict(obj)
    if not isinstance(obj, dict):
        return {}
    return {
        to_camel(key): to_iso8601(value) if isinstance(value, datetime) else value for key, value in obj.items()
    }


def _handle_error(result):
    """Convert a failed ``OperationResult`` into an ``{"error": ...}`` response.

    The error code picks the HTTP status; field-level details are passed
    through for validation failures.
    """
    if result.error is None:
        return error_response(status=500, message="Operation failed")
    return error_response(
        status=status_for_error_code(result.error.code),
        message=result.error.message,
        errors=result.error.details,
    )
