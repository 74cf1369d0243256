"""API schemas package."""

from pilothub.api.schemas.common import ErrorDetail, ErrorResponse

__all__ = ["ErrorDetail", "ErrorResponse"]
