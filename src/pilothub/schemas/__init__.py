"""Validation layer: pydantic models for create/update payloads."""

from pilothub.schemas.records import (
    PageContentCreate,
    PageContentUpdate,
    QuickNavItemCreate,
    QuickNavItemUpdate,
    SprintCreate,
    SprintUpdate,
    TeamMemberCreate,
    TeamMemberUpdate,
    format_validation_error,
    validate_payload,
)

__all__ = [
    "PageContentCreate",
    "PageContentUpdate",
    "QuickNavItemCreate",
    "QuickNavItemUpdate",
    "SprintCreate",
    "SprintUpdate",
    "TeamMemberCreate",
    "TeamMemberUpdate",
    "format_validation_error",
    "validate_payload",
]
