"""
Request validation for create and partial-update payloads.

Each entity has a *create* model (required fields enforced) and a *patch*
model (every field optional, same type constraints when present).  Models
accept camelCase keys as sent by the front end (``pageName``,
``dateRange``) and snake_case for Python callers.  Unknown keys, including
server-owned ones such as ``id``, ``lastUpdated`` and ``version``, are
dropped.

:func:`validate_payload` is the single entry point; it never touches the
store and either returns a model or raises
:class:`~pilothub.core.errors.ValidationError` listing every violation.

Example::

    model = validate_payload(SprintCreate, {"name": "Sprint 7", ...})
    draft = model.to_draft()
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from pilothub.core.errors import ValidationError
from pilothub.store.models import (
    PageContentDraft,
    PageContentPatch,
    QuickNavItemDraft,
    QuickNavItemPatch,
    SprintDraft,
    SprintPatch,
    TeamMemberDraft,
    TeamMemberPatch,
)


class _Payload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ------------------------------------------------------------------ #
# Page content
# ------------------------------------------------------------------ #


class PageContentCreate(_Payload):
    page_name: str
    title: str
    subtitle: str | None = None
    content: str

    def to_draft(self) -> PageContentDraft:
        return PageContentDraft(
            page_name=self.page_name,
            title=self.title,
            subtitle=self.subtitle,
            content=self.content,
        )


class PageContentUpdate(_Payload):
    """Partial page update.  ``pageName`` is immutable and therefore ignored."""

    title: str | None = None
    subtitle: str | None = None
    content: str | None = None

    def to_patch(self) -> PageContentPatch:
        return PageContentPatch(title=self.title, subtitle=self.subtitle, content=self.content)


# ------------------------------------------------------------------ #
# Team members
# ------------------------------------------------------------------ #


class TeamMemberCreate(_Payload):
    name: str
    role: str
    description: str | None = None
    initials: str
    skills: list[str] | None = None

    def to_draft(self) -> TeamMemberDraft:
        return TeamMemberDraft(
            name=self.name,
            role=self.role,
            description=self.description,
            initials=self.initials,
            skills=list(self.skills or []),
        )


class TeamMemberUpdate(_Payload):
    name: str | None = None
    role: str | None = None
    description: str | None = None
    initials: str | None = None
    skills: list[str] | None = None

    def to_patch(self) -> TeamMemberPatch:
        return TeamMemberPatch(
            name=self.name,
            role=self.role,
            description=self.description,
            initials=self.initials,
            skills=self.skills,
        )


# ------------------------------------------------------------------ #
# Sprints
# ------------------------------------------------------------------ #


class SprintCreate(_Payload):
    name: str
    subtitle: str | None = None
    date_range: str
    status: str
    deliverables: list[str] | None = None

    def to_draft(self) -> SprintDraft:
        return SprintDraft(
            name=self.name,
            subtitle=self.subtitle,
            date_range=self.date_range,
            status=self.status,
            deliverables=list(self.deliverables or []),
        )


class SprintUpdate(_Payload):
    name: str | None = None
    subtitle: str | None = None
    date_range: str | None = None
    status: str | None = None
    deliverables: list[str] | None = None

    def to_patch(self) -> SprintPatch:
        return SprintPatch(
            name=self.name,
            subtitle=self.subtitle,
            date_range=self.date_range,
            status=self.status,
            deliverables=self.deliverables,
        )


# ------------------------------------------------------------------ #
# Quick navigation items
# ------------------------------------------------------------------ #


class QuickNavItemCreate(_Payload):
    name: str
    icon: str
    link: str

    def to_draft(self) -> QuickNavItemDraft:
        return QuickNavItemDraft(name=self.name, icon=self.icon, link=self.link)


class QuickNavItemUpdate(_Payload):
    name: str | None = None
    icon: str | None = None
    link: str | None = None

    def to_patch(self) -> QuickNavItemPatch:
        return QuickNavItemPatch(name=self.name, icon=self.icon, link=self.link)


# ------------------------------------------------------------------ #
# Validation entry point
# ------------------------------------------------------------------ #


def _field_path(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc)


def format_validation_error(exc: PydanticValidationError) -> ValidationError:
    """Collapse a pydantic error into one message naming every violation.

    The message reads ``Validation error: Field required at "name"; ...``;
    the structured list goes to ``ValidationError.errors``.
    """
    details: list[dict[str, Any]] = []
    parts: list[str] = []
    for err in exc.errors(include_url=False):
        path = _field_path(tuple(err.get("loc", ())))
        details.append({"code": err["type"], "message": err["msg"], "field": path or None})
        parts.append(f'{err["msg"]} at "{path}"' if path else err["msg"])
    return ValidationError(f"Validation error: {'; '.join(parts)}", errors=details, cause=exc)


def validate_payload[M: BaseModel](model: type[M], raw: Any) -> M:
    """Validate *raw* (decoded JSON) against *model*.

    Raises:
        ValidationError: listing every violated field and constraint.
    """
    try:
        return model.model_validate(raw)
    except PydanticValidationError as exc:
        raise format_validation_error(exc) from exc


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
