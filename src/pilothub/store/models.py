"""
Record types held by the in-memory store.

Three shapes per entity:

- the **record** (``TeamMember``): what the store owns and hands out;
- the **draft** (``TeamMemberDraft``): a validated create request, no id;
- the **patch** (``TeamMemberPatch``): a validated partial update where
  ``None`` means "leave this field alone".

Records are frozen; updates produce a new record via :meth:`Patch.apply`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from typing import Any


class Patch:
    """Mixin for patch dataclasses.

    Only fields that are present and non-null are merged; absent and null
    fields keep the record's current value.
    """

    def changes(self) -> dict[str, Any]:
        """Return ``{field: value}`` for every field this patch overwrites."""
        out: dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if value is None:
                continue
            out[f.name] = list(value) if isinstance(value, list) else value
        return out

    def is_empty(self) -> bool:
        return not self.changes()

    def apply[R](self, record: R, **extra: Any) -> R:
        """Return a copy of *record* with this patch (and *extra*) merged in."""
        return replace(record, **self.changes(), **extra)  # type: ignore[type-var]


# ------------------------------------------------------------------ #
# Page content
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class PageContent:
    """A named, versioned page document.

    ``content`` is an opaque string; the front end stores page-specific JSON
    in it.  ``last_updated`` and ``version`` are owned by the store.
    """

    page_name: str
    title: str
    content: str
    subtitle: str | None = None
    last_updated: datetime | None = None
    version: int = 1


@dataclass(frozen=True, slots=True)
class PageContentDraft:
    page_name: str
    title: str
    content: str
    subtitle: str | None = None


@dataclass(frozen=True, slots=True)
class PageContentPatch(Patch):
    title: str | None = None
    subtitle: str | None = None
    content: str | None = None


# ------------------------------------------------------------------ #
# Team members
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class TeamMember:
    id: int
    name: str
    role: str
    initials: str
    description: str | None = None
    skills: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class TeamMemberDraft:
    name: str
    role: str
    initials: str
    description: str | None = None
    skills: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class TeamMemberPatch(Patch):
    name: str | None = None
    role: str | None = None
    initials: str | None = None
    description: str | None = None
    skills: list[str] | None = None


# ------------------------------------------------------------------ #
# Sprints
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class Sprint:
    """A project sprint.

    ``status`` is free text ("Completed", "Planned", ...); consumers compare
    it case-insensitively.
    """

    id: int
    name: str
    date_range: str
    status: str
    subtitle: str | None = None
    deliverables: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class SprintDraft:
    name: str
    date_range: str
    status: str
    subtitle: str | None = None
    deliverables: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class SprintPatch(Patch):
    name: str | None = None
    date_range: str | None = None
    status: str | None = None
    subtitle: str | None = None
    deliverables: list[str] | None = None


# ------------------------------------------------------------------ #
# Quick navigation items
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class QuickNavItem:
    id: int
    name: str
    icon: str
    link: str


@dataclass(frozen=True, slots=True)
class QuickNavItemDraft:
    name: str
    icon: str
    link: str


@dataclass(frozen=True, slots=True)
class QuickNavItemPatch(Patch):
    name: str | None = None
    icon: str | None = None
    link: str | None = None


# ------------------------------------------------------------------ #
# Users
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class User:
    id: int
    username: str
    password: str


@dataclass(frozen=True, slots=True)
class UserDraft:
    username: str
    password: str


def record_from_draft[R](record_type: type[R], record_id: int, draft: Any) -> R:
    """Build an id-keyed record from its draft, copying list fields."""
    values = {f.name: getattr(draft, f.name) for f in fields(draft)}
    for key, value in values.items():
        if isinstance(value, list):
            values[key] = list(value)
    return record_type(id=record_id, **values)  # type: ignore[call-arg]


__all__ = [
    "PageContent",
    "PageContentDraft",
    "PageContentPatch",
    "Patch",
    "QuickNavItem",
    "QuickNavItemDraft",
    "QuickNavItemPatch",
    "Sprint",
    "SprintDraft",
    "SprintPatch",
    "TeamMember",
    "TeamMemberDraft",
    "TeamMemberPatch",
    "User",
    "UserDraft",
    "record_from_draft",
]
