"""
CRUD operations for the id-keyed collections.

Team members, sprints and quick-navigation items share one lifecycle
(create, partial update, delete), so the operations are written once and
parameterised by a :class:`RecordKind` describing the collection.

Every function returns an :class:`OperationResult`; failure codes are:

    INVALID_INPUT      the path id is not an integer
    VALIDATION_FAILED  the body failed schema validation
    NOT_FOUND          no record with that id
    INTERNAL           anything unexpected (logged, generic message)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from pilothub.core.errors import InvalidIdentifierError, PilotHubError
from pilothub.core.logging import get_logger
from pilothub.ops.context import OperationContext
from pilothub.ops.result import OperationResult, start_timer
from pilothub.schemas.records import (
    QuickNavItemCreate,
    QuickNavItemUpdate,
    SprintCreate,
    SprintUpdate,
    TeamMemberCreate,
    TeamMemberUpdate,
    validate_payload,
)
from pilothub.store.memory import RecordCollection

logger = get_logger(__name__)

_RECORD_ID = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class RecordKind:
    """Describes one id-keyed collection.

    Attributes:
        attr: Attribute name of the collection on :class:`MemStore`.
        label: Singular label used in error messages ("Sprint").
        plural: Plural used in generic failure messages ("sprints").
        create_model: Pydantic model validating create payloads.
        update_model: Pydantic model validating partial updates.
    """

    attr: str
    label: str
    plural: str
    create_model: type[BaseModel]
    update_model: type[BaseModel]

    def collection(self, ctx: OperationContext) -> RecordCollection[Any]:
        return getattr(ctx.store, self.attr)

    @property
    def not_found(self) -> str:
        return f"{self.label} not found"


TEAM_MEMBERS = RecordKind(
    attr="team_members",
    label="Team member",
    plural="team members",
    create_model=TeamMemberCreate,
    update_model=TeamMemberUpdate,
)

SPRINTS = RecordKind(
    attr="sprints",
    label="Sprint",
    plural="sprints",
    create_model=SprintCreate,
    update_model=SprintUpdate,
)

QUICK_NAV_ITEMS = RecordKind(
    attr="quick_nav_items",
    label="Quick navigation item",
    plural="quick navigation items",
    create_model=QuickNavItemCreate,
    update_model=QuickNavItemUpdate,
)


def parse_record_id(raw: str) -> int:
    """Parse a path segment into a record id.

    The whole segment must be a base-10 integer (``"12abc"`` is rejected).

    Raises:
        InvalidIdentifierError: if *raw* is not an integer.
    """
    if not _RECORD_ID.fullmatch(raw):
        raise InvalidIdentifierError(raw)
    return int(raw)


def list_records(ctx: OperationContext, kind: RecordKind) -> OperationResult[list[Any]]:
    """Return every record in the collection, in insertion order."""
    timer = start_timer()
    try:
        items = kind.collection(ctx).list()
        return OperationResult.ok(items, elapsed_ms=timer.elapsed_ms)
    except Exception:
        logger.exception("op_failed", op="list", kind=kind.attr)
        return OperationResult.fail("INTERNAL", f"Failed to fetch {kind.plural}", elapsed_ms=timer.elapsed_ms)


def get_record(ctx: OperationContext, kind: RecordKind, raw_id: str) -> OperationResult[Any]:
    """Fetch a single record by its (unparsed) path id."""
    timer = start_timer()
    try:
        record_id = parse_record_id(raw_id)
        record = kind.collection(ctx).get(record_id)
        if record is None:
            return OperationResult.fail("NOT_FOUND", kind.not_found, elapsed_ms=timer.elapsed_ms)
        return OperationResult.ok(record, elapsed_ms=timer.elapsed_ms)
    except PilotHubError as exc:
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)
    except Exception:
        logger.exception("op_failed", op="get", kind=kind.attr)
        return OperationResult.fail(
            "INTERNAL", f"Failed to fetch {kind.label.lower()}", elapsed_ms=timer.elapsed_ms
        )


def create_record(ctx: OperationContext, kind: RecordKind, payload: Any) -> OperationResult[Any]:
    """Validate *payload* and insert a new record with the next id."""
    timer = start_timer()
    try:
        draft = validate_payload(kind.create_model, payload).to_draft()  # type: ignore[attr-defined]
        record = kind.collection(ctx).create(draft)
        logger.info("record.created", kind=kind.attr, id=record.id, request_id=ctx.request_id)
        return OperationResult.ok(record, elapsed_ms=timer.elapsed_ms)
    except PilotHubError as exc:
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)
    except Exception:
        logger.exception("op_failed", op="create", kind=kind.attr)
        return OperationResult.fail(
            "INTERNAL", f"Failed to create {kind.label.lower()}", elapsed_ms=timer.elapsed_ms
        )


def update_record(ctx: OperationContext, kind: RecordKind, raw_id: str, payload: Any) -> OperationResult[Any]:
    """Merge a partial update onto an existing record.

    Fields absent from (or null in) *payload* keep their current values; a
    missing body counts as an empty update.
    An unknown id yields ``NOT_FOUND`` and never creates a record.
    """
    timer = start_timer()
    try:
        record_id = parse_record_id(raw_id)
        patch = validate_payload(kind.update_model, {} if payload is None else payload).to_patch()  # type: ignore[attr-defined]
        record = kind.collection(ctx).update(record_id, patch)
        if record is None:
            return OperationResult.fail("NOT_FOUND", kind.not_found, elapsed_ms=timer.elapsed_ms)
        logger.info(
            "record.updated",
            kind=kind.attr,
            id=record_id,
            fields=sorted(patch.changes()),
            request_id=ctx.request_id,
        )
        return OperationResult.ok(record, elapsed_ms=timer.elapsed_ms)
    except PilotHubError as exc:
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)
    except Exception:
        logger.exception("op_failed", op="update", kind=kind.attr)
        return OperationResult.fail(
            "INTERNAL", f"Failed to update {kind.label.lower()}", elapsed_ms=timer.elapsed_ms
        )


def delete_record(ctx: OperationContext, kind: RecordKind, raw_id: str) -> OperationResult[int]:
    """Remove a record; ``NOT_FOUND`` if it does not exist (including a second delete)."""
    timer = start_timer()
    try:
        record_id = parse_record_id(raw_id)
        if not kind.collection(ctx).delete(record_id):
            return OperationResult.fail("NOT_FOUND", kind.not_found, elapsed_ms=timer.elapsed_ms)
        logger.info("record.deleted", kind=kind.attr, id=record_id, request_id=ctx.request_id)
        return OperationResult.ok(record_id, elapsed_ms=timer.elapsed_ms)
    except PilotHubError as exc:
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)
    except Exception:
        logger.exception("op_failed", op="delete", kind=kind.attr)
        return OperationResult.fail(
            "INTERNAL", f"Failed to delete {kind.label.lower()}", elapsed_ms=timer.elapsed_ms
        )
