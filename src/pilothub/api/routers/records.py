"""
Id-keyed collection endpoints.

Team members, sprints and quick-navigation items expose the same five
routes, so one factory builds a router per collection:

``GET    /{path}``       list
``GET    /{path}/{id}``  fetch (400 ``Invalid ID``, 404 ``<Label> not found``)
``POST   /{path}``       create, 201
``PATCH  /{path}/{id}``  partial update
``DELETE /{path}/{id}``  remove, 204 with an empty body

Ids are taken as raw strings and parsed by the ops layer so that
non-numeric ids produce the ``Invalid ID`` body rather than a framework
validation error.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Response

from pilothub.api.deps import OpContext
from pilothub.api.utils import _dc, _handle_error
from pilothub.ops import records as ops
from pilothub.ops.records import QUICK_NAV_ITEMS, SPRINTS, TEAM_MEMBERS, RecordKind


def create_record_router(kind: RecordKind, path: str) -> APIRouter:
    """Build the CRUD router for *kind* mounted at ``/{path}``."""
    router = APIRouter(prefix=f"/{path}")

    @router.get("")
    def list_items(ctx: OpContext):
        result = ops.list_records(ctx, kind)
        if not result.success:
            return _handle_error(result)
        return [_dc(item) for item in result.data or []]

    @router.get("/{record_id}")
    def get_item(record_id: str, ctx: OpContext):
        result = ops.get_record(ctx, kind, record_id)
        if not result.success:
            return _handle_error(result)
        return _dc(result.data)

    @router.post("", status_code=201)
    def create_item(ctx: OpContext, payload: Annotated[Any, Body()] = None):
        result = ops.create_record(ctx, kind, payload)
        if not result.success:
            return _handle_error(result)
        return _dc(result.data)

    @router.patch("/{record_id}")
    def update_item(record_id: str, ctx: OpContext, payload: Annotated[Any, Body()] = None):
        result = ops.update_record(ctx, kind, record_id, payload)
        if not result.success:
            return _handle_error(result)
        return _dc(result.data)

    @router.delete("/{record_id}", status_code=204)
    def delete_item(record_id: str, ctx: OpContext):
        result = ops.delete_record(ctx, kind, record_id)
        if not result.success:
            return _handle_error(result)
        return Response(status_code=204)

    return router


team_members_router = create_record_router(TEAM_MEMBERS, "team-members")
sprints_router = create_record_router(SPRINTS, "sprints")
quick_nav_items_router = create_record_router(QUICK_NAV_ITEMS, "quick-nav-items")
