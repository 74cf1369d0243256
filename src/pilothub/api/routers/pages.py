"""
Page content endpoints.

Endpoints
---------
``GET   /pages``             list every page
``GET   /pages/{pageName}``  fetch one page (404 if unknown; never auto-created)
``POST  /pages``             create a page at version 1
``PATCH /pages/{pageName}``  partial update, bumps ``version``

Pages cannot be deleted.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body

from pilothub.api.deps import OpContext
from pilothub.api.utils import _dc, _handle_error

router = APIRouter(prefix="/pages")


@router.get("")
def list_pages(ctx: OpContext):
    """List all pages."""
    from pilothub.ops.pages import list_pages as _list

    result = _list(ctx)
    if not result.success:
        return _handle_error(result)
    return [_dc(page) for page in result.data or []]


@router.get("/{page_name}")
def get_page(page_name: str, ctx: OpContext):
    """Fetch a page by name."""
    from pilothub.ops.pages import get_page as _get

    result = _get(ctx, page_name)
    if not result.success:
        return _handle_error(result)
    return _dc(result.data)


@router.post("", status_code=201)
def create_page(ctx: OpContext, payload: Annotated[Any, Body()] = None):
    """Create a page; an existing page with the same name is replaced."""
    from pilothub.ops.pages import create_page as _create

    result = _create(ctx, payload)
    if not result.success:
        return _handle_error(result)
    return _dc(result.data)


@router.patch("/{page_name}")
def update_page(page_name: str, ctx: OpContext, payload: Annotated[Any, Body()] = None):
    """Merge a partial update into a page."""
    from pilothub.ops.pages import update_page as _update

    result = _update(ctx, page_name, payload)
    if not result.success:
        return _handle_error(result)
    return _dc(result.data)
