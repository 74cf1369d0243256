"""
Page content operations.

Pages are keyed by name rather than id, are versioned, and cannot be
deleted.  ``version`` goes up by exactly one per successful update and
``last_updated`` is always stamped by the store.
"""

from __future__ import annotations

from typing import Any

from pilothub.core.errors import PilotHubError
from pilothub.core.logging import get_logger
from pilothub.ops.context import OperationContext
from pilothub.ops.result import OperationResult, start_timer
from pilothub.schemas.records import PageContentCreate, PageContentUpdate, validate_payload
from pilothub.store.models import PageContent

logger = get_logger(__name__)

PAGE_NOT_FOUND = "Page not found"


def list_pages(ctx: OperationContext) -> OperationResult[list[PageContent]]:
    timer = start_timer()
    try:
        return OperationResult.ok(ctx.store.pages.list(), elapsed_ms=timer.elapsed_ms)
    except Exception:
        logger.exception("op_failed", op="list_pages")
        return OperationResult.fail("INTERNAL", "Failed to fetch pages", elapsed_ms=timer.elapsed_ms)


def get_page(ctx: OperationContext, page_name: str) -> OperationResult[PageContent]:
    """Look up a page by name.  Unknown names are not auto-created."""
    timer = start_timer()
    try:
        page = ctx.store.pages.get(page_name)
        if page is None:
            return OperationResult.fail("NOT_FOUND", PAGE_NOT_FOUND, elapsed_ms=timer.elapsed_ms)
        return OperationResult.ok(page, elapsed_ms=timer.elapsed_ms)
    except Exception:
        logger.exception("op_failed", op="get_page", page_name=page_name)
        return OperationResult.fail("INTERNAL", "Failed to fetch page", elapsed_ms=timer.elapsed_ms)


def create_page(ctx: OperationContext, payload: Any) -> OperationResult[PageContent]:
    """Create a page at version 1.  A page with the same name is replaced."""
    timer = start_timer()
    try:
        draft = validate_payload(PageContentCreate, payload).to_draft()
        page = ctx.store.pages.create(draft)
        logger.info("page.created", page_name=page.page_name, request_id=ctx.request_id)
        return OperationResult.ok(page, elapsed_ms=timer.elapsed_ms)
    except PilotHubError as exc:
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)
    except Exception:
        logger.exception("op_failed", op="create_page")
        return OperationResult.fail("INTERNAL", "Failed to create page", elapsed_ms=timer.elapsed_ms)


def update_page(ctx: OperationContext, page_name: str, payload: Any) -> OperationResult[PageContent]:
    """Apply a partial update and bump the page version."""
    timer = start_timer()
    try:
        patch = validate_payload(PageContentUpdate, {} if payload is None else payload).to_patch()
        page = ctx.store.pages.update(page_name, patch)
        if page is None:
            return OperationResult.fail("NOT_FOUND", PAGE_NOT_FOUND, elapsed_ms=timer.elapsed_ms)
        logger.info(
            "page.updated",
            page_name=page_name,
            version=page.version,
            fields=sorted(patch.changes()),
            request_id=ctx.request_id,
        )
        return OperationResult.ok(page, elapsed_ms=timer.elapsed_ms)
    except PilotHubError as exc:
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)
    except Exception:
        logger.exception("op_failed", op="update_page", page_name=page_name)
        return OperationResult.fail("INTERNAL", "Failed to update page", elapsed_ms=timer.elapsed_ms)
