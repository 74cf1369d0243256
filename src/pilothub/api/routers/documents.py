"""
Static document endpoints.

``GET /documents``         registry listing with an ``available`` flag
``GET /documents/{slug}``  stream the file inline (404 before streaming if absent)
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import FileResponse

from pilothub.api.deps import Settings
from pilothub.api.utils import _dc, _handle_error

router = APIRouter(prefix="/documents")


@router.get("")
def list_documents(settings: Settings):
    """List registered documents."""
    from pilothub.ops.documents import list_documents as _list

    result = _list(settings.documents_root)
    if not result.success:
        return _handle_error(result)
    return [_dc(doc) for doc in result.data or []]


@router.get("/{slug}")
def get_document(slug: str, settings: Settings):
    """Serve a registered document for in-browser viewing."""
    from pilothub.ops.documents import resolve_document

    result = resolve_document(settings.documents_root, slug)
    if not result.success:
        return _handle_error(result)
    doc = result.data
    return FileResponse(
        doc.path,
        media_type=doc.spec.media_type,
        filename=doc.spec.filename,
        content_disposition_type="inline",
    )
