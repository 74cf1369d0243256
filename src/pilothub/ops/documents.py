"""
Static project documents.

A fixed registry maps URL slugs to files under the configured documents
root.  Resolution happens before any bytes are streamed, so a missing file
is reported as ``NOT_FOUND`` rather than a broken download.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pilothub.core.errors import ErrorCategory
from pilothub.core.logging import get_logger
from pilothub.ops.result import OperationResult, start_timer

logger = get_logger(__name__)

PDF = "application/pdf"
PPTX = "application/vnd.openxmlformats-officedocument.presentationml.presentation"

DOCUMENT_NOT_FOUND = "Document not found"


@dataclass(frozen=True, slots=True)
class DocumentSpec:
    """A servable document.

    Attributes:
        slug: URL segment under ``/documents``.
        relative_path: File location relative to the documents root.
        media_type: ``Content-Type`` sent with the file.
        filename: Name advertised in ``Content-Disposition``.
    """

    slug: str
    relative_path: str
    media_type: str
    filename: str


@dataclass(frozen=True, slots=True)
class ResolvedDocument:
    spec: DocumentSpec
    path: Path


@dataclass(frozen=True, slots=True)
class DocumentStatus:
    slug: str
    filename: str
    media_type: str
    available: bool


DOCUMENTS: dict[str, DocumentSpec] = {
    spec.slug: spec
    for spec in (
        DocumentSpec(
            "team-charter",
            "attached_assets/Capstone Team Charter Updated With Review Week 5-6 Edit Final With Changes.pdf",
            PDF,
            "team-charter.pdf",
        ),
        DocumentSpec(
            "status-report-week3-4",
            "attached_assets/Project Pilot Team Status Report for Client.pdf",
            PDF,
            "status-report-week3-4.pdf",
        ),
        DocumentSpec(
            "status-report-week5-6",
            "public/status-report-week5-6.pdf",
            PDF,
            "status-report-week5-6.pdf",
        ),
        DocumentSpec(
            "capstone-presentation",
            "public/PJM-6910-CapstoneScope.pptx",
            PPTX,
            "PJM-6910-Capstone-Project.pptx",
        ),
    )
}


def resolve_document(root: Path, slug: str) -> OperationResult[ResolvedDocument]:
    """Find the file for *slug* under *root*.

    Fails with ``NOT_FOUND`` for an unknown slug or a file that is absent.
    """
    timer = start_timer()
    spec = DOCUMENTS.get(slug)
    if spec is None:
        return OperationResult.fail(
            "NOT_FOUND", DOCUMENT_NOT_FOUND, category=ErrorCategory.STORAGE, elapsed_ms=timer.elapsed_ms
        )

    path = root / spec.relative_path
    if not path.is_file():
        logger.error("document.missing", slug=slug, path=str(path))
        return OperationResult.fail(
            "NOT_FOUND", DOCUMENT_NOT_FOUND, category=ErrorCategory.STORAGE, elapsed_ms=timer.elapsed_ms
        )

    logger.info("document.serving", slug=slug, path=str(path))
    return OperationResult.ok(ResolvedDocument(spec=spec, path=path), elapsed_ms=timer.elapsed_ms)


def list_documents(root: Path) -> OperationResult[list[DocumentStatus]]:
    """Every registered document with whether its file is present."""
    timer = start_timer()
    items = [
        DocumentStatus(
            slug=spec.slug,
            filename=spec.filename,
            media_type=spec.media_type,
            available=(root / spec.relative_path).is_file(),
        )
        for spec in DOCUMENTS.values()
    ]
    return OperationResult.ok(items, elapsed_ms=timer.elapsed_ms)
