"""
API-specific settings.

Extends :class:`~pilothub.core.settings.PilotHubBaseSettings` with the
parameters that govern the REST transport (prefix, CORS, documents root,
startup seed data).  Every value can be overridden by a ``PILOTHUB_``
environment variable, e.g. ``PILOTHUB_DOCUMENTS_ROOT=/srv/pilothub``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field

from pilothub.core.settings import PilotHubBaseSettings


class PilotHubAPISettings(PilotHubBaseSettings):
    """Settings for the pilothub REST API."""

    # ── API ──────────────────────────────────────────────────────────────
    api_prefix: str = Field(default="/api", description="URL prefix for all endpoints")
    api_title: str = Field(default="pilothub API", description="OpenAPI title")
    api_version: str = Field(default="0.1.0", description="OpenAPI version string")

    # ── CORS ─────────────────────────────────────────────────────────────
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")

    # ── Request logging ──────────────────────────────────────────────────
    slow_request_ms: float = Field(default=500.0, description="Log requests slower than this at warning level")

    # ── Documents ────────────────────────────────────────────────────────
    documents_root: Path = Field(
        default_factory=Path.cwd,
        description="Directory holding attached_assets/ and public/",
    )

    # ── Seed data ────────────────────────────────────────────────────────
    seed_defaults: bool = Field(default=True, description="Load default pages and records at startup")
    admin_username: str = Field(default="admin", description="Username of the seeded admin user")
    admin_password: str = Field(default="admin123", description="Password of the seeded admin user")
