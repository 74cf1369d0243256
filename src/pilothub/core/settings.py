"""Shared base settings.

``PilotHubBaseSettings`` holds the knobs every pilothub entry point needs
(bind address, debug, logging).  The API extends it in
:mod:`pilothub.api.settings`.

Values come from, highest precedence first:
    1. Constructor arguments (tests)
    2. Environment variables prefixed ``PILOTHUB_``
    3. A ``.env`` file in the working directory
    4. The defaults below
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PilotHubBaseSettings(BaseSettings):
    """Common settings shared by the API server and the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="PILOTHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Network ──────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 5000

    # ── Observability ────────────────────────────────────────────
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool | None = Field(
        default=None,
        description="Force JSON (true) or console (false) logs; auto-detect when unset",
    )
