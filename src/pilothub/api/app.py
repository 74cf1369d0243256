"""
FastAPI application factory.

``create_app()`` wires middleware, routers, error handlers, the record
store and lifespan events into a single ``FastAPI`` instance.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from pilothub.api.deps import get_settings
from pilothub.api.middleware.errors import request_validation_handler, unhandled_exception_handler
from pilothub.api.middleware.request_id import RequestIDMiddleware
from pilothub.api.middleware.timing import TimingMiddleware
from pilothub.api.settings import PilotHubAPISettings
from pilothub.store.memory import MemStore


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: configure logging, report what was loaded."""
    from pilothub.core.logging import configure_logging, get_logger

    settings: PilotHubAPISettings = app.state.settings
    configure_logging(level=settings.log_level, json_format=settings.log_json)

    log = get_logger("pilothub.api")
    log.info(
        "pilothub API starting",
        version=app.version,
        documents_root=str(settings.documents_root),
        **app.state.store.counts(),
    )
    yield
    log.info("pilothub API shutting down")


def create_app(
    *,
    settings: PilotHubAPISettings | None = None,
    store: MemStore | None = None,
) -> FastAPI:
    """Build and return a fully-configured FastAPI application.

    Parameters
    ----------
    settings : PilotHubAPISettings | None
        Override settings (useful for testing).  When ``None`` the cached
        singleton from :func:`get_settings` is used.
    store : MemStore | None
        Pre-built store.  When ``None`` a new one is created, loaded with
        the default data unless ``settings.seed_defaults`` is false.
    """

    settings = settings or get_settings()
    if store is None:
        if settings.seed_defaults:
            store = MemStore.with_defaults(
                admin_username=settings.admin_username,
                admin_password=settings.admin_password,
            )
        else:
            store = MemStore()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
        docs_url=f"{settings.api_prefix}/docs",
        redoc_url=f"{settings.api_prefix}/redoc",
        openapi_url=f"{settings.api_prefix}/openapi.json",
    )

    app.state.settings = settings
    app.state.store = store

    # Override DI so endpoints use the provided settings
    app.dependency_overrides[get_settings] = lambda: settings

    # ── Middleware (last added runs outermost) ────────────────────────
    app.add_middleware(TimingMiddleware, slow_ms=settings.slow_request_ms)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Exception handlers ───────────────────────────────────────────
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # ── Routers ──────────────────────────────────────────────────────
    from pilothub.api.routers import auth, documents, health, pages, records

    prefix = settings.api_prefix

    app.include_router(health.router, prefix=prefix, tags=["health"])
    app.include_router(pages.router, prefix=prefix, tags=["pages"])
    app.include_router(records.team_members_router, prefix=prefix, tags=["team-members"])
    app.include_router(records.sprints_router, prefix=prefix, tags=["sprints"])
    app.include_router(records.quick_nav_items_router, prefix=prefix, tags=["quick-nav-items"])
    app.include_router(auth.router, prefix=prefix, tags=["auth"])
    app.include_router(documents.router, prefix=prefix, tags=["documents"])

    return app
