"""
FastAPI dependency injection.

Usage in routers::

    from pilothub.api.deps import OpContext

    @router.get("/things")
    def list_things(ctx: OpContext):
        ...

The store is created once by :func:`pilothub.api.app.create_app` and kept
on ``app.state``; every request gets a fresh :class:`OperationContext`
pointing at it.
"""

from __future__ import annotations

import uuid
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from pilothub.api.settings import PilotHubAPISettings
from pilothub.ops.context import OperationContext
from pilothub.store.memory import MemStore


@lru_cache(maxsize=1)
def get_settings() -> PilotHubAPISettings:
    """Cached settings, loaded once per process."""
    return PilotHubAPISettings()


def get_store(request: Request) -> MemStore:
    """The store owned by the running application."""
    return request.app.state.store


def get_operation_context(
    request: Request,
    store: Annotated[MemStore, Depends(get_store)],
) -> OperationContext:
    """Build an :class:`OperationContext` from the current request."""
    request_id = getattr(request.state, "request_id", str(uuid.uuid4()))
    return OperationContext(store=store, request_id=request_id, caller="api")


Settings = Annotated[PilotHubAPISettings, Depends(get_settings)]
OpContext = Annotated[OperationContext, Depends(get_operation_context)]
