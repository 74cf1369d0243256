"""Login endpoint: ``POST /login``."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body

from pilothub.api.deps import OpContext
from pilothub.api.utils import _handle_error

router = APIRouter()


@router.post("/login")
def login(ctx: OpContext, payload: Annotated[Any, Body()] = None):
    """Check credentials; ``{"success": true, "userId": n}`` on success."""
    from pilothub.ops.auth import login as _login

    result = _login(ctx, payload)
    if not result.success:
        return _handle_error(result)
    return {"success": result.data.success, "userId": result.data.user_id}
