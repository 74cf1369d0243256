"""
Login operation.

Compares the submitted password with the stored one by plain equality
(constant-time via :func:`hmac.compare_digest`).  Passwords are stored in
plaintext; switching to salted hashes changes stored data and is not done
here.
"""

from __future__ import annotations

import hmac
from dataclasses import dataclass
from typing import Any

from pilothub.core.errors import ErrorCategory
from pilothub.core.logging import get_logger
from pilothub.ops.context import OperationContext
from pilothub.ops.result import OperationResult, start_timer

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LoginResult:
    success: bool
    user_id: int


def login(ctx: OperationContext, payload: Any) -> OperationResult[LoginResult]:
    """Check ``{"username", "password"}`` against the stored users.

    Failure codes:
        VALIDATION_FAILED  either credential missing or empty
        UNAUTHORIZED       unknown user, wrong password, or a non-string value
    """
    timer = start_timer()
    body = payload if isinstance(payload, dict) else {}
    username = body.get("username")
    password = body.get("password")

    if not username or not password:
        return OperationResult.fail(
            "VALIDATION_FAILED",
            "Username and password are required",
            category=ErrorCategory.VALIDATION,
            elapsed_ms=timer.elapsed_ms,
        )

    try:
        user = None
        if isinstance(username, str) and isinstance(password, str):
            user = ctx.store.users.get_by_username(username)
        if user is None or not hmac.compare_digest(user.password.encode(), password.encode()):
            logger.info("login.failed", username=username, request_id=ctx.request_id)
            return OperationResult.fail(
                "UNAUTHORIZED",
                "Invalid credentials",
                category=ErrorCategory.AUTH,
                elapsed_ms=timer.elapsed_ms,
            )
        logger.info("login.succeeded", user_id=user.id, request_id=ctx.request_id)
        return OperationResult.ok(LoginResult(success=True, user_id=user.id), elapsed_ms=timer.elapsed_ms)
    except Exception:
        logger.exception("op_failed", op="login")
        return OperationResult.fail("INTERNAL", "Login failed", elapsed_ms=timer.elapsed_ms)
