"""
Request-scoped context for operations.

Every operation function receives an :class:`OperationContext` as its first
argument.  The context carries the store the operation reads and writes,
plus caller identity for logging.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

from pilothub.store.memory import MemStore


@dataclass
class OperationContext:
    """Context passed to every operation function.

    Attributes:
        store: The process-scoped :class:`MemStore`.
        request_id: Unique ID for this invocation (auto-generated).
        caller: Origin of the request: ``"api"``, ``"cli"`` or ``"test"``.
        metadata: Arbitrary key/value pairs forwarded to logging.
    """

    store: MemStore
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    caller: str = "sdk"
    metadata: dict[str, Any] = field(default_factory=dict)
