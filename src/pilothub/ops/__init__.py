"""
Operations layer.

Transport-agnostic functions that the API routers (and tests) call.  Each
takes an :class:`~pilothub.ops.context.OperationContext` and returns an
:class:`~pilothub.ops.result.OperationResult`; none of them raise for
expected failures.
"""

from pilothub.ops.context import OperationContext
from pilothub.ops.result import OperationError, OperationResult

__all__ = ["OperationContext", "OperationError", "OperationResult"]
