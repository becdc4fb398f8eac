"""
Railway-Oriented Programming (ROP) for Python.

Explicit, composable error handling: steps return a Result instead of
raising, and bind threads a value through them, bypassing every step
after the first failure.

    from rop import Failure, Success, sequence

    def name_not_blank(user: dict) -> Result[dict, dict]:
        if not user["name"].strip():
            return Failure({"error": "Name must not be blank"})
        return Success(user)

    result = sequence(Success({"name": "Alice", "email": "a@b.com"}), [name_not_blank])
"""

from rop.result import Result, Success, Failure
from rop.composition import adapt, bind, pipeline, sequence, sequence_async, switch, tee
from rop.failure import ErrorCode, error_payload, from_exception, message_of
from rop.execution import (
    ExecutionContext,
    NoOpExecutionContext,
    LoggingExecutionContext,
    ComposableExecutionContext,
    with_context,
)
from rop.assertions import ResultAssertions

__all__ = [
    "Result",
    "Success",
    "Failure",
    "bind",
    "adapt",
    "sequence",
    "sequence_async",
    "pipeline",
    "switch",
    "tee",
    "ErrorCode",
    "error_payload",
    "from_exception",
    "message_of",
    "ExecutionContext",
    "NoOpExecutionContext",
    "LoggingExecutionContext",
    "ComposableExecutionContext",
    "with_context",
    "ResultAssertions",
]

__version__ = "1.0.0"
