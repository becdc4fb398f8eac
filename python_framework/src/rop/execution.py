"""
Execution contexts — separate WHAT (pure railway) from HOW (side effects).

  - Steps describe WHAT should happen → return Result[T, E]
  - ExecutionContext describes HOW it runs → logging, timing, transactions
  - They are never mixed: the composition core itself never logs

Usage:
    def handle(request: dict) -> Result[dict, dict]:
        return sequence(Success(request), [validate, update, notify])

    # Execute within a logging boundary
    result = handle(request).within(LoggingExecutionContext(operation="UpdateUser"))

    # Or using the decorator
    @with_context(LoggingExecutionContext(operation="UpdateUser"))
    def handle(request: dict) -> Result[dict, dict]:
        ...
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from rop.failure import ErrorCode, error_payload
from rop.result import Failure, Result

T = TypeVar("T")
E = TypeVar("E")
logger = logging.getLogger("rop.execution")


# ──────────────────────── Protocol (Interface) ────────────────────────


@runtime_checkable
class ExecutionContext(Protocol):
    """
    Protocol for execution contexts.

    Any class implementing execute(computation) satisfies this protocol
    via structural typing — no explicit inheritance needed.
    """

    def execute(self, computation: Callable[[], Result[T, E]]) -> Result[T, E]:
        """Execute a Result-returning computation within this context."""
        ...


# ──────────────────────── NoOp (Testing) ────────────────────────


class NoOpExecutionContext:
    """
    Passthrough execution context — runs the computation as is.

    Use for unit tests and for pure chains with nothing to wrap.
    """

    def execute(self, computation: Callable[[], Result[T, E]]) -> Result[T, E]:
        return computation()


# ──────────────────────── Logging ────────────────────────


class LoggingExecutionContext:
    """
    Execution context that logs entry, exit, duration, and final track.

    Wraps another context (decorator pattern) to add observability.
    An exception escaping the computation is logged and turned into a
    TECHNICAL_ERROR failure, so callers always get a Result back.

        ctx = LoggingExecutionContext(operation="UpdateUser")
    """

    def __init__(
        self,
        inner: ExecutionContext | None = None,
        operation: str = "unknown",
        log_level: int = logging.INFO,
    ) -> None:
        self._inner = inner or NoOpExecutionContext()
        self._operation = operation
        self._log_level = log_level

    def execute(self, computation: Callable[[], Result[T, E]]) -> Result[T, Any]:
        logger.log(self._log_level, "[%s] Starting execution", self._operation)
        start = time.monotonic()

        try:
            result = self._inner.execute(computation)
        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "[%s] Execution failed after %.3fs: %s",
                self._operation,
                elapsed,
                e,
            )
            return Failure(
                error_payload(f"Execution failed: {e}", ErrorCode.TECHNICAL_ERROR)
            )

        elapsed = time.monotonic() - start
        state = "SUCCESS" if result.is_success() else "FAILURE"
        logger.log(
            self._log_level,
            "[%s] Completed in %.3fs: %s",
            self._operation,
            elapsed,
            state,
        )
        return result


# ──────────────────────── Composable ────────────────────────


class ComposableExecutionContext:
    """
    Compose multiple execution contexts into a single one.

    The first context is the outermost:

        composed = ComposableExecutionContext(
            LoggingExecutionContext(operation="UpdateUser"),
            timing_context,
        )
        # Logging wraps timing wraps computation
    """

    def __init__(self, *contexts: ExecutionContext) -> None:
        if not contexts:
            raise ValueError("At least one execution context is required")
        self._contexts = list(contexts)

    def execute(self, computation: Callable[[], Result[T, E]]) -> Result[T, E]:
        wrapped = computation
        for ctx in reversed(self._contexts):
            prev = wrapped
            wrapped = lambda _ctx=ctx, _prev=prev: _ctx.execute(_prev)
        return wrapped()


# ──────────────────────── Decorator Helper ────────────────────────


def with_context(ctx: ExecutionContext) -> Callable:
    """
    Decorator to run a Result-returning function inside an execution context.

        @with_context(LoggingExecutionContext(operation="UpdateUser"))
        def handle(request: dict) -> Result[dict, dict]:
            return sequence(Success(request), steps)

    Equivalent to:
        def handle(request):
            return sequence(Success(request), steps).within(ctx)
    """

    def decorator(fn: Callable[..., Result[T, E]]) -> Callable[..., Result[T, E]]:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Result[T, E]:
            return ctx.execute(lambda: fn(*args, **kwargs))
        return wrapper
    return decorator
