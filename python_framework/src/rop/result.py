"""
Result type — the two tracks of Railway-Oriented Programming.

A Result[T, E] is either Success(value: T) or Failure(error: E).
Steps return a Result instead of raising. Once a step switches the flow
onto the failure track, every following .flat_map() is bypassed and the
first failure survives to the end of the chain unaltered.

    ┌───────────┐   flat_map    ┌───────────┐   flat_map    ┌──────────┐
    │ validate  │──Success──────│  update   │──Success──────│  notify  │──→ Result[T, E]
    │           │               │           │               │          │
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Failure                   │ Failure                   │ Failure
          └───────────────────────────┴───────────────────────────┴──→ Result[T, E]

The error type E is a free parameter. The usual convention is a mapping
with an "error" message field (see rop.failure), but any value is accepted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Awaitable,
    Callable,
    Generic,
    List,
    Optional,
    TypeVar,
)

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")
A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")


class Result(Generic[T, E]):
    """
    Railway-Oriented Programming Result.

    Two possible states:
      - Success(value: T) — the happy path
      - Failure(error: E) — the error track

    All transformations short-circuit on failure, so you only write
    the success path and errors propagate automatically.

    Usage:
        >>> Result.success(42).map(lambda x: x * 2).value()
        84

        >>> Result.failure({"error": "bad input"}).map(lambda x: x * 2).is_failure()
        True
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Result is a Success."""
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        """Check if this Result is a Failure."""
        return isinstance(self, Failure)

    def extract(self) -> T | E:
        """
        Return the wrapped value, whichever track it is on.

        Meant for the boundary, once both tracks have been mapped into the
        same shape (e.g. a response body), or once the caller has already
        decided how to read success vs. failure.
        """
        match self:
            case Success(v):
                return v
            case Failure(err):
                return err
        raise TypeError("unreachable")  # pragma: no cover

    def value(self) -> T:
        """
        Extract the success value. Raises ValueError if called on a Failure.

        Prefer .either() or match/case for safe access.
        """
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise ValueError(f"Cannot get value from a Failure: {err!r}")
        raise TypeError("unreachable")  # pragma: no cover

    def error(self) -> E:
        """
        Extract the failure payload. Raises ValueError if called on a Success.

        Prefer .either() or match/case for safe access.
        """
        match self:
            case Failure(err):
                return err
            case Success(v):
                raise ValueError(f"Cannot get error from a Success: {v!r}")
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Core Transformations ────────────────────────

    def either(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[E], R],
    ) -> R:
        """
        Apply one of two functions depending on the track.

            result.either(
                on_success=lambda user: f"Hello {user['name']}",
                on_failure=lambda err: f"Error: {err['error']}",
            )
        """
        match self:
            case Success(v):
                return on_success(v)
            case Failure(err):
                return on_failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map(self, mapper: Callable[[T], U]) -> Result[U, E]:
        """
        Transform the success value with a one-track function.

            Result.success(5).map(lambda x: x * 2)        # → Success(10)
            Result.failure(err).map(lambda x: x * 2)      # → same Failure
        """
        match self:
            case Success(v):
                return Success(mapper(v))
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map_failure(self, mapper: Callable[[E], F]) -> Result[T, F]:
        """Transform the failure payload. Passes success through unchanged."""
        match self:
            case Success(v):
                return Success(v)
            case Failure(err):
                return Failure(mapper(err))
        raise TypeError("unreachable")  # pragma: no cover

    def flat_map(self, step: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Chain a Result-returning step. Short-circuits on failure.

        This is bind, the operator that connects railway segments: on the
        failure track the step is never invoked and the same Failure is
        returned; on the success track the step's own Result is returned.

            def positive(x: int) -> Result[int, dict]:
                if x > 0:
                    return Result.success(x)
                return Result.failure({"error": "Must be positive"})

            Result.success(5).flat_map(positive)    # → Success(5)
            Result.success(-1).flat_map(positive)   # → Failure({'error': ...})
        """
        match self:
            case Success(v):
                return step(v)
            case Failure(_):
                return self  # type: ignore[return-value]
        raise TypeError("unreachable")  # pragma: no cover

    bind = flat_map

    def __rshift__(self, step: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Pipe operator: `result >> step1 >> step2` reads like Haskell's >>=."""
        return self.flat_map(step)

    def ensure(self, predicate: Callable[[T], bool], error: E) -> Result[T, E]:
        """
        Validate the success value against a condition.
        Short-circuits on an existing failure.

            Result.success(user).ensure(
                lambda u: u["email"].strip() != "",
                {"error": "Email must not be blank"},
            )
        """
        return self.flat_map(
            lambda v: Success(v) if predicate(v) else Failure(error)
        )

    # ──────────────────────── Side Effects ────────────────────────

    def peek(self, action: Callable[[T], Any]) -> Result[T, E]:
        """
        Execute a side effect on the success value without altering the Result.

            result.peek(lambda user: log.info("user.valid", email=user["email"]))
        """
        match self:
            case Success(v):
                action(v)
        return self

    def peek_failure(self, action: Callable[[E], Any]) -> Result[T, E]:
        """Execute a side effect on the failure payload without altering the Result."""
        match self:
            case Failure(err):
                action(err)
        return self

    # ──────────────────────── Recovery ────────────────────────

    def recover(self, recovery_fn: Callable[[E], T]) -> Result[T, E]:
        """
        Switch back to the success track by producing a value from the failure.

        The only way back from the failure track, and it is always explicit.
        """
        match self:
            case Success(_):
                return self
            case Failure(err):
                return Success(recovery_fn(err))
        raise TypeError("unreachable")  # pragma: no cover

    def get_or_else(self, default: T) -> T:
        """Extract value or return a default on failure."""
        match self:
            case Success(v):
                return v
            case _:
                return default

    def get_or_else_get(self, fallback: Callable[[E], T]) -> T:
        """Extract value or compute a default from the failure."""
        return self.either(lambda v: v, fallback)

    # ──────────────────────── Execution Context ────────────────────────

    def within(self, execution_context: Any) -> Result[T, E]:
        """
        Hand this Result to an execution context (logging, transactions, ...).

            result = sequence(Success(request), steps).within(logging_context)
        """
        return execution_context.execute(lambda: self)

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: T) -> Result[T, Any]:
        """Create a successful Result wrapping the given value."""
        return Success(value)

    @staticmethod
    def failure(error: E) -> Result[Any, E]:
        """Create a failed Result wrapping the given error payload."""
        return Failure(error)

    @staticmethod
    def from_computation(
        computation: Callable[[], T],
        on_error: Callable[[Exception], E],
    ) -> Result[T, E]:
        """
        Create a Result from a computation that may raise.

        The exception never escapes: on_error turns it into the failure payload.

            return Result.from_computation(
                lambda: store.save(user),
                lambda exc: from_exception("Failed to update user", exc),
            )
        """
        try:
            return Success(computation())
        except Exception as e:
            return Failure(on_error(e))

    @staticmethod
    def from_optional(value: Optional[T], error: E) -> Result[T, E]:
        """
        Create a Result from an Optional value: None switches to failure.

            Result.from_optional(users.get(email), {"error": "User not found"})
        """
        if value is not None:
            return Success(value)
        return Failure(error)

    @staticmethod
    def combine(
        ra: Result[A, E],
        rb: Result[B, E],
        combiner: Callable[[A, B], R],
    ) -> Result[R, E]:
        """Combine two Results. Both must succeed; the first failure wins."""
        return ra.flat_map(lambda a: rb.map(lambda b: combiner(a, b)))

    @staticmethod
    def all_of(results: List[Result[T, E]]) -> Result[List[T], E]:
        """
        Collect a list of Results into a Result of list.
        Returns the first failure encountered, or Success with all values.
        """
        values: list[T] = []
        for r in results:
            match r:
                case Success(v):
                    values.append(v)
                case Failure(err):
                    return Failure(err)
        return Success(values)

    # ──────────────────────── Async Support ────────────────────────

    async def map_async(self, mapper: Callable[[T], Awaitable[U]]) -> Result[U, E]:
        """
        Async map — await a one-track coroutine on the success value.

            result = await Result.success(user_id).map_async(fetch_profile)
        """
        match self:
            case Success(v):
                return Success(await mapper(v))
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    async def flat_map_async(
        self, step: Callable[[T], Awaitable[Result[U, E]]]
    ) -> Result[U, E]:
        """
        Async flat_map — await a Result-returning coroutine step.

        The step is awaited to completion before the Result is returned,
        so chains stay strictly sequential.
        """
        match self:
            case Success(v):
                return await step(v)
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Success."""
        return self.is_success()


@dataclass(frozen=True, slots=True)
class Success(Result[T, E]):
    """The success track — wraps a value of type T."""

    _value: T

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    def __repr__(self) -> str:
        return f"Success({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Success):
            return self._value == other._value
        if isinstance(other, Failure):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Success", self._value))


# Enable structural pattern matching: case Success(value)
Success.__match_args__ = ("_value",)


@dataclass(frozen=True, slots=True)
class Failure(Result[T, E]):
    """The failure track — wraps an error payload of type E."""

    _error: E

    def __init__(self, error: E) -> None:
        object.__setattr__(self, "_error", error)

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Failure):
            return self._error == other._error
        if isinstance(other, Success):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Failure", self._error))


# Enable structural pattern matching: case Failure(error)
Failure.__match_args__ = ("_error",)
