"""
Composition helpers — bind, sequence and the two-track adapters.

A step is a two-track function: it takes a plain value and returns a
Result. These helpers thread a Result through an ordered list of steps:

    sequence(Success(request), [name_not_blank, name_max_length, email_not_blank])

is the same as

    bind(bind(bind(Success(request), name_not_blank), name_max_length), email_not_blank)

The chain is a two-state machine. It starts ON_TRACK (Success) and any
step may switch it OFF_TRACK (Failure); nothing here ever switches back.
Use Result.recover() for that, explicitly.

One-track functions (plain S -> S') are lifted with switch(); dead-end
side effects (S -> None) with tee().
"""

from __future__ import annotations

import inspect
from functools import reduce
from typing import Any, Awaitable, Callable, Iterable, TypeVar

from rop.result import Result, Success

S = TypeVar("S")
T = TypeVar("T")
E = TypeVar("E")

Step = Callable[[Any], Result[Any, Any]]


def bind(result: Result[S, E], step: Callable[[S], Result[T, E]]) -> Result[T, E]:
    """
    Run `step` on the success value, or bypass it on the failure track.

    bind(Success(v), f) == f(v)
    bind(Failure(e), f) == Failure(e), and f is never called.
    """
    return result.flat_map(step)


def adapt(result: Result[S, E], fun: Callable[[S], Result[T, E]]) -> Result[T, E]:
    """
    The bypass written out by hand, without bind.

    Same contract as bind(): a failure is returned as is, a success is
    unwrapped and handed to `fun`.
    """
    if result.is_failure():
        return result  # type: ignore[return-value]
    return fun(result.extract())  # type: ignore[arg-type]


def sequence(initial: Result[Any, E], steps: Iterable[Step]) -> Result[Any, E]:
    """
    Fold bind over `steps`, left to right, starting from `initial`.

    Returns the final Success if every step succeeded, otherwise the
    Failure of the first failing step. Later steps are not invoked.
    An empty list of steps returns `initial` unchanged.
    """
    return reduce(bind, steps, initial)


def pipeline(*steps: Step) -> Callable[[Result[Any, E]], Result[Any, E]]:
    """
    Compose steps into a single Result -> Result function.

        validate = pipeline(name_not_blank, name_max_length, email_not_blank)
        validate(Success(request))
    """
    frozen_steps = tuple(steps)

    def run(result: Result[Any, E]) -> Result[Any, E]:
        return sequence(result, frozen_steps)

    return run


def switch(fn: Callable[[S], T]) -> Callable[[S], Result[T, Any]]:
    """Lift a one-track function into a step that always stays on track."""

    def step(value: S) -> Result[T, Any]:
        return Success(fn(value))

    step.__name__ = getattr(fn, "__name__", "switch")
    return step


def tee(fn: Callable[[S], Any]) -> Callable[[S], Result[S, Any]]:
    """
    Lift a dead-end function into a step that passes its input through.

    The return value of `fn` is discarded.
    """

    def step(value: S) -> Result[S, Any]:
        fn(value)
        return Success(value)

    step.__name__ = getattr(fn, "__name__", "tee")
    return step


async def sequence_async(
    initial: Result[Any, E],
    steps: Iterable[Callable[[Any], Result[Any, E] | Awaitable[Result[Any, E]]]],
) -> Result[Any, E]:
    """
    Async fold of bind: steps may be plain or coroutine functions.

    Each step is awaited before the next one starts, so ordering and the
    short-circuit are the same as in sequence().
    """
    result = initial
    for step in steps:
        if result.is_failure():
            return result
        outcome = step(result.extract())
        if inspect.isawaitable(outcome):
            outcome = await outcome
        result = outcome
    return result
