"""
Tests for bind, sequence, adapt and the two-track adapters.

Covers the railway laws:
  - bind(Success(v), f) == f(v)
  - bind(Failure(e), f) == Failure(e), f never invoked
  - sequence is associative and an empty sequence is the identity
  - steps run in order and stop at the first failure
"""

from __future__ import annotations

import pytest

from rop import Failure, Result, Success, adapt, bind, pipeline, sequence, sequence_async, switch, tee


class CountingStep:
    """A step that records every value it was called with."""

    def __init__(self, result_fn=None) -> None:
        self.calls: list = []
        self._result_fn = result_fn or (lambda v: Success(v))

    def __call__(self, value):
        self.calls.append(value)
        return self._result_fn(value)


def _increment(x: int) -> Result[int, str]:
    return Success(x + 1)


def _double(x: int) -> Result[int, str]:
    return Success(x * 2)


def _reject_odd(x: int) -> Result[int, str]:
    return Failure(f"{x} is odd") if x % 2 else Success(x)


# ─────────────────────── bind ───────────────────────


class TestBind:
    @pytest.mark.parametrize("value", [0, 1, 7, 42])
    @pytest.mark.parametrize("step", [_increment, _double, _reject_odd])
    def test_bind_on_success_is_step_application(self, value, step):
        assert bind(Success(value), step) == step(value)

    def test_bind_on_failure_bypasses_step(self):
        step = CountingStep()
        assert bind(Failure({"error": "e"}), step) == Failure({"error": "e"})
        assert step.calls == []

    def test_bind_returns_step_failure(self):
        assert bind(Success(3), _reject_odd) == Failure("3 is odd")


# ─────────────────────── adapt ───────────────────────


class TestAdapt:
    @pytest.mark.parametrize("initial", [Success(2), Success(3), Failure("already off track")])
    def test_adapt_matches_bind(self, initial):
        assert adapt(initial, _reject_odd) == bind(initial, _reject_odd)

    def test_adapt_on_failure_bypasses_fun(self):
        fun = CountingStep()
        failure = Failure({"error": "e"})
        assert adapt(failure, fun) is failure
        assert fun.calls == []

    def test_adapt_unwraps_success_value(self):
        fun = CountingStep()
        adapt(Success({"name": "Alice"}), fun)
        assert fun.calls == [{"name": "Alice"}]


# ─────────────────────── sequence ───────────────────────


class TestSequence:
    def test_empty_steps_is_identity(self):
        assert sequence(Success(5), []) == Success(5)
        assert sequence(Failure("e"), []) == Failure("e")

    def test_folds_steps_left_to_right(self):
        # (1 + 1) * 2 = 4, while (1 * 2) + 1 = 3
        assert sequence(Success(1), [_increment, _double]) == Success(4)
        assert sequence(Success(1), [_double, _increment]) == Success(3)

    def test_equivalent_to_nested_binds(self):
        steps = [_increment, _double, _reject_odd]
        nested = bind(bind(bind(Success(5), _increment), _double), _reject_odd)
        assert sequence(Success(5), steps) == nested

    @pytest.mark.parametrize("initial", [Success(1), Success(2), Failure("e")])
    def test_associativity(self, initial):
        left = sequence(sequence(initial, [_increment]), [_reject_odd])
        right = sequence(initial, [_increment, _reject_odd])
        assert left == right

    def test_first_failure_stops_the_chain(self):
        f1 = CountingStep(lambda v: Failure({"error": "f1"}))
        f2 = CountingStep()
        f3 = CountingStep()

        result = sequence(Success("input"), [f1, f2, f3])

        assert result == Failure({"error": "f1"})
        assert f1.calls == ["input"]
        assert f2.calls == []
        assert f3.calls == []

    def test_first_failure_payload_survives_unaltered(self):
        payload = {"error": "middle failed", "code": "DATABASE_ERROR"}
        result = sequence(
            Success(1),
            [_increment, lambda v: Failure(payload), lambda v: Failure({"error": "later"})],
        )
        assert result.error() is payload

    def test_each_step_receives_previous_output(self):
        seen = CountingStep()
        sequence(Success(1), [_increment, seen, _double, seen])
        assert seen.calls == [2, 4]

    def test_accepts_a_generator_of_steps(self):
        assert sequence(Success(1), (s for s in [_increment, _increment])) == Success(3)


# ─────────────────────── pipeline / switch / tee ───────────────────────


class TestPipeline:
    def test_pipeline_equals_sequence(self):
        run = pipeline(_increment, _double)
        assert run(Success(1)) == sequence(Success(1), [_increment, _double])

    def test_pipeline_is_reusable(self):
        run = pipeline(_reject_odd, _double)
        assert run(Success(2)) == Success(4)
        assert run(Success(3)) == Failure("3 is odd")


class TestSwitch:
    def test_lifts_one_track_function(self):
        step = switch(str.upper)
        assert step("abc") == Success("ABC")

    def test_switch_in_a_chain(self):
        assert sequence(Success(3), [switch(lambda x: x + 1), _reject_odd]) == Success(4)

    def test_keeps_function_name(self):
        def normalize(x):
            return x

        assert switch(normalize).__name__ == "normalize"


class TestTee:
    def test_runs_side_effect_and_passes_input_through(self):
        seen: list[str] = []
        step = tee(seen.append)
        assert step("value") == Success("value")
        assert seen == ["value"]

    def test_side_effect_skipped_after_failure(self):
        seen: list[int] = []
        result = sequence(Success(3), [_reject_odd, tee(seen.append)])
        assert result == Failure("3 is odd")
        assert seen == []


# ─────────────────────── sequence_async ───────────────────────


class TestSequenceAsync:
    @pytest.mark.asyncio
    async def test_mixes_plain_and_coroutine_steps(self):
        async def add_ten(x: int) -> Result[int, str]:
            return Success(x + 10)

        result = await sequence_async(Success(1), [_increment, add_ten, _double])
        assert result == Success(24)

    @pytest.mark.asyncio
    async def test_stops_at_first_failure(self):
        calls: list[int] = []

        async def record(x: int) -> Result[int, str]:
            calls.append(x)
            return Success(x)

        result = await sequence_async(Success(3), [_reject_odd, record])
        assert result == Failure("3 is odd")
        assert calls == []

    @pytest.mark.asyncio
    async def test_empty_steps_is_identity(self):
        assert await sequence_async(Success("x"), []) == Success("x")
