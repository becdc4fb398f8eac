"""
Test assertions for Result values.

Expressive assert helpers that produce clear failure messages.

Usage in tests:
    from rop import ResultAssertions

    def test_update_user():
        result = update_user_result(request, repository, notifier)
        ResultAssertions.assert_success(result)

    def test_blank_name():
        result = validate_request({"name": "", "email": "a@b.com"})
        ResultAssertions.assert_failure(result, {"error": "Name must not be blank"})
        ResultAssertions.assert_failure_message_contains(result, "blank")
"""

from __future__ import annotations

from typing import Any, TypeVar

from rop.failure import message_of
from rop.result import Result

T = TypeVar("T")
E = TypeVar("E")

_UNSET: Any = object()


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[T, E], message: str = "") -> T:
        """
        Assert the Result is a Success and return the value.

            value = ResultAssertions.assert_success(result)
        """
        context = f" ({message})" if message else ""
        assert result.is_success(), (
            f"Expected Success but got Failure({result.error()!r}){context}"
        )
        return result.value()

    @staticmethod
    def assert_failure(
        result: Result[T, E],
        expected_error: Any = _UNSET,
        message: str = "",
    ) -> E:
        """
        Assert the Result is a Failure, optionally checking the payload.

            error = ResultAssertions.assert_failure(result, {"error": "Name must not be blank"})
        """
        context = f" ({message})" if message else ""
        assert result.is_failure(), (
            f"Expected Failure but got Success({result.value()!r}){context}"
        )
        error = result.error()
        if expected_error is not _UNSET:
            assert error == expected_error, (
                f"Expected failure payload {expected_error!r} "
                f"but got {error!r}{context}"
            )
        return error

    @staticmethod
    def assert_failure_message_contains(result: Result[T, E], substring: str) -> None:
        """Assert that the failure message contains the given substring (case-insensitive)."""
        assert result.is_failure(), (
            f"Expected Failure but got Success({result.value()!r})"
        )
        text = message_of(result.error())
        assert substring.lower() in text.lower(), (
            f"Expected failure message to contain {substring!r} "
            f"but message was: {text!r}"
        )

    @staticmethod
    def assert_failure_message_equals(result: Result[T, E], expected_message: str) -> None:
        """Assert that the failure message exactly equals the expected message."""
        assert result.is_failure(), (
            f"Expected Failure but got Success({result.value()!r})"
        )
        text = message_of(result.error())
        assert text == expected_message, (
            f"Expected failure message {expected_message!r} "
            f"but got {text!r}"
        )

    @staticmethod
    def assert_success_value(result: Result[T, E], expected_value: Any) -> None:
        """Assert the Result is a Success with the specific value."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )
