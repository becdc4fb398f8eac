"""Tests for ResultAssertions test helper."""

import pytest

from rop import Failure, ResultAssertions, Success


class TestAssertSuccess:
    def test_passes_on_success(self):
        assert ResultAssertions.assert_success(Success(42)) == 42

    def test_fails_on_failure_with_clear_message(self):
        with pytest.raises(AssertionError, match="Expected Success but got Failure"):
            ResultAssertions.assert_success(Failure({"error": "Name must not be blank"}))

    def test_custom_message(self):
        with pytest.raises(AssertionError, match="custom context"):
            ResultAssertions.assert_success(Failure("x"), "custom context")


class TestAssertFailure:
    def test_passes_on_failure(self):
        error = ResultAssertions.assert_failure(Failure({"error": "missing"}))
        assert error == {"error": "missing"}

    def test_checks_payload(self):
        error = ResultAssertions.assert_failure(Failure({"error": "bad"}), {"error": "bad"})
        assert error["error"] == "bad"

    def test_checks_none_payload(self):
        assert ResultAssertions.assert_failure(Failure(None), None) is None

    def test_fails_on_wrong_payload(self):
        with pytest.raises(AssertionError, match="Expected failure payload"):
            ResultAssertions.assert_failure(Failure({"error": "x"}), {"error": "y"})

    def test_fails_on_success(self):
        with pytest.raises(AssertionError, match="Expected Failure but got Success"):
            ResultAssertions.assert_failure(Success(42))


class TestAssertFailureMessage:
    def test_contains_substring(self):
        ResultAssertions.assert_failure_message_contains(
            Failure({"error": "Name must not be blank"}), "name"
        )

    def test_case_insensitive(self):
        ResultAssertions.assert_failure_message_contains(Failure({"error": "NAME IS BLANK"}), "name")

    def test_plain_string_payload(self):
        ResultAssertions.assert_failure_message_contains(Failure("timeout talking to db"), "timeout")

    def test_fails_when_not_contained(self):
        with pytest.raises(AssertionError, match="Expected failure message to contain"):
            ResultAssertions.assert_failure_message_contains(Failure({"error": "Email"}), "name")

    def test_exact_match(self):
        ResultAssertions.assert_failure_message_equals(Failure({"error": "exact"}), "exact")

    def test_exact_match_fails(self):
        with pytest.raises(AssertionError, match="Expected failure message"):
            ResultAssertions.assert_failure_message_equals(Failure({"error": "actual"}), "expected")


class TestAssertSuccessValue:
    def test_exact_value_match(self):
        ResultAssertions.assert_success_value(Success(42), 42)

    def test_fails_on_wrong_value(self):
        with pytest.raises(AssertionError, match="Expected success value"):
            ResultAssertions.assert_success_value(Success(42), 99)

    def test_fails_on_failure(self):
        with pytest.raises(AssertionError, match="Expected Success"):
            ResultAssertions.assert_success_value(Failure("x"), 42)
