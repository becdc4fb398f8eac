"""
Integration tests — the full update-user railway over a mocked webhook.

Real validators, real in-memory repository, real HttpNotifier; only the
HTTP transport is replaced by respx.
"""

from __future__ import annotations

import httpx
import pytest
import respx
from rop import ResultAssertions

from user_service.adapters.notifier import HttpNotifier
from user_service.adapters.repository import InMemoryUserRepository
from user_service.pipeline import update_user, update_user_result

WEBHOOK_URL = "https://hooks.example.com/user-updated"

pytestmark = pytest.mark.integration


@pytest.fixture()
def http_notifier() -> HttpNotifier:
    return HttpNotifier(url=WEBHOOK_URL, timeout=5)


class TestHttpFlow:
    @respx.mock
    def test_valid_request_is_stored_and_confirmed(self, http_notifier) -> None:
        """
        GIVEN a valid request and a webhook answering 200
        WHEN the pipeline runs
        THEN the user is stored and exactly one confirmation is posted.
        """
        route = respx.post(WEBHOOK_URL).mock(return_value=httpx.Response(200))
        repository = InMemoryUserRepository()

        body = update_user({"name": "Alice", "email": "a@b.com"}, repository, http_notifier)

        assert body == {"status": "success", "message": "User a@b.com updated"}
        assert repository.count() == 1
        assert route.call_count == 1

    @respx.mock
    def test_invalid_request_never_reaches_the_webhook(self, http_notifier) -> None:
        route = respx.post(WEBHOOK_URL).mock(return_value=httpx.Response(200))
        repository = InMemoryUserRepository()

        body = update_user({"name": "", "email": "a@b.com"}, repository, http_notifier)

        assert body == {"status": "failed", "message": "Name must not be blank"}
        assert route.call_count == 0
        assert repository.count() == 0

    @respx.mock
    def test_webhook_rejection_is_reported(self, http_notifier) -> None:
        """
        GIVEN a webhook answering 503
        WHEN the pipeline runs
        THEN the user is stored but the result carries the notifier failure.
        """
        respx.post(WEBHOOK_URL).mock(return_value=httpx.Response(503))
        repository = InMemoryUserRepository()

        result = update_user_result({"name": "Alice", "email": "a@b.com"}, repository, http_notifier)

        error = ResultAssertions.assert_failure(result)
        assert error["code"] == "EXTERNAL_SERVICE_ERROR"
        assert repository.count() == 1
