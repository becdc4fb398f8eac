"""
Shared test fixtures for the user-service test suite.

Provides sample requests and fake adapters that record the calls they
receive, so tests can check which railway stages actually ran.
"""

from __future__ import annotations

from typing import Any

import pytest
from rop.result import Failure, Result, Success

from user_service.adapters.repository import InMemoryUserRepository


class RecordingNotifier:
    """Notifier fake: records every request, answers with a fixed Result or echoes it."""

    def __init__(self, failure: Any = None) -> None:
        self.calls: list[dict] = []
        self._failure = failure

    def send_confirmation(self, request: Any) -> Result[Any, Any]:
        self.calls.append(dict(request))
        if self._failure is not None:
            return Failure(self._failure)
        return Success(request)


@pytest.fixture()
def valid_request() -> dict[str, str]:
    return {"name": "Alice", "email": "a@b.com"}


@pytest.fixture()
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def make_notifier() -> type[RecordingNotifier]:
    """The RecordingNotifier class, for tests that need a failing notifier."""
    return RecordingNotifier
