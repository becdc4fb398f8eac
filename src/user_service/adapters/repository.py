"""
In-memory user repository — implements the UserRepository port.

Users are kept in a dict keyed by email and guarded by a lock, since the
ASGI server runs sync endpoints on a thread pool. Exceptions raised while
storing are captured into DATABASE_ERROR failures so nothing leaks into
the railway.
"""

from __future__ import annotations

import threading

import structlog
from rop.failure import ErrorCode, error_payload
from rop.result import Result

from user_service.domain.models import UserRecord, UserRequest

log = structlog.get_logger()


class InMemoryUserRepository:
    """Thread-safe, process-local user store."""

    def __init__(self) -> None:
        self._users: dict[str, UserRecord] = {}
        self._lock = threading.Lock()

    def update(self, request: UserRequest) -> Result[UserRequest, dict]:
        """
        Insert or replace the user identified by the request's email.

        Returns the request unchanged on success,
        or a DATABASE_ERROR failure if the record could not be stored.
        """
        return Result.from_computation(
            lambda: self._save(request),
            lambda exc: error_payload(
                f"Failed to update user: {exc!r}", ErrorCode.DATABASE_ERROR
            ),
        )

    def find(self, email: str) -> Result[UserRecord, dict]:
        """Look a user up by email; NOT_FOUND failure when absent."""
        with self._lock:
            record = self._users.get(email.strip())
        return Result.from_optional(
            record,
            error_payload(f"User not found with email: {email}", ErrorCode.NOT_FOUND),
        )

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def _save(self, request: UserRequest) -> UserRequest:
        record = UserRecord.from_request(request)
        with self._lock:
            self._users[record.email] = record
        log.info("repository.user_saved", email=record.email)
        return request
