"""
Ports — Protocol-based interfaces for infrastructure adapters.

These define WHAT the update-user flow needs without specifying HOW:

  Domain ← Ports (protocols) ← Adapters (implementations)

Every port method is a railway step: it takes the value produced by the
previous step and returns a Result, never raising.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rop.result import Result

from user_service.domain.models import UserRecord, UserRequest


@runtime_checkable
class UserRepository(Protocol):
    """
    Port: persist and look up users.

    update() returns the request unchanged on success so the chain can
    continue with it; failures carry a DATABASE_ERROR payload.
    """

    def update(self, request: UserRequest) -> Result[UserRequest, dict]: ...

    def find(self, email: str) -> Result[UserRecord, dict]: ...


@runtime_checkable
class Notifier(Protocol):
    """
    Port: tell the user their details were updated.

    Returns the request unchanged on success; failures carry an
    EXTERNAL_SERVICE_ERROR payload.
    """

    def send_confirmation(self, request: UserRequest) -> Result[UserRequest, dict]: ...
