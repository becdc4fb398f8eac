"""
Validation steps for an update-user request.

Each step takes the request mapping and either returns it unchanged on
the success track or switches to the failure track with an
{"error": message} payload. They are chained in a fixed order, so a
blank name is reported before its length is ever checked.
"""

from __future__ import annotations

from functools import partial

from rop.composition import Step, sequence
from rop.failure import error_payload
from rop.result import Failure, Result, Success

from user_service.domain.models import UserRequest

NAME_MAX_LENGTH = 255


def _field(request: UserRequest, name: str) -> str:
    return str(request.get(name) or "")


def name_not_blank(request: UserRequest) -> Result[UserRequest, dict]:
    if not _field(request, "name").strip():
        return Failure(error_payload("Name must not be blank"))
    return Success(request)


def name_max_length(
    request: UserRequest, max_length: int = NAME_MAX_LENGTH
) -> Result[UserRequest, dict]:
    if len(_field(request, "name")) > max_length:
        return Failure(error_payload(f"Name must not be longer then {max_length} chars"))
    return Success(request)


def email_not_blank(request: UserRequest) -> Result[UserRequest, dict]:
    if not _field(request, "email").strip():
        return Failure(error_payload("Email must not be blank"))
    return Success(request)


def validation_steps(max_length: int = NAME_MAX_LENGTH) -> list[Step]:
    """The validators in the order they must run."""
    return [name_not_blank, partial(name_max_length, max_length=max_length), email_not_blank]


def validate_request(
    request: UserRequest, max_length: int = NAME_MAX_LENGTH
) -> Result[UserRequest, dict]:
    """Run every validator; the first failing one decides the error."""
    return sequence(Success(request), validation_steps(max_length))
