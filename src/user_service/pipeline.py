"""
Pipeline — the update-user railway.

  name_not_blank
    → name_max_length
      → email_not_blank
        → repository.update
          → notifier.send_confirmation

Each stage returns a Result. The first failure bypasses every later stage,
so a request with a blank name is never stored and never confirmed.

At the end both tracks are mapped into the same response shape,
{"status": ..., "message": ...}, and the caller simply extracts it.
"""

from __future__ import annotations

from typing import Any

import structlog
from rop.composition import sequence
from rop.failure import message_of
from rop.result import Result, Success

from user_service.domain.models import UserRequest
from user_service.domain.ports import Notifier, UserRepository
from user_service.validation import NAME_MAX_LENGTH, validation_steps

log = structlog.get_logger()


def update_user_result(
    request: UserRequest,
    repository: UserRepository,
    notifier: Notifier,
    max_name_length: int = NAME_MAX_LENGTH,
) -> Result[UserRequest, Any]:
    """
    Run the whole update-user chain and return its Result.

    Success carries the request that was stored and confirmed;
    Failure carries the payload of the first failing stage, unaltered.
    """
    return (
        sequence(
            Success(request),
            [
                *validation_steps(max_name_length),
                repository.update,
                notifier.send_confirmation,
            ],
        )
        .peek(lambda r: log.info("user.updated", email=r.get("email")))
        .peek_failure(lambda err: log.warning("user.update_failed", error=message_of(err)))
    )


def to_response(result: Result[UserRequest, Any]) -> Result[dict[str, str], dict[str, str]]:
    """Map both tracks into the same {"status", "message"} shape."""
    return result.map(
        lambda r: {"status": "success", "message": f"User {r['email']} updated"}
    ).map_failure(
        lambda err: {"status": "failed", "message": message_of(err)}
    )


def update_user(
    request: UserRequest,
    repository: UserRepository,
    notifier: Notifier,
    max_name_length: int = NAME_MAX_LENGTH,
) -> dict[str, str]:
    """Handle an update-user request and return the response body."""
    return to_response(
        update_user_result(request, repository, notifier, max_name_length)
    ).extract()
