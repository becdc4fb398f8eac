"""
Notifier adapters — implement the Notifier port.

  - HttpNotifier: POSTs a confirmation event to a webhook via httpx,
    with tenacity retry on transient errors (network, timeout).
  - LogNotifier: no external service configured, the confirmation
    is only logged.

HTTP errors are captured into EXTERNAL_SERVICE_ERROR failures — no
exception leaks into the railway.
"""

from __future__ import annotations

import httpx
import structlog
from rop.composition import tee
from rop.failure import ErrorCode, error_payload
from rop.result import Result
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from user_service.domain.models import UserRequest

log = structlog.get_logger()


class HttpNotifier:
    """Send the update confirmation to an HTTP webhook."""

    def __init__(self, url: str, timeout: int = 10) -> None:
        self._url = url
        self._timeout = timeout

    def send_confirmation(self, request: UserRequest) -> Result[UserRequest, dict]:
        """
        POST {"event": "user.updated", "name": ..., "email": ...} to the webhook.

        Returns the request unchanged on a 2xx response,
        or an EXTERNAL_SERVICE_ERROR failure otherwise.
        """
        return Result.from_computation(
            lambda: self._do_post(request),
            lambda exc: error_payload(
                f"Confirmation could not be sent: {exc}",
                ErrorCode.EXTERNAL_SERVICE_ERROR,
            ),
        )

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.2, min=0.1, max=5),
        retry=retry_if_exception_type((httpx.TimeoutException, httpx.NetworkError)),
        reraise=True,
    )
    def _do_post(self, request: UserRequest) -> UserRequest:
        """HTTP call with retry — exceptions caught by from_computation."""
        with httpx.Client(timeout=self._timeout) as client:
            response = client.post(
                self._url,
                json={
                    "event": "user.updated",
                    "name": request["name"],
                    "email": request["email"],
                },
            )
            response.raise_for_status()
        log.info("notifier.confirmation_sent", email=request["email"])
        return request


class LogNotifier:
    """Log the confirmation instead of sending it."""

    def send_confirmation(self, request: UserRequest) -> Result[UserRequest, dict]:
        return tee(_log_confirmation)(request)


def _log_confirmation(request: UserRequest) -> None:
    log.info("notifier.confirmation_logged", email=request.get("email"))
