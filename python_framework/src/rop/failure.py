"""
Failure payload conventions for the failure track.

Result never constrains its error type. By convention the steps in this
project fail with a plain mapping carrying at least an "error" message:

    {"error": "Name must not be blank"}

Steps that need to categorize a failure add a "code" entry holding an
ErrorCode value; the HTTP layer reads it to pick a status code.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, unique
from typing import Any, Optional


@unique
class ErrorCode(Enum):
    """
    Structured error codes carried inside failure payloads.

    Organized by HTTP status range for natural REST API mapping:
    - Client errors (4xx): VALIDATION, AUTHENTICATION, AUTHORIZATION, NOT_FOUND, BUSINESS_RULE, RATE_LIMIT
    - Server errors (5xx): TECHNICAL, DATABASE, CONFIGURATION, EXTERNAL_SERVICE, UNAVAILABLE, TIMEOUT, UNKNOWN
    """

    # --- Client-side errors (4xx HTTP range) ---
    VALIDATION_ERROR = "VALIDATION_ERROR"
    """Invalid input format, missing fields, type mismatches (→ 400)."""

    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    """Invalid credentials, expired tokens (→ 401)."""

    AUTHORIZATION_ERROR = "AUTHORIZATION_ERROR"
    """Insufficient permissions (→ 403)."""

    NOT_FOUND = "NOT_FOUND"
    """Resource doesn't exist (→ 404)."""

    BUSINESS_RULE_ERROR = "BUSINESS_RULE_ERROR"
    """Domain invariant violated (→ 409)."""

    RATE_LIMIT_ERROR = "RATE_LIMIT_ERROR"
    """Request limits exceeded (→ 429)."""

    # --- Server-side errors (5xx HTTP range) ---
    TECHNICAL_ERROR = "TECHNICAL_ERROR"
    """Infrastructure issues (→ 500)."""

    DATABASE_ERROR = "DATABASE_ERROR"
    """Storage failures (→ 500)."""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    """System misconfiguration (→ 500)."""

    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    """External API call failures (→ 502)."""

    SERVICE_UNAVAILABLE_ERROR = "SERVICE_UNAVAILABLE_ERROR"
    """Service maintenance or overload (→ 503)."""

    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    """Operation exceeded time limit (→ 504)."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    """Unexpected/unclassified failures (→ 500)."""


def error_payload(message: str, code: Optional[ErrorCode] = None) -> dict[str, str]:
    """
    Build the conventional failure payload.

    >>> error_payload("Name must not be blank")
    {'error': 'Name must not be blank'}
    >>> error_payload("Connection refused", ErrorCode.DATABASE_ERROR)
    {'error': 'Connection refused', 'code': 'DATABASE_ERROR'}
    """
    payload = {"error": message}
    if code is not None:
        payload["code"] = code.value
    return payload


def message_of(payload: Any) -> str:
    """The "error" message of a conventional payload, or str() of anything else."""
    if isinstance(payload, Mapping) and "error" in payload:
        return str(payload["error"])
    return str(payload)


def code_of(payload: Any, default: ErrorCode = ErrorCode.UNKNOWN_ERROR) -> ErrorCode:
    """The ErrorCode named in a payload's "code" entry, or `default`."""
    if isinstance(payload, Mapping):
        try:
            return ErrorCode(payload.get("code"))
        except ValueError:
            return default
    return default


def exception_to_code(exception: BaseException) -> ErrorCode:
    """
    Map a Python exception type to the most appropriate ErrorCode.

    Mapping:
      - ValueError, TypeError, KeyError → VALIDATION_ERROR
      - LookupError, FileNotFoundError → NOT_FOUND
      - PermissionError → AUTHORIZATION_ERROR
      - TimeoutError → TIMEOUT_ERROR
      - ConnectionError, OSError → EXTERNAL_SERVICE_ERROR
      - Everything else → UNKNOWN_ERROR
    """
    match exception:
        case ValueError() | TypeError() | KeyError():
            return ErrorCode.VALIDATION_ERROR
        case LookupError() | FileNotFoundError():
            return ErrorCode.NOT_FOUND
        case PermissionError():
            return ErrorCode.AUTHORIZATION_ERROR
        case TimeoutError():
            return ErrorCode.TIMEOUT_ERROR
        case ConnectionError() | OSError():
            return ErrorCode.EXTERNAL_SERVICE_ERROR
        case _:
            return ErrorCode.UNKNOWN_ERROR


def from_exception(message: str, exception: BaseException) -> dict[str, str]:
    """Payload for a caught exception, classified with exception_to_code()."""
    return error_payload(f"{message}: {exception}", exception_to_code(exception))
