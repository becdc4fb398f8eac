"""
HTTP integration — failure payload → HTTP status mapping and response builders.

The terminal step of a railway: both tracks are turned into the same
(body, status) shape, so the caller never branches on the variant.

Usage (standalone):
    status = HttpStatusMapper.map_error_code(ErrorCode.NOT_FOUND)  # → 404
    body, status = build_response(result, success_status=200)

Usage (FastAPI):
    from rop.http_support import build_fastapi_response
    return build_fastapi_response(result)
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import Any, TypeVar

from rop.failure import ErrorCode, code_of, message_of
from rop.result import Result

T = TypeVar("T")
E = TypeVar("E")


# ──────────────────────── Error Code → HTTP Status Mapping ────────────────────────


class HttpStatusMapper:
    """Maps ErrorCode values (and failure payloads carrying one) to HTTP status codes."""

    _CODE_TO_STATUS: dict[ErrorCode, int] = {
        # Client errors (4xx)
        ErrorCode.VALIDATION_ERROR: 400,
        ErrorCode.AUTHENTICATION_ERROR: 401,
        ErrorCode.AUTHORIZATION_ERROR: 403,
        ErrorCode.NOT_FOUND: 404,
        ErrorCode.BUSINESS_RULE_ERROR: 409,
        ErrorCode.RATE_LIMIT_ERROR: 429,
        # Server errors (5xx)
        ErrorCode.TECHNICAL_ERROR: 500,
        ErrorCode.DATABASE_ERROR: 500,
        ErrorCode.CONFIGURATION_ERROR: 500,
        ErrorCode.EXTERNAL_SERVICE_ERROR: 502,
        ErrorCode.SERVICE_UNAVAILABLE_ERROR: 503,
        ErrorCode.TIMEOUT_ERROR: 504,
        ErrorCode.UNKNOWN_ERROR: 500,
    }

    @classmethod
    def map_error_code(cls, code: ErrorCode) -> int:
        """Map an ErrorCode to an HTTP status code."""
        return cls._CODE_TO_STATUS.get(code, 500)

    @classmethod
    def map_failure(
        cls,
        payload: Any,
        default: ErrorCode = ErrorCode.UNKNOWN_ERROR,
    ) -> int:
        """Map a failure payload to an HTTP status code via its "code" entry."""
        return cls.map_error_code(code_of(payload, default))


# ──────────────────────── Error Response DTO ────────────────────────


@dataclass(frozen=True, slots=True)
class ErrorResponse:
    """
    Standardized error response body.

        {
            "error_code": "VALIDATION_ERROR",
            "message": "Name must not be blank",
            "timestamp": "2026-02-17T10:30:00+00:00"
        }
    """

    error_code: str
    message: str
    timestamp: str

    @staticmethod
    def from_failure(
        payload: Any,
        default: ErrorCode = ErrorCode.UNKNOWN_ERROR,
    ) -> ErrorResponse:
        return ErrorResponse(
            error_code=code_of(payload, default).value,
            message=message_of(payload),
            timestamp=datetime.now(UTC).isoformat(),
        )

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


# ──────────────────────── Generic Response Builder ────────────────────────


def build_response(
    result: Result[T, E],
    success_status: int = 200,
    success_body: Any = None,
    default_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
) -> tuple[Any, int]:
    """
    Build a (body, status_code) tuple from a Result.

    Failures without a "code" entry are reported as `default_code`:
    in this project that means a step rejected the input.

        body, status = build_response(result, success_status=201)
    """
    return result.either(
        on_success=lambda value: (
            success_body if success_body is not None else value,
            success_status,
        ),
        on_failure=lambda error: (
            ErrorResponse.from_failure(error, default_code).to_dict(),
            HttpStatusMapper.map_failure(error, default_code),
        ),
    )


# ──────────────────────── FastAPI Adapter ────────────────────────


def build_fastapi_response(
    result: Result[T, E],
    success_status: int = 200,
    default_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
) -> Any:
    """
    Build a FastAPI JSONResponse from a Result.

        @app.post("/users")
        def update(body: UpdateUserBody):
            return build_fastapi_response(handler(body.model_dump()))
    """
    from fastapi.responses import JSONResponse

    body, status = build_response(result, success_status, default_code=default_code)
    return JSONResponse(content=body, status_code=status)
