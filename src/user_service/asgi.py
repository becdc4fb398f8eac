"""
FastAPI + Uvicorn ASGI application.

Exposes the update-user railway over HTTP:

  - POST /users          run the update-user pipeline on a {name, email} body
  - GET  /users/{email}  look a stored user up
  - GET  /health         liveness probe
  - GET  /info           application metadata

Every endpoint turns its Result into a response with build_fastapi_response,
so the status code comes from the failure payload's error code.

Entry point for production: uvicorn user_service.asgi:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from rop.failure import ErrorCode
from rop.http_support import build_fastapi_response

from user_service.adapters.repository import InMemoryUserRepository
from user_service.config import AppSettings
from user_service.main import Handler, _create_adapters, configure_structlog, create_handler

# ─────────────────────── Global State ───────────────────────
# Set during app startup, replaced by tests.

_handler: Handler | None = None
_repository: InMemoryUserRepository | None = None
_error_message: str | None = None
log = structlog.get_logger()


class UpdateUserBody(BaseModel):
    """Request body of POST /users. Missing fields are validated on the railway."""

    name: str = ""
    email: str = ""


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load settings, build adapters and the handler on startup."""
    global _handler, _repository, _error_message

    try:
        settings = AppSettings()
    except Exception as e:
        _error_message = f"Configuration error: {e}"
        log.error("asgi.startup_error", error=_error_message)
        raise

    configure_structlog(settings.log_level)

    repository, notifier = _create_adapters(settings)
    _repository = repository
    _handler = create_handler(settings, repository, notifier)

    log.info("asgi.startup_complete", notifier=type(notifier).__name__)

    yield

    log.info("asgi.shutdown")


# ─────────────────────── FastAPI Application ───────────────────────

app = FastAPI(
    title="user-service",
    description="Update-user request handler built on Railway-Oriented Programming",
    version="0.1.0",
    lifespan=lifespan,
)


def _unavailable() -> JSONResponse:
    return JSONResponse(
        status_code=503,
        content={"status": "unavailable", "reason": "Service not initialized"},
    )


@app.post("/users")
def update_user(body: UpdateUserBody) -> Any:
    """
    Validate, store and confirm a user update.

    Returns 200 with the stored user on success,
    400 when validation fails, 5xx when storage or notification fails.
    """
    if _handler is None:
        return _unavailable()

    result = _handler(body.model_dump()).map(
        lambda request: {
            "status": "success",
            "user": {"name": request["name"], "email": request["email"]},
        }
    )
    return build_fastapi_response(result)


@app.get("/users/{email}")
def get_user(email: str) -> Any:
    """Return the stored user, or 404 when no user has this email."""
    if _repository is None:
        return _unavailable()

    result = _repository.find(email).map(lambda record: record.to_dict())
    return build_fastapi_response(result, default_code=ErrorCode.NOT_FOUND)


@app.get("/health")
async def health() -> JSONResponse:
    """Liveness probe — 503 if startup failed or has not happened."""
    if _error_message:
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "error": _error_message},
        )
    if _handler is None:
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "reason": "handler not initialized"},
        )
    return JSONResponse(status_code=200, content={"status": "healthy"})


@app.get("/info")
async def info() -> dict[str, Any]:
    """Application metadata, used for debugging."""
    return {
        "name": "user-service",
        "version": "0.1.0",
        "initialized": _handler is not None,
        "users_stored": _repository.count() if _repository is not None else 0,
        "has_error": _error_message is not None,
    }
