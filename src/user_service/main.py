"""
Application entry point — wires dependencies and starts the HTTP server.

Composition root: creates concrete adapters and injects them into the
update-user pipeline. This is the ONLY place where concrete classes are
instantiated; everything else depends on Protocol interfaces.

Responsibilities:
  1. Configure structlog
  2. Load and validate configuration from environment
  3. Create the repository and notifier adapters
  4. Wrap the pipeline in a logging execution context
  5. Start uvicorn
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any

import structlog
from rop.execution import LoggingExecutionContext, with_context
from rop.result import Result

from user_service.adapters.notifier import HttpNotifier, LogNotifier
from user_service.adapters.repository import InMemoryUserRepository
from user_service.config import AppSettings
from user_service.domain.models import UserRequest
from user_service.domain.ports import Notifier
from user_service.pipeline import update_user_result

type Handler = Callable[[UserRequest], Result[UserRequest, Any]]


def configure_structlog(log_level: str = "INFO") -> None:
    """Configure structlog for human-readable console output at the given level."""
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.INFO))
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _create_adapters(settings: AppSettings) -> tuple[InMemoryUserRepository, Notifier]:
    """Instantiate the repository and the notifier selected by the settings."""
    repository = InMemoryUserRepository()
    notifier: Notifier
    if settings.notifier.url:
        notifier = HttpNotifier(
            url=settings.notifier.url,
            timeout=settings.notifier.timeout_seconds,
        )
    else:
        notifier = LogNotifier()
    return repository, notifier


def create_handler(
    settings: AppSettings,
    repository: InMemoryUserRepository,
    notifier: Notifier,
) -> Handler:
    """Bind the adapters into a single-argument handler run inside a logging context."""

    @with_context(LoggingExecutionContext(operation="UpdateUser"))
    def handle(request: UserRequest) -> Result[UserRequest, Any]:
        return update_user_result(
            request,
            repository=repository,
            notifier=notifier,
            max_name_length=settings.name_max_length,
        )

    return handle


def main() -> None:
    """Load settings and serve the ASGI app."""
    try:
        settings = AppSettings()
    except Exception as e:
        print(f"FATAL: Configuration error: {e}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    configure_structlog(settings.log_level)
    log = structlog.get_logger()

    log.info(
        "app.starting",
        version="0.1.0",
        log_level=settings.log_level,
        notifier="http" if settings.notifier.url else "log",
        name_max_length=settings.name_max_length,
    )

    import uvicorn

    uvicorn.run(
        "user_service.asgi:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
