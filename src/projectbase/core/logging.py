"""Logging configuration using structlog."""

import logging
import sys

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars


def setup_logging(debug: bool = False) -> None:
    """Configure structlog for structured logging.

    Args:
        debug: If True, use colored console output. If False, use JSON for production.
    """
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: list[structlog.typing.Processor]
    if debug:
        renderer = [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        # Tracebacks become a string field so each event stays one JSON line
        renderer = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    processors = shared_processors + renderer

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for noisy in ("sqlalchemy.engine", "aiosqlite", "asyncio", "httpx"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO if debug else logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance."""
    return structlog.get_logger(name)


def bind_request_context(request_id: str | None) -> None:
    """Bind request-level context to all subsequent log calls.

    Args:
        request_id: The correlation ID for the current request.
    """
    if request_id:
        bind_contextvars(request_id=request_id)


def bind_admin_context(admin_id: int, open_id: str | None = None) -> None:
    """Bind the authorized operator to all subsequent log calls.

    Args:
        admin_id: ID of the admin account from the admin session.
        open_id: External identifier of the end-user identity, if resolved.
    """
    bind_contextvars(admin_id=admin_id)
    if open_id:
        bind_contextvars(open_id=open_id)


def bind_project_context(project_id: int) -> None:
    """Bind the project resolved from an API key."""
    bind_contextvars(project_id=project_id)


def clear_request_context() -> None:
    """Clear all request-scoped context."""
    clear_contextvars()
