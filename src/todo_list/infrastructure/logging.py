"""Structured logging configuration.

Every log line carries the service name and version. Request-scoped
values (request id, HTTP method, path) are bound through structlog
contextvars by the REST adapter and merged into every event logged while
that request is handled, including events from the service and storage.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

# Loggers that duplicate our own request logging at INFO
_NOISY_LOGGERS = ("uvicorn.access",)


def _service_context(service_name: str) -> Processor:
    from todo_list import __version__

    def add_service(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service_name)
        event_dict.setdefault("version", __version__)
        return event_dict

    return add_service


def setup_logging(
    level: str = "INFO",
    log_format: str = "json",
    service_name: str = "todo_list",
) -> None:
    """
    Set up structured logging with structlog.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: 'json' for one object per line, 'console' for humans
        service_name: Value of the ``service`` field on every event
    """
    numeric_level = getattr(logging, level.upper())
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        _service_context(service_name),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="ts"),
        structlog.processors.format_exc_info,
    ]
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """Get a bound logger, optionally pre-bound with ``initial_context``."""
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger


def bind_request_context(**values: Any) -> None:
    """Attach values to every event logged in the current context."""
    structlog.contextvars.bind_contextvars(**values)


def clear_request_context() -> None:
    """Drop all values bound with ``bind_request_context``."""
    structlog.contextvars.clear_contextvars()
