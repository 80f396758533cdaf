"""Logging configuration and utilities."""

import logging
import sys
from typing import Any

import structlog
from structlog.processors import JSONRenderer, KeyValueRenderer, TimeStamper, add_log_level
from structlog.stdlib import add_logger_name, filter_by_level

from expense_tracker.core.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure structured logging.

    Binds the application name, environment, version and service name into
    the context of every event.
    """
    log_level = settings.app.log_level.upper()

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        add_log_level,
        add_logger_name,
        TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.observability.log_record_format == "json":
        processors.append(JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(log_level)),
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(
        app=settings.app.name,
        env=settings.app.env,
        version=settings.app.version,
        service=settings.observability.service_name,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger for a module.

    Until ``setup_logging`` runs, events go to the stdlib logger of the same
    name, so the host application's logging config decides what is shown.
    """
    if structlog.is_configured():
        return structlog.get_logger(name)
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[filter_by_level, add_log_level, KeyValueRenderer(key_order=["event"])],
    )


class LoggerMixin:
    """Mixin providing logger access."""

    @property
    def logger(self) -> structlog.BoundLogger:
        """Get logger for this instance."""
        return get_logger(self.__class__.__module__)
