"""Structured logging setup.

Logs go to stderr so stdout stays free for tool output. Call
``configure_logging`` once at startup and acquire loggers with
``get_logger(name)``.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.stdlib import LoggerFactory, add_logger_name

LOG_FORMATS = ("console", "json")


def configure_logging(log_level: str = "INFO", log_format: str = "console") -> None:
    """Configure stdlib logging and structlog.

    Parameters
    - log_level: ``DEBUG``, ``INFO``, ``WARNING``, ``ERROR`` (case-insensitive)
    - log_format: ``json`` for machine consumption, ``console`` for humans
    """

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{log_level}'")
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unknown log format '{log_format}'. Expected one of: {', '.join(LOG_FORMATS)}")

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_logger_name,
    ]
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
