"""Structured logging configuration."""

import logging
import sys
from typing import TextIO

import structlog

from niuniu_config.config.schemas.base import LogLevel


LEVELS_BY_NAME: dict[LogLevel, int] = {
    LogLevel.TRACE: logging.DEBUG,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.PANIC: logging.CRITICAL,
}


def parse_level(name: str, default: int = logging.INFO) -> int:
    """Map a level name to a standard library logging level.

    Args:
        name: Level name, case-insensitive (e.g. 'warn', 'DEBUG').
        default: Level returned for empty or unrecognized names.

    Returns:
        Standard library logging level.
    """
    try:
        return LEVELS_BY_NAME[LogLevel(name.strip().lower())]
    except ValueError:
        return default


def configure_logging(
    level: int = logging.INFO,
    output: TextIO | None = None,
    json_format: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Logging level (default: INFO).
        output: Output stream (default: the current sys.stderr).
        json_format: Whether to use JSON format (default: True).
    """
    if output is None:
        output = sys.stderr

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=output.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=output,
        level=level,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a bound logger instance."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
