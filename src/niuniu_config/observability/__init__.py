"""Observability module for logging and metrics."""

from niuniu_config.observability.logging import configure_logging, get_logger, parse_level
from niuniu_config.observability.metrics import LoaderMetrics


__all__ = [
    "LoaderMetrics",
    "configure_logging",
    "get_logger",
    "parse_level",
]
