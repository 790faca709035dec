"""Structured logging configuration.

This module initializes structlog with a stable structured format.
Events render as JSON lines on stderr so command output stays clean.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.config import log_level_from_env

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_log_level()),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
    return structlog.get_logger(name)


def _resolve_log_level() -> int:
    """Map the configured level name onto a stdlib level number."""
    return _LEVELS[log_level_from_env()]
