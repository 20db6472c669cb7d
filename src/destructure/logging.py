"""Structlog-based logging for destructure.

Log lines go to stderr; stdout is reserved for demonstration output.
Loggers are not cached, so a later configure_logging() call applies to
module loggers that have already been used.
"""
from __future__ import annotations

import logging
import sys
from typing import Literal

import structlog

from .config import CONFIG, LOG_LEVELS

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(level: LogLevel = "INFO") -> None:
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}; choose from {', '.join(LOG_LEVELS)}")
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=getattr(logging, level))
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str = "destructure"):
    return structlog.get_logger(name)


# Initialize default config
configure_logging(CONFIG.log_level)
