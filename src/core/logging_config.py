"""Structured logging configuration.

This module initializes structlog with a stable JSON event format.
Events go to stderr so CLI stdout stays machine-readable.
"""

from __future__ import annotations

import sys
from typing import Any

import structlog


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
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )
    return structlog.get_logger(name)


def _stderr_logger_factory(*_args: Any) -> structlog.PrintLogger:
    """Create a print logger bound to the current stderr stream.

    The stream is looked up per call so redirected stderr is honored.
    """
    return structlog.PrintLogger(file=sys.stderr)
