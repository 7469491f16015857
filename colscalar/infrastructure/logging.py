"""
Logging setup.

Library modules only create loggers; applications (and the CLI) call
``setup_logging`` once to decide where records go.
"""

import logging
import sys
from typing import Optional, TextIO

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
    force: bool = False,
) -> None:
    """
    Configure root logging for an application using colscalar.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string (uses default if None)
        stream: Output stream (stdout if None)
        force: Replace handlers already attached to the root logger
            (basicConfig is a no-op otherwise when handlers exist)

    Raises:
        ValueError: If level is not a known logging level
    """
    if level.upper() not in _LEVELS:
        raise ValueError(f"Invalid log level: {level}. Must be one of {list(_LEVELS)}")

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(stream or sys.stdout)],
        force=force,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get logger for a module.

    Args:
        name: Logger name (typically __name__)
    """
    return logging.getLogger(name)
