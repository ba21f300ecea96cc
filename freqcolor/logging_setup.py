"""Logging configuration for freqcolor."""

import logging
import sys
from typing import Optional, TextIO

from .config import DEFAULT_LOG_LEVEL, LOG_FORMAT, resolve_log_level


def setup_logging(log_level: str = DEFAULT_LOG_LEVEL, stream: Optional[TextIO] = None) -> None:
    """Send package logs to stderr at the given level."""
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger("freqcolor")
    # Repeated CLI invocations in one process must not stack handlers
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(resolve_log_level(log_level))
    package_logger.propagate = False
