"""
Configuration constants for freqcolor.

Values are fixed at import time. The CLI can override the path, the
line limit and the log level per run; tier thresholds are not tunable.
"""

import os
from typing import Optional


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

# Input
DEFAULT_PATH = os.getenv("FREQCOLOR_PATH", "declaration.txt")
ENCODING = "utf-8"

# Rendering
LINE_LIMIT = 15

# Tier thresholds (inclusive)
RARE_MAX = 1
COMMON_MIN = 2
COMMON_MAX = 5

# Logging
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
FALLBACK_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s - %(name)s - %(message)s"


def resolve_log_level(value: Optional[str]) -> str:
    """Normalize a level name, falling back to WARNING when unset or unknown."""
    if value:
        level = value.strip().upper()
        if level in LOG_LEVELS:
            return level
    return FALLBACK_LOG_LEVEL


DEFAULT_LOG_LEVEL = resolve_log_level(os.getenv("FREQCOLOR_LOG_LEVEL"))
