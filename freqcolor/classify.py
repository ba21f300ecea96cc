"""
Frequency classification for freqcolor.

A word's global count maps to one of three tiers, and each tier to a
fixed terminal color:

    count == 1          -> RARE      (blue)
    2 <= count <= 5     -> COMMON    (green)
    count == 0 or >= 6  -> FREQUENT  (red)

Zero lands in FREQUENT. Rendered tokens are split differently from
counted ones, so a rendered token can miss the table entirely.
"""

from __future__ import annotations

from typing import Optional

from termcolor import colored

from .config import COMMON_MAX, COMMON_MIN, RARE_MAX
from .domain import FrequencyTier


# =============================================================================
# TIER ASSIGNMENT
# =============================================================================

def compute_tier(count: int) -> FrequencyTier:
    """Assign a tier from a global occurrence count."""
    if count == RARE_MAX:
        return FrequencyTier.RARE
    elif COMMON_MIN <= count <= COMMON_MAX:
        return FrequencyTier.COMMON
    else:
        return FrequencyTier.FREQUENT


# =============================================================================
# STYLING
# =============================================================================

TIER_COLORS = {
    FrequencyTier.RARE: "blue",
    FrequencyTier.COMMON: "green",
    FrequencyTier.FREQUENT: "red",
}


def colorize(word: str, tier: FrequencyTier, color: Optional[bool] = True) -> str:
    """
    Wrap word in its tier's color.

    Args:
        word: Text to style, emitted unchanged apart from the color
        tier: Frequency tier selecting the color
        color: True forces ANSI colors, False disables them, None lets
            termcolor decide from NO_COLOR, FORCE_COLOR and the terminal
    """
    if color is False or not word:
        return word
    return colored(word, TIER_COLORS[tier], force_color=color or None)


def color_word(word: str, count: int, color: Optional[bool] = True) -> str:
    """Color a word, as it appeared in the text, by its global count."""
    return colorize(word, compute_tier(count), color=color)
