"""
Word counting for freqcolor.

Normalization happens on the whole text before splitting:
    1. Lowercase
    2. Drop every character that is not a-z or whitespace
    3. Split on whitespace runs, discarding empties

Because characters are dropped before the split, "co-op" counts as
"coop" and "don't" as "dont". Digits and non-ASCII letters disappear.
"""

from __future__ import annotations

import logging
import re

from .domain import FrequencyTable

logger = logging.getLogger(__name__)


# =============================================================================
# NORMALIZATION
# =============================================================================

# Whitespace as the counting rules define it: includes U+FEFF, excludes U+001C-U+001F
_WHITESPACE = "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

_NON_LETTER_PATTERN = re.compile(f"[^a-z{_WHITESPACE}]")
_WHITESPACE_PATTERN = re.compile(f"[{_WHITESPACE}]+")


def normalize_text(content: str) -> str:
    """Lowercase and strip everything except a-z and whitespace."""
    return _NON_LETTER_PATTERN.sub("", content.lower())


def tokenize_for_counting(content: str) -> list[str]:
    """Split normalized text into non-empty words."""
    return [word for word in _WHITESPACE_PATTERN.split(normalize_text(content)) if word]


# =============================================================================
# COUNTING
# =============================================================================

def get_word_counts(content: str) -> FrequencyTable:
    """
    Build the frequency table for the whole document.

    Args:
        content: Full document text

    Returns:
        FrequencyTable of normalized word -> count. Empty for empty input.
    """
    tokens = tokenize_for_counting(content)
    table = FrequencyTable.from_tokens(tokens)

    logger.debug("Counted %d tokens, %d unique", len(tokens), len(table))
    return table
