"""
Line rendering for freqcolor.

Renders the first lines of the original text. Each line is split on
runs of non-word characters (anything but ASCII letters, digits and
underscore), so "co-op" becomes "co" and "op" here while the counter
saw "coop". Each token is looked up in lowercase and displayed in its
original casing.
"""

from __future__ import annotations

import re
import sys
from typing import Optional, TextIO

from .classify import colorize, compute_tier
from .config import LINE_LIMIT
from .domain import DisplayLine, DisplayToken, FrequencyTable


_NON_WORD_PATTERN = re.compile(r"\W+", re.ASCII)


# =============================================================================
# TOKENIZATION
# =============================================================================

def split_lines(content: str, limit: int = LINE_LIMIT) -> list[str]:
    """
    First `limit` newline-separated segments of content.

    Empty content has no lines. Otherwise a trailing newline yields a
    final empty segment, which renders as a blank line.
    """
    if not content:
        return []
    return content.split("\n")[:limit]


def tokenize_line(line: str) -> list[str]:
    """Split a line on non-word characters, keeping original casing."""
    return [token for token in _NON_WORD_PATTERN.split(line) if token]


# =============================================================================
# DISPLAY LINES
# =============================================================================

def build_display_line(line: str, table: FrequencyTable) -> DisplayLine:
    """Resolve every token on the line against the global table."""
    tokens = []
    for raw in tokenize_line(line):
        count = table.count(raw.lower())
        tokens.append(DisplayToken(text=raw, count=count, tier=compute_tier(count)))
    return DisplayLine(tokens=tuple(tokens))


def format_display_line(display_line: DisplayLine, color: Optional[bool] = True) -> str:
    """Join colored tokens with single spaces and one trailing space."""
    colored = [colorize(token.text, token.tier, color=color) for token in display_line]
    return " ".join(colored) + " "


def render_lines(
    content: str,
    table: FrequencyTable,
    limit: int = LINE_LIMIT,
    color: Optional[bool] = True,
) -> list[str]:
    """Render up to `limit` lines of content as display strings."""
    return [
        format_display_line(build_display_line(line, table), color=color)
        for line in split_lines(content, limit)
    ]


def print_colored_lines(
    content: str,
    table: FrequencyTable,
    stream: Optional[TextIO] = None,
    limit: int = LINE_LIMIT,
    color: Optional[bool] = True,
) -> int:
    """
    Print the first lines of content with every word colored.

    Args:
        content: Full document text
        table: Frequency table built from the same content
        stream: Destination (stdout if None)
        limit: Maximum number of lines
        color: True forces ANSI colors, False disables them, None auto-detects

    Returns:
        Number of lines printed
    """
    out = stream if stream is not None else sys.stdout
    rendered = render_lines(content, table, limit=limit, color=color)
    for line in rendered:
        out.write(line + "\n")
    return len(rendered)
