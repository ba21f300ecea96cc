"""
Core Domain Objects for freqcolor.

Domain Objects:
    Document        — Raw text of the input file
    FrequencyTable  — Immutable word -> count mapping over the whole document
    FrequencyTier   — Display tier derived from a word's count
    DisplayToken    — One rendered token with its count and tier
    DisplayLine     — Ordered tokens of one rendered line
    FileReadError   — The single failure mode: the input could not be read

The frequency table is built once from the entire document and never
mutated afterwards. Only the first lines are rendered, so every tier
reflects the global count.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator


# =============================================================================
# ERRORS
# =============================================================================

class FileReadError(Exception):
    """Raised when the input file is missing, unreadable or undecodable."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Error reading file '{path}': {reason}")


# =============================================================================
# DOCUMENT
# =============================================================================

@dataclass(frozen=True)
class Document:
    """The full text of the input file, held for the process lifetime."""
    text: str
    source: str

    @property
    def is_empty(self) -> bool:
        return not self.text


# =============================================================================
# FREQUENCY TABLE
# =============================================================================

class FrequencyTable(Mapping):
    """
    Read-only mapping from normalized word to occurrence count.

    Keys are lowercase ASCII words; values are positive integers.
    Lookups of unknown words through count() return 0.
    """

    __slots__ = ("_counts",)

    def __init__(self, counts: Mapping[str, int] | None = None):
        frozen = dict(counts or {})
        for word, count in frozen.items():
            if count <= 0:
                raise ValueError(f"count for '{word}' must be positive, got {count}")
        self._counts = MappingProxyType(frozen)

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> FrequencyTable:
        """Count an iterable of already-normalized tokens."""
        counts: dict[str, int] = {}
        for token in tokens:
            counts[token] = counts.get(token, 0) + 1
        return cls(counts)

    def __getitem__(self, word: str) -> int:
        return self._counts[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"FrequencyTable({dict(self._counts)!r})"

    def count(self, word: str) -> int:
        """Occurrences of word, 0 if it never survived normalization."""
        return self._counts.get(word, 0)

    @property
    def total(self) -> int:
        """Total number of counted tokens."""
        return sum(self._counts.values())

    def most_common(self, n: int | None = None) -> list[tuple[str, int]]:
        """Entries by descending count, ties broken alphabetically."""
        ordered = sorted(self._counts.items(), key=lambda kv: (-kv[1], kv[0]))
        return ordered if n is None else ordered[:n]


# =============================================================================
# DISPLAY
# =============================================================================

class FrequencyTier(Enum):
    """
    Display tiers by global count.

    - RARE: exactly one occurrence
    - COMMON: two to five occurrences
    - FREQUENT: six or more, and also zero (a rendered token whose
      lowercase form is absent from the table)
    """
    RARE = "rare"
    COMMON = "common"
    FREQUENT = "frequent"


@dataclass(frozen=True)
class DisplayToken:
    """A token as it appeared in the line, with its resolved tier."""
    text: str
    count: int
    tier: FrequencyTier


@dataclass(frozen=True)
class DisplayLine:
    """One rendered line. Built and printed immediately."""
    tokens: tuple[DisplayToken, ...]

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[DisplayToken]:
        return iter(self.tokens)
