"""
Tests for Phase 3: Frequency Classification.

These tests verify:
1. Tier boundaries, including zero landing in FREQUENT
2. Each tier has a distinct color
3. The word keeps its original casing and punctuation
"""

import pytest
from termcolor import colored

from freqcolor.classify import (
    TIER_COLORS,
    color_word,
    colorize,
    compute_tier,
)
from freqcolor.domain import FrequencyTier


BLUE = "\x1b[34m"
GREEN = "\x1b[32m"
RED = "\x1b[31m"
RESET = "\x1b[0m"


# =============================================================================
# TIER BOUNDARY TESTS
# =============================================================================

class TestComputeTier:
    """Test count to tier mapping."""

    @pytest.mark.parametrize(
        "count,expected",
        [
            (0, FrequencyTier.FREQUENT),
            (1, FrequencyTier.RARE),
            (2, FrequencyTier.COMMON),
            (5, FrequencyTier.COMMON),
            (6, FrequencyTier.FREQUENT),
            (1000, FrequencyTier.FREQUENT),
        ],
    )
    def test_boundaries(self, count, expected):
        assert compute_tier(count) == expected

    def test_zero_shares_tier_with_very_frequent(self):
        assert compute_tier(0) == compute_tier(6)


# =============================================================================
# COLORING TESTS
# =============================================================================

class TestColorWord:
    """Test tier colors applied to words."""

    def test_tier_colors_are_distinct(self):
        assert len(set(TIER_COLORS.values())) == len(FrequencyTier)

    def test_rare_is_blue(self):
        assert color_word("sat", 1) == f"{BLUE}sat{RESET}"

    def test_common_is_green(self):
        assert color_word("the", 3) == f"{GREEN}the{RESET}"

    def test_frequent_is_red(self):
        assert color_word("and", 6) == f"{RED}and{RESET}"

    def test_absent_word_is_red(self):
        assert color_word("co", 0) == f"{RED}co{RESET}"

    def test_preserves_original_text(self):
        assert "The" in color_word("The", 3)
        assert "Don't" in color_word("Don't", 1)

    def test_color_off_returns_plain_word(self):
        assert color_word("The", 3, color=False) == "The"

    def test_empty_word_stays_empty(self):
        assert colorize("", FrequencyTier.RARE) == ""

    def test_tiers_use_termcolor_names(self):
        assert TIER_COLORS == {
            FrequencyTier.RARE: "blue",
            FrequencyTier.COMMON: "green",
            FrequencyTier.FREQUENT: "red",
        }

    def test_forced_color_matches_termcolor(self):
        """color=True delegates to termcolor with force_color."""
        assert colorize("sat", FrequencyTier.RARE) == colored("sat", "blue", force_color=True)

    def test_forced_color_ignores_no_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")

        assert color_word("sat", 1, color=True) == f"{BLUE}sat{RESET}"
