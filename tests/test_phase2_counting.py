"""
Tests for Phase 2: Word Counting.

These tests verify:
1. Normalization strips everything but a-z and whitespace before splitting
2. Counts are positive and sum to the token count
3. Counting is deterministic
"""

from freqcolor.counting import get_word_counts, normalize_text, tokenize_for_counting


SAMPLE_TEXT = "the cat sat on the mat. The cat ran."


# =============================================================================
# NORMALIZATION TESTS
# =============================================================================

class TestNormalization:
    """Test text normalization before splitting."""

    def test_lowercases(self):
        assert normalize_text("The CAT") == "the cat"

    def test_strips_punctuation_and_digits(self):
        assert normalize_text("Hello, world! 42 times.") == "hello world  times"

    def test_strips_non_ascii_letters(self):
        assert normalize_text("café") == "caf"

    def test_joins_hyphenated_and_contracted_words(self):
        """Characters are removed before splitting, so no new boundaries appear."""
        assert tokenize_for_counting("co-op don't") == ["coop", "dont"]

    def test_splits_on_any_whitespace(self):
        assert tokenize_for_counting("a\tb\n\nc   d") == ["a", "b", "c", "d"]

    def test_drops_tokens_that_normalize_to_nothing(self):
        assert tokenize_for_counting("123 !!! -- a") == ["a"]


# =============================================================================
# COUNTING TESTS
# =============================================================================

class TestGetWordCounts:
    """Test building the frequency table."""

    def test_sample_scenario(self):
        table = get_word_counts(SAMPLE_TEXT)

        assert dict(table) == {
            "the": 3,
            "cat": 2,
            "sat": 1,
            "on": 1,
            "mat": 1,
            "ran": 1,
        }

    def test_values_positive_and_sum_to_token_count(self):
        text = "Fourscore and seven years ago, our fathers brought forth... and, AND!"
        table = get_word_counts(text)

        assert all(count > 0 for count in table.values())
        assert sum(table.values()) == len(tokenize_for_counting(text))
        assert table.total == len(tokenize_for_counting(text))

    def test_counting_is_idempotent(self):
        assert get_word_counts(SAMPLE_TEXT) == get_word_counts(SAMPLE_TEXT)

    def test_empty_text_gives_empty_table(self):
        table = get_word_counts("")

        assert len(table) == 0
        assert table.total == 0

    def test_counts_whole_document_not_just_first_lines(self):
        text = "\n".join(["alpha"] * 20)

        assert get_word_counts(text)["alpha"] == 20

    def test_counter_keys_for_hyphen_and_apostrophe(self):
        table = get_word_counts("co-op don't")

        assert set(table) == {"coop", "dont"}


# =============================================================================
# WHITESPACE CLASS TESTS
# =============================================================================

class TestWhitespaceClass:
    """Test the exact set of characters that separate counted words."""

    def test_byte_order_mark_separates_words(self):
        assert tokenize_for_counting("a\ufeffb") == ["a", "b"]

    def test_information_separators_are_stripped(self):
        """U+001C to U+001F are not whitespace here, so they are deleted."""
        for separator in ("\x1c", "\x1d", "\x1e", "\x1f"):
            assert tokenize_for_counting(f"a{separator}b") == ["ab"]

    def test_unicode_spaces_separate_words(self):
        for space in ("\u00a0", "\u2003", "\u3000", "\u2028"):
            assert tokenize_for_counting(f"a{space}b") == ["a", "b"]

    def test_vertical_tab_and_form_feed_separate_words(self):
        assert tokenize_for_counting("a\vb\fc") == ["a", "b", "c"]
