"""Tests for Levenshtein distance and the derived similarity score.

This module tests the edit distance core provided by unisim, including the
bounded, grapheme-mode and case-insensitive variants.
"""

import pytest

import unisim as us


class TestEditDistance:
    """Tests for edit_distance()."""

    def test_identical_strings(self):
        assert us.edit_distance("hello", "hello") == 0, "Identical strings should have distance 0"
        assert us.edit_distance("", "") == 0, "Two empty strings should have distance 0"

    def test_empty_strings(self):
        assert us.edit_distance("hello", "") == 5, "Distance to empty string equals string length"
        assert us.edit_distance("", "hello") == 5, "Distance from empty string equals target length"

    def test_classic_examples(self):
        # kitten -> sitten (s for k) -> sittin (i for e) -> sitting (g added) = 3 edits
        assert us.edit_distance("kitten", "sitting") == 3, "kitten->sitting requires 3 edits"
        assert us.edit_distance("saturday", "sunday") == 3, "saturday->sunday requires 3 edits"
        assert us.edit_distance("hello", "hallo") == 1

    def test_transposition_costs_two(self):
        assert us.edit_distance("ab", "ba") == 2

    def test_case_sensitive(self):
        assert us.edit_distance("A", "a") == 1
        assert us.edit_distance("Hello", "HELLO") == 4

    def test_no_unicode_normalization(self):
        # precomposed vs decomposed: U+00E9 vs e + U+0301
        assert us.edit_distance("caf\u00e9", "cafe\u0301") == 2
        assert us.edit_distance("caf\u00e9", "cafe") == 1

    def test_cjk(self):
        assert us.edit_distance("日本語", "日本") == 1

    def test_alias(self):
        assert us.levenshtein is us.edit_distance
        assert us.levenshtein_similarity is us.similarity_score


class TestMaxDistance:
    """Tests for max_distance early termination."""

    def test_exceeded_returns_max_plus_one(self):
        assert us.edit_distance("abcdef", "ghijkl", max_distance=3) == 4
        assert us.edit_distance("abc", "xyz", max_distance=2) == 3

    def test_within_threshold(self):
        assert us.edit_distance("abc", "abd", max_distance=2) == 1
        assert us.edit_distance("kitten", "sitting", max_distance=3) == 3

    def test_length_difference_short_circuit(self):
        assert us.edit_distance("a", "abcdefgh", max_distance=2) == 3

    def test_zero_max_distance(self):
        assert us.edit_distance("abc", "abc", max_distance=0) == 0
        assert us.edit_distance("abc", "abd", max_distance=0) == 1

    def test_bounded_variant(self):
        assert us.edit_distance_bounded("abc", "abd", max_distance=2) == 1
        assert us.edit_distance_bounded("abcdef", "ghijkl", max_distance=3) is None
        assert us.edit_distance_bounded("", "", max_distance=0) == 0

    def test_negative_max_distance_raises(self):
        with pytest.raises(us.ValidationError):
            us.edit_distance("a", "b", max_distance=-1)
        with pytest.raises(us.ValidationError):
            us.edit_distance_bounded("a", "b", max_distance=-1)


class TestSimilarityScore:
    """Tests for similarity_score()."""

    def test_identical(self):
        assert us.similarity_score("hello", "hello") == 1.0

    def test_both_empty(self):
        assert us.similarity_score("", "") == 1.0

    def test_one_empty(self):
        assert us.similarity_score("abc", "") == 0.0
        assert us.similarity_score("", "abc") == 0.0

    def test_one_edit(self):
        # "hello" vs "hallo": 1 edit out of 5 chars = 0.8 similarity
        assert us.similarity_score("hello", "hallo") == 0.8

    def test_completely_different(self):
        assert us.similarity_score("abc", "def") == 0.0

    def test_uses_longer_length(self):
        # kitten/sitting: 3 edits over 7 chars
        assert us.similarity_score("kitten", "sitting") == pytest.approx(1 - 3 / 7)

    def test_returns_float(self):
        assert isinstance(us.similarity_score("a", "a"), float)
        assert isinstance(us.similarity_score("a", ""), float)


class TestGraphemeMode:
    """Tests for grapheme cluster mode distance and similarity."""

    def test_skin_tone_counts_as_one_substitution(self):
        thumbs_medium = "\U0001F44D\U0001F3FD"
        thumbs = "\U0001F44D"
        assert us.levenshtein_grapheme(thumbs_medium, thumbs) == 1
        assert us.levenshtein_grapheme(thumbs_medium + "a", thumbs + "a") == 1

    def test_family_emoji(self):
        zwj = "\u200d"
        family = zwj.join(["\U0001F468", "\U0001F469", "\U0001F467", "\U0001F466"])
        smaller = zwj.join(["\U0001F468", "\U0001F469", "\U0001F467"])
        assert us.edit_distance(family, smaller) == 2
        assert us.levenshtein_grapheme(family, smaller) == 1

    def test_combining_mark(self):
        assert us.levenshtein_grapheme("cafe\u0301", "cafe") == 1
        assert us.edit_distance("cafe\u0301", "cafe") == 1

    def test_similarity(self):
        assert us.levenshtein_similarity_grapheme("caf\u00e9", "cafe") == 0.75
        assert us.levenshtein_similarity_grapheme("", "") == 1.0
        assert us.levenshtein_similarity_grapheme("\U0001F44D\U0001F3FD", "") == 0.0

    def test_flags(self):
        us_flag = "\U0001F1FA\U0001F1F8"
        gb_flag = "\U0001F1EC\U0001F1E7"
        assert us.levenshtein_grapheme(us_flag + gb_flag, gb_flag + us_flag) == 2
        assert us.levenshtein_similarity_grapheme(us_flag, gb_flag) == 0.0


class TestCaseInsensitive:
    """Tests for case-insensitive variants."""

    def test_levenshtein_ci(self):
        assert us.levenshtein_ci("HELLO", "hello") == 0
        assert us.levenshtein_ci("HeLLo", "hallo") == 1

    def test_similarity_ci(self):
        assert us.levenshtein_similarity_ci("HELLO", "hello") == 1.0
        assert us.levenshtein_similarity_ci("", "") == 1.0
        assert us.levenshtein_similarity_ci("hello", "") == 0.0


class TestVeryLongStrings:
    """Tests verifying long strings complete with the two-row buffer."""

    def test_long_distinct(self):
        long_a = "a" * 1000
        long_b = "b" * 1000
        assert us.edit_distance(long_a, long_b) == 1000

    def test_long_with_bound(self):
        long_a = "a" * 5000
        long_b = "b" * 5000
        assert us.edit_distance(long_a, long_b, max_distance=10) == 11


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
