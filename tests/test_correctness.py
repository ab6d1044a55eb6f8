"""
Correctness verification tests for unisim.

Compares unisim results with RapidFuzz, an established edit distance library.
RapidFuzz works on code points, so these checks cover the code point
functions only.

These tests ensure mathematical correctness and compatibility.
"""

import pytest
from rapidfuzz import distance as rf_distance

import unisim as us


class TestLevenshteinCorrectness:
    """Verify Levenshtein distance matches RapidFuzz."""

    TEST_PAIRS = [
        ("kitten", "sitting"),
        ("hello", "hallo"),
        ("world", "word"),
        ("", "test"),
        ("test", ""),
        ("", ""),
        ("same", "same"),
        ("abcdef", "azced"),
        ("Saturday", "Sunday"),
        ("intention", "execution"),
        ("caf\u00e9", "cafe\u0301"),
        ("\U0001F44D\U0001F3FD", "\U0001F44D"),
        ("日本語", "日本"),
    ]

    def test_levenshtein_matches_rapidfuzz(self):
        """Levenshtein distance should match RapidFuzz exactly."""
        for s1, s2 in self.TEST_PAIRS:
            us_result = us.edit_distance(s1, s2)
            rf_result = rf_distance.Levenshtein.distance(s1, s2)
            assert us_result == rf_result, f"Mismatch for {s1!r}, {s2!r}: {us_result} vs {rf_result}"

    def test_similarity_matches_rapidfuzz(self):
        """Similarity should match RapidFuzz normalized similarity."""
        for s1, s2 in self.TEST_PAIRS:
            us_result = us.similarity_score(s1, s2)
            rf_result = rf_distance.Levenshtein.normalized_similarity(s1, s2)
            assert us_result == pytest.approx(rf_result, abs=0.001), \
                f"Mismatch for {s1!r}, {s2!r}: {us_result} vs {rf_result}"

    def test_bounded_matches_rapidfuzz_cutoff(self):
        """A distance above max_distance reports max_distance + 1, like score_cutoff."""
        for s1, s2 in self.TEST_PAIRS:
            for cutoff in range(4):
                us_result = us.edit_distance(s1, s2, max_distance=cutoff)
                rf_result = rf_distance.Levenshtein.distance(s1, s2, score_cutoff=cutoff)
                assert us_result == rf_result, f"Mismatch for {s1!r}, {s2!r} at {cutoff}"


class TestGraphemeCorrectness:
    """Grapheme distance equals RapidFuzz over pre-segmented cluster lists."""

    TEST_PAIRS = [
        ("\U0001F44D\U0001F3FDa", "\U0001F44Da"),
        ("cafe\u0301", "cafe"),
        ("\U0001F1FA\U0001F1F8\U0001F1EC\U0001F1E7", "\U0001F1EC\U0001F1E7"),
        ("안녕", "안녕하세요"),
    ]

    def test_grapheme_matches_rapidfuzz_on_clusters(self):
        for s1, s2 in self.TEST_PAIRS:
            expected = rf_distance.Levenshtein.distance(us.segment(s1), us.segment(s2))
            assert us.levenshtein_grapheme(s1, s2) == expected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
