"""Tests for the unisim.batch module."""

import pytest

import unisim as us
from unisim import batch
from unisim.batch import MatchResult

THUMBS_MEDIUM = "\U0001F44D\U0001F3FD"
THUMBS_DARK = "\U0001F44D\U0001F3FF"


class TestMatchResult:
    """Tests for the MatchResult type."""

    def test_fields(self):
        result = MatchResult("apple", 0.6, 3)
        assert result.text == "apple"
        assert result.score == 0.6
        assert result.id == 3

    def test_frozen(self):
        result = MatchResult("apple", 0.6, 0)
        with pytest.raises(AttributeError):
            result.score = 1.0

    def test_equality(self):
        assert MatchResult("a", 1.0, 0) == MatchResult("a", 1.0, 0)


class TestSimilarity:
    """Tests for batch.similarity()."""

    def test_preserves_order(self):
        results = batch.similarity(["hello", "hallo", "world"], "helo")
        assert [r.text for r in results] == ["hello", "hallo", "world"]
        assert [r.id for r in results] == [0, 1, 2]
        assert results[0].score == 0.8

    def test_matches_single_pair(self):
        strings = ["kitten", "sitting", ""]
        results = batch.similarity(strings, "mitten")
        assert [r.score for r in results] == [us.similarity_score(s, "mitten") for s in strings]

    def test_empty_list(self):
        assert batch.similarity([], "query") == []

    def test_grapheme_unit(self):
        results = batch.similarity([THUMBS_MEDIUM], THUMBS_DARK, unit="grapheme")
        assert results[0].score == 0.0
        results = batch.similarity([THUMBS_MEDIUM], THUMBS_DARK)
        assert results[0].score == 0.5

    def test_non_str_query(self):
        with pytest.raises(TypeError):
            batch.similarity(["a"], None)

    def test_non_str_candidate(self):
        with pytest.raises(TypeError):
            batch.similarity(["a", 1], "a")

    def test_invalid_unit(self):
        with pytest.raises(us.ValidationError, match="Unknown unit"):
            batch.similarity(["a"], "a", unit="byte")


class TestBestMatches:
    """Tests for batch.best_matches()."""

    def test_sorted_by_score(self):
        matches = batch.best_matches(["banana", "apply", "apple"], "apple")
        assert [m.text for m in matches][:2] == ["apple", "apply"]
        scores = [m.score for m in matches]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_input_order(self):
        matches = batch.best_matches(["apply", "apple"], "appel")
        assert [m.text for m in matches] == ["apply", "apple"]
        assert [m.id for m in matches] == [0, 1]

    def test_limit(self):
        matches = batch.best_matches(["a", "b", "c", "d"], "a", limit=2)
        assert len(matches) == 2
        assert batch.best_matches(["a"], "a", limit=0) == []

    def test_min_similarity(self):
        matches = batch.best_matches(["hello", "help", "xyz"], "hello", min_similarity=0.5)
        assert [m.text for m in matches] == ["hello", "help"]

    def test_min_similarity_one_keeps_exact_only(self):
        matches = batch.best_matches(["abc", "abd", "abc"], "abc", min_similarity=1.0)
        assert [m.id for m in matches] == [0, 2]

    def test_negative_limit(self):
        with pytest.raises(us.ValidationError):
            batch.best_matches(["a"], "a", limit=-1)

    @pytest.mark.parametrize("bad", [-0.1, 1.5, float("nan")])
    def test_min_similarity_out_of_range(self, bad):
        with pytest.raises(us.ValidationError):
            batch.best_matches(["a"], "a", min_similarity=bad)

    def test_grapheme_unit(self):
        candidates = ["cafe", "caf\u00e9", "cafe\u0301"]
        matches = batch.best_matches(candidates, "caf\u00e9", unit="grapheme", limit=3)
        assert matches[0] == MatchResult("caf\u00e9", 1.0, 1)
        assert {m.text for m in matches[1:]} == {"cafe", "cafe\u0301"}


class TestPairwise:
    """Tests for batch.pairwise()."""

    def test_basic(self):
        assert batch.pairwise(["hello", "world"], ["hallo", "word"]) == [0.8, 0.8]

    def test_empty_pairs(self):
        assert batch.pairwise(["", "a"], ["", ""]) == [1.0, 0.0]
        assert batch.pairwise([], []) == []

    def test_length_mismatch(self):
        with pytest.raises(us.ValidationError, match="equal length"):
            batch.pairwise(["a", "b"], ["a"])

    def test_grapheme_unit(self):
        scores = batch.pairwise(["caf\u00e9"], ["cafe\u0301"], unit=us.Unit.GRAPHEME)
        assert scores == [0.75]


class TestSimilarityMatrix:
    """Tests for batch.similarity_matrix()."""

    def test_shape(self):
        matrix = batch.similarity_matrix(["a", "b", "c"], ["a", "b"])
        assert len(matrix) == 3
        assert all(len(row) == 2 for row in matrix)

    def test_values(self):
        matrix = batch.similarity_matrix(["abc", "xyz"], ["abc", "abd"])
        assert matrix[0][0] == 1.0
        assert matrix[0][1] == pytest.approx(2 / 3)
        assert matrix[1][0] == 0.0

    def test_empty(self):
        assert batch.similarity_matrix([], ["a"]) == []
        assert batch.similarity_matrix(["a"], []) == [[]]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
