"""Batch operations API for unisim.

This module provides a small, consolidated API for list-based batch
operations on strings. All functions are thin loops over the single-pair
functions in ``unisim``, choosing the symbol unit (code points or grapheme
clusters) once per call.

Example usage:
    >>> import unisim.batch as batch

    # Compute similarity of query against all strings
    >>> results = batch.similarity(["hello", "hallo", "world"], "helo")
    >>> [(r.text, r.score) for r in results]
    [('hello', 0.8), ('hallo', 0.6), ('world', 0.19999999999999996)]

    # Find top N best matches
    >>> matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
    >>> [(m.text, m.score) for m in matches]
    [('apple', 0.6), ('apply', 0.6)]

    # Pairwise similarity between aligned lists
    >>> batch.pairwise(["hello", "world"], ["hallo", "word"])
    [0.8, 0.8]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from unisim._core.errors import ValidationError
from unisim._core.levenshtein import levenshtein_similarity_grapheme, similarity_score
from unisim._utils import ensure_str, normalize_unit
from unisim.enums import Unit

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

__all__ = [
    "MatchResult",
    "similarity",
    "best_matches",
    "pairwise",
    "similarity_matrix",
]


@dataclass(frozen=True)
class MatchResult:
    """A scored candidate string.

    Attributes:
        text: The candidate string.
        score: Similarity to the query, 0.0 to 1.0.
        id: Index of the candidate in the input list.
    """

    text: str
    score: float
    id: int


def scorer_for(unit: str | Unit) -> Callable[[str, str], float]:
    """Return the single-pair similarity function for a unit."""
    if normalize_unit(unit) is Unit.GRAPHEME:
        return levenshtein_similarity_grapheme
    return similarity_score


def similarity(
    strings: Sequence[str],
    query: str,
    unit: str | Unit = "codepoint",
) -> list[MatchResult]:
    """Compute similarity of a query against all strings.

    Args:
        strings: Strings to compare against the query.
        query: The query string to match.
        unit: "codepoint" (default) or "grapheme".

    Returns:
        List of MatchResult objects in the same order as input strings.

    Raises:
        TypeError: If the query or any candidate is not a str.
    """
    ensure_str(query, "query")
    score = scorer_for(unit)
    return [MatchResult(text, score(text, query), i) for i, text in enumerate(strings)]


def best_matches(
    strings: Sequence[str],
    query: str,
    limit: int = 5,
    min_similarity: float = 0.0,
    unit: str | Unit = "codepoint",
) -> list[MatchResult]:
    """Find top N best matches for a query from a list of strings.

    Scores every string, drops those below ``min_similarity`` and returns
    the highest scores first. Equal scores keep input order.

    Args:
        strings: Strings to search.
        query: The query string to match.
        limit: Maximum number of results to return (default: 5).
        min_similarity: Minimum similarity score to include in results.
        unit: "codepoint" (default) or "grapheme".

    Raises:
        ValidationError: If limit is negative or min_similarity is outside [0, 1].

    Example:
        >>> [m.text for m in best_matches(["apple", "apply", "banana"], "appel", limit=1)]
        ['apple']
    """
    if limit < 0:
        raise ValidationError(f"limit must be non-negative, got {limit}")
    if not 0.0 <= min_similarity <= 1.0:
        raise ValidationError(f"min_similarity must be between 0.0 and 1.0, got {min_similarity}")

    scored = [r for r in similarity(strings, query, unit) if r.score >= min_similarity]
    scored.sort(key=lambda r: (-r.score, r.id))
    logger.debug(
        "best_matches: %d of %d candidates above %.3f", len(scored), len(strings), min_similarity
    )
    return scored[:limit]


def pairwise(
    left: Sequence[str],
    right: Sequence[str],
    unit: str | Unit = "codepoint",
) -> list[float]:
    """Similarity between aligned pairs of strings.

    Raises:
        ValidationError: If the lists differ in length.

    Example:
        >>> pairwise(["abc", ""], ["abd", ""])
        [0.6666666666666667, 1.0]
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have equal length, got {len(left)} and {len(right)}"
        )
    score = scorer_for(unit)
    return [score(a, b) for a, b in zip(left, right)]


def similarity_matrix(
    queries: Sequence[str],
    choices: Sequence[str],
    unit: str | Unit = "codepoint",
) -> list[list[float]]:
    """Full similarity matrix; ``matrix[i][j]`` compares queries[i] with choices[j]."""
    score = scorer_for(unit)
    logger.debug("similarity_matrix: %d x %d", len(queries), len(choices))
    return [[score(q, c) for c in choices] for q in queries]
