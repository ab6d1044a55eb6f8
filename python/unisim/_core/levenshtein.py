"""Levenshtein edit distance and the similarity score derived from it.

Distances are computed over sequences of symbols. For the plain functions a
symbol is one element of the Python string (a code point); the grapheme
variants feed the same routine lists of grapheme clusters. No case folding
or Unicode normalization happens unless asked for through ``normalize``.
"""

from typing import Optional, Sequence, Union

from unisim._core.grapheme import segment
from unisim._core.normalize import normalize_pair
from unisim._utils import check_max_distance, ensure_str
from unisim.enums import NormalizationMode

Mode = Optional[Union[str, NormalizationMode]]


def _distance(a: Sequence, b: Sequence, max_distance: Optional[int] = None) -> int:
    """Two-row Levenshtein over arbitrary sequences of comparable symbols.

    Returns ``max_distance + 1`` as soon as every cell of a row exceeds
    ``max_distance``.
    """
    if len(a) < len(b):
        a, b = b, a
    if max_distance is not None and len(a) - len(b) > max_distance:
        return max_distance + 1
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, sym_a in enumerate(a, start=1):
        current = [i]
        row_min = i
        for j, sym_b in enumerate(b, start=1):
            cost = 0 if sym_a == sym_b else 1
            value = min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + cost,  # substitution
            )
            current.append(value)
            if value < row_min:
                row_min = value
        if max_distance is not None and row_min > max_distance:
            return max_distance + 1
        previous = current

    result = previous[-1]
    if max_distance is not None and result > max_distance:
        return max_distance + 1
    return result


def _similarity(a: Sequence, b: Sequence) -> float:
    if a == b:
        return 1.0
    # One side empty: defined as no similarity, independent of the ratio below.
    if not a or not b:
        return 0.0
    return 1.0 - _distance(a, b) / max(len(a), len(b))


def _prepare(a: str, b: str, normalize: Mode) -> tuple[str, str]:
    ensure_str(a, "a")
    ensure_str(b, "b")
    if normalize is None:
        return a, b
    return normalize_pair(a, b, normalize)


def edit_distance(
    a: str,
    b: str,
    max_distance: Optional[int] = None,
    normalize: Mode = None,
) -> int:
    """Compute Levenshtein (edit) distance between two strings.

    Args:
        a: First string
        b: Second string
        max_distance: Optional maximum distance for early termination.
            Returns max_distance + 1 if exceeded.
            Use edit_distance_bounded() if you prefer None semantics.
        normalize: Optional normalization mode applied to both strings first.

    Returns:
        The minimum number of single-character insertions, deletions and
        substitutions needed to transform a into b.

    Raises:
        TypeError: If a or b is not a str.
        ValidationError: If max_distance is negative or normalize is unknown.

    Complexity:
        Time: O(m*n). Space: O(min(m, n)) using two rows.

    Example:
        >>> edit_distance("kitten", "sitting")
        3
        >>> edit_distance("abc", "xyz", max_distance=2)
        3
    """
    a, b = _prepare(a, b, normalize)
    if max_distance is not None:
        check_max_distance(max_distance)
    return _distance(a, b, max_distance)


def edit_distance_bounded(a: str, b: str, max_distance: int) -> Optional[int]:
    """Compute edit distance, or None when it exceeds max_distance.

    Example:
        >>> edit_distance_bounded("abc", "abd", max_distance=2)
        1
        >>> edit_distance_bounded("abcdef", "ghijkl", max_distance=3) is None
        True
    """
    ensure_str(a, "a")
    ensure_str(b, "b")
    check_max_distance(max_distance)
    result = _distance(a, b, max_distance)
    return None if result > max_distance else result


def similarity_score(a: str, b: str, normalize: Mode = None) -> float:
    """Compute normalized Levenshtein similarity.

    ``1 - distance / max(len(a), len(b))``. Identical strings (including two
    empty strings) score exactly 1.0; a non-empty string against an empty one
    scores 0.0.

    Args:
        a: First string
        b: Second string
        normalize: Optional normalization mode applied to both strings first.

    Returns:
        Similarity from 0.0 to 1.0.

    Example:
        >>> similarity_score("hello", "hallo")
        0.8
        >>> similarity_score("", "")
        1.0
    """
    a, b = _prepare(a, b, normalize)
    return _similarity(a, b)


def levenshtein_grapheme(a: str, b: str) -> int:
    """Compute Levenshtein distance treating grapheme clusters as single units.

    Example:
        >>> edit_distance("👍🏽", "👍")  # code points
        1
        >>> levenshtein_grapheme("👍🏽", "👍")  # one cluster replaced
        1
        >>> levenshtein_grapheme("e\\u0301", "e")
        1
    """
    ensure_str(a, "a")
    ensure_str(b, "b")
    return _distance(segment(a), segment(b))


def levenshtein_similarity_grapheme(a: str, b: str) -> float:
    """Compute normalized Levenshtein similarity over grapheme clusters.

    Example:
        >>> levenshtein_similarity_grapheme("café", "cafe")
        0.75
    """
    ensure_str(a, "a")
    ensure_str(b, "b")
    if a == b:
        return 1.0
    return _similarity(segment(a), segment(b))


def levenshtein_ci(a: str, b: str) -> int:
    """Case-insensitive edit distance (both sides lowercased first)."""
    return edit_distance(a, b, normalize=NormalizationMode.LOWERCASE)


def levenshtein_similarity_ci(a: str, b: str) -> float:
    """Case-insensitive similarity score (both sides lowercased first)."""
    return similarity_score(a, b, normalize=NormalizationMode.LOWERCASE)


__all__ = [
    "edit_distance",
    "edit_distance_bounded",
    "similarity_score",
    "levenshtein_grapheme",
    "levenshtein_similarity_grapheme",
    "levenshtein_ci",
    "levenshtein_similarity_ci",
]
