"""Grapheme cluster segmentation.

Implements the extended grapheme cluster boundary rules of UAX #29 as a
single forward scan over the code points of a string. The scan keeps two
pieces of context: the length of the current run of regional indicators
(GB12/GB13) and whether the previous ZWJ closes an ``ExtPict Extend*``
prefix (GB11). Everything else is decided from the pair of properties on
either side of a candidate boundary.

Offsets are indices into the Python string. A high surrogate followed by a
low surrogate is read as the supplementary code point it encodes, so the
pair is never split and is classified like the character it stands for.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from unisim._core.properties import (
    HIGH_SURROGATES,
    LOW_SURROGATES,
    GraphemeBreak,
    break_property,
    extended_pictographic,
)
from unisim._utils import ensure_str

_CONTROLS = frozenset({GraphemeBreak.CR, GraphemeBreak.LF, GraphemeBreak.CONTROL})
_HANGUL_L_FOLLOWERS = frozenset(
    {GraphemeBreak.L, GraphemeBreak.V, GraphemeBreak.LV, GraphemeBreak.LVT}
)
_HANGUL_V_PRECEDERS = frozenset({GraphemeBreak.LV, GraphemeBreak.V})
_HANGUL_V_FOLLOWERS = frozenset({GraphemeBreak.V, GraphemeBreak.T})
_HANGUL_T_PRECEDERS = frozenset({GraphemeBreak.LVT, GraphemeBreak.T})


@dataclass(frozen=True)
class GraphemeCluster:
    """A user-perceived character and its position in the source string.

    Attributes:
        text: The cluster content.
        start: Offset of the first code point (inclusive).
        end: Offset past the last code point (exclusive).
    """

    text: str
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


def _scalars(text: str) -> Iterator[tuple[int, int]]:
    """Yield (offset, code point) pairs, joining surrogate pairs."""
    i = 0
    n = len(text)
    while i < n:
        cp = ord(text[i])
        if cp in HIGH_SURROGATES and i + 1 < n:
            low = ord(text[i + 1])
            if low in LOW_SURROGATES:
                yield i, 0x10000 + ((cp - 0xD800) << 10) + (low - 0xDC00)
                i += 2
                continue
        yield i, cp
        i += 1


def _is_boundary(
    prev: GraphemeBreak,
    cur: GraphemeBreak,
    cur_pictographic: bool,
    ri_run: int,
    after_emoji_zwj: bool,
) -> bool:
    if prev is GraphemeBreak.CR and cur is GraphemeBreak.LF:
        return False  # GB3
    if prev in _CONTROLS or cur in _CONTROLS:
        return True  # GB4, GB5
    if prev is GraphemeBreak.L and cur in _HANGUL_L_FOLLOWERS:
        return False  # GB6
    if prev in _HANGUL_V_PRECEDERS and cur in _HANGUL_V_FOLLOWERS:
        return False  # GB7
    if prev in _HANGUL_T_PRECEDERS and cur is GraphemeBreak.T:
        return False  # GB8
    if cur is GraphemeBreak.EXTEND or cur is GraphemeBreak.ZWJ:
        return False  # GB9
    if cur is GraphemeBreak.SPACING_MARK:
        return False  # GB9a
    if prev is GraphemeBreak.PREPEND:
        return False  # GB9b
    if after_emoji_zwj and cur_pictographic:
        return False  # GB11
    if prev is GraphemeBreak.REGIONAL_INDICATOR and cur is GraphemeBreak.REGIONAL_INDICATOR:
        return ri_run % 2 == 0  # GB12, GB13
    return True  # GB999


def grapheme_boundaries(text: str) -> list[int]:
    """Compute the grapheme cluster boundaries of a string.

    Args:
        text: String to segment.

    Returns:
        Sorted break offsets, starting with 0 and ending with len(text).
        The empty string has no boundaries.

    Example:
        >>> grapheme_boundaries("e\\u0301x")
        [0, 2, 3]
    """
    ensure_str(text, "text")
    if not text:
        return []

    boundaries = [0]
    prev: Optional[GraphemeBreak] = None
    ri_run = 0
    emoji_run = False
    after_emoji_zwj = False

    for offset, cp in _scalars(text):
        cur = break_property(cp)
        pictographic = extended_pictographic(cp)

        if prev is not None and _is_boundary(prev, cur, pictographic, ri_run, after_emoji_zwj):
            boundaries.append(offset)

        ri_run = ri_run + 1 if cur is GraphemeBreak.REGIONAL_INDICATOR else 0
        after_emoji_zwj = cur is GraphemeBreak.ZWJ and emoji_run
        emoji_run = pictographic or (emoji_run and cur is GraphemeBreak.EXTEND)
        prev = cur

    boundaries.append(len(text))
    return boundaries


def grapheme_clusters(text: str) -> list[GraphemeCluster]:
    """Split a string into clusters carrying their source offsets.

    Example:
        >>> [c.text for c in grapheme_clusters("a\\U0001F44D\\U0001F3FD")]
        ['a', '👍🏽']
    """
    bounds = grapheme_boundaries(text)
    return [GraphemeCluster(text[start:end], start, end) for start, end in zip(bounds, bounds[1:])]


def segment(text: str) -> list[str]:
    """Split a string into grapheme clusters (user-perceived characters).

    Joining the result reproduces the input exactly. Base characters stay
    with their combining marks, emoji with their modifiers and ZWJ
    sequences, and regional indicators are paired into flags.

    Args:
        text: String to segment.

    Returns:
        List of cluster substrings, in order. Empty for the empty string.

    Example:
        >>> segment("👍🏽👍")
        ['👍🏽', '👍']
        >>> segment("🇺🇸🇬🇧")
        ['🇺🇸', '🇬🇧']
    """
    bounds = grapheme_boundaries(text)
    return [text[start:end] for start, end in zip(bounds, bounds[1:])]


def segment_length(text: str) -> int:
    """Count grapheme clusters.

    Example:
        >>> segment_length("👍🏽👍")
        2
        >>> len("👍🏽👍")  # code points
        3
    """
    bounds = grapheme_boundaries(text)
    return max(len(bounds) - 1, 0)


def segment_slice(text: str, start: int, end: Optional[int] = None) -> str:
    """Slice a string by grapheme cluster index.

    Indices follow Python slice semantics over the cluster sequence:
    negative values count from the end, out-of-range values clamp, and an
    empty or inverted range gives "". Clusters are never split.

    Args:
        text: String to slice.
        start: First cluster index (inclusive).
        end: Cluster index to stop at (exclusive). None means through the end.

    Returns:
        The selected clusters joined together.

    Example:
        >>> segment_slice("👍🏽👍", 0, 1)
        '👍🏽'
        >>> segment_slice("hello", -3, -1)
        'll'
    """
    return "".join(segment(text)[start:end])


def segment_reverse(text: str) -> str:
    """Reverse the order of grapheme clusters, keeping each cluster intact.

    Example:
        >>> segment_reverse("👍🏽👍")
        '👍👍🏽'
    """
    return "".join(reversed(segment(text)))


def grapheme_break(char: str) -> GraphemeBreak:
    """Return the Grapheme_Cluster_Break property of a single character."""
    ensure_str(char, "char")
    if len(char) != 1:
        raise TypeError(f"char must be a single character, got a string of length {len(char)}")
    return break_property(ord(char))


def is_extended_pictographic(char: str) -> bool:
    """Return True if the character has the Extended_Pictographic property."""
    ensure_str(char, "char")
    if len(char) != 1:
        raise TypeError(f"char must be a single character, got a string of length {len(char)}")
    return extended_pictographic(ord(char))


__all__ = [
    "GraphemeCluster",
    "grapheme_boundaries",
    "grapheme_clusters",
    "segment",
    "segment_length",
    "segment_slice",
    "segment_reverse",
    "grapheme_break",
    "is_extended_pictographic",
]
