"""Grapheme_Cluster_Break property lookup.

The property is derived from the general category reported by
``unicodedata`` and a handful of embedded range tables for the values the
general category cannot express (Prepend, Other_Grapheme_Extend, the
SpacingMark exceptions, Hangul syllable types and Extended_Pictographic).
Ranges follow ``GraphemeBreakProperty.txt`` and ``emoji-data.txt`` from the
Unicode Character Database.
"""

from bisect import bisect_right
from enum import IntEnum
from functools import lru_cache
from unicodedata import category


class GraphemeBreak(IntEnum):
    """Grapheme_Cluster_Break property values used by the boundary scanner."""

    OTHER = 0
    CR = 1
    LF = 2
    CONTROL = 3
    EXTEND = 4
    ZWJ = 5
    REGIONAL_INDICATOR = 6
    PREPEND = 7
    SPACING_MARK = 8
    L = 9
    V = 10
    T = 11
    LV = 12
    LVT = 13


# Prepended_Concatenation_Mark plus the Indic prefixed letters.
_PREPEND = (
    (0x0600, 0x0605),
    (0x06DD, 0x06DD),
    (0x070F, 0x070F),
    (0x0890, 0x0891),
    (0x08E2, 0x08E2),
    (0x0D4E, 0x0D4E),
    (0x110BD, 0x110BD),
    (0x110CD, 0x110CD),
    (0x111C2, 0x111C3),
    (0x1193F, 0x1193F),
    (0x11941, 0x11941),
    (0x11A3A, 0x11A3A),
    (0x11A84, 0x11A89),
    (0x11D46, 0x11D46),
    (0x11F02, 0x11F02),
)

# Other_Grapheme_Extend, emoji modifiers and tag characters. Everything here
# is Extend regardless of its general category.
_EXTRA_EXTEND = (
    (0x09BE, 0x09BE),
    (0x09D7, 0x09D7),
    (0x0B3E, 0x0B3E),
    (0x0B57, 0x0B57),
    (0x0BBE, 0x0BBE),
    (0x0BD7, 0x0BD7),
    (0x0CC2, 0x0CC2),
    (0x0CD5, 0x0CD6),
    (0x0D3E, 0x0D3E),
    (0x0D57, 0x0D57),
    (0x0DCF, 0x0DCF),
    (0x0DDF, 0x0DDF),
    (0x1B35, 0x1B35),
    (0x200C, 0x200C),
    (0x302E, 0x302F),
    (0xFF9E, 0xFF9F),
    (0x1133E, 0x1133E),
    (0x11357, 0x11357),
    (0x114B0, 0x114B0),
    (0x114BD, 0x114BD),
    (0x115AF, 0x115AF),
    (0x11930, 0x11930),
    (0x1D165, 0x1D165),
    (0x1D16E, 0x1D172),
    (0x1F3FB, 0x1F3FF),
    (0xE0020, 0xE007F),
)

# Spacing combining marks (Mc) that are not SpacingMark.
_NOT_SPACING_MARK = (
    (0x102B, 0x102C),
    (0x1038, 0x1038),
    (0x1062, 0x1064),
    (0x1067, 0x106D),
    (0x1083, 0x1083),
    (0x1087, 0x108C),
    (0x108F, 0x108F),
    (0x109A, 0x109C),
    (0x1A61, 0x1A61),
    (0x1A63, 0x1A64),
    (0xAA7B, 0xAA7B),
    (0xAA7D, 0xAA7D),
    (0x11720, 0x11721),
)

# Letters that are SpacingMark despite being Lo (Thai and Lao SARA AM).
_EXTRA_SPACING_MARK = frozenset({0x0E33, 0x0EB3})

_EXTENDED_PICTOGRAPHIC = (
    (0x00A9, 0x00A9),
    (0x00AE, 0x00AE),
    (0x203C, 0x203C),
    (0x2049, 0x2049),
    (0x2122, 0x2122),
    (0x2139, 0x2139),
    (0x2194, 0x2199),
    (0x21A9, 0x21AA),
    (0x231A, 0x231B),
    (0x2328, 0x2328),
    (0x2388, 0x2388),
    (0x23CF, 0x23CF),
    (0x23E9, 0x23F3),
    (0x23F8, 0x23FA),
    (0x24C2, 0x24C2),
    (0x25AA, 0x25AB),
    (0x25B6, 0x25B6),
    (0x25C0, 0x25C0),
    (0x25FB, 0x25FE),
    (0x2600, 0x2605),
    (0x2607, 0x2612),
    (0x2614, 0x2685),
    (0x2690, 0x2705),
    (0x2708, 0x2712),
    (0x2714, 0x2714),
    (0x2716, 0x2716),
    (0x271D, 0x271D),
    (0x2721, 0x2721),
    (0x2728, 0x2728),
    (0x2733, 0x2734),
    (0x2744, 0x2744),
    (0x2747, 0x2747),
    (0x274C, 0x274C),
    (0x274E, 0x274E),
    (0x2753, 0x2755),
    (0x2757, 0x2757),
    (0x2763, 0x2767),
    (0x2795, 0x2797),
    (0x27A1, 0x27A1),
    (0x27B0, 0x27B0),
    (0x27BF, 0x27BF),
    (0x2934, 0x2935),
    (0x2B05, 0x2B07),
    (0x2B1B, 0x2B1C),
    (0x2B50, 0x2B50),
    (0x2B55, 0x2B55),
    (0x3030, 0x3030),
    (0x303D, 0x303D),
    (0x3297, 0x3297),
    (0x3299, 0x3299),
    (0x1F000, 0x1F0FF),
    (0x1F10D, 0x1F10F),
    (0x1F12F, 0x1F12F),
    (0x1F16C, 0x1F171),
    (0x1F17E, 0x1F17F),
    (0x1F18E, 0x1F18E),
    (0x1F191, 0x1F19A),
    (0x1F1AD, 0x1F1E5),
    (0x1F201, 0x1F20F),
    (0x1F21A, 0x1F21A),
    (0x1F22F, 0x1F22F),
    (0x1F232, 0x1F23A),
    (0x1F23C, 0x1F23F),
    (0x1F249, 0x1F3FA),
    (0x1F400, 0x1F53D),
    (0x1F546, 0x1F64F),
    (0x1F680, 0x1F6FF),
    (0x1F774, 0x1F77F),
    (0x1F7D5, 0x1F7FF),
    (0x1F80C, 0x1F80F),
    (0x1F848, 0x1F84F),
    (0x1F85A, 0x1F85F),
    (0x1F888, 0x1F88F),
    (0x1F8AE, 0x1F8FF),
    (0x1F90C, 0x1F93A),
    (0x1F93C, 0x1F945),
    (0x1F947, 0x1FAFF),
    (0x1FC00, 0x1FFFD),
)

_HANGUL_BASE = 0xAC00
_HANGUL_LAST = 0xD7A3
_HANGUL_T_COUNT = 28

HIGH_SURROGATES = range(0xD800, 0xDC00)
LOW_SURROGATES = range(0xDC00, 0xE000)


def _starts(table):
    return tuple(lo for lo, _ in table)


_PREPEND_STARTS = _starts(_PREPEND)
_EXTRA_EXTEND_STARTS = _starts(_EXTRA_EXTEND)
_NOT_SPACING_MARK_STARTS = _starts(_NOT_SPACING_MARK)
_PICTOGRAPHIC_STARTS = _starts(_EXTENDED_PICTOGRAPHIC)


def _in_table(cp: int, table, starts) -> bool:
    i = bisect_right(starts, cp) - 1
    return i >= 0 and cp <= table[i][1]


def _hangul(cp: int):
    if 0x1100 <= cp <= 0x115F or 0xA960 <= cp <= 0xA97C:
        return GraphemeBreak.L
    if 0x1160 <= cp <= 0x11A7 or 0xD7B0 <= cp <= 0xD7C6:
        return GraphemeBreak.V
    if 0x11A8 <= cp <= 0x11FF or 0xD7CB <= cp <= 0xD7FB:
        return GraphemeBreak.T
    if _HANGUL_BASE <= cp <= _HANGUL_LAST:
        if (cp - _HANGUL_BASE) % _HANGUL_T_COUNT == 0:
            return GraphemeBreak.LV
        return GraphemeBreak.LVT
    return None


@lru_cache(maxsize=8192)
def break_property(cp: int) -> GraphemeBreak:
    """Return the Grapheme_Cluster_Break value of a code point.

    Surrogate code points are reported as CONTROL; pairing is handled by the
    scanner before lookup.
    """
    if cp == 0x0D:
        return GraphemeBreak.CR
    if cp == 0x0A:
        return GraphemeBreak.LF
    if cp == 0x200D:
        return GraphemeBreak.ZWJ
    if 0x1F1E6 <= cp <= 0x1F1FF:
        return GraphemeBreak.REGIONAL_INDICATOR
    if _in_table(cp, _PREPEND, _PREPEND_STARTS):
        return GraphemeBreak.PREPEND
    if _in_table(cp, _EXTRA_EXTEND, _EXTRA_EXTEND_STARTS):
        return GraphemeBreak.EXTEND
    if cp in _EXTRA_SPACING_MARK:
        return GraphemeBreak.SPACING_MARK

    hangul = _hangul(cp)
    if hangul is not None:
        return hangul

    cat = category(chr(cp))
    if cat in ("Mn", "Me"):
        return GraphemeBreak.EXTEND
    if cat == "Mc":
        if _in_table(cp, _NOT_SPACING_MARK, _NOT_SPACING_MARK_STARTS):
            return GraphemeBreak.OTHER
        return GraphemeBreak.SPACING_MARK
    if cat in ("Cc", "Cf", "Cs", "Zl", "Zp"):
        return GraphemeBreak.CONTROL
    return GraphemeBreak.OTHER


@lru_cache(maxsize=8192)
def extended_pictographic(cp: int) -> bool:
    """Return True if the code point has the Extended_Pictographic property."""
    return _in_table(cp, _EXTENDED_PICTOGRAPHIC, _PICTOGRAPHIC_STARTS)


__all__ = [
    "GraphemeBreak",
    "break_property",
    "extended_pictographic",
    "HIGH_SURROGATES",
    "LOW_SURROGATES",
]
