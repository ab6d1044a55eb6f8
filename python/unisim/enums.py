"""Enums for unisim API."""

from enum import Enum


class NormalizationMode(str, Enum):
    """String normalization modes.

    Used by normalization utilities to control how strings are preprocessed
    before comparison.

    Example:
        >>> from unisim import normalize_string, NormalizationMode
        >>> normalize_string("  Hello, World!  ", NormalizationMode.STRICT)
        'helloworld'
    """

    LOWERCASE = "lowercase"
    """Convert to lowercase only"""

    NFC = "nfc"
    """Unicode canonical composition"""

    NFD = "nfd"
    """Unicode canonical decomposition"""

    NFKC = "nfkc"
    """Unicode compatibility composition"""

    NFKD = "nfkd"
    """Unicode compatibility decomposition"""

    UNICODE_NFKD = "unicode_nfkd"
    """Alias spelling of NFKD"""

    REMOVE_PUNCTUATION = "remove_punctuation"
    """Remove punctuation characters"""

    REMOVE_WHITESPACE = "remove_whitespace"
    """Remove all whitespace"""

    STRICT = "strict"
    """Apply all normalizations: NFKD + lowercase + remove punctuation + remove whitespace"""


class Unit(str, Enum):
    """Symbol unit used when comparing two strings.

    Example:
        >>> from unisim import Unit
        >>> from unisim.batch import pairwise
        >>> pairwise(["caf\\u00e9"], ["cafe\\u0301"], unit=Unit.GRAPHEME)
        [0.75]
    """

    CODEPOINT = "codepoint"
    """One symbol per element of the Python string"""

    GRAPHEME = "grapheme"
    """One symbol per user-perceived character (grapheme cluster)"""


__all__ = ["NormalizationMode", "Unit"]
