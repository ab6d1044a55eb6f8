"""
unisim - Grapheme-aware string operations and Levenshtein similarity

A pure-Python library for slicing, measuring and reversing strings by
user-perceived character, and for scoring how alike two strings are.

Example usage:
    >>> import unisim as us

    # Grapheme clusters, not code points
    >>> us.segment_length("👍🏽👍")
    2
    >>> us.segment_slice("👍🏽👍", 0, 1)
    '👍🏽'
    >>> us.segment_reverse("👍🏽👍")
    '👍👍🏽'

    # Edit distance and similarity
    >>> us.edit_distance("kitten", "sitting")
    3
    >>> us.similarity_score("hello", "hallo")
    0.8
"""

import logging
from importlib.metadata import version as _get_version

from unisim._core import (
    GraphemeBreak,
    GraphemeCluster,
    # Custom exceptions
    UnisimError,
    ValidationError,
    # Distance functions
    edit_distance,
    edit_distance_bounded,
    # Grapheme segmentation
    grapheme_boundaries,
    grapheme_break,
    grapheme_clusters,
    is_extended_pictographic,
    # Case-insensitive variants
    levenshtein_ci,
    # Grapheme cluster mode functions
    levenshtein_grapheme,
    levenshtein_similarity_ci,
    levenshtein_similarity_grapheme,
    # Normalization
    normalize_pair,
    normalize_string,
    normalize_unicode,
    segment,
    segment_length,
    segment_reverse,
    segment_slice,
    similarity_score,
)
from unisim.enums import NormalizationMode, Unit

# Register the .uni expression namespace
import unisim.expr  # noqa: F401, E402

# Import polars subpackage for `from unisim import polars` style
from unisim import polars  # noqa: E402
from unisim.batch import MatchResult  # noqa: E402
from unisim.polars_api import batch_distance, batch_similarity, grapheme_lengths  # noqa: E402

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = _get_version("unisim")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "UnisimError",
    "ValidationError",
    # Result types
    "GraphemeCluster",
    "MatchResult",
    # Enums
    "GraphemeBreak",
    "NormalizationMode",
    "Unit",
    # Grapheme segmentation
    "segment",
    "segment_length",
    "segment_slice",
    "segment_reverse",
    "grapheme_boundaries",
    "grapheme_clusters",
    "grapheme_break",
    "is_extended_pictographic",
    # Distance/similarity functions
    "edit_distance",
    "edit_distance_bounded",
    "similarity_score",
    "levenshtein",
    "levenshtein_similarity",
    # Grapheme cluster mode
    "levenshtein_grapheme",
    "levenshtein_similarity_grapheme",
    # Case-insensitive variants
    "levenshtein_ci",
    "levenshtein_similarity_ci",
    # Normalization
    "normalize_string",
    "normalize_pair",
    "normalize_unicode",
    # Polars Integration
    "batch_similarity",
    "batch_distance",
    "grapheme_lengths",
    "polars",
]


# Convenience aliases
levenshtein = edit_distance
levenshtein_similarity = similarity_score
