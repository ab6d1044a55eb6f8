"""Pure-Python core: grapheme segmentation and Levenshtein similarity.

Both components are stateless functions of their string arguments and safe
to call from any number of threads.
"""

from unisim._core.errors import UnisimError, ValidationError
from unisim._core.properties import GraphemeBreak
from unisim._core.grapheme import (
    GraphemeCluster,
    grapheme_boundaries,
    grapheme_break,
    grapheme_clusters,
    is_extended_pictographic,
    segment,
    segment_length,
    segment_reverse,
    segment_slice,
)
from unisim._core.normalize import normalize_pair, normalize_string, normalize_unicode
from unisim._core.levenshtein import (
    edit_distance,
    edit_distance_bounded,
    levenshtein_ci,
    levenshtein_grapheme,
    levenshtein_similarity_ci,
    levenshtein_similarity_grapheme,
    similarity_score,
)

__all__ = [
    "UnisimError",
    "ValidationError",
    "GraphemeBreak",
    "GraphemeCluster",
    "grapheme_boundaries",
    "grapheme_break",
    "grapheme_clusters",
    "is_extended_pictographic",
    "segment",
    "segment_length",
    "segment_reverse",
    "segment_slice",
    "normalize_pair",
    "normalize_string",
    "normalize_unicode",
    "edit_distance",
    "edit_distance_bounded",
    "levenshtein_ci",
    "levenshtein_grapheme",
    "levenshtein_similarity_ci",
    "levenshtein_similarity_grapheme",
    "similarity_score",
]
