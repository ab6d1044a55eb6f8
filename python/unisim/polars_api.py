"""Series-level Polars API.

Functions here take whole ``pl.Series`` values, convert them to Python
lists once, run the single-pair functions and rebuild a Series. Null in
either input gives null in the output.

Example Usage
-------------
>>> import polars as pl
>>> import unisim as us
>>>
>>> df = pl.DataFrame({"a": ["hello", "world"], "b": ["hallo", None]})
>>> df = df.with_columns(score=us.batch_similarity(df["a"], df["b"]))
>>> df["score"].to_list()
[0.8, None]
"""

import logging
from typing import Union

import polars as pl

from unisim._core.errors import ValidationError
from unisim._core.grapheme import segment_length
from unisim._core.levenshtein import (
    edit_distance,
    levenshtein_grapheme,
    levenshtein_similarity_grapheme,
    similarity_score,
)
from unisim._utils import normalize_unit
from unisim.enums import Unit

logger = logging.getLogger(__name__)


def _pairs(left: "pl.Series", right: "pl.Series", func, name: str, dtype) -> "pl.Series":
    if len(left) != len(right):
        raise ValidationError(
            f"Series must have equal length, got {len(left)} and {len(right)}"
        )

    values = []
    nulls = 0
    for a, b in zip(left.to_list(), right.to_list()):
        if a is None or b is None:
            values.append(None)
            nulls += 1
        else:
            values.append(func(str(a), str(b)))

    logger.debug("%s: %d rows, %d null", name, len(values), nulls)
    return pl.Series(name, values, dtype=dtype)


def batch_similarity(
    left: "pl.Series",
    right: "pl.Series",
    unit: Union[str, Unit] = "codepoint",
) -> "pl.Series":
    """
    Compute similarity between two aligned Series.

    Args:
        left: First string Series
        right: Second string Series (must be same length as left)
        unit: "codepoint" (default) or "grapheme"

    Returns:
        Float64 Series named "similarity" with scores from 0.0 to 1.0

    Raises:
        ValidationError: If the Series differ in length.
    """
    func = (
        levenshtein_similarity_grapheme
        if normalize_unit(unit) is Unit.GRAPHEME
        else similarity_score
    )
    return _pairs(left, right, func, "similarity", pl.Float64)


def batch_distance(
    left: "pl.Series",
    right: "pl.Series",
    unit: Union[str, Unit] = "codepoint",
) -> "pl.Series":
    """
    Compute Levenshtein distance between two aligned Series.

    Returns:
        Int64 Series named "distance"

    Raises:
        ValidationError: If the Series differ in length.
    """
    func = levenshtein_grapheme if normalize_unit(unit) is Unit.GRAPHEME else edit_distance
    return _pairs(left, right, func, "distance", pl.Int64)


def grapheme_lengths(series: "pl.Series") -> "pl.Series":
    """
    Count grapheme clusters for every value of a Series.

    Example:
        >>> grapheme_lengths(pl.Series(["👍🏽👍", None])).to_list()
        [2, None]
    """
    values = [None if s is None else segment_length(str(s)) for s in series.to_list()]
    return pl.Series("length", values, dtype=pl.Int64)


__all__ = ["batch_similarity", "batch_distance", "grapheme_lengths"]
