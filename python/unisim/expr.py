"""Polars expression namespace for grapheme-aware string operations.

This module registers a `.uni` namespace on Polars expressions, so the
grapheme and similarity functions can be chained directly in Polars
expression contexts.

Note:
    Every method runs the pure-Python functions row by row through
    ``map_elements``. For whole-Series work with explicit null handling see
    ``unisim.polars_api``.

Example:
    >>> import polars as pl
    >>> import unisim  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"text": ["👍🏽👍", "hello"]})
    >>> df.with_columns(n=pl.col("text").uni.length())
"""

from typing import Optional, Union

import polars as pl

from unisim._core.grapheme import segment_length, segment_reverse, segment_slice
from unisim._core.levenshtein import (
    edit_distance,
    levenshtein_grapheme,
    levenshtein_similarity_grapheme,
    similarity_score,
)
from unisim._core.normalize import normalize_string
from unisim._utils import normalize_mode, normalize_unit
from unisim.enums import NormalizationMode, Unit

_DISTANCE = {Unit.CODEPOINT: edit_distance, Unit.GRAPHEME: levenshtein_grapheme}
_SIMILARITY = {Unit.CODEPOINT: similarity_score, Unit.GRAPHEME: levenshtein_similarity_grapheme}


def _as_str(value) -> str:
    return str(value) if value is not None else ""


@pl.api.register_expr_namespace("uni")
class UnicodeExprNamespace:
    """
    Grapheme-aware string namespace for Polars expressions.

    Access via `.uni` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def _pairwise(self, func, other: Union[str, pl.Expr], return_dtype) -> pl.Expr:
        if isinstance(other, str):
            return self._expr.map_elements(
                lambda s: func(_as_str(s), other),
                return_dtype=return_dtype,
                skip_nulls=False,
            )
        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: func(_as_str(row["_left"]), _as_str(row["_right"])),
            return_dtype=return_dtype,
        )

    def length(self) -> pl.Expr:
        """
        Count grapheme clusters per row.

        Example:
            >>> df.with_columns(n=pl.col("text").uni.length())
        """
        return self._expr.map_elements(segment_length, return_dtype=pl.Int64)

    def slice(self, start: int, end: Optional[int] = None) -> pl.Expr:
        """
        Slice each row by grapheme cluster index.

        Args:
            start: First cluster index (negative counts from the end)
            end: Cluster index to stop at (exclusive), or None for the rest

        Example:
            >>> df.with_columns(first=pl.col("text").uni.slice(0, 1))
        """
        return self._expr.map_elements(
            lambda s: segment_slice(s, start, end), return_dtype=pl.Utf8
        )

    def reverse(self) -> pl.Expr:
        """Reverse each row by grapheme cluster."""
        return self._expr.map_elements(segment_reverse, return_dtype=pl.Utf8)

    def distance(
        self,
        other: Union[str, pl.Expr],
        unit: Union[str, Unit] = "codepoint",
    ) -> pl.Expr:
        """
        Calculate Levenshtein distance between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            unit: "codepoint" or "grapheme"

        Returns:
            Expression producing integer distances

        Example:
            >>> df.with_columns(
            ...     dist=pl.col("name").uni.distance("John")
            ... )
        """
        return self._pairwise(_DISTANCE[normalize_unit(unit)], other, pl.Int64)

    def similarity(
        self,
        other: Union[str, pl.Expr],
        unit: Union[str, Unit] = "codepoint",
    ) -> pl.Expr:
        """
        Calculate similarity score between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            unit: "codepoint" or "grapheme"

        Returns:
            Expression producing similarity scores (0.0 to 1.0)

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name1").uni.similarity(pl.col("name2"))
            ... )
        """
        return self._pairwise(_SIMILARITY[normalize_unit(unit)], other, pl.Float64)

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_similarity: float = 0.8,
        unit: Union[str, Unit] = "codepoint",
    ) -> pl.Expr:
        """
        Check if values are similar to another value/column above a threshold.

        Example:
            >>> df.filter(pl.col("name").uni.is_similar("John", min_similarity=0.75))
        """
        return self.similarity(other, unit=unit) >= min_similarity

    def normalize(
        self,
        mode: Union[str, NormalizationMode] = "nfc",
    ) -> pl.Expr:
        """
        Normalize strings before comparison.

        Args:
            mode: Any NormalizationMode name, e.g. "nfc", "lowercase" or "strict"

        Example:
            >>> df.with_columns(
            ...     normalized=pl.col("name").uni.normalize("strict")
            ... )
        """
        mode = normalize_mode(mode)
        return self._expr.map_elements(
            lambda s: normalize_string(s, mode), return_dtype=pl.Utf8
        )
