"""
Polars integration for unisim.

Levels:
    1. **Expression Namespace** (`.uni`) - Per-row operations
       Example: `df.with_columns(n=pl.col("text").uni.length())`

    2. **Series API** - Whole-Series operations with null passthrough
       Example: `batch_similarity(df["a"], df["b"], unit="grapheme")`

Examples:
    >>> import polars as pl
    >>> import unisim.polars as usp  # or: from unisim import polars as usp

    >>> df = pl.DataFrame({"a": ["café"], "b": ["cafe"]})
    >>> usp.batch_similarity(df["a"], df["b"])
"""

# Expression namespace is registered on import
import unisim.expr as _expr  # noqa: F401
from unisim.polars_api import batch_distance, batch_similarity, grapheme_lengths

__all__ = [
    "batch_similarity",
    "batch_distance",
    "grapheme_lengths",
]
