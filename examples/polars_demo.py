# %% [markdown]
# # unisim Polars Integration Demo
#
# ## API Hierarchy
#
# | Level | Module | Input | Use Case |
# |-------|--------|-------|----------|
# | Core | `us.*` | 2 strings | Single comparison |
# | Batch | `us.batch.*` | Python lists | List-based matching |
# | Polars Series | `us.polars.*` | pl.Series | Column-level ops with null passthrough |
# | Polars Expression | `.uni.*` | pl.Expr | Expression chains |

# %%
import polars as pl

import unisim as us
from unisim import polars as usp

# %% [markdown]
# ---
# ## Section 1: Expression namespace
#
# Importing `unisim` registers `.uni` on every Polars expression.

# %%
reviews = pl.DataFrame(
    {
        "user": ["ana", "bo", "chen", "dee"],
        "reaction": [
            "\U0001F44D\U0001F3FD\U0001F44D",
            "\U0001F468\u200d\U0001F469\u200d\U0001F467 loved it",
            "\U0001F1EF\U0001F1F5\U0001F1EB\U0001F1F7",
            None,
        ],
    }
)

print(
    reviews.with_columns(
        clusters=pl.col("reaction").uni.length(),
        code_points=pl.col("reaction").str.len_chars(),
        first=pl.col("reaction").uni.slice(0, 1),
        reversed=pl.col("reaction").uni.reverse(),
    )
)

# %% [markdown]
# ### Comparing columns
#
# `distance` and `similarity` accept a string literal or another expression.
# `unit="grapheme"` compares cluster by cluster.

# %%
names = pl.DataFrame(
    {
        "entered": ["Jon Smith", "Zoe", "Ren\u00e9e", "Mar\u00eda"],
        "on_file": ["John Smith", "Zo\u00eb", "Rene\u0301e", "Maria"],
    }
)

print(
    names.with_columns(
        dist=pl.col("entered").uni.distance(pl.col("on_file")),
        score=pl.col("entered").uni.similarity(pl.col("on_file")),
        score_graphemes=pl.col("entered").uni.similarity(pl.col("on_file"), unit="grapheme"),
        score_nfc=pl.col("entered")
        .uni.normalize("nfc")
        .uni.similarity(pl.col("on_file").uni.normalize("nfc")),
    )
)

# %% [markdown]
# ### Filtering

# %%
print(names.filter(pl.col("entered").uni.is_similar(pl.col("on_file"), min_similarity=0.8)))

# %% [markdown]
# ---
# ## Section 2: Series API
#
# Whole-Series helpers keep nulls as nulls and reject Series of unequal length.

# %%
left = pl.Series(["hello", "world", None])
right = pl.Series(["hallo", "word", "x"])

print(usp.batch_similarity(left, right))
print(usp.batch_distance(left, right))
print(usp.grapheme_lengths(reviews["reaction"]))

try:
    usp.batch_similarity(left, right.head(2))
except us.ValidationError as exc:
    print("ValidationError:", exc)
