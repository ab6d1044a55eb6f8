# %% [markdown]
# # unisim: A Quick Tour
#
# **Characters are not code points** - slicing, measuring and comparing text
# the way people read it.
#
# ---
#
# ## The Problem
#
# Python strings are sequences of code points. Most of the time that is what
# you want, until it isn't:
#
# ```
# len("👍🏽")          -> 2   (thumbs up + skin tone modifier)
# "👍🏽👍"[:1]        -> "👍" (the modifier is cut off)
# "café"[::-1]  -> "́efac" (the accent jumps to the wrong letter)
# ```
#
# **unisim** splits text into grapheme clusters (user-perceived characters)
# and builds length, slicing, reversal and edit distance on top of them.
#
# | Part | Topic |
# |------|-------|
# | 1 | Grapheme clusters |
# | 2 | Length, slice, reverse |
# | 3 | Edit distance and similarity |
# | 4 | Normalization |
# | 5 | Batch matching |

# %%
import unisim as us
from unisim import batch

# %% [markdown]
# ---
# ## Part 1: Grapheme clusters
#
# `segment` returns the clusters in order. Joining them gives back the input.

# %%
samples = [
    "\U0001F44D\U0001F3FD\U0001F44D",  # skin tone modifier
    "\U0001F468\u200d\U0001F469\u200d\U0001F467",  # ZWJ family
    "\U0001F1FA\U0001F1F8\U0001F1EC\U0001F1E7",  # two flags
    "cafe\u0301",  # combining accent
    "\u1100\u1161\u11a8",  # conjoining Hangul jamo
    "a\r\nb",  # CRLF stays together
]

for text in samples:
    clusters = us.segment(text)
    assert "".join(clusters) == text
    print(f"{text!r:45} -> {len(clusters)} clusters, {len(text)} code points")

# %% [markdown]
# Each cluster also knows where it came from in the source string.

# %%
for cluster in us.grapheme_clusters("a\U0001F44D\U0001F3FDb"):
    print(cluster.start, cluster.end, repr(cluster.text))

print(us.grapheme_boundaries("e\u0301x"))  # [0, 2, 3]

# %% [markdown]
# ---
# ## Part 2: Length, slice, reverse

# %%
text = "\U0001F44D\U0001F3FD\U0001F44D"
print("segment_length:", us.segment_length(text))  # 2
print("len:           ", len(text))  # 3
print("first cluster: ", us.segment_slice(text, 0, 1))
print("reversed:      ", us.segment_reverse(text))

# %% [markdown]
# Slicing follows Python's rules: negative indices count from the end and
# out-of-range values clamp.

# %%
print(us.segment_slice("hello", -3, -1))  # 'll'
print(us.segment_slice("hello", 2, 100))  # 'llo'
print(repr(us.segment_slice("hello", 4, 2)))  # ''

# %% [markdown]
# ---
# ## Part 3: Edit distance and similarity
#
# `edit_distance` counts insertions, deletions and substitutions of code
# points. `similarity_score` turns that into a number between 0 and 1.

# %%
print(us.edit_distance("kitten", "sitting"))  # 3
print(us.similarity_score("hello", "hallo"))  # 0.8
print(us.similarity_score("", ""))  # 1.0
print(us.similarity_score("abc", ""))  # 0.0

# %% [markdown]
# Pass `max_distance` when only close matches matter. The computation stops
# early and reports `max_distance + 1`.

# %%
print(us.edit_distance("abcdef", "ghijkl", max_distance=3))  # 4
print(us.edit_distance_bounded("abcdef", "ghijkl", max_distance=3))  # None

# %% [markdown]
# The grapheme variants treat every cluster as one symbol, so changing a skin
# tone or a family member costs exactly one edit.

# %%
thumbs_medium = "\U0001F44D\U0001F3FD"
thumbs_dark = "\U0001F44D\U0001F3FF"
print(us.edit_distance(thumbs_medium, thumbs_dark))  # 1 code point
print(us.levenshtein_grapheme(thumbs_medium + "!", "!"))  # 1 cluster
print(us.levenshtein_similarity_grapheme("caf\u00e9", "cafe"))  # 0.75

# %% [markdown]
# ---
# ## Part 4: Normalization
#
# Nothing is normalized unless you ask. Precomposed and decomposed accents
# differ until both sides are normalized.

# %%
print(us.edit_distance("caf\u00e9", "cafe\u0301"))  # 2
print(us.edit_distance("caf\u00e9", "cafe\u0301", normalize="nfc"))  # 0
print(us.similarity_score("Hello, World!", "hello world", normalize="strict"))  # 1.0
print(us.levenshtein_ci("HeLLo", "hello"))  # 0

messy = "  Caf\u00e9, N\u00ba 1!  "
for mode in us.NormalizationMode:
    print(f"{mode.value:20} {us.normalize_string(messy, mode)!r}")

# %% [markdown]
# ---
# ## Part 5: Batch matching

# %%
fruits = ["apple", "apply", "banana", "grape", "pineapple"]
for match in batch.best_matches(fruits, "appel", limit=3):
    print(f"{match.id}: {match.text:10} {match.score:.2f}")

print(batch.pairwise(["hello", "world"], ["hallo", "word"]))

queries = ["cafe", "caf\u00e9"]
choices = ["caf\u00e9", "cafe\u0301"]
matrix = batch.similarity_matrix(queries, choices, unit="grapheme")
for row in matrix:
    print(["%.2f" % score for score in row])
