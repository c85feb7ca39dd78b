# %% [markdown]
# # typoscore: Quick Start
#
# Catching typos in usernames, SKUs and search queries.
#
# ```
# "jsmtih"    vs  "jsmith"
# "recieve"   vs  "receive"
# "sku-1010"  vs  "sku-1001"
# ```

# %%
import typoscore as ts

# %% [markdown]
# ## Part 1: Edit distances
#
# Levenshtein counts insertions, deletions and substitutions. Damerau-Levenshtein
# also counts a swap of two characters as a single edit.

# %%
print(f"levenshtein('kitten', 'sitting')     = {ts.levenshtein('kitten', 'sitting')}")
print(f"levenshtein('teh', 'the')            = {ts.levenshtein('teh', 'the')}")
print(f"damerau_levenshtein('teh', 'the')    = {ts.damerau_levenshtein('teh', 'the')}")
print(f"levenshtein_similarity('hello', 'hallo') = {ts.levenshtein_similarity('hello', 'hallo')}")

# %% [markdown]
# ## Part 2: Jaro and Jaro-Winkler
#
# Jaro-Winkler rewards a shared prefix, which suits names and identifiers.

# %%
for a, b in [("MARTHA", "MARHTA"), ("DIXON", "DICKSONX"), ("jsmith", "jsmtih")]:
    print(
        f"{a:>8} / {b:<8}  jaro={ts.jaro_similarity(a, b):.3f}  "
        f"jaro_winkler={ts.jaro_winkler_similarity(a, b):.3f}"
    )

# %% [markdown]
# ## Part 3: N-grams and cosine similarity

# %%
print(ts.vectorize("banana", 2))
print(f"cosine('night', 'nacht', 2) = {ts.cosine_similarity('night', 'nacht', 2):.3f}")
# Gram width longer than the string: no grams, similarity 0.0
print(f"cosine('ab', 'ab', 5)       = {ts.cosine_similarity('ab', 'ab', 5)}")

# %% [markdown]
# ## Part 4: Corpus-aware similarity (TF-IDF)
#
# Grams shared by every SKU ("sk", "ku", "u-") carry no weight, so only the
# distinctive part of the code drives the score.

# %%
skus = ["sku-1001", "sku-1002", "sku-2001", "sku-3105", "sku-4410"]
index = ts.CorpusIndex(skus, ngram_size=2)
print(index)
print(f"idf('sk') = {index.idf('sk'):.3f}   idf('44') = {index.idf('44'):.3f}")
for candidate in skus:
    print(f"  sku-1010 vs {candidate}: {index.similarity('sku-1010', candidate):.3f}")

# %% [markdown]
# ## Part 5: Typo classification

# %%
clf = ts.TypoClassifier(algorithm="damerau_levenshtein", threshold=0.8)
for typed in ["recieve", "receive", "reciept"]:
    print(f"{typed!r:>10} -> typo of 'receive'? {clf.is_typo(typed, 'receive')}")

print(ts.is_typo("sku-1010", "sku-1001", threshold=0.5, algorithm="tfidf", index=index))

# %% [markdown]
# ## Part 6: Batch and Polars

# %%
import polars as pl  # noqa: E402

from typoscore import batch  # noqa: E402
from typoscore.polars_ext import flag_typos  # noqa: E402

for match in batch.best_matches(["apple", "apply", "banana"], "appel", limit=2):
    print(f"{match.text}: {match.score:.3f}")

usernames = pl.Series(["jsmith", "jsmtih", "jdoe", None])
print(flag_typos(usernames, "jsmith", threshold=0.9))
