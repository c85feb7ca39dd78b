"""Polars Series operations for typoscore.

Functions in This Module
------------------------
- ``flag_typos()``: Score a Series against one target and flag near misses
- ``match_series()``: Match query Series against target Series

Example Usage
-------------
>>> import polars as pl
>>> from typoscore.polars_ext import flag_typos
>>>
>>> usernames = pl.Series(["jsmith", "jsmtih", "jdoe", None])
>>> flagged = flag_typos(usernames, "jsmith", threshold=0.9)
>>> flagged.filter(pl.col("is_typo"))["value"].to_list()
['jsmith', 'jsmtih']

See Also
--------
- ``typoscore.batch``: The same operations on plain Python lists
- ``typoscore.CorpusIndex.from_series``: Build a TF-IDF index from a Series
"""

from typing import Optional, Union

import polars as pl

from typoscore.classifier import TypoClassifier
from typoscore.enums import Algorithm
from typoscore.index import CorpusIndex

_MATCH_SCHEMA = {
    "query_idx": pl.Int64,
    "query": pl.Utf8,
    "target_idx": pl.Int64,
    "target": pl.Utf8,
    "score": pl.Float64,
}


def flag_typos(
    series: "pl.Series",
    target: str,
    threshold: Optional[float] = None,
    algorithm: Union[str, Algorithm, None] = None,
    ngram_size: Optional[int] = None,
    index: Optional[CorpusIndex] = None,
) -> "pl.DataFrame":
    """
    Score every value of a Series against a single target.

    Args:
        series: Series of strings; other dtypes are compared as text
        target: The intended spelling
        threshold: Minimum score for ``is_typo`` (see TypoClassifier)
        algorithm: Scoring algorithm (string or Algorithm enum)
        ngram_size: Gram width for n-gram algorithms
        index: CorpusIndex, required for "tfidf"

    Returns:
        DataFrame with columns:
        - value: The original value as a string
        - score: Similarity to ``target`` (null for null values)
        - is_typo: ``score >= threshold`` (False for null values)
    """
    classifier = TypoClassifier(
        algorithm=algorithm, threshold=threshold, ngram_size=ngram_size, index=index
    )
    values = [None if v is None else str(v) for v in series.to_list()]
    scores = [None if v is None else classifier.score(v, target) for v in values]
    flags = [s is not None and s >= classifier.threshold for s in scores]
    return pl.DataFrame(
        {
            "value": pl.Series(values, dtype=pl.Utf8),
            "score": pl.Series(scores, dtype=pl.Float64),
            "is_typo": pl.Series(flags, dtype=pl.Boolean),
        }
    )


def match_series(
    query_series: "pl.Series",
    target_series: "pl.Series",
    algorithm: Union[str, Algorithm] = "jaro_winkler",
    min_similarity: float = 0.0,
    ngram_size: Optional[int] = None,
    index: Optional[CorpusIndex] = None,
) -> "pl.DataFrame":
    """
    Match each value in query_series against all values in target_series.

    For each query, returns every target scoring at least min_similarity.
    Null queries and null targets are skipped.

    Args:
        query_series: Series of query strings
        target_series: Series of target strings to match against
        algorithm: Scoring algorithm to use (string or Algorithm enum)
        min_similarity: Minimum similarity threshold (0.0 to 1.0)
        ngram_size: Gram width for n-gram algorithms
        index: CorpusIndex, required for "tfidf"

    Returns:
        DataFrame with columns: query_idx, query, target_idx, target, score

    Example:
        >>> queries = pl.Series(["apple", "banana"])
        >>> targets = pl.Series(["appel", "banan", "cherry"])
        >>> result = match_series(queries, targets, min_similarity=0.9)
        >>> result["target"].to_list()
        ['appel', 'banan']
    """
    classifier = TypoClassifier(
        algorithm=algorithm, threshold=min_similarity, ngram_size=ngram_size, index=index
    )
    targets = target_series.to_list()

    rows = []
    for query_idx, query in enumerate(query_series.to_list()):
        if query is None:
            continue
        for target_idx, target in enumerate(targets):
            if target is None:
                continue
            value = classifier.score(str(query), str(target))
            if value >= classifier.threshold:
                rows.append(
                    {
                        "query_idx": query_idx,
                        "query": str(query),
                        "target_idx": target_idx,
                        "target": str(target),
                        "score": value,
                    }
                )

    if not rows:
        return pl.DataFrame(schema=_MATCH_SCHEMA)
    return pl.DataFrame(rows, schema=_MATCH_SCHEMA)


__all__ = ["flag_typos", "match_series"]
