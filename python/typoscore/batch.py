"""Batch operations API for typoscore.

This module provides list-based helpers that score many strings with one
call. Every function goes through :func:`typoscore.classifier.score`, so
edit distances come back normalized to [0, 1] like the other algorithms.

Example usage:
    >>> import typoscore.batch as batch

    # Compute similarity of query against all strings
    >>> results = batch.similarity(["hello", "hallo", "world"], "helo")
    >>> [r.text for r in results]
    ['hello', 'hallo', 'world']

    # Find top N best matches
    >>> matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
    >>> [m.text for m in matches]
    ['apple', 'apply']

    # Pairwise similarity between aligned lists
    >>> batch.pairwise(["hello", "world"], ["hello", "word"], algorithm="levenshtein")
    [1.0, 0.8]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from typoscore._errors import ValidationError
from typoscore._utils import check_unit_interval, normalize_algorithm
from typoscore.classifier import score
from typoscore.jaro import DEFAULT_PREFIX_WEIGHT
from typoscore.ngram import DEFAULT_NGRAM_SIZE

if TYPE_CHECKING:
    from typoscore.enums import Algorithm
    from typoscore.index import CorpusIndex

__all__ = [
    "MatchResult",
    "similarity",
    "best_matches",
    "pairwise",
    "similarity_matrix",
]


@dataclass(frozen=True)
class MatchResult:
    """A scored candidate: its text, score and position in the input list."""

    text: str
    score: float
    id: int


def similarity(
    strings: list[str],
    query: str,
    algorithm: str | Algorithm = "jaro_winkler",
    ngram_size: int = DEFAULT_NGRAM_SIZE,
    index: CorpusIndex | None = None,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
) -> list[MatchResult]:
    """Compute similarity of a query against all strings.

    Args:
        strings: List of strings to compare against the query.
        query: The query string to match.
        algorithm: Scoring algorithm (string or Algorithm enum). Options:
            - "levenshtein": Normalized Levenshtein similarity
            - "damerau_levenshtein": Normalized Damerau-Levenshtein similarity
            - "jaro": Jaro similarity
            - "jaro_winkler": Jaro-Winkler similarity (default)
            - "cosine": Character n-gram cosine similarity
            - "tfidf": IDF-weighted n-gram cosine (requires ``index``)
        ngram_size: Gram width for "cosine".
        index: CorpusIndex used by "tfidf".
        prefix_weight: Prefix bonus for "jaro_winkler".

    Returns:
        List of MatchResult objects in the same order as input strings.
        Each result has `text`, `score`, and `id` fields where `id` is
        the original index in the input list.
    """
    algo = normalize_algorithm(algorithm)
    return [
        MatchResult(
            text=s,
            score=score(
                s,
                query,
                algorithm=algo,
                ngram_size=ngram_size,
                index=index,
                prefix_weight=prefix_weight,
            ),
            id=i,
        )
        for i, s in enumerate(strings)
    ]


def best_matches(
    strings: list[str],
    query: str,
    algorithm: str | Algorithm = "jaro_winkler",
    limit: int | None = 5,
    min_similarity: float = 0.0,
    ngram_size: int = DEFAULT_NGRAM_SIZE,
    index: CorpusIndex | None = None,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
) -> list[MatchResult]:
    """Find top N best matches for a query from a list of strings.

    Scores every string, drops those below ``min_similarity``, sorts by
    score descending (equal scores keep their input order) and returns at
    most ``limit`` results.

    Args:
        strings: List of strings to search.
        query: The query string to match.
        algorithm: Scoring algorithm (see :func:`similarity`).
        limit: Maximum number of results to return (default: 5). None
            returns every match.
        min_similarity: Minimum score to include, in [0.0, 1.0].
        ngram_size: Gram width for "cosine".
        index: CorpusIndex used by "tfidf".
        prefix_weight: Prefix bonus for "jaro_winkler".

    Raises:
        ValidationError: If min_similarity is outside [0.0, 1.0] or limit
            is negative.
    """
    check_unit_interval("min_similarity", min_similarity)
    if limit is not None and limit < 0:
        raise ValidationError(f"limit must be non-negative, got {limit}")

    results = similarity(
        strings,
        query,
        algorithm=algorithm,
        ngram_size=ngram_size,
        index=index,
        prefix_weight=prefix_weight,
    )
    kept = [r for r in results if r.score >= min_similarity]
    kept.sort(key=lambda r: r.score, reverse=True)
    if limit is not None:
        kept = kept[:limit]
    return kept


def pairwise(
    left: list[str],
    right: list[str],
    algorithm: str | Algorithm = "jaro_winkler",
    ngram_size: int = DEFAULT_NGRAM_SIZE,
    index: CorpusIndex | None = None,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
) -> list[float]:
    """Score aligned pairs ``(left[i], right[i])``.

    Raises:
        ValidationError: If the lists differ in length.
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have the same length, got {len(left)} and {len(right)}"
        )
    algo = normalize_algorithm(algorithm)
    return [
        score(a, b, algorithm=algo, ngram_size=ngram_size, index=index, prefix_weight=prefix_weight)
        for a, b in zip(left, right)
    ]


def similarity_matrix(
    queries: list[str],
    choices: list[str],
    algorithm: str | Algorithm = "jaro_winkler",
    ngram_size: int = DEFAULT_NGRAM_SIZE,
    index: CorpusIndex | None = None,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
) -> list[list[float]]:
    """Full similarity matrix: ``matrix[i][j]`` scores ``queries[i]`` against ``choices[j]``."""
    algo = normalize_algorithm(algorithm)
    return [
        [
            score(
                q, c, algorithm=algo, ngram_size=ngram_size, index=index, prefix_weight=prefix_weight
            )
            for c in choices
        ]
        for q in queries
    ]
