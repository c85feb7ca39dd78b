"""
typoscore - String similarity toolkit for typo detection

Several independent scoring algorithms for short strings (usernames, SKUs,
search queries) behind one typo-classification facade.

Example usage:
    >>> import typoscore as ts

    # Edit distances
    >>> ts.levenshtein("kitten", "sitting")
    3
    >>> ts.damerau_levenshtein("ab", "ba")
    1

    # Similarities in [0, 1]
    >>> round(ts.jaro_winkler_similarity("MARTHA", "MARHTA"), 3)
    0.961
    >>> ts.cosine_similarity("night", "nacht", 2)
    0.25

    # Corpus-aware scoring
    >>> index = ts.CorpusIndex(["sku-1001", "sku-1002", "sku-2001"], ngram_size=2)
    >>> ts.is_typo("sku-1010", "sku-1001", threshold=0.5, algorithm="tfidf", index=index)
    True
"""

import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from typoscore._config import Settings, load_settings
from typoscore._errors import AlgorithmError, InvalidArgument, TypoScoreError, ValidationError
from typoscore.batch import MatchResult
from typoscore.classifier import TypoClassifier, is_typo, score
from typoscore.distance import (
    damerau_levenshtein,
    damerau_levenshtein_similarity,
    levenshtein,
    levenshtein_similarity,
)
from typoscore.enums import Algorithm
from typoscore.index import CorpusIndex
from typoscore.jaro import jaro_similarity, jaro_winkler_similarity
from typoscore.ngram import cosine_similarity, extract_ngrams, vectorize

logging.getLogger(__name__).addHandler(logging.NullHandler())

try:
    __version__ = _get_version("typoscore")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "TypoScoreError",
    "ValidationError",
    "InvalidArgument",
    "AlgorithmError",
    # Result types
    "MatchResult",
    # Enums
    "Algorithm",
    # Configuration
    "Settings",
    "load_settings",
    # Distance functions
    "levenshtein",
    "levenshtein_similarity",
    "damerau_levenshtein",
    "damerau_levenshtein_similarity",
    # Similarity functions
    "jaro_similarity",
    "jaro_winkler_similarity",
    "extract_ngrams",
    "vectorize",
    "cosine_similarity",
    # Corpus-aware similarity
    "CorpusIndex",
    # Typo classification
    "TypoClassifier",
    "is_typo",
    "score",
]


# Convenience aliases
edit_distance = levenshtein
similarity = jaro_winkler_similarity
