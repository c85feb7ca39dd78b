"""Enums for the typoscore API."""

from enum import Enum


class Algorithm(str, Enum):
    """Available scoring algorithms.

    String values are accepted anywhere an ``Algorithm`` is.

    Example:
        >>> from typoscore import Algorithm, is_typo
        >>> is_typo("recieve", "receive", threshold=0.9, algorithm=Algorithm.JARO_WINKLER)
        True
    """

    LEVENSHTEIN = "levenshtein"
    """Classic edit distance (insertions, deletions, substitutions)"""

    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    """Edit distance including transpositions (e.g., 'ca' -> 'ac' is 1 edit)"""

    DAMERAU = "damerau"
    """Alias for DAMERAU_LEVENSHTEIN"""

    JARO = "jaro"
    """Jaro similarity, good for short strings"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro-Winkler similarity with prefix weighting, excellent for names"""

    COSINE = "cosine"
    """Cosine similarity of character n-gram count vectors"""

    TFIDF = "tfidf"
    """Cosine similarity of IDF-weighted n-grams; needs a CorpusIndex"""

    @property
    def is_distance(self) -> bool:
        """True when the raw output is an edit count rather than a [0, 1] score."""
        return self in (Algorithm.LEVENSHTEIN, Algorithm.DAMERAU_LEVENSHTEIN, Algorithm.DAMERAU)


__all__ = ["Algorithm"]
