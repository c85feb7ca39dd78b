"""Typo detection on top of any scoring algorithm.

Every algorithm is brought onto the same [0, 1] similarity scale before a
threshold is applied. Similarity algorithms are used as they are; edit
distances are normalized here as ``1 - distance / max(len(a), len(b))``.

Example usage:
    >>> from typoscore import TypoClassifier, is_typo
    >>> is_typo("recieve", "receive", threshold=0.9)
    True
    >>> clf = TypoClassifier(algorithm="damerau_levenshtein", threshold=0.8)
    >>> clf.score("hte", "the")
    0.666...
    >>> clf.is_typo("teh", "the")
    False
"""

import logging
from typing import Optional, Union

from typoscore._config import load_settings
from typoscore._errors import AlgorithmError, ValidationError
from typoscore._utils import check_ngram_size, check_unit_interval, normalize_algorithm
from typoscore.distance import damerau_levenshtein_similarity, levenshtein_similarity
from typoscore.enums import Algorithm
from typoscore.index import CorpusIndex
from typoscore.jaro import (
    DEFAULT_PREFIX_WEIGHT,
    check_prefix_weight,
    jaro_similarity,
    jaro_winkler_similarity,
)
from typoscore.ngram import DEFAULT_NGRAM_SIZE, cosine_similarity

logger = logging.getLogger(__name__)


def score(
    a: str,
    b: str,
    algorithm: Union[str, Algorithm] = Algorithm.JARO_WINKLER,
    ngram_size: int = DEFAULT_NGRAM_SIZE,
    index: Optional[CorpusIndex] = None,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
) -> float:
    """Similarity of ``a`` and ``b`` in [0, 1] under ``algorithm``.

    Args:
        a: First string.
        b: Second string.
        algorithm: Algorithm enum or name. Distances ("levenshtein",
            "damerau_levenshtein") are normalized by the longer length.
        ngram_size: Gram width for "cosine". Ignored by "tfidf", which
            always uses the index's own width.
        index: CorpusIndex, required for "tfidf".
        prefix_weight: Prefix bonus for "jaro_winkler".

    Raises:
        AlgorithmError: Unknown algorithm, or "tfidf" without an index.
    """
    algo = normalize_algorithm(algorithm)
    if algo is Algorithm.LEVENSHTEIN:
        return levenshtein_similarity(a, b)
    if algo is Algorithm.DAMERAU_LEVENSHTEIN:
        return damerau_levenshtein_similarity(a, b)
    if algo is Algorithm.JARO:
        return jaro_similarity(a, b)
    if algo is Algorithm.JARO_WINKLER:
        return jaro_winkler_similarity(a, b, prefix_weight=prefix_weight)
    if algo is Algorithm.COSINE:
        return cosine_similarity(a, b, ngram_size)
    if algo is Algorithm.TFIDF:
        if index is None:
            raise AlgorithmError("algorithm 'tfidf' requires a CorpusIndex")
        return index.similarity(a, b)
    raise AlgorithmError(f"Algorithm not supported for scoring: {algo.value}")


class TypoClassifier:
    """
    Decide whether a string is a near miss for a target.

    ``is_typo(text, target)`` is ``score(text, target) >= threshold``.
    Arguments left as None take their value from the environment
    (see ``typoscore._config``).

    Example:
        >>> clf = TypoClassifier(algorithm="jaro_winkler", threshold=0.9)
        >>> clf.is_typo("jonh", "john")
        True
        >>> clf.is_typo("jane", "john")
        False
    """

    def __init__(
        self,
        algorithm: Union[str, Algorithm, None] = None,
        threshold: Optional[float] = None,
        ngram_size: Optional[int] = None,
        index: Optional[CorpusIndex] = None,
        prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
    ):
        """
        Args:
            algorithm: Scoring algorithm. Defaults to TYPOSCORE_ALGORITHM or
                "jaro_winkler".
            threshold: Minimum score for a typo, in [0.0, 1.0]. Defaults to
                TYPOSCORE_THRESHOLD or 0.85.
            ngram_size: Gram width for "cosine". When an index is given this
                defaults to (and must equal) the index's width.
            index: CorpusIndex, required for "tfidf".
            prefix_weight: Prefix bonus for "jaro_winkler", in [0.0, 0.25].

        Raises:
            AlgorithmError: Unknown algorithm, or "tfidf" without an index.
            ValidationError: Threshold, ngram_size or prefix_weight out of
                range, or an ngram_size that disagrees with the index.
        """
        if algorithm is None or threshold is None or (ngram_size is None and index is None):
            settings = load_settings()
            if algorithm is None:
                algorithm = settings.algorithm
            if threshold is None:
                threshold = settings.threshold
            if ngram_size is None and index is None:
                ngram_size = settings.ngram_size

        if index is not None:
            if ngram_size is None:
                ngram_size = index.ngram_size
            elif ngram_size != index.ngram_size:
                raise ValidationError(
                    f"ngram_size {ngram_size} does not match the index's ngram_size "
                    f"{index.ngram_size}"
                )

        self._algorithm = normalize_algorithm(algorithm)
        self._threshold = check_unit_interval("threshold", threshold)
        self._ngram_size = check_ngram_size(ngram_size)
        self._index = index
        self._prefix_weight = check_prefix_weight(prefix_weight)

        if self._algorithm is Algorithm.TFIDF and index is None:
            raise AlgorithmError("algorithm 'tfidf' requires a CorpusIndex")

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def threshold(self) -> float:
        return self._threshold

    @property
    def ngram_size(self) -> int:
        return self._ngram_size

    @property
    def index(self) -> Optional[CorpusIndex]:
        return self._index

    def score(self, text: str, target: str) -> float:
        """Normalized similarity in [0, 1] used for the typo decision."""
        return score(
            text,
            target,
            algorithm=self._algorithm,
            ngram_size=self._ngram_size,
            index=self._index,
            prefix_weight=self._prefix_weight,
        )

    def is_typo(self, text: str, target: str) -> bool:
        """True when ``text`` scores at least ``threshold`` against ``target``."""
        value = self.score(text, target)
        decision = value >= self._threshold
        logger.debug(
            "%s(%r, %r) = %.4f threshold=%.4f typo=%s",
            self._algorithm.value,
            text,
            target,
            value,
            self._threshold,
            decision,
        )
        return decision

    def __repr__(self) -> str:
        return (
            f"TypoClassifier(algorithm={self._algorithm.value!r}, "
            f"threshold={self._threshold}, ngram_size={self._ngram_size})"
        )


def is_typo(
    text: str,
    target: str,
    threshold: Optional[float] = None,
    algorithm: Union[str, Algorithm, None] = None,
    ngram_size: Optional[int] = None,
    index: Optional[CorpusIndex] = None,
) -> bool:
    """
    One-shot typo check, Jaro-Winkler by default.

    Example:
        >>> is_typo("MARHTA", "MARTHA", threshold=0.95)
        True
    """
    classifier = TypoClassifier(
        algorithm=algorithm, threshold=threshold, ngram_size=ngram_size, index=index
    )
    return classifier.is_typo(text, target)


__all__ = ["TypoClassifier", "is_typo", "score"]
