"""Character n-gram vectors and cosine similarity."""

from collections import Counter
from typing import List

from typoscore._numeric import cosine
from typoscore._utils import check_ngram_size, check_text

DEFAULT_NGRAM_SIZE = 2


def extract_ngrams(s: str, ngram_size: int = DEFAULT_NGRAM_SIZE) -> List[str]:
    """Return every contiguous substring of length ``ngram_size``, in order.

    Strings shorter than ``ngram_size`` have no grams and give ``[]``.

    Raises:
        ValidationError: If ngram_size < 1.

    Example:
        >>> extract_ngrams("abc", 2)
        ['ab', 'bc']
    """
    check_text(s=s)
    check_ngram_size(ngram_size)
    return [s[i : i + ngram_size] for i in range(len(s) - ngram_size + 1)]


def vectorize(s: str, ngram_size: int = DEFAULT_NGRAM_SIZE) -> Counter:
    """Count the n-grams of ``s``.

    Returns:
        Counter mapping each gram to its number of occurrences. Empty when
        ``ngram_size > len(s)``.

    Raises:
        ValidationError: If ngram_size < 1.

    Example:
        >>> vectorize("banana", 2)
        Counter({'an': 2, 'na': 2, 'ba': 1})
    """
    return Counter(extract_ngrams(s, ngram_size))


def cosine_similarity(a: str, b: str, ngram_size: int = DEFAULT_NGRAM_SIZE) -> float:
    """Cosine similarity of the n-gram count vectors of ``a`` and ``b``.

    If either string has no grams (empty, or shorter than ngram_size) the
    result is 0.0, including when ``a == b``.

    Example:
        >>> cosine_similarity("night", "nacht", 2)
        0.25
    """
    return cosine(vectorize(a, ngram_size), vectorize(b, ngram_size))


__all__ = ["extract_ngrams", "vectorize", "cosine_similarity", "DEFAULT_NGRAM_SIZE"]
