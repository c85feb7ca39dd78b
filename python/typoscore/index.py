"""CorpusIndex: IDF-weighted n-gram cosine similarity.

This module builds an inverse-document-frequency table from a reference
corpus once, then scores string pairs against it. Grams that are common
across the corpus carry little weight, so two strings only look similar
when they share distinctive grams.

Note:
    A CorpusIndex is never mutated after ``__init__`` returns, so a single
    instance may be shared by any number of reader threads.
"""

import logging
import math
from collections import Counter
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

import polars as pl

from typoscore._errors import ValidationError
from typoscore._numeric import cosine
from typoscore._utils import check_ngram_size, check_text
from typoscore.ngram import DEFAULT_NGRAM_SIZE, vectorize

logger = logging.getLogger(__name__)


class CorpusIndex:
    """
    An immutable IDF table over the character n-grams of a corpus.

    ``idf(gram) = ln(total_documents / documents_containing_gram)``, so a
    gram found in every document has weight 0.0. The same ``ngram_size`` is
    used to build the table and to vectorize the strings passed to
    :meth:`similarity`.

    Example:
        >>> from typoscore import CorpusIndex
        >>>
        >>> index = CorpusIndex(["acme corp", "acme inc", "globex corp"], ngram_size=2)
        >>> 0.0 < index.similarity("acme corp", "acme crop") < 1.0
        True
        >>> index.idf("ac") < index.idf("gl")
        True
    """

    def __init__(self, corpus: Iterable[str], ngram_size: int = DEFAULT_NGRAM_SIZE):
        """
        Build the IDF table for a corpus.

        Args:
            corpus: Reference documents. Copied into a tuple; later changes
                to the caller's sequence do not affect the index.
            ngram_size: Width of the character n-grams.

        Raises:
            ValidationError: If the corpus is empty or ngram_size < 1.
            TypeError: If a document is not a str.
        """
        check_ngram_size(ngram_size)
        documents = tuple(corpus)
        if not documents:
            raise ValidationError("corpus must contain at least one document")
        for document in documents:
            check_text(document=document)

        document_frequency: Counter = Counter()
        for document in documents:
            document_frequency.update(vectorize(document, ngram_size).keys())

        total = len(documents)
        idf: Dict[str, float] = {
            gram: math.log(total / count) for gram, count in document_frequency.items()
        }

        self._documents: Tuple[str, ...] = documents
        self._ngram_size = ngram_size
        self._idf: Mapping[str, float] = MappingProxyType(idf)
        logger.debug(
            "Built CorpusIndex: documents=%d vocabulary=%d ngram_size=%d",
            total,
            len(idf),
            ngram_size,
        )

    @classmethod
    def from_series(
        cls, series: "pl.Series", ngram_size: int = DEFAULT_NGRAM_SIZE
    ) -> "CorpusIndex":
        """
        Create a CorpusIndex from a Polars Series.

        Null values are indexed as empty documents: they count towards the
        document total but contribute no grams.

        Example:
            >>> names = pl.Series(["Apple", "Microsoft", None])
            >>> index = CorpusIndex.from_series(names)
            >>> index.num_documents()
            3
        """
        items = [str(x) if x is not None else "" for x in series.to_list()]
        return cls(items, ngram_size=ngram_size)

    @classmethod
    def from_dataframe(
        cls, df: "pl.DataFrame", column: str, ngram_size: int = DEFAULT_NGRAM_SIZE
    ) -> "CorpusIndex":
        """Create a CorpusIndex from a DataFrame column."""
        return cls.from_series(df[column], ngram_size=ngram_size)

    @property
    def ngram_size(self) -> int:
        return self._ngram_size

    @property
    def documents(self) -> Tuple[str, ...]:
        return self._documents

    @property
    def vocabulary(self) -> Mapping[str, float]:
        """Read-only view of the gram -> IDF table."""
        return self._idf

    def num_documents(self) -> int:
        return len(self._documents)

    def idf(self, gram: str) -> float:
        """IDF of ``gram``; 0.0 for grams that never occur in the corpus."""
        return self._idf.get(gram, 0.0)

    def weighted_vector(self, s: str) -> Dict[str, float]:
        """
        Map each distinct gram of ``s`` to its IDF.

        Occurrence counts are not multiplied in: a gram weighs its IDF
        whether it appears once or several times. Unknown grams weigh 0.0.
        """
        return {gram: self.idf(gram) for gram in vectorize(s, self._ngram_size)}

    def similarity(self, a: str, b: str) -> float:
        """
        Cosine similarity of the IDF-weighted gram vectors of ``a`` and ``b``.

        Returns 0.0 when either vector has zero magnitude, which happens when
        a string has no grams or only grams that occur in every document (or
        in none).

        Example:
            >>> index = CorpusIndex(["abc", "abc", "abc"], ngram_size=1)
            >>> index.similarity("a", "a")
            0.0
        """
        return cosine(self.weighted_vector(a), self.weighted_vector(b))

    def __len__(self) -> int:
        """Return the number of indexed documents."""
        return len(self._documents)

    def __contains__(self, gram: object) -> bool:
        return gram in self._idf

    def __repr__(self) -> str:
        return (
            f"CorpusIndex(ngram_size={self._ngram_size}, "
            f"documents={len(self._documents)}, vocabulary={len(self._idf)})"
        )


__all__ = ["CorpusIndex"]
