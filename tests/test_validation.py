"""
Parameter validation tests for typoscore.

Tests cover:
- Error hierarchy
- Algorithm name normalization
- Gram width and threshold boundaries
"""

import pytest

import typoscore as ts
from typoscore import Algorithm
from typoscore._utils import check_unit_interval, normalize_algorithm


class TestErrorHierarchy:
    def test_validation_error_is_value_error(self):
        assert issubclass(ts.ValidationError, ts.TypoScoreError)
        assert issubclass(ts.ValidationError, ValueError)
        assert ts.InvalidArgument is ts.ValidationError

    def test_algorithm_error(self):
        assert issubclass(ts.AlgorithmError, ts.TypoScoreError)
        assert issubclass(ts.AlgorithmError, ValueError)


class TestNormalizeAlgorithm:
    def test_enum_passthrough(self):
        assert normalize_algorithm(Algorithm.JARO) is Algorithm.JARO

    def test_strings(self):
        assert normalize_algorithm("levenshtein") is Algorithm.LEVENSHTEIN
        assert normalize_algorithm("JARO_WINKLER") is Algorithm.JARO_WINKLER
        assert normalize_algorithm(" cosine ") is Algorithm.COSINE

    def test_aliases(self):
        assert normalize_algorithm("damerau") is Algorithm.DAMERAU_LEVENSHTEIN
        assert normalize_algorithm(Algorithm.DAMERAU) is Algorithm.DAMERAU_LEVENSHTEIN
        assert normalize_algorithm("tf_idf") is Algorithm.TFIDF

    def test_unknown(self):
        with pytest.raises(ts.AlgorithmError, match="Valid options"):
            normalize_algorithm("hamming")

    def test_wrong_type(self):
        with pytest.raises(TypeError):
            normalize_algorithm(3)

    def test_is_distance(self):
        assert Algorithm.LEVENSHTEIN.is_distance
        assert Algorithm.DAMERAU.is_distance
        assert not Algorithm.JARO_WINKLER.is_distance
        assert not Algorithm.TFIDF.is_distance


class TestNgramSize:
    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive(self, size):
        with pytest.raises(ts.ValidationError):
            ts.extract_ngrams("hello", size)
        with pytest.raises(ts.ValidationError):
            ts.cosine_similarity("hello", "hello", size)
        with pytest.raises(ts.ValidationError):
            ts.CorpusIndex(["hello"], ngram_size=size)

    @pytest.mark.parametrize("size", [2.0, "2", True])
    def test_non_integer(self, size):
        with pytest.raises(TypeError):
            ts.vectorize("hello", size)


class TestUnitInterval:
    @pytest.mark.parametrize("value", [0, 0.0, 0.5, 1, 1.0])
    def test_accepts(self, value):
        assert check_unit_interval("threshold", value) == float(value)

    @pytest.mark.parametrize("value", [-0.01, 1.01, float("nan"), float("inf"), float("-inf")])
    def test_rejects(self, value):
        with pytest.raises(ts.ValidationError, match="threshold must be in range"):
            check_unit_interval("threshold", value)

    def test_rejects_non_numbers(self):
        with pytest.raises(TypeError):
            check_unit_interval("threshold", "0.5")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
