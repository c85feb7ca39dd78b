"""Tests for environment-driven defaults."""

import pydantic
import pytest

import typoscore as ts
from typoscore import Algorithm, load_settings


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings()
        assert settings == ts.Settings()
        assert settings.algorithm is Algorithm.JARO_WINKLER
        assert settings.threshold == 0.85
        assert settings.ngram_size == 2

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("TYPOSCORE_ALGORITHM", "Damerau")
        monkeypatch.setenv("TYPOSCORE_THRESHOLD", "0.7")
        monkeypatch.setenv("TYPOSCORE_NGRAM_SIZE", "3")
        settings = load_settings()
        assert settings.algorithm is Algorithm.DAMERAU_LEVENSHTEIN
        assert settings.threshold == 0.7
        assert settings.ngram_size == 3

    def test_empty_values_use_defaults(self, monkeypatch):
        monkeypatch.setenv("TYPOSCORE_THRESHOLD", "")
        monkeypatch.setenv("TYPOSCORE_ALGORITHM", "")
        settings = load_settings()
        assert settings.threshold == 0.85
        assert settings.algorithm is Algorithm.JARO_WINKLER

    def test_unrelated_variables_ignored(self, monkeypatch):
        monkeypatch.setenv("TYPOSCORE_UNUSED", "whatever")
        assert load_settings() == ts.Settings()

    def test_unknown_algorithm(self, monkeypatch):
        monkeypatch.setenv("TYPOSCORE_ALGORITHM", "phonetic")
        with pytest.raises(ts.AlgorithmError, match="Unknown algorithm"):
            load_settings()

    @pytest.mark.parametrize("raw", ["high", "1.5", "-0.2", "nan"])
    def test_bad_threshold(self, monkeypatch, raw):
        monkeypatch.setenv("TYPOSCORE_THRESHOLD", raw)
        with pytest.raises(ts.ValidationError, match="TYPOSCORE_THRESHOLD"):
            load_settings()

    @pytest.mark.parametrize("raw", ["two", "0", "2.5"])
    def test_bad_ngram_size(self, monkeypatch, raw):
        monkeypatch.setenv("TYPOSCORE_NGRAM_SIZE", raw)
        with pytest.raises(ts.ValidationError, match="TYPOSCORE_NGRAM_SIZE"):
            load_settings()

    def test_settings_are_frozen(self):
        with pytest.raises(pydantic.ValidationError):
            load_settings().threshold = 0.1

    def test_keyword_construction_validates(self):
        assert ts.Settings(algorithm="edit").algorithm is Algorithm.LEVENSHTEIN
        with pytest.raises(pydantic.ValidationError, match="threshold must be in range"):
            ts.Settings(threshold=2.0)


class TestClassifierUsesSettings:
    def test_environment_feeds_classifier(self, monkeypatch):
        monkeypatch.setenv("TYPOSCORE_ALGORITHM", "cosine")
        monkeypatch.setenv("TYPOSCORE_THRESHOLD", "0.3")
        monkeypatch.setenv("TYPOSCORE_NGRAM_SIZE", "3")
        clf = ts.TypoClassifier()
        assert clf.algorithm is Algorithm.COSINE
        assert clf.threshold == 0.3
        assert clf.ngram_size == 3

    def test_explicit_arguments_win(self, monkeypatch):
        monkeypatch.setenv("TYPOSCORE_ALGORITHM", "cosine")
        clf = ts.TypoClassifier(algorithm="jaro", threshold=0.5, ngram_size=2)
        assert clf.algorithm is Algorithm.JARO

    def test_environment_not_read_when_fully_specified(self, monkeypatch):
        monkeypatch.setenv("TYPOSCORE_THRESHOLD", "not-a-number")
        clf = ts.TypoClassifier(algorithm="jaro", threshold=0.5, ngram_size=2)
        assert clf.threshold == 0.5

    def test_bad_environment_surfaces_on_construction(self, monkeypatch):
        monkeypatch.setenv("TYPOSCORE_THRESHOLD", "not-a-number")
        with pytest.raises(ts.ValidationError):
            ts.TypoClassifier()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
