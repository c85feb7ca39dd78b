"""Environment-driven defaults for the typo classifier.

Three variables are read, each time :func:`load_settings` is called:

- ``TYPOSCORE_ALGORITHM``: default scoring algorithm (``jaro_winkler``)
- ``TYPOSCORE_THRESHOLD``: default minimum score for a typo (``0.85``)
- ``TYPOSCORE_NGRAM_SIZE``: default gram width for n-gram algorithms (``2``)

Unset or empty variables fall back to the built-in defaults.
"""

import pydantic
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from typoscore._errors import AlgorithmError, ValidationError
from typoscore._utils import check_ngram_size, check_unit_interval, normalize_algorithm
from typoscore.enums import Algorithm

ENV_PREFIX = "TYPOSCORE_"
ENV_ALGORITHM = ENV_PREFIX + "ALGORITHM"
ENV_THRESHOLD = ENV_PREFIX + "THRESHOLD"
ENV_NGRAM_SIZE = ENV_PREFIX + "NGRAM_SIZE"


class Settings(BaseSettings):
    """Classifier defaults, overridable through ``TYPOSCORE_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    algorithm: Algorithm = Algorithm.JARO_WINKLER
    threshold: float = 0.85
    ngram_size: int = 2

    @field_validator("algorithm", mode="before")
    @classmethod
    def _known_algorithm(cls, value):
        if isinstance(value, str):
            value = value.strip()
        return normalize_algorithm(value)

    @field_validator("threshold")
    @classmethod
    def _threshold_in_range(cls, value: float) -> float:
        return check_unit_interval("threshold", value)

    @field_validator("ngram_size")
    @classmethod
    def _positive_ngram_size(cls, value: int) -> int:
        return check_ngram_size(value)


def load_settings() -> Settings:
    """Read Settings from the environment.

    Raises:
        AlgorithmError: If TYPOSCORE_ALGORITHM names an unknown algorithm.
        ValidationError: If TYPOSCORE_THRESHOLD or TYPOSCORE_NGRAM_SIZE is
            malformed or out of range.
    """
    try:
        return Settings()
    except pydantic.ValidationError as exc:
        for err in exc.errors():
            cause = err.get("ctx", {}).get("error")
            if isinstance(cause, AlgorithmError):
                raise cause from exc
        fields = ", ".join(ENV_PREFIX + str(err["loc"][0]).upper() for err in exc.errors())
        raise ValidationError(f"invalid environment settings ({fields}): {exc}") from exc


__all__ = ["Settings", "load_settings", "ENV_ALGORITHM", "ENV_THRESHOLD", "ENV_NGRAM_SIZE"]
