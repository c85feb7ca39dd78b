"""Internal utilities for typoscore."""

import math
from typing import Union

from typoscore._errors import AlgorithmError, ValidationError
from typoscore.enums import Algorithm

# Valid algorithm names (lowercase)
VALID_ALGORITHMS = frozenset(a.value for a in Algorithm)

_ALIASES = {
    "damerau": Algorithm.DAMERAU_LEVENSHTEIN,
    "edit": Algorithm.LEVENSHTEIN,
    "tf_idf": Algorithm.TFIDF,
}


def normalize_algorithm(algorithm: Union[str, Algorithm]) -> Algorithm:
    """Convert an algorithm name to its canonical Algorithm member.

    Args:
        algorithm: Either an Algorithm enum value or a string algorithm name.

    Returns:
        The canonical Algorithm member (aliases are resolved).

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or Algorithm enum.

    Example:
        >>> normalize_algorithm("Damerau")
        <Algorithm.DAMERAU_LEVENSHTEIN: 'damerau_levenshtein'>
    """
    if isinstance(algorithm, Algorithm):
        return _ALIASES.get(algorithm.value, algorithm)

    if isinstance(algorithm, str):
        algo_lower = algorithm.strip().lower()
        if algo_lower in _ALIASES:
            return _ALIASES[algo_lower]
        if algo_lower in VALID_ALGORITHMS:
            return Algorithm(algo_lower)
        raise AlgorithmError(
            f"Unknown algorithm: '{algorithm}'. "
            f"Valid options: {sorted(VALID_ALGORITHMS | set(_ALIASES))}"
        )

    raise TypeError(
        f"algorithm must be str or Algorithm enum, got {type(algorithm).__name__}"
    )


def check_text(**values: object) -> None:
    """Raise TypeError unless every keyword value is a str."""
    for name, value in values.items():
        if not isinstance(value, str):
            raise TypeError(f"{name} must be str, got {type(value).__name__}")


def check_ngram_size(ngram_size: int) -> int:
    if isinstance(ngram_size, bool) or not isinstance(ngram_size, int):
        raise TypeError(f"ngram_size must be int, got {type(ngram_size).__name__}")
    if ngram_size < 1:
        raise ValidationError(f"ngram_size must be at least 1, got {ngram_size}")
    return ngram_size


def check_unit_interval(name: str, value: float) -> float:
    """Validate that value is a finite number in [0.0, 1.0]."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise ValidationError(f"{name} must be in range [0.0, 1.0], got {value}")
    return float(value)


__all__ = [
    "normalize_algorithm",
    "check_text",
    "check_ngram_size",
    "check_unit_interval",
    "VALID_ALGORITHMS",
]
