"""Exception hierarchy for typoscore."""


class TypoScoreError(Exception):
    """Base class for all typoscore errors."""


class ValidationError(TypoScoreError, ValueError):
    """An argument is outside its valid range.

    Raised for a non-positive ngram_size, an empty corpus, a threshold
    outside [0.0, 1.0] and similar caller mistakes. Never raised for
    degenerate but valid strings (empty, single character, disjoint).
    """


class AlgorithmError(TypoScoreError, ValueError):
    """An algorithm name is unknown or cannot be used as requested."""


# The name used for this condition in the algorithm descriptions
InvalidArgument = ValidationError


__all__ = ["TypoScoreError", "ValidationError", "AlgorithmError", "InvalidArgument"]
