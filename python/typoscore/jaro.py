"""Jaro and Jaro-Winkler similarity."""

import math

from typoscore._errors import ValidationError
from typoscore._numeric import clamp_unit
from typoscore._utils import check_text

MAX_PREFIX = 4
DEFAULT_PREFIX_WEIGHT = 0.1
MAX_PREFIX_WEIGHT = 0.25


def _match_window(len_a: int, len_b: int) -> int:
    return max(1, max(len_a, len_b) // 2 - 1)


def jaro_similarity(a: str, b: str) -> float:
    """Jaro similarity in [0, 1].

    Characters match when they are equal and no further apart than the match
    window; each position of ``b`` can be matched once, taking the leftmost
    free candidate. The score averages ``m/len(a)``, ``m/len(b)`` and
    ``(m - t)/m`` where ``t`` is half the number of matched characters that
    appear out of order.

    Greedy matching depends on which string drives the scan, so the pair is
    put in a canonical order first (shorter string, then lexicographically
    smaller) to make ``jaro_similarity(a, b) == jaro_similarity(b, a)`` exact.

    Example:
        >>> round(jaro_similarity("MARTHA", "MARHTA"), 4)
        0.9444
    """
    check_text(a=a, b=b)
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    if (len(a), a) > (len(b), b):
        a, b = b, a

    len_a, len_b = len(a), len(b)
    window = _match_window(len_a, len_b)
    a_matched = [False] * len_a
    b_matched = [False] * len_b
    matches = 0

    for i, ca in enumerate(a):
        lo = max(0, i - window)
        hi = min(i + window + 1, len_b)
        for j in range(lo, hi):
            if not b_matched[j] and b[j] == ca:
                a_matched[i] = b_matched[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    a_seq = [c for c, hit in zip(a, a_matched) if hit]
    b_seq = [c for c, hit in zip(b, b_matched) if hit]
    transpositions = sum(x != y for x, y in zip(a_seq, b_seq)) / 2.0

    score = (matches / len_a + matches / len_b + (matches - transpositions) / matches) / 3.0
    return clamp_unit(score)


def common_prefix_length(a: str, b: str, limit: int = MAX_PREFIX) -> int:
    """Number of leading positions where ``a[i] == b[i]``, capped at ``limit``."""
    n = 0
    for ca, cb in zip(a, b):
        if n >= limit or ca != cb:
            break
        n += 1
    return n


def check_prefix_weight(prefix_weight: float) -> float:
    if (
        isinstance(prefix_weight, bool)
        or not isinstance(prefix_weight, (int, float))
        or math.isnan(prefix_weight)
        or not 0.0 <= prefix_weight <= MAX_PREFIX_WEIGHT
    ):
        raise ValidationError(
            f"prefix_weight must be in range [0.0, {MAX_PREFIX_WEIGHT}], got {prefix_weight!r}"
        )
    return float(prefix_weight)


def jaro_winkler_similarity(
    a: str, b: str, prefix_weight: float = DEFAULT_PREFIX_WEIGHT
) -> float:
    """Jaro similarity boosted by a shared prefix of up to 4 characters.

    ``score = jaro + prefix_len * prefix_weight * (1 - jaro)``

    Args:
        a: First string.
        b: Second string.
        prefix_weight: Scaling factor for the prefix bonus, in [0.0, 0.25].
            Values above 0.25 could push the score past 1.0.

    Raises:
        ValidationError: If prefix_weight is outside [0.0, 0.25].

    Example:
        >>> round(jaro_winkler_similarity("MARTHA", "MARHTA"), 3)
        0.961
    """
    check_prefix_weight(prefix_weight)
    jaro = jaro_similarity(a, b)
    if jaro == 1.0:
        return 1.0
    prefix = common_prefix_length(a, b)
    return clamp_unit(jaro + prefix * prefix_weight * (1.0 - jaro))


__all__ = [
    "jaro_similarity",
    "jaro_winkler_similarity",
    "common_prefix_length",
]
