"""Numeric helpers shared by the similarity algorithms."""

import math
from typing import Mapping


def clamp_unit(value: float) -> float:
    """Clamp a score into [0.0, 1.0], absorbing floating-point drift."""
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


def normalized_distance_similarity(distance: int, len_a: int, len_b: int) -> float:
    """Turn an edit distance into a similarity: 1 - distance / max(len_a, len_b).

    Two empty strings are identical and score 1.0.
    """
    longest = max(len_a, len_b)
    if longest == 0:
        return 1.0
    return clamp_unit(1.0 - distance / longest)


def dot(u: Mapping[str, float], v: Mapping[str, float]) -> float:
    """Dot product over the intersection of keys."""
    if len(u) > len(v):
        u, v = v, u
    return sum(weight * v[key] for key, weight in u.items() if key in v)


def squared_norm(u: Mapping[str, float]) -> float:
    return sum(weight * weight for weight in u.values())


def cosine(u: Mapping[str, float], v: Mapping[str, float]) -> float:
    """Cosine of the angle between two sparse vectors.

    A zero-magnitude vector on either side gives 0.0. Both squared norms are
    multiplied before the square root so that integer count vectors compared
    with themselves come out at exactly 1.0.
    """
    norms = squared_norm(u) * squared_norm(v)
    if norms == 0:
        return 0.0
    return clamp_unit(dot(u, v) / math.sqrt(norms))
