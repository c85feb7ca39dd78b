"""Edit distances: Levenshtein and (unrestricted) Damerau-Levenshtein.

Both operate on Python ``str`` and therefore count code points, not bytes:
``levenshtein("café", "cafe") == 1``.
"""

from typoscore._numeric import normalized_distance_similarity
from typoscore._utils import check_text


def levenshtein(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions and
    substitutions needed to turn ``a`` into ``b``.

    Uses a single rolling row, so memory is O(min(len(a), len(b))).

    Example:
        >>> levenshtein("kitten", "sitting")
        3
    """
    check_text(a=a, b=b)
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    # keep the shorter string on the inner loop
    if len(a) < len(b):
        a, b = b, a
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i]
        for j, cb in enumerate(b, start=1):
            ins = cur[j - 1] + 1
            dele = prev[j] + 1
            sub = prev[j - 1] + (0 if ca == cb else 1)
            cur.append(min(ins, dele, sub))
        prev = cur
    return prev[-1]


def damerau_levenshtein(a: str, b: str) -> int:
    """Edit distance that also counts a transposition of two characters as
    one edit, even when other edits happen between them.

    This is the true Damerau-Levenshtein distance (Lowrance-Wagner), not the
    restricted "optimal string alignment" variant: ``"ca" -> "abc"`` is 2.
    Needs the full (len(a)+2) x (len(b)+2) matrix.

    Example:
        >>> damerau_levenshtein("ab", "ba")
        1
    """
    check_text(a=a, b=b)
    if a == b:
        return 0
    len_a, len_b = len(a), len(b)
    if not len_a:
        return len_b
    if not len_b:
        return len_a

    max_dist = len_a + len_b
    # row/column 0 hold the sentinel so the transposition lookup is always defined
    d = [[max_dist] * (len_b + 2) for _ in range(len_a + 2)]
    for i in range(len_a + 1):
        d[i + 1][1] = i
    for j in range(len_b + 1):
        d[1][j + 1] = j

    last_row_for_char: dict = {}
    for i in range(1, len_a + 1):
        ca = a[i - 1]
        last_match_col = 0
        for j in range(1, len_b + 1):
            cb = b[j - 1]
            row = last_row_for_char.get(cb, 0)
            col = last_match_col
            if ca == cb:
                cost = 0
                last_match_col = j
            else:
                cost = 1
            d[i + 1][j + 1] = min(
                d[i][j] + cost,
                d[i + 1][j] + 1,
                d[i][j + 1] + 1,
                d[row][col] + (i - row - 1) + 1 + (j - col - 1),
            )
        last_row_for_char[ca] = i

    return d[len_a + 1][len_b + 1]


def levenshtein_similarity(a: str, b: str) -> float:
    """Levenshtein distance normalized to [0, 1]: ``1 - d / max(len(a), len(b))``.

    Example:
        >>> levenshtein_similarity("hello", "hallo")
        0.8
    """
    return normalized_distance_similarity(levenshtein(a, b), len(a), len(b))


def damerau_levenshtein_similarity(a: str, b: str) -> float:
    """Damerau-Levenshtein distance normalized to [0, 1]."""
    return normalized_distance_similarity(damerau_levenshtein(a, b), len(a), len(b))


# Convenience aliases
edit_distance = levenshtein
transposition_distance = damerau_levenshtein

__all__ = [
    "levenshtein",
    "damerau_levenshtein",
    "levenshtein_similarity",
    "damerau_levenshtein_similarity",
    "edit_distance",
    "transposition_distance",
]
