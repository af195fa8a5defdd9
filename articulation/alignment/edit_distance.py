"""Character-level edit distance used for fuzzy word matching."""
from __future__ import annotations

from typing import List


def levenshtein(a: str, b: str) -> int:
    """Classic Levenshtein distance between two strings.

    Counts the minimum number of single-character insertions, deletions and
    substitutions needed to turn ``a`` into ``b``. Symmetric, and
    ``levenshtein(a, a) == 0``.

    Args:
        a: First string
        b: Second string

    Returns:
        Edit distance as a non-negative int
    """
    if a == b:
        return 0
    n, m = len(a), len(b)
    if n == 0:
        return m
    if m == 0:
        return n

    # Two rolling rows of the (n+1) x (m+1) DP table
    prev: List[int] = list(range(m + 1))
    for i in range(1, n + 1):
        curr = [i] + [0] * m
        for j in range(1, m + 1):
            cost_sub = 0 if a[i - 1] == b[j - 1] else 1
            curr[j] = min(
                prev[j] + 1,         # deletion
                curr[j - 1] + 1,     # insertion
                prev[j - 1] + cost_sub,  # substitution / match
            )
        prev = curr
    return prev[m]


def within_distance(a: str, b: str, threshold: int) -> bool:
    """True if ``levenshtein(a, b) <= threshold``."""
    # Length difference is a lower bound on the distance
    if abs(len(a) - len(b)) > threshold:
        return False
    return levenshtein(a, b) <= threshold
