"""Edit-distance similarity for typo-tolerant matching.

Similarity is the Levenshtein distance scaled by the longer string:

    similarity(a, b) = 1 - distance(a, b) / max(len(a), len(b))

Two empty strings have similarity 0 (there is nothing to match).
"""

from __future__ import annotations

from collections.abc import Iterable
import math


def levenshtein_distance(s1: str, s2: str, max_distance: int | None = None) -> int:
    """Calculate the Levenshtein (edit) distance between two strings.

    Unit cost for insertion, deletion and substitution, computed with two
    rolling rows.

    Args:
        s1: First string.
        s2: Second string.
        max_distance: If provided, return ``max_distance + 1`` as soon as the
            distance is guaranteed to exceed this threshold.

    Returns:
        The minimum number of single-character edits needed to change s1
        into s2, or ``max_distance + 1`` when the bound is exceeded.

    Examples:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("lptop", "laptop")
        1
        >>> levenshtein_distance("", "abc")
        3
    """
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    # Shorter string indexes the row
    if len(s1) > len(s2):
        s1, s2 = s2, s1

    m, n = len(s1), len(s2)

    if max_distance is not None and n - m > max_distance:
        return max_distance + 1

    prev_row = list(range(m + 1))
    curr_row = [0] * (m + 1)

    for j in range(1, n + 1):
        curr_row[0] = j
        row_min = j
        ch = s2[j - 1]
        for i in range(1, m + 1):
            cost = 0 if s1[i - 1] == ch else 1
            curr_row[i] = min(
                prev_row[i] + 1,  # deletion
                curr_row[i - 1] + 1,  # insertion
                prev_row[i - 1] + cost,  # substitution
            )
            if curr_row[i] < row_min:
                row_min = curr_row[i]

        if max_distance is not None and row_min > max_distance:
            return max_distance + 1

        prev_row, curr_row = curr_row, prev_row

    return prev_row[m]


def similarity(a: str, b: str, min_similarity: float | None = None) -> float:
    """Return the normalized edit similarity of ``a`` and ``b`` in [0, 1].

    With ``min_similarity`` the edit distance is bounded so pairs that cannot
    reach it bail out early; such pairs report 0.0. Pairs at or above the
    bound get their exact similarity.

    Examples:
        >>> similarity("abc", "abc")
        1.0
        >>> similarity("", "")
        0.0
        >>> similarity("abcde", "abxye")
        0.6
        >>> similarity("abcdef", "uvwxyz", min_similarity=0.6)
        0.0
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 0.0
    if min_similarity is None:
        return 1.0 - levenshtein_distance(a, b) / longest

    # Any distance above this bound is strictly below min_similarity
    max_distance = math.ceil((1.0 - min_similarity) * longest)
    distance = levenshtein_distance(a, b, max_distance)
    if distance > max_distance:
        return 0.0
    return 1.0 - distance / longest


def best_similarity(query: str, candidates: Iterable[str], min_similarity: float | None = None) -> float:
    """Highest similarity between ``query`` and any of ``candidates`` (0 if none).

    ``min_similarity`` is passed through to ``similarity`` to prune hopeless
    candidates.
    """
    best = 0.0
    for candidate in candidates:
        score = similarity(query, candidate, min_similarity)
        if score > best:
            best = score
            if best == 1.0:
                break
    return best
