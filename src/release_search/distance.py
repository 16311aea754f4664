"""Edit distance used for typo-tolerant token matching."""

from __future__ import annotations

import numpy as np

from release_search.config import MAX_TOKEN_LENGTH


def levenshtein(a: str, b: str) -> int:
    """Unit-cost Levenshtein distance between ``a`` and ``b``.

    Rows of the table follow ``b`` and columns follow ``a``; cell ``[i, j]`` is
    the distance between ``b[:i]`` and ``a[:j]``.
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    matrix = np.zeros((len(b) + 1, len(a) + 1), dtype=np.int32)
    matrix[:, 0] = np.arange(len(b) + 1)
    matrix[0, :] = np.arange(len(a) + 1)
    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matrix[i, j] = matrix[i - 1, j - 1]
            else:
                matrix[i, j] = 1 + min(
                    matrix[i - 1, j - 1],
                    matrix[i, j - 1],
                    matrix[i - 1, j],
                )
    return int(matrix[len(b), len(a)])


def within_distance(
    a: str,
    b: str,
    max_distance: int,
    *,
    max_token_length: int = MAX_TOKEN_LENGTH,
) -> bool:
    if max_distance < 0:
        return False
    if len(a) > max_token_length or len(b) > max_token_length:
        return False
    # The distance is at least the length difference.
    if abs(len(a) - len(b)) > max_distance:
        return False
    return levenshtein(a, b) <= max_distance
