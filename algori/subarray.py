"""Maximum subarray search."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def merge_max_subarray(array: Sequence[Any]) -> tuple[int, int, Any]:
    """Return (left, right, sum) of the best subarray crossing the midpoint.

    Each half contributes only a positive extension; with none, its bound
    stays at the midpoint and contributes zero.
    """
    if not array:
        raise ValueError("merge_max_subarray of an empty sequence")
    mid = (len(array) - 1) // 2

    left_max = left_sum = 0
    left_index = mid
    for i in range(mid, -1, -1):
        left_sum += array[i]
        if left_sum > left_max:
            left_max, left_index = left_sum, i

    right_max = right_sum = 0
    right_index = mid
    for j in range(mid + 1, len(array)):
        right_sum += array[j]
        if right_sum > right_max:
            right_max, right_index = right_sum, j

    return left_index, right_index, left_max + right_max


def rude_max_subarray(array: Sequence[Any]) -> tuple[int, int, Any]:
    """Return (left, right, sum) of the largest subarray by brute force.

    The first element alone is the starting candidate; other candidates
    span at least two elements.
    """
    if not array:
        raise ValueError("rude_max_subarray of an empty sequence")
    best = (0, 0, array[0])
    for i in range(len(array) - 1):
        total = array[i]
        for j in range(i + 1, len(array)):
            total += array[j]
            if total > best[2]:
                best = (i, j, total)
    return best