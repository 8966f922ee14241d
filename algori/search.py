"""Searching in sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NamedTuple


class SearchResult(NamedTuple):
    """Outcome of a binary search: the match index, or the insertion point."""

    found: bool
    index: int


def _bisect(array: Sequence[Any], key: Any, hi: int | None = None) -> SearchResult:
    left, right = 0, len(array) if hi is None else hi
    while left < right:
        mid = (left + right) // 2
        if array[mid] < key:
            left = mid + 1
        elif array[mid] > key:
            right = mid
        else:
            return SearchResult(True, mid)
    return SearchResult(False, left)


def binary_search(array: Sequence[Any], key: Any) -> SearchResult:
    """Search a sorted sequence; on a miss the index is the insertion point."""
    return _bisect(array, key)


def linearity_search(array: Sequence[Any], value: Any) -> int | None:
    """Return the index of the first element equal to value, or None."""
    return next((i for i, item in enumerate(array) if item == value), None)


def max_search(array: Sequence[Any]) -> int:
    """Return the index of the first largest element."""
    if not array:
        raise ValueError("max_search of an empty sequence")
    return max(range(len(array)), key=array.__getitem__)


def min_search(array: Sequence[Any]) -> int:
    """Return the index of the first smallest element."""
    if not array:
        raise ValueError("min_search of an empty sequence")
    return min(range(len(array)), key=array.__getitem__)


def min_and_max(array: Sequence[Any]) -> tuple[int, int] | None:
    """Return (min index, max index) using pairwise comparisons, or None if empty."""
    n = len(array)
    if n == 0:
        return None
    if n % 2 == 0:
        min_i, max_i = (1, 0) if array[0] > array[1] else (0, 1)
        start = 2
    else:
        min_i = max_i = 0
        start = 1
    for i in range(start, n - 1, 2):
        a, b = array[i], array[i + 1]
        if a > b:
            if a > array[max_i]:
                max_i = i
            if b < array[min_i]:
                min_i = i + 1
        else:
            if b > array[max_i]:
                max_i = i + 1
            if a < array[min_i]:
                min_i = i
    return min_i, max_i