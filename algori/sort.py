"""Sorting algorithms. All but merge_sort sort a list in place."""

from __future__ import annotations

import operator
from collections import Counter
from collections.abc import Callable, MutableSequence
from itertools import chain
from typing import Any

from algori.search import _bisect


def _swap(arr: MutableSequence[Any], i: int, j: int) -> None:
    arr[i], arr[j] = arr[j], arr[i]


def _insertion_range(arr: MutableSequence[Any], lo: int, hi: int) -> None:
    for index in range(lo + 1, hi):
        i = index
        while i > lo and arr[i - 1] >= arr[i]:
            _swap(arr, i, i - 1)
            i -= 1


def insertion_sort(arr: MutableSequence[Any]) -> None:
    """Insertion sort."""
    _insertion_range(arr, 0, len(arr))


def binary_sort(arr: MutableSequence[Any]) -> None:
    """Binary insertion sort; needs at least two elements.

    An element equal to one already in the sorted prefix is left in place,
    and only a trailing out-of-order element is corrected afterwards.
    """
    n = len(arr)
    if n < 2:
        raise ValueError("binary_sort needs at least two elements")
    for i in range(1, n):
        found, point = _bisect(arr, arr[i], hi=i)
        if not found:
            arr.insert(point, arr.pop(i))
    if arr[-1] < arr[-2]:
        i = n - 1
        while i > 0 and arr[i - 1] >= arr[i]:
            _swap(arr, i, i - 1)
            i -= 1


def bubble_sort(arr: MutableSequence[Any]) -> None:
    """Bubble sort."""
    n = len(arr)
    for i in range(n):
        for j in range(n - i - 1):
            if arr[j] > arr[j + 1]:
                _swap(arr, j, j + 1)


def selection_sort(arr: MutableSequence[Any]) -> None:
    """Selection sort by exchange."""
    n = len(arr)
    for i in range(n):
        for t in range(i + 1, n):
            if arr[t] <= arr[i]:
                _swap(arr, t, i)


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    result = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] < right[ri]:
            result.append(left[li])
            li += 1
        else:
            result.append(right[ri])
            ri += 1
    result.extend(left[li:])
    result.extend(right[ri:])
    return result


def merge_sort(arr: MutableSequence[Any]) -> list[Any]:
    """Return a new sorted list; the input is left unchanged."""
    if len(arr) <= 1:
        return list(arr)
    mid = len(arr) // 2
    return _merge(merge_sort(arr[:mid]), merge_sort(arr[mid:]))


def _sift_down(
    arr: MutableSequence[Any], n: int, i: int, above: Callable[[Any, Any], bool]
) -> None:
    while True:
        top = i
        for child in (2 * i + 1, 2 * i + 2):
            if child < n and above(arr[child], arr[top]):
                top = child
        if top == i:
            return
        _swap(arr, i, top)
        i = top


def _heap_sort(arr: MutableSequence[Any], above: Callable[[Any, Any], bool]) -> None:
    n = len(arr)
    for i in reversed(range(n // 2)):
        _sift_down(arr, n, i, above)
    for i in reversed(range(n)):
        _swap(arr, 0, i)
        _sift_down(arr, i, 0, above)


def heap_max_sort(arr: MutableSequence[Any]) -> None:
    """Heap sort with a max-heap: ascending order."""
    _heap_sort(arr, operator.gt)


def heap_min_sort(arr: MutableSequence[Any]) -> None:
    """Heap sort with a min-heap: descending order."""
    _heap_sort(arr, operator.lt)


def quicksort(arr: MutableSequence[Any]) -> None:
    """Quicksort with the last element as pivot."""
    pending = [(0, len(arr))]
    while pending:
        lo, hi = pending.pop()
        if hi - lo <= 1:
            continue
        last = hi - 1
        pivot = arr[last]
        i = lo
        for j in range(lo, last):
            if arr[j] < pivot:
                _swap(arr, i, j)
                i += 1
        _swap(arr, i, last)
        pending.append((lo, i))
        pending.append((i + 1, hi))


def _pdq_partition(arr: MutableSequence[Any], lo: int, hi: int) -> int:
    last = hi - 1
    _swap(arr, lo + (hi - lo) // 2, last)
    i = lo
    for j in range(lo, last):
        if arr[j] <= arr[last]:
            _swap(arr, i, j)
            i += 1
    _swap(arr, i, last)
    return i


def pdqsort(arr: MutableSequence[Any]) -> None:
    """Quicksort with a middle pivot, using insertion sort on runs of 16 or fewer."""
    pending = [(0, len(arr))]
    while pending:
        lo, hi = pending.pop()
        if hi - lo <= 16:
            _insertion_range(arr, lo, hi)
            continue
        p = _pdq_partition(arr, lo, hi)
        pending.append((lo, p))
        pending.append((p + 1, hi))


def _require_non_negative(arr: MutableSequence[int], name: str) -> None:
    if any(v < 0 for v in arr):
        raise ValueError(f"{name} accepts only non-negative integers")


def count_sort(arr: MutableSequence[int]) -> None:
    """Counting sort of non-negative integers."""
    _require_non_negative(arr, "count_sort")
    counts = Counter(arr)
    top = max(arr, default=0)
    arr[:] = [value for value in range(top + 1) for _ in range(counts[value])]


def radix_sort(arr: MutableSequence[int]) -> None:
    """Least-significant-digit radix sort of non-negative integers."""
    _require_non_negative(arr, "radix_sort")
    top = max(arr, default=0)
    exp = 1
    while top // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in arr:
            buckets[(value // exp) % 10].append(value)
        arr[:] = list(chain.from_iterable(buckets))
        exp *= 10