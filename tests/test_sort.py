import random

import pytest

from algori.sort import (
    binary_sort,
    bubble_sort,
    count_sort,
    heap_max_sort,
    heap_min_sort,
    insertion_sort,
    merge_sort,
    pdqsort,
    quicksort,
    radix_sort,
    selection_sort,
)

EXAMPLE = [7, 3, 5, 1, 9, 65, 65, 4, 6, 6]
EXPECTED = [1, 3, 4, 5, 6, 6, 7, 9, 65, 65]


def _random_cases(seed):
    rng = random.Random(seed)
    return [
        [rng.randint(-100, 100) for _ in range(size)]
        for size in (0, 1, 2, 17, 50, 200)
    ]


def test_insertion_sort_example():
    data = list(EXAMPLE)
    insertion_sort(data)
    assert data == EXPECTED


def test_binary_sort_example():
    data = list(EXAMPLE)
    binary_sort(data)
    assert data == EXPECTED


def test_bubble_sort_example():
    data = list(EXAMPLE)
    bubble_sort(data)
    assert data == EXPECTED


def test_selection_sort_example():
    data = list(EXAMPLE)
    selection_sort(data)
    assert data == EXPECTED


def test_heap_max_sort_example():
    data = list(EXAMPLE)
    heap_max_sort(data)
    assert data == EXPECTED


def test_quicksort_example():
    data = list(EXAMPLE)
    quicksort(data)
    assert data == EXPECTED


def test_count_sort_example():
    data = list(EXAMPLE)
    count_sort(data)
    assert data == EXPECTED


def test_radix_sort_example():
    data = list(EXAMPLE)
    radix_sort(data)
    assert data == EXPECTED


def test_pdqsort_example():
    data = list(EXAMPLE)
    pdqsort(data)
    assert data == EXPECTED


def test_merge_sort_example_returns_new_list():
    data = list(EXAMPLE)
    assert merge_sort(data) == EXPECTED
    assert data == EXAMPLE


def test_nine_element_example():
    data = [7, 3, 5, 1, 9, 65, 65, 4, 6]
    quicksort(data)
    assert data == [1, 3, 4, 5, 6, 7, 9, 65, 65]


def test_insertion_sort_random_with_negatives():
    for data in _random_cases(5):
        expected = sorted(data)
        insertion_sort(data)
        assert data == expected


def test_bubble_sort_random_with_negatives():
    for data in _random_cases(5):
        expected = sorted(data)
        bubble_sort(data)
        assert data == expected


def test_selection_sort_random_with_negatives():
    for data in _random_cases(5):
        expected = sorted(data)
        selection_sort(data)
        assert data == expected


def test_heap_max_sort_random_with_negatives():
    for data in _random_cases(5):
        expected = sorted(data)
        heap_max_sort(data)
        assert data == expected


def test_quicksort_random_with_negatives():
    for data in _random_cases(5):
        expected = sorted(data)
        quicksort(data)
        assert data == expected


def test_pdqsort_random_with_negatives():
    for data in _random_cases(5):
        expected = sorted(data)
        pdqsort(data)
        assert data == expected


@pytest.mark.parametrize("func", [count_sort, radix_sort])
def test_random_non_negative(func):
    rng = random.Random(9)
    for size in (0, 1, 33, 300):
        data = [rng.randint(0, 5000) for _ in range(size)]
        expected = sorted(data)
        func(data)
        assert data == expected


@pytest.mark.parametrize("func", [count_sort, radix_sort])
def test_negative_values_rejected(func):
    with pytest.raises(ValueError):
        func([3, -1, 2])


def test_merge_sort_random():
    rng = random.Random(2)
    data = [rng.random() for _ in range(300)]
    assert merge_sort(data) == sorted(data)


def test_heap_min_sort_descending():
    rng = random.Random(4)
    data = [rng.randint(-30, 30) for _ in range(60)]
    expected = sorted(data, reverse=True)
    heap_min_sort(data)
    assert data == expected


def test_binary_sort_distinct_values():
    rng = random.Random(8)
    data = rng.sample(range(1000), 120)
    expected = sorted(data)
    binary_sort(data)
    assert data == expected


@pytest.mark.parametrize("data", [[], [1]])
def test_binary_sort_too_short(data):
    with pytest.raises(ValueError):
        binary_sort(data)


def test_quicksort_and_pdqsort_on_sorted_input():
    data = list(range(3000))
    quicksort(data)
    assert data == list(range(3000))
    data.reverse()
    pdqsort(data)
    assert data == list(range(3000))


def test_sorts_strings():
    words = ["pear", "apple", "fig", "banana", "apple"]
    data = list(words)
    pdqsort(data)
    assert data == sorted(words)