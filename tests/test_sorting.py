import random

import pytest

from algolab.sorting import (
    bubble_sort,
    bucket_sort,
    heap_sort,
    heapify,
    insertion_sort,
    merge_sort,
    merge_sorted,
    quick_sort,
    radix_sort,
    selection_sort,
    shell_sort,
)

SAMPLES = [
    [64, 34, 25, 12, 22, 11, 90],
    [12, 11, 13, 5, 6],
    [12, 11, 13, 5, 6, 7],
    [5, 12, 7, 1, 13, 2, 23, 11, 18],
    [64, 25, 12, 22, 11],
    [8, 3, 9, 2, 4, 7, 5, 1, 6],
    [12, 34, 54, 2, 3],
    [38, 27, 43, 3, 9, 82, 10],
    [],
    [1],
    [3, 3, 1, 1, 2, 2],
    [-5, 0, 7, -2, 7, -5],
]


def _random_lists(seed, count=20):
    rng = random.Random(seed)
    return [[rng.randint(-50, 50) for _ in range(rng.randint(0, 40))] for _ in range(count)]


@pytest.mark.parametrize("sample", SAMPLES)
def test_sorts_match_builtin(sample):
    expected = sorted(sample)
    assert bubble_sort(sample) == expected
    assert selection_sort(sample) == expected
    assert insertion_sort(sample) == expected
    assert merge_sort(sample) == expected
    assert quick_sort(sample) == expected
    assert heap_sort(sample) == expected
    assert shell_sort(sample) == expected


def test_sorts_random_lists():
    for data in _random_lists(7):
        expected = sorted(data)
        assert bubble_sort(data) == expected
        assert selection_sort(data) == expected
        assert insertion_sort(data) == expected
        assert merge_sort(data) == expected
        assert quick_sort(data) == expected
        assert heap_sort(data) == expected
        assert shell_sort(data) == expected


def test_input_left_untouched():
    data = [64, 34, 25, 12, 22, 11, 90]
    original = list(data)
    bubble_sort(data)
    selection_sort(data)
    insertion_sort(data)
    merge_sort(data)
    quick_sort(data)
    heap_sort(data)
    shell_sort(data)
    radix_sort(data)
    assert data == original


def test_insertion_sort_example():
    assert insertion_sort([12, 11, 13, 5, 6]) == [5, 6, 11, 12, 13]


def test_sorts_accept_iterables_and_strings():
    assert quick_sort(iter("dcba")) == ["a", "b", "c", "d"]
    assert merge_sort((3, 1, 2)) == [1, 2, 3]


def test_merge_sorted_example():
    assert merge_sorted([1, 3, 5, 7], [2, 4, 6, 8]) == [1, 2, 3, 4, 5, 6, 7, 8]


def test_merge_sorted_with_empty_side():
    assert merge_sorted([], [1, 2]) == [1, 2]
    assert merge_sorted([4, 9], []) == [4, 9]


def test_merge_sorted_random():
    rng = random.Random(3)
    for _ in range(20):
        first = sorted(rng.randint(0, 30) for _ in range(rng.randint(0, 10)))
        second = sorted(rng.randint(0, 30) for _ in range(rng.randint(0, 10)))
        assert merge_sorted(first, second) == sorted(first + second)


def test_merge_sort_is_stable():
    class Item:
        def __init__(self, key, tag):
            self.key, self.tag = key, tag

        def __le__(self, other):
            return self.key <= other.key

        def __lt__(self, other):
            return self.key < other.key

        def __gt__(self, other):
            return self.key > other.key

    items = [Item(2, "a"), Item(1, "b"), Item(2, "c"), Item(1, "d")]
    result = merge_sort(items)
    assert [(item.key, item.tag) for item in result] == [
        (1, "b"),
        (1, "d"),
        (2, "a"),
        (2, "c"),
    ]


def _is_max_heap(items):
    return all(
        items[parent] >= items[child]
        for child in range(1, len(items))
        for parent in [(child - 1) // 2]
    )


@pytest.mark.parametrize("data", [[60, 20, 40, 70, 30, 10], [], [1], [5, 5, 5]])
def test_heapify_builds_max_heap(data):
    heap = heapify(data)
    assert _is_max_heap(heap)
    assert sorted(heap) == sorted(data)


def test_heapify_random():
    for data in _random_lists(11):
        heap = heapify(data)
        assert _is_max_heap(heap)
        if data:
            assert heap[0] == max(data)


def test_radix_sort_example():
    data = [543, 986, 217, 765, 329]
    assert radix_sort(data) == sorted(data)


def test_radix_sort_random_and_zeros():
    rng = random.Random(5)
    for _ in range(20):
        data = [rng.randint(0, 10_000) for _ in range(rng.randint(0, 30))]
        assert radix_sort(data) == sorted(data)
    assert radix_sort([0, 0, 0]) == [0, 0, 0]
    assert radix_sort([]) == []


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


def test_bucket_sort_example():
    data = [0.897, 0.565, 0.656, 0.1234, 0.665, 0.3434]
    assert bucket_sort(data) == sorted(data)


def test_bucket_sort_random():
    rng = random.Random(9)
    for _ in range(20):
        data = [rng.random() for _ in range(rng.randint(0, 30))]
        assert bucket_sort(data) == sorted(data)


@pytest.mark.parametrize("bad", [[0.5, 1.0], [-0.1, 0.2], [2.5]])
def test_bucket_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        bucket_sort(bad)