"""Classic comparison and distribution sorts.

Every sort takes an iterable and returns a new ascending list; the input is
left untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        for j in range(size - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[Any]) -> list:
    """Sort by moving the smallest remaining item to the front each pass."""
    items = list(values)
    size = len(items)
    for start in range(size - 1):
        smallest = min(range(start, size), key=items.__getitem__)
        if smallest != start:
            items[start], items[smallest] = items[smallest], items[start]
    return items


def insertion_sort(values: Iterable[Any]) -> list:
    """Sort by inserting each item into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def merge_sorted(first: Sequence[Any], second: Sequence[Any]) -> list:
    """Merge two ascending sequences into one ascending list.

    On ties the item from ``first`` comes first, which keeps merge sort stable.
    """
    merged = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return merge_sorted(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list, low: int, high: int) -> int:
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def quick_sort(values: Iterable[Any]) -> list:
    """Quick sort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def _sift_down(items: list, size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heapify(values: Iterable[Any]) -> list:
    """Arrange the items as a max-heap: every parent is at least its children."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    return items


def heap_sort(values: Iterable[Any]) -> list:
    """Sort by building a max-heap and moving its root to the end repeatedly."""
    items = heapify(values)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def radix_sort(values: Iterable[int]) -> list:
    """Least-significant-digit radix sort of non-negative integers."""
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("radix_sort() handles non-negative integers only")
    if not items:
        return items
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // exp) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        exp *= 10
    return items


def bucket_sort(values: Iterable[float]) -> list:
    """Sort numbers in the range [0, 1) by spreading them over equal-width buckets."""
    items = list(values)
    if any(not 0 <= value < 1 for value in items):
        raise ValueError("bucket_sort() handles values in the range [0, 1) only")
    count = len(items)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in items:
        buckets[int(count * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def shell_sort(values: Iterable[Any]) -> list:
    """Shell sort with gaps halving from n // 2 down to 1."""
    items = list(values)
    size = len(items)
    gap = size // 2
    while gap > 0:
        for i in range(gap, size):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2
    return items