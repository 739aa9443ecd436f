"""Searching sorted, unsorted and rotated sequences.

Every search returns the index of the target, or ``None`` when it is absent.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, Optional


def linear_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of the first item equal to ``target``."""
    return next((index for index, item in enumerate(items) if item == target), None)


def binary_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Iterative binary search over an ascending sequence."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search_recursive(items: Sequence[Any], target: Any) -> Optional[int]:
    """Recursive binary search over an ascending sequence."""

    def _search(low: int, high: int) -> Optional[int]:
        if low > high:
            return None
        mid = (low + high) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            return _search(mid + 1, high)
        return _search(low, mid - 1)

    return _search(0, len(items) - 1)


def jump_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Jump through an ascending sequence in blocks of about sqrt(n), then scan."""
    size = len(items)
    if size == 0:
        return None
    root = math.sqrt(size)
    step = int(root)
    prev = 0
    while items[min(step, size) - 1] < target:
        prev = step
        step = int(step + root)
        if prev >= size:
            return None
    while items[prev] < target:
        prev += 1
        if prev == min(step, size):
            return None
    return prev if items[prev] == target else None


def search_rotated(items: Sequence[Any], target: Any) -> Optional[int]:
    """Find ``target`` in an ascending sequence of distinct values rotated at a pivot."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == target:
            return mid
        if items[low] <= items[mid]:
            if items[low] <= target <= items[mid]:
                high = mid - 1
            else:
                low = mid + 1
        else:
            if items[mid] <= target <= items[high]:
                low = mid + 1
            else:
                high = mid - 1
    return None