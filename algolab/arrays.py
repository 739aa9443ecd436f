"""Problems over integer arrays: subarray sums, windows, jumps and partitions."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous subarray (Kadane's algorithm)."""
    if not values:
        raise ValueError("max_subarray_sum() needs at least one value")
    best = None
    running = 0
    for value in values:
        running += value
        best = running if best is None else max(best, running)
        if running < 0:
            running = 0
    return best


def can_jump(steps: Sequence[int]) -> bool:
    """Whether the last index is reachable when each entry is a maximum jump length."""
    reach = 0
    for index, step in enumerate(steps):
        if index > reach:
            return False
        reach = max(reach, index + step)
    return True


def trapped_water(heights: Sequence[int]) -> int:
    """Units of rain water held between bars of the given heights."""
    if not heights:
        return 0
    left_max, right_max = heights[0], heights[-1]
    left, right = 1, len(heights) - 2
    water = 0
    while left <= right:
        if heights[left] >= left_max:
            left_max = heights[left]
            left += 1
        elif heights[right] >= right_max:
            right_max = heights[right]
            right -= 1
        elif left_max <= right_max:
            water += left_max - heights[left]
            left += 1
        else:
            water += right_max - heights[right]
            right -= 1
    return water


def count_subarrays_at_most_k_distinct(values: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays holding at most ``k`` distinct values."""
    if k < 0:
        raise ValueError("k must not be negative")
    window: Counter = Counter()
    left = 0
    count = 0
    for right, value in enumerate(values):
        window[value] += 1
        while len(window) > k:
            outgoing = values[left]
            window[outgoing] -= 1
            if window[outgoing] == 0:
                del window[outgoing]
            left += 1
        count += right - left + 1
    return count


def count_subarrays_with_sum_positive(values: Sequence[int], target: int) -> int:
    """Count subarrays summing to ``target`` with a two-pointer window.

    Correct for positive values only; a window never shrinks below one element.
    """
    count = 0
    left = 0
    window = 0
    for right, value in enumerate(values):
        window += value
        while window > target and left < right:
            window -= values[left]
            left += 1
        if window == target:
            count += 1
    return count


def count_subarrays_with_sum(values: Sequence[int], target: int) -> int:
    """Count subarrays summing to ``target`` using prefix sums; any signs allowed."""
    seen: Counter = Counter({0: 1})
    running = 0
    count = 0
    for value in values:
        running += value
        count += seen[running - target]
        seen[running] += 1
    return count


def count_good_pairs(values: Sequence[int]) -> int:
    """Number of index pairs i < j with equal values."""
    return sum(n * (n - 1) // 2 for n in Counter(values).values())


def _fits(times: Sequence[int], readers: int, limit: int) -> bool:
    needed, load = 1, 0
    for time in times:
        if time > limit:
            return False
        if load + time > limit:
            needed += 1
            load = time
        else:
            load += time
    return needed <= readers


def allocate_books(times: Sequence[int], readers: int) -> int:
    """Smallest possible largest load when contiguous chapters go to ``readers`` days."""
    if readers < 1:
        raise ValueError("readers must be at least 1")
    if not times:
        return 0
    low, high = max(times), sum(times)
    best = high
    while low <= high:
        mid = (low + high) // 2
        if _fits(times, readers, mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best