import pytest

from algolab.arrays import (
    allocate_books,
    can_jump,
    count_good_pairs,
    count_subarrays_at_most_k_distinct,
    count_subarrays_with_sum,
    count_subarrays_with_sum_positive,
    max_subarray_sum,
    trapped_water,
)


def test_kadane_source_example():
    assert max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3]) == 7


def test_kadane_all_negative_picks_largest():
    assert max_subarray_sum([-5, -2, -9]) == -2


def test_kadane_all_positive_takes_everything():
    values = [3, 1, 4, 1, 5]
    assert max_subarray_sum(values) == sum(values)


def test_kadane_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_can_jump_all_ones_reaches_end():
    assert can_jump([1] * 10) is True


def test_can_jump_blocked_by_zero():
    assert can_jump([0, 1, 2]) is False
    assert can_jump([1, 1, 0, 5]) is False


def test_can_jump_single_or_empty():
    assert can_jump([0]) is True
    assert can_jump([]) is True


def test_trapped_water_monotonic_holds_nothing():
    assert trapped_water([1, 2, 3, 4, 5]) == 0
    assert trapped_water([5, 4, 3, 2, 1]) == 0


def test_trapped_water_single_valley():
    assert trapped_water([3, 0, 3]) == 3


def test_trapped_water_short_inputs():
    assert trapped_water([]) == 0
    assert trapped_water([4]) == 0
    assert trapped_water([4, 2]) == 0


def test_trapped_water_is_symmetric():
    heights = [0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]
    assert trapped_water(heights) == trapped_water(heights[::-1])


def test_distinct_window_large_k_counts_all_subarrays():
    values = [1, 2, 3, 1, 1]
    n = len(values)
    assert count_subarrays_at_most_k_distinct(values, 10) == n * (n + 1) // 2


def test_distinct_window_k_one_with_distinct_values():
    values = [4, 5, 6, 7]
    assert count_subarrays_at_most_k_distinct(values, 1) == len(values)


def test_distinct_window_k_zero():
    assert count_subarrays_at_most_k_distinct([1, 2, 3], 0) == 0


def test_distinct_window_monotone_in_k():
    values = [1, 2, 1, 3, 2, 4, 1]
    counts = [count_subarrays_at_most_k_distinct(values, k) for k in range(6)]
    assert counts == sorted(counts)


def test_distinct_window_negative_k_raises():
    with pytest.raises(ValueError):
        count_subarrays_at_most_k_distinct([1, 2], -1)


def test_positive_window_ones():
    values = [1] * 6
    assert count_subarrays_with_sum_positive(values, 1) == len(values)


def test_positive_window_matches_prefix_method_on_positive_input():
    values = [2, 4, 1, 2, 7, 3, 1, 1, 5]
    for target in range(1, 20):
        assert count_subarrays_with_sum_positive(values, target) == count_subarrays_with_sum(
            values, target
        )


def test_prefix_sum_zeros():
    values = [0, 0, 0, 0]
    n = len(values)
    assert count_subarrays_with_sum(values, 0) == n * (n + 1) // 2


def test_prefix_sum_total_found_once_for_positive_values():
    values = [3, 1, 4, 1, 5]
    assert count_subarrays_with_sum(values, sum(values)) == 1


def test_prefix_sum_empty():
    assert count_subarrays_with_sum([], 0) == 0


def test_good_pairs_distinct_values():
    assert count_good_pairs([1, 2, 3, 4]) == 0


def test_good_pairs_all_equal():
    values = [7] * 5
    n = len(values)
    assert count_good_pairs(values) == n * (n - 1) // 2


def test_allocate_books_source_example():
    assert allocate_books([10, 20, 10, 30], 2) == 40


def test_allocate_books_one_reader_reads_everything():
    times = [10, 20, 10, 30]
    assert allocate_books(times, 1) == sum(times)


def test_allocate_books_many_readers_bounded_by_largest():
    times = [10, 20, 10, 30]
    assert allocate_books(times, len(times)) == max(times)
    assert allocate_books(times, 100) == max(times)


def test_allocate_books_empty():
    assert allocate_books([], 3) == 0


def test_allocate_books_needs_a_reader():
    with pytest.raises(ValueError):
        allocate_books([1, 2], 0)