import math
from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.arrays import (
    equal_formation,
    equilibrium_index,
    max_activities,
    max_subarray,
    merge_k_sorted,
    merge_sorted,
    remove_duplicates,
    reverse_array,
    rotate,
    sorted_union,
    trapped_water,
    triplet_count,
    two_sum,
)

ints = st.integers(min_value=-50, max_value=50)


def test_max_activities_example():
    assert max_activities([(12, 25), (10, 20), (20, 30)]) == 2


def test_max_activities_empty_and_single():
    assert max_activities([]) == 0
    assert max_activities([(1, 4)]) == 1


@given(st.lists(st.integers(min_value=1, max_value=5), max_size=10))
def test_max_activities_disjoint_all_chosen(lengths):
    activities = []
    start = 0
    for length in lengths:
        activities.append((start, start + length))
        start += length
    assert max_activities(reversed(activities)) == len(activities)


@given(st.lists(ints))
def test_remove_duplicates_on_sorted(values):
    assert remove_duplicates(sorted(values)) == sorted(set(values))


@given(st.lists(ints))
def test_reverse_array_round_trip(values):
    assert reverse_array(reverse_array(values)) == values
    if values:
        assert reverse_array(values)[0] == values[-1]


def test_trapped_water_simple_basin():
    assert trapped_water([3, 0, 3]) == 3


@given(st.lists(st.integers(min_value=0, max_value=20)))
def test_trapped_water_monotone_holds_nothing(heights):
    assert trapped_water(sorted(heights)) == 0
    assert trapped_water(sorted(heights, reverse=True)) == 0
    assert trapped_water(heights) >= 0


@given(st.integers(min_value=0, max_value=8))
def test_triplet_count_all_zero(n):
    assert triplet_count([0] * n, 0) == math.comb(n, 3)
    assert triplet_count([0] * n, 1) == 0


@given(st.lists(ints, max_size=15), ints)
def test_two_sum_pair_is_valid(values, target):
    result = two_sum(values, target)
    if result is not None:
        later, earlier = result
        assert earlier < later
        assert values[earlier] + values[later] == target


def test_two_sum_none_when_impossible():
    assert two_sum([1, 2, 3], 100) is None


def test_equal_formation_cases():
    assert equal_formation([5, 5]) == 0
    assert equal_formation([]) == 0
    assert equal_formation([7, 7, 7, 7]) == 0


@given(st.sets(ints, min_size=3, max_size=10))
def test_equal_formation_distinct(values):
    assert equal_formation(list(values)) == len(values) - 2


@given(st.lists(ints, max_size=12))
def test_equilibrium_index_balances(values):
    position = equilibrium_index(values)
    if position is not None:
        assert sum(values[: position - 1]) == sum(values[position:])
        for earlier in range(1, position):
            assert sum(values[: earlier - 1]) != sum(values[earlier:])


def test_equilibrium_index_none():
    assert equilibrium_index([1, 2]) is None


@given(st.lists(ints, min_size=1, max_size=20))
def test_max_subarray_invariants(values):
    total, start, end = max_subarray(values)
    assert 0 <= start <= end < len(values)
    assert total == sum(values[start : end + 1])
    assert total >= max(values)
    assert total >= sum(values)


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray([])


@given(st.lists(ints), st.lists(ints))
def test_merge_sorted_matches_sorted(first, second):
    assert merge_sorted(sorted(first), sorted(second)) == sorted(first + second)


@given(st.lists(st.lists(ints), max_size=5))
def test_merge_k_sorted_matches_sorted(arrays):
    merged = merge_k_sorted([sorted(a) for a in arrays])
    assert merged == sorted(x for a in arrays for x in a)


@given(st.lists(ints, min_size=1), st.integers(min_value=0, max_value=30))
def test_rotate_round_trip(values, k):
    n = len(values)
    assert rotate(values, n) == values
    assert rotate(rotate(values, k), n - k % n) == values
    assert rotate(values, 1)[0] == values[-1]


def test_rotate_empty():
    assert rotate([], 3) == []


def test_sorted_union_example():
    assert sorted_union([5, 10, 15, 20, 25], [50, 40, 30, 20, 10]) == [
        5, 10, 15, 20, 25, 30, 40, 50,
    ]


@given(st.lists(ints), st.lists(ints))
def test_sorted_union_multiset(first, second):
    result = sorted_union(first, second)
    assert result == sorted(result)
    assert Counter(result) == Counter(first) | Counter(second)
    assert set(result) == set(first) | set(second)