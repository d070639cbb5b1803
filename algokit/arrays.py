"""Array and list problems: selection, sums, merging and rotation."""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any, NamedTuple

__all__ = [
    "max_activities",
    "remove_duplicates",
    "reverse_array",
    "trapped_water",
    "triplet_count",
    "two_sum",
    "equal_formation",
    "equilibrium_index",
    "max_subarray",
    "merge_sorted",
    "merge_k_sorted",
    "rotate",
    "sorted_union",
    "SubarraySum",
]


class SubarraySum(NamedTuple):
    """Largest contiguous sum and the inclusive bounds where it lies."""

    total: int
    start: int
    end: int


def max_activities(activities: Iterable[tuple[int, int]]) -> int:
    """Greatest number of (start, finish) activities that do not overlap.

    An activity may start at the moment the previous one finishes.
    """
    ordered = sorted(activities, key=lambda activity: activity[1])
    if not ordered:
        return 0
    count = 1
    finish = ordered[0][1]
    for start, end in ordered[1:]:
        if start >= finish:
            count += 1
            finish = end
    return count


def remove_duplicates(values: Iterable[Any]) -> list[Any]:
    """Collapse runs of equal neighbours; on sorted input this deduplicates."""
    return [key for key, _ in itertools.groupby(values)]


def reverse_array(values: Iterable[Any]) -> list[Any]:
    """Return the items in reverse order."""
    return list(values)[::-1]


def trapped_water(heights: Sequence[int]) -> int:
    """Units of rain held between bars of the given heights."""
    if len(heights) < 3:
        return 0
    left_max = list(itertools.accumulate(heights, max))
    right_max = list(itertools.accumulate(reversed(heights), max))[::-1]
    return sum(
        min(left, right) - height
        for left, right, height in zip(left_max[1:-1], right_max[1:-1], heights[1:-1])
    )


def triplet_count(values: Iterable[int], target: int) -> int:
    """Number of index triples i < j < k whose values sum to ``target``."""
    return sum(1 for triple in itertools.combinations(values, 3) if sum(triple) == target)


def two_sum(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Indices ``(i, j)`` with ``j < i`` of two values summing to ``target``.

    ``i`` is the first index at which a matching earlier partner exists.
    Returns None when no pair sums to ``target``.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(values):
        partner = seen.get(target - value)
        if partner is not None:
            return index, partner
        seen[value] = index
    return None


def equal_formation(values: Iterable[int]) -> int:
    """Fewest changes so every element fits one common pattern.

    Up to two elements need nothing; with all values distinct two are kept,
    otherwise the most frequent value is kept.
    """
    counts = Counter(values)
    size = sum(counts.values())
    if size <= 2:
        return 0
    highest = max(counts.values())
    return size - 2 if highest == 1 else size - highest


def equilibrium_index(values: Sequence[int]) -> int | None:
    """1-based position whose left and right sums are equal, or None."""
    left = 0
    right = sum(values)
    for position, value in enumerate(values, start=1):
        right -= value
        if left == right:
            return position
        left += value
    return None


def max_subarray(values: Iterable[int]) -> SubarraySum:
    """Kadane's algorithm: largest sum of a non-empty contiguous run."""
    best: int | None = None
    running = 0
    start = end = run_start = 0
    for index, value in enumerate(values):
        running += value
        if best is None or best < running:
            best, start, end = running, run_start, index
        if running < 0:
            running = 0
            run_start = index + 1
    if best is None:
        raise ValueError("max_subarray() needs at least one value")
    return SubarraySum(best, start, end)


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Merge two sorted sequences; on ties the first sequence goes first."""
    return list(heapq.merge(first, second))


def merge_k_sorted(arrays: Iterable[Iterable[Any]]) -> list[Any]:
    """Merge any number of sorted sequences into one sorted list."""
    return list(heapq.merge(*arrays))


def rotate(values: Sequence[Any], k: int) -> list[Any]:
    """Rotate right by ``k`` places."""
    items = list(values)
    if not items:
        return items
    k %= len(items)
    return items[-k:] + items[:-k] if k else items


def sorted_union(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Sorted multiset union: each value appears as often as in either input."""
    a, b = sorted(first), sorted(second)
    result: list[Any] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            result.append(a[i])
            i += 1
        elif b[j] < a[i]:
            result.append(b[j])
            j += 1
        else:
            result.append(a[i])
            i += 1
            j += 1
    result.extend(a[i:])
    result.extend(b[j:])
    return result