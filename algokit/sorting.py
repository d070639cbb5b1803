"""Classic comparison and distribution sorts.

Every function takes any iterable of values and returns a new sorted list,
leaving its input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "count_sort",
    "heap_sort",
    "merge_sort",
    "quick_sort",
    "radix_sort",
    "bubble_sort",
    "recursive_bubble_sort",
    "selection_sort",
    "shell_sort",
]


def _require_non_negative(items: list[int], name: str) -> None:
    if any(item < 0 for item in items):
        raise ValueError(f"{name} only handles non-negative integers")


def count_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value."""
    items = list(values)
    _require_non_negative(items, "count_sort")
    counts = [0] * (max(items, default=0) + 1)
    for item in items:
        counts[item] += 1
    result: list[int] = []
    for value, count in enumerate(counts):
        result.extend([value] * count)
    return result


def _sift_down(heap: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Sort with an in-place binary max-heap."""
    items = list(values)
    size = len(items)
    for root in reversed(range(size // 2)):
        _sift_down(items, size, root)
    for end in reversed(range(size)):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Sort by recursively splitting in half and merging the sorted halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[T]) -> list[T]:
    """Sort with quicksort, using the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))
    return items


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers digit by digit, least significant first."""
    items = list(values)
    _require_non_negative(items, "radix_sort")
    if not items:
        return items
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for item in items:
            buckets[(item // exp) % 10].append(item)
        items = [item for bucket in buckets for item in bucket]
        exp *= 10
    return items


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        for j in range(size - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def recursive_bubble_sort(values: Iterable[T]) -> list[T]:
    """Bubble sort phrased as: one pass fixes the largest, then sort the rest.

    The tail call is unrolled so long inputs do not exhaust the call stack.
    """
    items = list(values)
    for unsorted in range(len(items), 1, -1):
        for i in range(unsorted - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining element to the front each pass."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def shell_sort(values: Iterable[T]) -> list[T]:
    """Gapped insertion sort with gaps halving from n/2 down to 1."""
    items = list(values)
    size = len(items)
    gap = size // 2
    while gap > 0:
        for j in range(gap, size):
            current = items[j]
            i = j
            while i >= gap and items[i - gap] > current:
                items[i] = items[i - gap]
                i -= gap
            items[i] = current
        gap //= 2
    return items