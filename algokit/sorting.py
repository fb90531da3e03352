"""Comparison and counting sorts over sequences of integers.

Every function returns a new list and leaves its argument untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def bubble_sort(items: Iterable[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def selection_sort(items: Iterable[int]) -> list[int]:
    """Sort by moving the smallest remaining element to the front."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        position = min(range(i, n), key=result.__getitem__)
        if position != i:
            result[i], result[position] = result[position], result[i]
    return result


def merge_sort(items: Iterable[int]) -> list[int]:
    """Sort by splitting in halves and merging the sorted halves."""
    values = list(items)
    if len(values) < 2:
        return values
    mid = len(values) // 2
    left = merge_sort(values[:mid])
    right = merge_sort(values[mid:])
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _sift_down(heap: list[int], size: int, root: int) -> None:
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


def heap_sort_steps(items: Iterable[int]) -> Iterator[tuple[int, list[int]]]:
    """Heap sort, yielding ``(iteration, snapshot)`` after each extraction.

    Iterations count down from ``len - 1`` to ``0``; after the last one the
    snapshot is fully sorted.
    """
    heap = list(items)
    size = len(heap)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(heap, size, root)
    for end in range(size - 1, -1, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
        yield end, list(heap)


def heap_sort(items: Iterable[int]) -> list[int]:
    """Sort using a binary max-heap."""
    values = list(items)
    result = values
    for _, snapshot in heap_sort_steps(values):
        result = snapshot
    return result


def _expand_counts(counts: list[int], offset: int) -> list[int]:
    return [offset + index for index, count in enumerate(counts) for _ in range(count)]


def counting_sort(items: Iterable[int]) -> list[int]:
    """Counting sort over the range between the smallest and largest value."""
    values = list(items)
    if not values:
        return []
    low, high = min(values), max(values)
    counts = [0] * (high - low + 1)
    for value in values:
        counts[value - low] += 1
    return _expand_counts(counts, low)


def digit_count_sort(items: Iterable[int]) -> list[int]:
    """Counting sort for single decimal digits (values 0 to 9)."""
    values = list(items)
    counts = [0] * 10
    for value in values:
        if not 0 <= value <= 9:
            raise ValueError(f"value {value} is not a single digit")
        counts[value] += 1
    return _expand_counts(counts, 0)


def sorted_both_ways(items: Iterable[int]) -> tuple[list[int], list[int]]:
    """Return the items in ascending and in descending order."""
    ascending = list(items)
    n = len(ascending)
    for i in range(n):
        for k in range(i, n):
            if ascending[i] >= ascending[k]:
                ascending[i], ascending[k] = ascending[k], ascending[i]
    return ascending, ascending[::-1]


def merge_distinct(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two sequences into one sorted list holding each value once."""
    combined = selection_sort([*first, *second])
    return [
        value
        for index, value in enumerate(combined)
        if index + 1 == len(combined) or combined[index + 1] != value
    ]