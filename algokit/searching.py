"""Searching in sorted sequences and root finding by bisection."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(items: Sequence[int], key: int) -> int:
    """Return the index of ``key`` in sorted ``items``, or -1 if absent."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if items[mid] == key:
            return mid
        if items[mid] > key:
            end = mid - 1
        else:
            start = mid + 1
    return -1


def ternary_search(items: Sequence[int], key: int) -> int:
    """Return the index of ``key`` in sorted ``items``, or -1 if absent."""
    left, right = 0, len(items) - 1
    while right >= left:
        third = (right - left) // 3
        mid1 = left + third
        mid2 = right - third
        if items[mid1] == key:
            return mid1
        if items[mid2] == key:
            return mid2
        if key < items[mid1]:
            right = mid1 - 1
        elif key > items[mid2]:
            left = mid2 + 1
        else:
            left, right = mid1 + 1, mid2 - 1
    return -1


def nth_root(x: float, n: int, eps: float = 1e-6) -> float:
    """Approximate the ``n``-th root of ``x`` by bisection to within ``eps``."""
    if n < 1:
        raise ValueError("root degree must be at least 1")
    if x < 0:
        raise ValueError("cannot take the root of a negative number")
    if eps <= 0:
        raise ValueError("eps must be positive")
    lo, hi = min(1.0, float(x)), max(1.0, float(x))
    while hi - lo > eps:
        mid = (lo + hi) / 2
        if mid**n < x:
            lo = mid
        else:
            hi = mid
    return lo