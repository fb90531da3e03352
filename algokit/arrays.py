"""Array utilities: duplicates, rotations, prefix sums and small optimisations."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import accumulate


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """Return whether two equal values sit at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        previous = last_seen.get(value)
        if previous is not None and abs(index - previous) <= k:
            return True
        last_seen[value] = index
    return False


def find_missing_number(values: Iterable[int]) -> int:
    """Return the one number of ``1..n+1`` missing from ``n`` distinct values."""
    items = list(values)
    n = len(items)
    return (n + 1) * (n + 2) // 2 - sum(items)


def largest(values: Iterable[int]) -> int:
    """Return the largest value; an empty input is an error."""
    items = list(values)
    if not items:
        raise ValueError("largest() of an empty sequence")
    return max(items)


def smallest(values: Iterable[int]) -> int:
    """Return the smallest value; an empty input is an error."""
    items = list(values)
    if not items:
        raise ValueError("smallest() of an empty sequence")
    return min(items)


def square_all(values: Iterable[int]) -> list[int]:
    """Return the square of every value."""
    return [value * value for value in values]


def push_zeroes_to_end(values: Iterable[int]) -> list[int]:
    """Move every zero to the end, keeping the other values in order."""
    items = list(values)
    non_zero = [value for value in items if value != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def rotate_left(values: Iterable[int], d: int) -> list[int]:
    """Rotate the values left by ``d`` positions, ``0 <= d <= len``."""
    items = list(values)
    if not 0 <= d <= len(items):
        raise ValueError(f"rotation {d} is outside 0..{len(items)}")
    return items[d:] + items[:d]


class PrefixSums:
    """Answers inclusive range-sum queries with 1-based positions."""

    def __init__(self, values: Iterable[int]) -> None:
        self._sums = [0, *accumulate(values)]

    def __len__(self) -> int:
        return len(self._sums) - 1

    def range_sum(self, left: int, right: int) -> int:
        """Return the sum of positions ``left`` through ``right``."""
        if not 1 <= left <= right <= len(self):
            raise IndexError(f"range {left}..{right} is outside 1..{len(self)}")
        return self._sums[right] - self._sums[left - 1]


class PrefixSums2D:
    """Answers sub-rectangle sums of a grid with 1-based positions."""

    def __init__(self, grid: Iterable[Iterable[int]]) -> None:
        rows = [list(row) for row in grid]
        self.rows = len(rows)
        self.columns = len(rows[0]) if rows else 0
        if any(len(row) != self.columns for row in rows):
            raise ValueError("grid rows differ in length")
        sums = [[0] * (self.columns + 1)]
        for row in rows:
            above = sums[-1]
            current = [0]
            for j, value in enumerate(row, start=1):
                current.append(value + above[j] + current[j - 1] - above[j - 1])
            sums.append(current)
        self._sums = sums

    def range_sum(self, top: int, left: int, bottom: int, right: int) -> int:
        """Return the sum of the rectangle from ``(top, left)`` to ``(bottom, right)``."""
        if not (1 <= top <= bottom <= self.rows and 1 <= left <= right <= self.columns):
            raise IndexError("rectangle lies outside the grid")
        s = self._sums
        return s[bottom][right] - s[top - 1][right] - s[bottom][left - 1] + s[top - 1][left - 1]


def trapped_water(heights: Sequence[int]) -> int:
    """Return how much water the elevation profile ``heights`` holds."""
    if len(heights) < 3:
        return 0
    left_max = list(accumulate(heights, max))
    right_max = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        max(0, min(left_max[i - 1], right_max[i + 1]) - heights[i])
        for i in range(1, len(heights) - 1)
    )


def min_chocolate_difference(packets: Iterable[int], students: int) -> int:
    """Smallest spread between the largest and smallest of ``students`` packets."""
    items = sorted(packets)
    if students == 0 or not items:
        return 0
    if len(items) < students:
        raise ValueError("fewer packets than students")
    return min(
        high - low for low, high in zip(items, items[students - 1:])
    )


def tug_of_war(values: Iterable[int]) -> tuple[list[int], list[int]]:
    """Split values into halves of sizes ``n//2`` and the rest, sums as close as possible."""
    items = list(values)
    n = len(items)
    half = n // 2
    total = sum(items)
    target = total // 2 if total >= 0 else -(-total // 2)
    chosen = [False] * n
    best = [False] * n
    best_diff = math.inf

    def explore(position: int, selected: int, current: int) -> None:
        nonlocal best, best_diff
        if position == n or half - selected > n - position:
            return
        explore(position + 1, selected, current)
        selected += 1
        current += items[position]
        chosen[position] = True
        if selected == half:
            diff = abs(target - current)
            if diff < best_diff:
                best_diff = diff
                best = chosen.copy()
        else:
            explore(position + 1, selected, current)
        chosen[position] = False

    explore(0, 0, 0)
    first = [value for value, taken in zip(items, best) if taken]
    second = [value for value, taken in zip(items, best) if not taken]
    return first, second


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Best total value of items whose weights fit in ``capacity`` (0/1 knapsack)."""
    if len(weights) != len(values):
        raise ValueError("weights and values differ in length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]