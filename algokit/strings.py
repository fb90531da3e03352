"""String utilities: character statistics, prefixes and pattern matching."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from functools import lru_cache
from itertools import groupby


def most_frequent_char(text: str) -> str:
    """Return the most frequent character; ties go to the lowest code point."""
    if not text:
        raise ValueError("text is empty")
    counts = Counter(text)
    return max(counts, key=lambda char: (counts[char], -ord(char)))


def remove_consecutive_duplicates(text: str) -> str:
    """Collapse every run of equal characters to a single character."""
    return "".join(char for char, _ in groupby(text))


def first_non_repeating(text: str) -> str | None:
    """Return the first character that occurs once, or None."""
    counts = Counter(text)
    return next((char for char in text if counts[char] == 1), None)


def letters_only(text: str) -> str:
    """Keep only the ASCII letters of ``text``."""
    return "".join(char for char in text if char.isascii() and char.isalpha())


def lexicographic_order(words: Iterable[str]) -> list[str]:
    """Return the words in lexicographic order."""
    return sorted(words)


def longest_common_prefix(words: Iterable[str]) -> str:
    """Return the longest prefix shared by all words ('' if none)."""
    items = list(words)
    if not items:
        return ""
    prefix = []
    for chars in zip(*items):
        if any(char != chars[0] for char in chars):
            break
        prefix.append(chars[0])
    return "".join(prefix)


def is_scramble(first: str, second: str) -> bool:
    """Return whether ``second`` is a scramble of ``first``."""

    @lru_cache(maxsize=None)
    def solve(a: str, b: str) -> bool:
        if a == b:
            return True
        if len(a) != len(b):
            return False
        n = len(a)
        for i in range(1, n):
            if solve(a[:i], b[n - i:]) and solve(a[i:], b[: n - i]):
                return True
            if solve(a[:i], b[:i]) and solve(a[i:], b[i:]):
                return True
        return False

    return solve(first, second)


def wildcard_match(text: str, pattern: str) -> bool:
    """Match ``text`` against ``pattern`` where ``?`` is one char and ``*`` any run."""
    previous = [True]
    for symbol in pattern:
        previous.append(previous[-1] and symbol == "*")
    for char in text:
        current = [False]
        for j, symbol in enumerate(pattern, start=1):
            if symbol == "?" or symbol == char:
                current.append(previous[j - 1])
            elif symbol == "*":
                current.append(previous[j] or current[j - 1])
            else:
                current.append(False)
        previous = current
    return previous[-1]