"""Small number-theory and integer utilities."""

from __future__ import annotations

import math
from collections.abc import Iterable


def factorial(n: int) -> int:
    """Return ``n!``; negative ``n`` is an error."""
    if n < 0:
        raise ValueError("Factorial of a negative number doesn't exist.")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def _reverse_digits(n: int) -> int:
    reversed_value = 0
    while n:
        n, remainder = divmod(n, 10)
        reversed_value = reversed_value * 10 + remainder
    return reversed_value


def is_palindrome_number(n: int) -> bool:
    """Return whether the decimal digits of ``n`` read the same both ways."""
    return _reverse_digits(abs(n)) == abs(n)


def is_leap_year(year: int) -> bool:
    """Return whether ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``abs(n)``."""
    n = abs(n)
    total = 0
    while n:
        n, remainder = divmod(n, 10)
        total += remainder
    return total


def square_series(n: int) -> str:
    """Return the series ``1^2+2^2+...+n^2`` as text."""
    return "+".join(f"{i}^2" for i in range(1, n + 1))


def to_binary(n: int) -> str:
    """Return the binary digits of a non-negative integer."""
    if n < 0:
        raise ValueError("only non-negative integers are supported")
    if n == 0:
        return "0"
    bits = []
    while n > 0:
        n, bit = divmod(n, 2)
        bits.append(str(bit))
    return "".join(reversed(bits))


def gcd_all(values: Iterable[int]) -> int:
    """Return the greatest common divisor of all values (0 when empty)."""
    result = 0
    for value in values:
        result = math.gcd(result, value)
    return result


def is_power_of_two(n: int) -> bool:
    """Return whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def divisors(n: int) -> list[int]:
    """Return the positive divisors of ``n`` in increasing order."""
    return [i for i in range(1, n + 1) if n % i == 0]


def primes_up_to(n: int) -> list[int]:
    """Return all primes not greater than ``n`` (sieve of Eratosthenes)."""
    if n < 2:
        return []
    composite = [False] * (n + 1)
    for i in range(2, math.isqrt(n) + 1):
        if not composite[i]:
            for multiple in range(i * i, n + 1, i):
                composite[multiple] = True
    return [i for i in range(2, n + 1) if not composite[i]]


def fibonacci(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting 0, 1."""
    terms: list[int] = []
    current, following = 0, 1
    for _ in range(max(count, 0)):
        terms.append(current)
        current, following = following, current + following
    return terms