import calendar
import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.arithmetic import (
    digit_sum,
    divisors,
    factorial,
    fibonacci,
    gcd_all,
    is_leap_year,
    is_palindrome_number,
    is_power_of_two,
    primes_up_to,
    square_series,
    to_binary,
)


@given(st.integers(0, 200))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


@given(st.integers(1, 10**6))
def test_constructed_palindromes(n):
    text = str(n)
    assert is_palindrome_number(int(text + text[::-1])) is True
    assert is_palindrome_number(-int(text + text[::-1])) is True


@given(st.integers(1, 10**6))
def test_trailing_zero_is_not_palindrome(n):
    assert is_palindrome_number(n * 10) is False


@given(st.integers(1, 5000))
def test_leap_year_matches_calendar(year):
    assert is_leap_year(year) == calendar.isleap(year)


@given(st.integers(0, 10**9))
def test_digit_sum_invariants(n):
    assert digit_sum(n * 10) == digit_sum(n)
    assert digit_sum(-n) == digit_sum(n)
    assert digit_sum(n) % 9 == n % 9


@pytest.mark.parametrize("digit", range(10))
def test_digit_sum_single_digit(digit):
    assert digit_sum(digit) == digit


def test_square_series_format():
    assert square_series(3) == "1^2+2^2+3^2"


@given(st.integers(1, 50))
def test_square_series_terms(n):
    terms = square_series(n).split("+")
    assert terms == [f"{i}^2" for i in range(1, n + 1)]


def test_square_series_empty():
    assert square_series(0) == ""


@given(st.integers(0, 10**12))
def test_to_binary_round_trip(n):
    text = to_binary(n)
    assert int(text, 2) == n
    assert text == format(n, "b")


def test_to_binary_negative():
    with pytest.raises(ValueError):
        to_binary(-3)


@given(st.lists(st.integers(-10**6, 10**6), min_size=1, max_size=10))
def test_gcd_all_divides_every_value(values):
    result = gcd_all(values)
    if result:
        assert all(value % result == 0 for value in values)
    else:
        assert all(value == 0 for value in values)


@given(st.integers(1, 1000), st.lists(st.integers(-1000, 1000), min_size=1, max_size=8))
def test_gcd_all_common_factor(factor, values):
    assert gcd_all([factor * v for v in values]) % factor == 0


def test_gcd_all_empty_and_single():
    assert gcd_all([]) == 0
    assert gcd_all([-12]) == 12


def test_power_of_two_source_cases():
    assert is_power_of_two(30) is False
    assert is_power_of_two(128) is True


@given(st.integers(0, 62))
def test_power_of_two_powers(k):
    assert is_power_of_two(2**k) is True
    if k >= 2:
        assert is_power_of_two(2**k + 1) is False


def test_power_of_two_zero():
    assert is_power_of_two(0) is False


@given(st.integers(1, 5000))
def test_divisors_invariants(n):
    result = divisors(n)
    assert result == sorted(result)
    assert result[0] == 1 and result[-1] == n
    assert all(n % d == 0 for d in result)
    assert sorted(n // d for d in result) == result


@given(st.integers(2, 2000))
def test_primes_invariants(n):
    primes = primes_up_to(n)
    assert primes[0] == 2
    assert primes[-1] <= n
    for index, p in enumerate(primes):
        assert all(p % q for q in primes[:index])
    for value in range(2, n + 1):
        if value not in primes:
            assert any(value % p == 0 for p in primes if p < value)


def test_primes_below_two():
    assert primes_up_to(1) == []


@given(st.integers(2, 90))
def test_fibonacci_recurrence(count):
    terms = fibonacci(count)
    assert len(terms) == count
    assert terms[:2] == [0, 1]
    for a, b, c in zip(terms, terms[1:], terms[2:]):
        assert c == a + b


def test_fibonacci_none():
    assert fibonacci(0) == []