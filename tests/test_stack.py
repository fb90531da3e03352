import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.stack import evaluate_postfix, is_balanced


@pytest.mark.parametrize(
    "text, expected",
    [("{([])}", True), ("{([])", False), ("{([)}]", False)],
)
def test_source_examples(text, expected):
    assert is_balanced(text) is expected


def test_unmatched_closer():
    assert is_balanced("())(") is False


def test_other_characters_ignored():
    assert is_balanced("a(b[c]{d}e)f") is True


digits = st.integers(0, 9)


@given(a=digits, b=digits)
def test_postfix_add_sub_mul(a, b):
    assert evaluate_postfix(f"{a}{b}+") == a + b
    assert evaluate_postfix(f"{a}{b}-") == a - b
    assert evaluate_postfix(f"{a}{b}*") == a * b


@given(a=digits, b=st.integers(1, 9))
def test_postfix_division_identity(a, b):
    quotient = evaluate_postfix(f"{a}{b}/")
    remainder = evaluate_postfix(f"{a}{b}%")
    assert quotient * b + remainder == a
    assert 0 <= remainder < b


def test_postfix_truncates_toward_zero():
    assert evaluate_postfix("18-3/") == -2
    assert evaluate_postfix("18-3%") == -1


def test_postfix_returns_top_of_stack():
    assert evaluate_postfix("23*4+") == 2 * 3 + 4


@pytest.mark.parametrize("expression", ["", "+", "5*"])
def test_postfix_errors(expression):
    with pytest.raises(ValueError):
        evaluate_postfix(expression)


def test_postfix_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("50/")