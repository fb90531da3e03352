"""Stack-based checks and evaluation of bracket and postfix expressions."""

from __future__ import annotations

from collections.abc import Callable

_PAIRS = {")": "(", "]": "[", "}": "{"}


def is_balanced(text: str) -> bool:
    """Return whether every bracket in ``text`` is closed in the right order.

    Characters other than ``()[]{}`` are ignored.
    """
    stack: list[str] = []
    for char in text:
        if char in "([{":
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _truncating_mod(left: int, right: int) -> int:
    return left - right * _truncating_div(left, right)


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _truncating_div,
    "%": _truncating_mod,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Supports ``+ - * / %``; division truncates toward zero. Other
    characters are skipped. The value on top of the stack is returned.
    """
    stack: list[int] = []
    for char in expression:
        if "0" <= char <= "9":
            stack.append(ord(char) - ord("0"))
        elif char in _OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(_OPERATORS[char](left, right))
    if not stack:
        raise ValueError("expression has no value")
    return stack[-1]