"""Small arithmetic helpers."""

from __future__ import annotations


def add(a: int, b: int) -> int:
    """Sum of two numbers."""
    return a + b


def swap(a, b):
    """Return the two values in reverse order."""
    return b, a


def divide(a: float, b: float) -> float:
    """Quotient a / b; raises ZeroDivisionError when b is zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    return a / b


def total(*args: int) -> int:
    """Sum of any number of values; zero when none are given."""
    return sum(args)