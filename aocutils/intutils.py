"""Small integer helpers."""

from __future__ import annotations


def absolute(number: int) -> int:
    """Return the absolute value of ``number``."""
    return -number if number < 0 else number


def equals(a: int, b: int) -> bool:
    """Return whether the two numbers are equal."""
    return a == b


def diff(a: int, b: int) -> int:
    """Return ``a - b``."""
    return a - b


def length(number: int) -> int:
    """Return the number of decimal digits in ``number``, ignoring its sign."""
    return len(str(absolute(number)))


def power(a: int, b: int) -> int:
    """Return ``a`` raised to ``b``; negative exponents are rejected."""
    if b < 0:
        raise ValueError("negative exponent is not supported")
    return a**b


def product(a: int, b: int) -> int:
    """Return ``a * b``."""
    return a * b


def quotient(a: int, b: int) -> int:
    """Return ``a / b`` as an integer, truncated toward zero."""
    result = absolute(a) // absolute(b)
    return -result if (a < 0) != (b < 0) else result


def add(a: int, b: int) -> int:
    """Return ``a + b``."""
    return a + b