"""String conversion and predicate helpers."""

from __future__ import annotations

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def atoi(s: str) -> int:
    """Convert a strict decimal integer string to ``int``.

    Only an optional sign followed by ASCII digits is accepted, within the
    range of a signed 64-bit integer; anything else raises ``ValueError``.
    """
    if not _INTEGER.fullmatch(s):
        raise ValueError(f"invalid integer syntax: {s!r}")
    value = int(s)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {s!r}")
    return value


def rune_to_int(r: str) -> int:
    """Return the value of a single digit character."""
    if not is_digit(r):
        raise ValueError("character is not a digit")
    return ord(r) - ord("0")


def is_digit(r: str) -> bool:
    """Return whether ``r`` is a single ASCII digit."""
    return len(r) == 1 and "0" <= r <= "9"


def is_empty(s: str) -> bool:
    """Return whether the string is empty."""
    return len(s) == 0


def is_integer(s: str) -> bool:
    """Return whether ``atoi`` would accept the string."""
    try:
        atoi(s)
    except ValueError:
        return False
    return True