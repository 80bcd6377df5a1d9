"""Combinatorial helpers."""

from __future__ import annotations

import itertools
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def cartesian_product(elements: Sequence[T] | None, length: int) -> list[list[T]]:
    """Return every sequence of ``length`` items drawn from ``elements``.

    The first position varies slowest, matching the order of ``elements``.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    return [list(combo) for combo in itertools.product(elements or (), repeat=length)]