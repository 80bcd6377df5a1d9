"""Helpers for working with dictionaries."""

from __future__ import annotations

import functools
import operator
from collections import Counter
from collections.abc import Callable, Hashable, Iterable, Mapping, MutableMapping
from typing import Any, TypeVar

K = TypeVar("K", bound=Hashable)
K2 = TypeVar("K2", bound=Hashable)
V = TypeVar("V")
V2 = TypeVar("V2")


def append_to(mapping: MutableMapping[K, list[V]] | None, key: K, value: V) -> None:
    """Append ``value`` to the list stored under ``key``, creating it if needed."""
    if mapping is None:
        raise TypeError("mapping is None")
    mapping.setdefault(key, []).append(value)


def contains(mapping: Mapping[K, Any] | None, key: K) -> bool:
    """Return whether ``key`` is present."""
    return mapping is not None and key in mapping


def for_each(mapping: Mapping[K, V] | None, f: Callable[[K, V], Any]) -> None:
    """Call ``f(key, value)`` for every entry."""
    for key, value in (mapping or {}).items():
        f(key, value)


def keys(mapping: Mapping[K, Any] | None) -> list[K]:
    """Return the keys as a list."""
    return list(mapping or {})


def map_items(
    mapping: Mapping[K, V] | None, f: Callable[[K, V], tuple[K2, V2]]
) -> dict[K2, V2]:
    """Build a new dict from ``f(key, value)`` pairs."""
    return dict(f(key, value) for key, value in (mapping or {}).items())


def map_values(mapping: Mapping[K, V] | None, f: Callable[[V], V2]) -> dict[K, V2]:
    """Return a dict with the same keys and ``f`` applied to each value."""
    return {key: f(value) for key, value in (mapping or {}).items()}


def merge(first: Mapping[K, V] | None, second: Mapping[K, V] | None) -> dict[K, V]:
    """Merge two mappings into a new dict; ``second`` wins on shared keys."""
    return {**(first or {}), **(second or {})}


def sum_values(mapping: Mapping[Any, V] | None) -> V | int:
    """Return the sum of the values (concatenation for strings); 0 when empty."""
    items = list((mapping or {}).values())
    if not items:
        return 0
    return functools.reduce(operator.add, items)


def values(mapping: Mapping[Any, V] | None) -> list[V]:
    """Return the values as a list."""
    return list((mapping or {}).values())


def occurrences(items: Iterable[K]) -> dict[K, int]:
    """Count how many times each element occurs."""
    return dict(Counter(items))


def add_occurrence(mapping: MutableMapping[K, int], element: K, count: int) -> None:
    """Add ``count`` to the tally of ``element``."""
    mapping[element] = mapping.get(element, 0) + count