"""Helpers for working with sequences."""

from __future__ import annotations

import functools
import math
import operator
from collections.abc import Callable, Hashable, Iterable, MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
K = TypeVar("K", bound=Hashable)


def _require_items(items: Sequence[T] | None) -> Sequence[T]:
    if not items:
        raise IndexError("empty sequence")
    return items


def _check_index(items: Sequence[Any] | None, index: int) -> None:
    if not is_in_bounds(items, index):
        size = len(items) if items is not None else 0
        raise IndexError(f"index {index} out of bounds: {size}")


def any_match(items: Iterable[T] | None, predicate: Callable[[T], bool]) -> bool:
    """Return whether at least one item satisfies ``predicate``."""
    return any(predicate(item) for item in items or ())


def contains(items: Iterable[T] | None, item: T) -> bool:
    """Return whether ``item`` is among ``items``."""
    return items is not None and item in items


def copy(items: Iterable[T] | None) -> list[T]:
    """Return a new list holding the same elements."""
    return list(items or ())


def count(items: Iterable[T] | None, predicate: Callable[[T], bool]) -> int:
    """Return how many items satisfy ``predicate``."""
    return sum(1 for item in items or () if predicate(item))


def filter_items(items: Iterable[T] | None, predicate: Callable[[T], bool]) -> list[T]:
    """Return the items that satisfy ``predicate``, in order."""
    return [item for item in items or () if predicate(item)]


def find(
    items: Iterable[T] | None, predicate: Callable[[T], bool], default: T | None = None
) -> T | None:
    """Return the first item satisfying ``predicate``, or ``default``."""
    return next((item for item in items or () if predicate(item)), default)


def find_index(items: Iterable[T] | None, predicate: Callable[[T], bool]) -> int:
    """Return the index of the first item satisfying ``predicate``, or -1."""
    return next(
        (index for index, item in enumerate(items or ()) if predicate(item)), -1
    )


def first(items: Sequence[T] | None) -> T:
    """Return the first item; an empty sequence raises ``IndexError``."""
    return _require_items(items)[0]


def generate(n: int, f: Callable[[int], T]) -> list[T]:
    """Return ``[f(0), f(1), ..., f(n - 1)]``."""
    return [f(index) for index in range(n)]


def for_each(items: Iterable[T] | None, f: Callable[[T], Any]) -> None:
    """Call ``f`` on every item."""
    for item in items or ():
        f(item)


def update_each(items: MutableSequence[T] | None, f: Callable[[T], T]) -> None:
    """Replace every item in place with ``f(item)``."""
    if items is None:
        return
    items[:] = [f(item) for item in items]


def is_empty(items: Sequence[Any] | None) -> bool:
    """Return whether the sequence has no items."""
    return not items


def is_in_bounds(items: Sequence[Any] | None, index: int) -> bool:
    """Return whether ``index`` is a valid non-negative index into ``items``."""
    return 0 <= index < len(items or ())


def last(items: Sequence[T] | None) -> T:
    """Return the last item; an empty sequence raises ``IndexError``."""
    return _require_items(items)[-1]


def map_items(items: Iterable[T] | None, f: Callable[[T], U]) -> list[U]:
    """Return ``f`` applied to every item."""
    return [f(item) for item in items or ()]


def map_indexed(items: Iterable[T] | None, f: Callable[[T, int], U]) -> list[U]:
    """Return ``f(item, index)`` for every item."""
    return [f(item, index) for index, item in enumerate(items or ())]


def maximum(items: Sequence[T] | None) -> T:
    """Return the largest item; an empty sequence raises ``IndexError``."""
    return max_index(items)[0]


def max_index(items: Sequence[T] | None) -> tuple[T, int]:
    """Return the largest item and the index of its first occurrence."""
    index, value = max(enumerate(_require_items(items)), key=operator.itemgetter(1))
    return value, index


def middle(items: Sequence[T] | None) -> T:
    """Return the middle item; for even lengths, the first of the second half."""
    checked = _require_items(items)
    return checked[len(checked) // 2]


def minimum(items: Sequence[T] | None) -> T:
    """Return the smallest item; an empty sequence raises ``IndexError``."""
    return min_index(items)[0]


def min_index(items: Sequence[T] | None) -> tuple[T, int]:
    """Return the smallest item and the index of its first occurrence."""
    index, value = min(enumerate(_require_items(items)), key=operator.itemgetter(1))
    return value, index


def product(items: Iterable[Any] | None) -> Any:
    """Return the product of the items; 1 when empty."""
    return math.prod(items or ())


def reduce(items: Iterable[T] | None, f: Callable[[T, T], T], initial: T) -> T:
    """Fold the items into one value with ``f(accumulated, item)``."""
    return functools.reduce(f, items or (), initial)


def reduce_indexed(
    items: Iterable[T] | None, f: Callable[[T, T, int], T], initial: T
) -> T:
    """Fold the items with ``f(accumulated, item, index)``."""
    result = initial
    for index, item in enumerate(items or ()):
        result = f(result, item, index)
    return result


def remove_nth(items: Sequence[T] | None, index: int) -> list[T]:
    """Return a new list without the item at ``index``."""
    _check_index(items, index)
    assert items is not None
    return [*items[:index], *items[index + 1 :]]


def repeat(element: T, n: int) -> list[T]:
    """Return a list holding ``element`` ``n`` times."""
    return [element] * n


def total(items: Iterable[Any] | None) -> Any:
    """Return the sum of the items (concatenation for strings); 0 when empty."""
    values = list(items or ())
    if not values:
        return 0
    return functools.reduce(operator.add, values)


def swap(items: MutableSequence[T] | None, i: int, j: int) -> None:
    """Swap the items at ``i`` and ``j`` in place."""
    _check_index(items, i)
    _check_index(items, j)
    assert items is not None
    items[i], items[j] = items[j], items[i]


def to_map(keys: Sequence[K] | None, values: Sequence[V] | None) -> dict[K, V]:
    """Pair ``keys`` with ``values`` in a dict; their lengths must match."""
    keys = keys or ()
    values = values or ()
    if len(keys) != len(values):
        raise ValueError("sequences have different lengths")
    return dict(zip(keys, values))


def zip_with(
    first: Iterable[T] | None, second: Iterable[U] | None, f: Callable[[T, U], V]
) -> list[V]:
    """Return ``f`` applied pairwise, stopping at the shorter input."""
    return [f(a, b) for a, b in zip(first or (), second or ())]