"""A set with a few convenience methods."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


class HashSet(set):
    """A ``set`` with helpers for lookup, mapping and merging."""

    @classmethod
    def from_iterable(cls, items: Iterable[T] | None) -> HashSet:
        """Build a set from ``items``; duplicates collapse."""
        return cls(items or ())

    def contains(self, element: T) -> bool:
        """Return whether ``element`` is in the set."""
        return element in self

    def delete(self, element: T) -> None:
        """Remove ``element`` if it is present."""
        self.discard(element)

    def map(self, f: Callable[[T], T]) -> HashSet:
        """Return a new set of ``f`` applied to every element."""
        return type(self)(f(element) for element in self)

    def merge(self, other: Iterable[T] | None) -> HashSet:
        """Return a new set holding the elements of both sets."""
        result = type(self)(self)
        result.update(other or ())
        return result

    def to_list(self) -> list[T]:
        """Return the elements as a list, in no particular order."""
        return list(self)