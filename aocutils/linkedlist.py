"""A doubly linked list with index-based access."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """One element of a :class:`LinkedList`."""

    __slots__ = ("value", "prev", "next")

    def __init__(
        self,
        value: T,
        prev: Node[T] | None = None,
        next: Node[T] | None = None,  # noqa: A002
    ) -> None:
        self.value = value
        self.prev = prev
        self.next = next

    def is_first(self) -> bool:
        """Return whether no node comes before this one."""
        return self.prev is None

    def is_last(self) -> bool:
        """Return whether no node comes after this one."""
        return self.next is None

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class LinkedList(Generic[T]):
    """A doubly linked list; indexes must lie within the list."""

    def __init__(self) -> None:
        self._first: Node[T] | None = None
        self._last: Node[T] | None = None
        self._length = 0

    @classmethod
    def from_iterable(cls, values: Iterable[T] | None) -> LinkedList[T]:
        """Build a list holding ``values`` in order."""
        result = cls()
        for value in values or ():
            result.insert_last(value)
        return result

    def clear(self) -> None:
        """Remove every element."""
        self._first = None
        self._last = None
        self._length = 0

    def _nodes(self) -> Iterator[Node[T]]:
        current = self._first
        while current is not None:
            yield current
            current = current.next

    def for_each(self, f: Callable[[Node[T]], Any]) -> None:
        """Call ``f(node)`` for every node, first to last."""
        for node in self._nodes():
            f(node)

    def for_each_indexed(self, f: Callable[[Node[T], int], Any]) -> None:
        """Call ``f(node, index)`` for every node, first to last."""
        for index, node in enumerate(self._nodes()):
            f(node, index)

    def for_each_offset(self, f: Callable[[Node[T], int], int]) -> None:
        """Call ``f(node, index)`` for every node, skipping ahead as it asks.

        ``f`` returns an offset that is added to the index; for a positive
        offset that many nodes are also skipped, so ``f`` may insert nodes
        after the current one without visiting them. Return 0 to go on
        normally.
        """
        current = self._first
        index = 0
        while current is not None:
            offset = f(current, index)
            index += offset
            for _ in range(offset):
                if current.next is not None:
                    current = current.next
            current = current.next
            index += 1

    def _check_index(self, index: int, upper: int) -> None:
        if not 0 <= index < upper:
            raise IndexError("index out of bounds")

    def _node_at(self, index: int) -> Node[T]:
        self._check_index(index, self._length)
        if index < self._length // 2:
            current = self._first
            for _ in range(index):
                current = current.next  # type: ignore[union-attr]
        else:
            current = self._last
            for _ in range(self._length - 1 - index):
                current = current.prev  # type: ignore[union-attr]
        assert current is not None
        return current

    def get(self, index: int) -> T:
        """Return the value at ``index``."""
        return self._node_at(index).value

    def get_node(self, index: int) -> Node[T]:
        """Return the node at ``index``."""
        return self._node_at(index)

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` so that it ends up at ``index``."""
        self._check_index(index, self._length + 1)
        node = Node(value)
        if self._length == 0:
            self._first = self._last = node
        elif index == 0:
            assert self._first is not None
            node.next = self._first
            self._first.prev = node
            self._first = node
        elif index == self._length:
            assert self._last is not None
            node.prev = self._last
            self._last.next = node
            self._last = node
        else:
            current = self._node_at(index)
            assert current.prev is not None
            node.prev = current.prev
            node.next = current
            current.prev.next = node
            current.prev = node
        self._length += 1

    def insert_first(self, value: T) -> None:
        """Insert ``value`` at the front."""
        self.insert(0, value)

    def insert_last(self, value: T) -> None:
        """Insert ``value`` at the back."""
        self.insert(self._length, value)

    def remove(self, index: int) -> None:
        """Remove the element at ``index``."""
        self._check_index(index, self._length)
        if self._length == 1:
            self._first = self._last = None
        elif index == 0:
            assert self._first is not None and self._first.next is not None
            removed = self._first
            self._first = removed.next
            self._first.prev = None
            removed.next = None
        elif index == self._length - 1:
            assert self._last is not None and self._last.prev is not None
            removed = self._last
            self._last = removed.prev
            self._last.next = None
            removed.prev = None
        else:
            current = self._node_at(index)
            assert current.prev is not None and current.next is not None
            current.prev.next = current.next
            current.next.prev = current.prev
            current.prev = current.next = None
        self._length -= 1

    def remove_first(self) -> None:
        """Remove the first element."""
        self.remove(0)

    def remove_last(self) -> None:
        """Remove the last element."""
        self.remove(self._length - 1)

    def replace(self, index: int, value: T) -> None:
        """Replace the value at ``index``."""
        self._node_at(index).value = value

    def set(self, index: int, value: T) -> None:
        """Set the value at ``index``."""
        self._node_at(index).value = value

    def to_list(self) -> list[T]:
        """Return the values as a Python list."""
        return list(self)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self._nodes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self.to_list() == other.to_list()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return " -> ".join(str(node) for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()!r})"