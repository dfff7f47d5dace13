"""A doubly linked list with insertion at either end or at a position."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: T) -> None:
        self.data = data
        self.prev: Optional[_Node[T]] = None
        self.next: Optional[_Node[T]] = None


class DoublyLinkedList(Generic[T]):
    """A list of nodes linked in both directions."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._first: Optional[_Node[T]] = None
        self._last: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_back(self, elem: T) -> None:
        """Append ``elem`` at the end."""
        node = _Node(elem)
        if self._last is None:
            self._first = self._last = node
        else:
            node.prev = self._last
            self._last.next = node
            self._last = node
        self._size += 1

    def push_front(self, elem: T) -> None:
        """Insert ``elem`` at the start."""
        if self._first is None:
            self.push_back(elem)
            return
        node = _Node(elem)
        node.next = self._first
        self._first.prev = node
        self._first = node
        self._size += 1

    def insert(self, elem: T, pos: int) -> None:
        """Insert ``elem`` so that it ends up at index ``pos``."""
        if not 0 <= pos <= self._size:
            raise IndexError(f"insert position {pos} out of range 0..{self._size}")
        if pos == self._size:
            self.push_back(elem)
            return
        if pos == 0:
            self.push_front(elem)
            return
        before = self._first
        for _ in range(pos - 1):
            before = before.next
        after = before.next
        node = _Node(elem)
        node.prev = before
        node.next = after
        before.next = node
        after.prev = node
        self._size += 1

    def clear(self) -> None:
        """Remove every element."""
        self._first = self._last = None
        self._size = 0

    def format(self) -> str:
        """Return the elements as text, each followed by a space."""
        return "".join(f"{item} " for item in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._first
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._last
        while node is not None:
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"