"""A singly linked list with insertion at either end or at a position."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "next")

    def __init__(self, data: T) -> None:
        self.data = data
        self.next: Optional[_Node[T]] = None


class LinkedList(Generic[T]):
    """A list of nodes linked forward, keeping a pointer to the last node."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._first: Optional[_Node[T]] = None
        self._last: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_back(self, elem: T) -> None:
        """Append ``elem`` at the end."""
        node = _Node(elem)
        if self._first is None:
            self._first = self._last = node
        else:
            self._last.next = node
            self._last = node
        self._size += 1

    def push_front(self, elem: T) -> None:
        """Insert ``elem`` at the start."""
        if self._size == 0:
            self.push_back(elem)
            return
        node = _Node(elem)
        node.next = self._first
        self._first = node
        self._size += 1

    def insert(self, elem: T, pos: int) -> None:
        """Insert ``elem`` so that it ends up at index ``pos``."""
        if pos == 0:
            self.push_front(elem)
            return
        if pos == self._size:
            self.push_back(elem)
            return
        if not 0 < pos < self._size:
            raise IndexError(f"insert position {pos} out of range 0..{self._size}")
        before = self._first
        for _ in range(pos - 1):
            before = before.next
        node = _Node(elem)
        node.next = before.next
        before.next = node
        self._size += 1

    def clear(self) -> None:
        """Remove every element."""
        self._first = self._last = None
        self._size = 0

    def format(self) -> str:
        """Return the elements as text, one per line."""
        return "".join(f"{item}\n" for item in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._first
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"