"""A list stored in one block that grows its capacity on demand."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any, Generic, List, TypeVar

T = TypeVar("T")

_OUT_OF_RANGE = "Índice fora dos limites."
_BAD_INSERT = "Erro na funcao insert: posicao invalida"


class ContiguousListError(IndexError):
    """Raised for an index or insert position outside the list."""


class ContiguousList(Generic[T]):
    """A growable array with an explicit size and capacity.

    ``ContiguousList(n, init)`` reserves ``n`` slots filled with ``init``
    while holding no elements yet.
    """

    def __init__(self, n: int = 0, init: Any = None) -> None:
        if n < 0:
            raise ValueError("capacity must not be negative")
        self._data: List[Any] = [init] * n
        self._size = 0

    def _resize_capacity(self, new_capacity: int) -> None:
        if new_capacity < len(self._data):
            return
        self._data.extend([None] * (new_capacity - len(self._data)))

    def push_back(self, elem: T) -> None:
        """Append ``elem``, doubling the capacity when full."""
        capacity = len(self._data)
        if capacity == 0:
            self._resize_capacity(1)
        elif capacity == self._size:
            self._resize_capacity(capacity * 2)
        self._data[self._size] = elem
        self._size += 1

    def insert(self, pos: int, elem: T) -> None:
        """Insert ``elem`` at ``pos``, shifting later elements one place."""
        if pos < 0 or pos > self._size:
            raise ContiguousListError(_BAD_INSERT)
        if self._size + 1 > len(self._data):
            self._resize_capacity(len(self._data) + 1)
        self._data[pos + 1 : self._size + 1] = self._data[pos : self._size]
        self._data[pos] = elem
        self._size += 1

    def clear(self) -> None:
        """Drop every element and release the capacity."""
        self._data = []
        self._size = 0

    def copy(self) -> ContiguousList[T]:
        """Return an independent list with the same elements and capacity."""
        other: ContiguousList[T] = ContiguousList(len(self._data))
        other._data[: self._size] = self._data[: self._size]
        other._size = self._size
        return other

    def capacity(self) -> int:
        """Return the number of reserved slots."""
        return len(self._data)

    def _check(self, pos: Any) -> int:
        index = operator.index(pos)
        if index < 0 or index >= self._size:
            raise ContiguousListError(_OUT_OF_RANGE)
        return index

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, pos: int) -> T:
        return self._data[self._check(pos)]

    def __setitem__(self, pos: int, value: T) -> None:
        self._data[self._check(pos)] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._data[: self._size])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"