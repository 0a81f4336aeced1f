"""Growable array with explicit capacity management."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Vector:
    """A dynamic array that tracks its capacity separately from its size.

    When full, capacity grows from 0 to 1 and then doubles. ``clear`` keeps
    the capacity. ``reserve`` and ``shrink_to_fit`` adjust it explicitly.
    """

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self._items: list[Any] = []
        self._capacity = 0
        for value in iterable or ():
            self.push_back(value)

    @classmethod
    def _from_parts(cls, items: list[Any], capacity: int) -> Vector:
        built = cls()
        built._items = items
        built._capacity = capacity
        return built

    def _make_room(self) -> None:
        if len(self._items) >= self._capacity:
            self._capacity = 1 if self._capacity == 0 else self._capacity * 2

    def _require(self, operation: str) -> None:
        if not self._items:
            raise IndexError(f"{operation} on empty vector")

    def _check_index(self, index: int) -> int:
        if not isinstance(index, int):
            raise TypeError(f"vector indices must be integers, not {type(index).__name__}")
        size = len(self._items)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("Index out of range")
        return index

    def push_back(self, value: Any) -> None:
        """Append ``value``, growing the capacity if the vector is full."""
        self._make_room()
        self._items.append(value)

    def pop_back(self) -> Any:
        """Remove and return the last element; raise IndexError if empty."""
        self._require("pop_back")
        return self._items.pop()

    def insert(self, value: Any, position: int) -> None:
        """Insert ``value`` before ``position`` (0..len); raise IndexError beyond."""
        if not 0 <= position <= len(self._items):
            raise IndexError("Insert position out of range")
        self._make_room()
        self._items.insert(position, value)

    def erase(self, position: int) -> Any:
        """Remove and return the element at ``position``; raise IndexError if invalid."""
        if not 0 <= position < len(self._items):
            raise IndexError("Erase position out of range")
        return self._items.pop(position)

    def __getitem__(self, index: int) -> Any:
        return self._items[self._check_index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._check_index(index)] = value

    def front(self) -> Any:
        """Return the first element; raise IndexError if empty."""
        self._require("front")
        return self._items[0]

    def back(self) -> Any:
        """Return the last element; raise IndexError if empty."""
        self._require("back")
        return self._items[-1]

    def capacity(self) -> int:
        """Number of elements the vector can hold before it must grow."""
        return self._capacity

    def reserve(self, new_capacity: int) -> None:
        """Raise the capacity to ``new_capacity`` if it is larger."""
        self._capacity = max(self._capacity, new_capacity)

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the current size."""
        self._capacity = min(self._capacity, len(self._items))

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self._items.clear()

    def take(self) -> Vector:
        """Move the contents into a new vector, leaving this one empty with no capacity."""
        moved = Vector._from_parts(self._items, self._capacity)
        self._items = []
        self._capacity = 0
        return moved

    def copy(self) -> Vector:
        """Return an independent copy with the same capacity."""
        return Vector._from_parts(list(self._items), self._capacity)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self._items) + "]"