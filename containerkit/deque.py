"""Double-ended queue stored as a map of fixed-size blocks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

_BLOCK_SIZE = 8
_INITIAL_MAP_SIZE = 2


class Deque:
    """A double-ended queue built from fixed-size blocks.

    Elements live in blocks of eight slots. A central map holds the blocks
    and doubles in size, keeping the used blocks centred, whenever either
    end runs out of room.
    """

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self._map: list[list[Any] | None] = [None] * _INITIAL_MAP_SIZE
        self._recentre()
        if iterable is not None:
            for value in iterable:
                self.push_back(value)

    def _recentre(self) -> None:
        self._first_block = self._last_block = len(self._map) // 2
        self._first_elem = self._last_elem = 0
        self._count = 0

    @staticmethod
    def _new_block() -> list[Any]:
        return [None] * _BLOCK_SIZE

    def _grow_map(self) -> None:
        old_size = len(self._map)
        new_size = old_size * 2
        offset = (new_size - old_size) // 2
        tail = new_size - old_size - offset
        self._map = [None] * offset + self._map + [None] * tail
        self._first_block += offset
        self._last_block += offset

    def _start_with(self, value: Any) -> None:
        block = self._new_block()
        block[self._first_elem] = value
        self._map[self._first_block] = block
        self._last_block = self._first_block
        self._last_elem = self._first_elem

    def push_back(self, value: Any) -> None:
        """Append ``value`` at the back."""
        if not self._count:
            self._start_with(value)
        else:
            self._last_elem += 1
            if self._last_elem >= _BLOCK_SIZE:
                self._last_block += 1
                self._last_elem = 0
                if self._last_block >= len(self._map):
                    self._grow_map()
                self._map[self._last_block] = self._new_block()
            self._map[self._last_block][self._last_elem] = value
        self._count += 1

    def push_front(self, value: Any) -> None:
        """Prepend ``value`` at the front."""
        if not self._count:
            self._start_with(value)
        else:
            if self._first_elem == 0:
                if self._first_block == 0:
                    self._grow_map()
                self._first_block -= 1
                self._first_elem = _BLOCK_SIZE - 1
                self._map[self._first_block] = self._new_block()
            else:
                self._first_elem -= 1
            self._map[self._first_block][self._first_elem] = value
        self._count += 1

    def pop_back(self) -> Any:
        """Remove and return the back element; raise IndexError if empty."""
        if not self._count:
            raise IndexError("pop_back on empty deque")
        value = self._map[self._last_block][self._last_elem]
        if self._count == 1:
            self.clear()
            return value
        if self._last_elem == 0:
            self._map[self._last_block] = None
            self._last_block -= 1
            self._last_elem = _BLOCK_SIZE - 1
        else:
            self._map[self._last_block][self._last_elem] = None
            self._last_elem -= 1
        self._count -= 1
        return value

    def pop_front(self) -> Any:
        """Remove and return the front element; raise IndexError if empty."""
        if not self._count:
            raise IndexError("pop_front on empty deque")
        value = self._map[self._first_block][self._first_elem]
        if self._count == 1:
            self.clear()
            return value
        if self._first_elem == _BLOCK_SIZE - 1:
            self._map[self._first_block] = None
            self._first_block += 1
            self._first_elem = 0
        else:
            self._map[self._first_block][self._first_elem] = None
            self._first_elem += 1
        self._count -= 1
        return value

    def front(self) -> Any:
        """Return the front element; raise IndexError if empty."""
        if not self._count:
            raise IndexError("front on empty deque")
        return self._map[self._first_block][self._first_elem]

    def back(self) -> Any:
        """Return the back element; raise IndexError if empty."""
        if not self._count:
            raise IndexError("back on empty deque")
        return self._map[self._last_block][self._last_elem]

    def _locate(self, index: int) -> tuple[list[Any], int]:
        if not isinstance(index, int):
            raise TypeError(f"deque indices must be integers, not {type(index).__name__}")
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("Index out of range")
        position = self._first_elem + index
        block = self._map[self._first_block + position // _BLOCK_SIZE]
        return block, position % _BLOCK_SIZE

    def __getitem__(self, index: int) -> Any:
        block, slot = self._locate(index)
        return block[slot]

    def __setitem__(self, index: int, value: Any) -> None:
        block, slot = self._locate(index)
        block[slot] = value

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        for index in range(self._count):
            yield self[index]

    def __reversed__(self) -> Iterator[Any]:
        for index in range(self._count - 1, -1, -1):
            yield self[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def clear(self) -> None:
        """Remove every element, keeping the current map size."""
        self._map = [None] * len(self._map)
        self._recentre()

    def copy(self) -> Deque:
        """Return an independent copy with the same block layout."""
        duplicate = Deque()
        duplicate._map = [None if block is None else list(block) for block in self._map]
        duplicate._first_block = self._first_block
        duplicate._last_block = self._last_block
        duplicate._first_elem = self._first_elem
        duplicate._last_elem = self._last_elem
        duplicate._count = self._count
        return duplicate

    def _slot_in_use(self, block_index: int, slot: int) -> bool:
        first, last = self._first_block, self._last_block
        if block_index == first and block_index == last:
            return self._first_elem <= slot <= self._last_elem
        if block_index == first:
            return slot >= self._first_elem
        if block_index == last:
            return slot <= self._last_elem
        return first < block_index < last

    def structure(self) -> str:
        """Describe the block map, showing used slots and the end blocks."""
        lines = [
            "",
            "=== STRUTTURA DEQUE ===",
            f"Map size: {len(self._map)}",
            f"Total elements: {self._count}",
            f"first_block: {self._first_block}, first_elem: {self._first_elem}",
            f"last_block: {self._last_block}, last_elem: {self._last_elem}",
            "",
        ]
        for index, block in enumerate(self._map):
            if block is None:
                text = "None"
            else:
                cells = ",".join(
                    str(block[slot]) if self._slot_in_use(index, slot) else "_"
                    for slot in range(_BLOCK_SIZE)
                )
                text = f"Block @ {id(block):#x} -> [{cells}]"

            is_first = index == self._first_block
            is_last = index == self._last_block
            if is_first and is_last:
                marker = "  <- FIRST & LAST BLOCK"
            elif is_first:
                marker = "  <- FIRST BLOCK"
            elif is_last:
                marker = "  <- LAST BLOCK"
            else:
                marker = ""
            lines.append(f"map[{index}] = {text}{marker}")
        lines.append("=====================")
        return "\n".join(lines) + "\n\n"