"""Circular doubly linked list with a sentinel node and cursor positions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("prev", "next", "value")

    def __init__(self, value: Any = None) -> None:
        self.prev: _Node = self
        self.next: _Node = self
        self.value = value


class _Sentinel(_Node):
    """Marker node that closes the ring; it holds no element."""

    __slots__ = ()


class Cursor:
    """A position in a :class:`LinkedList`, pointing at a node or at the end."""

    __slots__ = ("_node",)

    def __init__(self, node: _Node) -> None:
        self._node = node

    def advance(self) -> Cursor:
        """Move to the next position and return this cursor."""
        self._node = self._node.next
        return self

    def retreat(self) -> Cursor:
        """Move to the previous position and return this cursor."""
        self._node = self._node.prev
        return self

    def _element(self) -> _Node:
        if isinstance(self._node, _Sentinel):
            raise IndexError("cursor is at the end of the list")
        return self._node

    @property
    def value(self) -> Any:
        """The element at this position; raise IndexError at the end."""
        return self._element().value

    @value.setter
    def value(self, new_value: Any) -> None:
        self._element().value = new_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        if isinstance(self._node, _Sentinel):
            return "Cursor(<end>)"
        return f"Cursor({self._node.value!r})"


class LinkedList:
    """Doubly linked list whose ends meet at a sentinel node."""

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self._sentinel = _Sentinel()
        self._size = 0
        for value in iterable or ():
            self.push_back(value)

    def _link_before(self, pos: _Node, value: Any) -> _Node:
        node = _Node(value)
        node.prev = pos.prev
        node.next = pos
        pos.prev.next = node
        pos.prev = node
        self._size += 1
        return node

    def _unlink(self, node: _Node) -> Any:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.value

    def _end_node(self, operation: str, last: bool) -> _Node:
        if not self._size:
            raise IndexError(f"{operation} on empty list")
        return self._sentinel.prev if last else self._sentinel.next

    def _walk(self, forward: bool) -> Iterator[_Node]:
        step = "next" if forward else "prev"
        node = getattr(self._sentinel, step)
        while node is not self._sentinel:
            yield node
            node = getattr(node, step)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        self._link_before(self._sentinel.next, value)

    def push_back(self, value: Any) -> None:
        """Append ``value`` at the back."""
        self._link_before(self._sentinel, value)

    def pop_front(self) -> Any:
        """Remove and return the front element; raise IndexError if empty."""
        return self._unlink(self._end_node("pop_front", last=False))

    def pop_back(self) -> Any:
        """Remove and return the back element; raise IndexError if empty."""
        return self._unlink(self._end_node("pop_back", last=True))

    def begin(self) -> Cursor:
        """Cursor at the first element, or at the end if the list is empty."""
        return Cursor(self._sentinel.next)

    def end(self) -> Cursor:
        """Cursor one past the last element."""
        return Cursor(self._sentinel)

    def insert(self, pos: Cursor, value: Any) -> Cursor:
        """Insert ``value`` before ``pos`` and return a cursor at it."""
        return Cursor(self._link_before(pos._node, value))

    def erase(self, pos: Cursor) -> Cursor:
        """Remove the element at ``pos`` and return a cursor at the next one."""
        node = pos._node
        if isinstance(node, _Sentinel):
            raise IndexError("Cannot erase sentinel")
        following = node.next
        self._unlink(node)
        return Cursor(following)

    def splice(self, pos: Cursor, other: LinkedList) -> None:
        """Move every element of ``other`` before ``pos``, leaving it empty."""
        if other is self or not other._size:
            return
        target = pos._node
        first = other._sentinel.next
        last = other._sentinel.prev

        other._sentinel.next = other._sentinel
        other._sentinel.prev = other._sentinel

        first.prev = target.prev
        last.next = target
        target.prev.next = first
        target.prev = last

        self._size += other._size
        other._size = 0

    def front(self) -> Any:
        """Return the front element; raise IndexError if empty."""
        return self._end_node("front", last=False).value

    def back(self) -> Any:
        """Return the back element; raise IndexError if empty."""
        return self._end_node("back", last=True).value

    def clear(self) -> None:
        """Remove every element."""
        self._sentinel.next = self._sentinel
        self._sentinel.prev = self._sentinel
        self._size = 0

    def take(self) -> LinkedList:
        """Move all nodes into a new list and leave this one empty."""
        moved = LinkedList()
        moved._sentinel, self._sentinel = self._sentinel, moved._sentinel
        moved._size, self._size = self._size, 0
        return moved

    def copy(self) -> LinkedList:
        """Return an independent copy."""
        return LinkedList(self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._walk(forward=True))

    def __reversed__(self) -> Iterator[Any]:
        return (node.value for node in self._walk(forward=False))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    @staticmethod
    def _describe_node(node: _Node, label: str) -> list[str]:
        return [
            f"[{label} @{id(node):#x}]",
            f"  value: {node.value}",
            f"  prev: {id(node.prev):#x}",
            f"  next: {id(node.next):#x}",
        ]

    def visual(self) -> str:
        """Describe the ring of nodes, their links and their values."""
        arrow = ["     |", "     v"]
        rule = "====================="
        lines = ["", "=== CIRCULAR LIST ===", f"Size: {self._size}", ""]

        if not self._size:
            lines.append("Empty list:")
            lines.extend(self._describe_node(self._sentinel, "Sentinel (empty)"))
        else:
            chain = "".join(f" <-> [{value}]" for value in self)
            lines.append(f"[Sentinel]{chain} <-> [Sentinel] (circular)")
            lines.extend(["", "Detailed nodes:"])
            lines.extend(self._describe_node(self._sentinel, "Sentinel"))
            for index, node in enumerate(self._walk(forward=True)):
                lines.extend(arrow)
                lines.extend(self._describe_node(node, f"Node {index}"))
            lines.extend(arrow)
            lines.append("[Back to Sentinel]")

        lines.extend([rule, ""])
        return "\n".join(lines) + "\n"