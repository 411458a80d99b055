"""A doubly linked list that can be walked in both directions.

Positions are zero-based indices.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["DoublyLinkedList"]


@dataclass(eq=False, repr=False)
class _Node:
    value: Any
    prev: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList:
    """A chain of nodes linked to both their predecessor and successor."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` after the last node."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node_at(self, position: int) -> _Node:
        if position < self._size // 2:
            node = self._head
            for _ in range(position):
                assert node is not None
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - position):
                assert node is not None
                node = node.prev
        assert node is not None
        return node

    def insert(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at index ``position``.

        ``position`` may range from 0 to ``len(self)`` inclusive.
        """
        if not 0 <= position <= self._size:
            raise IndexError(
                f"insert position {position} out of range for length {self._size}"
            )
        if position == self._size:
            self.append(value)
            return
        successor = self._node_at(position)
        node = _Node(value, prev=successor.prev, next=successor)
        if successor.prev is None:
            self._head = node
        else:
            successor.prev.next = node
        successor.prev = node
        self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the node at index ``position`` and return its value."""
        if not 0 <= position < self._size:
            raise IndexError(
                f"delete position {position} out of range for length {self._size}"
            )
        node = self._node_at(position)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def replace(self, old: Any, new: Any) -> int:
        """Replace every value equal to ``old`` with ``new``; return how many."""
        count = 0
        node = self._head
        while node is not None:
            if node.value == old:
                node.value = new
                count += 1
            node = node.next
        return count

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"