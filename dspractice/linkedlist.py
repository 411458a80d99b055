"""A singly linked list with insertion and deletion by position.

Positions are zero-based indices.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["SinglyLinkedList"]


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class SinglyLinkedList:
    """A chain of nodes, each holding a value and a link to the next."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` after the last node."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add ``value`` in front of the first node."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def _node_before(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
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
        if position == 0:
            self.prepend(value)
        elif position == self._size:
            self.append(value)
        else:
            previous = self._node_before(position)
            previous.next = _Node(value, previous.next)
            self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the node at index ``position`` and return its value."""
        if not 0 <= position < self._size:
            raise IndexError(
                f"delete position {position} out of range for length {self._size}"
            )
        if position == 0:
            assert self._head is not None
            removed = self._head
            self._head = removed.next
        else:
            previous = self._node_before(position)
            removed = previous.next
            assert removed is not None
            previous.next = removed.next
            if removed is self._tail:
                self._tail = previous
        self._size -= 1
        if self._size == 0:
            self._tail = None
        return removed.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"