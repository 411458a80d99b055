"""Bounded FIFO queues: a linear array queue and a circular one."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

__all__ = ["QueueFull", "QueueEmpty", "LinearQueue", "CircularQueue"]


class QueueFull(Exception):
    """Raised when enqueueing into a full queue."""


class QueueEmpty(Exception):
    """Raised when dequeueing or peeking an empty queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError(f"capacity must be at least 1, got {capacity}")


class LinearQueue:
    """A queue over a fixed array whose slots are never reused.

    Each enqueue consumes one of ``capacity`` slots; dequeuing does not
    free them, so once ``capacity`` values have been enqueued the queue
    stays full.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._items: deque[Any] = deque()
        self._used = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise QueueFull("queue is full")
        self._items.append(value)
        self._used += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmpty("queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise QueueEmpty("queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self._used == self._capacity

    def __iter__(self) -> Iterator[Any]:
        """Yield values from front to rear."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, items={list(self)!r})"


class CircularQueue:
    """A queue over a fixed ring buffer whose freed slots are reused."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self._buffer: list[Any] = [None] * capacity
        self._front = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear, wrapping around the buffer."""
        if self.is_full():
            raise QueueFull("queue is full")
        rear = (self._front + self._count) % len(self._buffer)
        self._buffer[rear] = value
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmpty("queue is empty")
        value = self._buffer[self._front]
        self._buffer[self._front] = None
        self._front = (self._front + 1) % len(self._buffer)
        self._count -= 1
        return value

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise QueueEmpty("queue is empty")
        return self._buffer[self._front]

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == len(self._buffer)

    def __iter__(self) -> Iterator[Any]:
        """Yield values from front to rear."""
        size = len(self._buffer)
        for offset in range(self._count):
            yield self._buffer[(self._front + offset) % size]

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={list(self)!r})"