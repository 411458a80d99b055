"""Elementary array operations: insertion, deletion, merging and reversal.

Every function returns a new list and leaves its input untouched.
Positions are zero-based indices.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

__all__ = [
    "insert_at_end",
    "insert_at_first",
    "insert_at",
    "delete_at",
    "delete_last",
    "merge",
    "reverse",
]


def insert_at_end(items: Iterable[T], value: T) -> list[T]:
    """Return a copy of ``items`` with ``value`` appended."""
    return [*items, value]


def insert_at_first(items: Iterable[T], value: T) -> list[T]:
    """Return a copy of ``items`` with ``value`` placed in front."""
    return [value, *items]


def insert_at(items: Iterable[T], position: int, value: T) -> list[T]:
    """Return a copy of ``items`` with ``value`` inserted at index ``position``.

    ``position`` may range from 0 to ``len(items)`` inclusive; anything
    outside that range raises :class:`IndexError`.
    """
    result = list(items)
    if not 0 <= position <= len(result):
        raise IndexError(
            f"insert position {position} out of range for length {len(result)}"
        )
    result.insert(position, value)
    return result


def delete_at(items: Iterable[T], position: int) -> list[T]:
    """Return a copy of ``items`` without the element at index ``position``."""
    result = list(items)
    if not 0 <= position < len(result):
        raise IndexError(
            f"delete position {position} out of range for length {len(result)}"
        )
    del result[position]
    return result


def delete_last(items: Sequence[T]) -> list[T]:
    """Return a copy of ``items`` without its last element."""
    if not items:
        raise IndexError("cannot delete from an empty array")
    return list(items[:-1])


def merge(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Return the elements of ``first`` followed by those of ``second``."""
    return [*first, *second]


def reverse(items: Iterable[T]) -> list[T]:
    """Return the elements of ``items`` in reverse order."""
    return list(reversed(list(items)))