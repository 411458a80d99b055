"""Linear and binary search over sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["linear_search", "find_all", "binary_search"]


def linear_search(items: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first element equal to ``target``, or ``None``."""
    return next(
        (index for index, item in enumerate(items) if item == target), None
    )


def find_all(items: Iterable[Any], target: Any) -> list[int]:
    """Return the indices of every element equal to ``target``, in order."""
    return [index for index, item in enumerate(items) if item == target]


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first occurrence of ``target`` in sorted ``items``.

    ``items`` must be sorted in ascending order. Returns ``None`` when the
    target is absent.
    """
    index = bisect_left(items, target)
    if index < len(items) and items[index] == target:
        return index
    return None