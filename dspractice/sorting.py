"""Classic comparison sorts.

Every function takes any iterable of mutually comparable items and returns
a new list in ascending order, leaving the input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
]


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    for unsorted_end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(unsorted_end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining item to the front on each pass."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each item into the already sorted prefix."""
    result: list[Any] = []
    for item in items:
        position = len(result)
        result.append(item)
        while position > 0 and result[position - 1] > item:
            result[position] = result[position - 1]
            position -= 1
        result[position] = item
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    left_iter, right_iter = iter(left), iter(right)
    sentinel = object()
    a = next(left_iter, sentinel)
    b = next(right_iter, sentinel)
    while a is not sentinel and b is not sentinel:
        if a <= b:
            merged.append(a)
            a = next(left_iter, sentinel)
        else:
            merged.append(b)
            b = next(right_iter, sentinel)
    if a is not sentinel:
        merged.append(a)
        merged.extend(left_iter)
    if b is not sentinel:
        merged.append(b)
        merged.extend(right_iter)
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging them (stable)."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = len(result) // 2
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around a pivot and sorting each side."""
    result = list(items)
    if len(result) <= 1:
        return result
    pivot = result[len(result) // 2]
    less = [item for item in result if item < pivot]
    equal = [item for item in result if not item < pivot and not pivot < item]
    greater = [item for item in result if pivot < item]
    return [*quick_sort(less), *equal, *quick_sort(greater)]