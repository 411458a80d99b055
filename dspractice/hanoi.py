"""The Tower of Hanoi puzzle solved by recursion."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["Move", "tower_of_hanoi", "describe_moves"]


@dataclass(frozen=True)
class Move:
    """One step of the puzzle: ``disk`` goes from rod ``source`` to ``target``."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"move the {self.disk} disk from {self.source} to {self.target}"


def _solve(n: int, source: str, target: str, auxiliary: str) -> Iterator[Move]:
    if n == 1:
        yield Move(1, source, target)
        return
    yield from _solve(n - 1, source, auxiliary, target)
    yield Move(n, source, target)
    yield from _solve(n - 1, auxiliary, target, source)


def tower_of_hanoi(
    n: int, source: str = "A", target: str = "B", auxiliary: str = "C"
) -> list[Move]:
    """Return the moves that carry ``n`` disks from ``source`` to ``target``.

    Disks are numbered 1 (smallest) to ``n`` (largest).
    """
    if n < 1:
        raise ValueError(f"number of disks must be at least 1, got {n}")
    return list(_solve(n, source, target, auxiliary))


def describe_moves(
    n: int, source: str = "A", target: str = "B", auxiliary: str = "C"
) -> list[str]:
    """Return the solution for ``n`` disks as human-readable lines."""
    return [str(move) for move in tower_of_hanoi(n, source, target, auxiliary)]