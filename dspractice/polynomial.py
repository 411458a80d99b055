"""Polynomials in one variable stored as terms in descending power order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["Term", "Polynomial"]


@dataclass(frozen=True)
class Term:
    """A single term ``coefficient * X^power``."""

    coefficient: int
    power: int

    def __str__(self) -> str:
        return f"{self.coefficient}X^{self.power}"


class Polynomial:
    """A sum of terms, kept in descending power with like terms combined."""

    def __init__(self, terms: Iterable[Term] = ()) -> None:
        combined: dict[int, int] = {}
        for term in terms:
            combined[term.power] = combined.get(term.power, 0) + term.coefficient
        self._terms = tuple(
            Term(combined[power], power) for power in sorted(combined, reverse=True)
        )

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        merged: list[Term] = []
        left, right = list(self._terms), list(other._terms)
        i = j = 0
        while i < len(left) and j < len(right):
            a, b = left[i], right[j]
            if a.power > b.power:
                merged.append(a)
                i += 1
            elif a.power < b.power:
                merged.append(b)
                j += 1
            else:
                merged.append(Term(a.coefficient + b.coefficient, a.power))
                i += 1
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return Polynomial(merged)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __hash__(self) -> int:
        return hash(self._terms)

    def __str__(self) -> str:
        return " + ".join(str(term) for term in self._terms)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._terms)!r})"