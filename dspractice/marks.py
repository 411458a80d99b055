"""Total and average of the marks obtained in a set of subjects."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["MarkSheet", "MAX_SUBJECTS"]

MAX_SUBJECTS = 10


class MarkSheet:
    """Marks for up to ``MAX_SUBJECTS`` subjects of one examination."""

    def __init__(self, marks: Iterable[int]) -> None:
        self._marks = tuple(marks)
        if len(self._marks) > MAX_SUBJECTS:
            raise ValueError(
                f"at most {MAX_SUBJECTS} subjects are allowed, got {len(self._marks)}"
            )

    @property
    def marks(self) -> tuple[int, ...]:
        return self._marks

    @property
    def subjects(self) -> int:
        return len(self._marks)

    def total(self) -> int:
        """Return the sum of all marks."""
        return sum(self._marks)

    def average(self) -> float:
        """Return the mean mark across subjects."""
        if not self._marks:
            raise ValueError("cannot average marks of zero subjects")
        return self.total() / len(self._marks)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._marks)!r})"