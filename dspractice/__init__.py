"""Array helpers, searching, sorting, linked lists, stacks, queues, tree traversals, Tower of Hanoi, polynomials and mark sheets."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "searching",
    "sorting",
    "linkedlist",
    "doubly",
    "stacks",
    "queues",
    "hanoi",
    "tree",
    "polynomial",
    "marks",
]