# dspractice

Textbook data structures and algorithms in plain Python, with no
third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dspractice.arrays` | `insert_at_end`, `insert_at_first`, `insert_at`, `delete_at`, `delete_last`, `merge`, `reverse` |
| `dspractice.searching` | `linear_search`, `find_all`, `binary_search` |
| `dspractice.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort`, `quick_sort` |
| `dspractice.linkedlist` | `SinglyLinkedList` |
| `dspractice.doubly` | `DoublyLinkedList` |
| `dspractice.stacks` | `ArrayStack`, `LinkedStack`, `reverse_string`, `StackOverflow`, `StackUnderflow` |
| `dspractice.queues` | `LinearQueue`, `CircularQueue`, `QueueFull`, `QueueEmpty` |
| `dspractice.hanoi` | `Move`, `tower_of_hanoi`, `describe_moves` |
| `dspractice.tree` | `Node`, `preorder`, `inorder`, `postorder` |
| `dspractice.polynomial` | `Term`, `Polynomial` |
| `dspractice.marks` | `MarkSheet`, `MAX_SUBJECTS` |

### Arrays

All helpers take an iterable and return a new list; the input is never
changed. Positions are zero-based. `insert_at` accepts positions from 0 to
the length inclusive, `delete_at` from 0 to the length minus one; anything
else raises `IndexError`. `delete_last` raises `IndexError` on an empty
sequence.

### Searching

`linear_search` returns the index of the first match or `None`. `find_all`
returns every matching index. `binary_search` expects ascending input and
returns the index of the first occurrence, or `None`.

### Sorting

Each sort returns a new ascending list. `merge_sort` is stable.

### Linked lists

`SinglyLinkedList` and `DoublyLinkedList` are built from an optional
iterable and support `append`, `insert(position, value)` and
`delete(position)` (which returns the removed value), with zero-based
positions and `IndexError` when out of range. `SinglyLinkedList` also has
`prepend`. `DoublyLinkedList` can be walked backwards with `reversed()` and
has `replace(old, new)`, which changes every matching value and returns how
many were changed.

### Stacks and queues

`ArrayStack(capacity)` is bounded: pushing onto a full stack raises
`StackOverflow`. `LinkedStack()` is unbounded. Popping or peeking an empty
stack raises `StackUnderflow`. Iterating a stack yields values from the top
down. `reverse_string` reverses text by pushing and popping characters.

`LinearQueue(capacity)` never reuses a slot: once `capacity` values have
been enqueued it stays full, even after dequeuing. `CircularQueue(capacity)`
reuses freed slots. Enqueueing into a full queue raises `QueueFull`;
dequeuing or peeking an empty one raises `QueueEmpty`. A capacity below 1
raises `ValueError` for both stacks and queues.

### Tower of Hanoi, trees, polynomials, marks

`tower_of_hanoi(n, source="A", target="B", auxiliary="C")` returns the list
of `Move` objects (disk 1 is the smallest); `describe_moves` returns them as
text lines. `n` below 1 raises `ValueError`.

`preorder`, `inorder` and `postorder` return the values of a `Node` tree as
lists.

`Polynomial` holds `Term(coefficient, power)` objects in descending power,
combining terms of equal power. Polynomials add with `+` and print as
`5X^2 + 4X^1 + 1X^0`.

`MarkSheet(marks)` accepts up to `MAX_SUBJECTS` (10) marks and gives their
`total()` and `average()`; averaging zero subjects raises `ValueError`.

## Examples

```python
from dspractice.sorting import merge_sort
from dspractice.searching import binary_search
from dspractice.stacks import ArrayStack, StackOverflow, reverse_string
from dspractice.hanoi import describe_moves
from dspractice.tree import Node, inorder
from dspractice.polynomial import Polynomial, Term

data = merge_sort([12, 11, 13, 5, 6, 7])       # [5, 6, 7, 11, 12, 13]
binary_search(data, 11)                        # 3

stack = ArrayStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackOverflow:
    pass

reverse_string("hello")                        # "olleh"

describe_moves(2)
# ['move the 1 disk from A to C',
#  'move the 2 disk from A to B',
#  'move the 1 disk from C to B']

inorder(Node("a", Node("b"), Node("c")))       # ['b', 'a', 'c']

p = Polynomial([Term(3, 2), Term(1, 0)]) + Polynomial([Term(2, 2), Term(4, 1)])
str(p)                                         # '5X^2 + 4X^1 + 1X^0'
```

## What it does not do

This is a library only. It has no command-line program and does not read
values from the keyboard; every operation is a function or method you call
from Python.