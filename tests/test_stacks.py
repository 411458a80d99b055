import pytest
from hypothesis import given
from hypothesis import strategies as st

from dspractice.stacks import (
    ArrayStack,
    LinkedStack,
    StackOverflow,
    StackUnderflow,
    reverse_string,
)


def test_array_stack_push_pop_order():
    stack = ArrayStack(3)
    for value in (1, 2, 3):
        stack.push(value)
    assert list(stack) == [3, 2, 1]
    assert stack.peek() == 3
    assert stack.pop() == 3
    assert list(stack) == [2, 1]
    assert len(stack) == 2


def test_array_stack_full_and_overflow():
    stack = ArrayStack(2)
    stack.push("a")
    assert not stack.is_full()
    stack.push("b")
    assert stack.is_full()
    with pytest.raises(StackOverflow):
        stack.push("c")
    assert list(stack) == ["b", "a"]


def test_array_stack_underflow():
    stack = ArrayStack(1)
    assert stack.is_empty()
    with pytest.raises(StackUnderflow):
        stack.pop()
    with pytest.raises(StackUnderflow):
        stack.peek()


def test_array_stack_rejects_bad_capacity():
    with pytest.raises(ValueError):
        ArrayStack(0)


@given(st.lists(st.integers(), min_size=1, max_size=50))
def test_array_stack_round_trip(values):
    stack = ArrayStack(len(values))
    for value in values:
        stack.push(value)
    assert stack.is_full()
    popped = [stack.pop() for _ in values]
    assert popped == values[::-1]
    assert stack.is_empty()


@given(st.lists(st.integers()))
def test_linked_stack_round_trip(values):
    stack = LinkedStack()
    for value in values:
        stack.push(value)
    assert len(stack) == len(values)
    assert list(stack) == values[::-1]
    popped = [stack.pop() for _ in values]
    assert popped == values[::-1]
    assert stack.is_empty()


def test_linked_stack_peek_does_not_remove():
    stack = LinkedStack()
    stack.push(5)
    stack.push(6)
    assert stack.peek() == 6
    assert len(stack) == 2
    assert list(stack) == [6, 5]


def test_linked_stack_underflow():
    stack = LinkedStack()
    with pytest.raises(StackUnderflow):
        stack.pop()
    with pytest.raises(StackUnderflow):
        stack.peek()


def test_reverse_string_example():
    assert reverse_string("stack") == "kcats"


def test_reverse_string_empty():
    assert reverse_string("") == ""


@given(st.text())
def test_reverse_string_matches_slice(text):
    assert reverse_string(text) == text[::-1]
    assert reverse_string(reverse_string(text)) == text