import pytest
from hypothesis import given
from hypothesis import strategies as st

from dspractice.doubly import DoublyLinkedList


def test_empty_list():
    dll = DoublyLinkedList()
    assert list(dll) == []
    assert list(reversed(dll)) == []
    assert len(dll) == 0


@given(st.lists(st.integers()))
def test_construction_round_trip(values):
    dll = DoublyLinkedList(values)
    assert list(dll) == values
    assert list(reversed(dll)) == values[::-1]
    assert len(dll) == len(values)


@given(st.lists(st.integers()), st.data(), st.integers())
def test_insert_matches_list_model(values, data, value):
    position = data.draw(st.integers(min_value=0, max_value=len(values)))
    dll = DoublyLinkedList(values)
    dll.insert(position, value)
    expected = list(values)
    expected.insert(position, value)
    assert list(dll) == expected
    assert list(reversed(dll)) == expected[::-1]
    assert len(dll) == len(expected)


@given(st.lists(st.integers(), min_size=1), st.data())
def test_delete_matches_list_model(values, data):
    position = data.draw(st.integers(min_value=0, max_value=len(values) - 1))
    dll = DoublyLinkedList(values)
    removed = dll.delete(position)
    expected = list(values)
    assert removed == expected.pop(position)
    assert list(dll) == expected
    assert list(reversed(dll)) == expected[::-1]


def test_delete_everything_then_append():
    dll = DoublyLinkedList([1, 2])
    dll.delete(1)
    dll.delete(0)
    assert len(dll) == 0
    dll.append(7)
    assert list(dll) == [7]
    assert list(reversed(dll)) == [7]


@pytest.mark.parametrize("position", [-1, 4])
def test_insert_out_of_range(position):
    dll = DoublyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        dll.insert(position, 0)


@pytest.mark.parametrize("position", [-1, 3])
def test_delete_out_of_range(position):
    dll = DoublyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        dll.delete(position)


def test_delete_from_empty():
    with pytest.raises(IndexError):
        DoublyLinkedList().delete(0)


@given(st.lists(st.integers(min_value=0, max_value=3)), st.integers(0, 3))
def test_replace_every_occurrence(values, old):
    dll = DoublyLinkedList(values)
    count = dll.replace(old, 99)
    assert count == values.count(old)
    assert list(dll) == [99 if v == old else v for v in values]


def test_replace_absent_value():
    dll = DoublyLinkedList([1, 2, 3])
    assert dll.replace(5, 6) == 0
    assert list(dll) == [1, 2, 3]