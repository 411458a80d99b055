from hypothesis import given
from hypothesis import strategies as st

from dspractice.searching import binary_search, find_all, linear_search

small_ints = st.integers(min_value=-10, max_value=10)
int_lists = st.lists(small_ints, max_size=40)


def test_linear_search_returns_first_match():
    assert linear_search([7, 3, 5, 3], 3) == 1


def test_linear_search_absent_returns_none():
    assert linear_search([7, 3, 5], 4) is None


@given(int_lists, small_ints)
def test_linear_search_invariant(items, target):
    index = linear_search(items, target)
    if target in items:
        assert items[index] == target
        assert target not in items[:index]
    else:
        assert index is None


@given(int_lists, small_ints)
def test_find_all_indices_match(items, target):
    indices = find_all(items, target)
    assert len(indices) == items.count(target)
    assert all(items[i] == target for i in indices)
    assert indices == sorted(indices)


@given(int_lists, small_ints)
def test_find_all_agrees_with_linear_search(items, target):
    indices = find_all(items, target)
    first = linear_search(items, target)
    assert (indices[0] if indices else None) == first


def test_find_all_empty_when_absent():
    assert find_all([1, 2, 3], 9) == []


def test_binary_search_returns_leftmost_occurrence():
    assert binary_search([1, 2, 2, 2, 3], 2) == 1


def test_binary_search_absent_returns_none():
    assert binary_search([1, 3, 5, 7], 4) is None
    assert binary_search([], 4) is None


@given(int_lists, small_ints)
def test_binary_search_matches_linear_on_sorted(items, target):
    ordered = sorted(items)
    assert binary_search(ordered, target) == linear_search(ordered, target)


@given(st.lists(small_ints, min_size=1, max_size=40))
def test_binary_search_finds_every_present_value(items):
    ordered = sorted(items)
    for value in ordered:
        index = binary_search(ordered, value)
        assert ordered[index] == value
        assert index == 0 or ordered[index - 1] < value