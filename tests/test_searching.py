from hypothesis import given
from hypothesis import strategies as st

from dsakit.searching import binary_search, linear_search

SMALL_SET = sorted([1, 3, 2, 4, 5, 7, 9, 8, 6])


def test_small_set_linear_finds_two():
    assert linear_search(2, SMALL_SET) is True


def test_small_set_binary_finds_two():
    assert binary_search(2, SMALL_SET) is True


def test_missing_value_not_found():
    assert binary_search(111, SMALL_SET) is False
    assert linear_search(111, SMALL_SET) is False


def test_empty_sequence():
    assert binary_search(5, []) is False
    assert linear_search(5, []) is False


def test_every_element_found():
    assert all(binary_search(value, SMALL_SET) for value in SMALL_SET)


def test_values_between_elements_not_found():
    evens = [2, 4, 6, 8, 10]
    assert [binary_search(v, evens) for v in (1, 3, 5, 7, 9, 11)] == [False] * 6


@given(st.lists(st.integers(-50, 50)), st.integers(-60, 60))
def test_binary_agrees_with_membership(values, target):
    ordered = sorted(values)
    assert binary_search(target, ordered) == (target in ordered)


@given(st.lists(st.integers(-50, 50)), st.integers(-60, 60))
def test_linear_agrees_with_membership(values, target):
    assert linear_search(target, values) == (target in values)