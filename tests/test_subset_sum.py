import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from dsakit.subset_sum import (
    all_subsets,
    subset_sum_backtracking,
    subset_sum_brute_force,
    subset_sum_memoization,
)

SMALL_SET = [13, 79, 45, 29]
LARGE_SET = [16, 1058, 22, 13, 46, 55, 3, 92, 47, 7, 98, 367, 807,
             106, 333, 85, 577, 9, 3059]


def test_all_subsets_order_for_two_items():
    assert all_subsets([1, 2]) == [[()], [(2,), (1,)], [(1, 2)]]


def test_all_subsets_group_sizes_are_binomial():
    groups = all_subsets(SMALL_SET)
    assert [len(g) for g in groups] == [math.comb(4, k) for k in range(5)]
    assert all(len(s) == k for k, g in enumerate(groups) for s in g)


def test_all_subsets_are_distinct():
    flat = [s for g in all_subsets(SMALL_SET) for s in g]
    assert len(set(flat)) == 2 ** len(SMALL_SET)


@pytest.mark.parametrize(
    "solver", [subset_sum_brute_force, subset_sum_backtracking, subset_sum_memoization]
)
def test_small_example_target_58(solver):
    assert solver(SMALL_SET, 58) is True


@pytest.mark.parametrize(
    "solver", [subset_sum_brute_force, subset_sum_backtracking, subset_sum_memoization]
)
def test_small_example_target_50_not_found(solver):
    assert solver(SMALL_SET, 50) is False


@pytest.mark.parametrize("solver", [subset_sum_backtracking, subset_sum_memoization])
def test_large_example_one_below_total(solver):
    assert solver(LARGE_SET, 6799) is False


@pytest.mark.parametrize("solver", [subset_sum_backtracking, subset_sum_memoization])
def test_large_example_total(solver):
    assert solver(LARGE_SET, sum(LARGE_SET)) is True


@pytest.mark.parametrize(
    "solver", [subset_sum_brute_force, subset_sum_backtracking, subset_sum_memoization]
)
def test_zero_target_always_found(solver):
    assert solver(SMALL_SET, 0) is True
    assert solver([], 0) is True


@pytest.mark.parametrize("solver", [subset_sum_backtracking, subset_sum_memoization])
def test_negative_items_rejected(solver):
    with pytest.raises(ValueError):
        solver([3, -1], 2)


@settings(max_examples=80)
@given(
    st.lists(st.integers(0, 30), max_size=8),
    st.integers(0, 120),
)
def test_solvers_agree(items, target):
    expected = subset_sum_brute_force(items, target)
    assert subset_sum_backtracking(items, target) == expected
    assert subset_sum_memoization(items, target) == expected


@settings(max_examples=80)
@given(st.lists(st.integers(0, 50), max_size=10), st.data())
def test_sum_of_any_sublist_is_found(items, data):
    mask = data.draw(st.lists(st.booleans(), min_size=len(items), max_size=len(items)))
    target = sum(x for x, keep in zip(items, mask) if keep)
    assert subset_sum_backtracking(items, target)
    assert subset_sum_memoization(items, target)