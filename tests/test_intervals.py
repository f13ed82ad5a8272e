import pytest
from hypothesis import given, strategies as st

from dpatterns.intervals import (
    burst_balloons,
    matrix_chain_order,
    min_cost_to_cut_stick,
    super_egg_drop,
)


def test_matrix_chain_single_matrix_costs_nothing():
    assert matrix_chain_order([5, 7]) == 0


def test_matrix_chain_two_matrices():
    dims = [4, 6, 3]
    assert matrix_chain_order(dims) == dims[0] * dims[1] * dims[2]


def test_matrix_chain_known_example():
    assert matrix_chain_order([40, 20, 30, 10, 30]) == 26000


def test_matrix_chain_too_short():
    with pytest.raises(ValueError):
        matrix_chain_order([3])


@given(st.lists(st.integers(min_value=1, max_value=20), min_size=2, max_size=7))
def test_matrix_chain_not_worse_than_left_to_right(dims):
    left_to_right = sum(dims[0] * dims[i] * dims[i + 1] for i in range(1, len(dims) - 1))
    assert matrix_chain_order(dims) <= left_to_right


@given(st.lists(st.integers(min_value=1, max_value=20), min_size=2, max_size=7))
def test_matrix_chain_symmetric_under_reversal(dims):
    assert matrix_chain_order(dims) == matrix_chain_order(dims[::-1])


def test_burst_balloons_known_example():
    assert burst_balloons([3, 1, 5, 8]) == 167


def test_burst_balloons_empty_and_single():
    assert burst_balloons([]) == 0
    assert burst_balloons([9]) == 9


@pytest.mark.parametrize("n", [1, 2, 5, 8])
def test_burst_balloons_all_ones(n):
    assert burst_balloons([1] * n) == n


def test_cut_stick_no_cuts():
    assert min_cost_to_cut_stick(10, []) == 0


def test_cut_stick_single_cut_costs_length():
    assert min_cost_to_cut_stick(9, [4]) == 9


def test_cut_stick_known_example():
    assert min_cost_to_cut_stick(7, [1, 3, 4, 5]) == 16


def test_cut_stick_order_of_cuts_irrelevant():
    assert min_cost_to_cut_stick(9, [5, 6, 1, 4, 2]) == min_cost_to_cut_stick(
        9, [1, 2, 4, 5, 6]
    )


def test_cut_stick_rejects_outside_cut():
    with pytest.raises(ValueError):
        min_cost_to_cut_stick(5, [5])


def test_egg_drop_one_egg_tries_every_floor():
    assert super_egg_drop(1, 12) == 12


def test_egg_drop_trivial_buildings():
    assert super_egg_drop(3, 0) == 0
    assert super_egg_drop(3, 1) == 1


def test_egg_drop_two_eggs_hundred_floors():
    assert super_egg_drop(2, 100) == 14


@given(st.integers(min_value=1, max_value=4), st.integers(min_value=0, max_value=30))
def test_egg_drop_more_eggs_never_hurts(eggs, floors):
    assert super_egg_drop(eggs + 1, floors) <= super_egg_drop(eggs, floors)


def test_egg_drop_needs_an_egg():
    with pytest.raises(ValueError):
        super_egg_drop(0, 5)