import math
from itertools import chain

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from dpatterns.bitmask import (
    can_partition_k_subsets,
    connect_two_groups,
    makesquare,
    max_score,
    min_assignment_cost,
    minimum_xor_sum,
    travelling_salesman,
    count_shirt_assignments,
)

SAMPLE_COST = [
    [9, 2, 7, 8],
    [6, 4, 3, 7],
    [5, 8, 1, 8],
    [7, 6, 9, 4],
]


def test_min_assignment_cost_sample():
    assert min_assignment_cost(SAMPLE_COST) == 13


def test_min_assignment_cost_row_order_irrelevant():
    assert min_assignment_cost(list(reversed(SAMPLE_COST))) == min_assignment_cost(SAMPLE_COST)


def test_min_assignment_cost_not_above_diagonal():
    diagonal = sum(SAMPLE_COST[i][i] for i in range(4))
    assert min_assignment_cost(SAMPLE_COST) <= diagonal


def test_min_assignment_cost_rejects_non_square():
    with pytest.raises(ValueError):
        min_assignment_cost([[1, 2]])


def test_makesquare_examples():
    assert makesquare([1, 1, 2, 2, 2]) is True
    assert makesquare([3, 3, 3, 3, 4]) is False


@settings(max_examples=30)
@given(st.lists(st.lists(st.integers(1, 5), min_size=1, max_size=3), min_size=4, max_size=4))
def test_makesquare_true_for_equal_sides(groups):
    side = max(sum(g) for g in groups)
    padded = [g + [side - sum(g)] if sum(g) < side else g for g in groups]
    assert makesquare(chain.from_iterable(padded)) is True


@given(st.lists(st.integers(1, 10), min_size=1, max_size=8))
def test_makesquare_matches_four_subsets(sticks):
    assert makesquare(sticks) == can_partition_k_subsets(sticks, 4)


def test_makesquare_sum_not_divisible_by_four():
    assert makesquare([1, 1, 1, 2]) is False


def test_can_partition_single_group_always():
    assert can_partition_k_subsets([4, 3, 2, 3, 5, 2, 1], 1) is True


def test_can_partition_rejects_zero_groups():
    with pytest.raises(ValueError):
        can_partition_k_subsets([1, 2], 0)


@settings(max_examples=30)
@given(st.integers(1, 4), st.lists(st.integers(1, 6), min_size=1, max_size=3))
def test_can_partition_repeated_group(k, group):
    assert can_partition_k_subsets(group * k, k) is True


def test_max_score_rejects_odd_length():
    with pytest.raises(ValueError):
        max_score([1, 2, 3])


@given(st.integers(1, 50), st.integers(1, 50))
def test_max_score_single_pair_is_gcd(a, b):
    assert max_score([a, b]) == math.gcd(a, b)


@settings(max_examples=30)
@given(st.lists(st.integers(1, 30), min_size=2, max_size=6).filter(lambda xs: len(xs) % 2 == 0),
       st.integers(1, 5))
def test_max_score_scales(nums, factor):
    assert max_score([factor * x for x in nums]) == factor * max_score(nums)


@given(st.lists(st.integers(1, 30), min_size=2, max_size=6).filter(lambda xs: len(xs) % 2 == 0))
def test_max_score_lower_bound(nums):
    pairs = len(nums) // 2
    assert max_score(nums) >= pairs * (pairs + 1) // 2


def test_connect_two_groups_single_row_uses_every_edge():
    row = [4, 9, 2]
    assert connect_two_groups([row]) == sum(row)


def test_connect_two_groups_single_column_uses_every_edge():
    column = [[3], [8], [5]]
    assert connect_two_groups(column) == sum(c[0] for c in column)


@settings(max_examples=30)
@given(st.lists(st.lists(st.integers(0, 20), min_size=3, max_size=3), min_size=1, max_size=3))
def test_connect_two_groups_bounds(cost):
    result = connect_two_groups(cost)
    assert result >= sum(min(row) for row in cost)
    assert result >= sum(min(col) for col in zip(*cost))


def test_connect_two_groups_rejects_empty():
    with pytest.raises(ValueError):
        connect_two_groups([])


def test_minimum_xor_sum_example():
    assert minimum_xor_sum([1, 2], [2, 3]) == 2


@given(st.lists(st.integers(0, 10**6), min_size=1, max_size=6))
def test_minimum_xor_sum_self_pairs_to_nothing(nums):
    assert minimum_xor_sum(nums, list(reversed(nums))) == 0


@given(st.lists(st.tuples(st.integers(0, 1000), st.integers(0, 1000)), min_size=1, max_size=6))
def test_minimum_xor_sum_symmetric_and_bounded(pairs):
    a = [p[0] for p in pairs]
    b = [p[1] for p in pairs]
    result = minimum_xor_sum(a, b)
    assert result == minimum_xor_sum(b, a)
    assert result <= sum(x ^ y for x, y in pairs)


def test_minimum_xor_sum_length_mismatch():
    with pytest.raises(ValueError):
        minimum_xor_sum([1], [1, 2])


def test_travelling_salesman_two_cities():
    distance = [[0, 7], [3, 0]]
    assert travelling_salesman(distance) == distance[0][1] + distance[1][0]


@settings(max_examples=30)
@given(st.integers(2, 5).flatmap(
    lambda n: st.lists(st.lists(st.integers(1, 50), min_size=n, max_size=n), min_size=n, max_size=n)))
def test_travelling_salesman_transpose_and_bound(distance):
    n = len(distance)
    transposed = [list(col) for col in zip(*distance)]
    result = travelling_salesman(distance)
    assert result == travelling_salesman(transposed)
    in_order = sum(distance[i][(i + 1) % n] for i in range(n))
    assert result <= in_order


def test_travelling_salesman_rejects_no_cities():
    with pytest.raises(ValueError):
        travelling_salesman([])


@given(st.integers(1, 4), st.integers(4, 8))
def test_shirts_everyone_owns_everything(people, shirts):
    collections = [range(shirts)] * people
    assert count_shirt_assignments(collections) == math.perm(shirts, people)


def test_shirts_disjoint_collections_multiply():
    collections = [[1, 2], [3, 4, 5], [6]]
    assert count_shirt_assignments(collections) == 2 * 3 * 1


def test_shirts_person_without_shirts():
    assert count_shirt_assignments([[1, 2], []]) == count_shirt_assignments([[]])
    assert count_shirt_assignments([[]]) == 0


def test_shirts_nobody_needs_one():
    assert count_shirt_assignments([]) == 1