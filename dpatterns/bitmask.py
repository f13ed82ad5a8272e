"""Bitmask dynamic programming: partitions, assignments, tours and matchings."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from functools import cache
from math import gcd


def _is_free(mask: int, index: int) -> bool:
    return not mask >> index & 1


def _square_rows(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def _can_partition(values: Iterable[int], parts: int) -> bool:
    """Whether ``values`` splits into ``parts`` groups of equal sum."""
    if parts < 1:
        raise ValueError("the number of parts must be positive")
    values = sorted(values, reverse=True)
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    if not values:
        return False
    total = sum(values)
    if total % parts:
        return False
    side = total // parts
    if values[0] > side:
        return False
    if side == 0:
        return True
    full = (1 << len(values)) - 1

    @cache
    def feasible(mask: int) -> bool:
        if mask == full:
            return True
        filled = sum(v for i, v in enumerate(values) if not _is_free(mask, i)) % side
        return any(
            _is_free(mask, i) and filled + value <= side and feasible(mask | 1 << i)
            for i, value in enumerate(values)
        )

    return feasible(0)


def makesquare(sticks: Iterable[int]) -> bool:
    """Whether every stick can be used to form the four equal sides of a square."""
    return _can_partition(sticks, 4)


def can_partition_k_subsets(nums: Iterable[int], k: int) -> bool:
    """Whether ``nums`` splits into ``k`` groups whose sums are all equal."""
    return _can_partition(nums, k)


def max_score(nums: Sequence[int]) -> int:
    """Best score pairing all numbers; the ``i``-th pair earns ``i * gcd(pair)``."""
    nums = list(nums)
    if len(nums) % 2:
        raise ValueError("an even number of values is needed")
    size = len(nums)
    full = (1 << size) - 1

    @cache
    def best(mask: int) -> int:
        if mask == full:
            return 0
        operation = bin(mask).count("1") // 2 + 1
        result = 0
        for i in range(size):
            if not _is_free(mask, i):
                continue
            for j in range(i + 1, size):
                if _is_free(mask, j):
                    result = max(
                        result,
                        operation * gcd(nums[i], nums[j]) + best(mask | 1 << i | 1 << j),
                    )
        return result

    return best(0)


def min_assignment_cost(cost: Sequence[Sequence[int]]) -> int:
    """Cheapest way to give each worker (row) a distinct job (column)."""
    rows = _square_rows(cost)
    size = len(rows)

    @cache
    def best(worker: int, mask: int) -> int:
        if worker == size:
            return 0
        return min(
            rows[worker][job] + best(worker + 1, mask | 1 << job)
            for job in range(size)
            if _is_free(mask, job)
        )

    return best(0, 0)


def connect_two_groups(cost: Sequence[Sequence[int]]) -> int:
    """Cheapest set of edges touching every point of both groups.

    ``cost[i][j]`` is the price of joining point ``i`` of the first group
    to point ``j`` of the second.
    """
    rows = [list(row) for row in cost]
    if not rows or not rows[0]:
        raise ValueError("both groups must hold at least one point")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("every row must have the same length")
    cheapest = [min(column) for column in zip(*rows)]

    @cache
    def best(point: int, mask: int) -> int:
        if point == len(rows):
            return sum(cheapest[j] for j in range(width) if _is_free(mask, j))
        return min(rows[point][j] + best(point + 1, mask | 1 << j) for j in range(width))

    return best(0, 0)


def minimum_xor_sum(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Smallest sum of ``a ^ b`` over a pairing of ``nums1`` with a rearranged ``nums2``."""
    if len(nums1) != len(nums2):
        raise ValueError("both lists must have the same length")
    return min_assignment_cost([[a ^ b for b in nums2] for a in nums1])


def travelling_salesman(distance: Sequence[Sequence[int]]) -> int:
    """Shortest tour from city 0 through every other city once and back to city 0."""
    rows = _square_rows(distance)
    size = len(rows)
    if size == 0:
        raise ValueError("at least one city is needed")
    full = (1 << size) - 1

    @cache
    def tour(city: int, mask: int) -> int:
        if mask == full:
            return rows[city][0]
        return min(
            rows[city][nxt] + tour(nxt, mask | 1 << nxt)
            for nxt in range(size)
            if _is_free(mask, nxt)
        )

    return tour(0, 1)


def count_shirt_assignments(collections: Iterable[Iterable[Hashable]]) -> int:
    """Number of ways to give every person a distinct shirt from their own collection."""
    owners = [frozenset(collection) for collection in collections]
    shirts = list(set().union(*owners))
    full = (1 << len(owners)) - 1

    @cache
    def ways(index: int, mask: int) -> int:
        if mask == full:
            return 1
        if index == len(shirts):
            return 0
        shirt = shirts[index]
        total = ways(index + 1, mask)
        for person, owned in enumerate(owners):
            if _is_free(mask, person) and shirt in owned:
                total += ways(index + 1, mask | 1 << person)
        return total

    return ways(0, 0)