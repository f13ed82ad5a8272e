"""Interval dynamic programming: matrix chains, balloons, stick cutting, egg drops."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def matrix_chain_order(dims: Sequence[int]) -> int:
    """Fewest scalar multiplications needed to multiply a chain of matrices.

    Matrix ``i`` of the chain has shape ``dims[i] x dims[i + 1]``.
    """
    dims = list(dims)
    if len(dims) < 2:
        raise ValueError("a matrix chain needs at least two dimensions")
    count = len(dims) - 1
    cost = [[0] * count for _ in range(count)]
    for gap in range(1, count):
        for left in range(count - gap):
            right = left + gap
            cost[left][right] = min(
                cost[left][k] + cost[k + 1][right] + dims[left] * dims[k + 1] * dims[right + 1]
                for k in range(left, right)
            )
    return cost[0][count - 1]


def burst_balloons(nums: Sequence[int]) -> int:
    """Most coins collected by bursting every balloon in the best order."""
    nums = list(nums)
    n = len(nums)
    if n == 0:
        return 0
    best = [[0] * n for _ in range(n)]
    for gap in range(n):
        for left in range(n - gap):
            right = left + gap
            outside = (nums[left - 1] if left > 0 else 1) * (
                nums[right + 1] if right < n - 1 else 1
            )
            best[left][right] = max(
                (best[left][k - 1] if k > left else 0)
                + nums[k] * outside
                + (best[k + 1][right] if k < right else 0)
                for k in range(left, right + 1)
            )
    return best[0][n - 1]


def min_cost_to_cut_stick(length: int, cuts: Iterable[int]) -> int:
    """Cheapest total cost of making every cut, each costing the piece's length."""
    cuts = list(cuts)
    if any(not 0 < cut < length for cut in cuts):
        raise ValueError("every cut must lie strictly inside the stick")
    points = sorted([0, *cuts, length])
    m = len(points)
    cost = [[0] * m for _ in range(m)]
    for gap in range(2, m):
        for left in range(m - gap):
            right = left + gap
            cost[left][right] = min(
                cost[left][k] + cost[k][right] for k in range(left + 1, right)
            ) + points[right] - points[left]
    return cost[0][m - 1]


def super_egg_drop(eggs: int, floors: int) -> int:
    """Fewest drops that always find the critical floor with ``eggs`` eggs."""
    if eggs < 1:
        raise ValueError("at least one egg is needed")
    if floors < 0:
        raise ValueError("floors must not be negative")
    previous = list(range(floors + 1))
    for _ in range(2, eggs + 1):
        current = [0] * (floors + 1)
        if floors >= 1:
            current[1] = 1
        for floor in range(2, floors + 1):
            current[floor] = 1 + min(
                max(current[floor - k], previous[k - 1]) for k in range(1, floor + 1)
            )
        previous = current
    return previous[floors]