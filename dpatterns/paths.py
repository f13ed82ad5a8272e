"""Dynamic programming for cheapest paths towards a target."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Cheapest way past the top step, starting on step 0 or 1 and climbing 1 or 2."""
    two_back, one_back = 0, 0
    for i in range(2, len(cost) + 1):
        two_back, one_back = one_back, min(one_back + cost[i - 1], two_back + cost[i - 2])
    return one_back


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a path from top-left to bottom-right moving right or down."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    row = [0] * len(grid[0])
    row[0] = grid[0][0]
    for j in range(1, len(row)):
        row[j] = row[j - 1] + grid[0][j]
    for cells in grid[1:]:
        row[0] += cells[0]
        for j in range(1, len(row)):
            row[j] = min(row[j], row[j - 1]) + cells[j]
    return row[-1]


def min_falling_path_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Smallest sum of a path taking one cell per row, moving at most one column."""
    if not matrix or not matrix[0]:
        raise ValueError("matrix must not be empty")
    previous = list(matrix[0])
    last = len(previous) - 1
    for cells in matrix[1:]:
        previous = [
            value + min(previous[max(0, j - 1)], previous[j], previous[min(last, j + 1)])
            for j, value in enumerate(cells)
        ]
    return min(previous)


def min_cost_tickets(days: Iterable[int], costs: Sequence[int]) -> int:
    """Cheapest set of 1-, 7- and 30-day passes covering every travel day."""
    travel = set(days)
    if len(costs) != 3:
        raise ValueError("costs must hold the 1-, 7- and 30-day prices")
    if not travel:
        return 0
    if min(travel) < 1:
        raise ValueError("days are numbered from 1")
    last = max(travel)
    best = [0] * (last + 1)
    for day in range(1, last + 1):
        if day not in travel:
            best[day] = best[day - 1]
        else:
            best[day] = min(
                best[day - 1] + costs[0],
                best[max(0, day - 7)] + costs[1],
                best[max(0, day - 30)] + costs[2],
            )
    return best[last]


def min_steps_two_keys(n: int) -> int:
    """Fewest copy-all and paste operations to get ``n`` characters from one."""
    if n < 1:
        raise ValueError("n must be at least 1")
    steps = [0] * (n + 1)
    for i in range(2, n + 1):
        factor = next(j for j in range(i // 2, 0, -1) if i % j == 0)
        steps[i] = steps[factor] + i // factor
    return steps[n]


def num_squares(n: int) -> int:
    """Fewest perfect squares that sum to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    fewest = [0] * (n + 1)
    for i in range(1, n + 1):
        fewest[i] = 1 + min(fewest[i - j * j] for j in range(1, int(i**0.5) + 1))
    return fewest[n]


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Smallest top-to-bottom path sum through a triangle of numbers."""
    if not triangle:
        raise ValueError("triangle must not be empty")
    previous = list(triangle[0])
    for i, cells in enumerate(triangle[1:], start=1):
        previous = [
            value + min(previous[max(0, j - 1)], previous[min(i - 1, j)])
            for j, value in enumerate(cells[: i + 1])
        ]
    return min(previous)


def maximal_square(matrix: Sequence[Sequence]) -> int:
    """Area of the largest square holding only '1' cells."""
    if not matrix or not matrix[0]:
        return 0
    width = len(matrix[0])
    side = 0
    previous = [0] * width
    for i, cells in enumerate(matrix):
        current = [0] * width
        for j, cell in enumerate(cells):
            if cell in ("1", 1):
                if i and j:
                    current[j] = 1 + min(previous[j], current[j - 1], previous[j - 1])
                else:
                    current[j] = 1
                side = max(side, current[j])
        previous = current
    return side * side