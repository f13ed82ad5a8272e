"""Take-it-or-leave-it dynamic programming: house robbers and stock trading."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node holding a house's value."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _rob_line(values: Sequence[int]) -> int:
    if not values:
        return 0
    robbed, skipped = values[0], 0
    for value in values[1:]:
        robbed, skipped = value + skipped, max(robbed, skipped)
    return max(robbed, skipped)


def rob_houses(values: Sequence[int]) -> int:
    """Most money from a street of houses without robbing two neighbours."""
    return _rob_line(list(values))


def rob_circular(values: Sequence[int]) -> int:
    """Most money when the first and last houses are neighbours as well."""
    values = list(values)
    if len(values) == 1:
        return values[0]
    return max(_rob_line(values[:-1]), _rob_line(values[1:]))


def rob_tree(root: TreeNode | None) -> int:
    """Most money from a tree of houses without robbing a parent and its child."""

    def visit(node: TreeNode | None) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_skip, left_take = visit(node.left)
        right_skip, right_take = visit(node.right)
        skip = max(left_skip, left_take) + max(right_skip, right_take)
        take = node.val + left_skip + right_skip
        return skip, take

    return max(visit(root))


def max_profit_single(prices: Sequence[int]) -> int:
    """Best profit from at most one buy followed by one sell."""
    best = 0
    lowest = None
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_with_fee(prices: Sequence[int], fee: int) -> int:
    """Best profit from any number of trades, paying ``fee`` on each purchase."""
    holding = free = 0
    for price in reversed(prices):
        holding, free = max(holding, price + free), max(free, holding - price - fee)
    return free


def max_profit_with_cooldown(prices: Sequence[int]) -> int:
    """Best profit from any number of trades, resting one day after each sale."""
    holding = cooling = ready = 0
    for price in reversed(prices):
        holding, cooling, ready = (
            max(price + cooling, holding),
            max(0, ready),
            max(holding - price, ready),
        )
    return ready


def max_profit_k_transactions(prices: Sequence[int], k: int) -> int:
    """Best profit from at most ``k`` buy-and-sell transactions."""
    if k < 0:
        raise ValueError("k must not be negative")
    holding = [0] * (k + 1)
    free = [0] * (k + 1)
    for price in reversed(prices):
        holding, free = (
            [0] + [max(price + free[t - 1], holding[t]) for t in range(1, k + 1)],
            [0] + [max(holding[t] - price, free[t]) for t in range(1, k + 1)],
        )
    return free[k]


def max_profit_two_transactions(prices: Sequence[int]) -> int:
    """Best profit from at most two buy-and-sell transactions."""
    return max_profit_k_transactions(prices, 2)