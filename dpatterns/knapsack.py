"""Knapsack-style dynamic programming: subset sums, coin change and relatives."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

PERFECT_SUM_MODULUS = 1_000_000_007


def _require_non_negative(name: str, items: Iterable[int]) -> list[int]:
    result = list(items)
    if any(item < 0 for item in result):
        raise ValueError(f"{name} must not contain negative numbers")
    return result


def _reachable_sums(values: Sequence[int]) -> int:
    """Bit set whose bit ``k`` is on when some subset of ``values`` sums to ``k``."""
    bits = 1
    for value in values:
        bits |= bits << value
    return bits


def _count_subsets(values: Iterable[int], target: int, modulus: int | None = None) -> int:
    ways = [1] + [0] * target
    for value in values:
        for amount in range(target, 0, -1):
            if value <= amount:
                ways[amount] += ways[amount - value]
                if modulus is not None:
                    ways[amount] %= modulus
    return ways[target]


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Largest total value of items whose total weight fits into ``capacity``."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    weights = _require_non_negative("weights", weights)
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def subset_sum_exists(values: Iterable[int], target: int) -> bool:
    """Whether some subset of ``values`` sums exactly to ``target``."""
    values = _require_non_negative("values", values)
    if target < 0:
        raise ValueError("target must not be negative")
    return bool(_reachable_sums(values) >> target & 1)


def equal_partition(values: Iterable[int]) -> bool:
    """Whether ``values`` can be split into two parts with equal sums."""
    values = _require_non_negative("values", values)
    total = sum(values)
    if total % 2:
        return False
    return subset_sum_exists(values, total // 2)


def count_subsets_with_sum(values: Iterable[int], target: int) -> int:
    """Number of subsets of ``values`` that sum to ``target``."""
    values = _require_non_negative("values", values)
    if target < 0:
        raise ValueError("target must not be negative")
    return _count_subsets(values, target)


def perfect_sum(values: Iterable[int], target: int) -> int:
    """Number of subsets summing to ``target``, modulo 1_000_000_007."""
    values = _require_non_negative("values", values)
    if target < 0:
        raise ValueError("target must not be negative")
    return _count_subsets(values, target, PERFECT_SUM_MODULUS)


def count_subsets_with_difference(values: Iterable[int], diff: int) -> int:
    """Number of ways to split ``values`` into two parts whose sums differ by ``diff``."""
    values = _require_non_negative("values", values)
    total = sum(values)
    if diff > total or (total - diff) % 2:
        return 0
    return _count_subsets(values, (total - diff) // 2)


def min_subset_difference(values: Iterable[int]) -> int:
    """Smallest possible difference between the sums of two parts of ``values``."""
    values = _require_non_negative("values", values)
    total = sum(values)
    bits = _reachable_sums(values)
    half = next(s for s in range(total // 2, -1, -1) if bits >> s & 1)
    return total - 2 * half


def target_sum_ways(values: Iterable[int], target: int) -> int:
    """Number of ways to sign every value with + or - so the result is ``target``."""
    values = _require_non_negative("values", values)
    total = sum(values)
    zeros = values.count(0)
    if target > total or (total - target) % 2:
        return 0
    wanted = (total - target) // 2
    nonzero = [value for value in values if value]
    return 2**zeros * _count_subsets(nonzero, wanted)


def coin_change_ways(coins: Iterable[int], amount: int) -> int:
    """Number of coin combinations (unlimited supply) that make up ``amount``."""
    coins = list(coins)
    if any(coin <= 0 for coin in coins):
        raise ValueError("coins must be positive")
    if amount < 0:
        raise ValueError("amount must not be negative")
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def min_coins(coins: Iterable[int], amount: int) -> int | None:
    """Fewest coins (unlimited supply) making up ``amount``, or None if impossible."""
    coins = list(coins)
    if any(coin <= 0 for coin in coins):
        raise ValueError("coins must be positive")
    if amount < 0:
        raise ValueError("amount must not be negative")
    unreachable = amount + 1
    fewest = [0] + [unreachable] * amount
    for total in range(1, amount + 1):
        for coin in coins:
            if coin <= total:
                fewest[total] = min(fewest[total], fewest[total - coin] + 1)
    return None if fewest[amount] == unreachable else fewest[amount]


def rod_cutting(prices: Sequence[int]) -> int:
    """Best price for a rod of length ``len(prices)``; piece ``i + 1`` sells for ``prices[i]``."""
    length = len(prices)
    best = [0] * (length + 1)
    for piece, price in enumerate(prices, start=1):
        for room in range(piece, length + 1):
            best[room] = max(best[room], price + best[room - piece])
    return best[length]


def last_stone_weight(stones: Iterable[int]) -> int:
    """Smallest weight that can be left after smashing all the stones together."""
    return min_subset_difference(stones)


def ones_and_zeros(strings: Iterable[str], max_zeros: int, max_ones: int) -> int:
    """Largest number of strings using at most ``max_zeros`` '0's and ``max_ones`` other characters."""
    if max_zeros < 0 or max_ones < 0:
        raise ValueError("limits must not be negative")
    best = [[0] * (max_ones + 1) for _ in range(max_zeros + 1)]
    for text in strings:
        zeros = text.count("0")
        ones = len(text) - zeros
        for z in range(max_zeros, zeros - 1, -1):
            row, source = best[z], best[z - zeros]
            for o in range(max_ones, ones - 1, -1):
                row[o] = max(row[o], 1 + source[o - ones])
    return best[max_zeros][max_ones]