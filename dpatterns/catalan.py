"""Catalan numbers and binomial coefficients."""

from __future__ import annotations


def catalan_numbers(n: int) -> list[int]:
    """The Catalan numbers ``C0`` to ``Cn``, built from the convolution recurrence."""
    if n < 0:
        raise ValueError("n must not be negative")
    numbers = [1, 1]
    for i in range(2, n + 1):
        numbers.append(sum(numbers[j] * numbers[i - j - 1] for j in range(i)))
    return numbers[: n + 1]


def binomial(n: int, r: int) -> int:
    """The binomial coefficient ``n`` choose ``r``."""
    if n < 0 or r < 0:
        raise ValueError("n and r must not be negative")
    result = 1
    for i in range(1, r + 1):
        result = result * (n + 1 - i) // i
    return result


def catalan(n: int) -> int:
    """The ``n``-th Catalan number, from the central binomial coefficient."""
    if n < 0:
        raise ValueError("n must not be negative")
    return binomial(2 * n, n) // (n + 1)