"""Dynamic programming over strings and sequences: LCS family, LIS, palindromes."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def _lcs_table(a: Sequence, b: Sequence) -> list[list[int]]:
    """Table whose cell ``[i][j]`` is the LCS length of ``a[:i]`` and ``b[:j]``."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, x in enumerate(a, start=1):
        row, above = table[i], table[i - 1]
        for j, y in enumerate(b, start=1):
            if x == y:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(row[j - 1], above[j])
    return table


def lcs_length(a: Sequence, b: Sequence) -> int:
    """Length of the longest common subsequence of ``a`` and ``b``."""
    return _lcs_table(a, b)[len(a)][len(b)]


def longest_common_subsequence(a: str, b: str) -> str:
    """One longest common subsequence of ``a`` and ``b``."""
    table = _lcs_table(a, b)
    i, j = len(a), len(b)
    picked: list[str] = []
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            picked.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            j -= 1
        else:
            i -= 1
    return "".join(reversed(picked))


def longest_common_substring(a: Sequence, b: Sequence) -> int:
    """Length of the longest contiguous run shared by ``a`` and ``b``."""
    best = 0
    previous = [0] * (len(b) + 1)
    for x in a:
        current = [0] * (len(b) + 1)
        for j, y in enumerate(b, start=1):
            if x == y:
                current[j] = previous[j - 1] + 1
                best = max(best, current[j])
        previous = current
    return best


def longest_palindromic_subsequence(text: Sequence) -> int:
    """Length of the longest subsequence of ``text`` that reads the same backwards."""
    return lcs_length(text, text[::-1])


def longest_repeating_subsequence(text: Sequence) -> int:
    """Length of the longest subsequence occurring twice without sharing positions."""
    n = len(text)
    table = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        row, above = table[i], table[i - 1]
        for j in range(1, n + 1):
            if i != j and text[i - 1] == text[j - 1]:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(row[j - 1], above[j])
    return table[n][n]


def min_deletions_to_palindrome(text: Sequence) -> int:
    """Fewest deletions that leave ``text`` a palindrome."""
    return len(text) - longest_palindromic_subsequence(text)


def min_insertions_to_palindrome(text: Sequence) -> int:
    """Fewest insertions that make ``text`` a palindrome."""
    return len(text) - longest_palindromic_subsequence(text)


def shortest_common_supersequence_length(a: Sequence, b: Sequence) -> int:
    """Length of the shortest sequence having both ``a`` and ``b`` as subsequences."""
    return len(a) + len(b) - lcs_length(a, b)


def shortest_common_supersequence(a: str, b: str) -> str:
    """One shortest string having both ``a`` and ``b`` as subsequences."""
    table = _lcs_table(a, b)
    i, j = len(a), len(b)
    built: list[str] = []
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            built.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            built.append(b[j - 1])
            j -= 1
        else:
            built.append(a[i - 1])
            i -= 1
    built.extend(reversed(a[:i]))
    built.extend(reversed(b[:j]))
    return "".join(reversed(built))


def is_interleave(a: str, b: str, c: str) -> bool:
    """Whether ``c`` is formed by merging ``a`` and ``b`` keeping each one's order."""
    if len(a) + len(b) != len(c):
        return False
    row = [True] * (len(b) + 1)
    for j in range(1, len(b) + 1):
        row[j] = row[j - 1] and b[j - 1] == c[j - 1]
    for i in range(1, len(a) + 1):
        row[0] = row[0] and a[i - 1] == c[i - 1]
        for j in range(1, len(b) + 1):
            target = c[i + j - 1]
            row[j] = (row[j - 1] and b[j - 1] == target) or (
                row[j] and a[i - 1] == target
            )
    return row[len(b)]


def longest_increasing_subsequence(nums: Sequence) -> int:
    """Length of the longest strictly increasing subsequence of ``nums``."""
    tails: list = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def min_palindrome_cuts(text: Sequence) -> int:
    """Fewest cuts splitting ``text`` into pieces that are all palindromes."""
    n = len(text)
    if n == 0:
        return 0
    palindrome = [[False] * n for _ in range(n)]
    for left in range(n - 1, -1, -1):
        for right in range(left, n):
            if text[left] == text[right] and (
                right - left < 2 or palindrome[left + 1][right - 1]
            ):
                palindrome[left][right] = True
    cuts = [0] * n
    for right in range(1, n):
        if palindrome[0][right]:
            cuts[right] = 0
        else:
            cuts[right] = 1 + min(
                cuts[left - 1] for left in range(1, right + 1) if palindrome[left][right]
            )
    return cuts[n - 1]