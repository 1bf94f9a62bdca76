"""Enumeration and counting problems."""

from __future__ import annotations

import math
from collections.abc import Iterator
from itertools import product

_PHONE_LETTERS = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string the phone digits 2-9 can spell."""
    if not digits:
        return []
    try:
        groups = [_PHONE_LETTERS[digit] for digit in digits]
    except KeyError as exc:
        raise ValueError(f"digit without letters: {exc.args[0]!r}") from None
    return ["".join(letters) for letters in product(*groups)]


def generate_parenthesis(n: int) -> list[str]:
    """Return every well-formed string of n pairs of parentheses."""

    def extend(path: str, opened: int, closed: int) -> Iterator[str]:
        if opened == n and closed == n:
            yield path
            return
        if opened < n:
            yield from extend(path + "(", opened + 1, closed)
        if closed < opened:
            yield from extend(path + ")", opened, closed + 1)

    return list(extend("", 0, 0))


def combination_sum(candidates: list[int], target: int) -> list[list[int]]:
    """Return every multiset of candidates, in candidate order, that sums to target."""

    def search(start: int, chosen: list[int], total: int) -> Iterator[list[int]]:
        if total == target:
            yield list(chosen)
            return
        if total > target:
            return
        for index in range(start, len(candidates)):
            chosen.append(candidates[index])
            yield from search(index, chosen, total + candidates[index])
            chosen.pop()

    return list(search(0, [], 0))


def permute(nums: list[int]) -> list[list[int]]:
    """Return every ordering of nums, generated by successive swaps."""
    items = list(nums)

    def arrange(index: int) -> Iterator[list[int]]:
        if index == len(items):
            yield list(items)
            return
        for j in range(index, len(items)):
            items[index], items[j] = items[j], items[index]
            yield from arrange(index + 1)
            items[index], items[j] = items[j], items[index]

    return list(arrange(0))


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every board of n non-attacking queens, rows as strings of 'Q' and '.'."""
    columns: list[int] = []

    def safe(row: int, col: int) -> bool:
        return all(
            c != col and abs(c - col) != row - r for r, c in enumerate(columns)
        )

    def place(row: int) -> Iterator[list[str]]:
        if row == n:
            yield ["." * c + "Q" + "." * (n - c - 1) for c in columns]
            return
        for col in range(n):
            if safe(row, col):
                columns.append(col)
                yield from place(row + 1)
                columns.pop()

    return list(place(0))


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths across an m by n grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return math.comb(m + n - 2, m - 1)