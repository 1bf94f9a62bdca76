"""String problems."""

from __future__ import annotations

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = set(_PAIRS.values())


def is_match(s: str, p: str) -> bool:
    """Match s against pattern p with '.' for any character and '*' for repetition."""
    m, n = len(s), len(p)
    dp = [[False] * (n + 1) for _ in range(m + 1)]
    dp[0][0] = True
    for j in range(2, n + 1):
        if p[j - 1] == "*":
            dp[0][j] = dp[0][j - 2]
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if p[j - 1] == "*":
                dp[i][j] = dp[i][j - 2] or (
                    dp[i - 1][j] and p[j - 2] in (s[i - 1], ".")
                )
            else:
                dp[i][j] = dp[i - 1][j - 1] and p[j - 1] in (s[i - 1], ".")
    return dp[m][n]


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring, the leftmost one on ties."""
    if len(s) <= 1:
        return s
    for length in range(len(s), 1, -1):
        for start in range(len(s) - length + 1):
            candidate = s[start : start + length]
            if candidate == candidate[::-1]:
                return candidate
    return s[0]


def is_valid_parentheses(s: str) -> bool:
    """Return whether every bracket in s is closed by a matching one in order."""
    if len(s) % 2 == 1:
        return False
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif not stack or _PAIRS.get(char) != stack.pop():
            return False
    return not stack