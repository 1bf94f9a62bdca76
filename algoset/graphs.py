"""Graph and grid search problems."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from string import ascii_lowercase
from typing import Optional

from algoset.nodes import GraphNode


def clone_graph(node: Optional[GraphNode]) -> Optional[GraphNode]:
    """Return a deep copy of the graph reachable from node."""
    if node is None:
        return None
    copies: dict[GraphNode, GraphNode] = {node: GraphNode(node.val)}
    queue = deque([node])
    while queue:
        original = queue.popleft()
        for neighbor in original.neighbors:
            if neighbor not in copies:
                copies[neighbor] = GraphNode(neighbor.val)
                queue.append(neighbor)
            copies[original].neighbors.append(copies[neighbor])
    return copies[node]


def ladder_length(begin_word: str, end_word: str, word_list: Iterable[str]) -> int:
    """Return the number of words in the shortest one-letter-change chain, or 0."""
    words = set(word_list)
    if end_word not in words:
        return 0
    visited: set[str] = set()
    queue = deque([begin_word])
    steps = 1
    while queue:
        for _ in range(len(queue)):
            word = queue.popleft()
            if word == end_word:
                return steps
            for index, original in enumerate(word):
                for letter in ascii_lowercase:
                    if letter == original:
                        continue
                    candidate = word[:index] + letter + word[index + 1 :]
                    if candidate in words and candidate not in visited:
                        visited.add(candidate)
                        queue.append(candidate)
        steps += 1
    return 0


def _flood(
    grid: Sequence[Sequence[str]],
    start: tuple[int, int],
    mark: str,
    seen: set[tuple[int, int]],
) -> None:
    """Add to seen every cell holding mark that is 4-connected to start."""
    stack = [start]
    while stack:
        row, col = stack.pop()
        if (row, col) in seen:
            continue
        if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
            continue
        if grid[row][col] != mark:
            continue
        seen.add((row, col))
        stack.extend(
            ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1))
        )


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count 4-connected groups of '1' cells; the grid is left unchanged."""
    seen: set[tuple[int, int]] = set()
    count = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == "1" and (r, c) not in seen:
                count += 1
                _flood(grid, (r, c), "1", seen)
    return count


def capture_surrounded(board: list[list[str]]) -> None:
    """Turn every 'O' region not connected to the border into 'X', in place."""
    if not board or not board[0]:
        return
    rows, cols = len(board), len(board[0])
    border = {(r, c) for r in range(rows) for c in (0, cols - 1)}
    border |= {(r, c) for c in range(cols) for r in (0, rows - 1)}
    safe: set[tuple[int, int]] = set()
    for cell in border:
        _flood(board, cell, "O", safe)
    for r, row in enumerate(board):
        for c, value in enumerate(row):
            if value == "O" and (r, c) not in safe:
                row[c] = "X"