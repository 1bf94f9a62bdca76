"""Binary tree queries and traversals."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from algoset.nodes import TreeNode


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    """Yield the nodes of each level of the tree, top to bottom, left to right."""
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return whether two trees have the same shape and the same values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _is_mirror(left: Optional[TreeNode], right: Optional[TreeNode]) -> bool:
    if left is None and right is None:
        return True
    if left is None or right is None:
        return False
    return (
        left.val == right.val
        and _is_mirror(left.left, right.right)
        and _is_mirror(left.right, right.left)
    )


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return whether the tree mirrors itself; an empty tree is not symmetric."""
    if root is None:
        return False
    return _is_mirror(root.left, root.right)


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values of each level, top to bottom, left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return level values, alternating left-to-right and right-to-left."""
    return [
        values if depth % 2 == 0 else values[::-1]
        for depth, values in enumerate(level_order(root))
    ]


def level_order_bottom(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values of each level, bottom level first."""
    return level_order(root)[::-1]


def min_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the shortest root-to-leaf path, 0 if empty."""
    for depth, level in enumerate(_levels(root), start=1):
        if any(node.left is None and node.right is None for node in level):
            return depth
    return 0


def path_sum(root: Optional[TreeNode], target_sum: int) -> list[list[int]]:
    """Return every root-to-leaf path whose values add up to target_sum."""

    def walk(node: Optional[TreeNode], remaining: int) -> Iterator[list[int]]:
        if node is None:
            return
        remaining -= node.val
        if node.left is None and node.right is None:
            if remaining == 0:
                yield [node.val]
            return
        for child in (node.left, node.right):
            for tail in walk(child, remaining):
                yield [node.val, *tail]

    return list(walk(root, target_sum))


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the rightmost value of each level, top to bottom."""
    return [level[-1].val for level in _levels(root)]


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Return whether the tree is a binary search tree with strictly ordered keys."""
    stack: list[tuple[Optional[TreeNode], float, float]] = [
        (root, float("-inf"), float("inf"))
    ]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if not low < node.val < high:
            return False
        stack.append((node.left, low, node.val))
        stack.append((node.right, node.val, high))
    return True