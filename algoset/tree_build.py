"""Building, reshaping and repairing binary trees."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from algoset.nodes import ListNode, TreeNode, list_values


def build_tree_from_preorder_inorder(
    preorder: Sequence[int], inorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its preorder and inorder traversals."""
    position = {value: index for index, value in enumerate(inorder)}
    values = iter(preorder)

    def build(low: int, high: int) -> Optional[TreeNode]:
        if low > high:
            return None
        node = TreeNode(next(values))
        split = position[node.val]
        node.left = build(low, split - 1)
        node.right = build(split + 1, high)
        return node

    return build(0, len(inorder) - 1)


def build_tree_from_inorder_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its inorder and postorder traversals."""
    position = {value: index for index, value in enumerate(inorder)}
    values = reversed(postorder)

    def build(low: int, high: int) -> Optional[TreeNode]:
        if low > high:
            return None
        node = TreeNode(next(values))
        split = position[node.val]
        node.right = build(split + 1, high)
        node.left = build(low, split - 1)
        return node

    return build(0, len(inorder) - 1)


def sorted_list_to_bst(head: Optional[ListNode]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from a sorted linked list.

    The middle node (the upper one for even lengths) becomes each root.
    The list itself is left unchanged.
    """
    values = list_values(head)

    def build(low: int, high: int) -> Optional[TreeNode]:
        if low >= high:
            return None
        mid = (low + high) // 2
        return TreeNode(values[mid], build(low, mid), build(mid + 1, high))

    return build(0, len(values))


def _preorder_nodes(root: Optional[TreeNode]) -> list[TreeNode]:
    nodes: list[TreeNode] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        nodes.append(node)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return nodes


def _inorder_nodes(root: Optional[TreeNode]) -> list[TreeNode]:
    nodes: list[TreeNode] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        nodes.append(node)
        node = node.right
    return nodes


def flatten(root: Optional[TreeNode]) -> None:
    """Relink the tree in place into a right-leaning chain in preorder."""
    nodes = _preorder_nodes(root)
    for node, following in zip(nodes, nodes[1:] + [None]):
        node.left = None
        node.right = following


def recover_tree(root: Optional[TreeNode]) -> None:
    """Restore search-tree order in place by swapping misplaced values back."""
    nodes = _inorder_nodes(root)
    ordered = sorted(node.val for node in nodes)
    for node, value in zip(nodes, ordered):
        node.val = value