import pytest

from algoset.nodes import (
    GraphNode,
    ListNode,
    TreeNode,
    build_list,
    build_tree,
    list_values,
    tree_values,
)


@pytest.mark.parametrize(
    "values",
    [
        [1],
        [1, 2, 3],
        [1, None, 2],
        [5, 4, 8, 11, None, 13, 4, 7, 2, None, None, 5, 1],
        [3, 9, 20, None, None, 15, 7],
    ],
)
def test_tree_round_trip(values):
    assert tree_values(build_tree(values)) == values


def test_build_tree_empty():
    assert build_tree([]) is None
    assert build_tree([None]) is None
    assert tree_values(None) == []


def test_build_tree_structure():
    root = build_tree([1, 2, 3, None, 4])
    assert root.val == 1
    assert root.left.val == 2
    assert root.right.val == 3
    assert root.left.left is None
    assert root.left.right.val == 4


def test_tree_values_trims_trailing_gaps():
    assert tree_values(build_tree([1, 2, None, None, None])) == [1, 2]


def test_tree_node_defaults():
    node = TreeNode()
    assert node.val == 0
    assert node.left is None and node.right is None


@pytest.mark.parametrize("values", [[], [1], [2, 4, 3], [9, 9, 9, 9]])
def test_list_round_trip(values):
    assert list_values(build_list(values)) == values


def test_list_node_iteration():
    head = build_list([1, 2, 3])
    assert [node.val for node in head] == [1, 2, 3]
    assert isinstance(head, ListNode)


def test_graph_node_neighbors_independent():
    a = GraphNode(1)
    b = GraphNode(2)
    a.neighbors.append(b)
    assert a.neighbors == [b]
    assert b.neighbors == []