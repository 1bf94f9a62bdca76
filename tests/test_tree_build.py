import pytest

from algoset.nodes import build_list, build_tree, list_values, tree_values
from algoset.tree_build import (
    build_tree_from_inorder_postorder,
    build_tree_from_preorder_inorder,
    flatten,
    recover_tree,
    sorted_list_to_bst,
)
from algoset.trees import is_same_tree, is_valid_bst

SAMPLE_TREES = [
    [1],
    [3, 9, 20, None, None, 15, 7],
    list(range(1, 8)),
    [1, None, 2, None, 3],
    [1, 2, None, 3, None, 4],
    [10, 5, 15, 3, 7, None, 18, 1, None, 6],
]


def preorder(node):
    if node is None:
        return []
    return [node.val, *preorder(node.left), *preorder(node.right)]


def inorder(node):
    if node is None:
        return []
    return [*inorder(node.left), node.val, *inorder(node.right)]


def postorder(node):
    if node is None:
        return []
    return [*postorder(node.left), *postorder(node.right), node.val]


def height(node):
    if node is None:
        return 0
    return 1 + max(height(node.left), height(node.right))


def is_balanced(node):
    if node is None:
        return True
    return (
        abs(height(node.left) - height(node.right)) <= 1
        and is_balanced(node.left)
        and is_balanced(node.right)
    )


@pytest.mark.parametrize("values", SAMPLE_TREES)
def test_preorder_inorder_round_trip(values):
    original = build_tree(values)
    rebuilt = build_tree_from_preorder_inorder(preorder(original), inorder(original))
    assert is_same_tree(rebuilt, original)
    assert tree_values(rebuilt) == values


@pytest.mark.parametrize("values", SAMPLE_TREES)
def test_inorder_postorder_round_trip(values):
    original = build_tree(values)
    rebuilt = build_tree_from_inorder_postorder(inorder(original), postorder(original))
    assert is_same_tree(rebuilt, original)
    assert tree_values(rebuilt) == values


def test_inorder_postorder_example():
    root = build_tree_from_inorder_postorder([9, 3, 15, 20, 7], [9, 15, 7, 20, 3])
    assert tree_values(root) == [3, 9, 20, None, None, 15, 7]


def test_inorder_postorder_two_nodes():
    root = build_tree_from_inorder_postorder([2, 1], [2, 1])
    assert tree_values(root) == [1, 2]


def test_builders_on_empty_input():
    assert build_tree_from_preorder_inorder([], []) is None
    assert build_tree_from_inorder_postorder([], []) is None


@pytest.mark.parametrize("size", [1, 2, 3, 5, 8, 13])
def test_sorted_list_to_bst_is_balanced_search_tree(size):
    values = list(range(-size, 2 * size, 3))[:size]
    head = build_list(values)
    root = sorted_list_to_bst(head)
    assert inorder(root) == values
    assert is_valid_bst(root)
    assert is_balanced(root)
    assert list_values(head) == values


def test_sorted_list_to_bst_picks_upper_middle():
    values = [-10, -3, 0, 5, 9]
    root = sorted_list_to_bst(build_list(values))
    assert root.val == values[len(values) // 2]
    pair = sorted_list_to_bst(build_list([1, 2]))
    assert pair.val == 2
    assert pair.left.val == 1


def test_sorted_list_to_bst_empty():
    assert sorted_list_to_bst(None) is None


def chain(root):
    values = []
    node = root
    while node is not None:
        assert node.left is None
        values.append(node.val)
        node = node.right
    return values


@pytest.mark.parametrize("values", SAMPLE_TREES + [[1, 2, 5, 3, 4, None, 6]])
def test_flatten_links_in_preorder(values):
    root = build_tree(values)
    expected = preorder(root)
    flatten(root)
    assert chain(root) == expected


def test_flatten_example():
    root = build_tree([1, 2, 5, 3, 4, None, 6])
    flatten(root)
    assert chain(root) == [1, 2, 3, 4, 5, 6]


def test_flatten_empty_and_single_node():
    assert flatten(None) is None
    root = build_tree([7])
    flatten(root)
    assert chain(root) == [7]
    assert tree_values(root) == [7]


def _nodes_inorder(node):
    if node is None:
        return []
    return [*_nodes_inorder(node.left), node, *_nodes_inorder(node.right)]


@pytest.mark.parametrize("first,second", [(0, 1), (0, 6), (2, 5), (3, 4)])
def test_recover_tree_swaps_back(first, second):
    values = [1, 2, 3, 4, 5, 6, 7]
    root = sorted_list_to_bst(build_list(values))
    nodes = _nodes_inorder(root)
    nodes[first].val, nodes[second].val = nodes[second].val, nodes[first].val
    assert not is_valid_bst(root)
    recover_tree(root)
    assert is_valid_bst(root)
    assert inorder(root) == values


def test_recover_tree_example():
    root = build_tree([1, 3, None, None, 2])
    recover_tree(root)
    assert tree_values(root) == [3, 1, None, None, 2]


def test_recover_tree_leaves_valid_tree_alone():
    values = [2, 1, 3]
    root = build_tree(values)
    recover_tree(root)
    assert tree_values(root) == values