import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.trees import TreeNode, is_same_tree, max_depth, min_depth

EXAMPLE = [3, 9, 20, None, None, 15, 7]
CHAIN = [2, None, 3, None, 4, None, 5, None, 6]


def test_from_level_order_structure():
    root = TreeNode.from_level_order(EXAMPLE)
    assert root.val == 3
    assert root.left.val == 9
    assert root.left.left is None and root.left.right is None
    assert root.right.left.val == 15
    assert root.right.right.val == 7


@pytest.mark.parametrize("values", [[], [None]])
def test_from_level_order_empty(values):
    assert TreeNode.from_level_order(values) is None


def test_depths_of_example():
    root = TreeNode.from_level_order(EXAMPLE)
    assert max_depth(root) == 3
    assert min_depth(root) == 2


def test_depths_of_chain_agree():
    root = TreeNode.from_level_order(CHAIN)
    assert min_depth(root) == max_depth(root) == 5


def test_depths_of_empty_tree():
    assert max_depth(None) == 0
    assert min_depth(None) == 0


@given(st.lists(st.one_of(st.none(), st.integers()), max_size=30))
def test_tree_is_same_as_rebuilt_copy(values):
    first = TreeNode.from_level_order(values)
    second = TreeNode.from_level_order(values)
    assert is_same_tree(first, second)


@given(st.lists(st.one_of(st.none(), st.integers()), max_size=30))
def test_min_depth_never_exceeds_max_depth(values):
    root = TreeNode.from_level_order(values)
    assert min_depth(root) <= max_depth(root)


def test_same_tree_examples():
    assert is_same_tree(TreeNode.from_level_order([1, 2, 3]), TreeNode.from_level_order([1, 2, 3]))
    assert not is_same_tree(TreeNode.from_level_order([1, 2]), TreeNode.from_level_order([1, None, 2]))
    assert not is_same_tree(TreeNode.from_level_order([1, 2, 1]), TreeNode.from_level_order([1, 1, 2]))


def test_same_tree_with_missing_trees():
    node = TreeNode(1)
    assert is_same_tree(None, None)
    assert not is_same_tree(node, None)
    assert not is_same_tree(None, node)