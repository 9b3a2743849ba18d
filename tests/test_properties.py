from typing import Optional

import pytest

from algobook.properties import (
    diameter,
    is_balanced,
    is_balanced_naive,
    is_same_tree,
    is_symmetric,
    max_depth,
    max_path_sum,
)
from algobook.traversal import level_order, preorder
from algobook.tree import TreeNode, deserialize, serialize


def build(values: list) -> Optional[TreeNode]:
    """Build a tree from a level-order list with None for missing children."""
    if not values or values[0] is None:
        return None
    root = TreeNode(values[0])
    queue = [root]
    rest = iter(values[1:])
    for node in queue:
        left = next(rest, None)
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(rest, None)
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def chain(values: list) -> Optional[TreeNode]:
    root: Optional[TreeNode] = None
    for value in reversed(values):
        root = TreeNode(value, left=root)
    return root


def mirror(node: Optional[TreeNode]) -> Optional[TreeNode]:
    if node is None:
        return None
    return TreeNode(node.val, mirror(node.right), mirror(node.left))


SHAPES = [
    [],
    [1],
    [3, 9, 20, None, None, 15, 7],
    [1, 2, 2, 3, 3, None, None, 4, 4],
    [1, 2, 3, 4, 5, 6, 7],
    [1, None, 2, None, 3],
    [5, 4, 8, 11, None, 13, 4, 7, 2, None, None, None, 1],
]


@pytest.mark.parametrize("values", SHAPES)
def test_max_depth_matches_number_of_levels(values):
    root = build(values)
    assert max_depth(root) == len(level_order(root))


@pytest.mark.parametrize("values", SHAPES)
def test_fast_and_naive_balance_agree(values):
    root = build(values)
    assert is_balanced(root) == is_balanced_naive(root)


def test_chain_is_not_balanced():
    root = chain([1, 2, 3])
    assert not is_balanced(root)
    assert not is_balanced_naive(root)


def test_full_tree_is_balanced():
    root = build([1, 2, 3, 4, 5, 6, 7])
    assert is_balanced(root)
    assert is_balanced_naive(root)


def test_deep_imbalance_is_detected():
    root = build([1, 2, 2, 3, 3, None, None, 4, 4])
    assert not is_balanced(root)


def test_diameter_example():
    assert diameter(build([1, 2, 3, 4, 5])) == 3


@pytest.mark.parametrize("length", [1, 2, 5, 9])
def test_diameter_of_chain_spans_all_edges(length):
    root = chain(list(range(length)))
    assert diameter(root) == max_depth(root) - 1


@pytest.mark.parametrize("values", SHAPES[1:])
def test_diameter_bounded_by_depth(values):
    root = build(values)
    assert max_depth(root) - 1 <= diameter(root) <= 2 * (max_depth(root) - 1)


def test_max_path_sum_example():
    assert max_path_sum(build([-10, 9, 20, None, None, 15, 7])) == 42


def test_max_path_sum_single_node():
    assert max_path_sum(TreeNode(-7)) == -7


def test_max_path_sum_all_negative_picks_largest_node():
    root = build([-3, -1, -2, -8])
    assert max_path_sum(root) == max(preorder(root))


def test_max_path_sum_positive_triangle_takes_everything():
    root = build([4, 6, 9])
    assert max_path_sum(root) == sum(preorder(root))


def test_max_path_sum_empty_raises():
    with pytest.raises(ValueError):
        max_path_sum(None)


@pytest.mark.parametrize("values", SHAPES)
def test_same_tree_after_round_trip(values):
    root = build(values)
    assert is_same_tree(root, deserialize(serialize(root)))


def test_different_value_is_not_same():
    root = build([1, 2, 3])
    other = deserialize(serialize(root))
    other.right.val = 4
    assert not is_same_tree(root, other)


def test_different_shape_is_not_same():
    assert not is_same_tree(build([1, 2]), build([1, None, 2]))
    assert not is_same_tree(None, TreeNode(1))
    assert is_same_tree(None, None)


def test_symmetric_examples():
    assert is_symmetric(build([1, 2, 2, 3, 4, 4, 3]))
    assert not is_symmetric(build([1, 2, 2, None, 3, None, 3]))
    assert is_symmetric(None)


@pytest.mark.parametrize("values", SHAPES[1:])
def test_tree_joined_with_its_mirror_is_symmetric(values):
    side = build(values)
    root = TreeNode(0, side, mirror(deserialize(serialize(side))))
    assert is_symmetric(root)


def test_tree_joined_with_itself_is_not_symmetric():
    side = build([1, 2, 3])
    root = TreeNode(0, side, deserialize(serialize(side)))
    assert not is_symmetric(root)