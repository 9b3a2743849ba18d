import pytest

from algobook.metrics import (
    count_complete_nodes,
    count_nodes,
    has_children_sum_property,
    max_width,
)
from algobook.traversal import level_order, preorder
from algobook.tree import TreeNode, deserialize


def _complete(n):
    nodes = [TreeNode(v) for v in range(1, n + 1)]
    for i, node in enumerate(nodes):
        if 2 * i + 1 < n:
            node.left = nodes[2 * i + 1]
        if 2 * i + 2 < n:
            node.right = nodes[2 * i + 2]
    return nodes[0] if nodes else None


def _spines(depth):
    root = TreeNode(0)
    left = right = root
    for _ in range(depth - 1):
        left.left = TreeNode(1)
        right.right = TreeNode(2)
        left, right = left.left, right.right
    return root


def test_max_width_worked_example():
    assert max_width(deserialize("1,3,2,5,3,#,9,#,#,#,#,#,#,")) == 4


def test_max_width_empty_tree():
    assert max_width(None) == 0


def test_max_width_of_complete_tree_is_widest_level():
    for n in range(1, 20):
        root = _complete(n)
        assert max_width(root) == max(len(level) for level in level_order(root))


def test_max_width_of_chain_equals_single_node():
    chain = deserialize("1,#,2,3,#,#,#,")
    assert max_width(chain) == max_width(TreeNode(5))


def test_max_width_deep_spines_do_not_overflow():
    assert max_width(_spines(100)) == 2**99


def test_children_sum_property_holds():
    root = deserialize("10,8,2,3,5,#,#,#,#,#,#,")
    assert has_children_sum_property(root)


def test_children_sum_property_broken_at_leaf_parent():
    root = deserialize("10,8,2,3,5,#,#,#,#,#,#,")
    root.left.right.val += 1
    assert not has_children_sum_property(root)


def test_children_sum_property_trivial_trees():
    assert has_children_sum_property(None)
    assert has_children_sum_property(TreeNode(42))


@pytest.mark.parametrize(
    "encoding",
    ["1,#,#,", "3,9,20,#,#,15,7,#,#,#,#,", "1,#,2,#,3,#,#,", "5,4,#,3,#,#,#,"],
)
def test_count_nodes_matches_traversal_length(encoding):
    root = deserialize(encoding)
    assert count_nodes(root) == len(preorder(root))


def test_count_nodes_empty():
    assert count_nodes(None) == 0


@pytest.mark.parametrize("n", range(0, 33))
def test_count_complete_nodes_matches_plain_count(n):
    root = _complete(n)
    assert count_complete_nodes(root) == count_nodes(root)
    assert count_complete_nodes(root) == n