import pytest

from algobook.bst import (
    BSTIterator,
    bst_from_preorder,
    ceil,
    delete,
    find_target,
    floor,
    insert,
    is_valid_bst,
    kth_smallest,
    largest_bst_size,
    lca_bst,
    max_value,
    min_value,
    recover,
    search,
)
from algobook.traversal import inorder, preorder
from algobook.tree import TreeNode

VALUES = [8, 4, 12, 2, 6, 10, 14, 1, 3]


def build(values):
    root = None
    for value in values:
        root = insert(root, value)
    return root


def test_insert_keeps_values_sorted():
    root = build(VALUES)
    assert inorder(root) == sorted(VALUES)
    assert is_valid_bst(root)


def test_insert_into_empty_tree():
    root = insert(None, 7)
    assert root.val == 7
    assert root.left is None and root.right is None


def test_insert_equal_value_goes_left():
    root = insert(TreeNode(5), 5)
    assert root.left.val == 5
    assert root.right is None


def test_search_finds_and_misses():
    root = build(VALUES)
    for value in VALUES:
        assert search(root, value).val == value
    assert search(root, 5) is None
    assert search(None, 5) is None


def test_min_and_max():
    root = build(VALUES)
    assert min_value(root) == min(VALUES)
    assert max_value(root) == max(VALUES)


def test_min_max_of_empty_tree_raise():
    with pytest.raises(ValueError):
        min_value(None)
    with pytest.raises(ValueError):
        max_value(None)


def test_ceil_and_floor():
    root = build(VALUES)
    assert ceil(root, 6) == 6
    assert floor(root, 6) == 6
    assert ceil(root, 5) == 6
    assert floor(root, 5) == 4
    assert ceil(root, 15) is None
    assert floor(root, 0) is None
    assert ceil(None, 3) is None


@pytest.mark.parametrize("key", VALUES)
def test_delete_each_value(key):
    root = delete(build(VALUES), key)
    expected = sorted(VALUES)
    expected.remove(key)
    assert inorder(root) == expected
    assert is_valid_bst(root)


def test_delete_missing_key_and_empty_tree():
    root = delete(build(VALUES), 5)
    assert inorder(root) == sorted(VALUES)
    assert delete(None, 5) is None


def test_kth_smallest():
    root = build(VALUES)
    for k, value in enumerate(sorted(VALUES), start=1):
        assert kth_smallest(root, k) == value


@pytest.mark.parametrize("k", [0, len(VALUES) + 1])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(ValueError):
        kth_smallest(build(VALUES), k)


def test_is_valid_bst():
    assert is_valid_bst(None)
    assert is_valid_bst(TreeNode(2, TreeNode(2)))
    assert not is_valid_bst(TreeNode(5, TreeNode(6)))
    bad = TreeNode(5, TreeNode(1), TreeNode(4, TreeNode(3), TreeNode(6)))
    assert not is_valid_bst(bad)


def test_lca_bst():
    root = build([6, 2, 8, 0, 4, 7, 9, 3, 5])
    two, four, eight = search(root, 2), search(root, 4), search(root, 8)
    assert lca_bst(root, two, eight) is root
    assert lca_bst(root, two, four) is two
    assert lca_bst(root, search(root, 3), search(root, 5)) is four


def test_bst_from_preorder_round_trip():
    order = [8, 5, 1, 7, 10, 12]
    root = bst_from_preorder(order)
    assert preorder(root) == order
    assert inorder(root) == sorted(order)
    assert bst_from_preorder([]) is None


def test_iterator_ascending_and_descending():
    root = build(VALUES)
    assert list(BSTIterator(root)) == sorted(VALUES)
    assert list(BSTIterator(root, reverse=True)) == sorted(VALUES, reverse=True)


def test_iterator_exhaustion():
    it = BSTIterator(TreeNode(3))
    assert it.has_next()
    assert next(it) == 3
    assert not it.has_next()
    with pytest.raises(StopIteration):
        next(it)


def test_find_target():
    root = build([5, 3, 6, 2, 4, 7])
    assert find_target(root, 9)
    assert not find_target(root, 28)
    assert not find_target(None, 0)
    assert not find_target(TreeNode(4), 8)


@pytest.mark.parametrize("a, b", [(1, 2), (2, 12), (3, 14), (6, 8)])
def test_recover_swapped_values(a, b):
    root = build(VALUES)
    first, second = search(root, a), search(root, b)
    first.val, second.val = second.val, first.val
    assert not is_valid_bst(root)
    recover(root)
    assert inorder(root) == sorted(VALUES)
    assert is_valid_bst(root)


def test_largest_bst_size():
    assert largest_bst_size(build(VALUES)) == len(VALUES)
    assert largest_bst_size(None) == 0
    root = TreeNode(10, build([5, 1, 8]), TreeNode(3))
    assert largest_bst_size(root) == 3