"""Binary search tree operations: lookup, bounds, editing, ordered iteration and repair."""

from __future__ import annotations

import math
from typing import Iterator, Optional, Sequence

from algobook.tree import TreeNode


class BSTIterator:
    """Iterates over a search tree's values in sorted order, or in reverse order.

    Only the nodes along one root-to-leaf path are held on the stack at any time.
    """

    def __init__(self, root: Optional[TreeNode], reverse: bool = False) -> None:
        self._reverse = reverse
        self._stack: list[TreeNode] = []
        self._push_edge(root)

    def _push_edge(self, node: Optional[TreeNode]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.right if self._reverse else node.left

    def __iter__(self) -> BSTIterator:
        return self

    def __next__(self) -> int:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_edge(node.left if self._reverse else node.right)
        return node.val

    def has_next(self) -> bool:
        """True while values remain."""
        return bool(self._stack)


def search(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """The node holding val, or None when the tree has none."""
    node = root
    while node is not None and node.val != val:
        node = node.left if node.val > val else node.right
    return node


def min_value(root: Optional[TreeNode]) -> int:
    """Smallest value in a non-empty search tree."""
    if root is None:
        raise ValueError("an empty tree has no minimum")
    node = root
    while node.left is not None:
        node = node.left
    return node.val


def max_value(root: Optional[TreeNode]) -> int:
    """Largest value in a non-empty search tree."""
    if root is None:
        raise ValueError("an empty tree has no maximum")
    node = root
    while node.right is not None:
        node = node.right
    return node.val


def ceil(root: Optional[TreeNode], x: int) -> Optional[int]:
    """Smallest value not below x, or None when every value is below x."""
    best: Optional[int] = None
    node = root
    while node is not None:
        if node.val == x:
            return x
        if node.val < x:
            node = node.right
        else:
            best = node.val
            node = node.left
    return best


def floor(root: Optional[TreeNode], x: int) -> Optional[int]:
    """Largest value not above x, or None when every value is above x."""
    best: Optional[int] = None
    node = root
    while node is not None:
        if node.val == x:
            return x
        if node.val > x:
            node = node.left
        else:
            best = node.val
            node = node.right
    return best


def insert(root: Optional[TreeNode], val: int) -> TreeNode:
    """Add val as a new leaf and return the root; equal values go to the left."""
    new_node = TreeNode(val)
    if root is None:
        return new_node
    node = root
    while True:
        if node.val < val:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right
        else:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left


def _splice(node: TreeNode) -> Optional[TreeNode]:
    """Subtree that replaces node once node is removed."""
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    rightmost = node.left
    while rightmost.right is not None:
        rightmost = rightmost.right
    rightmost.right = node.right
    return node.left


def delete(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove the first node holding key met on the search path and return the root."""
    if root is None:
        return None
    if root.val == key:
        return _splice(root)
    node: Optional[TreeNode] = root
    while node is not None:
        if node.val > key:
            if node.left is not None and node.left.val == key:
                node.left = _splice(node.left)
                break
            node = node.left
        else:
            if node.right is not None and node.right.val == key:
                node.right = _splice(node.right)
                break
            node = node.right
    return root


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """The k-th smallest value, counting from 1.

    Raises ValueError when the tree has fewer than k values or k is below 1.
    """
    if k >= 1:
        for position, value in enumerate(BSTIterator(root), start=1):
            if position == k:
                return value
    raise ValueError(f"no {k}-th smallest value")


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """True when every node lies within the bounds set by its ancestors (ties allowed)."""

    def within(node: Optional[TreeNode], low: float, high: float) -> bool:
        if node is None:
            return True
        if node.val < low or node.val > high:
            return False
        return within(node.left, low, node.val) and within(node.right, node.val, high)

    return within(root, -math.inf, math.inf)


def lca_bst(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Lowest common ancestor of p and q in a search tree, found by their values."""
    node = root
    while node is not None:
        if node.val > p.val and node.val > q.val:
            node = node.left
        elif node.val < p.val and node.val < q.val:
            node = node.right
        else:
            return node
    return None


def bst_from_preorder(preorder: Sequence[int]) -> Optional[TreeNode]:
    """Build the search tree whose preorder traversal is the given sequence."""
    position = 0

    def build(bound: float) -> Optional[TreeNode]:
        nonlocal position
        if position == len(preorder) or preorder[position] > bound:
            return None
        node = TreeNode(preorder[position])
        position += 1
        node.left = build(node.val)
        node.right = build(bound)
        return node

    return build(math.inf)


def find_target(root: Optional[TreeNode], k: int) -> bool:
    """True when two distinct nodes of the search tree hold values summing to k."""
    if root is None:
        return False
    ascending = BSTIterator(root)
    descending = BSTIterator(root, reverse=True)
    low = next(ascending)
    high = next(descending)
    while low < high:
        total = low + high
        if total == k:
            return True
        if total > k:
            high = next(descending)
        else:
            low = next(ascending)
    return False


def _inorder_nodes(node: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            current = stack.pop()
            yield current
            node = current.right


def recover(root: Optional[TreeNode]) -> None:
    """Repair, in place, a search tree in which the values of two nodes were swapped."""
    previous: Optional[TreeNode] = None
    first: Optional[TreeNode] = None
    last: Optional[TreeNode] = None
    for node in _inorder_nodes(root):
        if previous is not None and node.val < previous.val:
            if first is None:
                first = previous
            last = node
        previous = node
    if first is not None and last is not None:
        first.val, last.val = last.val, first.val


def largest_bst_size(root: Optional[TreeNode]) -> int:
    """Number of nodes in the largest subtree that is a search tree with distinct values."""

    def measure(node: Optional[TreeNode]) -> tuple[float, float, int]:
        if node is None:
            return math.inf, -math.inf, 0
        left_min, left_max, left_size = measure(node.left)
        right_min, right_max, right_size = measure(node.right)
        if left_max < node.val < right_min:
            return (
                min(left_min, node.val),
                max(node.val, right_max),
                1 + left_size + right_size,
            )
        return -math.inf, math.inf, max(left_size, right_size)

    return measure(root)[2]