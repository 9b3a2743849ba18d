"""Structural properties of binary trees: depth, balance, diameter, paths, shape."""

from __future__ import annotations

from typing import Optional

from algobook.tree import TreeNode


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def is_balanced_naive(root: Optional[TreeNode]) -> bool:
    """Height-balance check that recomputes subtree depths at every node."""
    if root is None:
        return True
    if abs(max_depth(root.left) - max_depth(root.right)) > 1:
        return False
    return is_balanced_naive(root.left) and is_balanced_naive(root.right)


def _balanced_height(node: Optional[TreeNode]) -> Optional[int]:
    """Height of a balanced subtree, or None as soon as any part is unbalanced."""
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None:
        return None
    if abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def is_balanced(root: Optional[TreeNode]) -> bool:
    """True when no node's subtrees differ in depth by more than one."""
    return _balanced_height(root) is not None


def diameter(root: Optional[TreeNode]) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Largest sum of values along any non-empty path in the tree.

    Raises ValueError for an empty tree, which has no path.
    """
    if root is None:
        raise ValueError("an empty tree has no path")
    best: Optional[int] = None

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        through = left + right + node.val
        if best is None or through > best:
            best = through
        return node.val + max(left, right)

    gain(root)
    assert best is not None
    return best


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """True when both trees have the same shape and the same values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _mirrors(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    if p is None or q is None:
        return p is q
    return p.val == q.val and _mirrors(p.left, q.right) and _mirrors(p.right, q.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """True when the tree is a mirror image of itself around its root."""
    if root is None:
        return True
    return _mirrors(root.left, root.right)