"""Counts and measurements over binary trees."""

from __future__ import annotations

from typing import Optional

from algobook.tree import TreeNode


def max_width(root: Optional[TreeNode]) -> int:
    """Widest level, counting the gaps between its end nodes as in a complete tree."""
    if root is None:
        return 0
    best = 0
    level: list[tuple[TreeNode, int]] = [(root, 0)]
    while level:
        offset = level[0][1]
        best = max(best, level[-1][1] - offset + 1)
        following: list[tuple[TreeNode, int]] = []
        for node, position in level:
            position -= offset
            if node.left is not None:
                following.append((node.left, 2 * position + 1))
            if node.right is not None:
                following.append((node.right, 2 * position + 2))
        level = following
    return best


def has_children_sum_property(root: Optional[TreeNode]) -> bool:
    """True when every inner node's value equals the sum of its children's values."""
    if root is None or (root.left is None and root.right is None):
        return True
    children = sum(c.val for c in (root.left, root.right) if c is not None)
    return (
        root.val == children
        and has_children_sum_property(root.left)
        and has_children_sum_property(root.right)
    )


def count_nodes(root: Optional[TreeNode]) -> int:
    """Number of nodes in any binary tree."""
    count = 0
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        count += 1
        stack.extend(c for c in (node.left, node.right) if c is not None)
    return count


def _edge_height(node: Optional[TreeNode], go_left: bool) -> int:
    height = 0
    while node is not None:
        height += 1
        node = node.left if go_left else node.right
    return height


def count_complete_nodes(root: Optional[TreeNode]) -> int:
    """Number of nodes in a complete binary tree, skipping perfect subtrees."""
    if root is None:
        return 0
    left = _edge_height(root, go_left=True)
    if left == _edge_height(root, go_left=False):
        return (1 << left) - 1
    return 1 + count_complete_nodes(root.left) + count_complete_nodes(root.right)