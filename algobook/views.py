"""Ordered views of binary trees: zigzag, boundary, vertical, top, bottom, sides."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Optional

from algobook.tree import TreeNode


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Levels read alternately left to right and right to left, starting left to right."""
    levels: list[list[int]] = []
    if root is None:
        return levels
    queue: deque[TreeNode] = deque([root])
    left_to_right = True
    while queue:
        level: list[int] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(level if left_to_right else level[::-1])
        left_to_right = not left_to_right
    return levels


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def _left_edge(node: Optional[TreeNode]) -> list[int]:
    edge: list[int] = []
    while node is not None:
        if not _is_leaf(node):
            edge.append(node.val)
        node = node.left if node.left is not None else node.right
    return edge


def _right_edge(node: Optional[TreeNode]) -> list[int]:
    edge: list[int] = []
    while node is not None:
        if not _is_leaf(node):
            edge.append(node.val)
        node = node.right if node.right is not None else node.left
    return edge[::-1]


def _leaves(node: TreeNode) -> list[int]:
    if _is_leaf(node):
        return [node.val]
    found: list[int] = []
    if node.left is not None:
        found.extend(_leaves(node.left))
    if node.right is not None:
        found.extend(_leaves(node.right))
    return found


def boundary(root: Optional[TreeNode]) -> list[int]:
    """Anticlockwise boundary: root, left edge, leaves, then right edge bottom-up."""
    if root is None:
        return []
    result: list[int] = [] if _is_leaf(root) else [root.val]
    result.extend(_left_edge(root.left))
    result.extend(_leaves(root))
    result.extend(_right_edge(root.right))
    return result


def vertical_traversal(root: Optional[TreeNode]) -> list[list[int]]:
    """Columns from left to right, each ordered by row and then by value."""
    if root is None:
        return []
    columns: defaultdict[int, defaultdict[int, list[int]]] = defaultdict(
        lambda: defaultdict(list)
    )
    queue: deque[tuple[TreeNode, int, int]] = deque([(root, 0, 0)])
    while queue:
        node, col, row = queue.popleft()
        columns[col][row].append(node.val)
        if node.left is not None:
            queue.append((node.left, col - 1, row + 1))
        if node.right is not None:
            queue.append((node.right, col + 1, row + 1))
    return [
        [val for row in sorted(rows) for val in sorted(rows[row])]
        for _, rows in sorted(columns.items())
    ]


def _column_view(root: Optional[TreeNode], keep_first: bool) -> list[int]:
    if root is None:
        return []
    seen: dict[int, int] = {}
    queue: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    while queue:
        node, col = queue.popleft()
        if not keep_first or col not in seen:
            seen[col] = node.val
        if node.left is not None:
            queue.append((node.left, col - 1))
        if node.right is not None:
            queue.append((node.right, col + 1))
    return [seen[col] for col in sorted(seen)]


def top_view(root: Optional[TreeNode]) -> list[int]:
    """First node met in breadth-first order in each column, left to right."""
    return _column_view(root, keep_first=True)


def bottom_view(root: Optional[TreeNode]) -> list[int]:
    """Last node met in breadth-first order in each column, left to right."""
    return _column_view(root, keep_first=False)


def _side_view(root: Optional[TreeNode], right_first: bool) -> list[int]:
    view: list[int] = []

    def visit(node: Optional[TreeNode], level: int) -> None:
        if node is None:
            return
        if level == len(view):
            view.append(node.val)
        first, second = (node.right, node.left) if right_first else (node.left, node.right)
        visit(first, level + 1)
        visit(second, level + 1)

    visit(root, 0)
    return view


def right_view(root: Optional[TreeNode]) -> list[int]:
    """The rightmost node of every level, from the top down."""
    return _side_view(root, right_first=True)


def left_view(root: Optional[TreeNode]) -> list[int]:
    """The leftmost node of every level, from the top down."""
    return _side_view(root, right_first=False)