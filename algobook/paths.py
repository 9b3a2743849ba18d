"""Paths and distances between nodes of a binary tree."""

from __future__ import annotations

from collections import deque
from typing import Optional

from algobook.tree import TreeNode


def path_to(root: Optional[TreeNode], x: int) -> list[int]:
    """Values from the root down to the first node holding x in preorder.

    Returns an empty list when no node holds x.
    """
    path: list[int] = []

    def walk(node: Optional[TreeNode]) -> bool:
        if node is None:
            return False
        path.append(node.val)
        if node.val == x or walk(node.left) or walk(node.right):
            return True
        path.pop()
        return False

    walk(root)
    return path


def leaf_paths(root: Optional[TreeNode]) -> list[str]:
    """Every root-to-leaf path, left to right, written as 'a->b->c'."""
    paths: list[str] = []
    if root is None:
        return paths

    def walk(node: TreeNode, prefix: str) -> None:
        if node.left is None and node.right is None:
            paths.append(prefix)
            return
        for child in (node.left, node.right):
            if child is not None:
                walk(child, f"{prefix}->{child.val}")

    walk(root, str(root.val))
    return paths


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Deepest node that has both p and q (compared by identity) in its subtree."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def _parents(root: Optional[TreeNode]) -> dict[TreeNode, TreeNode]:
    parents: dict[TreeNode, TreeNode] = {}
    if root is None:
        return parents
    queue: deque[TreeNode] = deque([root])
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is not None:
                parents[child] = node
                queue.append(child)
    return parents


def _neighbours(node: TreeNode, parents: dict[TreeNode, TreeNode]) -> list[TreeNode]:
    found = [child for child in (node.left, node.right) if child is not None]
    parent = parents.get(node)
    if parent is not None:
        found.append(parent)
    return found


def distance_k(root: Optional[TreeNode], target: TreeNode, k: int) -> list[int]:
    """Values of all nodes exactly k edges away from target, in breadth-first order."""
    parents = _parents(root)
    visited = {target}
    frontier = [target]
    for _ in range(k):
        following: list[TreeNode] = []
        for node in frontier:
            for neighbour in _neighbours(node, parents):
                if neighbour not in visited:
                    visited.add(neighbour)
                    following.append(neighbour)
        frontier = following
    return [node.val for node in frontier]


def burn_time(root: Optional[TreeNode], start: int) -> int:
    """Minutes for a fire lit at the node holding start to reach the whole tree.

    Fire spreads one edge per minute. When several nodes hold start, the last
    one met in breadth-first order is used. Raises ValueError when none does.
    """
    parents = _parents(root)
    origin: Optional[TreeNode] = None
    if root is not None:
        queue: deque[TreeNode] = deque([root])
        while queue:
            node = queue.popleft()
            if node.val == start:
                origin = node
            queue.extend(c for c in (node.left, node.right) if c is not None)
    if origin is None:
        raise ValueError(f"no node holds {start}")
    minutes = 0
    burnt = {origin}
    frontier = [origin]
    while frontier:
        following: list[TreeNode] = []
        for node in frontier:
            for neighbour in _neighbours(node, parents):
                if neighbour not in burnt:
                    burnt.add(neighbour)
                    following.append(neighbour)
        if following:
            minutes += 1
        frontier = following
    return minutes