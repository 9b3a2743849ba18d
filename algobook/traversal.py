"""Depth-first and breadth-first traversals of binary trees."""

from __future__ import annotations

from collections import deque
from enum import IntEnum
from typing import Optional

from algobook.tree import TreeNode


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Values in root, left, right order (recursive)."""
    result: list[int] = []

    def visit(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        result.append(node.val)
        visit(node.left)
        visit(node.right)

    visit(root)
    return result


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, root, right order (recursive)."""
    result: list[int] = []

    def visit(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        visit(node.left)
        result.append(node.val)
        visit(node.right)

    visit(root)
    return result


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, root order (recursive)."""
    result: list[int] = []

    def visit(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        visit(node.left)
        visit(node.right)
        result.append(node.val)

    visit(root)
    return result


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by depth, each level read left to right."""
    levels: list[list[int]] = []
    if root is None:
        return levels
    queue: deque[TreeNode] = deque([root])
    while queue:
        level: list[int] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(level)
    return levels


def preorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Preorder traversal using an explicit stack."""
    result: list[int] = []
    if root is None:
        return result
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Inorder traversal using an explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while True:
        if node is not None:
            stack.append(node)
            node = node.left
        elif stack:
            node = stack.pop()
            result.append(node.val)
            node = node.right
        else:
            break
    return result


def postorder_two_stacks(root: Optional[TreeNode]) -> list[int]:
    """Postorder traversal using two stacks."""
    if root is None:
        return []
    pending = [root]
    collected: list[TreeNode] = []
    while pending:
        node = pending.pop()
        collected.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.val for node in reversed(collected)]


def postorder_one_stack(root: Optional[TreeNode]) -> list[int]:
    """Postorder traversal using a single stack."""
    result: list[int] = []
    if root is None:
        return result
    stack: list[TreeNode] = []
    current: Optional[TreeNode] = root
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            current = current.left
            continue
        right = stack[-1].right
        if right is not None:
            current = right
            continue
        done = stack.pop()
        result.append(done.val)
        while stack and done is stack[-1].right:
            done = stack.pop()
            result.append(done.val)
    return result


class _Stage(IntEnum):
    PRE = 1
    IN = 2
    POST = 3


def pre_in_post(
    root: Optional[TreeNode],
) -> tuple[list[int], list[int], list[int]]:
    """Preorder, inorder and postorder values gathered in one stack walk."""
    pre: list[int] = []
    ino: list[int] = []
    post: list[int] = []
    if root is None:
        return pre, ino, post
    stack: list[tuple[TreeNode, _Stage]] = [(root, _Stage.PRE)]
    while stack:
        node, stage = stack.pop()
        if stage is _Stage.PRE:
            pre.append(node.val)
            stack.append((node, _Stage.IN))
            if node.left is not None:
                stack.append((node.left, _Stage.PRE))
        elif stage is _Stage.IN:
            ino.append(node.val)
            stack.append((node, _Stage.POST))
            if node.right is not None:
                stack.append((node.right, _Stage.PRE))
        else:
            post.append(node.val)
    return pre, ino, post