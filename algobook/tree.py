"""Binary tree node and its level-order string encoding."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional

NULL_MARK = "#"
SEPARATOR = ","


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare and hash by identity."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def serialize(root: Optional[TreeNode]) -> str:
    """Encode a tree level by level, each entry followed by a comma, '#' for a missing child."""
    if root is None:
        return ""
    parts: list[str] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            parts.append(NULL_MARK)
        else:
            parts.append(str(node.val))
            queue.append(node.left)
            queue.append(node.right)
    return "".join(part + SEPARATOR for part in parts)


def _node_from(tokens: Iterator[str]) -> Optional[TreeNode]:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("truncated tree encoding") from None
    if token == NULL_MARK:
        return None
    try:
        return TreeNode(int(token))
    except ValueError:
        raise ValueError(f"bad node value {token!r}") from None


def deserialize(data: str) -> Optional[TreeNode]:
    """Rebuild a tree from the output of :func:`serialize`.

    Raises ValueError when the encoding is truncated or holds a bad value.
    """
    if not data:
        return None
    tokens = iter(data.split(SEPARATOR))
    root = _node_from(tokens)
    if root is None:
        raise ValueError("tree encoding must start with a node value")
    queue: deque[TreeNode] = deque([root])
    while queue:
        node = queue.popleft()
        node.left = _node_from(tokens)
        if node.left is not None:
            queue.append(node.left)
        node.right = _node_from(tokens)
        if node.right is not None:
            queue.append(node.right)
    return root