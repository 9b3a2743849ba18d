"""Rebuilding binary trees from pairs of traversals."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from algobook.tree import TreeNode


def _positions(inorder: Sequence[int]) -> dict[int, int]:
    # With repeated values the last position wins.
    return {value: position for position, value in enumerate(inorder)}


def _split_point(positions: dict[int, int], value: int, lo: int, hi: int) -> int:
    position = positions.get(value)
    if position is None or not lo <= position <= hi:
        raise ValueError("traversals do not describe the same tree")
    return position


def _check_lengths(first: Sequence[int], second: Sequence[int]) -> None:
    if len(first) != len(second):
        raise ValueError("traversals must have the same length")


def build_from_preorder_inorder(
    preorder: Sequence[int], inorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its preorder and inorder values.

    Raises ValueError when the two sequences cannot come from one tree.
    """
    _check_lengths(preorder, inorder)
    positions = _positions(inorder)
    roots: Iterator[int] = iter(preorder)

    def build(lo: int, hi: int) -> Optional[TreeNode]:
        if lo > hi:
            return None
        value = next(roots)
        split = _split_point(positions, value, lo, hi)
        node = TreeNode(value)
        node.left = build(lo, split - 1)
        node.right = build(split + 1, hi)
        return node

    return build(0, len(inorder) - 1)


def build_from_inorder_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its inorder and postorder values.

    Raises ValueError when the two sequences cannot come from one tree.
    """
    _check_lengths(postorder, inorder)
    positions = _positions(inorder)
    roots: Iterator[int] = reversed(postorder)

    def build(lo: int, hi: int) -> Optional[TreeNode]:
        if lo > hi:
            return None
        value = next(roots)
        split = _split_point(positions, value, lo, hi)
        node = TreeNode(value)
        node.right = build(split + 1, hi)
        node.left = build(lo, split - 1)
        return node

    return build(0, len(inorder) - 1)