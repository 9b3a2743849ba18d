"""Binary tree, binary search tree, graph and recursion algorithms."""

__version__ = "0.1.0"

__all__ = [
    "bst",
    "construct",
    "graph",
    "metrics",
    "paths",
    "properties",
    "recursion",
    "traversal",
    "tree",
    "views",
]