"""Generic, optionally thread-safe sets, heaps, caches, graphs and search trees."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "benchmarks",
    "bst",
    "caches",
    "graph",
    "heaps",
    "rbtree",
    "sets",
]