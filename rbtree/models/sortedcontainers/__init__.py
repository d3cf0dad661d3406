"""
Sorted container implementations.
"""

from rbtree.models.sortedcontainers.red_black_tree import RedBlackTree, natural_order

__all__ = ["RedBlackTree", "natural_order"]
