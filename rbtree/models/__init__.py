"""
Data models for the tree.
"""

from rbtree.models.exceptions import (
    InvariantViolationError,
    KeyNotFoundError,
    RBTreeError,
    StructuralViolationError,
)
from rbtree.models.node import Color, Node

__all__ = [
    "Color",
    "Node",
    "RBTreeError",
    "KeyNotFoundError",
    "StructuralViolationError",
    "InvariantViolationError",
]
