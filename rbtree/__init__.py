"""
Red-black tree based ordered key storage.

This package provides a self-balancing binary search tree with:
- insert(key) - O(log N), rebalances by recoloring and rotation
- find(key) - O(log N), returns None when absent
- remove(key) - O(log N), raises KeyNotFoundError when absent
- delete(key) - O(log N), returns False when absent
- Optional observers notified at balancing checkpoints
"""

from rbtree.interfaces import Checkpoint, TreeObserver
from rbtree.models import (
    Color,
    InvariantViolationError,
    KeyNotFoundError,
    Node,
    RBTreeError,
    StructuralViolationError,
)
from rbtree.models.sortedcontainers import RedBlackTree
from rbtree.observers import CompositeObserver, LoggingObserver, RecordingObserver

__all__ = [
    "RedBlackTree",
    "Node",
    "Color",
    "Checkpoint",
    "TreeObserver",
    "RecordingObserver",
    "LoggingObserver",
    "CompositeObserver",
    "RBTreeError",
    "KeyNotFoundError",
    "StructuralViolationError",
    "InvariantViolationError",
]
