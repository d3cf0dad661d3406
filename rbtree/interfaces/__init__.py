"""
Abstract base classes and protocols for the tree.
"""

from rbtree.interfaces.sorted_container import SortedContainer
from rbtree.interfaces.tree_observer import Checkpoint, TreeObserver

__all__ = ["Checkpoint", "SortedContainer", "TreeObserver"]
