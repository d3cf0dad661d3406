"""
TreeObserver protocol for receiving balancing checkpoints.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rbtree.models.node import Node
    from rbtree.models.sortedcontainers.red_black_tree import RedBlackTree


class Checkpoint(Enum):
    """Points in the algorithm where observers are notified."""

    AFTER_BST_INSERT = "after-bst-insert"
    AFTER_INSERT = "after-insert-complete"
    AFTER_RECOLOR_CASE1 = "after-recolor-case1"
    AFTER_RECOLOR_CASE3_PRE = "after-recolor-case3-pre"
    AFTER_RECOLOR_CASE3_POST = "after-recolor-case3-post"
    AFTER_ROTATE_LEFT = "after-rotate-left"
    AFTER_ROTATE_RIGHT = "after-rotate-right"


class TreeObserver(ABC):
    """
    Read-only audit hook attached to a RedBlackTree.

    Implementations must not mutate the tree or the node they receive.
    """

    @abstractmethod
    def on_event(
        self, checkpoint: Checkpoint, tree: "RedBlackTree", node: "Node | None"
    ) -> None:
        """
        Handle a checkpoint notification.

        Args:
            checkpoint: Which step of the algorithm just happened.
            tree: The tree being modified.
            node: The node most relevant to that step.
        """
        pass
