"""
Tree vertex and child-link management.
"""

from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


class Node:
    """
    Node in the Red-Black Tree.

    Children are owned by the node. ``parent`` is a back-reference kept in
    sync by ``set_left``/``set_right`` and the tree's rotation primitives.
    """

    __slots__ = ("key", "color", "left", "right", "parent")

    def __init__(self, key: Any, color: Color = Color.RED) -> None:
        self.key = key
        self.color = color
        self.left: "Node | None" = None
        self.right: "Node | None" = None
        self.parent: "Node | None" = None

    def __repr__(self) -> str:
        return f"Node({self.key!r}, {self.color.name})"

    @property
    def is_red(self) -> bool:
        return self.color == Color.RED

    @property
    def is_black(self) -> bool:
        return self.color == Color.BLACK

    def set_red(self) -> None:
        self.color = Color.RED

    def set_black(self) -> None:
        self.color = Color.BLACK

    @property
    def is_left_child(self) -> bool:
        """True iff this node sits in its parent's left slot."""
        return self.parent is not None and self.parent.left is self

    @property
    def is_right_child(self) -> bool:
        return self.parent is not None and self.parent.right is self

    def set_left(self, node: "Node | None") -> "Node | None":
        """
        Install ``node`` as the left child.

        Args:
            node: The new left child, or None to empty the slot.

        Returns:
            The previous left child, now detached (parent cleared), or None
            if there was none or ``node`` already occupied the slot.
        """
        if self.left is node:
            return None

        if node is not None:
            node._detach_from_parent()
            node.parent = self

        previous = self.left
        self.left = node
        if previous is not None:
            previous.parent = None
        return previous

    def set_right(self, node: "Node | None") -> "Node | None":
        """
        Install ``node`` as the right child.

        Mirror of ``set_left``.
        """
        if self.right is node:
            return None

        if node is not None:
            node._detach_from_parent()
            node.parent = self

        previous = self.right
        self.right = node
        if previous is not None:
            previous.parent = None
        return previous

    def predecessor(self) -> "Node | None":
        """Return the rightmost node of the left subtree."""
        current = self.left
        if current is None:
            return None
        while current.right is not None:
            current = current.right
        return current

    def sibling(self) -> "Node | None":
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def _detach_from_parent(self) -> None:
        """Empty whichever slot of the current parent holds this node."""
        parent = self.parent
        if parent is None:
            return
        if parent.left is self:
            parent.left = None
        elif parent.right is self:
            parent.right = None
        self.parent = None


def is_red(node: Node | None) -> bool:
    """Nil positions count as black."""
    return node is not None and node.color == Color.RED


def is_black(node: Node | None) -> bool:
    return node is None or node.color == Color.BLACK
