"""
Red-Black Tree implementation for ordered key storage.

Guarantees O(log N) insert, remove and find.
"""

import logging
from collections.abc import Callable
from typing import Any

from rbtree.interfaces.sorted_container import SortedContainer
from rbtree.interfaces.tree_observer import Checkpoint, TreeObserver
from rbtree.models.exceptions import KeyNotFoundError, StructuralViolationError
from rbtree.models.node import Node, is_black, is_red
from rbtree.models.sortedcontainers.invariants import check_invariants

logger = logging.getLogger(__name__)

Comparator = Callable[[Any, Any], int]


def natural_order(a: Any, b: Any) -> int:
    """Three-way comparison using the keys' own ``<`` operator."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


class RedBlackTree(SortedContainer):
    """
    Red-Black Tree implementation of SortedContainer.

    Properties maintained:
    1. Every node is either red or black
    2. Root is always black
    3. Red nodes cannot have red children
    4. Every path from a node to a nil leaf has the same number of black nodes
    5. Keys are in strict binary-search-tree order under the comparator

    Not thread-safe: callers sharing a tree must serialize access.
    """

    def __init__(
        self,
        compare: Comparator | None = None,
        observer: TreeObserver | None = None,
    ) -> None:
        """
        Initialize an empty tree.

        Args:
            compare: Three-way comparator returning negative, zero or positive.
                     Defaults to the keys' natural ordering.
            observer: Optional read-only hook notified at balancing checkpoints.
        """
        if compare is not None and not callable(compare):
            raise TypeError(f"compare must be callable, got {type(compare).__name__}")

        self._compare: Comparator = compare if compare is not None else natural_order
        self._root: Node | None = None
        self._size: int = 0
        self._observer: TreeObserver | None = None
        self.observer = observer

    @property
    def root(self) -> Node | None:
        return self._root

    @property
    def observer(self) -> TreeObserver | None:
        return self._observer

    @observer.setter
    def observer(self, observer: TreeObserver | None) -> None:
        if observer is not None and not isinstance(observer, TreeObserver):
            raise TypeError(
                f"observer must implement TreeObserver, got {type(observer).__name__}"
            )
        self._observer = observer

    @property
    def compare(self) -> Comparator:
        return self._compare

    def size(self) -> int:
        return self._size

    def has(self, key: Any) -> bool:
        return self.find(key) is not None

    def find(self, key: Any) -> Node | None:
        """Find node by key. O(log N)"""
        current = self._root
        while current is not None:
            order = self._compare(key, current.key)
            if order < 0:
                current = current.left
            elif order > 0:
                current = current.right
            else:
                return current
        return None

    def insert(self, key: Any) -> Node:
        """
        Insert a key and rebalance. O(log N)

        Args:
            key: The key to insert.

        Returns:
            The node holding the key. If an equal key is already stored the
            tree is not modified and that node is returned.
        """
        parent = None
        order = 0
        current = self._root

        while current is not None:
            parent = current
            order = self._compare(key, current.key)
            if order < 0:
                current = current.left
            elif order > 0:
                current = current.right
            else:
                return current

        new_node = Node(key)
        if parent is None:
            self._root = new_node
        elif order < 0:
            parent.set_left(new_node)
        else:
            parent.set_right(new_node)

        self._size += 1
        logger.debug("Inserted key %r (size=%d)", key, self._size)
        self._notify(Checkpoint.AFTER_BST_INSERT, new_node)

        self._fix_insert(new_node)
        self._notify(Checkpoint.AFTER_INSERT, new_node)
        return new_node

    def remove(self, key: Any) -> None:
        """
        Remove a key and rebalance. O(log N)

        Raises:
            KeyNotFoundError: If the key is not stored. The tree is unchanged.
        """
        node = self.find(key)
        if node is None:
            raise KeyNotFoundError(key)
        self._delete_node(node)
        logger.debug("Removed key %r (size=%d)", key, self._size)

    def delete(self, key: Any) -> bool:
        """Remove a key if present. O(log N)"""
        node = self.find(key)
        if node is None:
            return False
        self._delete_node(node)
        logger.debug("Deleted key %r (size=%d)", key, self._size)
        return True

    def clear(self) -> None:
        """
        Drop every node.

        Walks the tree in post-order with an explicit stack and unlinks each
        node once its children have been handled, so depth is never limited
        by the interpreter's recursion limit.
        """
        if self._root is None:
            return

        stack: list[tuple[Node, bool]] = [(self._root, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                node.left = None
                node.right = None
                node.parent = None
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

        logger.debug("Cleared tree of %d nodes", self._size)
        self._root = None
        self._size = 0

    def rotate_left(self, node: Node | None) -> None:
        """
        Left rotation around ``node`` and its right child.

        Raises:
            StructuralViolationError: If ``node`` is missing or has no right
                child. No link is modified in that case.
        """
        if node is None:
            raise StructuralViolationError(None, "left", "Can't rotate a nil node")
        pivot = node.right
        if pivot is None:
            raise StructuralViolationError(
                node, "left", f"Can't rotate left at {node.key!r}: right child is nil"
            )

        parent = node.parent
        was_left = node.is_left_child

        node.set_right(pivot.left)
        if parent is None:
            self._root = pivot
        elif was_left:
            parent.set_left(pivot)
        else:
            parent.set_right(pivot)
        pivot.set_left(node)

        self._notify(Checkpoint.AFTER_ROTATE_LEFT, node)

    def rotate_right(self, node: Node | None) -> None:
        """
        Right rotation around ``node`` and its left child.

        Raises:
            StructuralViolationError: If ``node`` is missing or has no left
                child. No link is modified in that case.
        """
        if node is None:
            raise StructuralViolationError(None, "right", "Can't rotate a nil node")
        pivot = node.left
        if pivot is None:
            raise StructuralViolationError(
                node, "right", f"Can't rotate right at {node.key!r}: left child is nil"
            )

        parent = node.parent
        was_left = node.is_left_child

        node.set_left(pivot.right)
        if parent is None:
            self._root = pivot
        elif was_left:
            parent.set_left(pivot)
        else:
            parent.set_right(pivot)
        pivot.set_right(node)

        self._notify(Checkpoint.AFTER_ROTATE_RIGHT, node)

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        if self._root is None:
            return 0

        deepest = 0
        stack: list[tuple[Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return deepest

    def black_height(self) -> int:
        """
        Black nodes on any path from the root to a nil leaf, root excluded.

        Raises:
            InvariantViolationError: If the tree is not a valid red-black tree.
        """
        return check_invariants(self)

    def validate(self) -> None:
        """
        Verify every red-black invariant.

        Raises:
            InvariantViolationError: On the first violation found.
        """
        check_invariants(self)

    def render(self) -> str:
        """Return a one-node-per-line picture of the tree, indented by depth."""
        if self._root is None:
            return "<empty>"

        lines = []
        stack: list[tuple[Node, int, str]] = [(self._root, 0, "")]
        while stack:
            node, depth, side = stack.pop()
            color = "R" if node.is_red else "B"
            lines.append(f"{'    ' * depth}{side}{node.key!r}({color})")
            if node.right is not None:
                stack.append((node.right, depth + 1, "R: "))
            if node.left is not None:
                stack.append((node.left, depth + 1, "L: "))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"RedBlackTree(size={self._size})"

    def _notify(self, checkpoint: Checkpoint, node: Node | None) -> None:
        if self._observer is not None:
            self._observer.on_event(checkpoint, self, node)

    def _rotate_toward(self, node: Node, left: bool) -> None:
        if left:
            self.rotate_left(node)
        else:
            self.rotate_right(node)

    def _fix_insert(self, node: Node) -> None:
        """Fix Red-Black Tree properties after insert."""
        while node.parent is not None and node.parent.is_red:
            node = self._fix_insert_step(node)

        self._root.set_black()

    def _fix_insert_step(self, node: Node) -> Node:
        """
        Apply one insert fixup case to a red node with a red parent.

        A red parent is never the root, so the grandparent exists.

        Returns:
            The node the loop should continue from.
        """
        parent = node.parent
        grandparent = parent.parent
        parent_is_left = parent is grandparent.left
        uncle = grandparent.right if parent_is_left else grandparent.left

        # Case 1: uncle is red
        if is_red(uncle):
            uncle.set_black()
            parent.set_black()
            grandparent.set_red()
            self._notify(Checkpoint.AFTER_RECOLOR_CASE1, grandparent)
            return grandparent

        # Case 2: node is the inner grandchild, straighten the line
        inner = parent.right if parent_is_left else parent.left
        if node is inner:
            node = parent
            self._rotate_toward(node, parent_is_left)

        # Case 3: node is the outer grandchild
        parent = node.parent
        grandparent = parent.parent
        parent.set_black()
        grandparent.set_red()
        self._notify(Checkpoint.AFTER_RECOLOR_CASE3_PRE, node)
        self._rotate_toward(grandparent, not parent_is_left)
        self._notify(Checkpoint.AFTER_RECOLOR_CASE3_POST, node)
        return node

    def _delete_node(self, node: Node) -> None:
        """Splice a node out of the tree, rebalancing if it was black."""
        if node.left is not None and node.right is not None:
            # Two children: take the predecessor's key and remove that node
            predecessor = node.predecessor()
            node.key = predecessor.key
            node = predecessor

        # Node has at most one child
        child = node.left if node.left is not None else node.right
        parent = node.parent

        if child is not None:
            was_left = node.is_left_child
            if node.left is child:
                node.set_left(None)
            else:
                node.set_right(None)

            if parent is None:
                self._root = child
            elif was_left:
                parent.set_left(child)
            else:
                parent.set_right(child)

            if node.is_black:
                self._fix_delete(child)
        elif parent is None:
            self._root = None
        else:
            # Leaf: the node itself stands in for the empty slot during fixup
            if node.is_black:
                self._fix_delete(node)
            if node.is_left_child:
                node.parent.set_left(None)
            else:
                node.parent.set_right(None)

        node.left = None
        node.right = None
        node.parent = None
        self._size -= 1

    def _fix_delete(self, node: Node) -> None:
        """Fix Red-Black Tree properties after removing a black node."""
        while node is not self._root and node.is_black:
            node = self._fix_delete_step(node)

        node.set_black()

    def _fix_delete_step(self, node: Node) -> Node:
        """
        Apply one double-black case at ``node``.

        Returns:
            The node carrying the deficiency next, or the root once resolved.
        """
        parent = node.parent
        is_left = node is parent.left
        sibling = self._sibling_of(node, parent, is_left)

        # Case 1: sibling is red
        if sibling.is_red:
            sibling.set_black()
            parent.set_red()
            self._rotate_toward(parent, is_left)
            sibling = self._sibling_of(node, parent, is_left)

        # Case 2: both of sibling's children are black
        if is_black(sibling.left) and is_black(sibling.right):
            sibling.set_red()
            return parent

        near = sibling.left if is_left else sibling.right
        far = sibling.right if is_left else sibling.left

        # Case 3: near child red, far child black
        if is_black(far):
            near.set_black()
            sibling.set_red()
            self._rotate_toward(sibling, not is_left)
            sibling = self._sibling_of(node, parent, is_left)
            far = sibling.right if is_left else sibling.left

        # Case 4: far child red
        sibling.color = parent.color
        parent.set_black()
        far.set_black()
        self._rotate_toward(parent, is_left)
        return self._root

    @staticmethod
    def _sibling_of(node: Node, parent: Node, is_left: bool) -> Node:
        sibling = parent.right if is_left else parent.left
        if sibling is None:
            raise StructuralViolationError(
                node,
                "right" if is_left else "left",
                f"Double-black node {node.key!r} has no sibling",
            )
        return sibling
