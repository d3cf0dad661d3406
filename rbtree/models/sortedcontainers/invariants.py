"""
Red-black invariant checks used by RedBlackTree.validate().
"""

from typing import TYPE_CHECKING

from rbtree.models.exceptions import InvariantViolationError
from rbtree.models.node import Color, Node

if TYPE_CHECKING:
    from rbtree.models.sortedcontainers.red_black_tree import RedBlackTree


def check_invariants(tree: "RedBlackTree") -> int:
    """
    Walk the whole tree and verify every red-black invariant.

    Args:
        tree: The tree to check.

    Returns:
        The black height of the root (black nodes below it on any path to a
        nil leaf). 0 for an empty tree.

    Raises:
        InvariantViolationError: On the first violation found.
    """
    root = tree.root
    if root is None:
        if tree.size() != 0:
            raise InvariantViolationError(
                "size", f"empty tree reports size {tree.size()}"
            )
        return 0

    if root.parent is not None:
        raise InvariantViolationError("links", f"root {root.key!r} has a parent")
    if root.color != Color.BLACK:
        raise InvariantViolationError("root-black", f"root {root.key!r} is red")

    black_heights: dict[int, int] = {}
    count = 0
    previous: Node | None = None

    # Iterative in-order walk; each node is finished once both subtrees are.
    stack: list[tuple[Node, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if not expanded:
            _check_node(node)
            if node.right is not None:
                stack.append((node.right, False))
            stack.append((node, True))
            if node.left is not None:
                stack.append((node.left, False))
            continue

        count += 1
        if previous is not None and tree.compare(previous.key, node.key) >= 0:
            raise InvariantViolationError(
                "bst-order",
                f"key {previous.key!r} is not less than its successor {node.key!r}",
            )
        previous = node

    # Black heights need both children finished first: post-order pass.
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if not expanded:
            stack.append((node, True))
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, False))
            continue

        left = _below(node.left, black_heights)
        right = _below(node.right, black_heights)
        if left != right:
            raise InvariantViolationError(
                "black-height",
                f"node {node.key!r} has black heights {left} (left) and {right} (right)",
            )
        black_heights[id(node)] = left

    if count != tree.size():
        raise InvariantViolationError(
            "size", f"tree reports size {tree.size()} but holds {count} nodes"
        )
    return black_heights[id(root)]


def _check_node(node: Node) -> None:
    if node.color not in (Color.RED, Color.BLACK):
        raise InvariantViolationError("color", f"node {node.key!r} has color {node.color!r}")

    for child in (node.left, node.right):
        if child is None:
            continue
        if child.parent is not node:
            raise InvariantViolationError(
                "links", f"child {child.key!r} does not point back to {node.key!r}"
            )
        if node.color == Color.RED and child.color == Color.RED:
            raise InvariantViolationError(
                "red-red", f"red node {child.key!r} has red parent {node.key!r}"
            )


def _below(child: Node | None, black_heights: dict[int, int]) -> int:
    """Black nodes from ``child`` (inclusive) down to a nil leaf."""
    if child is None:
        return 0
    return black_heights[id(child)] + (1 if child.color == Color.BLACK else 0)
