"""
Custom exceptions for the red-black tree.
"""

from typing import Any


class RBTreeError(Exception):
    """Base class for all tree errors."""


class KeyNotFoundError(RBTreeError, KeyError):
    """
    Raised when removing a key that is not stored in the tree.

    This is a recoverable error: the tree is left untouched.
    """

    def __init__(self, key: Any):
        """
        Initialize key-not-found error.

        Args:
            key: The key that was looked up.
        """
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Key not found: {self.key!r}"


class StructuralViolationError(RBTreeError, AssertionError):
    """
    Raised when an internal structural precondition does not hold.

    Signals a broken invariant inside the balancing algorithm, not misuse of
    the public API. No link has been modified when it is raised.
    """

    def __init__(self, node: Any, direction: str, message: str):
        self.node = node
        self.direction = direction
        super().__init__(message)


class InvariantViolationError(RBTreeError, AssertionError):
    """Raised by validation when a red-black invariant is broken."""

    def __init__(self, invariant: str, message: str):
        self.invariant = invariant
        super().__init__(f"{invariant}: {message}")
