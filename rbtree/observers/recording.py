"""
RecordingObserver - keeps the sequence of checkpoints seen by a tree.
"""

from typing import Any

from rbtree.interfaces.tree_observer import Checkpoint, TreeObserver


class RecordingObserver(TreeObserver):
    """
    Observer that stores every notification in arrival order.

    Each event is a ``(checkpoint, key)`` pair, where ``key`` is the key of
    the node passed with the notification (None when no node was given).
    """

    def __init__(self) -> None:
        self._events: list[tuple[Checkpoint, Any]] = []

    @property
    def events(self) -> list[tuple[Checkpoint, Any]]:
        return list(self._events)

    def checkpoints(self) -> list[Checkpoint]:
        """Return only the checkpoints, in order."""
        return [checkpoint for checkpoint, _ in self._events]

    def clear(self) -> None:
        self._events.clear()

    def on_event(self, checkpoint, tree, node) -> None:
        self._events.append((checkpoint, node.key if node is not None else None))
