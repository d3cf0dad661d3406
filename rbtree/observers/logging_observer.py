"""
LoggingObserver - writes every checkpoint to a logger.
"""

import logging

from rbtree.interfaces.tree_observer import TreeObserver


class LoggingObserver(TreeObserver):
    """Observer that logs each checkpoint with the node and tree size."""

    def __init__(
        self, logger: logging.Logger | None = None, level: int = logging.DEBUG
    ) -> None:
        """
        Initialize the observer.

        Args:
            logger: Logger to write to. Defaults to this module's logger.
            level: Logging level used for every record.
        """
        if not isinstance(level, int):
            raise TypeError(f"level must be an int, got {type(level).__name__}")
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._level = level

    def on_event(self, checkpoint, tree, node) -> None:
        if not self._logger.isEnabledFor(self._level):
            return
        if node is None:
            self._logger.log(
                self._level, "%s: size=%d", checkpoint.value, tree.size()
            )
            return
        self._logger.log(
            self._level,
            "%s: node=%r color=%s size=%d",
            checkpoint.value,
            node.key,
            node.color.name,
            tree.size(),
        )
