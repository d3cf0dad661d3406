"""
CompositeObserver - fans notifications out to several observers.
"""

from rbtree.interfaces.tree_observer import TreeObserver


class CompositeObserver(TreeObserver):
    """Forward each notification to every wrapped observer, in order."""

    def __init__(self, *observers: TreeObserver) -> None:
        for observer in observers:
            if not isinstance(observer, TreeObserver):
                raise TypeError(
                    f"observer must implement TreeObserver, got {type(observer).__name__}"
                )
        self._observers = list(observers)

    @property
    def observers(self) -> list[TreeObserver]:
        return list(self._observers)

    def on_event(self, checkpoint, tree, node) -> None:
        for observer in self._observers:
            observer.on_event(checkpoint, tree, node)
