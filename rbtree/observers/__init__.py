"""
Ready-made TreeObserver implementations.
"""

from rbtree.observers.composite import CompositeObserver
from rbtree.observers.logging_observer import LoggingObserver
from rbtree.observers.recording import RecordingObserver

__all__ = ["CompositeObserver", "LoggingObserver", "RecordingObserver"]
