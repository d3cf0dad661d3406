"""
Tests for checkpoint notifications and the bundled observers.
"""

import logging

import pytest

from rbtree.interfaces.tree_observer import Checkpoint, TreeObserver
from rbtree.models.sortedcontainers import RedBlackTree
from rbtree.observers import CompositeObserver, LoggingObserver, RecordingObserver


class ValidatingObserver(TreeObserver):
    """Checks the invariants every time an insertion completes."""

    def __init__(self):
        self.completed = 0

    def on_event(self, checkpoint, tree, node):
        if checkpoint is Checkpoint.AFTER_INSERT:
            tree.validate()
            self.completed += 1


class TestCheckpointSequences:
    """Exact checkpoint sequences for small insertions."""

    def test_insert_into_empty_tree(self, observed_tree, recorder):
        """A single insert fires only the bracketing checkpoints."""
        observed_tree.insert(10)

        assert recorder.events == [
            (Checkpoint.AFTER_BST_INSERT, 10),
            (Checkpoint.AFTER_INSERT, 10),
        ]

    def test_outer_grandchild(self, observed_tree, recorder):
        """Ascending 10, 20, 30 runs case 3 with a left rotation."""
        observed_tree.insert(10)
        observed_tree.insert(20)
        recorder.clear()

        observed_tree.insert(30)

        assert recorder.events == [
            (Checkpoint.AFTER_BST_INSERT, 30),
            (Checkpoint.AFTER_RECOLOR_CASE3_PRE, 30),
            (Checkpoint.AFTER_ROTATE_LEFT, 10),
            (Checkpoint.AFTER_RECOLOR_CASE3_POST, 30),
            (Checkpoint.AFTER_INSERT, 30),
        ]

    def test_outer_grandchild_mirrored(self, observed_tree, recorder):
        """Descending 50, 40, 30 runs case 3 with a right rotation."""
        observed_tree.insert(50)
        observed_tree.insert(40)
        recorder.clear()

        observed_tree.insert(30)

        assert recorder.checkpoints() == [
            Checkpoint.AFTER_BST_INSERT,
            Checkpoint.AFTER_RECOLOR_CASE3_PRE,
            Checkpoint.AFTER_ROTATE_RIGHT,
            Checkpoint.AFTER_RECOLOR_CASE3_POST,
            Checkpoint.AFTER_INSERT,
        ]

    def test_inner_grandchild(self, observed_tree, recorder):
        """10, 30, 20 rotates at the parent before case 3."""
        observed_tree.insert(10)
        observed_tree.insert(30)
        recorder.clear()

        observed_tree.insert(20)

        assert recorder.events == [
            (Checkpoint.AFTER_BST_INSERT, 20),
            (Checkpoint.AFTER_ROTATE_RIGHT, 30),
            (Checkpoint.AFTER_RECOLOR_CASE3_PRE, 30),
            (Checkpoint.AFTER_ROTATE_LEFT, 10),
            (Checkpoint.AFTER_RECOLOR_CASE3_POST, 30),
            (Checkpoint.AFTER_INSERT, 20),
        ]

    def test_red_uncle(self, observed_tree, recorder):
        """A red uncle fires case 1 with the grandparent."""
        for key in (20, 10, 30):
            observed_tree.insert(key)
        recorder.clear()

        observed_tree.insert(40)

        assert recorder.events == [
            (Checkpoint.AFTER_BST_INSERT, 40),
            (Checkpoint.AFTER_RECOLOR_CASE1, 20),
            (Checkpoint.AFTER_INSERT, 40),
        ]

    def test_duplicate_insert_is_silent(self, observed_tree, recorder):
        """Inserting a stored key fires nothing."""
        observed_tree.insert(10)
        recorder.clear()

        observed_tree.insert(10)

        assert recorder.events == []

    def test_removal_reports_rotations(self, observed_tree, recorder):
        """Rotations done while removing are reported."""
        for key in (10, 20, 30, 40, 50, 60, 70):
            observed_tree.insert(key)
        recorder.clear()

        observed_tree.remove(20)

        assert recorder.checkpoints() == [Checkpoint.AFTER_ROTATE_LEFT]

    def test_failed_rotation_is_silent(self, observed_tree, recorder):
        """A refused rotation fires no checkpoint."""
        node = observed_tree.insert(10)
        recorder.clear()

        with pytest.raises(AssertionError):
            observed_tree.rotate_left(node)

        assert recorder.events == []

    def test_invariants_hold_when_insert_completes(self):
        """The tree is valid every time AFTER_INSERT fires."""
        observer = ValidatingObserver()
        tree = RedBlackTree(observer=observer)

        for key in (41, 38, 31, 12, 19, 8, 45, 50, 1, 2, 3):
            tree.insert(key)

        assert observer.completed == 11

    def test_observer_can_be_detached(self, observed_tree, recorder):
        """Setting observer to None stops notifications."""
        observed_tree.observer = None
        observed_tree.insert(10)
        assert recorder.events == []


class TestLoggingObserver:
    """Tests for LoggingObserver."""

    def test_logs_each_checkpoint(self, caplog):
        """Each checkpoint is logged with node, color and size."""
        tree = RedBlackTree(observer=LoggingObserver())

        with caplog.at_level(logging.DEBUG, logger="rbtree.observers.logging_observer"):
            tree.insert(10)

        messages = [
            record.getMessage()
            for record in caplog.records
            if record.name == "rbtree.observers.logging_observer"
        ]
        assert messages == [
            "after-bst-insert: node=10 color=RED size=1",
            "after-insert-complete: node=10 color=BLACK size=1",
        ]

    def test_custom_logger_and_level(self, caplog):
        """Records go to the given logger at the given level."""
        logger = logging.getLogger("rbtree.tests.audit")
        tree = RedBlackTree(observer=LoggingObserver(logger=logger, level=logging.INFO))

        with caplog.at_level(logging.INFO, logger="rbtree.tests.audit"):
            tree.insert("a")

        records = [r for r in caplog.records if r.name == "rbtree.tests.audit"]
        assert len(records) == 2
        assert all(r.levelno == logging.INFO for r in records)

    def test_silent_when_level_disabled(self, caplog):
        """Nothing is logged when the level is filtered out."""
        logger = logging.getLogger("rbtree.tests.quiet")
        tree = RedBlackTree(observer=LoggingObserver(logger=logger))

        with caplog.at_level(logging.WARNING, logger="rbtree.tests.quiet"):
            tree.insert(1)

        assert [r for r in caplog.records if r.name == "rbtree.tests.quiet"] == []

    def test_rejects_bad_level(self):
        """level must be an int."""
        with pytest.raises(TypeError):
            LoggingObserver(level="DEBUG")


class TestCompositeObserver:
    """Tests for CompositeObserver."""

    def test_fans_out_in_order(self):
        """Every wrapped observer sees the same events."""
        first, second = RecordingObserver(), RecordingObserver()
        tree = RedBlackTree(observer=CompositeObserver(first, second))

        for key in (10, 20, 30):
            tree.insert(key)

        assert first.events == second.events
        assert len(first.events) == 9

    def test_rejects_non_observer(self):
        """Only TreeObserver instances can be wrapped."""
        with pytest.raises(TypeError):
            CompositeObserver(RecordingObserver(), object())
