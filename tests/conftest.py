"""
Shared pytest fixtures for red-black tree tests.
"""

import pytest

from rbtree.models.sortedcontainers import RedBlackTree
from rbtree.observers import RecordingObserver


@pytest.fixture
def tree():
    """Provide an empty tree with natural ordering."""
    return RedBlackTree()


@pytest.fixture
def recorder():
    """Provide a fresh RecordingObserver."""
    return RecordingObserver()


@pytest.fixture
def observed_tree(recorder):
    """Provide an empty tree wired to the recorder fixture."""
    return RedBlackTree(observer=recorder)


@pytest.fixture
def sample_keys():
    """Provide the seven keys used by the removal scenarios."""
    return [10, 20, 30, 40, 50, 60, 70]


@pytest.fixture
def populated_tree(tree, sample_keys):
    """Provide a tree built from sample_keys in ascending order."""
    for key in sample_keys:
        tree.insert(key)
    return tree
