"""
Shared pytest fixtures for AVL tree tests.
"""

import pytest

from avlstore.models.sortedcontainers import AVLTree


@pytest.fixture
def tree():
    """Provide an empty AVLTree instance."""
    return AVLTree()


@pytest.fixture
def ascending_tree():
    """Provide a tree built from 3, 4, 5, 6 inserted in order."""
    avl = AVLTree()
    for key in (3, 4, 5, 6):
        avl.insert(key)
    return avl


@pytest.fixture
def fibonacci_tree():
    """
    Provide a minimal (Fibonacci) AVL tree of height 5 holding keys 1..12.

    Every internal node leans left, so removing 12 unbalances two levels.
    """
    avl = AVLTree()
    for key in (8, 5, 11, 3, 7, 10, 12, 2, 4, 6, 9, 1):
        avl.insert(key)
    return avl
