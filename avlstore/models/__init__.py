"""
Data models for the key store.
"""

from avlstore.models.exceptions import (
    AVLTreeError,
    InvariantViolationError,
    RotationError,
)
from avlstore.models.sortedcontainers import AVLTree, Node

__all__ = [
    "AVLTree",
    "AVLTreeError",
    "InvariantViolationError",
    "Node",
    "RotationError",
]
