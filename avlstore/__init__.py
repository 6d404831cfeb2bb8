"""
AVL-tree based ordered key store.

This package provides a height-balanced set of unique, ordered keys with:
- insert(key) - O(log N), duplicates are ignored
- delete(key) - O(log N), absent keys are ignored
- has(key) - O(log N)
- serialize() - deterministic preorder encoding of the tree shape
"""

from avlstore.models.sortedcontainers import AVLTree

__all__ = ["AVLTree"]
