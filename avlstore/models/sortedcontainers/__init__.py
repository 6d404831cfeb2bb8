"""
Sorted container implementations for the key store.
"""

from avlstore.models.sortedcontainers.avl_tree import AVLTree, Node

__all__ = ["AVLTree", "Node"]
