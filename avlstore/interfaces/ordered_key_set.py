"""
OrderedKeySet abstract base class for sorted unique-key data structures.
"""

from abc import ABC, abstractmethod
from typing import Any


class OrderedKeySet(ABC):
    """
    Abstract base class for sets of unique, totally ordered keys.

    Provides O(log N) operations for insert, delete, and membership.
    Duplicate inserts and deletes of absent keys are no-ops, never errors.

    Implementations:
    - AVLTree: Height-balanced binary search tree
    """

    @abstractmethod
    def insert(self, key: Any) -> bool:
        """
        Insert a key.

        Args:
            key: The key to insert.

        Returns:
            True if the key was added, False if it was already present.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> bool:
        """
        Remove a key.

        Args:
            key: The key to remove.

        Returns:
            True if the key was found and removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of keys.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def serialize(self) -> str:
        """
        Return a deterministic string encoding of the container's shape.

        Two containers with equal encodings hold the same keys in the same
        structure.
        """
        pass

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        return self.size()
