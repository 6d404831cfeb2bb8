"""
Abstract base classes for the key store.
"""

from avlstore.interfaces.ordered_key_set import OrderedKeySet

__all__ = ["OrderedKeySet"]
