"""
Custom exceptions for the key store.
"""

from typing import Any


class AVLTreeError(Exception):
    """Base class for AVL tree errors."""


class RotationError(AVLTreeError):
    """
    Raised when a rotation is requested on a node without a pivot child.

    Rebalancing only rotates towards the heavy side, so the public API
    never triggers this.
    """

    def __init__(self, direction: str, key: Any):
        """
        Initialize rotation error.

        Args:
            direction: "left" or "right".
            key: Key of the node the rotation was applied to.
        """
        self.direction = direction
        self.key = key
        pivot_side = "right" if direction == "left" else "left"
        super().__init__(
            f"Cannot rotate {direction} at key {key!r}: "
            f"{pivot_side} child is absent"
        )


class InvariantViolationError(AVLTreeError):
    """
    Raised by AVLTree.validate() when a structural invariant is broken.
    """

    def __init__(self, key: Any, invariant: str, detail: str):
        """
        Initialize invariant violation error.

        Args:
            key: Key of the offending node, None for tree-level invariants.
            invariant: Name of the broken invariant ("order", "height",
                "balance" or "size").
            detail: Human readable description of the mismatch.
        """
        self.key = key
        self.invariant = invariant
        self.detail = detail
        location = "tree" if key is None else f"key {key!r}"
        super().__init__(f"{invariant} invariant violated at {location}: {detail}")
