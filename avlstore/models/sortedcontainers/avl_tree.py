"""
AVL Tree implementation for ordered unique-key storage.

Height-balanced binary search tree with O(log N) insert, delete and lookup.
Nodes carry no parent pointers: every recursive step returns the (possibly
new) root of the subtree it was given and the caller stores it back into its
child slot.
"""

import logging
from dataclasses import dataclass
from typing import Any

from avlstore.interfaces.ordered_key_set import OrderedKeySet
from avlstore.models.exceptions import InvariantViolationError, RotationError

logger = logging.getLogger(__name__)

NULL_TOKEN = "X"
SEPARATOR = ","


@dataclass
class Node:
    """Node in the AVL Tree."""

    key: Any
    height: int = 1
    left: "Node | None" = None
    right: "Node | None" = None


def height(node: Node | None) -> int:
    """Cached subtree height, 0 for an absent node."""
    return node.height if node is not None else 0


def balance(node: Node | None) -> int:
    """Balance factor: height(left) - height(right), 0 for an absent node."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def update_height(node: Node) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def rotate_right(y: Node) -> Node:
    """
    Right rotation around y.

    y's left child x becomes the subtree root, x's right subtree moves
    under y. y sits lower afterwards, so its height is fixed first.

    Returns:
        The new subtree root.

    Raises:
        RotationError: If y has no left child.
    """
    x = y.left
    if x is None:
        raise RotationError("right", y.key)

    y.left = x.right
    x.right = y

    update_height(y)
    update_height(x)
    return x


def rotate_left(x: Node) -> Node:
    """
    Left rotation around x. Mirror of rotate_right.

    Returns:
        The new subtree root.

    Raises:
        RotationError: If x has no right child.
    """
    y = x.right
    if y is None:
        raise RotationError("left", x.key)

    x.right = y.left
    y.left = x

    update_height(x)
    update_height(y)
    return y


class AVLTree(OrderedKeySet):
    """
    AVL Tree implementation of OrderedKeySet.

    Properties maintained:
    1. Every key in a left subtree < node key < every key in the right subtree
    2. Each key appears at most once
    3. node.height == 1 + max(height(left), height(right))
    4. |height(left) - height(right)| <= 1 at every node
    """

    def __init__(self) -> None:
        self._root: Node | None = None
        self._size: int = 0

    @property
    def root(self) -> Node | None:
        return self._root

    def insert(self, key: Any) -> bool:
        """Insert a key, ignoring duplicates. O(log N)"""
        size_before = self._size
        self._root = self._insert(self._root, key)
        if self._size == size_before:
            logger.debug(f"Insert of {key!r} ignored: key already present")
            return False
        return True

    def delete(self, key: Any) -> bool:
        """Remove a key if present. O(log N)"""
        size_before = self._size
        self._root = self._delete(self._root, key)
        if self._size == size_before:
            logger.debug(f"Delete of {key!r} ignored: key not present")
            return False
        return True

    def has(self, key: Any) -> bool:
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return True
        return False

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        return height(self._root)

    def min_key(self) -> Any | None:
        """Smallest key, or None if the tree is empty."""
        if self._root is None:
            return None
        return self._leftmost(self._root).key

    def max_key(self) -> Any | None:
        """Largest key, or None if the tree is empty."""
        current = self._root
        if current is None:
            return None
        while current.right is not None:
            current = current.right
        return current.key

    def serialize(self) -> str:
        """
        Encode the tree shape as comma-separated preorder tokens.

        Absent children are written as NULL_TOKEN and keys with str().
        An empty tree serializes to NULL_TOKEN alone.
        """
        tokens: list[str] = []
        self._serialize(self._root, tokens)
        return SEPARATOR.join(tokens)

    def validate(self) -> None:
        """
        Check every structural invariant of the tree.

        Raises:
            InvariantViolationError: On the first broken invariant found.
        """
        _, count = self._validate(self._root, None, None)
        if count != self._size:
            raise InvariantViolationError(
                None, "size", f"cached size {self._size}, counted {count} nodes"
            )

    def __repr__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"

    def _insert(self, node: Node | None, key: Any) -> Node:
        if node is None:
            self._size += 1
            return Node(key=key)

        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        else:
            # Duplicate
            return node

        update_height(node)
        return self._rebalance(node, key)

    def _delete(self, node: Node | None, key: Any) -> Node | None:
        if node is None:
            return None

        if key < node.key:
            node.left = self._delete(node.left, key)
        elif key > node.key:
            node.right = self._delete(node.right, key)
        elif node.left is None or node.right is None:
            # At most one child: splice it into this slot
            self._size -= 1
            return node.left if node.left is not None else node.right
        else:
            successor = self._leftmost(node.right)
            node.key = successor.key
            node.right = self._delete(node.right, successor.key)

        update_height(node)
        return self._rebalance(node)

    def _rebalance(self, node: Node, key: Any = None) -> Node:
        """
        Restore the balance invariant at node after a mutation below it.

        With a key (insertion), the case is chosen by where the key falls
        relative to the heavy child. Without one (deletion), it is chosen by
        the heavy child's own balance factor.
        """
        node_balance = balance(node)

        if node_balance > 1:
            if key is None:
                outer = balance(node.left) >= 0
            elif key < node.left.key:
                outer = True
            elif key > node.left.key:
                outer = False
            else:
                return node

            if outer:
                logger.debug(f"Left-Left rotation at {node.key!r}")
            else:
                logger.debug(f"Left-Right rotation at {node.key!r}")
                node.left = rotate_left(node.left)
            return rotate_right(node)

        if node_balance < -1:
            if key is None:
                outer = balance(node.right) <= 0
            elif key > node.right.key:
                outer = True
            elif key < node.right.key:
                outer = False
            else:
                return node

            if outer:
                logger.debug(f"Right-Right rotation at {node.key!r}")
            else:
                logger.debug(f"Right-Left rotation at {node.key!r}")
                node.right = rotate_right(node.right)
            return rotate_left(node)

        return node

    def _leftmost(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _serialize(self, node: Node | None, tokens: list[str]) -> None:
        if node is None:
            tokens.append(NULL_TOKEN)
            return
        tokens.append(str(node.key))
        self._serialize(node.left, tokens)
        self._serialize(node.right, tokens)

    def _validate(self, node: Node | None, low: Any, high: Any) -> tuple[int, int]:
        """Return (height, node count) of the subtree, raising on violations."""
        if node is None:
            return 0, 0

        if (low is not None and not low < node.key) or (
            high is not None and not node.key < high
        ):
            raise InvariantViolationError(
                node.key, "order", f"key outside the open range ({low!r}, {high!r})"
            )

        left_height, left_count = self._validate(node.left, low, node.key)
        right_height, right_count = self._validate(node.right, node.key, high)

        expected = 1 + max(left_height, right_height)
        if node.height != expected:
            raise InvariantViolationError(
                node.key, "height", f"cached {node.height}, actual {expected}"
            )
        if abs(left_height - right_height) > 1:
            raise InvariantViolationError(
                node.key,
                "balance",
                f"left height {left_height}, right height {right_height}",
            )

        return expected, left_count + right_count + 1
