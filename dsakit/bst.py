"""Binary trees: traversals, a BST check, searches and a binary search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


class DuplicateKeyError(ValueError):
    """Raised when a value already in the tree is inserted again."""


@dataclass(eq=False, slots=True)
class TreeNode:
    """One node of a binary tree."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def preorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values node first, then the left subtree, then the right."""
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        yield node.value
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)


def inorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values of the left subtree, then the node, then the right."""
    pending: list[TreeNode] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        yield node.value
        node = node.right


def postorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values of the left subtree, then the right, then the node."""
    if root is None:
        return
    pending = [root]
    reversed_order: list[Any] = []
    while pending:
        node = pending.pop()
        reversed_order.append(node.value)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    yield from reversed(reversed_order)


def is_bst(root: TreeNode | None) -> bool:
    """Tell whether the in-order values rise strictly, as in a search tree."""
    previous: Any = None
    first = True
    for value in inorder(root):
        if not first and value <= previous:
            return False
        previous, first = value, False
    return True


def search_iterative(root: TreeNode | None, value: Any) -> TreeNode | None:
    """Find the node holding ``value`` by walking down the tree in a loop."""
    node = root
    while node is not None:
        if node.value == value:
            return node
        node = node.left if node.value > value else node.right
    return None


def search_recursive(root: TreeNode | None, value: Any) -> TreeNode | None:
    """Find the node holding ``value`` by descending recursively."""
    if root is None:
        return None
    if root.value == value:
        return root
    if root.value > value:
        return search_recursive(root.left, value)
    return search_recursive(root.right, value)


class BinarySearchTree:
    """An unbalanced binary search tree of distinct values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.add(value)

    def _place(self, value: Any) -> bool:
        if self.root is None:
            self.root = TreeNode(value)
            return True
        node = self.root
        while True:
            if value == node.value:
                return False
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value)
                    return True
                node = node.right

    def add(self, value: Any) -> None:
        """Insert ``value``; a value already present is left as it is."""
        self._place(value)

    def insert(self, value: Any) -> None:
        """Insert ``value``; raise DuplicateKeyError if it is already present."""
        if not self._place(value):
            raise DuplicateKeyError(f"element {value!r} is already in the tree")

    def search(self, value: Any) -> TreeNode | None:
        """Return the node holding ``value``, or None."""
        return search_iterative(self.root, value)

    def __contains__(self, value: Any) -> bool:
        return self.search(value) is not None

    def __iter__(self) -> Iterator[Any]:
        return inorder(self.root)

    def preorder(self) -> Iterator[Any]:
        """Yield the values in preorder."""
        return preorder(self.root)

    def postorder(self) -> Iterator[Any]:
        """Yield the values in postorder."""
        return postorder(self.root)

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)!r})"