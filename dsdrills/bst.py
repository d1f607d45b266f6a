"""Binary search tree built from plain nodes, with recursive tree queries.

Values that compare equal to a node are placed in its right subtree.
Functions that reshape the tree take the current root and return the new one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

__all__ = [
    "Node",
    "insert",
    "contains",
    "delete",
    "delete_all",
    "delete_duplicates",
    "inorder",
    "preorder",
    "total",
    "size",
    "maximum",
    "height",
    "nodes_at_level",
    "build",
    "sample_tree",
]


@dataclass(slots=True)
class Node:
    """A tree node holding an integer value and two optional children."""

    val: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` and return the root; equal values go to the right."""
    if root is None:
        return Node(value)
    if value < root.val:
        root.left = insert(root.left, value)
    else:
        root.right = insert(root.right, value)
    return root


def contains(root: Optional[Node], key: int) -> bool:
    """Return whether ``key`` is stored in the search tree."""
    node = root
    while node is not None:
        if key == node.val:
            return True
        node = node.left if key < node.val else node.right
    return False


def delete(root: Optional[Node], key: int) -> Optional[Node]:
    """Remove one node holding ``key`` and return the new root.

    A node with two children takes the value of its in-order successor,
    which is then removed from the right subtree.
    """
    if root is None:
        return None
    if key < root.val:
        root.left = delete(root.left, key)
    elif key > root.val:
        root.right = delete(root.right, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = root.right
        while successor.left is not None:
            successor = successor.left
        root.val = successor.val
        root.right = delete(root.right, successor.val)
    return root


def delete_all(root: Optional[Node], key: int) -> Optional[Node]:
    """Remove every node holding ``key`` and return the new root.

    Each matching node is replaced by its (already processed) left subtree;
    its right subtree is discarded with it.
    """
    if root is None:
        return None
    root.left = delete_all(root.left, key)
    root.right = delete_all(root.right, key)
    if root.val == key:
        return root.left
    return root


def delete_duplicates(root: Optional[Node]) -> Optional[Node]:
    """Drop nodes whose direct child repeats their value; return the new root.

    After both subtrees are processed, a node whose left child has the same
    value is replaced by its right subtree, and a node whose right child has
    the same value is replaced by its left subtree.
    """
    if root is None:
        return None
    root.left = delete_duplicates(root.left)
    root.right = delete_duplicates(root.right)
    if root.left is not None and root.left.val == root.val:
        return root.right
    if root.right is not None and root.right.val == root.val:
        return root.left
    return root


def _inorder(root: Optional[Node]) -> Iterator[int]:
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def _preorder(root: Optional[Node]) -> Iterator[int]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.val
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(root: Optional[Node]) -> list[int]:
    """Return the values in left, node, right order."""
    return list(_inorder(root))


def preorder(root: Optional[Node]) -> list[int]:
    """Return the values in node, left, right order."""
    return list(_preorder(root))


def total(root: Optional[Node]) -> int:
    """Return the sum of all values; 0 for an empty tree."""
    return sum(_preorder(root))


def size(root: Optional[Node]) -> int:
    """Return the number of nodes."""
    return sum(1 for _ in _preorder(root))


def maximum(root: Optional[Node]) -> int:
    """Return the largest value, never less than 0 (0 for an empty tree)."""
    return max(_preorder(root), default=0) if root is None else max(0, *_preorder(root))


def height(root: Optional[Node]) -> int:
    """Return the number of levels; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def nodes_at_level(root: Optional[Node], current_level: int, level: int) -> list[int]:
    """Return, in pre-order, the values at depth ``level``.

    The root is counted as being at depth ``current_level``.
    """
    found: list[int] = []
    stack: list[tuple[Node, int]] = [(root, current_level)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        if depth == level:
            found.append(node.val)
        if node.right is not None:
            stack.append((node.right, depth + 1))
        if node.left is not None:
            stack.append((node.left, depth + 1))
    return found


def build(values: Iterable[int]) -> Optional[Node]:
    """Build a search tree by inserting ``values`` in order."""
    root: Optional[Node] = None
    for value in values:
        root = insert(root, value)
    return root


def sample_tree() -> Node:
    """Return the complete three-level tree with 1 at the root and 2..7 below."""
    return Node(
        1,
        Node(2, Node(4), Node(5)),
        Node(3, Node(6), Node(7)),
    )