"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from typing import Optional

from bintree.node import Node


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path from *tree*.

    A missing tree and a single node both have height 0.
    """
    if tree is None:
        return 0
    left = 1 + height(tree.left) if tree.left is not None else 0
    right = 1 + height(tree.right) if tree.right is not None else 0
    return max(left, right)


def depth(node: Optional[Node]) -> int:
    """Return the number of edges between *node* and the root of its tree."""
    count = 0
    while node is not None and node.parent is not None:
        node = node.parent
        count += 1
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in *tree*."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes in *tree* without children."""
    if tree is None:
        return 0
    if tree.is_leaf():
        return 1
    return leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes in *tree* with at least one child."""
    if tree is None or tree.is_leaf():
        return 0
    return 1 + internal_nodes(tree.left) + internal_nodes(tree.right)


def balance(tree: Optional[Node]) -> int:
    """Return the height of the left subtree minus that of the right one.

    Heights are measured with :func:`height`, so a missing subtree and a
    lone leaf count the same.
    """
    if tree is None:
        return 0
    return height(tree.left) - height(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node of *tree* has either zero or two children."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if every level of *tree* is completely filled."""
    if tree is None:
        return False
    return size(tree) == (1 << (height(tree) + 1)) - 1