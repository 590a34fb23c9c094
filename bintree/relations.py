"""Kinship between nodes of a binary tree."""

from __future__ import annotations

from typing import Optional

from bintree.node import Node


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of *node*'s parent, or None."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    return parent.right if parent.left is node else parent.left


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of *node*'s parent, or None."""
    if node is None or node.parent is None or node.parent.parent is None:
        return None
    return sibling(node.parent)


def lowest_common_ancestor(
    first: Optional[Node], second: Optional[Node]
) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both nodes, or None.

    A node counts as its own ancestor. None is returned when either node is
    missing or the two nodes belong to different trees.
    """
    if first is None or second is None:
        return None
    lineage = set()
    node: Optional[Node] = first
    while node is not None:
        lineage.add(id(node))
        node = node.parent
    node = second
    while node is not None:
        if id(node) in lineage:
            return node
        node = node.parent
    return None