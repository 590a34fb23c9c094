"""ASCII drawing of a binary tree."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from bintree.node import Node


def _height(tree: Node) -> int:
    left = 1 + _height(tree.left) if tree.left is not None else 0
    right = 1 + _height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _size(tree: Optional[Node]) -> int:
    if tree is None:
        return 0
    return 1 + _size(tree.left) + _size(tree.right)


def _draw(tree: Optional[Node], offset: int, depth: int, rows: List[List[str]]) -> int:
    """Draw *tree* into *rows*; return the width the subtree occupies."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    box = f"({tree.value:03d})"
    width = len(box)
    left = _draw(tree.left, offset, depth + 1, rows)
    right = _draw(tree.right, offset + left + width, depth + 1, rows)

    _put(rows[depth], offset + left, box)
    if depth:
        above = rows[depth - 1]
        if is_left:
            _put(above, offset + left + width // 2, "-" * (width + right))
        else:
            _put(above, offset - width // 2, "-" * (left + width))
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def _put(row: List[str], start: int, text: str) -> None:
    end = start + len(text)
    if end > len(row):
        row.extend(" " * (end - len(row)))
    row[start:end] = text


def render(tree: Optional[Node]) -> str:
    """Return the drawing of *tree*, one newline-terminated line per level."""
    if tree is None:
        return ""
    levels = _height(tree) + 1
    rows: List[List[str]] = [[] for _ in range(levels)]
    _draw(tree, 0, 0, rows)
    return "".join("".join(row).rstrip(" ") + "\n" for row in rows)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of *tree* to *file* (standard output by default)."""
    (file if file is not None else sys.stdout).write(render(tree))