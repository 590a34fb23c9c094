"""Linked binary trees: nodes, traversals, metrics, relations and rendering."""

__version__ = "0.1.0"
__all__ = ["node", "render", "traversal", "metrics", "relations"]