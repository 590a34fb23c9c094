# bintree

A small library for working with linked binary trees of integers. Each node
keeps its value and links to its parent, left child and right child.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building a tree

`bintree.node.Node` is a dataclass with the fields `value`, `parent`, `left`
and `right`. Creating a node with a `parent` only records that parent; it does
not attach the node as one of the parent's children, so you set the link on
the parent yourself:

```python
from bintree.node import Node

root = Node(98)
root.left = Node(12, parent=root)
root.right = Node(402, parent=root)

root.left.insert_right(54)   # new node becomes the right child of 12
root.insert_right(128)       # 128 takes 402's place; 402 becomes its right child

root.is_root()               # True
root.right.is_leaf()         # False
```

`insert_left` and `insert_right` create a new child and return it. If there
was already a child on that side, it moves down and becomes the new node's
child on the same side.

Nodes compare by identity, not by value.

## Printing

`bintree.render` draws a tree in ASCII, one line per level, with each value
shown as a three-digit, zero-padded box:

```python
from bintree.node import Node
from bintree.render import render, print_tree

root = Node(98)
root.left = Node(12, parent=root)
root.right = Node(402, parent=root)
root.left.left = Node(6, parent=root.left)
root.left.right = Node(16, parent=root.left)
root.right.left = Node(256, parent=root.right)
root.right.right = Node(512, parent=root.right)

text = render(root)   # the picture as a string, each line ending in "\n"
print_tree(root)      # write it to standard output (or pass file=...)
```

The output:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

`render(None)` returns an empty string.

## Traversals

`bintree.traversal` provides `preorder`, `inorder`, `postorder` and
`levelorder`. Each is a generator that yields the node values in its order,
and yields nothing for `None`:

```python
from bintree.traversal import preorder, levelorder

list(preorder(root))    # [98, 12, 6, 16, 402, 256, 512]
list(levelorder(root))  # [98, 12, 402, 6, 16, 256, 512]
```

## Metrics

`bintree.metrics` provides:

- `height(tree)`: edges on the longest downward path (0 for `None` and for a
  single node)
- `depth(node)`: edges between the node and the root of its tree
- `size(tree)`: number of nodes
- `leaves(tree)`: number of nodes without children
- `internal_nodes(tree)`: number of nodes with at least one child
- `balance(tree)`: height of the left subtree minus height of the right one
- `is_full(tree)`: every node has zero or two children (`False` for `None`)
- `is_perfect(tree)`: every level is completely filled (`False` for `None`)

## Relations

`bintree.relations` provides `sibling(node)`, `uncle(node)` and
`lowest_common_ancestor(first, second)`. A node counts as its own ancestor.
Each returns `None` when there is no such node, including when either
argument is `None` or the two nodes are in different trees.

## What it does not do

This is a library only: there is no command-line program. It has no
binary-search-tree, AVL or heap operations, no rotations and no completeness
check, and it does not store trees anywhere.