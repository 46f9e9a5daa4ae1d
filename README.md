# bintree

A small binary tree library. Nodes hold an integer and know their parent and
children. A set of helpers measures trees, walks them, finds related nodes and
draws them as text.

## Installation

```
pip install bintree
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
root.insert_right(128)   # 128 takes 402's place; 402 becomes 128's right child
```

`Node` is a dataclass with the fields `value`, `parent`, `left` and `right`.
Building a node with `Node(value, parent=p)` only sets its parent link. It does
not attach the node to `p`. To do that, assign it to `p.left` or `p.right`
yourself, or use the insert methods.

`insert_left(value)` and `insert_right(value)` create a new child and return
it. If that side already holds a child, the new node takes its place and the
old child hangs below the new node on the same side.

The other methods are:

- `is_leaf()` returns `True` when the node has no children.
- `is_root()` returns `True` when the node has no parent.
- `delete()` detaches the node from its parent and clears every link in its subtree.

Nodes compare by identity, not by value.

## Drawing a tree

```python
from bintree.printer import render, print_tree

text = render(root)   # one line per level, each ending in a newline
print_tree(root)      # writes the same text to standard output
```

`print_tree` also takes a `file` argument to write somewhere other than
standard output.

Each node appears as its value padded to three digits within parentheses,
for example `(098)`. Dashes and a dot join each parent to its children, and
trailing spaces are trimmed from each line. `render(None)` returns an empty
string.

## Walking a tree

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))
list(inorder(root))
list(postorder(root))
```

Each function is a generator that yields node values in the named order. An
empty tree (`None`) yields nothing.

## Measuring a tree

```python
from bintree.metrics import (
    height, depth, size, leaves, internal_nodes,
    balance, is_full, is_perfect,
)
```

- `height(tree)`: edges on the longest path down from the node. A leaf has height 0.
- `depth(node)`: edges up to the root.
- `size(tree)`: number of nodes.
- `leaves(tree)`: number of nodes with no children.
- `internal_nodes(tree)`: number of nodes with at least one child.
- `balance(tree)`: left branch height minus right branch height. A present child counts as one more than its own height; a missing child counts as 0.
- `is_full(tree)`: every node has zero or two children.
- `is_perfect(tree)`: full, and every leaf sits at the same depth.

Given `None`, the counting functions return `0` and the two checks return
`False`.

## Finding relatives

```python
from bintree.relatives import sibling, uncle, lowest_common_ancestor

sibling(node)                  # the other child of the node's parent, or None
uncle(node)                    # the sibling of the node's parent, or None
lowest_common_ancestor(a, b)   # the deepest node that is an ancestor of both, or None
```

For `lowest_common_ancestor`, a node counts as its own ancestor. If `a` lies
above `b`, the result is `a`. If the two nodes are in different trees, or
either is `None`, the result is `None`.

## What it does not do

This package is an in-memory library only. It has no command-line tool. It
has no way to save trees or load them. It does not keep trees ordered or
balanced: you decide where each node goes.