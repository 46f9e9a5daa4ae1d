"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from collections.abc import Iterator

from .node import Node


def _nodes(tree: Node | None) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def height(tree: Node | None) -> int:
    """Return the number of edges on the longest downward path; 0 for None or a leaf."""
    if tree is None or tree.is_leaf():
        return 0
    return 1 + max(height(tree.left), height(tree.right))


def depth(tree: Node | None) -> int:
    """Return the number of edges from the node up to its root; 0 for None."""
    count = 0
    node = tree.parent if tree is not None else None
    while node is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Node | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Node | None) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def internal_nodes(tree: Node | None) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def _branch(child: Node | None) -> int:
    return 0 if child is None else 1 + height(child)


def balance(tree: Node | None) -> int:
    """Return the left branch height minus the right branch height; 0 for None."""
    if tree is None:
        return 0
    return _branch(tree.left) - _branch(tree.right)


def is_full(tree: Node | None) -> bool:
    """Return True if every node has either zero or two children; False for None."""
    if tree is None:
        return False
    return all(
        node.is_leaf() or (node.left is not None and node.right is not None)
        for node in _nodes(tree)
    )


def is_perfect(tree: Node | None) -> bool:
    """Return True if the tree is full with all leaves at the same level; False for None."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    if tree.left is not None and tree.right is not None and balance(tree) == 0:
        return is_perfect(tree.left) and is_perfect(tree.right)
    return False