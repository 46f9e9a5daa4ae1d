"""Lookups of related nodes: siblings, uncles and common ancestors."""

from __future__ import annotations

from .node import Node


def sibling(node: Node | None) -> Node | None:
    """Return the other child of the node's parent, or None if there is none."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    if parent.left is None or parent.right is None:
        return None
    return parent.right if parent.left is node else parent.left


def uncle(node: Node | None) -> Node | None:
    """Return the sibling of the node's parent, or None if there is none."""
    if node is None:
        return None
    return sibling(node.parent)


def lowest_common_ancestor(first: Node | None, second: Node | None) -> Node | None:
    """Return the deepest node that is an ancestor of both nodes, or None."""
    if first is None or second is None:
        return None
    ancestors = set()
    node = first
    while node is not None:
        ancestors.add(id(node))
        node = node.parent
    node = second
    while node is not None:
        if id(node) in ancestors:
            return node
        node = node.parent
    return None