"""Binary tree node with parent links."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    value: int
    parent: Node | None = None
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any old left child becomes its left child."""
        node = Node(value, parent=self)
        old_left = self.left
        self.left = node
        if old_left is not None:
            old_left.parent = node
            node.left = old_left
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any old right child becomes its right child."""
        node = Node(value, parent=self)
        old_right = self.right
        self.right = node
        if old_right is not None:
            old_right.parent = node
            node.right = old_right
        return node

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def delete(self) -> None:
        """Detach this node from its parent and dismantle the whole subtree."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(child for child in (node.left, node.right) if child is not None)
            node.left = None
            node.right = None
            node.parent = None