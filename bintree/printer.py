"""ASCII rendering of binary trees."""

from __future__ import annotations

import sys
from typing import TextIO

from .node import Node


def _height(tree: Node) -> int:
    left = 1 + _height(tree.left) if tree.left is not None else 0
    right = 1 + _height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _put(row: list[str], pos: int, char: str) -> None:
    if pos >= len(row):
        row.extend(" " * (pos + 1 - len(row)))
    row[pos] = char


def _layout(tree: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw the subtree into rows and return the width it occupies."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _layout(tree.left, offset, depth + 1, rows)
    right = _layout(tree.right, offset + left + width, depth + 1, rows)
    for i, char in enumerate(label):
        _put(rows[depth], offset + left + i, char)
    if depth:
        above = rows[depth - 1]
        if is_left:
            start, count = offset + left + width // 2, width + right
        else:
            start, count = offset - width // 2, left + width
        for pos in range(start, start + count):
            _put(above, pos, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def _finish(row: list[str]) -> str:
    text = "".join(row)
    # The first two columns are never trimmed.
    keep = min(2, len(text))
    return text[:keep] + text[keep:].rstrip(" ")


def render(tree: Node | None) -> str:
    """Return the drawing of the tree, one line per level, each ending in a newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(_height(tree) + 1)]
    _layout(tree, 0, 0, rows)
    return "".join(_finish(row) + "\n" for row in rows)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of the tree to file (standard output by default)."""
    (file if file is not None else sys.stdout).write(render(tree))