"""Draw a binary search tree as ASCII art with numbered placeholders."""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional, TextIO

from searchtrees.bst import BinarySearchTree, Node

MAX_HEIGHT = 6
BOX_WIDTH = 4
PADDING = 2
ELEMENT_WIDTH = BOX_WIDTH + PADDING

EMPTY_TREE = "<empty tree>"
CLIPPED_NOTICE = "(deeper levels omitted due to space limitations)"
PLACEHOLDER_HEADER = "Tree Placeholders:------------------"


def _node_depth(root: Node, node: Optional[Node]) -> int:
    """Distance of ``node`` from ``root`` (1 for the root itself).

    Returns -1 if the node lies deeper than MAX_HEIGHT, or -2 if walking up
    from it never reaches ``root``.
    """
    dist = 1
    while node is not root:
        if node is None:
            return -2
        dist += 1
        node = node.parent
        if dist > MAX_HEIGHT:
            return -1
    return dist


def _subtree_height(root: Optional[Node], depth: int = 1) -> int:
    """Height of the subtree, never looking more than MAX_HEIGHT levels down."""
    if root is None or depth > MAX_HEIGHT:
        return 0
    return max(_subtree_height(root.left, depth + 1), _subtree_height(root.right, depth + 1)) + 1


def _u16(value: int) -> int:
    return value & 0xFFFF


def _branch(node: Optional[Node], child: Optional[Node], padding: int, start: str, end: str) -> str:
    if node is None or child is None:
        return " " * (padding // 2 + 3)
    return start + "\u2500" * (padding // 2 - 1) + end + "  "


def render(tree: BinarySearchTree, root: Optional[Node]) -> str:
    """Return the drawing of the subtree at ``root`` followed by its placeholder legend."""
    if root is None:
        return EMPTY_TREE + "\n"

    out: List[str] = []
    height = _subtree_height(root)
    clipped = height > MAX_HEIGHT
    if clipped:
        height = MAX_HEIGHT

    final_row_elements = 2 ** (height - 1)
    final_row_width = _u16(ELEMENT_WIDTH * final_row_elements - PADDING)

    placeholders: Dict[Any, int] = {}
    next_placeholder = 1
    for node in tree.nodes():
        if _node_depth(root, node) != -1:
            placeholders.setdefault(node.key, next_placeholder)
            next_placeholder = (next_placeholder + 1) & 0xFF

    margin = _u16(final_row_width // 2 - BOX_WIDTH // 2)
    padding = _u16(final_row_width - 2)
    row: List[Optional[Node]] = [root]

    for level in range(height):
        cells = []
        for node in row:
            if node is None:
                cells.append(" " * BOX_WIDTH)
            else:
                cells.append(f"[{placeholders.setdefault(node.key, 0):02d}]")
        out.append(" " * margin + (" " * padding).join(cells) + "\n")

        padding = _u16(int((padding - BOX_WIDTH) / 2))
        margin = _u16(margin - (padding // 2 + 2))

        previous = row
        row = []
        for node in previous:
            if node is None:
                row.extend((None, None))
            else:
                row.extend((node.left, node.right))

        if level < height - 1:
            line = [" " * (margin + 2)]
            for node in previous:
                line.append(_branch(node, node.left if node else None, padding, "\u250c", "\u2518"))
                line.append(_branch(node, node.right if node else None, padding, "\u2514", "\u2510"))
                line.append(" " * (padding + 2))
            out.append("".join(line) + "\n")

    out.append("\n")
    if clipped:
        out.append(CLIPPED_NOTICE + "\n")

    out.append(PLACEHOLDER_HEADER + "\n")
    for key, number in sorted(placeholders.items(), key=lambda entry: entry[0]):
        found = tree.find(key)
        shown = "<error: lookup failed>" if found is None else str(found.value)
        out.append(f"[{number:02d}] -> ({key}, {shown})\n")
    return "".join(out)


def print_tree(tree: BinarySearchTree, root: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the subtree at ``root`` to ``file`` (standard output by default)."""
    stream = sys.stdout if file is None else file
    stream.write(render(tree, root))
    stream.write("\n")