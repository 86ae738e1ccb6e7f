"""Check whether every leaf of a binary tree lies at the same depth."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class Node:
    """A plain binary tree node with an integer key."""

    key: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _leaf_depths(root: Node) -> Iterator[int]:
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if node.left is None and node.right is None:
            yield depth
            continue
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, depth + 1))


def equal_paths(root: Optional[Node]) -> bool:
    """True if all paths from the root to a leaf have the same length."""
    if root is None:
        return True
    depths = _leaf_depths(root)
    first = next(depths)
    return all(depth == first for depth in depths)