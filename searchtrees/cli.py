"""Command-line demonstrations of the search trees and the equal-paths check."""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

from searchtrees.avl import AVLTree
from searchtrees.bst import BinarySearchTree
from searchtrees.equal_paths import Node, equal_paths


def _tree_demo(tree: BinarySearchTree, title: str) -> List[str]:
    tree.insert("a", 1)
    tree.insert("b", 2)
    lines = [title]
    lines.extend(f"{key} {value}" for key, value in tree)
    lines.append("Found b" if "b" in tree else "Did not find b")
    lines.append("Erasing b")
    tree.remove("b")
    return lines


def bst_demo() -> List[str]:
    """Run the insert/iterate/find/remove demonstration on both tree kinds."""
    lines = _tree_demo(BinarySearchTree(), "Binary Search Tree contents:")
    lines.append("")
    lines.extend(_tree_demo(AVLTree(), "AVLTree contents:"))
    return lines


def _equal_paths_cases() -> List[Node]:
    return [
        Node(1),
        Node(1, Node(2)),
        Node(1, Node(2), Node(3)),
        Node(1, None, Node(3)),
        Node(1, Node(2, None, Node(4)), Node(3)),
    ]


def equal_paths_demo() -> List[str]:
    """Report the equal-paths result for five small trees, as 1 or 0."""
    return [
        f"Test{number}: {int(equal_paths(root))}"
        for number, root in enumerate(_equal_paths_cases(), 1)
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="searchtrees", description=__doc__)
    parser.add_argument(
        "demo",
        nargs="?",
        choices=("bst", "equal-paths", "all"),
        default="all",
        help="which demonstration to run",
    )
    args = parser.parse_args(argv)
    lines: List[str] = []
    if args.demo in ("bst", "all"):
        lines.extend(bst_demo())
    if args.demo in ("equal-paths", "all"):
        lines.extend(equal_paths_demo())
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())