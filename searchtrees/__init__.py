"""Ordered key/value maps on plain and AVL-balanced binary search trees, an
equal-leaf-depth check, a text tree drawing and a demonstration command."""

__version__ = "1.0.0"

__all__ = ["avl", "bst", "cli", "equal_paths", "pretty"]