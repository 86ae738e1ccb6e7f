"""A self-balancing AVL tree built on the plain binary search tree."""

from __future__ import annotations

from typing import Any, Optional

from searchtrees.bst import BinarySearchTree, Node, predecessor


class AVLNode(Node):
    """A tree node that also records its balance: left height minus right height."""

    __slots__ = ("balance",)

    def __init__(self, key: Any, value: Any, parent: Optional["AVLNode"] = None) -> None:
        super().__init__(key, value, parent)
        self.balance = 0


class AVLTree(BinarySearchTree):
    """A binary search tree kept height-balanced by rotations."""

    node_class = AVLNode

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``, overwriting the value if the key exists."""
        if self.root is None:
            self.root = AVLNode(key, value, None)
            return
        current: Optional[AVLNode] = self.root  # type: ignore[assignment]
        parent: AVLNode = self.root  # type: ignore[assignment]
        while current is not None:
            parent = current
            if key < current.key:
                current = current.left  # type: ignore[assignment]
            elif key > current.key:
                current = current.right  # type: ignore[assignment]
            else:
                current.value = value
                return

        new_node = AVLNode(key, value, parent)
        if key < parent.key:
            parent.left = new_node
        else:
            parent.right = new_node

        if parent.balance in (1, -1):
            parent.balance = 0
            return
        parent.balance = 1 if new_node is parent.left else -1
        self._insert_fix(parent, new_node)

    def remove(self, key: Any) -> None:
        """Remove ``key`` if present; a node with two children is first swapped
        with its predecessor."""
        node: Optional[AVLNode] = self.find(key)  # type: ignore[assignment]
        if node is None:
            return
        if node.left is not None and node.right is not None:
            self._swap_nodes(node, predecessor(node))

        parent: Optional[AVLNode] = node.parent  # type: ignore[assignment]
        child = node.left if node.left is not None else node.right
        diff = 0
        if parent is not None:
            if parent.left is node:
                parent.left = child
                diff = -1
            else:
                parent.right = child
                diff = 1
        else:
            self.root = child
        if child is not None:
            child.parent = parent
        node.parent = node.left = node.right = None

        self._remove_fix(parent, diff)

    def _insert_fix(self, p: AVLNode, n: AVLNode) -> None:
        g: Optional[AVLNode] = p.parent  # type: ignore[assignment]
        if g is None:
            return
        if p is g.left:
            g.balance += 1
            if g.balance == 1:
                self._insert_fix(g, p)
            elif g.balance == 2:
                if n is p.left:
                    self._rotate_right(g)
                    p.balance = g.balance = 0
                else:
                    self._rotate_left(p)
                    self._rotate_right(g)
                    if n.balance == 1:
                        p.balance, g.balance = 0, -1
                    elif n.balance == 0:
                        p.balance, g.balance = 0, 0
                    else:
                        p.balance, g.balance = 1, 0
                    n.balance = 0
        else:
            g.balance -= 1
            if g.balance == -1:
                self._insert_fix(g, p)
            elif g.balance == -2:
                if n is p.right:
                    self._rotate_left(g)
                    p.balance = g.balance = 0
                else:
                    self._rotate_right(p)
                    self._rotate_left(g)
                    if n.balance == -1:
                        p.balance, g.balance = 0, 1
                    elif n.balance == 0:
                        p.balance, g.balance = 0, 0
                    else:
                        p.balance, g.balance = -1, 0
                    n.balance = 0

    def _remove_fix(self, n: Optional[AVLNode], diff: int) -> None:
        """Restore balance after the subtree on one side of ``n`` shrank.

        ``diff`` is -1 when the left subtree lost height, +1 when the right did.
        """
        if n is None or diff == 0:
            return
        p: Optional[AVLNode] = n.parent  # type: ignore[assignment]
        next_diff = 0
        if p is not None:
            next_diff = -1 if n is p.left else 1

        if diff == -1:
            if n.balance == 1:
                n.balance = 0
                self._remove_fix(p, next_diff)
            elif n.balance == 0:
                n.balance = -1
            else:
                c: AVLNode = n.right  # type: ignore[assignment]
                if c.balance == 0:
                    self._rotate_left(n)
                    n.balance, c.balance = -1, 1
                elif c.balance == -1:
                    self._rotate_left(n)
                    n.balance = c.balance = 0
                    self._remove_fix(p, next_diff)
                else:
                    g: AVLNode = c.left  # type: ignore[assignment]
                    self._rotate_right(c)
                    self._rotate_left(n)
                    if g.balance == 1:
                        n.balance, c.balance = 0, -1
                    elif g.balance == 0:
                        n.balance, c.balance = 0, 0
                    else:
                        n.balance, c.balance = 1, 0
                    g.balance = 0
                    self._remove_fix(p, next_diff)
        else:
            if n.balance == -1:
                n.balance = 0
                self._remove_fix(p, next_diff)
            elif n.balance == 0:
                n.balance = 1
            else:
                c = n.left  # type: ignore[assignment]
                if c.balance == 0:
                    self._rotate_right(n)
                    n.balance, c.balance = 1, -1
                elif c.balance == 1:
                    self._rotate_right(n)
                    n.balance = c.balance = 0
                    self._remove_fix(p, next_diff)
                else:
                    g = c.right  # type: ignore[assignment]
                    self._rotate_left(c)
                    self._rotate_right(n)
                    if g.balance == 1:
                        n.balance, c.balance = -1, 0
                    elif g.balance == 0:
                        n.balance, c.balance = 0, 0
                    else:
                        n.balance, c.balance = 0, 1
                    g.balance = 0
                    self._remove_fix(p, next_diff)

    def _swap_nodes(self, n1: Optional[Node], n2: Optional[Node]) -> None:
        super()._swap_nodes(n1, n2)
        if n1 is not None and n2 is not None and n1 is not n2:
            n1.balance, n2.balance = n2.balance, n1.balance  # type: ignore[attr-defined]

    def _replace_in_parent(self, old: Node, new: Node) -> None:
        parent = old.parent
        new.parent = parent
        if parent is None:
            self.root = new
        elif old is parent.left:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, x: Node) -> None:
        y = x.right
        assert y is not None
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        self._replace_in_parent(x, y)
        y.left = x
        x.parent = y

    def _rotate_right(self, x: Node) -> None:
        y = x.left
        assert y is not None
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        self._replace_in_parent(x, y)
        y.right = x
        x.parent = y