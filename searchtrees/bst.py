"""An unbalanced binary search tree with parent-linked nodes."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple


class Node:
    """A key/value node linked to its parent and two children."""

    __slots__ = ("key", "value", "parent", "left", "right")

    def __init__(self, key: Any, value: Any, parent: Optional["Node"] = None) -> None:
        self.key = key
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    @property
    def item(self) -> Tuple[Any, Any]:
        """The (key, value) pair held by this node."""
        return (self.key, self.value)

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r}, {self.value!r})"


def predecessor(node: Optional[Node]) -> Optional[Node]:
    """Return the in-order predecessor of ``node``, or None if there is none."""
    if node is None:
        return None
    if node.left is not None:
        current = node.left
        while current.right is not None:
            current = current.right
        return current
    current = node
    parent = current.parent
    while parent is not None and current is parent.left:
        current, parent = parent, parent.parent
    return parent


def successor(node: Optional[Node]) -> Optional[Node]:
    """Return the in-order successor of ``node``, or None if there is none."""
    if node is None:
        return None
    if node.right is not None:
        current = node.right
        while current.left is not None:
            current = current.left
        return current
    current = node
    parent = current.parent
    while parent is not None and current is parent.right:
        current, parent = parent, parent.parent
    return parent


def _height_if_balanced(node: Optional[Node]) -> int:
    """Height of the subtree, or -1 if any node in it is out of balance."""
    if node is None:
        return 0
    left = _height_if_balanced(node.left)
    if left == -1:
        return -1
    right = _height_if_balanced(node.right)
    if right == -1:
        return -1
    if abs(left - right) > 1:
        return -1
    return 1 + max(left, right)


class BinarySearchTree:
    """A binary search tree mapping keys to values; it does not rebalance."""

    node_class = Node

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``, overwriting the value if the key exists."""
        if self.root is None:
            self.root = self.node_class(key, value, None)
            return
        current: Optional[Node] = self.root
        parent = self.root
        while current is not None:
            parent = current
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                current.value = value
                return
        new_node = self.node_class(key, value, parent)
        if key < parent.key:
            parent.left = new_node
        else:
            parent.right = new_node

    def remove(self, key: Any) -> None:
        """Remove ``key`` if present; a node with two children is first swapped
        with its predecessor."""
        target = self.find(key)
        if target is None:
            return
        if target.left is not None and target.right is not None:
            self._swap_nodes(target, predecessor(target))
        child = target.left if target.left is not None else target.right
        parent = target.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is target:
            parent.left = child
        else:
            parent.right = child
        target.parent = target.left = target.right = None

    def clear(self) -> None:
        """Remove every entry."""
        self.root = None

    def is_balanced(self) -> bool:
        """True if, at every node, the subtree heights differ by at most one."""
        return _height_if_balanced(self.root) != -1

    def find(self, key: Any) -> Optional[Node]:
        """Return the node holding ``key``, or None."""
        current = self.root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current
        return None

    def smallest(self) -> Optional[Node]:
        """Return the node with the smallest key, or None for an empty tree."""
        current = self.root
        if current is None:
            return None
        while current.left is not None:
            current = current.left
        return current

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes in key order."""
        node = self.smallest()
        while node is not None:
            yield node
            node = successor(node)

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        for node in self.nodes():
            yield node.item

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __getitem__(self, key: Any) -> Any:
        node = self.find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __bool__(self) -> bool:
        return self.root is not None

    def _swap_nodes(self, n1: Optional[Node], n2: Optional[Node]) -> None:
        """Exchange the positions of two nodes in the tree, keeping their items."""
        if n1 is n2 or n1 is None or n2 is None:
            return
        n1p, n1r, n1l = n1.parent, n1.right, n1.left
        n1_is_left = n1p is not None and n1 is n1p.left
        n2p, n2r, n2l = n2.parent, n2.right, n2.left
        n2_is_left = n2p is not None and n2 is n2p.left

        n1.parent, n2.parent = n2.parent, n1.parent
        n1.left, n2.left = n2.left, n1.left
        n1.right, n2.right = n2.right, n1.right

        if n1r is n2:
            n2.right = n1
            n1.parent = n2
        elif n2r is n1:
            n1.right = n2
            n2.parent = n1
        elif n1l is n2:
            n2.left = n1
            n1.parent = n2
        elif n2l is n1:
            n1.left = n2
            n2.parent = n1

        if n1p is not None and n1p is not n2:
            if n1_is_left:
                n1p.left = n2
            else:
                n1p.right = n2
        if n1r is not None and n1r is not n2:
            n1r.parent = n2
        if n1l is not None and n1l is not n2:
            n1l.parent = n2

        if n2p is not None and n2p is not n1:
            if n2_is_left:
                n2p.left = n1
            else:
                n2p.right = n1
        if n2r is not None and n2r is not n1:
            n2r.parent = n1
        if n2l is not None and n2l is not n1:
            n2l.parent = n1

        if self.root is n1:
            self.root = n2
        elif self.root is n2:
            self.root = n1