# searchtrees

Ordered key/value maps backed by binary search trees, with no
dependencies outside the standard library.

- `searchtrees.bst.BinarySearchTree`: an unbalanced binary search tree,
  plus the module-level helpers `predecessor(node)` and `successor(node)`.
- `searchtrees.avl.AVLTree`: the same interface, kept height-balanced
  on every insert and remove.
- `searchtrees.equal_paths.equal_paths`: checks whether every leaf of a
  simple binary tree lies at the same depth.
- `searchtrees.pretty`: draws the top levels of a tree as text.
- `searchtrees.cli`: the `searchtrees` command, a short demonstration.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the trees

```python
from searchtrees.avl import AVLTree

tree = AVLTree()
for key, value in [("c", 3), ("a", 1), ("b", 2)]:
    tree.insert(key, value)

tree.insert("a", 10)        # an existing key has its value replaced
print("b" in tree)          # True
print(tree["a"])            # 10
print(list(tree))           # [('a', 10), ('b', 2), ('c', 3)]
print(tree.is_balanced())   # True

tree.remove("b")            # removing a missing key does nothing
tree.clear()
print(bool(tree))           # False
```

`BinarySearchTree` works the same way but does no rebalancing, so
inserting keys in sorted order gives a tree that `is_balanced()`
reports as unbalanced.

Iterating over a tree yields `(key, value)` pairs in ascending key
order; `tree.nodes()` yields the nodes themselves in the same order.
`tree.find(key)` returns the node holding a key, or `None`, and
`tree.smallest()` returns the node with the smallest key, or `None`
for an empty tree. Each node has `key`, `value`, `parent`, `left`
and `right` attributes and an `item` property giving the
`(key, value)` pair; AVL nodes also carry a `balance` (left height
minus right height).

Looking up a key that is not in the tree with `tree[key]` raises
`KeyError`. When a node with two children is removed, it is first
swapped with its in-order predecessor.

Keys may be any values that support `<` and `>` between each other.

## Equal leaf depths

```python
from searchtrees.equal_paths import Node, equal_paths

root = Node(1, Node(2), Node(3))
print(equal_paths(root))    # True

root = Node(1, Node(2, None, Node(4)), Node(3))
print(equal_paths(root))    # False
```

A single node, and `None`, count as having equal paths.

## Drawing a tree

`searchtrees.pretty.render(tree, root)` returns a text drawing of the
subtree at `root`, up to six levels deep; deeper levels are left out
with a note saying so. Each node appears as a numbered box such as
`[01]`, and a legend below the drawing maps the numbers to the keys
and values, one line each, like `[01] -> (a, 1)`. For an empty
subtree the result is `<empty tree>`.

`searchtrees.pretty.print_tree(tree, root, file)` writes the same
drawing, followed by a blank line, to an open text file; `file`
defaults to standard output.

## Command line

```
searchtrees [bst | equal-paths | all]
```

With no argument, or with `all`, both demonstrations run.

`bst` fills a plain tree and then an AVL tree with two entries,
lists their contents, looks a key up and removes it:

```
Binary Search Tree contents:
a 1
b 2
Found b
Erasing b

AVLTree contents:
a 1
b 2
Found b
Erasing b
```

`equal-paths` reports `equal_paths` for five sample trees as 1 or 0:

```
Test1: 1
Test2: 1
Test3: 1
Test4: 1
Test5: 0
```

## What it does not do

The trees live in memory only: there is no saving to or loading
from files. The command takes no input of its own; it only runs the
fixed demonstrations above.