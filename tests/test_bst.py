import pytest
from hypothesis import given, strategies as st

from searchtrees.bst import BinarySearchTree, Node, predecessor, successor


def build(keys):
    tree = BinarySearchTree()
    for k in keys:
        tree.insert(k, k * 10)
    return tree


def check_links(tree):
    """Every child points back to its parent and keys obey the search order."""
    def walk(node, lo, hi):
        if node is None:
            return
        assert lo is None or node.key > lo
        assert hi is None or node.key < hi
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node
        walk(node.left, lo, node.key)
        walk(node.right, node.key, hi)

    if tree.root is not None:
        assert tree.root.parent is None
    walk(tree.root, None, None)


def test_sample_program_sequence():
    tree = BinarySearchTree()
    tree.insert("a", 1)
    tree.insert("b", 2)
    assert list(tree) == [("a", 1), ("b", 2)]
    found = tree.find("b")
    assert found is not None and found.item == ("b", 2)
    tree.remove("b")
    assert list(tree) == [("a", 1)]
    assert "b" not in tree


def test_empty_tree():
    tree = BinarySearchTree()
    assert not tree
    assert list(tree) == []
    assert tree.smallest() is None
    assert tree.find(1) is None
    assert tree.is_balanced()


def test_insert_overwrites_value():
    tree = build([5, 3, 8])
    tree.insert(3, "new")
    assert tree[3] == "new"
    assert [k for k, _ in tree] == [3, 5, 8]


def test_getitem_missing_raises_keyerror():
    tree = build([1, 2])
    with pytest.raises(KeyError) as excinfo:
        tree[7]
    assert excinfo.type is KeyError
    assert list(tree) == [(1, 10), (2, 20)]
    assert tree[1] == 10


def test_contains_and_bool():
    tree = build([4])
    assert 4 in tree
    assert 5 not in tree
    assert bool(tree)


def test_smallest():
    tree = build([5, 3, 8, 1, 4])
    assert tree.smallest().key == 1


def test_remove_missing_is_noop():
    tree = build([5, 3, 8])
    tree.remove(42)
    assert [k for k, _ in tree] == [3, 5, 8]


def test_remove_leaf():
    tree = build([5, 3, 8])
    tree.remove(8)
    assert [k for k, _ in tree] == [3, 5]
    assert tree.root.right is None
    check_links(tree)


def test_remove_one_child():
    tree = build([5, 3, 1])
    tree.remove(3)
    assert tree.root.left.key == 1
    assert tree.root.left.parent is tree.root
    check_links(tree)


def test_remove_two_children_uses_predecessor():
    tree = build([5, 3, 8, 1, 4])
    tree.remove(5)
    assert tree.root.key == 4
    assert [k for k, _ in tree] == [1, 3, 4, 8]
    check_links(tree)


def test_remove_root_only():
    tree = build([5])
    tree.remove(5)
    assert tree.root is None
    assert not tree


def test_clear():
    tree = build([5, 3, 8])
    tree.clear()
    assert list(tree) == []
    assert not tree


def test_is_balanced():
    assert build([2, 1, 3]).is_balanced()
    assert build([1, 2]).is_balanced()
    assert not build([1, 2, 3]).is_balanced()


def test_predecessor_and_successor():
    tree = build([5, 3, 8, 1, 4, 7, 9])
    node = tree.find(4)
    assert successor(node).key == 5
    assert predecessor(node).key == 3
    assert predecessor(tree.find(1)) is None
    assert successor(tree.find(9)) is None
    assert successor(None) is None
    assert predecessor(None) is None


def test_node_item_and_leaf():
    node = Node("k", "v")
    assert node.item == ("k", "v")
    assert node.is_leaf
    assert node.parent is None


def test_swap_parent_and_child():
    tree = build([5, 3])
    root, child = tree.root, tree.root.left
    tree._swap_nodes(root, child)
    assert tree.root is child
    assert child.left is root
    assert root.parent is child


@given(st.lists(st.integers(min_value=-50, max_value=50)))
def test_iteration_matches_sorted_dict(keys):
    tree = BinarySearchTree()
    expected = {}
    for i, k in enumerate(keys):
        tree.insert(k, i)
        expected[k] = i
    assert list(tree) == sorted(expected.items())
    check_links(tree)


@given(
    st.lists(st.integers(min_value=0, max_value=30), unique=True),
    st.lists(st.integers(min_value=0, max_value=30)),
)
def test_remove_keeps_order_and_links(keys, removals):
    tree = build(keys)
    remaining = set(keys)
    for k in removals:
        tree.remove(k)
        remaining.discard(k)
        check_links(tree)
    assert [k for k, _ in tree] == sorted(remaining)
    for k in remaining:
        assert tree[k] == k * 10


@given(st.lists(st.integers(min_value=0, max_value=40), unique=True, min_size=1))
def test_successor_predecessor_inverse(keys):
    tree = build(keys)
    for node in tree.nodes():
        nxt = successor(node)
        if nxt is not None:
            assert predecessor(nxt) is node