import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from searchtrees.avl import AVLNode, AVLTree


def _check_node(node, parent):
    """Return the subtree height, asserting links, order and stored balances."""
    if node is None:
        return 0
    assert node.parent is parent
    assert isinstance(node, AVLNode)
    if node.left is not None:
        assert node.left.key < node.key
    if node.right is not None:
        assert node.right.key > node.key
    lh = _check_node(node.left, node)
    rh = _check_node(node.right, node)
    assert node.balance == lh - rh
    assert abs(node.balance) <= 1
    return 1 + max(lh, rh)


def _check_tree(tree):
    _check_node(tree.root, None)
    assert tree.is_balanced()


def test_contents_after_two_inserts():
    tree = AVLTree()
    tree.insert("a", 1)
    tree.insert("b", 2)
    assert list(tree) == [("a", 1), ("b", 2)]
    assert "b" in tree
    tree.remove("b")
    assert list(tree) == [("a", 1)]
    assert "b" not in tree


def test_ascending_inserts_rotate_root():
    tree = AVLTree()
    for k in (1, 2, 3):
        tree.insert(k, str(k))
    assert tree.root.key == 2
    _check_tree(tree)


def test_left_right_case():
    tree = AVLTree()
    for k in (3, 1, 2):
        tree.insert(k, k)
    assert tree.root.key == 2
    assert tree.root.left.key == 1
    assert tree.root.right.key == 3
    _check_tree(tree)


def test_insert_existing_key_overwrites():
    tree = AVLTree()
    tree.insert(5, "x")
    tree.insert(5, "y")
    assert tree[5] == "y"
    assert list(tree) == [(5, "y")]


def test_remove_missing_key_is_noop():
    tree = AVLTree()
    for k in range(10):
        tree.insert(k, k)
    tree.remove(100)
    assert [k for k, _ in tree] == list(range(10))
    _check_tree(tree)


def test_remove_node_with_two_children():
    tree = AVLTree()
    for k in range(1, 8):
        tree.insert(k, k)
    root_key = tree.root.key
    tree.remove(root_key)
    assert root_key not in tree
    assert [k for k, _ in tree] == [k for k in range(1, 8) if k != root_key]
    _check_tree(tree)


def test_remove_all_empties_tree():
    tree = AVLTree()
    for k in range(20):
        tree.insert(k, k)
    for k in range(20):
        tree.remove(k)
        _check_tree(tree)
    assert not tree
    assert list(tree) == []


def test_getitem_missing_raises():
    tree = AVLTree()
    tree.insert(1, 1)
    with pytest.raises(KeyError) as excinfo:
        tree[2]
    assert excinfo.type is KeyError
    assert list(tree) == [(1, 1)]
    assert tree[1] == 1


def test_sequential_inserts_stay_balanced():
    tree = AVLTree()
    for k in range(200):
        tree.insert(k, k)
        _check_tree(tree)
    assert [k for k, _ in tree] == list(range(200))


@settings(max_examples=150, deadline=None)
@given(
    st.lists(st.integers(-50, 50), max_size=60),
    st.lists(st.integers(-50, 50), max_size=60),
)
def test_random_operations_keep_invariants(inserts, removals):
    tree = AVLTree()
    expected = {}
    for k in inserts:
        tree.insert(k, k * 2)
        expected[k] = k * 2
        _check_tree(tree)
    for k in removals:
        tree.remove(k)
        expected.pop(k, None)
        _check_tree(tree)
    assert list(tree) == sorted(expected.items())