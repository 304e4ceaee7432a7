import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from dstructs.rbtree import Color, RBTree


def _check_node(node, low, high):
    """Return the black height of ``node``, asserting red-black and order rules."""
    if node is None:
        return 1
    if low is not None:
        assert node.key > low
    if high is not None:
        assert node.key < high
    if node.color is Color.RED:
        assert node.left is None or node.left.color is Color.BLACK
        assert node.right is None or node.right.color is Color.BLACK
    for child in (node.left, node.right):
        if child is not None:
            assert child.parent is node
    left = _check_node(node.left, low, node.key)
    right = _check_node(node.right, node.key, high)
    assert left == right
    return left + (1 if node.color is Color.BLACK else 0)


def verify_rb_properties(tree):
    if tree.root is None:
        return 0
    assert tree.root.color is Color.BLACK
    assert tree.root.parent is None
    return _check_node(tree.root, None, None)


def _keys(node):
    if node is None:
        return []
    return _keys(node.left) + [node.key] + _keys(node.right)


@pytest.mark.parametrize(
    "inserts",
    [
        [(5, 5)],
        [(5, 5), (3, 3), (7, 7), (1, 1), (9, 9)],
        [(5, 5), (5, 10)],
        [(9, 9), (7, 7), (5, 5), (3, 3), (1, 1)],
        [(1, 1), (3, 3), (5, 5), (7, 7), (9, 9)],
    ],
    ids=["empty tree", "multiple inserts", "duplicate key", "descending", "ascending"],
)
def test_insert(inserts):
    tree = RBTree(False)
    for key, value in inserts:
        tree.insert(key, value)
    expected = dict(inserts)
    for key, value in expected.items():
        assert tree.search(key).value == value
    assert _keys(tree.root) == sorted(expected)
    assert verify_rb_properties(tree) >= 1


def test_search():
    tree = RBTree(False)
    for key in (5, 3, 7):
        tree.insert(key, key)
    assert tree.search(5).value == 5
    assert tree.search(5).key == 5
    with pytest.raises(KeyError):
        tree.search(4)
    assert 4 not in tree
    assert 3 in tree


def test_search_empty_tree():
    with pytest.raises(KeyError):
        RBTree(False).search(1)


@pytest.mark.parametrize(
    "setup, delete, present",
    [
        ([5, 3, 7], 3, [5, 7]),
        ([5, 3, 7], 5, [3, 7]),
        ([5, 3, 7, 6, 8], 7, [3, 5, 6, 8]),
        ([5], 10, [5]),
    ],
    ids=["leaf", "root", "two children", "non-existent key"],
)
def test_delete(setup, delete, present):
    tree = RBTree(False)
    for key in setup:
        tree.insert(key, key)
    tree.delete(delete)
    assert delete not in tree
    for key in present:
        assert tree.search(key).value == key
    assert _keys(tree.root) == sorted(present)
    verify_rb_properties(tree)


def test_delete_everything_leaves_empty_tree():
    tree = RBTree(False)
    for key in range(10):
        tree.insert(key, key)
    for key in range(10):
        tree.delete(key)
    assert tree.root is None
    assert 0 not in tree


def test_random_operations_keep_invariants():
    rng = random.Random(1234)
    tree = RBTree(False)
    reference = {}
    for _ in range(2000):
        key = rng.randrange(200)
        if rng.random() < 0.6:
            tree.insert(key, key * 2)
            reference[key] = key * 2
        else:
            tree.delete(key)
            reference.pop(key, None)
        verify_rb_properties(tree)
    assert _keys(tree.root) == sorted(reference)
    for key, value in reference.items():
        assert tree.search(key).value == value


def test_concurrent_insert():
    tree = RBTree(True)
    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(lambda i: tree.insert(i, f"value-{i}"), range(1000)))
    for i in range(1000):
        assert tree.search(i).value == f"value-{i}"
    verify_rb_properties(tree)


def test_concurrent_delete():
    tree = RBTree(True)
    for i in range(20):
        tree.insert(i, f"value-{i}")
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(tree.delete, range(10)))
    for i in range(20):
        assert (i in tree) == (i >= 10)
    verify_rb_properties(tree)


def test_concurrent_search():
    tree = RBTree(True)
    for i in range(1000):
        tree.insert(i, f"value-{i}")
    with ThreadPoolExecutor(max_workers=16) as pool:
        found = list(pool.map(lambda i: tree.search(i).value, range(1000)))
    assert found == [f"value-{i}" for i in range(1000)]


def test_concurrent_modifications():
    tree = RBTree(True)

    def work(i):
        tree.insert(i, f"value-{i}")
        tree.delete(i)
        tree.insert(i + 100, f"value-{i + 100}")

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(work, range(100)))
    assert all(i not in tree for i in range(100))
    assert all(tree.search(i).value == f"value-{i}" for i in range(100, 200))
    verify_rb_properties(tree)