import random

import pytest

from paretoind.avltree import AvlNode, AvlTree


def _cmp(a, b):
    return (a > b) - (a < b)


def _insert(tree, value):
    node = AvlNode(value)
    closest, c = tree.search_closest(value)
    if closest is None:
        tree.insert_top(node)
    elif c < 0:
        tree.insert_before(closest, node)
    else:
        tree.insert_after(closest, node)
    return node


def _in_order(node):
    if node is None:
        return []
    return _in_order(node.left) + [node.item] + _in_order(node.right)


def _check_subtree(node, parent):
    if node is None:
        return 0
    assert node.parent is parent
    left = _check_subtree(node.left, node)
    right = _check_subtree(node.right, node)
    assert abs(left - right) <= 1
    assert node.depth == max(left, right) + 1
    return node.depth


def _check(tree):
    _check_subtree(tree.top, None)
    listed = list(tree.items())
    assert listed == _in_order(tree.top)
    assert listed == sorted(listed)
    backwards = []
    node = tree.tail
    while node is not None:
        backwards.append(node.item)
        node = node.prev
    assert backwards == listed[::-1]
    return listed


def test_search_closest_on_empty_tree():
    tree = AvlTree(_cmp)
    assert tree.search_closest(3) == (None, 0)


def test_insert_top_sets_all_ends():
    tree = AvlTree(_cmp)
    node = tree.insert_top(AvlNode(7))
    assert tree.top is node and tree.head is node and tree.tail is node
    assert list(tree.items()) == [7]


def test_insert_before_none_on_empty_tree():
    tree = AvlTree(_cmp)
    node = tree.insert_before(None, AvlNode(1))
    assert tree.top is node
    tree.insert_after(None, AvlNode(0))
    assert list(tree.items()) == [0, 1]


@pytest.mark.parametrize("values", [list(range(50)), list(range(50, 0, -1))])
def test_monotone_inserts_stay_balanced(values):
    tree = AvlTree(_cmp)
    for value in values:
        _insert(tree, value)
    assert _check(tree) == sorted(values)
    assert tree.top.depth <= 7


def test_random_inserts_sorted_and_balanced():
    rng = random.Random(12)
    values = [rng.random() for _ in range(200)]
    tree = AvlTree(_cmp)
    for value in values:
        _insert(tree, value)
    assert _check(tree) == sorted(values)


def test_search_closest_finds_equal_item():
    tree = AvlTree(_cmp)
    nodes = {v: _insert(tree, v) for v in (5, 2, 8, 1, 9)}
    node, c = tree.search_closest(8)
    assert c == 0
    assert node is nodes[8]


def test_unlink_keeps_invariants():
    rng = random.Random(3)
    values = list(range(100))
    rng.shuffle(values)
    tree = AvlTree(_cmp)
    nodes = [_insert(tree, v) for v in values]
    rng.shuffle(nodes)
    remaining = set(values)
    for node in nodes[:70]:
        tree.unlink(node)
        remaining.discard(node.item)
        assert _check(tree) == sorted(remaining)


def test_unlinked_node_keeps_prev_link():
    tree = AvlTree(_cmp)
    nodes = {v: _insert(tree, v) for v in range(10)}
    tree.unlink(nodes[5])
    assert nodes[5].prev is nodes[4]
    assert nodes[4].next is nodes[6]
    assert 5 not in list(tree.items())


def test_unlink_all_empties_tree():
    tree = AvlTree(_cmp)
    nodes = [_insert(tree, v) for v in range(8)]
    for node in nodes:
        tree.unlink(node)
    assert tree.top is None and tree.head is None and tree.tail is None
    assert list(tree.items()) == []


def test_clear_and_reuse_nodes():
    tree = AvlTree(_cmp)
    nodes = [_insert(tree, v) for v in range(6)]
    tree.clear()
    assert list(tree.items()) == []
    tree.insert_top(nodes[3])
    tree.insert_after(nodes[3], nodes[4])
    tree.insert_before(nodes[3], nodes[1])
    assert _check(tree) == [1, 3, 4]