"""A threaded AVL tree whose nodes are also linked in sorted order.

Nodes are created by the caller and handed to the tree, so that a node
can be reused across several insertions.  The order of items is given
by a comparison function returning a negative number, zero or a
positive number, like ``cmp``.  A node that has been unlinked keeps its
``prev`` and ``next`` links, which lets a caller keep walking from it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional

Compare = Callable[[Any, Any], int]


class AvlNode:
    """A tree node holding one item."""

    __slots__ = ("item", "prev", "next", "parent", "left", "right", "depth")

    def __init__(self, item: Any = None) -> None:
        self.item = item
        self.prev: Optional[AvlNode] = None
        self.next: Optional[AvlNode] = None
        self.parent: Optional[AvlNode] = None
        self.left: Optional[AvlNode] = None
        self.right: Optional[AvlNode] = None
        self.depth = 1

    def __repr__(self) -> str:
        return f"AvlNode({self.item!r})"


def _depth(node: Optional[AvlNode]) -> int:
    return node.depth if node is not None else 0


def _calc_depth(node: AvlNode) -> int:
    return max(_depth(node.left), _depth(node.right)) + 1


def _check_balance(node: AvlNode) -> int:
    d = _depth(node.right) - _depth(node.left)
    return -1 if d < -1 else 1 if d > 1 else 0


def _reset(node: AvlNode) -> None:
    node.left = node.right = None
    node.depth = 1


class AvlTree:
    """Balanced binary tree with a sorted doubly linked list of its nodes."""

    def __init__(self, cmp: Compare) -> None:
        self.cmp = cmp
        self.head: Optional[AvlNode] = None
        self.tail: Optional[AvlNode] = None
        self.top: Optional[AvlNode] = None

    def items(self) -> Iterator[Any]:
        """Yield the items from first to last."""
        node = self.head
        while node is not None:
            yield node.item
            node = node.next

    def search_closest(self, item: Any) -> tuple[Optional[AvlNode], int]:
        """Find the node where ``item`` is or would be attached.

        Returns ``(node, c)`` where ``c`` is -1 if ``item`` goes before
        ``node``, 1 if after it and 0 if it compares equal.  An empty
        tree gives ``(None, 0)``.
        """
        node = self.top
        if node is None:
            return None, 0
        while True:
            c = self.cmp(item, node.item)
            if c < 0:
                if node.left is None:
                    return node, -1
                node = node.left
            elif c > 0:
                if node.right is None:
                    return node, 1
                node = node.right
            else:
                return node, 0

    def clear(self) -> None:
        """Forget all nodes."""
        self.top = self.head = self.tail = None

    def insert_top(self, node: AvlNode) -> AvlNode:
        """Make ``node`` the only node of the tree."""
        _reset(node)
        node.prev = node.next = node.parent = None
        self.head = self.tail = self.top = node
        return node

    def insert_before(self, node: Optional[AvlNode], newnode: AvlNode) -> AvlNode:
        """Insert ``newnode`` just before ``node`` (at the end if None)."""
        if node is None:
            if self.tail is not None:
                return self.insert_after(self.tail, newnode)
            return self.insert_top(newnode)
        if node.left is not None:
            return self.insert_after(node.prev, newnode)

        _reset(newnode)
        newnode.next = node
        newnode.parent = node
        newnode.prev = node.prev
        if node.prev is not None:
            node.prev.next = newnode
        else:
            self.head = newnode
        node.prev = newnode
        node.left = newnode
        self._rebalance(node)
        return newnode

    def insert_after(self, node: Optional[AvlNode], newnode: AvlNode) -> AvlNode:
        """Insert ``newnode`` just after ``node`` (at the start if None)."""
        if node is None:
            if self.head is not None:
                return self.insert_before(self.head, newnode)
            return self.insert_top(newnode)
        if node.right is not None:
            return self.insert_before(node.next, newnode)

        _reset(newnode)
        newnode.prev = node
        newnode.parent = node
        newnode.next = node.next
        if node.next is not None:
            node.next.prev = newnode
        else:
            self.tail = newnode
        node.next = newnode
        node.right = newnode
        self._rebalance(node)
        return newnode

    def unlink(self, node: AvlNode) -> None:
        """Remove ``node`` from the tree, keeping its own ``prev``/``next``."""
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self.head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self.tail = node.prev

        parent = node.parent
        is_left = parent is not None and parent.left is node
        left, right = node.left, node.right

        if left is None:
            self._set_child(parent, is_left, right)
            if right is not None:
                right.parent = parent
            balnode = parent
        elif right is None:
            self._set_child(parent, is_left, left)
            left.parent = parent
            balnode = parent
        else:
            subst = node.prev
            assert subst is not None
            if subst is left:
                balnode = subst
            else:
                balnode = subst.parent
                assert balnode is not None
                balnode.right = subst.left
                if balnode.right is not None:
                    balnode.right.parent = balnode
                subst.left = left
                left.parent = subst
            subst.right = right
            subst.parent = parent
            right.parent = subst
            self._set_child(parent, is_left, subst)

        self._rebalance(balnode)

    def _set_child(
        self, parent: Optional[AvlNode], is_left: bool, child: Optional[AvlNode]
    ) -> None:
        if parent is None:
            self.top = child
        elif is_left:
            parent.left = child
        else:
            parent.right = child

    def _rebalance(self, node: Optional[AvlNode]) -> None:
        while node is not None:
            parent = node.parent
            is_left = parent is not None and parent.left is node
            balance = _check_balance(node)
            if balance == -1:
                child = node.left
                assert child is not None
                if _depth(child.left) >= _depth(child.right):
                    node.left = child.right
                    if node.left is not None:
                        node.left.parent = node
                    child.right = node
                    node.parent = child
                    self._set_child(parent, is_left, child)
                    child.parent = parent
                    node.depth = _calc_depth(node)
                    child.depth = _calc_depth(child)
                else:
                    gchild = child.right
                    assert gchild is not None
                    node.left = gchild.right
                    if node.left is not None:
                        node.left.parent = node
                    child.right = gchild.left
                    if child.right is not None:
                        child.right.parent = child
                    gchild.right = node
                    node.parent = gchild
                    gchild.left = child
                    child.parent = gchild
                    self._set_child(parent, is_left, gchild)
                    gchild.parent = parent
                    node.depth = _calc_depth(node)
                    child.depth = _calc_depth(child)
                    gchild.depth = _calc_depth(gchild)
            elif balance == 1:
                child = node.right
                assert child is not None
                if _depth(child.right) >= _depth(child.left):
                    node.right = child.left
                    if node.right is not None:
                        node.right.parent = node
                    child.left = node
                    node.parent = child
                    self._set_child(parent, is_left, child)
                    child.parent = parent
                    node.depth = _calc_depth(node)
                    child.depth = _calc_depth(child)
                else:
                    gchild = child.left
                    assert gchild is not None
                    node.right = gchild.left
                    if node.right is not None:
                        node.right.parent = node
                    child.left = gchild.right
                    if child.left is not None:
                        child.left.parent = child
                    gchild.left = node
                    node.parent = gchild
                    gchild.right = child
                    child.parent = gchild
                    self._set_child(parent, is_left, gchild)
                    gchild.parent = parent
                    node.depth = _calc_depth(node)
                    child.depth = _calc_depth(child)
                    gchild.depth = _calc_depth(gchild)
            else:
                node.depth = _calc_depth(node)
            node = parent