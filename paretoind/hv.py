"""Hypervolume indicator by dimension sweep.

The hypervolume of a set of points (all objectives minimised) is the
volume of the region dominated by the set and bounded above by a
reference point.  Points that do not strictly dominate the reference
point contribute nothing.  Three objectives are handled with a balanced
tree sweep, two with a simple staircase sweep, and higher dimensions
recurse down to three.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from paretoind.avltree import AvlNode, AvlTree

_STOP_DIMENSION = 2


class _Node:
    """A point linked into one circular sorted list per objective."""

    __slots__ = ("x", "next", "prev", "tnode", "ignore", "area", "vol")

    def __init__(self, x: Optional[tuple[float, ...]], d: int) -> None:
        self.x = x
        self.next: list[_Node] = [self] * d
        self.prev: list[_Node] = [self] * d
        self.tnode = AvlNode(x)
        self.ignore = 0
        self.area = [0.0] * d
        self.vol = [0.0] * d


def _compare_tree_asc(x1: Sequence[float], x2: Sequence[float]) -> int:
    if x1[1] > x2[1]:
        return -1
    if x1[1] < x2[1]:
        return 1
    return -1 if x1[0] >= x2[0] else 1


def _setup_lists(points: list[tuple[float, ...]], d: int) -> _Node:
    head = _Node(None, d)
    nodes = [_Node(point, d) for point in points]
    for j in reversed(range(d)):
        ordered = sorted(nodes, key=lambda node: node.x[j])  # type: ignore[index]
        previous = head
        for node in ordered:
            previous.next[j] = node
            node.prev[j] = previous
            previous = node
        previous.next[j] = head
        head.prev[j] = previous
    return head


def _unlink_all(node: _Node, d: int) -> None:
    for i in range(d):
        node.next[i].prev[i] = node.prev[i]
        node.prev[i].next[i] = node.next[i]


def _filter(head: _Node, d: int, n: int, ref: Sequence[float]) -> int:
    """Drop points that do not strictly dominate ``ref``; return how many remain."""
    for i in range(d):
        aux = head.prev[i]
        for _ in range(n):
            if aux.x[i] < ref[i]:  # type: ignore[index]
                break
            _unlink_all(aux, d)
            aux = aux.prev[i]
            n -= 1
    return n


class _Sweep:
    def __init__(self, head: _Node, ref: Sequence[float], d: int) -> None:
        self.head = head
        self.ref = ref
        self.tree = AvlTree(_compare_tree_asc)
        self.bound = [-sys.float_info.max] * d

    def _delete(self, node: _Node, dim: int) -> None:
        bound = self.bound
        for i in range(_STOP_DIMENSION, dim):
            node.prev[i].next[i] = node.next[i]
            node.next[i].prev[i] = node.prev[i]
            if bound[i] > node.x[i]:  # type: ignore[index]
                bound[i] = node.x[i]  # type: ignore[index]

    def _reinsert(self, node: _Node, dim: int) -> None:
        bound = self.bound
        for i in range(_STOP_DIMENSION, dim):
            node.prev[i].next[i] = node
            node.next[i].prev[i] = node
            if bound[i] > node.x[i]:  # type: ignore[index]
                bound[i] = node.x[i]  # type: ignore[index]

    def _update_area(self, p1: _Node, dim: int, c: int) -> None:
        if p1.ignore >= dim:
            p1.area[dim] = p1.prev[dim].area[dim]
        else:
            p1.area[dim] = self.volume(dim - 1, c)
            if p1.area[dim] <= p1.prev[dim].area[dim]:
                p1.ignore = dim

    def volume(self, dim: int, c: int) -> float:
        if dim > _STOP_DIMENSION:
            return self._volume_general(dim, c)
        if dim == 2:
            return self._volume_3d(c)
        if dim == 1:
            return self._volume_2d()
        return self.ref[0] - self.head.next[0].x[0]  # type: ignore[index]

    def _volume_general(self, dim: int, c: int) -> float:
        head, ref, bound = self.head, self.ref, self.bound
        p0 = head
        p1 = head.prev[dim]
        hyperv = 0.0

        pp = p1
        while pp.x is not None:
            if pp.ignore < dim:
                pp.ignore = 0
            pp = pp.prev[dim]

        # Drop points above the bound; of points on the bound keep only one.
        while c > 1 and (
            p1.x[dim] > bound[dim]  # type: ignore[index]
            or p1.prev[dim].x[dim] >= bound[dim]  # type: ignore[index]
        ):
            p0 = p1
            self._delete(p0, dim)
            p1 = p0.prev[dim]
            c -= 1

        if c > 1:
            below = p1.prev[dim]
            hyperv = below.vol[dim] + below.area[dim] * (
                p1.x[dim] - below.x[dim]  # type: ignore[index]
            )
            p1.vol[dim] = hyperv
        else:
            p1.area[0] = 1.0
            for i in range(1, dim + 1):
                p1.area[i] = p1.area[i - 1] * (ref[i - 1] - p1.x[i - 1])  # type: ignore[index]
            p1.vol[dim] = 0.0
        self._update_area(p1, dim, c)

        while p0.x is not None:
            hyperv += p1.area[dim] * (p0.x[dim] - p1.x[dim])  # type: ignore[index]
            bound[dim] = p0.x[dim]
            self._reinsert(p0, dim)
            c += 1
            p1 = p0
            p0 = p0.next[dim]
            p1.vol[dim] = hyperv
            self._update_area(p1, dim, c)

        hyperv += p1.area[dim] * (ref[dim] - p1.x[dim])  # type: ignore[index]
        return hyperv

    def _volume_3d(self, c: int) -> float:
        head, ref, tree = self.head, self.ref, self.tree
        pp = head.next[2]
        x = pp.x
        assert x is not None
        hypera = (ref[0] - x[0]) * (ref[1] - x[1])
        if c == 1:
            height = ref[2] - x[2]
        else:
            height = pp.next[2].x[2] - x[2]  # type: ignore[index]
        hyperv = hypera * height

        if pp.next[2].x is None:
            return hyperv

        tree.insert_top(pp.tnode)
        pp = pp.next[2]
        while True:
            x = pp.x
            assert x is not None
            if pp is head.prev[2]:
                height = ref[2] - x[2]
            else:
                height = pp.next[2].x[2] - x[2]  # type: ignore[index]

            if pp.ignore >= 2:
                hyperv += hypera * height
            else:
                tnode, side = tree.search_closest(x)
                assert tnode is not None
                if side <= 0:
                    nxt_ip = tnode.item
                    tnode = tnode.prev
                else:
                    nxt_ip = tnode.next.item if tnode.next is not None else ref

                if nxt_ip[0] > x[0]:
                    tree.insert_after(tnode, pp.tnode)
                    if tnode is not None:
                        prv_ip = tnode.item
                        if prv_ip[0] > x[0]:
                            tnode = pp.tnode.prev
                            assert tnode is not None
                            # The dominated point with the highest first coordinate.
                            cur_ip = tnode.item
                            while tnode.prev is not None:
                                prv_ip = tnode.prev.item
                                hypera -= (prv_ip[1] - cur_ip[1]) * (
                                    nxt_ip[0] - cur_ip[0]
                                )
                                if prv_ip[0] < x[0]:
                                    break
                                cur_ip = prv_ip
                                tree.unlink(tnode)
                                tnode = tnode.prev
                            tree.unlink(tnode)
                            if tnode.prev is None:
                                hypera -= (ref[1] - cur_ip[1]) * (
                                    nxt_ip[0] - cur_ip[0]
                                )
                                prv_ip = ref
                    else:
                        prv_ip = ref
                    hypera += (prv_ip[1] - x[1]) * (nxt_ip[0] - x[0])
                else:
                    pp.ignore = 2

                if height > 0:
                    hyperv += hypera * height

            pp = pp.next[2]
            if pp.x is None:
                break

        tree.clear()
        return hyperv

    def _volume_2d(self) -> float:
        head, ref = self.head, self.ref
        p1 = head.next[1]
        hypera = p1.x[0]  # type: ignore[index]
        hyperv = 0.0
        p0 = p1.next[1]
        while p0.x is not None:
            hyperv += (ref[0] - hypera) * (p0.x[1] - p1.x[1])  # type: ignore[index]
            if p0.x[0] < hypera:
                hypera = p0.x[0]
            p1 = p0
            p0 = p1.next[1]
        hyperv += (ref[0] - hypera) * (ref[1] - p1.x[1])  # type: ignore[index]
        return hyperv


def hypervolume(points: Sequence[Sequence[float]], ref: Sequence[float]) -> float:
    """Hypervolume dominated by ``points`` and bounded by ``ref`` (minimisation).

    Every point must have as many coordinates as ``ref``.
    """
    pts = [tuple(float(value) for value in point) for point in points]
    if not pts:
        return 0.0
    reference = tuple(float(value) for value in ref)
    d = len(reference)
    if d == 0:
        raise ValueError("reference point must have at least one objective")
    for point in pts:
        if len(point) != d:
            raise ValueError(
                f"point {point} has {len(point)} objectives, expected {d}"
            )

    head = _setup_lists(pts, d)
    n = _filter(head, d, len(pts), reference)
    if n == 0:
        return 0.0
    if n == 1:
        only = head.next[0].x
        assert only is not None
        volume = 1.0
        for r, v in zip(reference, only):
            volume *= r - v
        return volume
    return _Sweep(head, reference, d).volume(d - 1, n)