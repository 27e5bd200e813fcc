"""Generational distance indicators: GD, IGD, GD_p, IGD_p, IGD+ and the
averaged Hausdorff distance.

Distances are Euclidean over the objectives that are not ignored in
``minmax``.  An empty first set gives infinity.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

Points = Sequence[Sequence[float]]


def _gd_common(
    minmax: Sequence[int],
    points_a: Points,
    points_r: Points,
    plus: bool,
    psize: bool,
    p: int,
) -> float:
    if p < 1:
        raise ValueError("exponent p must be a positive integer")
    if not points_a:
        return math.inf

    total = 0.0
    for a in points_a:
        min_dist = math.inf
        for r in points_r:
            dist = 0.0
            for sense, a_d, r_d in zip(minmax, a, r):
                if sense == 0:
                    continue
                if plus:
                    diff = max((r_d - a_d) if sense < 0 else (a_d - r_d), 0.0)
                else:
                    diff = r_d - a_d
                dist += diff * diff
            min_dist = min(min_dist, dist)
        min_dist = math.sqrt(min_dist)
        total += min_dist if p == 1 else min_dist**p

    size = len(points_a)
    if p == 1:
        return total / size
    if psize:
        return (total / size) ** (1.0 / p)
    return total ** (1.0 / p) / size


def gd(minmax: Sequence[int], points: Points, reference: Points) -> float:
    """Classical generational distance of ``points`` to ``reference``."""
    return _gd_common(minmax, points, reference, plus=False, psize=False, p=1)


def igd(minmax: Sequence[int], points: Points, reference: Points) -> float:
    """Classical inverted generational distance."""
    return _gd_common(minmax, reference, points, plus=False, psize=False, p=1)


def gd_p(minmax: Sequence[int], points: Points, reference: Points, p: int) -> float:
    """GD_p: generational distance averaged with exponent ``p``."""
    return _gd_common(minmax, points, reference, plus=False, psize=True, p=p)


def igd_p(minmax: Sequence[int], points: Points, reference: Points, p: int) -> float:
    """IGD_p: inverted generational distance averaged with exponent ``p``."""
    return _gd_common(minmax, reference, points, plus=False, psize=True, p=p)


def igd_plus(minmax: Sequence[int], points: Points, reference: Points) -> float:
    """IGD+: inverted generational distance counting only dominated parts."""
    return _gd_common(minmax, reference, points, plus=True, psize=True, p=1)


def avg_hausdorff_dist(
    minmax: Sequence[int], points: Points, reference: Points, p: int
) -> float:
    """Averaged Hausdorff distance, the larger of GD_p and IGD_p."""
    return max(
        gd_p(minmax, points, reference, p),
        igd_p(minmax, points, reference, p),
    )