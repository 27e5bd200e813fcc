"""Exclusive hypervolume contribution of each point of a set."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence

from paretoind.hv import hypervolume

_TOLERANCE = math.sqrt(sys.float_info.epsilon)


def hv_contributions(
    points: Sequence[Sequence[float]], ref: Sequence[float]
) -> list[float]:
    """Hypervolume lost by removing each point in turn.

    Contributions smaller than the square root of machine epsilon are
    reported as zero.  Dominated, duplicated and out-of-bounds points
    contribute zero.
    """
    pts = [tuple(float(value) for value in point) for point in points]
    reference = tuple(float(value) for value in ref)
    total = hypervolume(pts, reference)
    contributions = []
    for i in range(len(pts)):
        # Moving a point onto the reference point removes it from the volume.
        without = pts[:i] + [reference] + pts[i + 1:]
        value = total - hypervolume(without, reference)
        if abs(value) < _TOLERANCE:
            value = 0.0
        if value < 0:
            raise ArithmeticError(
                f"negative hypervolume contribution {value} for point {pts[i]}"
            )
        contributions.append(value)
    return contributions