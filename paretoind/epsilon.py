"""Additive and multiplicative epsilon indicators.

For a minimised objective the difference (or ratio) is ``a - b``
(``a / b``); for a maximised one it is ``b - a`` (``b / a``).  Ignored
objectives contribute nothing.  Lower values are better regardless of
the direction of each objective.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

Points = Sequence[Sequence[float]]


class EpsilonError(ValueError):
    """Raised when the multiplicative indicator is undefined for the input."""


def epsilon_mult(minmax: Sequence[int], points_a: Points, points_b: Points) -> float:
    """Multiplicative epsilon of set A with respect to set B.

    All coordinates must be strictly positive.
    """
    epsilon = 0.0
    for b in points_b:
        epsilon_min = math.inf
        for a in points_a:
            epsilon_max = 0.0
            for sense, a_d, b_d in zip(minmax, a, b):
                if a_d <= 0 or b_d <= 0:
                    raise EpsilonError(
                        "cannot calculate multiplicative epsilon indicator"
                        " with values <= 0"
                    )
                if sense < 0:
                    ratio = a_d / b_d
                elif sense > 0:
                    ratio = b_d / a_d
                else:
                    ratio = 1.0
                epsilon_max = max(epsilon_max, ratio)
            epsilon_min = min(epsilon_min, epsilon_max)
        epsilon = max(epsilon, epsilon_min)
    return epsilon


def epsilon_additive(
    minmax: Sequence[int], points_a: Points, points_b: Points
) -> float:
    """Additive epsilon of set A with respect to set B."""
    epsilon = -math.inf
    for b in points_b:
        epsilon_min = math.inf
        for a in points_a:
            epsilon_max = -math.inf
            for sense, a_d, b_d in zip(minmax, a, b):
                if sense < 0:
                    diff = a_d - b_d
                elif sense > 0:
                    diff = b_d - a_d
                else:
                    diff = 0.0
                epsilon_max = max(epsilon_max, diff)
            epsilon_min = min(epsilon_min, epsilon_max)
        epsilon = max(epsilon, epsilon_min)
    return epsilon


def epsilon_additive_ind(
    minmax: Sequence[int], points_a: Points, points_b: Points
) -> int:
    """Compare two sets with the additive epsilon indicator.

    Returns -1 if A is better than B, 1 if B is better than A and 0
    otherwise.
    """
    eps_ab = epsilon_additive(minmax, points_a, points_b)
    eps_ba = epsilon_additive(minmax, points_b, points_a)
    if eps_ab <= 0 < eps_ba:
        return -1
    if eps_ba <= 0 < eps_ab:
        return 1
    return 0