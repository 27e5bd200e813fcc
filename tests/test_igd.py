import math

import pytest

from paretoind.igd import (
    avg_hausdorff_dist,
    gd,
    gd_p,
    igd,
    igd_p,
    igd_plus,
)

MIN2 = (-1, -1)
POINTS = [(1.0, 5.0), (2.0, 3.0), (4.0, 1.5)]
REFERENCE = [(0.5, 4.0), (1.5, 2.5), (3.0, 1.0), (5.0, 0.5)]


def test_gd_single_point_distance():
    assert gd(MIN2, [(3.0, 4.0)], [(0.0, 0.0)]) == pytest.approx(5.0)


def test_identical_sets_have_zero_distance():
    for func in (gd, igd, igd_plus):
        assert func(MIN2, REFERENCE, REFERENCE) == 0.0
    assert avg_hausdorff_dist(MIN2, REFERENCE, REFERENCE, 2) == 0.0


def test_empty_points_give_infinity():
    assert gd(MIN2, [], REFERENCE) == math.inf
    assert igd(MIN2, REFERENCE, []) == math.inf


def test_igd_is_gd_with_sets_swapped():
    assert igd(MIN2, POINTS, REFERENCE) == pytest.approx(gd(MIN2, REFERENCE, POINTS))
    assert igd_p(MIN2, POINTS, REFERENCE, 3) == pytest.approx(
        gd_p(MIN2, REFERENCE, POINTS, 3)
    )


def test_p_equal_one_matches_classical():
    assert gd_p(MIN2, POINTS, REFERENCE, 1) == pytest.approx(gd(MIN2, POINTS, REFERENCE))
    assert igd_p(MIN2, POINTS, REFERENCE, 1) == pytest.approx(
        igd(MIN2, POINTS, REFERENCE)
    )


def test_hausdorff_is_max_of_gd_p_and_igd_p():
    for p in (1, 2, 3):
        expected = max(
            gd_p(MIN2, POINTS, REFERENCE, p), igd_p(MIN2, POINTS, REFERENCE, p)
        )
        assert avg_hausdorff_dist(MIN2, POINTS, REFERENCE, p) == pytest.approx(expected)


def test_igd_plus_not_larger_than_igd():
    assert igd_plus(MIN2, POINTS, REFERENCE) <= igd(MIN2, POINTS, REFERENCE) + 1e-12


def test_igd_plus_zero_when_points_dominate_reference():
    better = [(x - 1.0, y - 1.0) for x, y in REFERENCE]
    assert igd_plus(MIN2, better, REFERENCE) == 0.0
    assert igd(MIN2, better, REFERENCE) > 0.0


def test_igd_plus_respects_maximisation():
    maxi = (1, 1)
    better = [(x + 1.0, y + 1.0) for x, y in REFERENCE]
    assert igd_plus(maxi, better, REFERENCE) == 0.0
    assert igd_plus(maxi, REFERENCE, better) > 0.0


def test_ignored_objective_has_no_effect():
    extended_points = [p + (100.0 * i,) for i, p in enumerate(POINTS)]
    extended_ref = [r + (-7.0 * i,) for i, r in enumerate(REFERENCE)]
    minmax = (-1, -1, 0)
    assert gd(minmax, extended_points, extended_ref) == pytest.approx(
        gd(MIN2, POINTS, REFERENCE)
    )
    assert igd_plus(minmax, extended_points, extended_ref) == pytest.approx(
        igd_plus(MIN2, POINTS, REFERENCE)
    )


def test_gd_p_two_on_unit_distances():
    points = [(1.0, 0.0), (0.0, 1.0)]
    reference = [(0.0, 0.0)]
    assert gd_p(MIN2, points, reference, 2) == pytest.approx(1.0)


def test_invalid_exponent_raises():
    with pytest.raises(ValueError):
        gd_p(MIN2, POINTS, REFERENCE, 0)