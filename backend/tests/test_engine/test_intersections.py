"""Tests for curve-curve intersection finding."""

from __future__ import annotations

import math

import pytest

from flowangle.engine.config import AnalysisSettings
from flowangle.engine.intersections import curve_pair_hits, deduplicate, find_intersections
from flowangle.engine.shape_generator import build_curves
from tests.conftest import straight_curve


def test_crossing_diagonals_meet_once_at_center():
    a = straight_curve(0, (0, 0), (10, 10))
    b = straight_curve(1, (0, 10), (10, 0))
    found = find_intersections([a, b])
    assert len(found) == 1
    assert found[0].point == pytest.approx((5.0, 5.0))
    assert (found[0].curve_a, found[0].curve_b) == (0, 1)


def test_raw_hits_cluster_before_dedup():
    a = straight_curve(0, (0, 0), (10, 10))
    b = straight_curve(1, (0, 10), (10, 0))
    hits = curve_pair_hits(a, b, AnalysisSettings())
    assert len(hits) >= 1
    assert all(math.dist(h, (5.0, 5.0)) < 1e-6 for h in hits)


def test_parallel_curves_do_not_intersect():
    a = straight_curve(0, (0, 0), (100, 0))
    b = straight_curve(1, (0, 10), (100, 10))
    assert find_intersections([a, b]) == ()


def test_dedup_collapses_close_points():
    assert deduplicate([(0.0, 0.0), (1.0, 0.0)], threshold=3.0) == [(0.0, 0.0)]


def test_dedup_keeps_distant_points():
    assert deduplicate([(0.0, 0.0), (5.0, 0.0)], threshold=3.0) == [(0.0, 0.0), (5.0, 0.0)]


def test_dedup_is_global_across_pairs():
    # Three segments through one point: pairs (0,1), (0,2), (1,2) all hit (50, 50)
    curves = [
        straight_curve(0, (0, 50), (100, 50)),
        straight_curve(1, (50, 0), (50, 100)),
        straight_curve(2, (0, 0), (100, 100)),
    ]
    found = find_intersections(curves)
    assert len(found) == 1
    assert (found[0].curve_a, found[0].curve_b) == (0, 1)


def test_shared_vertex_is_not_a_crossing():
    a = straight_curve(0, (0, 0), (10, 0))
    b = straight_curve(1, (10, 0), (10, 10))
    assert find_intersections([a, b]) == ()


def test_straight_hexagon_has_no_intersections(hexagon_config):
    _, curves = build_curves(hexagon_config)
    assert find_intersections(curves) == ()


def test_folded_square_intersections(folded_square_config):
    _, curves = build_curves(folded_square_config)
    found = find_intersections(curves)
    assert len(found) > 0
    for inter in found:
        assert inter.curve_a < inter.curve_b
    threshold = AnalysisSettings().dedup_threshold
    for i in range(len(found)):
        for j in range(i + 1, len(found)):
            assert math.dist(found[i].point, found[j].point) >= threshold


def test_dedup_with_key_keeps_whole_items():
    items = [("a", (0.0, 0.0)), ("b", (1.0, 0.0)), ("c", (9.0, 0.0))]
    kept = deduplicate(items, threshold=3.0, key=lambda item: item[1])
    assert [name for name, _ in kept] == ["a", "c"]


def test_crossings_one_unit_apart_count_once():
    curves = [
        straight_curve(0, (0, 0), (100, 0)),
        straight_curve(1, (50, -10), (50, 10)),
        straight_curve(2, (51, -10), (51, 10)),
    ]
    found = find_intersections(curves)
    assert len(found) == 1
    assert found[0].point == pytest.approx((50.0, 0.0))


def test_crossings_five_units_apart_are_both_kept():
    curves = [
        straight_curve(0, (0, 0), (100, 0)),
        straight_curve(1, (50, -10), (50, 10)),
        straight_curve(2, (55, -10), (55, 10)),
    ]
    found = find_intersections(curves)
    assert [(i.curve_a, i.curve_b) for i in found] == [(0, 1), (0, 2)]
    assert found[1].point == pytest.approx((55.0, 0.0))
