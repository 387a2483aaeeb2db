"""End-to-end tests for analyze()."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest
from shapely.geometry import LinearRing

from flowangle.engine import (
    CenterRegion,
    FlowConfig,
    InvalidConfigurationError,
    OuterRegion,
    PetalRegion,
    analyze,
)
from flowangle.engine.inscribed import ellipse_points
from flowangle.utils.geometry import cross, points_in_polygon
from tests.conftest import FOLDED_SQUARE, HEXAGON, regular_polygon_area


def _describe(region) -> str:
    match region:
        case OuterRegion():
            return "outer"
        case CenterRegion():
            return "center"
        case PetalRegion(petal_index=i):
            return f"petal-{i}"
    raise AssertionError(f"unexpected region {region!r}")


def test_straight_hexagon_is_one_outer_region(hexagon_config):
    result = analyze(hexagon_config)
    assert result.curve_count == 6
    assert result.intersection_count == 0
    assert result.region_count == 1

    (region,) = result.regions
    assert isinstance(region, OuterRegion)
    assert region.area == pytest.approx(regular_polygon_area(6, 100.0), rel=1e-9)
    assert region.polygon.is_valid


def test_hexagon_inscribed_shapes_are_contained(hexagon_config):
    (region,) = analyze(hexagon_config).regions
    ellipse = region.inscribed_ellipse
    rect = region.inscribed_rectangle
    assert ellipse is not None and rect is not None

    pts = ellipse_points(ellipse.center, ellipse.semi_major, ellipse.semi_minor, ellipse.rotation)
    assert points_in_polygon(pts, region.boundary).all()
    assert points_in_polygon(rect.corners(), region.boundary).all()
    assert ellipse.area < region.area
    assert rect.area < region.area


def test_folded_square_regions(folded_square_config):
    result = analyze(folded_square_config)
    assert result.intersection_count > 0
    assert result.center is not None

    labels = [_describe(r) for r in result.regions]
    assert labels == ["center", "petal-0", "petal-1", "petal-2", "petal-3"]
    for petal in result.petals:
        assert petal.id == petal.petal_index + 1


def test_hull_boundaries_are_simple_and_convex(folded_square_config):
    result = analyze(folded_square_config)
    assert result.total_area >= 0
    for region in result.regions:
        boundary = region.boundary
        assert len(boundary) >= 3
        assert LinearRing(boundary).is_simple
        n = len(boundary)
        for i in range(n):
            assert cross(tuple(boundary[i - 1]), tuple(boundary[i]), tuple(boundary[(i + 1) % n])) >= -1e-6


def test_inscribed_rectangles_fit(folded_square_config):
    for region in analyze(folded_square_config).regions:
        rect = region.inscribed_rectangle
        if rect is None:
            continue
        assert points_in_polygon(rect.corners(), region.boundary).all()
        xmin, ymin, xmax, ymax = region.bbox
        assert rect.area <= (xmax - xmin) * (ymax - ymin) + 1e-9


def test_analysis_is_deterministic():
    a = analyze(FlowConfig(**FOLDED_SQUARE))
    b = analyze(FlowConfig(**FOLDED_SQUARE))
    assert [i.point for i in a.intersections] == [i.point for i in b.intersections]
    assert [r.area for r in a.regions] == [r.area for r in b.regions]
    for ra, rb in zip(a.regions, b.regions):
        assert np.array_equal(ra.boundary, rb.boundary)


def test_result_is_immutable(hexagon_config):
    result = analyze(hexagon_config)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.regions = ()
    with pytest.raises(ValueError):
        result.regions[0].boundary[0, 0] = 0.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"sides": 2},
        {"canvas_size": 0.0},
        {"canvas_size": -10.0},
        {"handle_angle": 0.0},
        {"handle_angle": 180.0},
        {"flow_factor": float("nan")},
    ],
)
def test_invalid_configuration(overrides):
    with pytest.raises(InvalidConfigurationError):
        FlowConfig(**{**HEXAGON, **overrides})


def test_invalid_configuration_is_a_value_error():
    with pytest.raises(ValueError):
        FlowConfig(sides=1, handle_angle=90.0, flow_factor=0.5)
