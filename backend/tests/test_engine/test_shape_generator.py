"""Tests for vertex and curve construction."""

from __future__ import annotations

import math

import numpy as np
import pytest

from flowangle.engine.config import AnalysisSettings
from flowangle.engine.entities import FlowConfig
from flowangle.engine.errors import DegenerateShapeError
from flowangle.engine.shape_generator import (
    apex_point,
    build_curves,
    control_points,
    polygon_vertices,
)


def test_vertices_on_circle():
    config = FlowConfig(sides=5, handle_angle=60.0, flow_factor=0.5)
    vertices = polygon_vertices(config)
    assert vertices.shape == (5, 2)
    dists = np.hypot(vertices[:, 0] - 300.0, vertices[:, 1] - 300.0)
    assert np.allclose(dists, 600.0 / 5)


def test_rotation_moves_first_vertex():
    config = FlowConfig(sides=4, handle_angle=60.0, flow_factor=0.5, rotation=90.0)
    vertices = polygon_vertices(config)
    assert tuple(vertices[0]) == pytest.approx((300.0, 450.0))


def test_apex_right_angle_height_is_half_chord():
    apex = apex_point((0.0, 0.0), (10.0, 0.0), 90.0)
    # Perpendicular (dy, -dx) points toward -y for a chord along +x
    assert apex == pytest.approx((5.0, -5.0))


def test_apex_sixty_degrees_is_equilateral():
    apex = apex_point((0.0, 0.0), (10.0, 0.0), 60.0)
    assert math.dist(apex, (0.0, 0.0)) == pytest.approx(10.0)
    assert math.dist(apex, (10.0, 0.0)) == pytest.approx(10.0)


def test_zero_chord_raises():
    with pytest.raises(DegenerateShapeError):
        apex_point((3.0, 3.0), (3.0, 3.0), 90.0)


def test_control_points_interpolate_toward_apex():
    cp1, cp2 = control_points((0.0, 0.0), (10.0, 0.0), (5.0, -5.0), 0.5)
    assert cp1 == pytest.approx((2.5, -2.5))
    assert cp2 == pytest.approx((7.5, -2.5))


def test_negative_flow_folds_past_endpoint():
    cp1, cp2 = control_points((0.0, 0.0), (10.0, 0.0), (5.0, -5.0), -1.0)
    assert cp1 == pytest.approx((-5.0, 5.0))
    assert cp2 == pytest.approx((15.0, 5.0))


def test_flow_zero_pins_controls_to_endpoints(hexagon_config):
    _, curves = build_curves(hexagon_config)
    for curve in curves:
        assert curve.cp1 == curve.start
        assert curve.cp2 == curve.end


def test_curves_wrap_around(hexagon_config):
    vertices, curves = build_curves(hexagon_config)
    assert len(curves) == 6
    assert [c.index for c in curves] == list(range(6))
    for i, curve in enumerate(curves):
        assert curve.end == curves[(i + 1) % 6].start
        assert curve.start == tuple(vertices[i])


def test_sample_count_follows_settings(hexagon_config):
    _, curves = build_curves(hexagon_config, AnalysisSettings(samples_per_curve=40))
    assert all(len(c.samples) == 41 for c in curves)
