"""Flow-shape construction: regular polygon vertices + one cubic per side.

Each side's control points come from an apex raised over the chord: the apex
sits on the chord's outward perpendicular at the height of an isoceles
triangle whose top angle is ``handle_angle``. ``flow_factor`` interpolates
each control point from its endpoint toward that apex. Factors outside [0, 1]
overshoot the apex or fold back past the endpoint, which is how the
self-intersecting shapes arise.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray

from flowangle.engine.config import AnalysisSettings
from flowangle.engine.entities import Curve, FlowConfig, Point, frozen_points
from flowangle.engine.errors import DegenerateShapeError
from flowangle.engine.sampler import sample_cubic

logger = logging.getLogger(__name__)


def polygon_vertices(config: FlowConfig) -> NDArray[np.float64]:
    """``sides`` points on a circle of radius canvas_size / sides, rotated."""
    cx, cy = config.center
    rot = math.radians(config.rotation)
    angles = rot + np.arange(config.sides) * (2 * math.pi / config.sides)
    vertices = np.column_stack(
        [cx + config.radius * np.cos(angles), cy + config.radius * np.sin(angles)]
    )
    return frozen_points(vertices)


def apex_point(
    v1: Point,
    v2: Point,
    handle_angle: float,
    min_length: float = 1e-12,
) -> Point:
    """Apex of the isoceles triangle over chord v1-v2 with top angle handle_angle (degrees)."""
    dx = v2[0] - v1[0]
    dy = v2[1] - v1[1]
    base = math.hypot(dx, dy)
    if base < min_length:
        raise DegenerateShapeError(f"zero-length chord between {v1} and {v2}")

    perp_x, perp_y = dy, -dx
    perp_len = math.hypot(perp_x, perp_y)
    if perp_len < min_length:
        raise DegenerateShapeError(f"zero-length perpendicular for chord {v1} -> {v2}")

    height = (base / 2) / math.tan(math.radians(handle_angle) / 2)
    mid_x = (v1[0] + v2[0]) / 2
    mid_y = (v1[1] + v2[1]) / 2
    return (mid_x + perp_x / perp_len * height, mid_y + perp_y / perp_len * height)


def control_points(v1: Point, v2: Point, apex: Point, flow_factor: float) -> tuple[Point, Point]:
    cp1 = (v1[0] + (apex[0] - v1[0]) * flow_factor, v1[1] + (apex[1] - v1[1]) * flow_factor)
    cp2 = (v2[0] + (apex[0] - v2[0]) * flow_factor, v2[1] + (apex[1] - v2[1]) * flow_factor)
    return cp1, cp2


def build_curves(
    config: FlowConfig,
    settings: AnalysisSettings | None = None,
) -> tuple[NDArray[np.float64], tuple[Curve, ...]]:
    """Vertices and sampled curves for a configuration.

    Raises DegenerateShapeError when two consecutive vertices coincide.
    """
    settings = settings or AnalysisSettings()
    vertices = polygon_vertices(config)
    n = config.sides

    curves: list[Curve] = []
    for i in range(n):
        v1 = (float(vertices[i][0]), float(vertices[i][1]))
        v2 = (float(vertices[(i + 1) % n][0]), float(vertices[(i + 1) % n][1]))
        apex = apex_point(v1, v2, config.handle_angle, settings.min_chord_length)
        cp1, cp2 = control_points(v1, v2, apex, config.flow_factor)
        curves.append(
            Curve(
                index=i,
                start=v1,
                end=v2,
                cp1=cp1,
                cp2=cp2,
                samples=sample_cubic(v1, cp1, cp2, v2, settings.samples_per_curve),
            )
        )

    logger.debug(
        "Built %d curves (handle=%.1f, flow=%.2f, radius=%.1f)",
        n,
        config.handle_angle,
        config.flow_factor,
        config.radius,
    )
    return vertices, tuple(curves)
