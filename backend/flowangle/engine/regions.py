"""Region decomposition — outer region, or center + one petal per side.

This is a topological heuristic, not a planar arrangement:

- no crossings: the whole figure is one outer region;
- otherwise the center region is the convex hull of grid points that fall
  inside the figure polygon (even-odd), and each petal is the convex hull of
  points offset a fixed margin inward from its curve.

Region counts are the stable contract (1 outer, or at most 1 center + N
petals); boundaries and areas are approximations whose error shrinks with the
grid and sampling densities in AnalysisSettings.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from flowangle.engine.config import AnalysisSettings
from flowangle.engine.entities import (
    CenterRegion,
    Curve,
    Intersection,
    OuterRegion,
    PetalRegion,
    Point,
    Region,
    frozen_points,
)
from flowangle.engine.inscribed import largest_inscribed_ellipse, largest_inscribed_rectangle
from flowangle.utils.geometry import bbox, centroid, convex_hull, points_in_polygon, polygon_area

logger = logging.getLogger(__name__)


def figure_outline(curves: Sequence[Curve]) -> NDArray[np.float64]:
    """All curves' samples end to end, dropping each curve's last (shared) point."""
    if not curves:
        return np.empty((0, 2))
    return np.concatenate([c.points[:-1] for c in curves])


def figure_polygon(curves: Sequence[Curve]) -> NDArray[np.float64]:
    """All curves' full sample lists end to end, used for the containment test."""
    if not curves:
        return np.empty((0, 2))
    return np.concatenate([c.points for c in curves])


def outer_region(curves: Sequence[Curve]) -> OuterRegion:
    outline = figure_outline(curves)
    return OuterRegion(
        id=0,
        boundary=frozen_points(outline),
        area=polygon_area(outline),
        centroid=centroid(outline),
    )


def extract_center_region(
    curves: Sequence[Curve],
    figure_center: Point,
    settings: AnalysisSettings | None = None,
) -> CenterRegion | None:
    """Hull of the grid points over curve 0's bbox that lie inside the figure."""
    settings = settings or AnalysisSettings()
    if not curves:
        return None

    xmin, ymin, xmax, ymax = bbox(curves[0].points)
    if xmax - xmin <= 0 or ymax - ymin <= 0:
        logger.debug("Center region skipped: curve 0 has a flat bounding box")
        return None

    steps = settings.center_grid_steps
    gx, gy = np.meshgrid(
        np.linspace(xmin, xmax, steps + 1),
        np.linspace(ymin, ymax, steps + 1),
    )
    grid = np.column_stack([gx.ravel(), gy.ravel()])
    inside = grid[points_in_polygon(grid, figure_polygon(curves))]

    if len(inside) < settings.min_hull_points:
        logger.debug("Center region skipped: %d interior grid points", len(inside))
        return None

    hull = convex_hull(inside)
    return CenterRegion(
        id=0,
        boundary=frozen_points(hull),
        area=polygon_area(hull),
        centroid=figure_center,
    )


def petal_offset_points(
    curve: Curve,
    figure_center: Point,
    settings: AnalysisSettings | None = None,
) -> NDArray[np.float64]:
    """Every Nth sample pushed inward (toward figure_center) along its normal."""
    settings = settings or AnalysisSettings()
    pts = curve.points
    last = len(pts) - 1
    offset = settings.petal_offset

    out: list[Point] = []
    for k in range(0, len(pts), settings.petal_sample_stride):
        px, py = float(pts[k][0]), float(pts[k][1])
        nxt = pts[min(k + 1, last)]
        dx = float(nxt[0]) - px
        dy = float(nxt[1]) - py
        length = math.hypot(dx, dy)
        if length == 0:
            continue

        # Tangent rotated -90 degrees
        nx = -dy / length
        ny = dx / length
        dot = nx * (figure_center[0] - px) + ny * (figure_center[1] - py)
        sign = 1.0 if dot > 0 else -1.0
        out.append((px + sign * nx * offset, py + sign * ny * offset))

    return np.array(out, dtype=np.float64).reshape(-1, 2)


def extract_petal_region(
    curve: Curve,
    figure_center: Point,
    settings: AnalysisSettings | None = None,
) -> PetalRegion | None:
    settings = settings or AnalysisSettings()
    offsets = petal_offset_points(curve, figure_center, settings)
    if len(offsets) < settings.min_hull_points:
        logger.debug("Petal %d skipped: %d offset points", curve.index, len(offsets))
        return None

    hull = convex_hull(offsets)
    if len(hull) < 3:
        logger.debug("Petal %d skipped: offset points are collinear", curve.index)
        return None

    return PetalRegion(
        id=curve.index + 1,
        petal_index=curve.index,
        boundary=frozen_points(hull),
        area=polygon_area(hull),
        centroid=centroid(hull),
    )


def with_inscribed_shapes(region: Region, settings: AnalysisSettings | None = None) -> Region:
    """Copy of region with its inscribed ellipse and rectangle filled in."""
    return dataclasses.replace(
        region,
        inscribed_ellipse=largest_inscribed_ellipse(region.boundary, settings),
        inscribed_rectangle=largest_inscribed_rectangle(region.boundary, settings),
    )


def decompose(
    curves: Sequence[Curve],
    intersections: Sequence[Intersection],
    settings: AnalysisSettings | None = None,
) -> tuple[Region, ...]:
    """Classify the figure into regions and attach inscribed shapes to each."""
    settings = settings or AnalysisSettings()
    regions: list[Region] = []

    if not intersections:
        regions.append(outer_region(curves))
    else:
        figure_center = centroid(figure_outline(curves))
        center = extract_center_region(curves, figure_center, settings)
        if center is not None:
            regions.append(center)
        for curve in curves:
            petal = extract_petal_region(curve, figure_center, settings)
            if petal is not None:
                regions.append(petal)

    return tuple(with_inscribed_shapes(r, settings) for r in regions)
