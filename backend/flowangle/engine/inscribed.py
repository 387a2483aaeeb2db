"""Inscribed-shape search — largest ellipse / axis-aligned rectangle per region.

Both searches are coarse grid searches centered on the boundary's point-mean
centroid. A candidate is kept only when every tested point passes the
ray-casting test against the boundary, so a returned shape is always
contained (at its sample points) and at least as large as every grid
candidate that fit. Ties keep the first candidate in iteration order.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray

from flowangle.engine.config import AnalysisSettings
from flowangle.engine.entities import InscribedEllipse, InscribedRectangle, Point
from flowangle.utils.geometry import bbox, centroid, points_in_polygon

logger = logging.getLogger(__name__)


def ratio_steps(start: float, stop: float, step: float) -> list[float]:
    """start, start + step, ... up to and including stop, without float drift."""
    count = int(math.floor((stop - start) / step + 1e-9)) + 1
    return [round(start + k * step, 10) for k in range(count)]


def ellipse_points(
    center: Point,
    semi_major: float,
    semi_minor: float,
    rotation: float,
    n: int = 16,
) -> NDArray[np.float64]:
    theta = np.arange(n) * (2 * math.pi / n)
    cos_r, sin_r = math.cos(rotation), math.sin(rotation)
    x = center[0] + semi_major * np.cos(theta) * cos_r - semi_minor * np.sin(theta) * sin_r
    y = center[1] + semi_major * np.cos(theta) * sin_r + semi_minor * np.sin(theta) * cos_r
    return np.column_stack([x, y])


def ellipse_in_polygon(
    center: Point,
    semi_major: float,
    semi_minor: float,
    rotation: float,
    polygon: NDArray[np.float64],
    n: int = 16,
) -> bool:
    pts = ellipse_points(center, semi_major, semi_minor, rotation, n)
    return bool(np.all(points_in_polygon(pts, polygon)))


def rectangle_in_polygon(rect: InscribedRectangle, polygon: NDArray[np.float64]) -> bool:
    return bool(np.all(points_in_polygon(rect.corners(), polygon)))


def largest_inscribed_ellipse(
    boundary: NDArray[np.float64],
    settings: AnalysisSettings | None = None,
) -> InscribedEllipse | None:
    """Largest ellipse (pi * a * b) found over the size/rotation grid, or None."""
    settings = settings or AnalysisSettings()
    if len(boundary) < 3:
        return None

    center = centroid(boundary)
    xmin, ymin, xmax, ymax = bbox(boundary)
    half_w = (xmax - xmin) / 2
    half_h = (ymax - ymin) / 2

    ratios = ratio_steps(
        settings.ellipse_ratio_min, settings.ellipse_ratio_max, settings.ellipse_ratio_step
    )
    rotations = [k * math.pi / settings.ellipse_rotation_steps for k in range(settings.ellipse_rotation_steps)]

    best: InscribedEllipse | None = None
    best_area = 0.0
    for wr in ratios:
        for hr in ratios:
            a = half_w * wr
            b = half_h * hr
            area = math.pi * a * b
            if area <= best_area:
                continue  # cannot win; ties keep the earlier candidate
            for rot in rotations:
                if ellipse_in_polygon(center, a, b, rot, boundary, settings.ellipse_boundary_samples):
                    best = InscribedEllipse(
                        center=center, semi_major=a, semi_minor=b, rotation=rot, area=area
                    )
                    best_area = area
                    break

    return best


def largest_inscribed_rectangle(
    boundary: NDArray[np.float64],
    settings: AnalysisSettings | None = None,
) -> InscribedRectangle | None:
    """Largest axis-aligned rectangle centered on the centroid, or None."""
    settings = settings or AnalysisSettings()
    if len(boundary) < 3:
        return None

    cx, cy = centroid(boundary)
    xmin, ymin, xmax, ymax = bbox(boundary)
    width_range = xmax - xmin
    height_range = ymax - ymin

    ratios = ratio_steps(settings.rect_ratio_min, settings.rect_ratio_max, settings.rect_ratio_step)

    best: InscribedRectangle | None = None
    best_area = 0.0
    for wr in ratios:
        for hr in ratios:
            w = width_range * wr
            h = height_range * hr
            area = w * h
            if area <= best_area:
                continue
            candidate = InscribedRectangle(x=cx - w / 2, y=cy - h / 2, width=w, height=h, area=area)
            if rectangle_in_polygon(candidate, boundary):
                best = candidate
                best_area = area

    return best
