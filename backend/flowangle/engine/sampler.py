"""Cubic Bezier sampling — uniform-t polyline with pinned endpoints."""

from __future__ import annotations

import numpy as np

from flowangle.engine.entities import Point, SampleSet, frozen_points


def bernstein_points(
    p0: Point, p1: Point, p2: Point, p3: Point, t: np.ndarray
) -> np.ndarray:
    """Evaluate B(t) = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3."""
    t = np.asarray(t, dtype=np.float64)[:, None]
    mt = 1.0 - t
    ctrl = np.array([p0, p1, p2, p3], dtype=np.float64)
    return (
        mt**3 * ctrl[0]
        + 3 * mt**2 * t * ctrl[1]
        + 3 * mt * t**2 * ctrl[2]
        + t**3 * ctrl[3]
    )


def sample_cubic(
    p0: Point,
    p1: Point,
    p2: Point,
    p3: Point,
    samples: int = 100,
) -> SampleSet:
    """Sample a cubic at t = i / samples for i in 0..samples (samples + 1 points)."""
    if samples < 1:
        raise ValueError(f"samples must be >= 1, got {samples}")

    t = np.arange(samples + 1, dtype=np.float64) / samples
    points = bernstein_points(p0, p1, p2, p3, t)
    # Endpoints are exact, not subject to accumulated rounding
    points[0] = p0
    points[-1] = p3

    t.setflags(write=False)
    return SampleSet(points=frozen_points(points), t=t)
