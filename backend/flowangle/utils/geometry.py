"""Leaf-node geometry helpers. No engine imports.

Point sequences are Nx2 float64 arrays of (x, y); single points are tuples.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray


def as_points(points: ArrayLike) -> NDArray[np.float64]:
    """Coerce a point sequence to an Nx2 float64 array."""
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2))
    return arr.reshape(-1, 2)


def distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def polygon_area(points: NDArray[np.float64]) -> float:
    """Shoelace area of a closed polygon (implicit closing edge). Always >= 0."""
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    xn = np.roll(x, -1)
    yn = np.roll(y, -1)
    return float(abs(np.sum(x * yn - xn * y)) / 2.0)


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Point-mean centroid. (0, 0) for an empty set."""
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def cross(o: tuple[float, float], a: tuple[float, float], b: tuple[float, float]) -> float:
    """z-component of (a - o) x (b - o). Positive = left turn."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def points_in_polygon(
    points: NDArray[np.float64],
    polygon: NDArray[np.float64],
) -> NDArray[np.bool_]:
    """Even-odd ray casting for many points at once.

    Casts a ray toward +x from each point and counts edge crossings. Edges use
    the half-open rule on y, so a vertex shared by two edges is counted once.
    Points exactly on a left/bottom edge test inside, right/top test outside.
    """
    if len(polygon) < 3 or len(points) == 0:
        return np.zeros(len(points), dtype=bool)

    px = points[:, 0][:, None]
    py = points[:, 1][:, None]
    xi = polygon[:, 0][None, :]
    yi = polygon[:, 1][None, :]
    # Edge i runs from vertex i-1 (wrapping) to vertex i
    xj = np.roll(polygon[:, 0], 1)[None, :]
    yj = np.roll(polygon[:, 1], 1)[None, :]

    straddles = (yi > py) != (yj > py)
    with np.errstate(divide="ignore", invalid="ignore"):
        x_at = (xj - xi) * (py - yi) / (yj - yi) + xi
    hits = straddles & (px < x_at)
    return (np.count_nonzero(hits, axis=1) % 2) == 1


def point_in_polygon(point: tuple[float, float], polygon: NDArray[np.float64]) -> bool:
    return bool(points_in_polygon(np.array([point], dtype=np.float64), polygon)[0])


def segment_intersection(
    p1: tuple[float, float],
    p2: tuple[float, float],
    p3: tuple[float, float],
    p4: tuple[float, float],
    parallel_eps: float = 1e-10,
) -> tuple[float, float] | None:
    """Intersection of segments p1-p2 and p3-p4, or None.

    Determinant form; |denominator| < parallel_eps counts as parallel. Both
    segment parameters must lie in [0, 1] inclusive.
    """
    x1, y1 = p1
    x2, y2 = p2
    x3, y3 = p3
    x4, y4 = p4

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(denom) < parallel_eps:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom

    if 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0:
        return (x1 + t * (x2 - x1), y1 + t * (y2 - y1))
    return None


def segment_intersections_batch(
    p1: NDArray[np.float64],
    p2: NDArray[np.float64],
    starts: NDArray[np.float64],
    ends: NDArray[np.float64],
    parallel_eps: float = 1e-10,
) -> tuple[NDArray[np.intp], NDArray[np.float64]]:
    """Intersect one segment p1-p2 against M segments starts[k]-ends[k].

    Same arithmetic as segment_intersection, vectorized over the second
    segment. Returns (indices of hit segments in ascending order, Kx2 hit
    points).
    """
    x1, y1 = float(p1[0]), float(p1[1])
    x2, y2 = float(p2[0]), float(p2[1])
    x3, y3 = starts[:, 0], starts[:, 1]
    x4, y4 = ends[:, 0], ends[:, 1]

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    valid = np.abs(denom) >= parallel_eps
    safe = np.where(valid, denom, 1.0)

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / safe
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / safe

    mask = valid & (t >= 0.0) & (t <= 1.0) & (u >= 0.0) & (u <= 1.0)
    idx = np.flatnonzero(mask)
    tt = t[idx]
    hits = np.column_stack([x1 + tt * (x2 - x1), y1 + tt * (y2 - y1)])
    return idx, hits


def convex_hull(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Graham scan.

    Pivot is the lowest point (minimum y, ties broken by minimum x). The rest
    are sorted by polar angle around the pivot, nearer first on equal angles,
    then swept while popping every non-left turn (cross <= 0). The result is
    counter-clockwise in a y-up frame, starts at the pivot and drops collinear
    points. Inputs with fewer than 3 distinct points come back deduplicated.
    """
    pts = np.unique(as_points(points), axis=0)
    if len(pts) < 3:
        return pts

    order = np.lexsort((pts[:, 0], pts[:, 1]))
    pivot = (float(pts[order[0]][0]), float(pts[order[0]][1]))

    rest = [(float(x), float(y)) for x, y in pts if (x, y) != pivot]
    rest.sort(
        key=lambda p: (
            math.atan2(p[1] - pivot[1], p[0] - pivot[0]),
            (p[0] - pivot[0]) ** 2 + (p[1] - pivot[1]) ** 2,
        )
    )

    hull: list[tuple[float, float]] = [pivot]
    for p in rest:
        while len(hull) > 1 and cross(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)

    return np.array(hull, dtype=np.float64)
