"""Curve-curve crossings on the sampled polylines.

Every unordered curve pair is tested segment against segment. Sampling noise
near a tangency or shallow crossing yields clusters of hits; a hit within the
dedup threshold of any crossing already kept (from any pair) is dropped, so
the count approximates the true number of crossings. First found wins, in
pair order (i < j ascending) then segment order.

Adjacent curves always meet at the vertex they share. That join is not a
crossing and is filtered out, so an un-folded figure reports zero
intersections.

Cost is O(sides^2 * samples^2); the inner loop over the second curve's
segments is vectorized.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from flowangle.engine.config import AnalysisSettings
from flowangle.engine.entities import Curve, Intersection, Point
from flowangle.utils.geometry import distance, segment_intersections_batch

logger = logging.getLogger(__name__)


T = TypeVar("T")


def deduplicate(
    items: Iterable[T],
    threshold: float = 3.0,
    key: Callable[[T], Point] | None = None,
) -> list[T]:
    """Keep each item unless its point lies within threshold of one already kept.

    ``key`` maps an item to its point; items are points themselves by default.
    """
    kept: list[T] = []
    kept_points: list[Point] = []
    for item in items:
        p = key(item) if key is not None else item
        if any(distance(p, other) < threshold for other in kept_points):
            continue
        kept.append(item)
        kept_points.append(p)
    return kept


def _shared_vertices(a: Curve, b: Curve, eps: float) -> list[Point]:
    shared = []
    for p in (a.start, a.end):
        for q in (b.start, b.end):
            if distance(p, q) <= eps:
                shared.append(p)
    return shared


def curve_pair_hits(a: Curve, b: Curve, settings: AnalysisSettings) -> list[Point]:
    """Raw segment-segment hits between two curves, in segment order."""
    pts_a = a.points
    starts_b = b.points[:-1]
    ends_b = b.points[1:]
    joins = _shared_vertices(a, b, settings.shared_vertex_eps)

    hits: list[Point] = []
    for k in range(len(pts_a) - 1):
        _, found = segment_intersections_batch(
            pts_a[k], pts_a[k + 1], starts_b, ends_b, settings.parallel_eps
        )
        for x, y in found:
            p = (float(x), float(y))
            if joins and any(distance(p, v) <= settings.shared_vertex_eps for v in joins):
                continue
            hits.append(p)
    return hits


def find_intersections(
    curves: Sequence[Curve],
    settings: AnalysisSettings | None = None,
) -> tuple[Intersection, ...]:
    """All deduplicated crossings between every pair of curves."""
    settings = settings or AnalysisSettings()

    def candidates():
        for i in range(len(curves)):
            for j in range(i + 1, len(curves)):
                a, b = curves[i], curves[j]
                for p in curve_pair_hits(a, b, settings):
                    yield Intersection(point=p, curve_a=a.index, curve_b=b.index)

    kept = deduplicate(candidates(), settings.dedup_threshold, key=lambda hit: hit.point)

    logger.debug("Found %d intersections across %d curves", len(kept), len(curves))
    return tuple(kept)
