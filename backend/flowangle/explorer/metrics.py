"""Scalar metrics derived from one analysis result.

Everything here reads the result bundle only: counts, region areas,
centroids and boundaries.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from flowangle.engine.entities import AnalysisResult, CenterRegion, FlowConfig, PetalRegion

# Degenerate thresholds as fractions of the canvas area
COLLAPSED_AREA_FRACTION = 0.01
EXPLODED_AREA_FRACTION = 2.0

# Very negative flow factors fold curves over and over
FOLDING_FLOW_FACTOR = -2.5
FOLDING_INTERSECTIONS_PER_SIDE = 3


@dataclass
class ConfigurationMetrics:
    curve_count: int = 0
    intersection_count: int = 0
    region_count: int = 0

    total_area: float = 0.0
    center_area: float = 0.0
    petal_areas: list[float] = field(default_factory=list)
    largest_petal_area: float = 0.0
    smallest_petal_area: float = 0.0
    petal_area_variance: float = 0.0

    center_inscribed_ratio: float = 0.0
    center_dominance: float = 0.0

    roundness: float = 0.0
    regularity: float = 0.0

    complexity_score: float = 0.0
    simplicity_score: float = 0.0

    is_degenerate: bool = False
    degenerate_reason: str | None = None


def roundness(result: AnalysisResult) -> float:
    """1 / (1 + CV of distances from the mean of all region boundary points)."""
    if not result.regions:
        return 0.0
    pts = np.concatenate([r.boundary for r in result.regions])
    if len(pts) < 3:
        return 0.0
    center = pts.mean(axis=0)
    dists = np.hypot(pts[:, 0] - center[0], pts[:, 1] - center[1])
    mean = float(np.mean(dists))
    if mean == 0:
        return 0.0
    cv = float(np.std(dists)) / mean
    return 1.0 / (1.0 + cv)


def check_degenerate(
    config: FlowConfig,
    metrics: ConfigurationMetrics,
) -> str | None:
    """Reason the configuration is unusable, or None. First match wins."""
    canvas_area = config.canvas_area
    if metrics.total_area < canvas_area * COLLAPSED_AREA_FRACTION:
        return "collapsed"
    if metrics.total_area > canvas_area * EXPLODED_AREA_FRACTION:
        return "exploded"
    if metrics.region_count == 0:
        return "no_regions"
    if (
        config.flow_factor < FOLDING_FLOW_FACTOR
        and metrics.intersection_count > config.sides * FOLDING_INTERSECTIONS_PER_SIDE
    ):
        return "infinite_folding"
    return None


def compute_metrics(config: FlowConfig, result: AnalysisResult) -> ConfigurationMetrics:
    m = ConfigurationMetrics(
        curve_count=result.curve_count,
        intersection_count=result.intersection_count,
        region_count=result.region_count,
    )

    for region in result.regions:
        m.total_area += region.area
        match region:
            case CenterRegion():
                m.center_area = region.area
                if region.inscribed_rectangle is not None and region.area > 0:
                    m.center_inscribed_ratio = region.inscribed_rectangle.area / region.area
            case PetalRegion():
                m.petal_areas.append(region.area)
            case _:
                pass

    if m.petal_areas:
        m.largest_petal_area = max(m.petal_areas)
        m.smallest_petal_area = min(m.petal_areas)
    if len(m.petal_areas) > 1:
        m.petal_area_variance = float(np.var(m.petal_areas))

    if m.total_area > 0:
        m.center_dominance = m.center_area / m.total_area

    if m.petal_areas and m.largest_petal_area > 0:
        normalized = float(np.sqrt(m.petal_area_variance)) / m.largest_petal_area
        m.regularity = 1.0 / (1.0 + normalized)

    m.roundness = roundness(result)

    intersection_density = m.intersection_count / config.sides
    region_complexity = m.region_count / (config.sides + 1)  # expected 1 center + n petals
    m.complexity_score = (
        intersection_density * 0.4 + region_complexity * 0.3 + (1 - m.regularity) * 0.3
    )
    m.simplicity_score = (
        m.center_dominance * 0.4 + m.regularity * 0.3 + m.center_inscribed_ratio * 0.3
    )

    m.degenerate_reason = check_degenerate(config, m)
    m.is_degenerate = m.degenerate_reason is not None
    return m
