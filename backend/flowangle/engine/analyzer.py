"""analyze() — one configuration in, one immutable result bundle out.

Runs shape generation, intersection finding and region decomposition in
order. Holds no state between calls, so separate calls never interfere.
"""

from __future__ import annotations

import logging
import time

from flowangle.engine.config import AnalysisSettings
from flowangle.engine.entities import AnalysisResult, FlowConfig
from flowangle.engine.intersections import find_intersections
from flowangle.engine.regions import decompose
from flowangle.engine.shape_generator import build_curves

logger = logging.getLogger(__name__)


def analyze(config: FlowConfig, settings: AnalysisSettings | None = None) -> AnalysisResult:
    """Analyze a flow shape.

    Raises InvalidConfigurationError (from FlowConfig) or DegenerateShapeError
    when the figure cannot be constructed. Missing regions or inscribed shapes
    are reported as absent, never as errors.
    """
    settings = settings or AnalysisSettings()
    start = time.perf_counter()

    t0 = time.perf_counter()
    vertices, curves = build_curves(config, settings)
    logger.debug("  curves built in %.1fms", (time.perf_counter() - t0) * 1000)

    t0 = time.perf_counter()
    intersections = find_intersections(curves, settings)
    logger.debug("  intersections found in %.1fms", (time.perf_counter() - t0) * 1000)

    t0 = time.perf_counter()
    regions = decompose(curves, intersections, settings)
    logger.debug("  regions decomposed in %.1fms", (time.perf_counter() - t0) * 1000)

    logger.info(
        "Analysis n=%d handle=%.1f flow=%.2f: %d intersections, %d regions in %.0fms",
        config.sides,
        config.handle_angle,
        config.flow_factor,
        len(intersections),
        len(regions),
        (time.perf_counter() - start) * 1000,
    )

    return AnalysisResult(
        config=config,
        vertices=vertices,
        curves=curves,
        intersections=intersections,
        regions=regions,
    )
