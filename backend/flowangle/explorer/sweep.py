"""Parameter-space sweep over (handle angle, flow factor) for one side count."""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Iterator
from dataclasses import dataclass

from flowangle.engine.analyzer import analyze
from flowangle.engine.config import AnalysisSettings
from flowangle.engine.entities import FlowConfig
from flowangle.engine.errors import DegenerateShapeError
from flowangle.explorer.classifier import (
    Classification,
    ExploredConfiguration,
    NovelConfiguration,
    classify,
    novel_configurations,
)
from flowangle.explorer.metrics import compute_metrics
from flowangle.explorer.report import generate_report

logger = logging.getLogger(__name__)


@dataclass
class SweepOptions:
    handle_angle_min: float = 10.0
    handle_angle_max: float = 170.0
    handle_angle_step: float = 5.0
    flow_factor_min: float = -3.0
    flow_factor_max: float = 1.0
    flow_factor_step: float = 0.1
    rotation: float = 0.0
    canvas_size: float = 600.0

    def __post_init__(self) -> None:
        bounds = (
            self.handle_angle_min,
            self.handle_angle_max,
            self.handle_angle_step,
            self.flow_factor_min,
            self.flow_factor_max,
            self.flow_factor_step,
        )
        if not all(math.isfinite(v) for v in bounds):
            raise ValueError("sweep bounds and steps must be finite")
        if self.handle_angle_step <= 0 or self.flow_factor_step <= 0:
            raise ValueError("sweep steps must be positive")
        if self.handle_angle_max < self.handle_angle_min or self.flow_factor_max < self.flow_factor_min:
            raise ValueError("sweep ranges must have max >= min")

    @property
    def handle_angles(self) -> list[float]:
        return _inclusive_range(self.handle_angle_min, self.handle_angle_max, self.handle_angle_step)

    @property
    def flow_factors(self) -> list[float]:
        return [
            round(f, 2)
            for f in _inclusive_range(self.flow_factor_min, self.flow_factor_max, self.flow_factor_step)
        ]

    @property
    def point_count(self) -> int:
        """Grid size, computed without enumerating either axis."""
        return _step_count(
            self.handle_angle_min, self.handle_angle_max, self.handle_angle_step
        ) * _step_count(self.flow_factor_min, self.flow_factor_max, self.flow_factor_step)


def _step_count(start: float, stop: float, step: float) -> int:
    span = (stop - start) / step
    if not math.isfinite(span):
        raise ValueError(f"sweep step {step!r} is too small for the range {start!r}..{stop!r}")
    return int(math.floor(span + 1e-9)) + 1


def _inclusive_range(start: float, stop: float, step: float) -> list[float]:
    return [start + k * step for k in range(_step_count(start, stop, step))]


def iter_configs(sides: int, options: SweepOptions) -> Iterator[FlowConfig]:
    for handle_angle in options.handle_angles:
        for flow_factor in options.flow_factors:
            yield FlowConfig(
                sides=sides,
                handle_angle=handle_angle,
                flow_factor=flow_factor,
                rotation=options.rotation,
                canvas_size=options.canvas_size,
            )


def sweep(
    sides: int,
    options: SweepOptions | None = None,
    settings: AnalysisSettings | None = None,
) -> list[ExploredConfiguration]:
    """Analyze every grid point; keep the non-degenerate ones in grid order."""
    options = options or SweepOptions()
    start = time.perf_counter()
    logger.info(
        "Exploring n=%d: handle %.0f..%.0f step %.1f, flow %.2f..%.2f step %.2f",
        sides,
        options.handle_angle_min,
        options.handle_angle_max,
        options.handle_angle_step,
        options.flow_factor_min,
        options.flow_factor_max,
        options.flow_factor_step,
    )

    sampled = 0
    kept: list[ExploredConfiguration] = []
    for config in iter_configs(sides, options):
        sampled += 1
        try:
            result = analyze(config, settings)
        except DegenerateShapeError as e:
            logger.warning("Skipping handle=%.1f flow=%.2f: %s", config.handle_angle, config.flow_factor, e)
            continue

        metrics = compute_metrics(config, result)
        if metrics.is_degenerate:
            logger.debug(
                "Skipping handle=%.1f flow=%.2f: %s",
                config.handle_angle,
                config.flow_factor,
                metrics.degenerate_reason,
            )
            continue
        kept.append(ExploredConfiguration(config=config, result=result, metrics=metrics))

    logger.info(
        "Explored %d configurations in %.2fs, %d valid",
        sampled,
        time.perf_counter() - start,
        len(kept),
    )
    return kept


def explore(
    sides: int,
    options: SweepOptions | None = None,
    settings: AnalysisSettings | None = None,
) -> Classification:
    return classify(sweep(sides, options, settings), sides)


class Explorer:
    """Keeps the latest classification per side count.

    One instance per caller; it is not safe to share across threads.
    """

    def __init__(self, settings: AnalysisSettings | None = None) -> None:
        self.settings = settings or AnalysisSettings()
        self.discoveries: dict[int, Classification] = {}

    def explore(self, sides: int, options: SweepOptions | None = None) -> Classification:
        classification = explore(sides, options, self.settings)
        self.discoveries[sides] = classification
        return classification

    def novel(self, sides: int) -> list[NovelConfiguration] | None:
        classification = self.discoveries.get(sides)
        if classification is None:
            return None
        return novel_configurations(classification)

    def report(self, sides: int) -> str:
        classification = self.discoveries.get(sides)
        if classification is None:
            return f"No discoveries for n={sides}"
        return generate_report(classification)
