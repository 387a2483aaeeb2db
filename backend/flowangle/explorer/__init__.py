"""Parameter-space exploration on top of the analysis engine."""

from flowangle.explorer.classifier import (
    Classification,
    ExploredConfiguration,
    NovelConfiguration,
    classify,
    novel_configurations,
)
from flowangle.explorer.metrics import ConfigurationMetrics, check_degenerate, compute_metrics
from flowangle.explorer.report import generate_report
from flowangle.explorer.sweep import Explorer, SweepOptions, explore, sweep

__all__ = [
    "Classification",
    "ConfigurationMetrics",
    "ExploredConfiguration",
    "Explorer",
    "NovelConfiguration",
    "SweepOptions",
    "check_degenerate",
    "classify",
    "compute_metrics",
    "explore",
    "generate_report",
    "novel_configurations",
    "sweep",
]
