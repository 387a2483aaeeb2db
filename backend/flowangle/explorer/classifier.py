"""Archetype classification of explored configurations.

Thresholds are heuristic. A configuration may land in several archetypes or
none; each archetype keeps its ten best entries by its defining metric.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from flowangle.engine.entities import AnalysisResult, FlowConfig
from flowangle.explorer.metrics import ConfigurationMetrics

TOP_PER_ARCHETYPE = 10

ARCHETYPES = ("fractal_bloom", "grid_aligned", "petal_dominant", "round_transition", "balanced")

ARCHETYPE_REASONS = {
    "fractal_bloom": "Full fractal bloom - maximal visual complexity",
    "grid_aligned": "Grid-aligned with large center - ideal for UI components",
    "petal_dominant": "Petal-dominant with minimal center - radial symmetry",
    "round_transition": "Round and featureless - good for n-transitions",
    "balanced": "Balanced features - versatile configuration",
}

EXTREME_REASONS = {
    "max_complexity": "Maximum fractal complexity",
    "max_simplicity": "Maximum simplicity and grid alignment",
    "max_center_dominance": "Largest center region",
    "min_center_dominance": "Smallest center region (petal-dominant)",
    "max_roundness": "Most circular/round form",
    "max_regularity": "Most regular petal distribution",
}


@dataclass
class ExploredConfiguration:
    config: FlowConfig
    result: AnalysisResult
    metrics: ConfigurationMetrics


@dataclass
class Classification:
    sides: int
    total_configurations: int = 0
    archetypes: dict[str, list[ExploredConfiguration]] = field(
        default_factory=lambda: {name: [] for name in ARCHETYPES}
    )
    extremes: dict[str, ExploredConfiguration | None] = field(
        default_factory=lambda: {name: None for name in EXTREME_REASONS}
    )


@dataclass
class NovelConfiguration:
    entry: ExploredConfiguration
    novelty_type: str
    novelty_reason: str


# (extreme name, metric getter, True = keep the larger value)
_EXTREMES: list[tuple[str, Callable[[ConfigurationMetrics], float], bool]] = [
    ("max_complexity", lambda m: m.complexity_score, True),
    ("max_simplicity", lambda m: m.simplicity_score, True),
    ("max_center_dominance", lambda m: m.center_dominance, True),
    ("min_center_dominance", lambda m: m.center_dominance, False),
    ("max_roundness", lambda m: m.roundness, True),
    ("max_regularity", lambda m: m.regularity, True),
]


def _balance_distance(m: ConfigurationMetrics) -> float:
    return abs(0.5 - m.complexity_score) + abs(0.35 - m.center_dominance)


def archetypes_for(m: ConfigurationMetrics, sides: int) -> list[str]:
    """Names of every archetype whose thresholds m meets."""
    names = []
    if m.complexity_score > 0.7 and m.intersection_count > sides * 1.5:
        names.append("fractal_bloom")
    if m.simplicity_score > 0.6 and m.center_inscribed_ratio > 0.5 and m.center_dominance > 0.3:
        names.append("grid_aligned")
    if m.center_dominance < 0.2 and m.regularity > 0.8 and len(m.petal_areas) == sides:
        names.append("petal_dominant")
    if m.roundness > 0.8 and m.regularity > 0.9:
        names.append("round_transition")
    if (
        0.3 < m.complexity_score < 0.7
        and 0.2 < m.center_dominance < 0.5
        and m.regularity > 0.6
    ):
        names.append("balanced")
    return names


def classify(configurations: Sequence[ExploredConfiguration], sides: int) -> Classification:
    out = Classification(sides=sides, total_configurations=len(configurations))

    for entry in configurations:
        for name, metric, larger in _EXTREMES:
            current = out.extremes[name]
            value = metric(entry.metrics)
            if current is None:
                out.extremes[name] = entry
                continue
            best = metric(current.metrics)
            if (larger and value > best) or (not larger and value < best):
                out.extremes[name] = entry

        for name in archetypes_for(entry.metrics, sides):
            out.archetypes[name].append(entry)

    # Stable sorts: equal scores keep exploration order
    out.archetypes["fractal_bloom"].sort(key=lambda e: -e.metrics.complexity_score)
    out.archetypes["grid_aligned"].sort(key=lambda e: -e.metrics.simplicity_score)
    out.archetypes["petal_dominant"].sort(key=lambda e: -e.metrics.regularity)
    out.archetypes["round_transition"].sort(key=lambda e: -e.metrics.roundness)
    out.archetypes["balanced"].sort(key=lambda e: _balance_distance(e.metrics))

    for name in ARCHETYPES:
        out.archetypes[name] = out.archetypes[name][:TOP_PER_ARCHETYPE]

    return out


def novel_configurations(classification: Classification) -> list[NovelConfiguration]:
    """Every extreme plus the top entry of each non-empty archetype."""
    novel: list[NovelConfiguration] = []
    for name, entry in classification.extremes.items():
        if entry is not None:
            novel.append(NovelConfiguration(entry, name, EXTREME_REASONS.get(name, "Novel configuration")))
    for name, entries in classification.archetypes.items():
        if entries:
            novel.append(
                NovelConfiguration(entries[0], name, ARCHETYPE_REASONS.get(name, "Interesting archetype"))
            )
    return novel
