"""Tests for archetype classification and novelty extraction."""

from __future__ import annotations

from flowangle.engine.entities import FlowConfig
from flowangle.explorer.classifier import (
    ARCHETYPES,
    EXTREME_REASONS,
    TOP_PER_ARCHETYPE,
    ExploredConfiguration,
    archetypes_for,
    classify,
    novel_configurations,
)
from flowangle.explorer.metrics import ConfigurationMetrics


def _entry(handle_angle: float = 90.0, **metrics) -> ExploredConfiguration:
    config = FlowConfig(sides=4, handle_angle=handle_angle, flow_factor=0.0)
    return ExploredConfiguration(config=config, result=None, metrics=ConfigurationMetrics(**metrics))


def test_fractal_bloom_needs_crossings():
    assert "fractal_bloom" in archetypes_for(
        ConfigurationMetrics(complexity_score=0.8, intersection_count=7), 4
    )
    assert "fractal_bloom" not in archetypes_for(
        ConfigurationMetrics(complexity_score=0.8, intersection_count=6), 4
    )


def test_grid_aligned():
    m = ConfigurationMetrics(simplicity_score=0.7, center_inscribed_ratio=0.6, center_dominance=0.4)
    assert archetypes_for(m, 4) == ["grid_aligned"]


def test_petal_dominant_requires_one_petal_per_side():
    m = ConfigurationMetrics(center_dominance=0.1, regularity=0.85, petal_areas=[1.0] * 4)
    assert archetypes_for(m, 4) == ["petal_dominant"]
    assert archetypes_for(m, 5) == []


def test_configuration_can_match_several_archetypes():
    m = ConfigurationMetrics(
        center_dominance=0.1, regularity=0.95, roundness=0.9, petal_areas=[1.0] * 4
    )
    assert archetypes_for(m, 4) == ["petal_dominant", "round_transition"]


def test_balanced():
    m = ConfigurationMetrics(complexity_score=0.5, center_dominance=0.35, regularity=0.7)
    assert archetypes_for(m, 4) == ["balanced"]


def test_unremarkable_configuration_has_no_archetype():
    assert archetypes_for(ConfigurationMetrics(), 4) == []


def test_archetype_lists_are_sorted_and_trimmed():
    entries = [
        _entry(handle_angle=10.0 + k, complexity_score=0.71 + k * 0.01, intersection_count=10)
        for k in range(12)
    ]
    out = classify(entries, 4)

    blooms = out.archetypes["fractal_bloom"]
    assert out.total_configurations == 12
    assert len(blooms) == TOP_PER_ARCHETYPE
    assert blooms[0] is entries[-1]
    scores = [e.metrics.complexity_score for e in blooms]
    assert scores == sorted(scores, reverse=True)


def test_balanced_sorted_by_distance_to_ideal():
    near = _entry(complexity_score=0.5, center_dominance=0.35, regularity=0.7)
    far = _entry(complexity_score=0.65, center_dominance=0.25, regularity=0.7)
    out = classify([far, near], 4)
    assert out.archetypes["balanced"] == [near, far]


def test_extremes_keep_first_on_ties():
    first = _entry(handle_angle=80.0, center_dominance=0.2, roundness=0.5)
    second = _entry(handle_angle=100.0, center_dominance=0.2, roundness=0.9)
    out = classify([first, second], 4)

    assert out.extremes["max_center_dominance"] is first
    assert out.extremes["min_center_dominance"] is first
    assert out.extremes["max_roundness"] is second


def test_empty_classification():
    out = classify([], 4)
    assert out.total_configurations == 0
    assert set(out.archetypes) == set(ARCHETYPES)
    assert all(v is None for v in out.extremes.values())
    assert novel_configurations(out) == []


def test_novel_configurations():
    bloom = _entry(complexity_score=0.9, intersection_count=10)
    plain = _entry(simplicity_score=0.1)
    novel = novel_configurations(classify([bloom, plain], 4))

    types = [n.novelty_type for n in novel]
    assert types == list(EXTREME_REASONS) + ["fractal_bloom"]
    assert novel[0].entry is bloom
    assert novel[-1].novelty_reason.startswith("Full fractal bloom")
