"""Engine results -> API response models."""

from __future__ import annotations

from flowangle.engine.entities import AnalysisResult, PetalRegion, Region
from flowangle.explorer.classifier import Classification, ExploredConfiguration
from flowangle.explorer.metrics import ConfigurationMetrics
from flowangle.models.responses import (
    CurveModel,
    EllipseModel,
    ExploredModel,
    IntersectionModel,
    MetricsModel,
    RectangleModel,
    RegionModel,
)


def region_to_model(region: Region) -> RegionModel:
    ellipse = region.inscribed_ellipse
    rect = region.inscribed_rectangle
    return RegionModel(
        id=region.id,
        type=region.kind,
        petal_index=region.petal_index if isinstance(region, PetalRegion) else None,
        boundary=[(float(x), float(y)) for x, y in region.boundary],
        area=round(region.area, 2),
        centroid=region.centroid,
        is_valid=bool(region.polygon.is_valid),
        inscribed_ellipse=EllipseModel(
            center=ellipse.center,
            semi_major=ellipse.semi_major,
            semi_minor=ellipse.semi_minor,
            rotation=ellipse.rotation,
            area=round(ellipse.area, 2),
        )
        if ellipse is not None
        else None,
        inscribed_rectangle=RectangleModel(
            x=rect.x, y=rect.y, width=rect.width, height=rect.height, area=round(rect.area, 2)
        )
        if rect is not None
        else None,
    )


def metrics_to_model(m: ConfigurationMetrics) -> MetricsModel:
    return MetricsModel(
        curve_count=m.curve_count,
        intersection_count=m.intersection_count,
        region_count=m.region_count,
        total_area=round(m.total_area, 2),
        center_area=round(m.center_area, 2),
        center_dominance=round(m.center_dominance, 4),
        center_inscribed_ratio=round(m.center_inscribed_ratio, 4),
        regularity=round(m.regularity, 4),
        roundness=round(m.roundness, 4),
        complexity_score=round(m.complexity_score, 4),
        simplicity_score=round(m.simplicity_score, 4),
        is_degenerate=m.is_degenerate,
        degenerate_reason=m.degenerate_reason,
    )


def result_parts(result: AnalysisResult) -> dict:
    return {
        "curves": [
            CurveModel(
                index=c.index,
                start=c.start,
                end=c.end,
                cp1=c.cp1,
                cp2=c.cp2,
                sample_count=len(c.samples),
            )
            for c in result.curves
        ],
        "intersections": [
            IntersectionModel(x=i.x, y=i.y, curve_a=i.curve_a, curve_b=i.curve_b)
            for i in result.intersections
        ],
        "regions": [region_to_model(r) for r in result.regions],
    }


def explored_to_model(entry: ExploredConfiguration | None) -> ExploredModel | None:
    if entry is None:
        return None
    return ExploredModel(
        handle_angle=entry.config.handle_angle,
        flow_factor=entry.config.flow_factor,
        metrics=metrics_to_model(entry.metrics),
    )


def archetype_counts(classification: Classification) -> dict[str, int]:
    return {name: len(entries) for name, entries in classification.archetypes.items()}
