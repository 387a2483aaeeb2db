"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class CurveModel(BaseModel):
    index: int
    start: tuple[float, float]
    end: tuple[float, float]
    cp1: tuple[float, float]
    cp2: tuple[float, float]
    sample_count: int = 0


class IntersectionModel(BaseModel):
    x: float
    y: float
    curve_a: int
    curve_b: int


class EllipseModel(BaseModel):
    center: tuple[float, float]
    semi_major: float
    semi_minor: float
    rotation: float
    area: float


class RectangleModel(BaseModel):
    x: float
    y: float
    width: float
    height: float
    area: float


class RegionModel(BaseModel):
    id: int
    type: str
    petal_index: int | None = None
    boundary: list[tuple[float, float]] = Field(default_factory=list)
    area: float = 0.0
    centroid: tuple[float, float] = (0.0, 0.0)
    is_valid: bool = True
    inscribed_ellipse: EllipseModel | None = None
    inscribed_rectangle: RectangleModel | None = None


class MetricsModel(BaseModel):
    curve_count: int = 0
    intersection_count: int = 0
    region_count: int = 0
    total_area: float = 0.0
    center_area: float = 0.0
    center_dominance: float = 0.0
    center_inscribed_ratio: float = 0.0
    regularity: float = 0.0
    roundness: float = 0.0
    complexity_score: float = 0.0
    simplicity_score: float = 0.0
    is_degenerate: bool = False
    degenerate_reason: str | None = None


class AnalyzeResponse(BaseModel):
    curves: list[CurveModel] = Field(default_factory=list)
    intersections: list[IntersectionModel] = Field(default_factory=list)
    regions: list[RegionModel] = Field(default_factory=list)
    metrics: MetricsModel
    processing_time_ms: float = 0.0


class ExploredModel(BaseModel):
    handle_angle: float
    flow_factor: float
    metrics: MetricsModel


class ExploreResponse(BaseModel):
    sides: int
    total_configurations: int = 0
    archetype_counts: dict[str, int] = Field(default_factory=dict)
    extremes: dict[str, ExploredModel | None] = Field(default_factory=dict)
    report: str = ""
    processing_time_ms: float = 0.0
