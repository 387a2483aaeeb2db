"""FlowAngle geometric analysis engine."""

from flowangle.engine.analyzer import analyze
from flowangle.engine.config import AnalysisSettings
from flowangle.engine.entities import (
    AnalysisResult,
    CenterRegion,
    Curve,
    FlowConfig,
    InscribedEllipse,
    InscribedRectangle,
    Intersection,
    OuterRegion,
    PetalRegion,
    Region,
)
from flowangle.engine.errors import DegenerateShapeError, FlowAngleError, InvalidConfigurationError

__all__ = [
    "analyze",
    "AnalysisSettings",
    "AnalysisResult",
    "CenterRegion",
    "Curve",
    "FlowConfig",
    "InscribedEllipse",
    "InscribedRectangle",
    "Intersection",
    "OuterRegion",
    "PetalRegion",
    "Region",
    "DegenerateShapeError",
    "FlowAngleError",
    "InvalidConfigurationError",
]
