"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    sides: int = Field(..., description="Number of curves / polygon sides (>= 3)")
    handle_angle: float = Field(..., description="Apex angle of the handle triangle, degrees in (0, 180)")
    flow_factor: float = Field(..., description="Control-point interpolation toward the apex")
    rotation: float = Field(default=0.0, description="Rotation of the vertex ring, degrees")
    canvas_size: float | None = Field(
        default=None,
        description="Canvas width/height; server default when omitted",
    )


class ExploreRequest(BaseModel):
    sides: int = Field(..., description="Side count to explore")
    handle_angle_min: float = 10.0
    handle_angle_max: float = 170.0
    handle_angle_step: float = 5.0
    flow_factor_min: float = -3.0
    flow_factor_max: float = 1.0
    flow_factor_step: float = 0.1
    rotation: float = 0.0
    canvas_size: float | None = None
