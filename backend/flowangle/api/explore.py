"""POST /api/explore — parameter sweep + archetype report for one side count."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from flowangle.config import Settings
from flowangle.dependencies import get_analysis_settings, get_settings
from flowangle.engine.config import AnalysisSettings
from flowangle.engine.errors import FlowAngleError
from flowangle.explorer.report import generate_report
from flowangle.explorer.sweep import SweepOptions, explore as run_explore
from flowangle.models.converters import archetype_counts, explored_to_model
from flowangle.models.requests import ExploreRequest
from flowangle.models.responses import ExploreResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/explore", response_model=ExploreResponse)
def explore(
    req: ExploreRequest,
    settings: Settings = Depends(get_settings),
    analysis_settings: AnalysisSettings = Depends(get_analysis_settings),
) -> ExploreResponse:
    start = time.perf_counter()

    if req.sides > settings.max_sides:
        raise HTTPException(
            status_code=422,
            detail=f"sides={req.sides} exceeds the limit of {settings.max_sides}",
        )

    try:
        options = SweepOptions(
            handle_angle_min=req.handle_angle_min,
            handle_angle_max=req.handle_angle_max,
            handle_angle_step=req.handle_angle_step,
            flow_factor_min=req.flow_factor_min,
            flow_factor_max=req.flow_factor_max,
            flow_factor_step=req.flow_factor_step,
            rotation=req.rotation,
            canvas_size=req.canvas_size if req.canvas_size is not None else settings.default_canvas_size,
        )
        point_count = options.point_count
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    # Checked before either axis is enumerated
    if point_count > settings.max_sweep_points:
        raise HTTPException(
            status_code=422,
            detail=f"sweep of {point_count} points exceeds the limit of {settings.max_sweep_points}",
        )

    try:
        classification = run_explore(req.sides, options, analysis_settings)
    except FlowAngleError as e:
        logger.info("Rejected explore request: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000

    return ExploreResponse(
        sides=req.sides,
        total_configurations=classification.total_configurations,
        archetype_counts=archetype_counts(classification),
        extremes={name: explored_to_model(e) for name, e in classification.extremes.items()},
        report=generate_report(classification),
        processing_time_ms=round(elapsed, 1),
    )
