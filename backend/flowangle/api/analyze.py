"""POST /api/analyze — one configuration through the engine."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from flowangle.config import Settings
from flowangle.dependencies import get_analysis_settings, get_settings
from flowangle.engine.analyzer import analyze as run_analysis
from flowangle.engine.config import AnalysisSettings
from flowangle.engine.entities import FlowConfig
from flowangle.engine.errors import FlowAngleError
from flowangle.explorer.metrics import compute_metrics
from flowangle.models.converters import metrics_to_model, result_parts
from flowangle.models.requests import AnalyzeRequest
from flowangle.models.responses import AnalyzeResponse

logger = logging.getLogger(__name__)

router = APIRouter()


# Sync handler: the engine is CPU-bound, FastAPI runs it in the threadpool
@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(
    req: AnalyzeRequest,
    settings: Settings = Depends(get_settings),
    analysis_settings: AnalysisSettings = Depends(get_analysis_settings),
) -> AnalyzeResponse:
    start = time.perf_counter()

    if req.sides > settings.max_sides:
        raise HTTPException(
            status_code=422,
            detail=f"sides={req.sides} exceeds the limit of {settings.max_sides}",
        )

    try:
        config = FlowConfig(
            sides=req.sides,
            handle_angle=req.handle_angle,
            flow_factor=req.flow_factor,
            rotation=req.rotation,
            canvas_size=req.canvas_size if req.canvas_size is not None else settings.default_canvas_size,
        )
        result = run_analysis(config, analysis_settings)
    except FlowAngleError as e:
        logger.info("Rejected analysis request: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    metrics = compute_metrics(config, result)
    elapsed = (time.perf_counter() - start) * 1000

    return AnalyzeResponse(
        **result_parts(result),
        metrics=metrics_to_model(metrics),
        processing_time_ms=round(elapsed, 1),
    )
