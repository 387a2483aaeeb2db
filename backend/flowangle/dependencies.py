"""FastAPI dependency injection."""

from __future__ import annotations

from flowangle.config import Settings, settings
from flowangle.engine.config import AnalysisSettings


def get_settings() -> Settings:
    return settings


def get_analysis_settings() -> AnalysisSettings:
    return AnalysisSettings(samples_per_curve=settings.samples_per_curve)
