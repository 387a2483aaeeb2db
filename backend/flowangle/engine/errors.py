"""Engine exception types."""

from __future__ import annotations


class FlowAngleError(Exception):
    """Base class for every error the analysis engine raises."""


class InvalidConfigurationError(FlowAngleError, ValueError):
    """The configuration itself is unusable (sides < 3, size <= 0, ...)."""


class DegenerateShapeError(FlowAngleError):
    """Construction produced coincident points where a direction is needed."""
