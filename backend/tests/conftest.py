"""Shared test fixtures."""

from __future__ import annotations

import math

import numpy as np
import pytest

from flowangle.engine.entities import Curve, FlowConfig
from flowangle.engine.sampler import sample_cubic

# Straight-edged hexagon: flow factor 0 pins the control points to the vertices
HEXAGON = dict(sides=6, handle_angle=90.0, flow_factor=0.0)

# Square whose curves fold back through the middle and cross their neighbours
FOLDED_SQUARE = dict(sides=4, handle_angle=90.0, flow_factor=-1.0)

SQUARE_100 = np.array([(0.0, 0.0), (100.0, 0.0), (100.0, 100.0), (0.0, 100.0)])


def regular_polygon_area(sides: int, radius: float) -> float:
    return 0.5 * sides * radius**2 * math.sin(2 * math.pi / sides)


def straight_curve(index: int, start, end, samples: int = 100) -> Curve:
    """A Curve whose control points sit on its endpoints."""
    start = (float(start[0]), float(start[1]))
    end = (float(end[0]), float(end[1]))
    return Curve(
        index=index,
        start=start,
        end=end,
        cp1=start,
        cp2=end,
        samples=sample_cubic(start, start, end, end, samples),
    )


@pytest.fixture
def hexagon_config() -> FlowConfig:
    return FlowConfig(**HEXAGON)


@pytest.fixture
def folded_square_config() -> FlowConfig:
    return FlowConfig(**FOLDED_SQUARE)


@pytest.fixture
def square_100() -> np.ndarray:
    return SQUARE_100.copy()
