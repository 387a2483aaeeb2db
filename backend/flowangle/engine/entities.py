"""Engine data model — everything one analysis run produces.

All entities are frozen and created fresh per run. Point sequences are
read-only Nx2 float64 arrays so a result bundle can be handed to other code
without copying.

Regions are a closed set of variants (OuterRegion | CenterRegion |
PetalRegion); dispatch on them with ``match``.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar, Union

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon

from flowangle.engine.errors import InvalidConfigurationError
from flowangle.utils.geometry import as_points, bbox

Point = tuple[float, float]


def frozen_points(points) -> NDArray[np.float64]:
    """Copy into a read-only Nx2 float64 array."""
    arr = np.array(as_points(points), dtype=np.float64)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class FlowConfig:
    """Input to one analysis run."""

    sides: int
    handle_angle: float  # degrees, apex angle of the isoceles handle triangle
    flow_factor: float  # 0 = straight edges, 1 = control points at apex
    rotation: float = 0.0  # degrees
    canvas_size: float = 600.0

    def __post_init__(self) -> None:
        if isinstance(self.sides, bool) or not isinstance(self.sides, numbers.Integral) or self.sides < 3:
            raise InvalidConfigurationError(f"sides must be an integer >= 3, got {self.sides!r}")
        if not math.isfinite(self.canvas_size) or self.canvas_size <= 0:
            raise InvalidConfigurationError(
                f"canvas_size must be a positive finite number, got {self.canvas_size!r}"
            )
        if not math.isfinite(self.handle_angle) or not 0 < self.handle_angle < 180:
            raise InvalidConfigurationError(
                f"handle_angle must lie strictly between 0 and 180 degrees, got {self.handle_angle!r}"
            )
        if not math.isfinite(self.flow_factor):
            raise InvalidConfigurationError(f"flow_factor must be finite, got {self.flow_factor!r}")
        if not math.isfinite(self.rotation):
            raise InvalidConfigurationError(f"rotation must be finite, got {self.rotation!r}")

    @property
    def center(self) -> Point:
        return (self.canvas_size / 2, self.canvas_size / 2)

    @property
    def radius(self) -> float:
        return self.canvas_size / self.sides

    @property
    def canvas_area(self) -> float:
        return self.canvas_size * self.canvas_size


@dataclass(frozen=True)
class Sample:
    x: float
    y: float
    t: float

    @property
    def point(self) -> Point:
        return (self.x, self.y)


@dataclass(frozen=True, eq=False)
class SampleSet:
    """Ordered samples along one curve: points[k] was evaluated at t[k]."""

    points: NDArray[np.float64]
    t: NDArray[np.float64]

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> Sample:
        x, y = self.points[index]
        return Sample(float(x), float(y), float(self.t[index]))

    def __iter__(self) -> Iterator[Sample]:
        for i in range(len(self.points)):
            yield self[i]


@dataclass(frozen=True, eq=False)
class Curve:
    """One cubic Bezier side of the figure, from vertex ``index`` to the next."""

    index: int
    start: Point
    end: Point
    cp1: Point
    cp2: Point
    samples: SampleSet

    @property
    def points(self) -> NDArray[np.float64]:
        return self.samples.points

    @property
    def control_points(self) -> tuple[Point, Point, Point, Point]:
        return (self.start, self.cp1, self.cp2, self.end)


@dataclass(frozen=True)
class Intersection:
    point: Point
    curve_a: int
    curve_b: int

    @property
    def x(self) -> float:
        return self.point[0]

    @property
    def y(self) -> float:
        return self.point[1]


@dataclass(frozen=True)
class InscribedEllipse:
    center: Point
    semi_major: float
    semi_minor: float
    rotation: float  # radians
    area: float


@dataclass(frozen=True)
class InscribedRectangle:
    x: float  # top-left corner
    y: float
    width: float
    height: float
    area: float

    def corners(self) -> NDArray[np.float64]:
        return np.array(
            [
                (self.x, self.y),
                (self.x + self.width, self.y),
                (self.x + self.width, self.y + self.height),
                (self.x, self.y + self.height),
            ],
            dtype=np.float64,
        )


@dataclass(frozen=True, eq=False, kw_only=True)
class _RegionBase:
    kind: ClassVar[str] = ""

    id: int
    boundary: NDArray[np.float64]
    area: float
    centroid: Point
    inscribed_ellipse: InscribedEllipse | None = None
    inscribed_rectangle: InscribedRectangle | None = None

    @property
    def bbox(self) -> tuple[float, float, float, float]:
        return bbox(self.boundary)

    @property
    def polygon(self) -> Polygon:
        """Shapely view of the boundary (empty when it has < 3 points)."""
        if len(self.boundary) < 3:
            return Polygon()
        return Polygon(self.boundary)


@dataclass(frozen=True, eq=False, kw_only=True)
class OuterRegion(_RegionBase):
    """The whole figure when no curves cross."""

    kind: ClassVar[str] = "outer"


@dataclass(frozen=True, eq=False, kw_only=True)
class CenterRegion(_RegionBase):
    """Area shared by the overlapping curves."""

    kind: ClassVar[str] = "center"


@dataclass(frozen=True, eq=False, kw_only=True)
class PetalRegion(_RegionBase):
    """Band just inside one curve."""

    kind: ClassVar[str] = "petal"

    petal_index: int


Region = Union[OuterRegion, CenterRegion, PetalRegion]


@dataclass(frozen=True, eq=False)
class AnalysisResult:
    """Immutable bundle returned by ``analyze``."""

    config: FlowConfig
    vertices: NDArray[np.float64]
    curves: tuple[Curve, ...]
    intersections: tuple[Intersection, ...]
    regions: tuple[Region, ...] = field(default_factory=tuple)

    @property
    def curve_count(self) -> int:
        return len(self.curves)

    @property
    def intersection_count(self) -> int:
        return len(self.intersections)

    @property
    def region_count(self) -> int:
        return len(self.regions)

    @property
    def total_area(self) -> float:
        return float(sum(r.area for r in self.regions))

    @property
    def center(self) -> CenterRegion | None:
        for region in self.regions:
            if isinstance(region, CenterRegion):
                return region
        return None

    @property
    def petals(self) -> list[PetalRegion]:
        return [r for r in self.regions if isinstance(r, PetalRegion)]
