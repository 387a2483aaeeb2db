"""Analysis configuration — sampling densities and search grids."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AnalysisSettings:
    """Tunable constants for one analysis run."""

    # Bezier sampling: segments per curve (samples + 1 points)
    samples_per_curve: int = 100

    # Intersections closer than this are the same crossing
    dedup_threshold: float = 3.0
    # |determinant| below this = parallel segments
    parallel_eps: float = 1e-10
    # Contacts this close to a vertex two curves share are joins, not crossings
    shared_vertex_eps: float = 1e-6
    # Chords shorter than this cannot orient an apex
    min_chord_length: float = 1e-12

    # Center region: grid steps per axis over curve 0's bounding box
    center_grid_steps: int = 50
    # Minimum interior points / offset points before a hull is attempted
    min_hull_points: int = 4

    # Petal regions: use every Nth sample, offset inward by a fixed margin
    petal_sample_stride: int = 5
    petal_offset: float = 20.0

    # Inscribed ellipse search
    ellipse_ratio_min: float = 0.2
    ellipse_ratio_max: float = 1.0
    ellipse_ratio_step: float = 0.1
    ellipse_rotation_steps: int = 8  # over [0, pi)
    ellipse_boundary_samples: int = 16

    # Inscribed rectangle search
    rect_ratio_min: float = 0.1
    rect_ratio_max: float = 1.0
    rect_ratio_step: float = 0.05
