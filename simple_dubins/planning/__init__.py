"""Curve-then-line path planning."""

from .geometry import (
    select_tangent_point,
    tangent_angles,
    tangent_point_on_line,
    turning_center,
    turning_direction,
    wrap_to_2pi,
)
from .path import PlannedPath
from .planner import SimpleDubinsPlanner
from .sampling import generate_path, sample_arc, sample_line

__all__ = [
    "PlannedPath",
    "SimpleDubinsPlanner",
    "generate_path",
    "sample_arc",
    "sample_line",
    "select_tangent_point",
    "tangent_angles",
    "tangent_point_on_line",
    "turning_center",
    "turning_direction",
    "wrap_to_2pi",
]
