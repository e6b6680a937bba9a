"""Simple Dubins path planner: one turning arc followed by a straight line."""

from .config import PlannerConfig
from .errors import (
    DegenerateTangentError,
    PlanningError,
    TurningRadiusAdvisory,
    UnreachableTargetError,
)
from .planning import PlannedPath, SimpleDubinsPlanner
from .types import Pose, TangentPoint, TurnDirection, TurningCircle, Waypoint

__all__ = [
    "DegenerateTangentError",
    "PlannedPath",
    "PlannerConfig",
    "PlanningError",
    "Pose",
    "SimpleDubinsPlanner",
    "TangentPoint",
    "TurnDirection",
    "TurningCircle",
    "TurningRadiusAdvisory",
    "UnreachableTargetError",
    "Waypoint",
]
