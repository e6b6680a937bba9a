"""Simple Dubins (curve-then-line) planner.

API:
- SimpleDubinsPlanner(config).make_path(start, goal) -> PlannedPath
- SimpleDubinsPlanner(config).get_target_heading(pose, target) -> float

Both raise UnreachableTargetError when the target lies inside the turning
circle. The configuration is fixed at construction, so one planner can
serve concurrent queries.
"""

from __future__ import annotations

import warnings
from math import atan2, hypot
from typing import List, Sequence, Tuple, Union

from simple_dubins.config import PlannerConfig
from simple_dubins.constants import REACH_TOL
from simple_dubins.errors import TurningRadiusAdvisory, UnreachableTargetError
from simple_dubins.planning.geometry import (
    select_tangent_point,
    tangent_angles,
    turning_center,
    turning_direction,
)
from simple_dubins.planning.path import PlannedPath
from simple_dubins.planning.sampling import generate_path
from simple_dubins.types import (
    Pose,
    TangentPoint,
    Target,
    TurnDirection,
    TurningCircle,
    Waypoint,
    as_pose,
    as_target,
)

PoseLike = Union[Pose, Sequence[float]]
TargetLike = Union[Pose, Waypoint, Sequence[float]]


class SimpleDubinsPlanner:
    """Curve-then-line path from a pose to a waypoint under a turning-radius limit."""

    def __init__(self, config: PlannerConfig | None = None) -> None:
        self._config = config or PlannerConfig()

    @property
    def config(self) -> PlannerConfig:
        return self._config

    @property
    def turning_radius(self) -> float:
        return self._config.turning_radius

    @property
    def path_resolution(self) -> float:
        return self._config.path_resolution

    def _check_reachable(self, target: Target, circle: TurningCircle) -> None:
        dist = circle.distance_to(target.x, target.y)
        # Targets on the circle are reachable up to rounding
        if dist < circle.radius * (1.0 - REACH_TOL):
            raise UnreachableTargetError(dist, circle.radius)

    def _solve(self, pose: Pose, target: Target) -> Tuple[TurnDirection, TurningCircle, TangentPoint]:
        direction = turning_direction(pose, target)
        circle = turning_center(pose, target, self.turning_radius)
        self._check_reachable(target, circle)
        beta1, beta2 = tangent_angles(target, circle)
        tangent = select_tangent_point(pose, target, circle, beta1, beta2, direction)
        return direction, circle, tangent

    def _advisories(self, start: Pose, goal: Target) -> List[str]:
        half_span = hypot(start.x - goal.x, start.y - goal.y) / 2.0
        if self.turning_radius > half_span:
            msg = (
                f"The desired turning radius ({self.turning_radius:.3g}) is larger than half "
                f"the distance between start and goal ({half_span:.3g})."
            )
            warnings.warn(msg, TurningRadiusAdvisory, stacklevel=3)
            return [msg]
        return []

    def make_path(self, start: PoseLike, goal: TargetLike) -> PlannedPath:
        """Sample the arc and line from `start` to `goal`; the goal is the last element."""
        start = as_pose(start)
        goal = as_target(goal)
        advisories = self._advisories(start, goal)
        direction, circle, tangent = self._solve(start, goal)
        return generate_path(
            start,
            goal,
            circle,
            tangent,
            direction,
            self.path_resolution,
            goal=goal,
            advisories=advisories,
        )

    def get_target_heading(self, pose: PoseLike, target: TargetLike) -> float:
        """Heading (rad) of the straight segment into `target`, without sampling."""
        pose = as_pose(pose)
        target = as_target(target)
        _, _, tangent = self._solve(pose, target)
        return float(atan2(target.y - tangent.y, target.x - tangent.x))
