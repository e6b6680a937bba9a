"""Value types shared by the planning steps.

Frame convention: x forward (north), y left (west), heading measured from
+x and growing counter-clockwise. A Left turn is counter-clockwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from math import atan2, cos, hypot, isfinite, sin
from typing import Sequence, Tuple, Union


@dataclass(frozen=True)
class Waypoint:
    """Target position; carries no heading."""

    x: float
    y: float

    def __post_init__(self) -> None:
        if not (isfinite(self.x) and isfinite(self.y)):
            raise ValueError(f"waypoint coordinates must be finite, got ({self.x}, {self.y})")

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Pose:
    """Planar pose: position (x, y) and heading theta (radians)."""

    x: float
    y: float
    theta: float = 0.0

    def __post_init__(self) -> None:
        if not (isfinite(self.x) and isfinite(self.y) and isfinite(self.theta)):
            raise ValueError(f"pose values must be finite, got ({self.x}, {self.y}, {self.theta})")

    @property
    def position(self) -> Waypoint:
        return Waypoint(self.x, self.y)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.theta)


Target = Union[Pose, Waypoint]


def as_pose(value: Union[Pose, Sequence[float]]) -> Pose:
    """Accept a Pose or an (x, y, theta) sequence."""
    if isinstance(value, Pose):
        return value
    x, y, th = value
    return Pose(float(x), float(y), float(th))


def as_target(value: Union[Pose, Waypoint, Sequence[float]]) -> Target:
    """Accept a Pose, a Waypoint, (x, y) or (x, y, theta)."""
    if isinstance(value, (Pose, Waypoint)):
        return value
    if len(value) == 2:
        return Waypoint(float(value[0]), float(value[1]))
    return as_pose(value)


class TurnDirection(Enum):
    LEFT = "left"
    RIGHT = "right"

    def sign(self) -> int:
        """+1 for counter-clockwise (Left), -1 for clockwise (Right)."""
        return 1 if self is TurnDirection.LEFT else -1


@dataclass(frozen=True)
class TurningCircle:
    cx: float
    cy: float
    radius: float

    @property
    def center(self) -> Tuple[float, float]:
        return (self.cx, self.cy)

    def angle_of(self, x: float, y: float) -> float:
        """Polar angle of (x, y) about the center, in (-pi, pi]."""
        return atan2(y - self.cy, x - self.cx)

    def point_at(self, angle: float) -> Tuple[float, float]:
        return (self.cx + self.radius * cos(angle), self.cy + self.radius * sin(angle))

    def distance_to(self, x: float, y: float) -> float:
        return hypot(x - self.cx, y - self.cy)


@dataclass(frozen=True)
class TangentPoint:
    """Point where the straight segment leaves the turning circle.

    - angle: polar angle of the point about the circle center
    - sweep: rotation (rad, >= 0) from the start position to this point in
      the commanded direction
    """

    x: float
    y: float
    angle: float
    sweep: float

