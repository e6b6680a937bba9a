"""Planned path container and polyline helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from math import atan2
from typing import List, Optional

import numpy as np

from simple_dubins.types import Pose, Target, TangentPoint, TurnDirection, TurningCircle


def polyline_arclength(pts: np.ndarray) -> np.ndarray:
    """Cumulative arc length at each vertex of an (N, 2) polyline."""
    if len(pts) == 0:
        return np.zeros(0)
    segs = np.linalg.norm(pts[1:] - pts[:-1], axis=1)
    return np.concatenate([[0.0], np.cumsum(segs)])


def segment_headings(pts: np.ndarray) -> np.ndarray:
    """Heading of each segment pts[i] -> pts[i + 1]; shape (N - 1,)."""
    d = pts[1:] - pts[:-1]
    return np.arctan2(d[:, 1], d[:, 0])


@dataclass
class PlannedPath:
    """Sampled curve-then-line path.

    `points` holds the arc samples, then the line samples, then the goal
    position as the last row. Only the final element has a heading: the
    goal is stored verbatim in `goal` and keeps its heading if it is a Pose;
    intermediate samples are positions only.
    """

    points: np.ndarray  # shape (N, 2)
    goal: Target
    direction: TurnDirection
    circle: TurningCircle
    tangent_point: TangentPoint
    num_arc_samples: int
    num_line_samples: int
    advisories: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return int(self.points.shape[0])

    @property
    def arc_points(self) -> np.ndarray:
        return self.points[: self.num_arc_samples]

    @property
    def line_points(self) -> np.ndarray:
        return self.points[self.num_arc_samples : self.num_arc_samples + self.num_line_samples]

    @property
    def goal_heading(self) -> Optional[float]:
        return self.goal.theta if isinstance(self.goal, Pose) else None

    @property
    def final_heading(self) -> float:
        """Heading of the straight segment from the tangent point to the goal."""
        return float(atan2(self.goal.y - self.tangent_point.y, self.goal.x - self.tangent_point.x))

    @property
    def length(self) -> float:
        s = polyline_arclength(self.points)
        return float(s[-1]) if len(s) else 0.0

    def headings(self) -> np.ndarray:
        """Per-segment headings of the sampled polyline (for path followers)."""
        return segment_headings(self.points)
