"""Discretization of the arc and straight segments into path samples.

Both samplers emit a point, then stop once that point is within two steps
of the segment end. The end itself is never emitted: the tangent point is
the first line sample, and the goal is appended separately.
"""

from __future__ import annotations

from math import ceil, hypot
from typing import List, Optional

import numpy as np

from simple_dubins.planning.geometry import wrap_to_2pi
from simple_dubins.planning.path import PlannedPath
from simple_dubins.types import Pose, Target, TangentPoint, TurnDirection, TurningCircle


def _last_step_index(total: float, step: float) -> int:
    """Index of the first sample whose remaining distance is <= 2 steps."""
    return max(0, int(ceil((total - 2.0 * step) / step)))


def arc_angles(circle: TurningCircle, pose: Pose, tangent: TangentPoint, direction: TurnDirection):
    """(start, stop) angles of the arc, with stop unwrapped in the turning direction.

    Moving from start to stop is monotonic: increasing for Left, decreasing
    for Right.
    """
    start = wrap_to_2pi(circle.angle_of(pose.x, pose.y))
    stop = start + direction.sign() * tangent.sweep
    return start, stop


def sample_arc(
    circle: TurningCircle,
    start_angle: float,
    stop_angle: float,
    direction: TurnDirection,
    resolution: float,
) -> np.ndarray:
    """Samples on the circle from start_angle toward stop_angle, (K, 2)."""
    sweep = abs(stop_angle - start_angle)
    if sweep <= 0.0:
        return np.zeros((0, 2))
    increment = resolution / circle.radius
    k = np.arange(_last_step_index(sweep, increment) + 1)
    angles = start_angle + direction.sign() * increment * k
    return np.stack(
        [circle.cx + circle.radius * np.cos(angles), circle.cy + circle.radius * np.sin(angles)],
        axis=1,
    )


def sample_line(x0: float, y0: float, x1: float, y1: float, resolution: float) -> np.ndarray:
    """Samples at multiples of `resolution` from (x0, y0) toward (x1, y1), (M, 2)."""
    dx = x1 - x0
    dy = y1 - y0
    length = hypot(dx, dy)
    if length <= 0.0:
        return np.zeros((0, 2))
    ux, uy = dx / length, dy / length
    s = resolution * np.arange(_last_step_index(length, resolution) + 1)
    return np.stack([x0 + s * ux, y0 + s * uy], axis=1)


def generate_path(
    pose: Pose,
    target: Target,
    circle: TurningCircle,
    tangent: TangentPoint,
    direction: TurnDirection,
    resolution: float,
    goal: Optional[Target] = None,
    advisories: Optional[List[str]] = None,
) -> PlannedPath:
    """Arc samples, then line samples, then the goal verbatim."""
    goal = target if goal is None else goal

    start, stop = arc_angles(circle, pose, tangent, direction)
    arc = sample_arc(circle, start, stop, direction, resolution)
    line = sample_line(tangent.x, tangent.y, target.x, target.y, resolution)

    points = np.concatenate([arc, line, np.array([[goal.x, goal.y]], dtype=float)], axis=0)
    return PlannedPath(
        points=points,
        goal=goal,
        direction=direction,
        circle=circle,
        tangent_point=tangent,
        num_arc_samples=int(arc.shape[0]),
        num_line_samples=int(line.shape[0]),
        advisories=list(advisories or []),
    )
