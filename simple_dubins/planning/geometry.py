"""Turning-circle and tangent-line geometry for the curve-then-line planner.

Each step is a pure function of its geometric inputs:

- turning_direction: which half-plane (left/right of the heading) the target is in
- turning_center: center of the turning circle closest to the target
- tangent_angles: angles of the two tangent lines through the target
- select_tangent_point: tangent point reached first in the commanded rotation
"""

from __future__ import annotations

from math import atan, atan2, cos, pi, sin, sqrt
from typing import Tuple

from simple_dubins.constants import ANGLE_TOL_RAD, REACH_TOL
from simple_dubins.errors import DegenerateTangentError
from simple_dubins.types import Pose, Target, TangentPoint, TurnDirection, TurningCircle

TWO_PI = 2.0 * pi


def wrap_to_2pi(angle: float) -> float:
    """Normalize angle to [0, 2*pi)."""
    wrapped = angle % TWO_PI
    # x % 2pi can round up to exactly 2pi for tiny negative x
    if wrapped >= TWO_PI:
        wrapped -= TWO_PI
    return wrapped


def signed_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    """Counter-clockwise angle from vector u to vector v, in (-pi, pi]."""
    dot = ux * vx + uy * vy
    det = ux * vy - uy * vx
    return atan2(det, dot)


def turning_direction(pose: Pose, target: Target) -> TurnDirection:
    """Left if the target is strictly left of the heading line, else Right."""
    lateral = -(target.x - pose.x) * sin(pose.theta) + (target.y - pose.y) * cos(pose.theta)
    if lateral > 0.0:
        return TurnDirection.LEFT
    return TurnDirection.RIGHT


def turning_center(pose: Pose, target: Target, radius: float) -> TurningCircle:
    """Turning circle (left or right of the pose) whose center is closer to the target.

    On an exact tie, i.e. the target lies on the heading line, the clockwise
    circle is returned, matching the Right tie-break of turning_direction.
    """
    x_right = pose.x + sin(pose.theta) * radius
    y_right = pose.y - cos(pose.theta) * radius
    x_left = pose.x - sin(pose.theta) * radius
    y_left = pose.y + cos(pose.theta) * radius

    d2_right = (target.x - x_right) ** 2 + (target.y - y_right) ** 2
    d2_left = (target.x - x_left) ** 2 + (target.y - y_left) ** 2
    if d2_right <= d2_left:
        return TurningCircle(x_right, y_right, radius)
    return TurningCircle(x_left, y_left, radius)


def tangent_angles(target: Target, circle: TurningCircle) -> Tuple[float, float]:
    """Angles in [0, pi) of the two lines through the target tangent to the circle.

    Solves ((x_c - x_n) sin(b) + (y_n - y_c) cos(b))^2 = R^2 with the
    half-angle substitution t = tan(b / 2). Each sign of the right-hand side
    yields both tangent lines, so the form with the larger denominator,
    `b + R` or `b - R`, is used; it is never smaller than R in magnitude.

    A target on the circle gives a slightly negative discriminant through
    rounding; it is treated as zero (one tangent line). Raises
    DegenerateTangentError when the target is strictly inside the circle.
    """
    R = circle.radius
    a = circle.cx - target.x
    b = target.y - circle.cy
    disc = a * a + b * b - R * R
    if disc < 0.0:
        if disc < -4.0 * REACH_TOL * R * R:
            raise DegenerateTangentError(disc)
        disc = 0.0
    root = sqrt(disc)

    if b < 0.0:
        beta1 = 2.0 * atan((a - root) / (b - R))
        beta2 = 2.0 * atan((a + root) / (b - R))
    else:
        beta1 = 2.0 * atan((a + root) / (b + R))
        beta2 = 2.0 * atan((a - root) / (b + R))

    return _wrap_to_half_turn(beta1), _wrap_to_half_turn(beta2)


def _wrap_to_half_turn(beta: float) -> float:
    # Line direction is only defined modulo pi
    if beta < 0.0:
        beta += pi
    # -tiny + pi rounds to pi
    if beta >= pi:
        beta -= pi
    return beta


def tangent_point_on_line(target: Target, circle: TurningCircle, beta: float) -> Tuple[float, float]:
    """Point where the line through the target at angle beta touches the circle.

    Circle-line intersection with the circle moved to the origin; for a
    tangent line the discriminant vanishes and the single intersection is
    the foot of the perpendicular from the center.
    """
    x2 = target.x - circle.cx
    y2 = target.y - circle.cy
    x1 = (target.x + cos(beta)) - circle.cx
    y1 = (target.y + sin(beta)) - circle.cy
    dx = x2 - x1
    dy = y2 - y1
    dr2 = dx * dx + dy * dy
    D = x1 * y2 - x2 * y1
    return (D * dy / dr2 + circle.cx, -D * dx / dr2 + circle.cy)


def rotation_sweep(
    circle: TurningCircle,
    start_xy: Tuple[float, float],
    point_xy: Tuple[float, float],
    direction: TurnDirection,
    target: Target,
) -> float:
    """Rotation in [0, 2*pi) from start_xy to point_xy turning in `direction`.

    A point coinciding with the start is either reached immediately (zero
    sweep) when moving along the circle there heads toward the target, or
    only after a full turn otherwise.
    """
    ux, uy = start_xy[0] - circle.cx, start_xy[1] - circle.cy
    vx, vy = point_xy[0] - circle.cx, point_xy[1] - circle.cy
    ccw = wrap_to_2pi(signed_angle(ux, uy, vx, vy))
    sweep = ccw if direction is TurnDirection.LEFT else wrap_to_2pi(-ccw)

    if sweep < ANGLE_TOL_RAD or sweep > TWO_PI - ANGLE_TOL_RAD:
        s = direction.sign()
        vel_x, vel_y = -s * vy, s * vx
        toward = vel_x * (target.x - point_xy[0]) + vel_y * (target.y - point_xy[1])
        return 0.0 if toward >= 0.0 else TWO_PI
    return sweep


def select_tangent_point(
    pose: Pose,
    target: Target,
    circle: TurningCircle,
    beta1: float,
    beta2: float,
    direction: TurnDirection,
) -> TangentPoint:
    """First tangent point encountered when rotating from the pose in `direction`.

    For Left this is the candidate with the smaller counter-clockwise angle
    from the start; for Right, the one with the larger angle.
    """
    start_xy = (pose.x, pose.y)
    best = None
    for beta in (beta1, beta2):
        x, y = tangent_point_on_line(target, circle, beta)
        sweep = rotation_sweep(circle, start_xy, (x, y), direction, target)
        if best is None or sweep < best.sweep:
            best = TangentPoint(x=x, y=y, angle=wrap_to_2pi(circle.angle_of(x, y)), sweep=sweep)
    return best
