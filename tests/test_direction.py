import math

import numpy as np

from simple_dubins.planning.geometry import turning_center, turning_direction
from simple_dubins.types import Pose, TurnDirection, Waypoint


def test_target_left_of_heading_turns_left() -> None:
    assert turning_direction(Pose(0.0, 0.0, 0.0), Waypoint(1.0, 1.0)) is TurnDirection.LEFT


def test_target_right_of_heading_turns_right() -> None:
    assert turning_direction(Pose(0.0, 0.0, 0.0), Waypoint(1.0, -1.0)) is TurnDirection.RIGHT


def test_target_on_heading_line_defaults_right() -> None:
    assert turning_direction(Pose(0.0, 0.0, 0.0), Waypoint(5.0, 0.0)) is TurnDirection.RIGHT
    assert turning_direction(Pose(0.0, 0.0, 0.0), Waypoint(-5.0, 0.0)) is TurnDirection.RIGHT


def test_direction_follows_rotated_heading() -> None:
    # Facing +y, a target at -x is on the left
    pose = Pose(0.0, 0.0, math.pi / 2)
    assert turning_direction(pose, Waypoint(-1.0, 1.0)) is TurnDirection.LEFT
    assert turning_direction(pose, Waypoint(1.0, 1.0)) is TurnDirection.RIGHT


def test_direction_sign() -> None:
    assert TurnDirection.LEFT.sign() == 1
    assert TurnDirection.RIGHT.sign() == -1


def test_turning_center_picks_circle_closest_to_target() -> None:
    pose = Pose(0.0, 0.0, 0.0)
    left = turning_center(pose, Waypoint(1.0, 1.0), 1.5)
    assert abs(left.cx - 0.0) < 1e-12 and abs(left.cy - 1.5) < 1e-12
    right = turning_center(pose, Waypoint(1.0, -1.0), 1.5)
    assert abs(right.cx - 0.0) < 1e-12 and abs(right.cy + 1.5) < 1e-12
    assert left.radius == 1.5


def test_turning_center_tie_uses_clockwise_circle() -> None:
    circle = turning_center(Pose(0.0, 0.0, 0.0), Waypoint(10.0, 0.0), 1.5)
    assert abs(circle.cy + 1.5) < 1e-12


def test_turning_circle_passes_through_pose() -> None:
    pose = Pose(2.0, -1.0, 0.7)
    circle = turning_center(pose, Waypoint(5.0, 4.0), 2.0)
    assert abs(circle.distance_to(pose.x, pose.y) - 2.0) < 1e-12


def test_direction_agrees_with_closer_circle() -> None:
    rng = np.random.default_rng(3)
    R = 1.5
    for _ in range(500):
        x, y = rng.uniform(-5, 5, size=2)
        th = rng.uniform(-math.pi, math.pi)
        tx, ty = rng.uniform(-10, 10, size=2)
        pose = Pose(float(x), float(y), float(th))
        target = Waypoint(float(tx), float(ty))
        lateral = -(tx - x) * math.sin(th) + (ty - y) * math.cos(th)
        if abs(lateral) < 1e-9:
            continue
        circle = turning_center(pose, target, R)
        # Center lies on the left normal for a Left turn, on the right normal otherwise
        side = -(circle.cx - x) * math.sin(th) + (circle.cy - y) * math.cos(th)
        expected = TurnDirection.LEFT if side > 0 else TurnDirection.RIGHT
        assert turning_direction(pose, target) is expected
