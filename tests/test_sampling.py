import math

import numpy as np

from simple_dubins.planning.sampling import sample_arc, sample_line
from simple_dubins.types import TurnDirection, TurningCircle


def test_line_samples_spacing_and_stop() -> None:
    pts = sample_line(1.0, 2.0, 4.0, 6.0, 0.1)  # length 5
    assert np.allclose(pts[0], [1.0, 2.0])
    steps = np.linalg.norm(np.diff(pts, axis=0), axis=1)
    assert np.allclose(steps, 0.1)
    remaining = np.linalg.norm(pts - np.array([4.0, 6.0]), axis=1)
    assert remaining[-1] <= 0.2 + 1e-9
    assert np.all(remaining[:-1] > 0.2 - 1e-9)
    assert np.all(remaining > 0.0)


def test_vertical_line_is_sampled() -> None:
    pts = sample_line(0.0, 0.0, 0.0, 3.03, 0.05)
    assert pts.shape[0] > 50
    assert np.allclose(pts[:, 0], 0.0)


def test_short_line_emits_only_start() -> None:
    pts = sample_line(0.0, 0.0, 0.07, 0.0, 0.05)
    assert pts.shape == (1, 2)


def test_zero_length_line_is_empty() -> None:
    assert sample_line(1.0, 1.0, 1.0, 1.0, 0.05).shape == (0, 2)


def test_left_arc_on_circle_counter_clockwise() -> None:
    circle = TurningCircle(0.0, 0.0, 1.0)
    pts = sample_arc(circle, 0.0, math.pi / 2, TurnDirection.LEFT, 0.1)
    assert pts.shape == (15, 2)
    assert np.allclose(np.hypot(pts[:, 0], pts[:, 1]), 1.0, atol=1e-12)
    angles = np.arctan2(pts[:, 1], pts[:, 0])
    assert np.all(np.diff(angles) > 0.0)
    assert math.pi / 2 - angles[-1] <= 0.2 + 1e-12


def test_right_arc_clockwise_across_wrap() -> None:
    circle = TurningCircle(2.0, -1.0, 1.5)
    start = 0.5
    stop = start - 4.0
    pts = sample_arc(circle, start, stop, TurnDirection.RIGHT, 0.05)
    assert np.allclose(np.hypot(pts[:, 0] - 2.0, pts[:, 1] + 1.0), 1.5, atol=1e-12)
    unwrapped = np.unwrap(np.arctan2(pts[:, 1] + 1.0, pts[:, 0] - 2.0))
    assert np.all(np.diff(unwrapped) < 0.0)
    increment = 0.05 / 1.5
    assert abs(unwrapped[-1] - stop) <= 2 * increment + 1e-9


def test_zero_sweep_arc_is_empty() -> None:
    circle = TurningCircle(0.0, 0.0, 1.5)
    assert sample_arc(circle, 1.0, 1.0, TurnDirection.LEFT, 0.05).shape == (0, 2)
