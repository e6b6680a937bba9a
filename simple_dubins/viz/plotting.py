from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np

from simple_dubins.planning.path import PlannedPath
from simple_dubins.types import Pose


def draw_planned_path(ax, path: PlannedPath, start: Pose | None = None, show_circle: bool = True):
    ax.clear()
    c = path.circle
    if show_circle:
        t = np.linspace(0.0, 2.0 * np.pi, 181)
        ax.plot(c.cx + c.radius * np.cos(t), c.cy + c.radius * np.sin(t), "k--", linewidth=0.8, alpha=0.5)
        ax.plot(c.cx, c.cy, "k+", markersize=6)

    arc = path.arc_points
    line = path.line_points
    if len(arc):
        ax.plot(arc[:, 0], arc[:, 1], "c.-", linewidth=1.5, markersize=2, label="arc")
    if len(line):
        ax.plot(line[:, 0], line[:, 1], "b.-", linewidth=1.5, markersize=2, label="line")

    tp = path.tangent_point
    ax.plot(tp.x, tp.y, "mo", markersize=5, label="tangent point")

    if start is not None:
        ax.plot(start.x, start.y, "ro")
        ax.arrow(start.x, start.y, 0.3 * np.cos(start.theta), 0.3 * np.sin(start.theta), head_width=0.1, color="r")

    goal = path.goal
    ax.plot(goal.x, goal.y, "gx", markersize=8, markeredgewidth=2, label="goal")
    heading = path.goal_heading
    if heading is not None:
        ax.arrow(goal.x, goal.y, 0.3 * np.cos(heading), 0.3 * np.sin(heading), head_width=0.1, color="g")

    ax.set_aspect("equal")
    ax.set_title(
        f"{path.direction.value} turn, {path.num_arc_samples} arc + {path.num_line_samples} line samples"
    )
    ax.legend(loc="best", fontsize=8)
    return ax


def save_plot(path: PlannedPath, file: str, start: Pose | None = None) -> None:
    fig, ax = plt.subplots(figsize=(6, 6))
    try:
        draw_planned_path(ax, path, start=start)
        fig.savefig(file, dpi=100, bbox_inches="tight")
    finally:
        plt.close(fig)
