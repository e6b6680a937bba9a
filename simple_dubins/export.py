"""Stamped path envelope and file writers.

The envelope mirrors a nav_msgs/Path message (header + stamped poses) so a
transport can publish it on PATH_TOPIC unchanged. Only the last pose carries
a heading; intermediate samples have `heading: None`.
"""

from __future__ import annotations

import csv
import json
import time
from typing import Any, Dict, Optional

from simple_dubins.constants import FRAME_ID, PATH_TOPIC
from simple_dubins.planning.path import PlannedPath

__all__ = ["PATH_TOPIC", "path_to_message", "save_path_csv", "save_path_json"]


def _header(frame_id: str, stamp: float) -> Dict[str, Any]:
    return {"frame_id": frame_id, "stamp": stamp}


def path_to_message(
    path: PlannedPath, frame_id: Optional[str] = None, stamp: Optional[float] = None
) -> Dict[str, Any]:
    """Build the stamped envelope for `path`; stamp defaults to the current time."""
    frame = frame_id or FRAME_ID
    t = time.time() if stamp is None else float(stamp)
    n = len(path)
    poses = []
    for i, (x, y) in enumerate(path.points):
        poses.append(
            {
                "header": _header(frame, t),
                "position": {"x": float(x), "y": float(y)},
                "heading": path.goal_heading if i == n - 1 else None,
            }
        )
    return {"header": _header(frame, t), "poses": poses}


def save_path_json(path: PlannedPath, file: str, frame_id: Optional[str] = None) -> None:
    msg = path_to_message(path, frame_id=frame_id)
    with open(file, "w", encoding="utf-8") as f:
        json.dump(msg, f, indent=2)


def save_path_csv(path: PlannedPath, file: str) -> None:
    """Write one `x,y,heading` row per sample; heading is empty except on the goal row."""
    n = len(path)
    goal_heading = path.goal_heading
    with open(file, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["x", "y", "heading"])
        for i, (x, y) in enumerate(path.points):
            heading = goal_heading if i == n - 1 and goal_heading is not None else ""
            writer.writerow([f"{x:.6f}", f"{y:.6f}", heading])
