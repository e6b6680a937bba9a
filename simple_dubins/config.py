from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .constants import FRAME_ID, PATH_RESOLUTION_M, TURNING_RADIUS_M


@dataclass(frozen=True)
class PlannerConfig:
    """Fixed parameters of one planner instance.

    - turning_radius: minimum turning radius R (meters)
    - path_resolution: spacing between consecutive path samples (meters)
    - frame_id: frame the produced path is expressed in
    """

    turning_radius: float = TURNING_RADIUS_M
    path_resolution: float = PATH_RESOLUTION_M
    frame_id: str = FRAME_ID

    def __post_init__(self) -> None:
        assert self.turning_radius > 0.0, "turning_radius must be > 0"
        assert self.path_resolution > 0.0, "path_resolution must be > 0"
        assert self.frame_id, "frame_id must be non-empty"

    @property
    def angle_increment(self) -> float:
        """Angular step (rad) that moves `path_resolution` along the turning circle."""
        return self.path_resolution / self.turning_radius

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any] | None) -> "PlannerConfig":
        d = cfg or {}
        # Allow a nested `planner:` section or top-level parameters
        section = d.get("planner") or {}
        return cls(
            turning_radius=float(d.get("turning_radius", section.get("turning_radius", TURNING_RADIUS_M))),
            path_resolution=float(d.get("path_resolution", section.get("path_resolution", PATH_RESOLUTION_M))),
            frame_id=str(d.get("frame_id", section.get("frame_id", FRAME_ID))),
        )
