from __future__ import annotations

# Planner defaults (ROS parameter defaults of the original node)
TURNING_RADIUS_M: float = 1.5
PATH_RESOLUTION_M: float = 0.05

# Output envelope
FRAME_ID: str = "map"
PATH_TOPIC: str = "simple_dubins_path"

# Angles closer than this (radians) are treated as the same point on a circle
ANGLE_TOL_RAD: float = 1e-9

# Relative slack on "distance to turning center >= R" for targets on the circle
REACH_TOL: float = 1e-12
