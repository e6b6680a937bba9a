"""Utility helpers shared by the planner front-ends."""

from .config import load_config_any, load_config_dict, load_planner_config

__all__ = [
    "load_config_any",
    "load_config_dict",
    "load_planner_config",
]
