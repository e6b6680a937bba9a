"""Config loading helpers built around OmegaConf."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from omegaconf import OmegaConf

from simple_dubins.config import PlannerConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "configs" / "simple_dubins.yaml"


def load_config_any(path: str) -> Any:
    """Load a YAML/OMEGACONF file and return the resolved Python object."""
    return OmegaConf.to_container(OmegaConf.load(path), resolve=True)


def load_config_dict(path: str) -> Dict[str, Any]:
    """Load a config file and guarantee a `dict` result."""
    cfg = load_config_any(path)
    if not isinstance(cfg, dict):
        raise TypeError(f"Expected mapping at {path}, got {type(cfg)}")
    return cfg


def load_planner_config(
    path: Optional[str] = None, overrides: Optional[Sequence[str]] = None
) -> PlannerConfig:
    """Build a PlannerConfig from a YAML file plus `key=value` overrides.

    Without a path the bundled defaults are used when present.
    """
    cfg: Dict[str, Any] = {}
    if path is not None:
        cfg = load_config_dict(path)
    elif DEFAULT_CONFIG_PATH.is_file():
        cfg = load_config_dict(str(DEFAULT_CONFIG_PATH))
    if overrides:
        merged = OmegaConf.merge(OmegaConf.create(cfg), OmegaConf.from_dotlist(list(overrides)))
        cfg = OmegaConf.to_container(merged, resolve=True)
    return PlannerConfig.from_dict(cfg)
