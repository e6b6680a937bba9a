import dataclasses

import pytest

from simple_dubins.config import PlannerConfig
from simple_dubins.planning.planner import SimpleDubinsPlanner
from simple_dubins.utils.config import load_config_dict, load_planner_config


def test_defaults() -> None:
    cfg = PlannerConfig()
    assert cfg.turning_radius == 1.5
    assert cfg.path_resolution == 0.05
    assert cfg.frame_id == "map"
    assert abs(cfg.angle_increment - 0.05 / 1.5) < 1e-15


def test_config_is_immutable() -> None:
    cfg = PlannerConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.turning_radius = 2.0


@pytest.mark.parametrize("kwargs", [{"turning_radius": 0.0}, {"path_resolution": -0.1}, {"frame_id": ""}])
def test_invalid_values_rejected(kwargs) -> None:
    with pytest.raises(AssertionError):
        PlannerConfig(**kwargs)


def test_from_dict_flat_and_nested() -> None:
    flat = PlannerConfig.from_dict({"turning_radius": 2.0, "path_resolution": 0.1})
    assert flat.turning_radius == 2.0 and flat.path_resolution == 0.1
    nested = PlannerConfig.from_dict({"planner": {"turning_radius": 3.0, "frame_id": "odom"}})
    assert nested.turning_radius == 3.0
    assert nested.path_resolution == 0.05
    assert nested.frame_id == "odom"
    assert PlannerConfig.from_dict(None) == PlannerConfig()


def test_load_planner_config_with_overrides(tmp_path) -> None:
    p = tmp_path / "planner.yaml"
    p.write_text("turning_radius: 2.5\npath_resolution: 0.1\n")
    cfg = load_planner_config(str(p), ["path_resolution=0.02"])
    assert cfg.turning_radius == 2.5
    assert cfg.path_resolution == 0.02
    assert SimpleDubinsPlanner(cfg).turning_radius == 2.5


def test_load_planner_config_defaults() -> None:
    cfg = load_planner_config()
    assert cfg.turning_radius == 1.5
    assert cfg.path_resolution == 0.05


def test_load_config_dict_requires_mapping(tmp_path) -> None:
    p = tmp_path / "list.yaml"
    p.write_text("- 1\n- 2\n")
    with pytest.raises(TypeError):
        load_config_dict(str(p))


def test_load_planner_config_requires_mapping(tmp_path) -> None:
    p = tmp_path / "list.yaml"
    p.write_text("- 1\n- 2\n")
    with pytest.raises(TypeError):
        load_planner_config(str(p), ["turning_radius=2.0"])
