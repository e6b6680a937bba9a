from __future__ import annotations

import argparse
import sys
import warnings
from typing import List, Optional

from simple_dubins.errors import PlanningError, TurningRadiusAdvisory
from simple_dubins.planning.planner import SimpleDubinsPlanner
from simple_dubins.types import Pose, Waypoint
from simple_dubins.utils.config import load_planner_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Plan a curve-then-line path from a start pose to a goal waypoint"
    )
    parser.add_argument("--start", type=float, nargs=3, metavar=("X", "Y", "THETA"), required=True)
    parser.add_argument(
        "--goal", type=float, nargs="+", metavar="V", required=True, help="X Y [THETA]"
    )
    parser.add_argument("--config", type=str, default=None, help="YAML parameter file")
    parser.add_argument(
        "--set", dest="overrides", action="append", default=[], help="Override, e.g. turning_radius=2.0"
    )
    parser.add_argument("--heading-only", action="store_true", help="Only print the final heading")
    parser.add_argument("--json", type=str, default=None, help="Write stamped path JSON")
    parser.add_argument("--csv", type=str, default=None, help="Write path samples CSV")
    parser.add_argument("--plot", type=str, default=None, help="Write a PNG of the path")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.goal) not in (2, 3):
        parser.error("--goal takes X Y or X Y THETA")

    cfg = load_planner_config(args.config, args.overrides)
    planner = SimpleDubinsPlanner(cfg)
    start = Pose(*args.start)
    goal = Pose(*args.goal) if len(args.goal) == 3 else Waypoint(*args.goal)

    try:
        if args.heading_only:
            heading = planner.get_target_heading(start, goal)
            print(f"[PLAN] target_heading={heading:.6f}")
            return 0
        with warnings.catch_warnings():
            # Reported below from path.advisories
            warnings.simplefilter("ignore", TurningRadiusAdvisory)
            path = planner.make_path(start, goal)
    except PlanningError as e:
        print(f"[ERR] {e}", file=sys.stderr)
        return 1

    for msg in path.advisories:
        print(f"[WARN] {msg}", file=sys.stderr)
    print(f"[PLAN] direction={path.direction.value}")
    print(f"[PLAN] samples={len(path)} (arc={path.num_arc_samples}, line={path.num_line_samples})")
    print(f"[PLAN] length={path.length:.3f}")
    print(f"[PLAN] final_heading={path.final_heading:.6f}")

    if args.json:
        from simple_dubins.export import save_path_json

        save_path_json(path, args.json, frame_id=cfg.frame_id)
        print(f"[PLAN] wrote {args.json}")
    if args.csv:
        from simple_dubins.export import save_path_csv

        save_path_csv(path, args.csv)
        print(f"[PLAN] wrote {args.csv}")
    if args.plot:
        import matplotlib

        matplotlib.use("Agg")
        from simple_dubins.viz.plotting import save_plot

        save_plot(path, args.plot, start=start)
        print(f"[PLAN] wrote {args.plot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
