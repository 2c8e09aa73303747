"""Print the enemy path of a stage board file.

Usage:
  python scripts/sample_path.py stages/01_outbreak.json --step 0.5
  python scripts/sample_path.py stages/01_outbreak.json --length 7.25

CORONA_DEFENSE_LOG_LEVEL sets the log level (default INFO).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from corona_defense.stage.catalog import load_stage_file
from corona_defense.stage.errors import StageError


def main() -> None:
    load_dotenv()
    logging.basicConfig(
        level=os.environ.get("CORONA_DEFENSE_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    ap = argparse.ArgumentParser(description="Sample points along a stage's enemy path")
    ap.add_argument("board", type=Path, help="Board file (JSON)")
    ap.add_argument("--step", type=float, default=1.0, help="Distance between samples")
    ap.add_argument(
        "--length",
        type=float,
        action="append",
        help="Query a single length instead of sampling (repeatable)",
    )
    args = ap.parse_args()

    try:
        stage = load_stage_file(args.board)
    except (OSError, StageError) as exc:
        print(f"  [!] {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Stage     : {stage.number}  {stage.name}")
    print(f"Board     : {stage.x_size} x {stage.y_size}, {len(stage.blocked_tiles)} blocked tile(s)")
    print(f"Waypoints : {len(stage.waypoints)}")
    print(f"Length    : {stage.path_length:.3f}")
    print()

    if args.length:
        rows = [(length, stage.point_along_path(length)) for length in args.length]
    else:
        try:
            rows = stage.path.sample(args.step)
        except ValueError as exc:
            print(f"  [!] {exc}", file=sys.stderr)
            sys.exit(2)

    print(f"{'length':>10}  {'x':>10}  {'y':>10}")
    for length, pt in rows:
        print(f"{length:10.3f}  {pt.x:10.3f}  {pt.y:10.3f}")


if __name__ == "__main__":
    main()
