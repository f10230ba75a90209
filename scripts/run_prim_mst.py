"""Generate random points, solve their MST and print the plot.

The configuration file provides the point bounds and count under
``points`` and the grid resolution under ``grid``; both may sit below a
``primmst`` root key.  The plot is written to stdout as text.
"""

import argparse
import json
import logging
import os
import random
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mst.pipeline import render_prim_mst
from points.generator import (
    PointSetConfig,
    bounds_notice,
    generate_points,
    random_start_vertex,
    with_start_vertex,
)
from render.raster import GridConfig
from render.text import grid_to_text
from utils.errors import PrimGridError
from utils.logging_config import setup_logging

logger = logging.getLogger("run_prim_mst")


def load_config(path: str):
    with open(path, "r") as f:
        return json.load(f)


def main() -> int:
    parser = argparse.ArgumentParser(description="Plot a Euclidean MST found with Prim's algorithm")
    parser.add_argument("--config", type=str, required=True)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--vertices", type=int, default=None,
                        help="override the number of points in the config")
    parser.add_argument("--start", type=str, default="0",
                        help="start vertex index, or 'random'")
    parser.add_argument("--downsample", type=int, default=4,
                        help="collapse NxN grid cells into one character")
    parser.add_argument("--log-level", type=str, default="WARNING")
    parser.add_argument("--log-file", type=str, default=None)
    args = parser.parse_args()

    setup_logging(getattr(logging, args.log_level.upper(), logging.WARNING), args.log_file)

    cfg_all = load_config(args.config)
    cfg_root = cfg_all.get("primmst", cfg_all)
    point_cfg = PointSetConfig(**cfg_root["points"])
    if args.seed is not None:
        point_cfg = point_cfg._replace(seed=args.seed)
    if args.vertices is not None:
        point_cfg = point_cfg._replace(vertices=args.vertices)
    grid_cfg = GridConfig(**cfg_root.get("grid", {}))

    try:
        points, bbox = generate_points(point_cfg)
        notice = bounds_notice(point_cfg)
        status = [notice] if notice else []
        if points and args.start == "random":
            points = random_start_vertex(points, random.Random(point_cfg.seed))
        elif points and args.start != "0":
            points = with_start_vertex(points, int(args.start))
        result = render_prim_mst(points, bbox, grid_cfg, status)
    except (PrimGridError, ValueError, IndexError) as exc:
        logger.error("Cannot plot MST: %s", exc)
        return 1

    print(grid_to_text(result, downsample=args.downsample))
    return 0


if __name__ == "__main__":
    sys.exit(main())
