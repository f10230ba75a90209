"""One rendering request: distance graph, Prim solve, rasterize.

Each call builds its own graph, tree and grid.  Errors from the graph and
solver stages are logged and reported in the status line of the result,
the same way the plot page accumulates them.  Bounding box errors, including
points that fall outside the box, propagate since no grid can be drawn.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from mst.prim import MST, solve_mst
from render.raster import GridConfig, RasterResult, rasterize_with
from utils.errors import InvalidBounds, PrimGridError
from utils.geometry import BoundingBox, Point, bounds_from_points
from utils.graph_utils import build_distance_graph

__all__ = ['render_prim_mst']

logger = logging.getLogger(__name__)


def render_prim_mst(
    points: Sequence[Point],
    bbox: BoundingBox,
    grid: GridConfig = GridConfig(),
    status_messages: Sequence[str] = (),
) -> RasterResult:
    status: List[str] = list(status_messages)
    bbox.validate()
    if points:
        extent = bounds_from_points(points)
        corners = (Point(extent.xmin, extent.ymin), Point(extent.xmax, extent.ymax))
        if not all(bbox.contains(c) for c in corners):
            raise InvalidBounds(f"points span {tuple(extent)}, outside the plot box {tuple(bbox)}")

    mst = MST(start=0)
    try:
        graph = build_distance_graph(points)
        mst = solve_mst(graph, start=0)
    except PrimGridError as exc:
        logger.error("MST construction failed: %s", exc)
        status.append(str(exc))
        points = []
    else:
        logger.info(
            "Solved MST over %d vertices, total weight %.4f",
            graph.num_vertices,
            mst.total_weight(graph),
        )

    return rasterize_with(mst, points, bbox, grid, status)
