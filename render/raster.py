"""Rasterization of a spanning tree onto a fixed grid of cell labels.

Cells carry the CSS class names used by the display layer: ``"edge"`` for
interpolated edge samples, ``"vertex"`` for tree vertices and
``"startvertex"`` for the start vertex and its four direct neighbours.  Row 0
is the top of the plot (``ymax``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Sequence, Tuple

import numpy as np

from mst.prim import MST
from utils.errors import RasterBoundsError
from utils.geometry import BoundingBox, Point, euclidean

__all__ = [
    'BACKGROUND',
    'VERTEX',
    'START_VERTEX',
    'EDGE',
    'DEFAULT_STATUS',
    'GridConfig',
    'RasterResult',
    'project',
    'rasterize',
    'rasterize_with',
]

BACKGROUND = ""
VERTEX = "vertex"
START_VERTEX = "startvertex"
EDGE = "edge"

DEFAULT_STATUS = "Check new start vertex for another MST using the same vertices"


class GridConfig(NamedTuple):
    rows: int = 300
    columns: int = 300
    xlabels: int = 11
    ylabels: int = 11


@dataclass
class RasterResult:
    """Rendered grid plus the summary strings shown next to it."""

    grid: np.ndarray
    x_labels: List[str]
    y_labels: List[str]
    total_distance: float
    distance_text: str
    status_text: str
    vertices: str = "0"
    start_location: str = ""
    bounds_text: Dict[str, str] = field(default_factory=dict)

    @property
    def rows(self) -> int:
        return self.grid.shape[0]

    @property
    def columns(self) -> int:
        return self.grid.shape[1]


class _Projection:
    """Linear map from plot coordinates to grid cells."""

    def __init__(self, bbox: BoundingBox, rows: int, columns: int):
        self.bbox = bbox
        self.rows = rows
        self.columns = columns
        self.xscale = (columns - 1) / (bbox.xmax - bbox.xmin)
        self.yscale = (rows - 1) / (bbox.ymax - bbox.ymin)

    def cell(self, x: float, y: float) -> Tuple[int, int]:
        row = int((self.bbox.ymax - y) * self.yscale + 0.5)
        col = int((x - self.bbox.xmin) * self.xscale + 0.5)
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            raise RasterBoundsError(
                f"point ({x:.4f}, {y:.4f}) maps to cell ({row}, {col}) outside "
                f"{self.rows}x{self.columns} grid"
            )
        return row, col


def project(p: Point, bbox: BoundingBox, rows: int, columns: int) -> Tuple[int, int]:
    """Grid ``(row, col)`` of point ``p``; raises if it lands off the grid."""
    return _Projection(bbox.validate(), rows, columns).cell(p[0], p[1])


def _axis_labels(lo: float, hi: float, count: int) -> List[str]:
    if count <= 0:
        return []
    return [f"{v:.2f}" for v in np.linspace(lo, hi, count)]


def rasterize(
    mst: MST,
    points: Sequence[Point],
    bbox: BoundingBox,
    rows: int,
    columns: int,
    xlabels: int,
    ylabels: int,
    status_messages: Sequence[str] = (),
) -> RasterResult:
    """Draw ``mst`` onto a ``rows x columns`` grid.

    Edges are drawn in vertex-index order as ``steps`` evenly spaced samples,
    where ``steps`` is proportional to the edge's share of the bounding box
    diagonal.  Endpoints are marked afterwards so vertices win over edge
    samples, and the start vertex cross is drawn last.
    """

    bbox.validate()
    if rows <= 0 or columns <= 0:
        raise ValueError(f"grid must have positive size, got {rows}x{columns}")
    if mst.num_vertices and mst.num_vertices != len(points):
        raise ValueError(f"tree spans {mst.num_vertices} vertices but {len(points)} points were given")

    proj = _Projection(bbox, rows, columns)
    grid = np.full((rows, columns), BACKGROUND, dtype=f"<U{len(START_VERTEX)}")
    diagonal = bbox.diagonal
    distance = 0.0

    for e in mst.edges():
        begin = points[e.v]
        end = points[e.w]
        length = euclidean(begin, end)
        distance += length
        steps = max(1, int(columns * length / diagonal))
        dx = (end[0] - begin[0]) / steps
        dy = (end[1] - begin[1]) / steps

        cells = [proj.cell(begin[0] + i * dx, begin[1] + i * dy) for i in range(steps)]
        first = proj.cell(*begin)
        last = proj.cell(*end)
        for row, col in cells:
            grid[row, col] = EDGE
        grid[first] = VERTEX
        grid[last] = VERTEX

    start_location = ""
    if points and mst.num_vertices:
        x, y = points[mst.start]
        start_location = f"({x:.2f}, {y:.2f})"
        row, col = proj.cell(x, y)
        for r, c in ((row, col), (row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1)):
            # the cross is clipped where the start vertex sits on the border
            if 0 <= r < rows and 0 <= c < columns:
                grid[r, c] = START_VERTEX

    status_text = ", ".join(status_messages) if status_messages else DEFAULT_STATUS

    return RasterResult(
        grid=grid,
        x_labels=_axis_labels(bbox.xmin, bbox.xmax, xlabels),
        y_labels=_axis_labels(bbox.ymin, bbox.ymax, ylabels),
        total_distance=distance,
        distance_text=f"{distance:.2f}",
        status_text=status_text,
        vertices=str(len(points)),
        start_location=start_location,
        bounds_text={
            "xmin": f"{bbox.xmin:.2f}",
            "xmax": f"{bbox.xmax:.2f}",
            "ymin": f"{bbox.ymin:.2f}",
            "ymax": f"{bbox.ymax:.2f}",
        },
    )


def rasterize_with(
    mst: MST,
    points: Sequence[Point],
    bbox: BoundingBox,
    grid: GridConfig,
    status_messages: Sequence[str] = (),
) -> RasterResult:
    return rasterize(
        mst,
        points,
        bbox,
        rows=grid.rows,
        columns=grid.columns,
        xlabels=grid.xlabels,
        ylabels=grid.ylabels,
        status_messages=status_messages,
    )
