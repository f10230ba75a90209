from __future__ import annotations

import sys
from typing import List, Sequence

import networkx as nx
import numpy as np

from utils.errors import InvalidBounds, VertexLimitExceeded
from utils.geometry import Point

__all__ = ['DistanceGraph', 'build_distance_graph', 'SELF_DISTANCE', 'MAX_VERTICES']

# Diagonal sentinel, larger than any real pairwise distance.
SELF_DISTANCE = sys.float_info.max

# Upper bound on V; the matrix and the rasterizer are both O(V^2).
MAX_VERTICES = 2000


class DistanceGraph:
    """Dense complete graph over planar points.

    ``matrix[i, j]`` holds the Euclidean distance between points ``i`` and
    ``j``; the diagonal holds :data:`SELF_DISTANCE` so that no vertex is ever
    its own nearest neighbour.  The matrix is marked read-only once built.
    """

    def __init__(self, points: Sequence[Point], matrix: np.ndarray):
        self.points: List[Point] = [Point(float(p[0]), float(p[1])) for p in points]
        self.matrix = matrix
        self.matrix.flags.writeable = False

    @property
    def num_vertices(self) -> int:
        return len(self.points)

    def weight(self, v: int, w: int) -> float:
        return float(self.matrix[v, w])

    def row(self, v: int) -> np.ndarray:
        return self.matrix[v]

    def __len__(self) -> int:
        return self.num_vertices

    def to_nx(self) -> nx.Graph:
        """Complete weighted :class:`networkx.Graph` over the points."""
        H = nx.Graph()
        for u, p in enumerate(self.points):
            H.add_node(u, pos=p)
        for u in range(self.num_vertices):
            for v in range(u + 1, self.num_vertices):
                H.add_edge(u, v, weight=self.weight(u, v))
        return H


def build_distance_graph(points: Sequence[Point], max_vertices: int = MAX_VERTICES) -> DistanceGraph:
    """Compute the symmetric distance matrix of ``points``.

    Each unordered pair is evaluated once on the upper triangle and mirrored
    to the lower one.  Zero or one point yields a trivial matrix.  Non-finite
    coordinates, or distances that overflow, raise :class:`InvalidBounds`.
    """

    verts = len(points)
    if verts > max_vertices:
        raise VertexLimitExceeded(f"{verts} points exceed the limit of {max_vertices}")

    coords = np.asarray(points, dtype=float).reshape(verts, 2)
    if not np.isfinite(coords).all():
        raise InvalidBounds("point coordinates must be finite")
    matrix = np.zeros((verts, verts), dtype=float)
    iu, ju = np.triu_indices(verts, k=1)
    if iu.size:
        with np.errstate(over="ignore", invalid="ignore"):
            delta = coords[iu] - coords[ju]
            dist = np.hypot(delta[:, 0], delta[:, 1])
        if not np.isfinite(dist).all():
            raise InvalidBounds("pairwise distance overflows; coordinates span too wide a range")
        matrix[iu, ju] = dist
        matrix[ju, iu] = dist
    np.fill_diagonal(matrix, SELF_DISTANCE)
    return DistanceGraph(points, matrix)
