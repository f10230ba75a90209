"""Prim's minimum spanning tree over a dense :class:`DistanceGraph`.

The start vertex is seeded into the queue at distance ``0.0`` so it is always
extracted first, and each popped vertex is the one visited.  The start vertex
never receives a parent edge.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

import networkx as nx

from mst.indexed_pq import IndexedPriorityQueue
from utils.errors import EmptyInput, InvalidStartVertex
from utils.graph_utils import DistanceGraph

__all__ = ['Edge', 'MST', 'PrimSolver', 'solve_mst']


@dataclass(frozen=True)
class Edge:
    """Tree edge from ``v`` (already in the tree) to the newly added ``w``."""

    v: int
    w: int


@dataclass
class MST:
    """Parent edges indexed by vertex; ``parent[start]`` is always ``None``."""

    start: int
    parent: List[Optional[Edge]] = field(default_factory=list)

    @property
    def num_vertices(self) -> int:
        return len(self.parent)

    def edges(self) -> Iterator[Edge]:
        """Recorded edges in vertex-index order."""
        for e in self.parent:
            if e is not None:
                yield e

    def __len__(self) -> int:
        return sum(1 for _ in self.edges())

    def total_weight(self, graph: DistanceGraph) -> float:
        return sum(graph.weight(e.v, e.w) for e in self.edges())

    def is_spanning(self) -> bool:
        """True when every vertex but the start has a parent edge."""
        return all((e is None) == (w == self.start) for w, e in enumerate(self.parent))

    def to_nx(self, graph: DistanceGraph) -> nx.Graph:
        """Tree as a weighted :class:`networkx.Graph` with node positions."""
        H = nx.Graph()
        for u, p in enumerate(graph.points):
            H.add_node(u, pos=p)
        for e in self.edges():
            H.add_edge(e.v, e.w, weight=graph.weight(e.v, e.w))
        return H


class PrimSolver:
    """Grow a single tree from ``start`` one cheapest vertex at a time."""

    def __init__(self, graph: DistanceGraph, start: int = 0):
        verts = graph.num_vertices
        if verts == 0:
            raise EmptyInput("no vertices to span")
        if not 0 <= start < verts:
            raise InvalidStartVertex(f"start vertex {start} outside 0..{verts - 1}")
        self.graph = graph
        self.start = start
        self.marked: List[bool] = [False] * verts
        self.dist_to: List[float] = [math.inf] * verts
        self.mst = MST(start=start, parent=[None] * verts)
        self.pq = IndexedPriorityQueue(verts)
        self.pq.push(start, 0.0)
        self.dist_to[start] = 0.0

    @property
    def done(self) -> bool:
        return self.pq.is_empty()

    def visit(self, v: int) -> None:
        self.marked[v] = True
        row = self.graph.row(v)
        for w in range(self.graph.num_vertices):
            if w == v or self.marked[w]:
                continue
            dist = float(row[w])
            if dist < self.dist_to[w]:
                # new best connection from the tree to w
                self.mst.parent[w] = Edge(v, w)
                self.dist_to[w] = dist
                self.pq.decrease_or_insert(w, dist)

    def step(self) -> int:
        """Extract the nearest vertex and add it to the tree."""
        item = self.pq.pop_min()
        self.visit(item.vertex)
        return item.vertex

    def solve(self) -> MST:
        while not self.done:
            self.step()
        return self.mst


def solve_mst(graph: DistanceGraph, start: int = 0) -> MST:
    """Minimum spanning tree of ``graph`` rooted at ``start``."""
    return PrimSolver(graph, start).solve()
