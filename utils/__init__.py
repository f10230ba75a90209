"""Shared geometry, distance graph and error types."""

from .errors import (
    PrimGridError,
    EmptyInput,
    InvalidBounds,
    VertexLimitExceeded,
    QueueUnderflow,
    DuplicateQueueInsert,
    InvalidStartVertex,
    RasterBoundsError,
)
from .geometry import Point, BoundingBox, bounds_from_points, euclidean
from .graph_utils import DistanceGraph, build_distance_graph

__all__ = [
    "PrimGridError",
    "EmptyInput",
    "InvalidBounds",
    "VertexLimitExceeded",
    "QueueUnderflow",
    "DuplicateQueueInsert",
    "InvalidStartVertex",
    "RasterBoundsError",
    "Point",
    "BoundingBox",
    "bounds_from_points",
    "euclidean",
    "DistanceGraph",
    "build_distance_graph",
]
