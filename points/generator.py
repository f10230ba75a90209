"""Random point sets for the MST plot.

Points are drawn uniformly inside a caller-supplied box.  Inverted bounds are
swapped rather than rejected, matching how the bounds arrive from user
input.  :func:`with_start_vertex` rotates another vertex into index 0 so the
same point set can be re-solved from a different start.
"""

from __future__ import annotations

import logging
import random
from typing import List, NamedTuple, Optional, Sequence, Tuple

from utils.geometry import BoundingBox, Point

__all__ = ['PointSetConfig', 'bounds_notice', 'generate_points', 'with_start_vertex', 'random_start_vertex']

logger = logging.getLogger(__name__)


class PointSetConfig(NamedTuple):
    vertices: int
    xmin: float = 0.0
    ymin: float = 0.0
    xmax: float = 100.0
    ymax: float = 100.0
    seed: Optional[int] = None


def bounds_notice(cfg: PointSetConfig) -> Optional[str]:
    """Message describing the swap of inverted bounds, or ``None``."""

    requested = BoundingBox(cfg.xmin, cfg.ymin, cfg.xmax, cfg.ymax)
    bbox = requested.normalized()
    if bbox == requested:
        return None
    return (
        f"Swapped inverted bounds to x {bbox.xmin:.2f}..{bbox.xmax:.2f}, "
        f"y {bbox.ymin:.2f}..{bbox.ymax:.2f}"
    )


def generate_points(cfg: PointSetConfig) -> Tuple[List[Point], BoundingBox]:
    """Draw ``cfg.vertices`` uniform points; returns them with their box."""

    if cfg.vertices < 0:
        raise ValueError(f"number of vertices must be non-negative, got {cfg.vertices}")
    requested = BoundingBox(cfg.xmin, cfg.ymin, cfg.xmax, cfg.ymax)
    bbox = requested.normalized().validate()
    notice = bounds_notice(cfg)
    if notice:
        logger.info(notice)

    rng = random.Random(cfg.seed)
    points = [
        Point(bbox.xmin + bbox.width * rng.random(), bbox.ymin + bbox.height * rng.random())
        for _ in range(cfg.vertices)
    ]
    logger.debug("Generated %d points in %s", len(points), tuple(bbox))
    return points, bbox


def with_start_vertex(points: Sequence[Point], index: int) -> List[Point]:
    """Copy of ``points`` with vertex ``index`` swapped into position 0."""

    pts = list(points)
    if not 0 <= index < len(pts):
        raise IndexError(f"start vertex {index} outside 0..{len(pts) - 1}")
    pts[0], pts[index] = pts[index], pts[0]
    return pts


def random_start_vertex(points: Sequence[Point], rng: Optional[random.Random] = None) -> List[Point]:
    rng = rng or random.Random()
    return with_start_vertex(points, rng.randrange(len(points)))
