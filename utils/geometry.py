from __future__ import annotations

import math
from typing import Iterable, NamedTuple

from utils.errors import EmptyInput, InvalidBounds

__all__ = ['Point', 'BoundingBox', 'bounds_from_points', 'euclidean']


class Point(NamedTuple):
    x: float
    y: float


class BoundingBox(NamedTuple):
    """Axis-aligned box ``(xmin, ymin, xmax, ymax)`` enclosing a point set."""

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def diagonal(self) -> float:
        """Length of the span from ``(xmin, ymin)`` to ``(xmax, ymax)``."""
        return math.hypot(self.width, self.height)

    def validate(self) -> 'BoundingBox':
        if not self.xmin < self.xmax:
            raise InvalidBounds(f"xmin ({self.xmin}) must be less than xmax ({self.xmax})")
        if not self.ymin < self.ymax:
            raise InvalidBounds(f"ymin ({self.ymin}) must be less than ymax ({self.ymax})")
        return self

    def normalized(self) -> 'BoundingBox':
        """Return a copy with inverted min/max pairs swapped."""
        xmin, xmax = sorted((self.xmin, self.xmax))
        ymin, ymax = sorted((self.ymin, self.ymax))
        return BoundingBox(xmin, ymin, xmax, ymax)

    def contains(self, p: Point) -> bool:
        return self.xmin <= p[0] <= self.xmax and self.ymin <= p[1] <= self.ymax


def euclidean(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def bounds_from_points(points: Iterable[Point]) -> BoundingBox:
    """Smallest box enclosing ``points``.

    Raises :class:`EmptyInput` for an empty sequence.  The box may be
    degenerate (zero width or height); call :meth:`BoundingBox.validate`
    before rasterizing.
    """
    pts = list(points)
    if not pts:
        raise EmptyInput("cannot compute bounds of an empty point set")
    xs = [p[0] for p in pts]
    ys = [p[1] for p in pts]
    return BoundingBox(min(xs), min(ys), max(xs), max(ys))
