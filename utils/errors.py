"""Error types raised by the MST solver and the grid rasterizer."""

__all__ = [
    'PrimGridError',
    'EmptyInput',
    'InvalidBounds',
    'VertexLimitExceeded',
    'QueueUnderflow',
    'DuplicateQueueInsert',
    'InvalidStartVertex',
    'RasterBoundsError',
]


class PrimGridError(Exception):
    """Base class for all errors raised by this package."""


class EmptyInput(PrimGridError, ValueError):
    """No points were supplied to the solver."""


class InvalidBounds(PrimGridError, ValueError):
    """Bounding box with ``xmin >= xmax`` or ``ymin >= ymax``."""


class VertexLimitExceeded(PrimGridError, ValueError):
    """Point set too large for the dense distance matrix."""


class QueueUnderflow(PrimGridError, IndexError):
    """``pop_min`` called on an empty priority queue."""


class DuplicateQueueInsert(PrimGridError, KeyError):
    """``push`` called for a vertex that already has a live queue item."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class InvalidStartVertex(PrimGridError, IndexError):
    """Start vertex outside ``0..V-1``."""


class RasterBoundsError(PrimGridError, IndexError):
    """A projected cell falls outside the raster grid."""
