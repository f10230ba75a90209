"""Plain-text presentation of a :class:`RasterResult`."""

from __future__ import annotations

from typing import Dict, List

import numpy as np

from render.raster import BACKGROUND, EDGE, START_VERTEX, VERTEX, RasterResult

__all__ = ['DEFAULT_GLYPHS', 'downsample_grid', 'grid_to_text']

DEFAULT_GLYPHS: Dict[str, str] = {
    BACKGROUND: " ",
    EDGE: ".",
    VERTEX: "o",
    START_VERTEX: "@",
}

# Higher wins when several cells collapse into one character.
_PRIORITY = {BACKGROUND: 0, EDGE: 1, VERTEX: 2, START_VERTEX: 3}
_BY_PRIORITY = [BACKGROUND, EDGE, VERTEX, START_VERTEX]


def downsample_grid(grid: np.ndarray, factor: int) -> np.ndarray:
    """Collapse ``factor x factor`` blocks, keeping the strongest label."""

    if factor < 1:
        raise ValueError(f"downsample factor must be >= 1, got {factor}")
    if factor == 1:
        return grid
    rows, cols = grid.shape
    ranks = np.vectorize(_PRIORITY.__getitem__, otypes=[int])(grid) if grid.size else np.zeros(grid.shape, int)
    out_rows = -(-rows // factor)
    out_cols = -(-cols // factor)
    padded = np.zeros((out_rows * factor, out_cols * factor), dtype=int)
    padded[:rows, :cols] = ranks
    blocks = padded.reshape(out_rows, factor, out_cols, factor).max(axis=(1, 3))
    labels = np.array(_BY_PRIORITY)
    return labels[blocks]


def grid_to_text(result: RasterResult, glyphs: Dict[str, str] = DEFAULT_GLYPHS, downsample: int = 1) -> str:
    grid = downsample_grid(result.grid, downsample)
    rows = grid.shape[0]
    width = max((len(s) for s in result.y_labels), default=0)

    # y labels run bottom to top, spread over the rows
    margin = [""] * rows
    n = len(result.y_labels)
    for i, label in enumerate(result.y_labels):
        r = rows - 1 - round(i * (rows - 1) / (n - 1)) if n > 1 else rows - 1
        margin[r] = label

    lines: List[str] = []
    for r in range(rows):
        cells = "".join(glyphs.get(c, "?") for c in grid[r])
        lines.append(f"{margin[r]:>{width}} |{cells}|")
    lines.append(" " * width + " " + "  ".join(result.x_labels))
    lines.append(f"Vertices: {result.vertices}  Start: {result.start_location}")
    lines.append(f"MST distance: {result.distance_text}")
    lines.append(f"Status: {result.status_text}")
    return "\n".join(lines)
