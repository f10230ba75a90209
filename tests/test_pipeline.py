import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mst.pipeline import render_prim_mst
from points.generator import PointSetConfig, generate_points
from render.raster import BACKGROUND, START_VERTEX, GridConfig
from render.text import downsample_grid, grid_to_text
from utils import BoundingBox, InvalidBounds, Point


def test_pipeline_square():
    pts = [Point(0.0, 0.0), Point(0.0, 1.0), Point(1.0, 0.0), Point(1.0, 1.0)]
    res = render_prim_mst(pts, BoundingBox(0.0, 0.0, 1.0, 1.0), GridConfig(rows=30, columns=30))
    assert res.distance_text == "2.00"
    assert len(res.x_labels) == 11


def test_pipeline_reports_empty_input(caplog):
    with caplog.at_level(logging.ERROR):
        res = render_prim_mst([], BoundingBox(0.0, 0.0, 1.0, 1.0), GridConfig(rows=10, columns=10), ["note"])
    assert res.status_text.startswith("note, ")
    assert "no vertices" in res.status_text
    assert (res.grid == BACKGROUND).all()
    assert "MST construction failed" in caplog.text


def test_pipeline_rejects_bad_bounds():
    with pytest.raises(InvalidBounds):
        render_prim_mst([Point(0.0, 0.0)], BoundingBox(0.0, 0.0, 0.0, 1.0))


def test_text_rendering():
    pts, box = generate_points(PointSetConfig(vertices=12, seed=2))
    res = render_prim_mst(pts, box, GridConfig(rows=40, columns=40, xlabels=3, ylabels=3))
    text = grid_to_text(res, downsample=2)
    lines = text.splitlines()
    assert len(lines) == 20 + 4
    assert "@" in text
    assert lines[0].startswith("100.00 |")
    assert lines[19].startswith("  0.00 |")
    assert f"MST distance: {res.distance_text}" in text


def test_downsample_keeps_strongest_label():
    res = render_prim_mst([Point(0.5, 0.5), Point(0.9, 0.9)], BoundingBox(0.0, 0.0, 1.0, 1.0),
                          GridConfig(rows=9, columns=9))
    small = downsample_grid(res.grid, 4)
    assert small.shape == (3, 3)
    assert (small == START_VERTEX).any()
    with pytest.raises(ValueError):
        downsample_grid(res.grid, 0)


def test_pipeline_rejects_points_outside_box():
    pts = [Point(0.0, 0.0), Point(2.0, 0.5)]
    with pytest.raises(InvalidBounds):
        render_prim_mst(pts, BoundingBox(0.0, 0.0, 1.0, 1.0), GridConfig(rows=10, columns=10))
