import math
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from utils import BoundingBox, InvalidBounds, Point, PrimGridError, VertexLimitExceeded, build_distance_graph, bounds_from_points
from utils.graph_utils import SELF_DISTANCE


def test_distance_matrix_symmetric_with_sentinel_diagonal():
    pts = [Point(0.0, 0.0), Point(3.0, 4.0), Point(-1.0, 2.0)]
    G = build_distance_graph(pts)
    assert G.num_vertices == 3
    assert G.weight(0, 1) == pytest.approx(5.0)
    assert G.weight(0, 2) == pytest.approx(math.sqrt(5.0))
    for i in range(3):
        assert G.weight(i, i) == SELF_DISTANCE
        for j in range(3):
            assert G.weight(i, j) == G.weight(j, i)
            if i != j:
                assert G.weight(i, j) < G.weight(i, i)


def test_matrix_is_read_only():
    G = build_distance_graph([Point(0.0, 0.0), Point(1.0, 1.0)])
    with pytest.raises(ValueError):
        G.matrix[0, 1] = 0.0


def test_degenerate_sizes():
    assert build_distance_graph([]).matrix.shape == (0, 0)
    single = build_distance_graph([Point(2.0, 2.0)])
    assert single.matrix.shape == (1, 1)
    assert single.weight(0, 0) == SELF_DISTANCE


def test_vertex_limit():
    pts = [Point(float(i), 0.0) for i in range(5)]
    with pytest.raises(VertexLimitExceeded):
        build_distance_graph(pts, max_vertices=4)


def test_to_nx_is_complete():
    pts = [Point(0.0, 0.0), Point(0.0, 1.0), Point(1.0, 0.0), Point(1.0, 1.0)]
    H = build_distance_graph(pts).to_nx()
    assert H.number_of_nodes() == 4
    assert H.number_of_edges() == 6
    assert H[0][3]["weight"] == pytest.approx(math.sqrt(2.0))


def test_bounding_box_helpers():
    box = bounds_from_points([Point(1.0, 5.0), Point(-2.0, 3.0)])
    assert box == BoundingBox(-2.0, 3.0, 1.0, 5.0)
    assert box.diagonal == pytest.approx(math.hypot(3.0, 2.0))
    assert BoundingBox(4.0, 3.0, 1.0, 0.0).normalized() == BoundingBox(1.0, 0.0, 4.0, 3.0)
    with pytest.raises(InvalidBounds):
        BoundingBox(1.0, 0.0, 1.0, 2.0).validate()
    with pytest.raises(InvalidBounds):
        BoundingBox(0.0, 2.0, 1.0, 2.0).validate()


def test_overflowing_distances_rejected():
    with pytest.raises(InvalidBounds):
        build_distance_graph([Point(-1e308, 0.0), Point(1e308, 0.0)])
    with pytest.raises(PrimGridError):
        build_distance_graph([Point(0.0, 0.0), Point(0.0, 1.5e308), Point(0.0, -1.5e308)])


@pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan])
def test_non_finite_coordinates_rejected(bad):
    with pytest.raises(InvalidBounds):
        build_distance_graph([Point(0.0, 0.0), Point(bad, 1.0)])
