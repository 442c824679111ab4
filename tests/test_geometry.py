import math
from fractions import Fraction

import numpy as np
import pytest

import constants as const
from grid_core import APEX, MazeTopology, RingCoordinate
from geometry import (
    cell_center,
    display_angle,
    extract_wall_segments,
    merge_arcs,
    merge_lines,
    merge_path_segments,
    path_points,
    solution_polyline,
)
from graph_analysis import tree_diameter
from maze_gen import generate_maze
from maze_io import deserialize_maze

FOUR_RING_FIXTURE = {
    "rings": 4,
    "radialWalls": [
        {"ring": 1, "cell": c} for c in (0, 3, 4, 5)
    ] + [
        {"ring": 2, "cell": c} for c in (1, 2, 4, 5, 6, 9, 11)
    ] + [
        {"ring": 3, "cell": c} for c in (3, 4, 8, 9, 10)
    ] + [
        {"ring": 4, "cell": c} for c in range(24)
    ],
    "angularWalls": [
        {"ring": 1, "cell": c} for c in (0, 1, 2, 3)
    ] + [
        {"ring": 2, "cell": c} for c in (0, 2, 5, 6, 8, 10)
    ] + [
        {"ring": 3, "cell": c} for c in (1, 2, 7, 8)
    ],
}


@pytest.fixture
def fixture_maze():
    return deserialize_maze(FOUR_RING_FIXTURE)


def test_merge_lines_with_four_rings(fixture_maze):
    merged = merge_lines(fixture_maze)
    assert len(merged) == 9
    # Spoke at 60 degrees runs uninterrupted through rings 1-3
    assert (RingCoordinate(1, 1), RingCoordinate(4, 4)) in merged
    for inner, outer in merged:
        assert inner.angle == outer.angle
        assert outer.ring > inner.ring


def test_merge_arcs_with_four_rings(fixture_maze):
    merged = merge_arcs(fixture_maze)
    assert len(merged) == 8
    # Ring 1 run 3, 4, 5, 0 wraps past zero
    assert (RingCoordinate(1, 3), RingCoordinate(1, 1)) in merged
    # Closed outer boundary is a full circle
    assert (RingCoordinate(4, 0), RingCoordinate(4, 0)) in merged


def test_cell_centres():
    assert cell_center(APEX) == (0.0, 0.0)
    x, y = cell_center(RingCoordinate(1, 0))
    radius = const.RING_SPACING * 1.5
    assert x == pytest.approx(radius * math.cos(math.radians(30)))
    assert y == pytest.approx(radius * math.sin(math.radians(30)))
    assert display_angle(RingCoordinate(8, 0)) == Fraction(15, 4)


def test_wall_segments_stay_inside_outer_circle():
    topology = generate_maze(6, seed=5)
    limit = const.RING_SPACING * 6 + 1e-6
    segments = extract_wall_segments(topology)
    assert segments
    for p1, p2 in segments:
        assert math.hypot(*p1) <= limit
        assert math.hypot(*p2) <= limit


def test_open_maze_has_no_wall_segments():
    assert extract_wall_segments(MazeTopology(3)) == []


def test_merge_path_segments_groups_arcs_and_lines():
    path = [
        RingCoordinate(2, 0),
        RingCoordinate(2, 1),
        RingCoordinate(2, 2),
        RingCoordinate(1, 1),
        RingCoordinate(1, 2),
    ]
    assert merge_path_segments(path) == [
        ("arc", RingCoordinate(2, 0), RingCoordinate(2, 2), True),
        ("line", RingCoordinate(2, 2), RingCoordinate(1, 1)),
        ("arc", RingCoordinate(1, 1), RingCoordinate(1, 2), True),
    ]


def test_merge_path_segments_direction_and_straight_runs():
    assert merge_path_segments([RingCoordinate(1, 0), RingCoordinate(1, 5)]) == [
        ("arc", RingCoordinate(1, 0), RingCoordinate(1, 5), False)
    ]
    ray = [RingCoordinate(4, 0), RingCoordinate(5, 0), RingCoordinate(6, 0)]
    assert merge_path_segments(ray) == [("line", RingCoordinate(4, 0), RingCoordinate(6, 0))]
    assert merge_path_segments([APEX]) == []


def test_solution_polyline_follows_the_path():
    topology = generate_maze(5, seed=9)
    path = tree_diameter(topology)
    points = solution_polyline(path)
    assert np.allclose(points[0], cell_center(path[0]))
    assert np.allclose(points[-1], cell_center(path[-1]))
    radii = np.hypot(points[:, 0], points[:, 1])
    assert radii.max() <= const.RING_SPACING * 5 + 1e-6
    assert len(points) >= len(path)


def test_path_points_shape():
    path = [APEX, RingCoordinate(1, 2)]
    points = path_points(path)
    assert points.shape == (2, 2)
    assert path_points([]).shape == (0, 2)
