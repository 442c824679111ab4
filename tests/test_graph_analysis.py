import pytest

from grid_core import APEX, MazeTopology, RingCoordinate
from graph_analysis import (
    breadth_first_search,
    distances_from,
    eccentricity,
    farthest_from,
    shortest_path,
    tree_diameter,
)
from maze_gen import generate_maze


@pytest.fixture
def maze():
    return generate_maze(4, seed=2024)


def _assert_connected_path(topology, path):
    for a, b in zip(path, path[1:]):
        assert b in topology.accessible_neighbours(a)
        assert a in topology.accessible_neighbours(b)


def test_bfs_from_apex_visits_every_cell_of_three_rings():
    topology = generate_maze(3, seed=7)
    parents, order = breadth_first_search(topology, APEX)
    assert len(order) == 1 + 6 + 12
    assert order[0] == APEX
    assert parents[APEX] is None
    assert len(set(order)) == len(order)


def test_bfs_parents_are_neighbours(maze):
    parents, order = breadth_first_search(maze, APEX)
    for cell in order[1:]:
        assert parents[cell] in maze.accessible_neighbours(cell)


def test_shortest_path_between_cells(maze):
    start = RingCoordinate(3, 4)
    finish = RingCoordinate(1, 2)
    path = shortest_path(maze, start, finish)
    assert path[0] == start
    assert path[-1] == finish
    _assert_connected_path(maze, path)
    assert len(path) - 1 == distances_from(maze, start)[finish]


def test_shortest_path_to_itself(maze):
    assert shortest_path(maze, RingCoordinate(2, 3), RingCoordinate(2, 3)) == [
        RingCoordinate(2, 3)
    ]


def test_shortest_path_unreachable_returns_none():
    closed = [RingCoordinate(1, c) for c in range(6)]
    topology = MazeTopology(2, radial_walls=closed)
    assert shortest_path(topology, APEX, RingCoordinate(1, 0)) is None


def test_farthest_from_is_at_eccentricity(maze):
    start = RingCoordinate(2, 7)
    far = farthest_from(maze, start)
    assert distances_from(maze, start)[far] == eccentricity(maze, start)


def test_any_ring_zero_coordinate_means_the_apex(maze):
    assert distances_from(maze, RingCoordinate(0, 3)) == distances_from(maze, APEX)


def test_query_outside_the_maze_is_rejected(maze):
    with pytest.raises(ValueError):
        breadth_first_search(maze, RingCoordinate(4, 0))
    with pytest.raises(ValueError):
        shortest_path(maze, APEX, RingCoordinate(5, 0))


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_tree_diameter_is_longest_shortest_path(seed):
    topology = generate_maze(4, seed=seed)
    path = tree_diameter(topology)
    _assert_connected_path(topology, path)
    assert len(set(path)) == len(path)

    longest = max(eccentricity(topology, cell) for cell in topology.cells())
    assert len(path) - 1 == longest


def test_tree_diameter_of_large_maze_is_connected():
    topology = generate_maze(10, seed=8)
    path = tree_diameter(topology)
    _assert_connected_path(topology, path)
    # Ring 9 cells are at least 9 steps from the apex
    assert len(path) - 1 >= 9


def test_tree_diameter_of_apex_only_maze():
    assert tree_diameter(generate_maze(0, seed=0)) == [APEX]
    assert tree_diameter(generate_maze(1, seed=0)) == [APEX]
