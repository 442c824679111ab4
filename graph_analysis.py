# graph_analysis.py
from collections import deque
from typing import Dict, List, Optional, Tuple

# Import from other project modules
from grid_core import APEX, MazeTopology, RingCoordinate

Parents = Dict[RingCoordinate, Optional[RingCoordinate]]


def _normalize(topology: MazeTopology, coord: RingCoordinate) -> RingCoordinate:
    """Maps any ring-0 coordinate onto the apex and rejects coordinates outside the maze."""
    if not topology.contains(coord):
        raise ValueError(
            f"{coord!r} is not a maze cell (maze has rings 0..{topology.ring_count - 1})."
        )
    return APEX if coord.is_apex else coord


def breadth_first_search(
    topology: MazeTopology, start: RingCoordinate
) -> Tuple[Parents, List[RingCoordinate]]:
    """BFS over open passages. Returns (parent map with start -> None, visitation order)."""
    start = _normalize(topology, start)
    parents: Parents = {start: None}
    order: List[RingCoordinate] = []
    queue = deque([start])

    while queue:
        current = queue.popleft()
        order.append(current)
        for neighbour in sorted(topology.accessible_neighbours(current)):
            if neighbour not in parents:
                parents[neighbour] = current
                queue.append(neighbour)

    return parents, order


def _walk_back(parents: Parents, finish: RingCoordinate) -> List[RingCoordinate]:
    path: List[RingCoordinate] = []
    current: Optional[RingCoordinate] = finish
    while current is not None:
        path.append(current)
        current = parents[current]
    path.reverse()
    return path


def shortest_path(
    topology: MazeTopology, start: RingCoordinate, finish: RingCoordinate
) -> Optional[List[RingCoordinate]]:
    """Shortest path from start to finish inclusive, or None if finish is unreachable."""
    finish = _normalize(topology, finish)
    parents, _ = breadth_first_search(topology, start)
    if finish not in parents:
        return None
    return _walk_back(parents, finish)


def distances_from(
    topology: MazeTopology, start: RingCoordinate
) -> Dict[RingCoordinate, int]:
    """Step count from start to every reachable cell."""
    parents, order = breadth_first_search(topology, start)
    distances: Dict[RingCoordinate, int] = {}
    for cell in order:
        parent = parents[cell]
        distances[cell] = 0 if parent is None else distances[parent] + 1
    return distances


def farthest_from(topology: MazeTopology, start: RingCoordinate) -> RingCoordinate:
    """Last cell dequeued by BFS: a cell at maximal distance from start."""
    _, order = breadth_first_search(topology, start)
    return order[-1]


def eccentricity(topology: MazeTopology, start: RingCoordinate) -> int:
    """Greatest distance from start to any reachable cell."""
    return max(distances_from(topology, start).values())


def tree_diameter(topology: MazeTopology) -> List[RingCoordinate]:
    """
    Longest shortest path of a tree-shaped maze, found with two BFS passes:
    the farthest cell A from the apex is one end of a diameter, and the
    farthest cell B from A is the other. Only exact when the maze is acyclic.
    """
    print("--- Finding Tree Diameter ---")
    end_a = farthest_from(topology, APEX)
    parents, order = breadth_first_search(topology, end_a)
    end_b = order[-1]
    path = _walk_back(parents, end_b)
    print(f"  Start {end_a.id}, finish {end_b.id}. Path length: {len(path)} cells.")
    return path
