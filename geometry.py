# geometry.py
import math
from fractions import Fraction
from typing import List, Tuple, Union

import numpy as np

# Import from other project modules
import constants as const
from grid_core import MazeTopology, RingCoordinate, angle_step, cells_in_ring
from utils import arc_points, polar_to_cartesian

Point = Tuple[float, float]
Segment = Tuple[Point, Point]
CoordPair = Tuple[RingCoordinate, RingCoordinate]
PathSegment = Union[
    Tuple[str, RingCoordinate, RingCoordinate, bool],  # ("arc", start, end, clockwise)
    Tuple[str, RingCoordinate, RingCoordinate],  # ("line", start, end)
]

FULL_CIRCLE = Fraction(const.FULL_CIRCLE_DEGREES)


# --- Display Coordinates ---
def wall_radius(ring: int) -> float:
    """Radius of the circle on which ring `ring`'s radial walls (inner cell edges) sit."""
    return ring * const.RING_SPACING


def display_radius(coord: RingCoordinate) -> float:
    """Radius of a cell's centre; the apex sits at the origin."""
    if coord.is_apex:
        return 0.0
    return wall_radius(coord.ring) + const.RING_SPACING / 2.0


def display_angle(coord: RingCoordinate) -> Fraction:
    """Exact angle of a cell's centre (half a cell past its start angle)."""
    if coord.is_apex:
        return coord.angle
    return coord.angle + angle_step(coord.ring) / 2


def cell_center(coord: RingCoordinate) -> Point:
    return polar_to_cartesian(display_radius(coord), display_angle(coord))


def _sweep(start: Fraction, end: Fraction) -> Fraction:
    """Angle travelled going from start to end with increasing angle; equal angles mean a full turn."""
    sweep = (end - start) % FULL_CIRCLE
    return FULL_CIRCLE if sweep == 0 else sweep


# --- Wall Merging ---
def merge_arcs(topology: MazeTopology) -> List[CoordPair]:
    """
    Merges runs of adjacent radial walls within each ring into (start, end) pairs.
    `end` is the coordinate just past the last wall of the run; a fully walled
    ring gives start == end (a full circle).
    """
    merged: List[CoordPair] = []
    for ring in range(1, topology.ring_count + 1):
        total = cells_in_ring(ring)
        walled = [
            cell for cell in range(total)
            if topology.has_radial_wall(RingCoordinate(ring, cell))
        ]
        if not walled:
            continue
        if len(walled) == total:
            full = RingCoordinate(ring, 0)
            merged.append((full, full))
            continue
        walled_set = set(walled)
        for cell in walled:
            if (cell - 1) % total in walled_set:
                continue  # Not the start of a run
            last = cell
            while (last + 1) % total in walled_set:
                last = (last + 1) % total
            merged.append(
                (RingCoordinate(ring, cell), RingCoordinate(ring, (last + 1) % total))
            )
    return merged


def merge_lines(topology: MazeTopology) -> List[CoordPair]:
    """
    Chains angular walls that continue outward at the same angle into single
    (inner, outer) pairs. `outer` lies one ring past the last wall of the chain.
    """
    walls = topology.angular_walls
    merged: List[CoordPair] = []
    for wall in sorted(walls):
        if wall.ring == 0:
            continue
        if wall.ring > 1:
            inner = wall.next_in()
            if inner.angle == wall.angle and inner in walls:
                continue  # Already covered by the chain starting further in
        last = wall
        while last.next_out() in walls:
            last = last.next_out()
        merged.append((wall, last.next_out()))
    return merged


def extract_wall_segments(
    topology: MazeTopology,
    num_arc_segments_per_cell: int = const.NUM_ARC_SUBDIVISIONS_PER_CELL,
) -> List[Segment]:
    """Cartesian wall centerline segments, with arcs approximated by chords."""
    segments: List[Segment] = []

    for start, end in merge_arcs(topology):
        sweep = _sweep(start.angle, end.angle)
        steps = int(sweep / angle_step(start.ring))
        points = arc_points(
            wall_radius(start.ring), start.angle, sweep, steps * num_arc_segments_per_cell
        )
        for p1, p2 in zip(points[:-1], points[1:]):
            segments.append(((float(p1[0]), float(p1[1])), (float(p2[0]), float(p2[1]))))

    for inner, outer in merge_lines(topology):
        p1 = polar_to_cartesian(wall_radius(inner.ring), inner.angle)
        p2 = polar_to_cartesian(wall_radius(outer.ring), outer.angle)
        segments.append((p1, p2))

    return segments


# --- Solution Path ---
def path_points(path: List[RingCoordinate]) -> np.ndarray:
    """Cell centres of a path as an (n, 2) array."""
    if not path:
        return np.zeros((0, 2))
    return np.array([cell_center(coord) for coord in path])


def _is_clockwise(start: RingCoordinate, nxt: RingCoordinate) -> bool:
    total = start.cells_in_ring
    forward = (nxt.cell - start.cell) % total
    return 0 < forward <= total // 2


def merge_path_segments(path: List[RingCoordinate]) -> List[PathSegment]:
    """
    Groups path steps into drawable runs: ("arc", start, end, clockwise) for
    consecutive moves around one ring and ("line", start, end) for consecutive
    moves across rings along one straight ray.
    """
    segments: List[PathSegment] = []
    i = 0
    while i < len(path) - 1:
        start = path[i]
        j = i + 1
        if start.ring == path[j].ring:
            while j < len(path) - 1 and path[j].ring == path[j + 1].ring:
                j += 1
            segments.append(("arc", start, path[j], _is_clockwise(start, path[i + 1])))
        else:
            ray = display_angle(path[j])
            straight = start.is_apex or display_angle(start) == ray
            while (
                straight
                and j < len(path) - 1
                and path[j].ring != path[j + 1].ring
                and display_angle(path[j + 1]) == ray
            ):
                j += 1
            segments.append(("line", start, path[j]))
        i = j
    return segments


def solution_polyline(
    path: List[RingCoordinate],
    num_arc_segments_per_cell: int = const.NUM_ARC_SUBDIVISIONS_PER_CELL,
) -> np.ndarray:
    """Dense (n, 2) polyline through the path's cell centres, following the rings along arcs."""
    if len(path) < 2:
        return path_points(path)

    pieces: List[np.ndarray] = [np.array([cell_center(path[0])])]
    for segment in merge_path_segments(path):
        if segment[0] == "arc":
            _, start, end, clockwise = segment
            if clockwise:
                sweep = (display_angle(end) - display_angle(start)) % FULL_CIRCLE
            else:
                sweep = -((display_angle(start) - display_angle(end)) % FULL_CIRCLE)
            steps = max(1, math.ceil(abs(sweep) / angle_step(start.ring)))
            points = arc_points(
                display_radius(start), display_angle(start), sweep,
                steps * num_arc_segments_per_cell,
            )
            pieces.append(points[1:])
        else:
            _, _, end = segment
            pieces.append(np.array([cell_center(end)]))
    return np.vstack(pieces)
