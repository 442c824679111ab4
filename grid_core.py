# grid_core.py
from fractions import Fraction
from functools import total_ordering
from typing import FrozenSet, Iterable, Iterator, Set, Tuple

# Import from other project modules
import constants as const
from utils import AngleLike, round_down_to_power_of_two, to_fraction


# --- Errors ---
class ConstructionError(ValueError):
    """A coordinate was requested that does not exist on the grid."""


class OutOfRangeError(ConstructionError):
    """Ring or cell index outside the grid."""


class InvalidAngleError(ConstructionError):
    """Angle does not fall on a cell boundary of the requested ring."""


class BoundaryError(ValueError):
    """Movement past the apex."""


# --- Ring Arithmetic ---
def cells_in_ring(ring: int) -> int:
    """Number of cells in a ring. Doubles at every power-of-two ring: 6, 6, 12, 12, 24, ..."""
    return const.CELLS_IN_FIRST_RING * round_down_to_power_of_two(ring)


def angle_step(ring: int) -> Fraction:
    """Exact angular width (degrees) of one cell in the ring."""
    return Fraction(const.FULL_CIRCLE_DEGREES, cells_in_ring(ring))


def _check_index(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise OutOfRangeError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise OutOfRangeError(f"{name} must be non-negative, got {value}")


@total_ordering
class RingCoordinate:
    """Address of one cell: ring index, cell index within the ring, and its exact start angle."""

    __slots__ = ("_ring", "_cell", "_angle")

    def __init__(self, ring: int, cell: int):
        _check_index("Ring", ring)
        _check_index("Cell", cell)
        total = cells_in_ring(ring)
        if cell >= total:
            raise OutOfRangeError(
                f"Cell {cell} out of range for ring {ring} ({total} cells)."
            )
        self._ring = ring
        self._cell = cell
        self._angle = cell * angle_step(ring)

    @classmethod
    def from_cell_index(cls, ring: int, cell: int) -> "RingCoordinate":
        return cls(ring, cell)

    @classmethod
    def from_angle(cls, ring: int, angle: AngleLike) -> "RingCoordinate":
        """Builds the coordinate whose cell starts exactly at `angle` degrees."""
        _check_index("Ring", ring)
        try:
            exact = to_fraction(angle)
        except (TypeError, ValueError) as e:
            raise InvalidAngleError(f"Unreadable angle {angle!r}: {e}") from e
        if not (0 <= exact < const.FULL_CIRCLE_DEGREES):
            raise InvalidAngleError(f"Angle {exact} outside [0, 360).")
        index = exact / angle_step(ring)
        if index.denominator != 1:
            raise InvalidAngleError(
                f"Angle {exact} is not a multiple of {angle_step(ring)} (ring {ring})."
            )
        return cls(ring, int(index))

    # --- Accessors ---
    @property
    def ring(self) -> int:
        return self._ring

    @property
    def cell(self) -> int:
        return self._cell

    @property
    def angle(self) -> Fraction:
        return self._angle

    @property
    def coords(self) -> Tuple[int, int]:
        return (self._ring, self._cell)

    @property
    def id(self) -> str:
        return f"{self._ring},{self._cell}"

    @property
    def is_apex(self) -> bool:
        return self._ring == 0

    @property
    def cells_in_ring(self) -> int:
        return cells_in_ring(self._ring)

    # --- Movement ---
    def next_clockwise(self) -> "RingCoordinate":
        return RingCoordinate(self._ring, (self._cell + 1) % self.cells_in_ring)

    def next_counter_clockwise(self) -> "RingCoordinate":
        return RingCoordinate(self._ring, (self._cell - 1) % self.cells_in_ring)

    def next_out(self) -> "RingCoordinate":
        """Same angle, one ring further out. Outer rings are never coarser, so this always exists."""
        return RingCoordinate.from_angle(self._ring + 1, self._angle)

    def next_in(self) -> "RingCoordinate":
        """Inner cell containing this coordinate's angle (same angle when it is aligned)."""
        if self._ring == 0:
            raise BoundaryError(f"Cannot move inward from apex coordinate {self.id}.")
        inner = self._ring - 1
        return RingCoordinate(inner, int(self._angle // angle_step(inner)))

    # --- Value semantics ---
    def __eq__(self, other):
        if not isinstance(other, RingCoordinate):
            return NotImplemented
        return self.coords == other.coords

    def __lt__(self, other):
        if not isinstance(other, RingCoordinate):
            return NotImplemented
        return self.coords < other.coords

    def __hash__(self):
        return hash(self.coords)

    def __repr__(self) -> str:
        return f"RingCoordinate({self.id})"


APEX = RingCoordinate(0, 0)


class MazeTopology:
    """
    Wall layout of a circular maze.

    A radial wall at (r, i) closes the arc between cell (r, i) and the cell
    inward of it; ring `ring_count` carries the closed outer boundary. An
    angular wall at (r, i) closes the spoke at that coordinate's angle, between
    (r, i) and its counter-clockwise neighbour. Maze cells are the apex and
    rings 1..ring_count-1.
    """

    def __init__(
        self,
        ring_count: int,
        radial_walls: Iterable[RingCoordinate] = (),
        angular_walls: Iterable[RingCoordinate] = (),
    ):
        if isinstance(ring_count, bool) or not isinstance(ring_count, int):
            raise TypeError(f"Ring count must be an integer, got {ring_count!r}")
        if ring_count < 0:
            raise ValueError("Ring count must be non-negative.")
        self._ring_count = ring_count
        self._radial_walls: FrozenSet[RingCoordinate] = frozenset(radial_walls)
        self._angular_walls: FrozenSet[RingCoordinate] = frozenset(angular_walls)

    @property
    def ring_count(self) -> int:
        return self._ring_count

    @property
    def radial_walls(self) -> FrozenSet[RingCoordinate]:
        return self._radial_walls

    @property
    def angular_walls(self) -> FrozenSet[RingCoordinate]:
        return self._angular_walls

    @property
    def apex(self) -> RingCoordinate:
        return APEX

    def has_radial_wall(self, coord: RingCoordinate) -> bool:
        return coord in self._radial_walls

    def has_angular_wall(self, coord: RingCoordinate) -> bool:
        return coord in self._angular_walls

    def contains(self, coord: RingCoordinate) -> bool:
        """True if the coordinate addresses a maze cell (any ring-0 coordinate counts as the apex)."""
        return coord.ring == 0 or coord.ring < self._ring_count

    def cells(self) -> Iterator[RingCoordinate]:
        """Yields every maze cell, apex first, then ring by ring."""
        yield APEX
        for ring in range(1, self._ring_count):
            for cell in range(cells_in_ring(ring)):
                yield RingCoordinate(ring, cell)

    def size(self) -> int:
        return 1 + sum(cells_in_ring(ring) for ring in range(1, self._ring_count))

    def accessible_neighbours(self, coord: RingCoordinate) -> Set[RingCoordinate]:
        """Cells reachable from `coord` in one step without crossing a wall."""
        neighbours: Set[RingCoordinate] = set()

        if coord.is_apex:
            if self._ring_count > 1:
                for cell in range(cells_in_ring(1)):
                    candidate = RingCoordinate(1, cell)
                    if candidate not in self._radial_walls:
                        neighbours.add(candidate)
            return neighbours

        if not self.contains(coord):
            return neighbours

        # CCW: spoke on this cell's own edge
        if coord not in self._angular_walls:
            neighbours.add(coord.next_counter_clockwise())

        # CW: spoke on the neighbour's edge
        cw = coord.next_clockwise()
        if cw not in self._angular_walls:
            neighbours.add(cw)

        # IN: arc on this cell's inner edge
        if coord not in self._radial_walls:
            neighbours.add(APEX if coord.ring == 1 else coord.next_in())

        # OUT: arc(s) on the inner edge of the outer cell(s)
        if coord.ring + 1 < self._ring_count:
            out = coord.next_out()
            outward = [out]
            if cells_in_ring(coord.ring + 1) > coord.cells_in_ring:
                outward.append(out.next_clockwise())
            for candidate in outward:
                if candidate not in self._radial_walls:
                    neighbours.add(candidate)

        return neighbours

    def passage_count(self) -> int:
        """Number of open passages between maze cells."""
        degree_sum = sum(len(self.accessible_neighbours(c)) for c in self.cells())
        return degree_sum // 2

    def __eq__(self, other):
        if not isinstance(other, MazeTopology):
            return NotImplemented
        return (
            self._ring_count == other._ring_count
            and self._radial_walls == other._radial_walls
            and self._angular_walls == other._angular_walls
        )

    def __hash__(self):
        return hash((self._ring_count, self._radial_walls, self._angular_walls))

    def __repr__(self) -> str:
        return (
            f"MazeTopology(rings={self._ring_count}, "
            f"radial={len(self._radial_walls)}, angular={len(self._angular_walls)})"
        )
