# maze_gen.py
import random
from typing import List, Optional, Set, Tuple

# Import from other project modules
import constants as const
from grid_core import APEX, MazeTopology, RingCoordinate, cells_in_ring

Move = Tuple[RingCoordinate, str]
Edge = Tuple[str, RingCoordinate, RingCoordinate]  # (wall kind, wall coordinate, neighbour)


def _shuffle(items: list, rng) -> None:
    """In-place Fisher-Yates shuffle drawing only on rng.randrange."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]


def _maze_cells(ring_count: int) -> List[RingCoordinate]:
    """All cells of rings 1..ring_count-1 in ring/cell order."""
    return [
        RingCoordinate(ring, cell)
        for ring in range(1, ring_count)
        for cell in range(cells_in_ring(ring))
    ]


def _candidate_moves(coord: RingCoordinate, ring_count: int) -> List[Move]:
    """Moves a walk may take from `coord`. Inward moves from ring 1 (into the apex) are excluded."""
    moves = [(coord, const.DIR_CCW), (coord, const.DIR_CW)]
    if coord.ring >= 2:
        moves.append((coord, const.DIR_IN))
    if coord.ring + 1 < ring_count:
        moves.append((coord, const.DIR_OUT))
        if cells_in_ring(coord.ring + 1) > coord.cells_in_ring:
            moves.append((coord, const.DIR_OUT_CW))
    return moves


def _edge(coord: RingCoordinate, direction: str) -> Edge:
    """Wall slot separating `coord` from its neighbour in `direction`, and that neighbour."""
    if direction == const.DIR_CCW:
        return const.WALL_ANGULAR, coord, coord.next_counter_clockwise()
    if direction == const.DIR_CW:
        cw = coord.next_clockwise()
        return const.WALL_ANGULAR, cw, cw
    if direction == const.DIR_IN:
        return const.WALL_RADIAL, coord, coord.next_in()
    if direction == const.DIR_OUT:
        out = coord.next_out()
        return const.WALL_RADIAL, out, out
    if direction == const.DIR_OUT_CW:
        out_cw = coord.next_out().next_clockwise()
        return const.WALL_RADIAL, out_cw, out_cw
    raise ValueError(f"Unknown direction: {direction}")


def _pop_random(pool: List[Move], rng) -> Move:
    """Removes and returns a uniformly chosen element (swap with last, then pop)."""
    index = rng.randrange(len(pool))
    pool[index], pool[-1] = pool[-1], pool[index]
    return pool.pop()


def generate_maze(
    ring_count: int, rng: Optional[random.Random] = None, seed=None
) -> MazeTopology:
    """
    Generates a perfect circular maze with a randomized loop-erased walk.

    The apex and one ring-1 cell seed the tree. Every other cell, taken in
    shuffled order, starts a walk that grows from all cells visited so far on
    that walk until it touches the tree; moves back onto the current walk are
    discarded, so no cycle is ever opened. Any wall slot left unopened becomes
    a wall and the outermost ring is closed.

    `rng` only needs a `randrange(stop)` method; when omitted a
    `random.Random(seed)` is used, so equal (ring_count, seed) pairs give equal mazes.
    """
    if isinstance(ring_count, bool) or not isinstance(ring_count, int):
        raise TypeError(f"Ring count must be an integer, got {ring_count!r}")
    if ring_count < 0:
        raise ValueError("Ring count must be non-negative.")
    if rng is None:
        rng = random.Random(seed)

    print(f"--- Starting Maze Generation (Loop-Erased Walk, Rings={ring_count}) ---")
    if ring_count == 0:
        print("  Apex only, no walls.")
        return MazeTopology(0)

    cells = _maze_cells(ring_count)
    _shuffle(cells, rng)

    open_slots: Set[Tuple[str, RingCoordinate]] = set()
    part_of_tree: Set[RingCoordinate] = {APEX}

    if ring_count > 1:
        entry = RingCoordinate(1, rng.randrange(cells_in_ring(1)))
        open_slots.add((const.WALL_RADIAL, entry))
        part_of_tree.add(entry)
        print(f"  Apex joined to cell {entry.id}")

    walk_count = 0
    for start in cells:
        if start in part_of_tree:
            continue
        walk_count += 1
        on_current_walk = {start}
        part_of_tree.add(start)
        pool = _candidate_moves(start, ring_count)

        while pool:
            coord, direction = _pop_random(pool, rng)
            wall_kind, wall_coord, neighbour = _edge(coord, direction)
            if neighbour in on_current_walk:
                continue
            open_slots.add((wall_kind, wall_coord))
            on_current_walk.add(neighbour)
            if neighbour in part_of_tree:
                break
            part_of_tree.add(neighbour)
            pool.extend(_candidate_moves(neighbour, ring_count))

    # --- Close every slot that no walk opened ---
    radial_walls = [
        c for c in cells if (const.WALL_RADIAL, c) not in open_slots
    ]
    angular_walls = [
        c for c in cells if (const.WALL_ANGULAR, c) not in open_slots
    ]
    radial_walls.extend(
        RingCoordinate(ring_count, cell) for cell in range(cells_in_ring(ring_count))
    )

    topology = MazeTopology(ring_count, radial_walls, angular_walls)
    print(
        f"--- Maze Generation Complete: {len(part_of_tree)}/{topology.size()} cells, "
        f"{len(open_slots)} passages, {walk_count} walks. ---"
    )
    return topology
