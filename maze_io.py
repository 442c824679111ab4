"""Exchange format for circular mazes.

A maze is stored as a JSON object:

    {"rings": 3,
     "radialWalls": [{"ring": 1, "cell": 0}, ...],
     "angularWalls": [{"ring": 2, "cell": 5}, ...]}

`rings` is the outer boundary ring; walls list the coordinates carrying a
radial or angular wall. Deserialization checks every entry against the grid
and raises DeserializationError naming the offending entry.
"""

import json
from typing import Any, Dict, List

# Import from other project modules
import constants as const
from grid_core import MazeTopology, RingCoordinate, cells_in_ring


class DeserializationError(ValueError):
    """Malformed maze document."""


def _serialize_walls(walls) -> List[Dict[str, int]]:
    return [
        {const.JSON_KEY_RING: coord.ring, const.JSON_KEY_CELL: coord.cell}
        for coord in sorted(walls)
    ]


def serialize_maze(topology: MazeTopology) -> Dict[str, Any]:
    """Converts a topology into the exchange dictionary. Walls are sorted by (ring, cell)."""
    return {
        const.JSON_KEY_RINGS: topology.ring_count,
        const.JSON_KEY_RADIAL_WALLS: _serialize_walls(topology.radial_walls),
        const.JSON_KEY_ANGULAR_WALLS: _serialize_walls(topology.angular_walls),
    }


def _require_int(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DeserializationError(f"{where} must be an integer, got {value!r}")
    if value < 0:
        raise DeserializationError(f"{where} must be non-negative, got {value}")
    return value


def _deserialize_walls(data: Dict[str, Any], key: str, rings: int) -> List[RingCoordinate]:
    if key not in data:
        raise DeserializationError(f"Missing field '{key}'")
    entries = data[key]
    if not isinstance(entries, list):
        raise DeserializationError(f"'{key}' must be a list, got {type(entries).__name__}")

    walls = []
    for index, entry in enumerate(entries):
        where = f"{key}[{index}]"
        if not isinstance(entry, dict):
            raise DeserializationError(f"{where} must be an object, got {entry!r}")
        for field in (const.JSON_KEY_RING, const.JSON_KEY_CELL):
            if field not in entry:
                raise DeserializationError(f"{where} is missing field '{field}'")
        ring = _require_int(entry[const.JSON_KEY_RING], f"{where}.{const.JSON_KEY_RING}")
        cell = _require_int(entry[const.JSON_KEY_CELL], f"{where}.{const.JSON_KEY_CELL}")
        if ring > rings:
            raise DeserializationError(
                f"{where}: ring {ring} lies outside the maze ({rings} rings)"
            )
        if cell >= cells_in_ring(ring):
            raise DeserializationError(
                f"{where}: cell {cell} out of range for ring {ring} "
                f"({cells_in_ring(ring)} cells)"
            )
        walls.append(RingCoordinate(ring, cell))
    return walls


def deserialize_maze(data: Any) -> MazeTopology:
    """Rebuilds a topology from the exchange dictionary."""
    if not isinstance(data, dict):
        raise DeserializationError(f"Maze document must be an object, got {type(data).__name__}")
    if const.JSON_KEY_RINGS not in data:
        raise DeserializationError(f"Missing field '{const.JSON_KEY_RINGS}'")
    rings = _require_int(data[const.JSON_KEY_RINGS], const.JSON_KEY_RINGS)

    radial = _deserialize_walls(data, const.JSON_KEY_RADIAL_WALLS, rings)
    angular = _deserialize_walls(data, const.JSON_KEY_ANGULAR_WALLS, rings)
    return MazeTopology(rings, radial, angular)


def maze_to_json(topology: MazeTopology, indent: int = 2) -> str:
    return json.dumps(serialize_maze(topology), indent=indent)


def maze_from_json(text: str) -> MazeTopology:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DeserializationError(f"Failed to parse JSON: {e}") from e
    return deserialize_maze(data)


def save_maze(topology: MazeTopology, filename: str) -> None:
    print(f"--- Saving Maze JSON: {filename} ---")
    with open(filename, "w") as f:
        f.write(maze_to_json(topology))
        f.write("\n")
    print(
        f"  Saved {len(topology.radial_walls)} radial and "
        f"{len(topology.angular_walls)} angular walls."
    )


def load_maze(filename: str) -> MazeTopology:
    print(f"--- Loading Maze JSON: {filename} ---")
    with open(filename, "r") as f:
        topology = maze_from_json(f.read())
    print(f"  Loaded maze with {topology.ring_count} rings.")
    return topology
