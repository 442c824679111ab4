# mesh_builder.py
# Builds a flat, printable mesh of the maze: a solid disc base with every wall extruded on top.

import numpy as np
import trimesh
import trimesh.creation
import trimesh.util
from typing import List, Optional, Tuple

# Import from other project modules
import constants as const
from grid_core import MazeTopology
from geometry import Segment, extract_wall_segments, wall_radius

Quad = Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float], Tuple[float, float]]

# Side, top and bottom faces of a quad prism (vertices 0-3 base, 4-7 top)
_PRISM_FACES = np.array(
    [
        [0, 1, 5],
        [0, 5, 4],
        [1, 2, 6],
        [1, 6, 5],
        [2, 3, 7],
        [2, 7, 6],
        [3, 0, 4],
        [3, 4, 7],
        [4, 5, 6],
        [4, 6, 7],
        [3, 2, 1],
        [3, 1, 0],
    ],
    dtype=np.int64,
)


def wall_base_quad(segment: Segment, wall_thickness: float) -> Optional[Quad]:
    """
    Offsets a wall centerline by half the thickness on each side. The ends are
    extended by half the thickness as well so that walls meeting at a corner overlap.
    """
    p1 = np.array(segment[0], dtype=float)
    p2 = np.array(segment[1], dtype=float)
    direction = p2 - p1
    length = np.linalg.norm(direction)
    if length < const.GEOMETRY_TOLERANCE:
        return None
    half_thick = wall_thickness / 2.0
    dir_norm = direction / length
    perp_dir = np.array([-dir_norm[1], dir_norm[0]])

    v0 = p1 - perp_dir * half_thick - dir_norm * half_thick
    v1 = p2 - perp_dir * half_thick + dir_norm * half_thick
    v2 = p2 + perp_dir * half_thick + dir_norm * half_thick
    v3 = p1 + perp_dir * half_thick - dir_norm * half_thick
    return tuple((float(v[0]), float(v[1])) for v in (v0, v1, v2, v3))


def _extrude_quad(quad: Quad, z_bottom: float, height: float) -> trimesh.Trimesh:
    base_verts = np.array([[x, y, z_bottom] for x, y in quad])
    top_verts = base_verts + np.array([0.0, 0.0, height])
    return trimesh.Trimesh(
        vertices=np.vstack((base_verts, top_verts)), faces=_PRISM_FACES, process=False
    )


def create_2d_maze_mesh(
    topology: MazeTopology,
    wall_thickness: float = const.MAZE_2D_WALL_THICKNESS,
    wall_height: float = const.MAZE_2D_WALL_HEIGHT,
    base_height: float = const.MAZE_2D_BASE_HEIGHT,
) -> trimesh.Trimesh:
    """Base cylinder (top face at z=0) plus every wall extruded from z=0 to wall_height."""
    print("--- Building 2D Maze Mesh ---")
    print(
        f"    Wall T={wall_thickness:.2f}, Wall H={wall_height:.2f}, Base H={base_height:.2f}"
    )
    base_radius = wall_radius(max(topology.ring_count, 1)) + wall_thickness
    base = trimesh.creation.cylinder(
        radius=base_radius, height=base_height, sections=const.MAZE_2D_CYLINDER_SECTIONS
    )
    base.apply_translation([0.0, 0.0, -base_height / 2.0])

    wall_meshes: List[trimesh.Trimesh] = []
    skipped = 0
    for segment in extract_wall_segments(topology):
        quad = wall_base_quad(segment, wall_thickness)
        if quad is None:
            skipped += 1
            continue
        wall_meshes.append(_extrude_quad(quad, 0.0, wall_height))
    print(f"  Extruded {len(wall_meshes)} wall prisms ({skipped} degenerate skipped).")

    mesh = trimesh.util.concatenate([base] + wall_meshes)
    mesh.merge_vertices()
    print(f"  Mesh has {len(mesh.vertices)} vertices, {len(mesh.faces)} faces.")
    return mesh


def create_2d_maze_stl(
    topology: MazeTopology,
    output_filename: str,
    wall_thickness: float = const.MAZE_2D_WALL_THICKNESS,
    wall_height: float = const.MAZE_2D_WALL_HEIGHT,
    base_height: float = const.MAZE_2D_BASE_HEIGHT,
) -> trimesh.Trimesh:
    """Builds the flat maze mesh and exports it (format from the file extension, e.g. .stl)."""
    mesh = create_2d_maze_mesh(topology, wall_thickness, wall_height, base_height)
    print(f"  Exporting mesh to {output_filename}...")
    mesh.export(output_filename)
    return mesh
