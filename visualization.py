# visualization.py
import matplotlib.pyplot as plt
import matplotlib.cm as cm
import matplotlib.colors as mcolors
from matplotlib.collections import LineCollection
from matplotlib.patches import Wedge
from typing import List, Optional, Tuple

# Import from other project modules
from grid_core import MazeTopology, RingCoordinate, angle_step
from geometry import (
    cell_center,
    extract_wall_segments,
    solution_polyline,
    wall_radius,
)
from graph_analysis import distances_from, tree_diameter
import constants as const


# --- Visualization Helpers ---
def _setup_plot(topology: MazeTopology) -> Tuple[plt.Figure, plt.Axes]:
    """Creates a square, axis-free plot sized to the outer boundary."""
    fig, ax = plt.subplots(figsize=const.VIS_FIGURE_SIZE)
    limit = wall_radius(max(topology.ring_count, 1)) * 1.05
    ax.set_xlim(-limit, limit)
    ax.set_ylim(-limit, limit)
    ax.set_aspect("equal")
    ax.set_axis_off()
    return fig, ax


def _draw_walls(ax: plt.Axes, topology: MazeTopology) -> int:
    """Draws wall centerlines, returns the number of segments drawn."""
    segments = extract_wall_segments(topology)
    print(f"  Visualizing {len(segments)} wall segments...")
    if segments:
        ax.add_collection(
            LineCollection(
                segments,
                colors="black",
                linewidths=const.VIS_WALL_LINE_LW,
                alpha=const.VIS_WALL_LINE_ALPHA,
                capstyle="round",
            )
        )
    return len(segments)


def _draw_path(ax: plt.Axes, path: List[RingCoordinate]):
    """Draws the solution path and marks its ends."""
    points = solution_polyline(path)
    ax.plot(
        points[:, 0],
        points[:, 1],
        const.VIS_SOLUTION_LINE_STYLE,
        color=const.VIS_SOLUTION_LINE_COLOR,
        lw=const.VIS_SOLUTION_LINE_LW,
        alpha=const.VIS_SOLUTION_LINE_ALPHA,
    )
    start_x, start_y = cell_center(path[0])
    finish_x, finish_y = cell_center(path[-1])
    ax.plot(start_x, start_y, const.VIS_ENTRY_MARKER,
            markersize=const.VIS_MARKER_SIZE,
            mfc=const.VIS_ENTRY_MFC, mec=const.VIS_MARKER_MEC, label="Start")
    ax.plot(finish_x, finish_y, const.VIS_EXIT_MARKER,
            markersize=const.VIS_MARKER_SIZE,
            mfc=const.VIS_EXIT_MFC, mec=const.VIS_MARKER_MEC, label="Finish")


def _save(fig: plt.Figure, filename: str):
    # Output format follows the extension (.png, .svg, .pdf)
    fig.savefig(filename, dpi=const.VIS_DPI, bbox_inches="tight")
    plt.close(fig)


# --- Main Visualization Functions ---
def visualize_maze_walls(topology: MazeTopology, filename="maze_walls.png"):
    """Renders the maze walls only."""
    print(f"--- Generating Maze Walls Visualization: {filename} ---")
    fig, ax = _setup_plot(topology)
    _draw_walls(ax, topology)
    _save(fig, filename)
    print(f"  Walls visualization saved to {filename}")


def visualize_maze_solution(
    topology: MazeTopology,
    path: Optional[List[RingCoordinate]] = None,
    filename="maze_solution.png",
):
    """Renders walls plus a solution path (the tree diameter when no path is given)."""
    print(f"--- Generating Maze Solution Visualization: {filename} ---")
    if path is None:
        path = tree_diameter(topology)

    fig, ax = _setup_plot(topology)
    _draw_walls(ax, topology)
    if len(path) >= 2:
        print(f"  Visualizing solution path ({len(path)} cells)...")
        _draw_path(ax, path)
    else:
        print("  Path has fewer than two cells, drawing walls only.")
    _save(fig, filename)
    print(f"  Solution visualization saved to {filename}")


def visualize_maze_connectivity(
    topology: MazeTopology,
    start: Optional[RingCoordinate] = None,
    filename="maze_connectivity.png",
):
    """Colours every cell by its passage distance from `start` (the apex by default)."""
    print(f"--- Generating Connectivity Visualization: {filename} ---")
    start_node = start if start is not None else topology.apex
    distances = distances_from(topology, start_node)
    max_distance = max(distances.values())
    print(f"  Connectivity check visited {len(distances)}/{topology.size()} cells.")
    if len(distances) < topology.size():
        print("  WARNING: Not all cells are reachable from the start node!")

    fig, ax = _setup_plot(topology)
    cmap = cm.viridis
    norm = mcolors.Normalize(vmin=0, vmax=max(1, max_distance))

    for cell in topology.cells():
        distance = distances.get(cell, -1)
        color = const.VIS_CONN_UNREACHABLE_COLOR if distance == -1 else cmap(norm(distance))
        if cell.is_apex:
            patch = Wedge((0, 0), wall_radius(1), 0, 360, color=color)
        else:
            theta1 = float(cell.angle)
            theta2 = float(cell.angle + angle_step(cell.ring))
            patch = Wedge(
                (0, 0), wall_radius(cell.ring + 1), theta1, theta2,
                width=const.RING_SPACING, color=color,
            )
        ax.add_patch(patch)

    _draw_walls(ax, topology)

    sm = plt.cm.ScalarMappable(cmap=cmap, norm=norm)
    sm.set_array([])
    cbar = plt.colorbar(sm, ax=ax, shrink=0.7, aspect=20, pad=0.08)
    cbar.set_label(f"Distance from Cell {start_node.id}")
    ax.set_title(f"Maze Connectivity ({len(distances)}/{topology.size()} Reachable)")
    _save(fig, filename)
    print(f"  Connectivity visualization saved to {filename}")
