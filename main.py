# main.py
import random
import time
import traceback
import os

# Import project modules
import constants as const
from grid_core import MazeTopology
from maze_gen import generate_maze
from graph_analysis import tree_diameter
from maze_io import load_maze, save_maze
from mesh_builder import create_2d_maze_stl
from visualization import visualize_maze_connectivity, visualize_maze_solution


def _render_outputs(topology: MazeTopology, path, output_dir: str):
    """Writes every rendering of a solved maze. A failing stage does not stop the others."""
    print("\n--- Generating Visualizations ---")
    try:
        visualize_maze_solution(
            topology, path, filename=os.path.join(output_dir, "maze_solution.png")
        )
        visualize_maze_solution(
            topology, path, filename=os.path.join(output_dir, "maze_solution.svg")
        )
        visualize_maze_connectivity(
            topology, filename=os.path.join(output_dir, "maze_connectivity.png")
        )
    except Exception as e:
        print(f"An error occurred during visualization generation: {e}")
        traceback.print_exc()

    print("\n--- Generating 2D Flat STL ---")
    try:
        create_2d_maze_stl(
            topology, output_filename=os.path.join(output_dir, "maze_2d_flat.stl")
        )
    except Exception as e:
        print(f"An error occurred during 2D STL generation: {e}")
        traceback.print_exc()


def run_maze_generation(
    num_rings: int = const.DEFAULT_NUM_RINGS,
    seed=const.DEFAULT_SEED,
    output_dir: str = const.OUTPUT_DIR,
) -> MazeTopology:
    start_time = time.time()
    os.makedirs(output_dir, exist_ok=True)

    print("\n--- Configuration ---")
    print(f"  Rings: {num_rings}, Seed: {seed}, Output: {output_dir}")

    topology = generate_maze(num_rings, random.Random(seed))
    path = tree_diameter(topology)

    try:
        save_maze(topology, os.path.join(output_dir, "maze.json"))
    except OSError as e:
        print(f"ERROR saving maze JSON: {e}")
        traceback.print_exc()

    _render_outputs(topology, path, output_dir)

    end_time = time.time()
    print(f"\n--- Total Execution Time: {end_time - start_time:.2f} seconds ---")
    return topology


def render_saved_maze(json_path: str, output_dir: str = const.OUTPUT_DIR) -> MazeTopology:
    """Reloads a maze saved as JSON, solves it and renders it again."""
    os.makedirs(output_dir, exist_ok=True)
    topology = load_maze(json_path)
    path = tree_diameter(topology)
    _render_outputs(topology, path, output_dir)
    return topology


if __name__ == "__main__":
    run_maze_generation()
