import os

from main import render_saved_maze, run_maze_generation
from maze_io import load_maze

OUTPUTS = [
    "maze.json",
    "maze_solution.png",
    "maze_solution.svg",
    "maze_connectivity.png",
    "maze_2d_flat.stl",
]


def test_run_maze_generation_writes_all_outputs(tmp_path):
    topology = run_maze_generation(num_rings=3, seed=10, output_dir=str(tmp_path))
    for name in OUTPUTS:
        assert (tmp_path / name).exists(), name
    assert load_maze(str(tmp_path / "maze.json")) == topology


def test_render_saved_maze(tmp_path):
    source_dir = tmp_path / "first"
    topology = run_maze_generation(num_rings=4, seed=3, output_dir=str(source_dir))

    rerender_dir = tmp_path / "second"
    reloaded = render_saved_maze(str(source_dir / "maze.json"), output_dir=str(rerender_dir))
    assert reloaded == topology
    assert os.path.exists(rerender_dir / "maze_solution.png")
