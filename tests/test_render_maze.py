from pathlib import Path
import sys

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

# Ensure the project root is on the Python path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import render_maze
from generator import generate_maze
from maze_io import maze_to_string, save_maze
from maze_types import WALL
from solver import solve


def test_ascii_matches_saved_text():
    maze = generate_maze(7, 7, seed=1)
    assert render_maze.render_ascii_maze(maze) == maze_to_string(maze)


def test_plot_maze_draws_matrix_and_openings():
    maze = solve(generate_maze(9, 9, seed=2))
    fig, ax = plt.subplots()
    image = render_maze.plot_maze(maze, ax=ax)
    assert np.array_equal(np.asarray(image.get_array()), maze)
    labels = [text.get_text() for text in ax.get_legend().get_texts()]
    assert len(labels) == 2
    plt.close(fig)


def test_plot_maze_without_valid_openings():
    maze = np.full((3, 3), WALL, dtype=np.uint8)
    fig, ax = plt.subplots()
    render_maze.plot_maze(maze, ax=ax)
    assert ax.get_legend() is None
    plt.close(fig)


def test_main_writes_figure(tmp_path):
    path = save_maze(generate_maze(11, 11, seed=3), tmp_path / "maze.txt")
    output = tmp_path / "maze.png"
    assert render_maze.main([str(path), "--solve", "--output", str(output)]) == 0
    assert output.exists()


def test_main_ascii(tmp_path, capsys):
    path = save_maze(generate_maze(5, 5, seed=3), tmp_path / "maze.txt")
    assert render_maze.main([str(path), "--ascii", "--solve"]) == 0
    assert "//" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert render_maze.main([str(tmp_path / "missing.txt"), "--ascii"]) == 1
