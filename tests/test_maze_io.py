from pathlib import Path
import sys

import numpy as np
import pytest

# Ensure the project root is on the Python path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from generator import generate_maze
from maze_io import WALL_GLYPH, load_maze, maze_from_string, maze_to_string, save_maze
from maze_types import OPEN, ROUTE, WALL, MalformedMaze
from solver import solve

BLOCK = WALL_GLYPH * 2


def test_encoding_uses_two_characters_per_cell():
    maze = np.array([
        [WALL, WALL, WALL],
        [OPEN, ROUTE, WALL],
    ], dtype=np.uint8)
    assert maze_to_string(maze) == f"{BLOCK * 3}\n  //{BLOCK}\n"


def test_wall_open_layout_survives_text_round_trip():
    maze = generate_maze(17, 12, seed=8)
    assert np.array_equal(maze_from_string(maze_to_string(maze)), maze)


def test_route_is_read_back_as_open():
    maze = generate_maze(9, 9, seed=1)
    layout = maze.copy()
    solve(maze)
    assert (maze == ROUTE).any()
    assert np.array_equal(maze_from_string(maze_to_string(maze)), layout)


def test_blank_lines_are_ignored():
    text = f"\n{BLOCK * 3}\n\n{'  ' * 3}\n{BLOCK * 3}\n\n"
    maze = maze_from_string(text)
    assert maze.tolist() == [
        [WALL, WALL, WALL],
        [OPEN, OPEN, OPEN],
        [WALL, WALL, WALL],
    ]


def test_windows_line_endings():
    text = f"{BLOCK * 2}\r\n  {BLOCK}\r\n"
    assert maze_from_string(text).tolist() == [[WALL, WALL], [OPEN, WALL]]


def test_empty_text_is_malformed():
    with pytest.raises(MalformedMaze):
        maze_from_string("\n\n")


def test_ragged_rows_are_malformed():
    with pytest.raises(MalformedMaze):
        maze_from_string(f"{BLOCK * 3}\n{BLOCK * 2}\n")


def test_save_and_load(tmp_path):
    maze = generate_maze(11, 7, seed=3)
    path = save_maze(maze, tmp_path / "maze.txt")
    assert path.read_text(encoding="utf8") == maze_to_string(maze)
    assert np.array_equal(load_maze(str(path)), maze)


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_maze(tmp_path / "missing.txt")
