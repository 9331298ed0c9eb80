from pathlib import Path
import sys

import numpy as np
import pytest

# Ensure the project root is on the Python path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import tester
from maze_types import OPEN, WALL


@pytest.mark.parametrize("width,height", [(5, 5), (12, 9), (15, 20)])
def test_validator_passes_for_generated_mazes(width, height, capsys):
    assert tester.main([str(width), str(height), "--count", "3", "--seed", "1"]) == 0
    assert "All checks passed" in capsys.readouterr().out


def test_loop_is_detected():
    maze = np.array([
        [WALL, WALL, WALL, WALL],
        [OPEN, OPEN, OPEN, WALL],
        [WALL, OPEN, OPEN, WALL],
        [WALL, WALL, WALL, WALL],
    ], dtype=np.uint8)
    assert tester.is_connected(maze)
    assert tester.count_adjacencies(maze) == len(tester.open_cells(maze))
