#!/usr/bin/env python3
"""Simple validator for the maze generator and solver.

The script generates mazes with :class:`generator.MazeGenerator` and
performs a series of sanity checks on each produced matrix:

* The matrix has the requested shape and holds only walls and open cells.
* The entrance ``(1, 0)`` is open.
* The open cells form a tree: connected, and one fewer adjacency than cells.
* The open cell count matches rooms + tree edges + boundary openings.
* The solver finds a simple route of 4-adjacent cells from entrance to exit.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Sequence

import numpy as np

import generator
from maze_types import OPEN, ROUTE, WALL, Coord
from solver import find_escape, solve


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate generated mazes")
    parser.add_argument("width", type=int, help="Maze width in cells")
    parser.add_argument("height", type=int, help="Maze height in cells")
    parser.add_argument("--count", type=int, default=1, help="Number of mazes to check")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def open_cells(maze: np.ndarray) -> List[Coord]:
    return [tuple(int(v) for v in cell) for cell in np.argwhere(maze == OPEN)]


def count_adjacencies(maze: np.ndarray) -> int:
    """Number of pairs of 4-adjacent non-wall cells."""
    passable = maze != WALL
    return int((passable[1:, :] & passable[:-1, :]).sum() + (passable[:, 1:] & passable[:, :-1]).sum())


def is_connected(maze: np.ndarray) -> bool:
    cells = set(open_cells(maze))
    if not cells:
        return True
    start = next(iter(cells))
    seen = {start}
    stack = [start]
    while stack:
        row, col = stack.pop()
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nxt = (row + dr, col + dc)
            if nxt in cells and nxt not in seen:
                seen.add(nxt)
                stack.append(nxt)
    return seen == cells


def check_route(maze: np.ndarray, route: List[Coord]) -> None:
    assert len(set(route)) == len(route), "route visits a cell twice"
    for (r1, c1), (r2, c2) in zip(route, route[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1, f"route jumps from {(r1, c1)} to {(r2, c2)}"
    for cell in route:
        assert maze[cell] != WALL, f"route crosses a wall at {cell}"


def check_maze(gen: generator.MazeGenerator) -> np.ndarray:
    width, height = gen.config.width, gen.config.height
    maze = gen.generate()

    assert maze.shape == (height, width), f"expected shape {(height, width)}, got {maze.shape}"
    assert set(np.unique(maze).tolist()) <= {OPEN, WALL}, "unexpected cell values"
    assert maze[1, 0] == OPEN, "entrance (1, 0) is not open"

    openings = 2 if width % 2 == 1 else 3
    expected_open = gen.graph.node_count + len(gen.tree) + openings
    actual_open = len(open_cells(maze))
    assert actual_open == expected_open, f"expected {expected_open} open cells, got {actual_open}"
    assert len(gen.tree) == gen.graph.node_count - 1, "spanning tree has the wrong edge count"

    assert is_connected(maze), "open cells are not connected"
    assert count_adjacencies(maze) == actual_open - 1, "open cells contain a loop"

    route = find_escape(maze)
    check_route(maze, route)
    solved = solve(maze)
    assert int((solved == ROUTE).sum()) == len(route), "route overlay does not match the route"
    return solved


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    gen = generator.MazeGenerator(
        generator.MazeConfig(width=args.width, height=args.height, seed=args.seed),
    )
    for _ in range(args.count):
        check_maze(gen)

    print("All checks passed. Validated", args.count, "mazes.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
