#!/usr/bin/env python3
"""迷宫的交互式菜单。

当前迷宫保存在 :class:`MazeSession` 中，由菜单循环显式传递。
迷宫存在之前只能生成或读取；之后才可以保存、显示和求解。
"""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

import numpy as np

from generator import generate_maze
from maze_io import load_maze, maze_to_string, save_maze
from maze_types import MazeError
from solver import solve

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Incorrect option. Please try again"

BASE_MENU = ["1. Generate a new maze", "2. Load a maze"]
MAZE_MENU = ["3. Save the maze", "4. Display the maze", "5. Find the escape"]


@dataclass
class MazeSession:
    """菜单会话状态：当前迷宫及生成迷宫使用的随机数发生器"""
    maze: Optional[np.ndarray] = None
    rng: random.Random = field(default_factory=random.Random)

    @property
    def has_maze(self) -> bool:
        return self.maze is not None


def menu_text(session: MazeSession) -> str:
    lines = ["=== Menu ===", *BASE_MENU]
    if session.has_maze:
        lines.extend(MAZE_MENU)
    lines.append("0. Exit")
    return "\n".join(lines)


def run_menu(session: MazeSession,
             read: Callable[[str], str] = input,
             write: Callable[[str], None] = print) -> None:
    """运行菜单循环，直到用户选择退出或输入结束"""
    while True:
        write(menu_text(session))
        try:
            choice = read("> ").strip()
        except EOFError:
            return

        try:
            option = int(choice)
        except ValueError:
            write(ERROR_MESSAGE)
            continue

        if option == 0:
            write("Bye!")
            return
        if option in (3, 4, 5) and not session.has_maze:
            write(ERROR_MESSAGE)
            continue

        try:
            if option == 1:
                size = int(read("Enter the size of a new maze\n> ").strip())
                session.maze = generate_maze(size, size, rng=session.rng)
                write(maze_to_string(session.maze))
            elif option == 2:
                session.maze = load_maze(read("> ").strip())
            elif option == 3:
                save_maze(session.maze, read("> ").strip())
            elif option == 4:
                write(maze_to_string(session.maze))
            elif option == 5:
                write(maze_to_string(solve(session.maze)))
            else:
                write(ERROR_MESSAGE)
        except EOFError:
            return
        except (MazeError, OSError, ValueError) as e:
            logger.debug("菜单操作 %d 失败: %s", option, e)
            write(f"{ERROR_MESSAGE} ({e})")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive maze generator and solver")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        run_menu(MazeSession(rng=random.Random(args.seed)))
    except KeyboardInterrupt:
        print("\nBye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
