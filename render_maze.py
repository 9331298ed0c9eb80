#!/usr/bin/env python3
"""迷宫的可视化工具。

读取 `maze_io.py` 保存的迷宫文件，以ASCII文本或matplotlib图形显示，
可选地先求出逃生路线并叠加显示。
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

from maze_io import load_maze, maze_to_string
from maze_types import OPEN, ROUTE, WALL, MazeError, as_matrix
from solver import find_openings, solve

# 各种格子对应的颜色，下标与格子取值一致
CELL_COLORS = {
    OPEN: "white",
    WALL: "black",
    ROUTE: "tomato",
}

# 入口和出口的标记样式
OPENING_STYLES = {
    "entrance": {"color": "green", "marker": "o", "label": "入口"},
    "exit": {"color": "blue", "marker": "s", "label": "出口"},
}


def render_ascii_maze(maze: np.ndarray) -> str:
    """以文本形式返回迷宫，与保存到文件的格式一致"""
    return maze_to_string(maze)


def plot_maze(maze: np.ndarray, ax: Optional[plt.Axes] = None, title: str = "迷宫"):
    """用matplotlib绘制迷宫。

    Args:
        maze: 迷宫矩阵
        ax: 绘制用的坐标轴，为 None 时新建一个图形
        title: 图形标题

    Returns:
        ``imshow`` 返回的 AxesImage
    """
    matrix = as_matrix(maze)
    if ax is None:
        height, width = matrix.shape
        _, ax = plt.subplots(figsize=(max(4, width / 4), max(4, height / 4)))

    cmap = ListedColormap([CELL_COLORS[value] for value in sorted(CELL_COLORS)])
    image = ax.imshow(matrix, cmap=cmap, vmin=0, vmax=len(CELL_COLORS) - 1, interpolation="nearest")

    # 标记入口和出口（出入口不合法时只画矩阵）
    try:
        entrance, exit_cell = find_openings(matrix)
    except MazeError:
        entrance = exit_cell = None
    if entrance is not None:
        for name, (row, col) in (("entrance", entrance), ("exit", exit_cell)):
            style = OPENING_STYLES[name]
            ax.scatter([col], [row], c=style["color"], marker=style["marker"], label=style["label"])
        ax.legend(loc="upper right", fontsize=8)

    ax.set_title(title)
    ax.set_xticks([])
    ax.set_yticks([])
    return image


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a saved maze")
    parser.add_argument("maze", type=Path, help="Path to a saved maze text file")
    parser.add_argument("--solve", action="store_true", help="Overlay the escape route")
    parser.add_argument("--ascii", action="store_true", help="Print the maze as text instead of plotting")
    parser.add_argument("--output", type=Path, default=None, help="Save the figure instead of showing it")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """主函数：读取迷宫文件并渲染。

    Returns:
        0 表示成功，其他值表示错误
    """
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        maze = load_maze(args.maze)
        if args.solve:
            solve(maze)
    except OSError as e:
        print(f"错误：无法读取文件 {args.maze}: {e}")
        return 1
    except MazeError as e:
        print(f"渲染过程中发生错误: {e}")
        return 1

    if args.ascii:
        print(render_ascii_maze(maze))
        return 0

    plot_maze(maze, title=args.maze.name)
    plt.tight_layout()
    if args.output is not None:
        plt.savefig(args.output)
        print(f"图形已保存到 {args.output}")
    else:
        plt.show()
    plt.close("all")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
