"""迷宫矩阵的文本编码与文件读写。

每个格子占两个字符：墙为两个 ``█``，通路为两个空格，路线为 ``//``。
解析时只看偶数位置的字符，``█`` 为墙，其余都视为通路，因此路线不会被读回。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

import numpy as np

from maze_types import OPEN, ROUTE, WALL, MalformedMaze, as_matrix

logger = logging.getLogger(__name__)

WALL_GLYPH = "█"

CELL_GLYPHS = {
    OPEN: "  ",
    WALL: WALL_GLYPH * 2,
    ROUTE: "//",
}


def maze_to_string(maze: np.ndarray) -> str:
    """把矩阵编码为文本，每行一个矩阵行，以换行结尾"""
    matrix = as_matrix(maze)
    lines = ["".join(CELL_GLYPHS[int(cell)] for cell in row) for row in matrix]
    return "\n".join(lines) + "\n"


def maze_from_string(text: str) -> np.ndarray:
    """从文本解析迷宫矩阵，空行会被忽略。

    Raises:
        MalformedMaze: 没有任何行或各行长度不一致
    """
    rows: List[List[int]] = []
    for line in text.splitlines():
        # 整行都是通路时也只有空格，所以只跳过真正的空行
        if not line:
            continue
        rows.append([WALL if line[i] == WALL_GLYPH else OPEN for i in range(0, len(line), 2)])
    if not rows:
        raise MalformedMaze("文本中没有迷宫数据")
    return as_matrix(rows)


def save_maze(maze: np.ndarray, path: Union[str, Path]) -> Path:
    """把迷宫保存到文本文件，返回写入的路径"""
    path = Path(path)
    path.write_text(maze_to_string(maze), encoding="utf8")
    logger.info("迷宫已保存到 %s", path)
    return path


def load_maze(path: Union[str, Path]) -> np.ndarray:
    """从文本文件读取迷宫。

    Raises:
        OSError: 文件不存在或无法读取
        MalformedMaze: 文件内容不是合法的迷宫
    """
    path = Path(path)
    maze = maze_from_string(path.read_text(encoding="utf8"))
    logger.info("从 %s 读取迷宫: %dx%d", path, maze.shape[1], maze.shape[0])
    return maze


__all__ = [
    "WALL_GLYPH",
    "CELL_GLYPHS",
    "maze_to_string",
    "maze_from_string",
    "save_maze",
    "load_maze",
]
