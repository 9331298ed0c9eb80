"""迷宫矩阵的公共定义。

矩阵使用 ``numpy`` 的 ``uint8`` 二维数组表示，每个格子取以下三种值之一：

* ``OPEN``  (0) 通路
* ``WALL``  (1) 墙
* ``ROUTE`` (2) 求解后标记的逃生路线
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

OPEN = 0
WALL = 1
ROUTE = 2

CELL_VALUES = (OPEN, WALL, ROUTE)

# (row, col)
Coord = Tuple[int, int]


class MazeError(Exception):
    """迷宫核心逻辑抛出的所有错误的基类"""


class InvalidSize(MazeError, ValueError):
    """迷宫尺寸无效（非整数或小于最小尺寸）"""


class MalformedMaze(MazeError, ValueError):
    """矩阵不是合法的迷宫：不规则、含未知格子或边界出入口数量不为2"""


class NoRouteFound(MazeError):
    """入口与出口之间没有连通的路线"""


def new_matrix(height: int, width: int, fill: int = WALL) -> np.ndarray:
    """创建一个 ``height x width`` 的矩阵，默认全部为墙"""
    return np.full((height, width), fill, dtype=np.uint8)


def as_matrix(rows: Sequence[Sequence[int]] | np.ndarray) -> np.ndarray:
    """将嵌套列表或数组转换为迷宫矩阵并校验其形状和取值。

    Raises:
        MalformedMaze: 矩阵为空、行长度不一致或含有未知格子值
    """
    if isinstance(rows, np.ndarray):
        matrix = rows
    else:
        rows = [list(row) for row in rows]
        if not rows or not rows[0]:
            raise MalformedMaze("迷宫矩阵为空")
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise MalformedMaze(f"迷宫矩阵的行长度不一致: {sorted(widths)}")
        matrix = np.asarray(rows)

    if matrix.ndim != 2 or matrix.size == 0:
        raise MalformedMaze(f"迷宫矩阵必须是非空二维数组，实际形状为 {matrix.shape}")
    unknown = np.setdiff1d(np.unique(matrix), CELL_VALUES)
    if unknown.size:
        raise MalformedMaze(f"迷宫矩阵含有未知格子值: {unknown.tolist()}")
    # 传入的数组原样返回，求解时就地修改调用方的矩阵
    if matrix is rows:
        return matrix
    return matrix.astype(np.uint8)


__all__ = [
    "OPEN",
    "WALL",
    "ROUTE",
    "CELL_VALUES",
    "Coord",
    "MazeError",
    "InvalidSize",
    "MalformedMaze",
    "NoRouteFound",
    "new_matrix",
    "as_matrix",
]
