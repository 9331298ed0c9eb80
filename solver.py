"""迷宫求解：在墙/通路矩阵上寻找入口到出口的逃生路线。

入口和出口取自矩阵边界上的通路格子，用深度优先搜索连接二者。
搜索使用显式栈，邻居检查顺序固定为上、下、左、右，因此同一迷宫总是得到同一条路线。
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from maze_types import ROUTE, WALL, Coord, MalformedMaze, NoRouteFound, as_matrix

logger = logging.getLogger(__name__)

# 先竖直方向再水平方向，每个方向先负后正
NEIGHBOR_STEPS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def boundary_cells(height: int, width: int) -> Iterator[Coord]:
    """按固定顺序遍历边界格子：先逐行检查左列、右列，再逐列检查上行、下行"""
    for row in range(height):
        yield row, 0
        yield row, width - 1
    for col in range(width):
        yield 0, col
        yield height - 1, col


def find_openings(maze: np.ndarray | Sequence[Sequence[int]]) -> Tuple[Coord, Coord]:
    """找出迷宫的入口和出口。

    边界上按 :func:`boundary_cells` 顺序遇到的第一个通路格子是入口，第二个是出口。

    Raises:
        MalformedMaze: 边界上的通路格子不是恰好两个
    """
    matrix = as_matrix(maze)
    height, width = matrix.shape
    openings: List[Coord] = []
    for cell in boundary_cells(height, width):
        if matrix[cell] != WALL and cell not in openings:
            openings.append(cell)
    if len(openings) != 2:
        raise MalformedMaze(f"迷宫边界应有且仅有2个出入口，实际找到 {len(openings)} 个: {openings}")
    logger.debug("入口 %s, 出口 %s", openings[0], openings[1])
    return openings[0], openings[1]


def _depth_first(matrix: np.ndarray, start: Coord, goal: Coord) -> Optional[Dict[Coord, Optional[Coord]]]:
    """从 ``start`` 深度优先搜索到 ``goal``。

    Returns:
        每个已访问格子到其前驱格子的映射（起点的前驱为 None）；
        无法到达 ``goal`` 时返回 None
    """
    height, width = matrix.shape
    came_from: Dict[Coord, Optional[Coord]] = {start: None}
    if start == goal:
        return came_from

    stack = [(start, iter(NEIGHBOR_STEPS))]
    while stack:
        current, steps = stack[-1]
        for dr, dc in steps:
            nr, nc = current[0] + dr, current[1] + dc
            if not (0 <= nr < height and 0 <= nc < width):
                continue
            neighbor = (nr, nc)
            if matrix[neighbor] == WALL or neighbor in came_from:
                continue
            came_from[neighbor] = current
            if neighbor == goal:
                return came_from
            stack.append((neighbor, iter(NEIGHBOR_STEPS)))
            break
        else:
            stack.pop()
    return None


def find_escape(maze: np.ndarray | Sequence[Sequence[int]]) -> List[Coord]:
    """求入口到出口的路线，不修改矩阵。

    Returns:
        从入口到出口（含两端）的 ``(row, col)`` 列表

    Raises:
        MalformedMaze: 矩阵不规则或出入口数量不为2
        NoRouteFound: 入口与出口不连通
    """
    matrix = as_matrix(maze)
    entrance, exit_cell = find_openings(matrix)
    came_from = _depth_first(matrix, entrance, exit_cell)
    if came_from is None:
        raise NoRouteFound(f"入口 {entrance} 与出口 {exit_cell} 之间没有通路")

    route: List[Coord] = []
    cell: Optional[Coord] = exit_cell
    while cell is not None:
        route.append(cell)
        cell = came_from[cell]
    route.reverse()
    logger.info("找到逃生路线: %d 个格子, 搜索访问 %d 个格子", len(route), len(came_from))
    return route


def solve(maze: np.ndarray | Sequence[Sequence[int]]) -> np.ndarray:
    """求解迷宫并把路线标记为 ``ROUTE``。

    传入 ``numpy`` 数组时就地修改并返回同一个对象；传入嵌套列表时返回新数组。
    """
    matrix = as_matrix(maze)
    for cell in find_escape(matrix):
        matrix[cell] = ROUTE
    return matrix


__all__ = [
    "NEIGHBOR_STEPS",
    "boundary_cells",
    "find_openings",
    "find_escape",
    "solve",
]
