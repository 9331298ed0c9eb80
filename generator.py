#!/usr/bin/env python3
"""随机迷宫生成器。

在 ``w x h`` 的逻辑网格上为每对相邻节点生成一条随机权重的边，
用 Prim 算法求最小生成树，再把生成树展开成 ``height x width`` 的墙/通路矩阵。
生成树保证迷宫中任意两个通路格子之间有且只有一条路径。
"""

import heapq
import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from maze_types import OPEN, WALL, InvalidSize, new_matrix

logger = logging.getLogger(__name__)

MIN_SIZE = 3

# (节点索引a, 节点索引b, 权重)
GridEdge = Tuple[int, int, float]
SpanningTree = Tuple[GridEdge, ...]


@dataclass
class MazeConfig:
    """迷宫生成参数"""
    width: int = 15                 # 矩阵列数
    height: int = 15                # 矩阵行数
    seed: Optional[int] = None      # 随机种子，None 表示不固定


def coarse_size(size: int) -> int:
    """计算某一方向上逻辑网格的节点数。

    偶数尺寸会少放一个节点，在出口一侧多留一堵墙。
    """
    return size // 2 - 1 if size % 2 == 0 else size // 2


def check_size(width: int, height: int) -> None:
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidSize(f"{name} 必须是整数，实际为 {value!r}")
        if value < MIN_SIZE:
            raise InvalidSize(f"{name} 必须不小于 {MIN_SIZE}，实际为 {value}")


@dataclass
class GridGraph:
    """逻辑网格图。

    节点用扁平索引 ``row * cols + col`` 表示，边保存为
    ``(a, b, weight)`` 三元组，``adjacency[i]`` 是节点 i 关联的边的下标列表。
    """
    cols: int
    rows: int
    edges: List[GridEdge] = field(default_factory=list)
    adjacency: List[List[int]] = field(default_factory=list)

    @classmethod
    def random(cls, cols: int, rows: int, rng: random.Random) -> "GridGraph":
        """创建网格并为每对上下/左右相邻的节点生成一条权重在 [0, 1) 的边"""
        graph = cls(cols, rows)
        graph.adjacency = [[] for _ in range(cols * rows)]
        for row in range(rows):
            for col in range(cols):
                current = graph.index(col, row)
                # 每对相邻节点只连一次：只向右、向下连边
                if col + 1 < cols:
                    graph.add_edge(current, graph.index(col + 1, row), rng.random())
                if row + 1 < rows:
                    graph.add_edge(current, graph.index(col, row + 1), rng.random())
        return graph

    @property
    def node_count(self) -> int:
        return self.cols * self.rows

    def index(self, col: int, row: int) -> int:
        return row * self.cols + col

    def coords(self, index: int) -> Tuple[int, int]:
        """返回节点的 (col, row) 坐标"""
        return index % self.cols, index // self.cols

    def add_edge(self, a: int, b: int, weight: float) -> None:
        self.edges.append((a, b, weight))
        edge_id = len(self.edges) - 1
        self.adjacency[a].append(edge_id)
        self.adjacency[b].append(edge_id)

    def neighbors(self, index: int) -> List[int]:
        result = []
        for edge_id in self.adjacency[index]:
            a, b, _ = self.edges[edge_id]
            result.append(b if a == index else a)
        return result


def build_spanning_tree(graph: GridGraph, root: int = 0) -> SpanningTree:
    """用 Prim 算法求最小生成树。

    从 ``root`` 出发，每一步都选取连接树内节点与树外节点的权重最小的边。
    候选边放在以 ``(权重, 入堆顺序)`` 为键的堆中，远端已在树内的过期条目直接丢弃。

    Returns:
        按加入顺序排列的树边，数量为节点数减一
    """
    if graph.node_count == 0:
        return ()

    in_tree = [False] * graph.node_count
    tree: List[GridEdge] = []
    heap: List[Tuple[float, int, int, int]] = []
    counter = 0

    def grow(node: int) -> None:
        nonlocal counter
        in_tree[node] = True
        for edge_id in graph.adjacency[node]:
            a, b, weight = graph.edges[edge_id]
            far = b if a == node else a
            if not in_tree[far]:
                heapq.heappush(heap, (weight, counter, edge_id, far))
                counter += 1

    grow(root)
    while heap and len(tree) < graph.node_count - 1:
        _, _, edge_id, far = heapq.heappop(heap)
        if in_tree[far]:
            continue
        tree.append(graph.edges[edge_id])
        grow(far)

    logger.debug("生成树完成: %d 个节点, %d 条边", graph.node_count, len(tree))
    return tuple(tree)


def render_tree(graph: GridGraph, tree: SpanningTree, width: int, height: int) -> np.ndarray:
    """把生成树展开为墙/通路矩阵，并打开入口与出口。

    节点 (col, row) 对应矩阵格子 ``(2*row+1, 2*col+1)``，
    树边对应两个节点之间的那一个格子。
    """
    matrix = new_matrix(height, width, WALL)

    for node in range(graph.node_count):
        col, row = graph.coords(node)
        matrix[2 * row + 1, 2 * col + 1] = OPEN

    for a, b, _ in tree:
        x1, y1 = graph.coords(a)
        x2, y2 = graph.coords(b)
        if x1 == x2:
            matrix[2 * max(y1, y2), 2 * x1 + 1] = OPEN
        else:
            matrix[2 * y1 + 1, 2 * max(x1, x2)] = OPEN

    # 入口固定在左边第二行
    matrix[1, 0] = OPEN

    # 出口：自下而上找到最右一列房间中第一个通路格子，把它右侧的墙打通
    if width % 2 == 1:
        room_col, exit_cols = width - 2, [width - 1]
    else:
        room_col, exit_cols = width - 3, [width - 2, width - 1]
    for row in range(height - 1, 0, -1):
        if matrix[row, room_col] == OPEN:
            matrix[row, exit_cols] = OPEN
            logger.debug("出口位于第 %d 行", row)
            break

    return matrix


class MazeGenerator:
    """迷宫生成器，负责建图、求生成树和展开矩阵。

    最近一次生成的图和生成树保存在 ``graph`` 与 ``tree`` 上，便于检查。
    """

    def __init__(self, config: MazeConfig, rng: Optional[random.Random] = None):
        check_size(config.width, config.height)
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.graph: Optional[GridGraph] = None
        self.tree: SpanningTree = ()

    @property
    def cols(self) -> int:
        return coarse_size(self.config.width)

    @property
    def rows(self) -> int:
        return coarse_size(self.config.height)

    def generate(self) -> np.ndarray:
        """生成一个新的迷宫矩阵"""
        width, height = self.config.width, self.config.height
        self.graph = GridGraph.random(self.cols, self.rows, self.rng)
        logger.debug("网格图: %dx%d 个节点, %d 条边", self.cols, self.rows, len(self.graph.edges))
        self.tree = build_spanning_tree(self.graph)
        matrix = render_tree(self.graph, self.tree, width, height)
        logger.info("迷宫生成完成: %dx%d", width, height)
        return matrix


def generate_maze(width: int, height: int, seed: Optional[int] = None,
                  rng: Optional[random.Random] = None) -> np.ndarray:
    """生成 ``height`` 行 ``width`` 列的迷宫矩阵。

    Args:
        width: 矩阵列数，不小于3
        height: 矩阵行数，不小于3
        seed: 随机种子，仅在未传入 ``rng`` 时使用
        rng: 权重使用的随机数发生器

    Raises:
        InvalidSize: 尺寸不是整数或小于3
    """
    return MazeGenerator(MazeConfig(width, height, seed), rng).generate()


__all__ = [
    "MIN_SIZE",
    "GridEdge",
    "SpanningTree",
    "MazeConfig",
    "GridGraph",
    "coarse_size",
    "check_size",
    "build_spanning_tree",
    "render_tree",
    "MazeGenerator",
    "generate_maze",
]
