# 绘图逻辑 (Matplotlib)

from typing import List, Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap

from gridroute.map.grid_map import GridMap
from gridroute.types import Point
from gridroute.visualization.observers import ExperimentObserver

TILE_FREE = 0
TILE_OBSTACLE = 1
TILE_PATH = 2

_TILE_CMAP = ListedColormap(['white', 'black', 'royalblue'])


def tile_grid(grid_map: GridMap, path: Optional[List[Point]] = None) -> np.ndarray:
    """
    生成 (height, width) 的贴图矩阵：0 空闲，1 障碍，2 路径。
    障碍优先于路径 (终点可能是障碍)。
    """
    tiles = grid_map.data.astype(np.int8)
    for p in path or []:
        if tiles[p.y, p.x] == TILE_FREE:
            tiles[p.y, p.x] = TILE_PATH
    return tiles


class Visualizer:
    def __init__(self, grid_map: GridMap):
        self.map = grid_map
        self.fig = None
        self.ax = None

    def draw(self,
             path: Optional[List[Point]] = None,
             start: Optional[Point] = None,
             destination: Optional[Point] = None,
             observer: Optional[ExperimentObserver] = None,
             title: str = "A* Route"):
        """画出障碍、已扩展格子、路径和起终点，返回 (fig, ax)"""
        self.fig, self.ax = plt.subplots(figsize=(6, 6))

        # 1. 贴图底图 (y 轴向下，和格子坐标一致)
        self.ax.imshow(tile_grid(self.map, path), cmap=_TILE_CMAP, vmin=0, vmax=2,
                       origin='upper', interpolation='nearest')

        # 2. 已扩展格子
        if observer is not None and observer.expanded_nodes:
            ex_x = [p.x for p in observer.expanded_nodes]
            ex_y = [p.y for p in observer.expanded_nodes]
            self.ax.scatter(ex_x, ex_y, c='red', s=8, alpha=0.4, label='Expanded')

        # 3. 路径连线
        if path:
            self.ax.plot([p.x for p in path], [p.y for p in path], 'b-', linewidth=2, label='Path')

        # 4. 起终点
        if start is not None:
            self.ax.plot(start.x, start.y, 'go', markersize=10, label='Start')
        if destination is not None:
            self.ax.plot(destination.x, destination.y, 'rx', markersize=10, label='Destination')

        self.ax.set_title(title)
        self.ax.set_xticks(np.arange(-0.5, self.map.width, 1), minor=True)
        self.ax.set_yticks(np.arange(-0.5, self.map.height, 1), minor=True)
        self.ax.grid(which='minor', color='gray', linestyle=':', linewidth=0.5)
        if self.ax.get_legend_handles_labels()[0]:
            self.ax.legend(loc='upper right', fontsize='small')
        return self.fig, self.ax

    def save(self, filename: str):
        if self.fig is None:
            raise RuntimeError("Nothing to save, call draw() first")
        self.fig.savefig(filename)
        plt.close(self.fig)
        self.fig, self.ax = None, None
