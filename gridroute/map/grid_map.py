# gridroute/map/grid_map.py
import numbers
from typing import Iterable, List, Optional

import numpy as np
from scipy.ndimage import distance_transform_edt

from .base import MapBase
from gridroute.types import Point
from gridroute.planning.errors import InvalidInputError


class GridMap(MapBase):
    def __init__(self, width: int, height: int):
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
                raise InvalidInputError(f"Grid {name} must be a positive integer, got {value!r}")
        self._width = int(width)
        self._height = int(height)
        self._grid = np.zeros((self._height, self._width), dtype=bool)  # 全部初始化为可通行
        self._dist_map: Optional[np.ndarray] = None

    def __repr__(self):
        return f"GridMap(width={self._width}, height={self._height}, obstacles={int(self._grid.sum())})"

    @property
    def data(self) -> np.ndarray:
        return self._grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _is_valid_index(self, x_idx: int, y_idx: int) -> bool:
        """内部辅助：检查索引边界"""
        return (0 <= x_idx < self._width) and (0 <= y_idx < self._height)

    def is_obstacle(self, x_idx: int, y_idx: int) -> bool:
        """查询栅格索引是否为障碍"""
        if not self._is_valid_index(x_idx, y_idx):
            return True  # 越界通常视为障碍
        return bool(self._grid[y_idx, x_idx])

    def set_obstacles(self, cells: Iterable[Point]):
        """
        将给定格子标记为障碍 (累加，不清除已有障碍)。
        任意一个格子越界都会抛出 InvalidInputError，且地图保持不变。
        """
        cells = list(cells)
        for p in cells:
            if not self._is_valid_index(p.x, p.y):
                raise InvalidInputError(
                    f"Obstacle {p} is outside the {self._width}x{self._height} map")
        for p in cells:
            self._grid[p.y, p.x] = True
        self._dist_map = None

    def clear_obstacles(self):
        self._grid[:] = False
        self._dist_map = None

    def obstacle_cells(self) -> List[Point]:
        ys, xs = np.nonzero(self._grid)
        return [Point(int(x), int(y)) for x, y in zip(xs, ys)]

    def precompute_distance_map(self):
        """
        计算欧氏距离变换 (Euclidean Distance Transform, EDT)。
        结果存储在 self._dist_map 中，单位为格子。
        """
        # distance_transform_edt 计算的是“当前像素离最近的0值像素的距离”
        # 所以需要反转：障碍物=0, 空闲=1
        if not self._grid.any():
            # 没有障碍物时，所有格子都视为无限远
            self._dist_map = np.full(self._grid.shape, np.inf)
            return
        binary_grid = (~self._grid).astype(float)
        self._dist_map = distance_transform_edt(binary_grid)

    def get_obstacle_distance(self, p: Point) -> float:
        """
        获取指定格子离最近障碍物的距离 (格子数)。
        越界返回 0.0 (视为贴着障碍物/最危险)。
        """
        if self._dist_map is None:
            self.precompute_distance_map()

        if not self._is_valid_index(p.x, p.y):
            return 0.0

        return float(self._dist_map[p.y, p.x])
