# gridroute/map/generator.py
from typing import List, Optional

import numpy as np

from gridroute.map.grid_map import GridMap
from gridroute.types import Point
from gridroute.planning.errors import InvalidInputError


class MapGenerator:
    """
    随机障碍 / 随机起终点生成器 (演示用)
    同一个 seed 生成的障碍和起终点序列完全一致。
    """

    def __init__(self, obstacle_count: int = 12, seed: Optional[int] = None):
        if obstacle_count < 0:
            raise InvalidInputError(f"obstacle_count must be non-negative, got {obstacle_count}")
        self.obstacle_count = obstacle_count
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def generate_obstacles(self, width: int, height: int) -> List[Point]:
        """随机撒障碍点，允许重复 (重复点只占一个格子)"""
        xs = self.rng.integers(0, width, size=self.obstacle_count)
        ys = self.rng.integers(0, height, size=self.obstacle_count)
        return [Point(int(x), int(y)) for x, y in zip(xs, ys)]

    def random_free_cell(self, grid_map: GridMap) -> Point:
        """拒绝采样一个非障碍格子"""
        if grid_map.data.all():
            raise InvalidInputError("Map has no free cell to sample")
        while True:
            x = int(self.rng.integers(0, grid_map.width))
            y = int(self.rng.integers(0, grid_map.height))
            if not grid_map.is_obstacle(x, y):
                return Point(x, y)
