# gridroute/map/base.py
from abc import ABC, abstractmethod
import numpy as np

from gridroute.types import Point, Rectangle


class MapBase(ABC):
    """
    地图抽象基类
    """

    @property
    @abstractmethod
    def data(self) -> np.ndarray:
        """
        返回地图数据矩阵 (height, width)，通常用于可视化或底层计算。
        约定：False 表示空闲，True 表示障碍物。
        """
        pass

    @property
    @abstractmethod
    def width(self) -> int:
        """网格宽度 (x方向数量)"""
        pass

    @property
    @abstractmethod
    def height(self) -> int:
        """网格高度 (y方向数量)"""
        pass

    @property
    def bounds(self) -> Rectangle:
        return Rectangle(0, 0, self.width, self.height)

    @abstractmethod
    def is_obstacle(self, x_idx: int, y_idx: int) -> bool:
        """检查特定网格索引是否为障碍物"""
        pass

    def is_inside(self, p: Point) -> bool:
        """检查栅格坐标是否在地图范围内"""
        return self.bounds.contains(p)
