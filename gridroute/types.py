# gridroute/types.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Point:
    """
    栅格坐标 (整数)。值类型，按分量比较。
    """
    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __str__(self):
        return f"{self.x}_{self.y}"


@dataclass(frozen=True)
class Rectangle:
    """轴对齐矩形区域，左闭右开"""
    x: int
    y: int
    size_x: int
    size_y: int

    def __post_init__(self):
        if self.size_x < 0 or self.size_y < 0:
            raise ValueError(f"Rectangle size must be non-negative, got {self.size_x}x{self.size_y}")

    def contains(self, p: Point) -> bool:
        # 注意是半开区间: x <= px < x + size_x
        return (self.x <= p.x < self.x + self.size_x) and (self.y <= p.y < self.y + self.size_y)


class CompassDirection(Enum):
    NOT_SET = 0   # 仅用于起点的虚拟节点
    NORTH = 1
    EAST = 2
    SOUTH = 3
    WEST = 4

    @property
    def offset(self) -> Point:
        return _OFFSETS[self]


# y 轴向下 (屏幕坐标)，North 为 y - 1
_OFFSETS = {
    CompassDirection.NOT_SET: Point(0, 0),
    CompassDirection.NORTH: Point(0, -1),
    CompassDirection.EAST: Point(1, 0),
    CompassDirection.SOUTH: Point(0, 1),
    CompassDirection.WEST: Point(-1, 0),
}

# 邻居扩展顺序，决定等代价时的路径形状，不能改
DIRECTIONS = (
    CompassDirection.EAST,
    CompassDirection.SOUTH,
    CompassDirection.WEST,
    CompassDirection.NORTH,
)


@dataclass
class Node:
    """搜索节点 (只在一次 plan 调用内存活)"""
    location: Point
    cost_g: int
    cost_h: int
    parent_index: Optional[int] = None  # 指向节点池中的父节点下标，起点为 None

    @property
    def cost_f(self) -> int:
        return self.cost_g + self.cost_h

    def reset_parent(self, parent_index: int, cost_g: int):
        """找到更优的前驱时更新父节点和 G 值 (H 值不变)"""
        self.parent_index = parent_index
        self.cost_g = cost_g
