# gridroute/planning/costs/clearance_cost.py
import math

from gridroute.types import Point, CompassDirection
from gridroute.map.grid_map import GridMap
from gridroute.planning.errors import InvalidInputError
from .base import CostModel


class ClearanceCost(CostModel):
    """
    风险代价：利用预计算的 Distance Map 让路径远离障碍物。
    每步基础代价 1，距离障碍物小于 risk_dist 时额外加罚。
    """
    def __init__(self, grid_map: GridMap, risk_dist: float = 2.0, weight_factor: float = 1.0):
        """
        :param risk_dist: 超过这个距离就认为安全了，额外代价为0 (格子)
        :param weight_factor: 代价的缩放系数
        """
        self.grid_map = grid_map
        self.risk_dist = risk_dist
        self.weight_factor = weight_factor

    def get_cost(self, location: Point, direction: CompassDirection) -> int:
        if direction == CompassDirection.NOT_SET:
            return 0

        # 障碍变化后 grid_map 会丢弃旧的距离场，这里按需重新计算
        dist = self.grid_map.get_obstacle_distance(location + direction.offset)

        if dist >= self.risk_dist:
            return 1

        # 距离越近，代价越高: Cost = weight * (safe_dist - actual_dist)
        return 1 + int(math.ceil(self.weight_factor * (self.risk_dist - dist)))

    def check_map(self, grid_map):
        if (grid_map.width, grid_map.height) != (self.grid_map.width, self.grid_map.height):
            raise InvalidInputError(
                f"Clearance map is {self.grid_map.width}x{self.grid_map.height}, "
                f"planner map is {grid_map.width}x{grid_map.height}")
