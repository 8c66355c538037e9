# gridroute/planning/costs/uniform_cost.py
from gridroute.types import Point, CompassDirection
from .base import CostModel


class UniformCost(CostModel):
    """
    均匀代价：任意真实移动代价为 1，不移动为 0。
    """
    def get_cost(self, location: Point, direction: CompassDirection) -> int:
        if direction == CompassDirection.NOT_SET:
            return 0
        return 1
