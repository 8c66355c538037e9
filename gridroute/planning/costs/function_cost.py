# gridroute/planning/costs/function_cost.py
from typing import Callable

from gridroute.types import Point, CompassDirection
from .base import CostModel


class FunctionCost(CostModel):
    """把普通函数 fn(location, direction) -> int 包装成 CostModel"""
    def __init__(self, fn: Callable[[Point, CompassDirection], int]):
        self.fn = fn

    def get_cost(self, location: Point, direction: CompassDirection) -> int:
        return self.fn(location, direction)
