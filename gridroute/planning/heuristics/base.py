from abc import ABC, abstractmethod
from gridroute.types import Point


class Heuristic(ABC):
    @abstractmethod
    def estimate(self, current: Point, goal: Point) -> int:
        """统一接口：只接受当前格子和目标格子"""
        pass
