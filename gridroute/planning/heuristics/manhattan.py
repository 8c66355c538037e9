# gridroute/planning/heuristics/manhattan.py
from gridroute.types import Point
from .base import Heuristic


class ManhattanHeuristic(Heuristic):
    """
    曼哈顿距离 (L1).
    Cost = |dx| + |dy|
    4-连通、单位代价的栅格上是精确且一致的估计 (忽略对角线)。
    """
    def estimate(self, current: Point, goal: Point) -> int:
        return abs(current.x - goal.x) + abs(current.y - goal.y)
