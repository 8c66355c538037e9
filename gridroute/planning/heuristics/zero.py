# gridroute/planning/heuristics/zero.py
from gridroute.types import Point
from .base import Heuristic


class ZeroHeuristic(Heuristic):
    """
    零启发式 (h=0).
    这将使 A* 退化为 Dijkstra 算法，保证最优性，但搜索效率最低（向四面八方均匀扩散）。
    """
    def estimate(self, current: Point, goal: Point) -> int:
        return 0
