# gridroute/planning/planners/__init__.py

from .base import PlannerBase
from .a_star import AStarRoutePlanner


__all__ = [
    "PlannerBase",
    "AStarRoutePlanner",
]
