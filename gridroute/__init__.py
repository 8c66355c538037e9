# gridroute/__init__.py

from gridroute.types import Point, Rectangle, CompassDirection, DIRECTIONS
from gridroute.config import PlannerConfig
from gridroute.planning.errors import PlanningError, InvalidInputError
from gridroute.planning.planners import AStarRoutePlanner

__version__ = "0.1.0"

__all__ = [
    "Point",
    "Rectangle",
    "CompassDirection",
    "DIRECTIONS",
    "PlannerConfig",
    "PlanningError",
    "InvalidInputError",
    "AStarRoutePlanner",
]
