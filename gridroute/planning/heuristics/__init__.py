# gridroute/planning/heuristics/__init__.py

from .base import Heuristic
from .zero import ZeroHeuristic
from .manhattan import ManhattanHeuristic


__all__ = [
    "Heuristic",
    "ZeroHeuristic",
    "ManhattanHeuristic",
]
