# gridroute/map/__init__.py

from .base import MapBase
from .grid_map import GridMap
from .generator import MapGenerator

__all__ = ["MapBase", "GridMap", "MapGenerator"]
