# gridroute/planning/costs/terrain_cost.py
import numpy as np

from gridroute.types import Point, CompassDirection
from gridroute.planning.errors import InvalidInputError
from .base import CostModel


class TerrainCost(CostModel):
    """
    地形代价：进入目标格子的代价取 weights[y, x]。
    weights 形状必须与地图一致 (height, width)。
    """
    def __init__(self, weights):
        weights = np.asarray(weights)
        if weights.ndim != 2:
            raise InvalidInputError(f"Terrain weights must be 2-D, got shape {weights.shape}")
        if not np.issubdtype(weights.dtype, np.integer):
            raise InvalidInputError(f"Terrain weights must be integers, got {weights.dtype}")
        if (weights < 0).any():
            raise InvalidInputError("Terrain weights must be non-negative")
        self.weights = weights

    def get_cost(self, location: Point, direction: CompassDirection) -> int:
        if direction == CompassDirection.NOT_SET:
            return 0
        target = location + direction.offset
        return int(self.weights[target.y, target.x])

    def check_map(self, grid_map):
        expected = (grid_map.height, grid_map.width)
        if self.weights.shape != expected:
            raise InvalidInputError(
                f"Terrain weights shape {self.weights.shape} does not match the map (height, width) {expected}")
