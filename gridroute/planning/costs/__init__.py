# gridroute/planning/costs/__init__.py

from .base import CostModel
from .uniform_cost import UniformCost
from .function_cost import FunctionCost
from .terrain_cost import TerrainCost
from .clearance_cost import ClearanceCost

__all__ = ['CostModel', 'UniformCost', 'FunctionCost', 'TerrainCost', 'ClearanceCost']
