# tests/costs/test_cost_models.py
import numpy as np
import pytest

from gridroute.types import Point, CompassDirection
from gridroute.map.grid_map import GridMap
from gridroute.planning.costs import (
    CostModel, UniformCost, FunctionCost, TerrainCost, ClearanceCost,
)
from gridroute.planning.planners import AStarRoutePlanner
from gridroute.planning.errors import InvalidInputError, PlanningError


def path_cost(model: CostModel, path):
    total = 0
    for a, b in zip(path, path[1:]):
        direction = next(d for d in CompassDirection if d.offset == b - a)
        total += model.get_cost(a, direction)
    return total


def test_uniform_cost():
    model = UniformCost()
    assert model.get_cost(Point(3, 3), CompassDirection.NOT_SET) == 0
    for direction in (CompassDirection.NORTH, CompassDirection.EAST,
                      CompassDirection.SOUTH, CompassDirection.WEST):
        assert model.get_cost(Point(3, 3), direction) == 1


def test_function_cost_delegates():
    calls = []

    def fn(location, direction):
        calls.append((location, direction))
        return 7

    model = FunctionCost(fn)
    assert model.get_cost(Point(1, 2), CompassDirection.WEST) == 7
    assert calls == [(Point(1, 2), CompassDirection.WEST)]


def test_planner_wraps_plain_callable():
    planner = AStarRoutePlanner(3, 3, lambda location, direction: 1)
    assert isinstance(planner.cost_model, FunctionCost)
    assert len(planner.plan(Point(0, 0), Point(2, 2))) == 5


def test_planner_rejects_non_callable_cost_model():
    with pytest.raises(TypeError):
        AStarRoutePlanner(3, 3, cost_model=42)


def test_negative_cost_is_reported():
    planner = AStarRoutePlanner(3, 3, FunctionCost(lambda location, direction: -1))
    with pytest.raises(PlanningError):
        planner.plan(Point(0, 0), Point(2, 2))


def test_terrain_cost_uses_target_cell_weight():
    weights = np.array([[1, 9, 1],
                        [1, 1, 1],
                        [1, 1, 1]])
    model = TerrainCost(weights)
    assert model.get_cost(Point(0, 0), CompassDirection.EAST) == 9
    assert model.get_cost(Point(0, 0), CompassDirection.SOUTH) == 1
    assert model.get_cost(Point(0, 0), CompassDirection.NOT_SET) == 0


@pytest.mark.parametrize("weights", [
    np.array([1, 2, 3]),
    np.array([[1, -1], [1, 1]]),
    np.array([[1.5, 1.0], [1.0, 1.0]]),
])
def test_terrain_cost_rejects_bad_weights(weights):
    with pytest.raises(InvalidInputError):
        TerrainCost(weights)


def test_planner_avoids_expensive_terrain():
    weights = np.ones((3, 3), dtype=int)
    weights[0, 1] = 9
    model = TerrainCost(weights)
    planner = AStarRoutePlanner(3, 3, model)

    path = planner.plan(Point(0, 0), Point(2, 2))

    assert path == [Point(0, 0), Point(0, 1), Point(1, 1), Point(2, 1), Point(2, 2)]
    assert path_cost(model, path) == 4


def test_clearance_cost_penalises_cells_near_obstacles():
    grid_map = GridMap(5, 5)
    grid_map.set_obstacles([Point(0, 0)])
    model = ClearanceCost(grid_map, risk_dist=2.0, weight_factor=1.0)

    # (1,0) 离障碍 1 格: 1 + ceil(2 - 1)
    assert model.get_cost(Point(2, 0), CompassDirection.WEST) == 2
    # (3,0) 离障碍 3 格: 安全
    assert model.get_cost(Point(2, 0), CompassDirection.EAST) == 1
    # (1,1) 离障碍 sqrt(2) 格: 1 + ceil(0.586)
    assert model.get_cost(Point(1, 2), CompassDirection.NORTH) == 2
    assert model.get_cost(Point(2, 0), CompassDirection.NOT_SET) == 0


def test_clearance_cost_follows_obstacle_updates():
    grid_map = GridMap(5, 5)
    model = ClearanceCost(grid_map, risk_dist=2.0, weight_factor=3.0)
    assert model.get_cost(Point(3, 4), CompassDirection.EAST) == 1

    grid_map.set_obstacles([Point(4, 3)])
    # (4,4) 离障碍 1 格: 1 + ceil(3 * (2 - 1))
    assert model.get_cost(Point(3, 4), CompassDirection.EAST) == 4


def test_planner_with_clearance_cost_keeps_away_from_wall():
    planner = AStarRoutePlanner(7, 5)
    planner.set_obstacles([Point(x, 0) for x in range(1, 6)])
    planner.cost_model = ClearanceCost(planner.grid_map, risk_dist=2.0, weight_factor=5.0)

    path = planner.plan(Point(0, 2), Point(6, 2))

    assert path[0] == Point(0, 2) and path[-1] == Point(6, 2)
    # 贴墙的 y=1 行代价很高，应该走 y>=2
    assert all(p.y >= 2 for p in path)


@pytest.mark.parametrize("shape", [(2, 2), (4, 5), (5, 4), (6, 6)])
def test_terrain_weights_must_match_map_shape(shape):
    with pytest.raises(InvalidInputError):
        AStarRoutePlanner(4, 4, TerrainCost(np.ones(shape, dtype=int)))


def test_mismatched_cost_model_leaves_planner_unchanged():
    planner = AStarRoutePlanner(4, 4)
    previous = planner.cost_model

    with pytest.raises(InvalidInputError):
        planner.cost_model = TerrainCost(np.ones((2, 2), dtype=int))
    assert planner.cost_model is previous

    with pytest.raises(InvalidInputError):
        planner.configure(3, 3, TerrainCost(np.ones((4, 4), dtype=int)))
    assert (planner.grid_map.width, planner.grid_map.height) == (4, 4)
    assert len(planner.plan(Point(0, 0), Point(3, 3))) == 7


def test_clearance_cost_must_match_map_size():
    with pytest.raises(InvalidInputError):
        AStarRoutePlanner(4, 4, ClearanceCost(GridMap(5, 5)))
