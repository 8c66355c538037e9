# gridroute/planning/planners/a_star.py
import heapq
import itertools
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple, Union

from gridroute.types import Point, Rectangle, Node, CompassDirection, DIRECTIONS
from gridroute.config import PlannerConfig
from gridroute.map.grid_map import GridMap
from gridroute.planning.planners.base import PlannerBase
from gridroute.planning.heuristics.base import Heuristic
from gridroute.planning.heuristics.manhattan import ManhattanHeuristic
from gridroute.planning.costs.base import CostModel
from gridroute.planning.costs.uniform_cost import UniformCost
from gridroute.planning.costs.function_cost import FunctionCost
from gridroute.planning.errors import InvalidInputError, PlanningError
from gridroute.planning.interfaces import IPlannerObserver
from gridroute.visualization.observers import EfficientObserver, DebugObserver


class _SearchState:
    """
    一次 plan 调用内的搜索状态，调用结束即丢弃。

    - nodes: 节点池，节点之间用下标互相引用 (parent_index)
    - lookup: 格子 -> 节点下标，覆盖 OpenSet 和 ClosedSet，每个格子最多一个节点
    - open_heap: (f, seq, index)，seq 是节点进入 OpenSet 的顺序，f 相同时先进先出
    """

    def __init__(self, bounds: Rectangle, destination: Point):
        self.bounds = bounds
        self.destination = destination
        self.nodes: List[Node] = []
        self.lookup: Dict[Point, int] = {}
        self.open_heap: List[Tuple[int, int, int]] = []
        self.open_seq: Dict[int, int] = {}
        self.closed: Set[int] = set()
        self._counter = itertools.count()

    def add_node(self, node: Node) -> int:
        index = len(self.nodes)
        self.nodes.append(node)
        self.lookup[node.location] = index
        return index

    def push_open(self, index: int):
        """节点 (重新) 进入 OpenSet，排在所有已有节点之后"""
        seq = next(self._counter)
        self.open_seq[index] = seq
        heapq.heappush(self.open_heap, (self.nodes[index].cost_f, seq, index))

    def decrease_key(self, index: int):
        """OpenSet 中节点的 G 值变小：保留原来的 seq，旧条目惰性删除"""
        heapq.heappush(self.open_heap, (self.nodes[index].cost_f, self.open_seq[index], index))

    def close(self, index: int):
        del self.open_seq[index]
        self.closed.add(index)

    def reopen(self, index: int):
        self.closed.discard(index)
        self.push_open(index)

    def pop_min(self) -> Optional[int]:
        """取出 f 最小的节点下标 (OpenSet 为空时返回 None)"""
        while self.open_heap:
            f, seq, index = heapq.heappop(self.open_heap)
            # 已关闭/重新入队 (seq 不符) 或已被松弛 (f 不符) 的旧条目直接跳过
            if self.open_seq.get(index) != seq or self.nodes[index].cost_f != f:
                continue
            return index
        return None


class AStarRoutePlanner(PlannerBase):
    """
    4-连通栅格上的 A* 规划器。

    F = G + H
    G = 从起点沿当前路径走到该格子的累计代价 (由 CostModel 逐步给出)。
    H = 该格子到终点的估计代价，默认曼哈顿距离 (水平+竖直格数，忽略对角线)。

    用法：
    1. configure(width, height, cost_model) (构造函数会调用一次)
    2. set_obstacles(cells)
    3. 反复调用 plan(start, destination)，每次调用都从零开始搜索，互不影响
    """

    def __init__(self,
                 width: int = 10,
                 height: int = 10,
                 cost_model: Union[CostModel, Callable, None] = None,
                 heuristic: Optional[Heuristic] = None,
                 config: Optional[PlannerConfig] = None):

        self.h_fn = heuristic if heuristic is not None else ManhattanHeuristic()
        self.config = config if config is not None else PlannerConfig()
        self.configure(width, height, cost_model)

    def configure(self, width: int, height: int,
                  cost_model: Union[CostModel, Callable, None] = None):
        """设置地图尺寸和代价模型，所有格子重置为可通行 (校验失败时保持原配置)"""
        grid_map = GridMap(width, height)
        cost_model = self._as_cost_model(cost_model)
        cost_model.check_map(grid_map)
        self._grid_map = grid_map
        self._cost_model = cost_model

    @property
    def cost_model(self) -> CostModel:
        return self._cost_model

    @cost_model.setter
    def cost_model(self, cost_model: Union[CostModel, Callable, None]):
        cost_model = self._as_cost_model(cost_model)
        cost_model.check_map(self._grid_map)
        self._cost_model = cost_model

    @staticmethod
    def _as_cost_model(cost_model: Union[CostModel, Callable, None]) -> CostModel:
        if cost_model is None:
            cost_model = UniformCost()
        elif not isinstance(cost_model, CostModel):
            if not callable(cost_model):
                raise TypeError(f"cost_model must be a CostModel or a callable, got {type(cost_model).__name__}")
            cost_model = FunctionCost(cost_model)
        return cost_model

    @property
    def grid_map(self) -> GridMap:
        return self._grid_map

    @property
    def obstacles(self):
        """障碍物矩阵 (height, width)，True 为障碍，供渲染使用"""
        return self._grid_map.data

    def set_obstacles(self, cells: Iterable[Point]):
        """在规划之前设置障碍物位置 (越界抛 InvalidInputError)"""
        self._grid_map.set_obstacles(cells)

    def plan(self,
             start: Point,
             destination: Point,
             debugger: Optional[IPlannerObserver] = None) -> List[Point]:

        # 1. 未指定调试器时按配置新建一个，只用于本次调用
        if debugger is not None:
            return self._plan(start, destination, debugger)

        debugger = DebugObserver() if self.config.debug_mode else EfficientObserver()
        try:
            return self._plan(start, destination, debugger)
        finally:
            if isinstance(debugger, DebugObserver):
                debugger.close()

    def _plan(self, start: Point, destination: Point, debugger: IPlannerObserver) -> List[Point]:
        debugger.set_map_info(self._grid_map)

        # 2. 边界检查：起点或终点不在地图内，直接报错
        bounds = self._grid_map.bounds
        if not (bounds.contains(start) and bounds.contains(destination)):
            raise InvalidInputError(
                f"Start {start} or destination {destination} is not in the "
                f"{bounds.size_x}x{bounds.size_y} map")

        debugger.log(f"Plan requested: {start} -> {destination}", level='INFO',
                     payload={'start': (start.x, start.y), 'destination': (destination.x, destination.y)})

        if not self.config.allow_blocked_destination and \
                self._grid_map.is_obstacle(destination.x, destination.y):
            debugger.log(f"Destination {destination} is an obstacle, no route.", level='WARN')
            return []

        if start == destination and self.config.trivial_same_cell:
            debugger.log("Start equals destination, trivial route.", level='INFO')
            return [start]

        return self._search(start, destination, bounds, debugger)

    def _search(self, start: Point, destination: Point, bounds: Rectangle,
                debugger: IPlannerObserver) -> List[Point]:
        state = _SearchState(bounds, destination)

        # 3. 起点作为虚拟节点：G = 0，H = 0，无父节点
        seed_index = state.add_node(Node(start, 0, 0, None))
        state.push_open(seed_index)
        debugger.record_open_set_node(start, 0, 0)

        iterations = 0
        current_index = state.pop_min()

        # 4. 主循环
        while current_index is not None:
            if self.config.max_iterations is not None and iterations >= self.config.max_iterations:
                debugger.log("Max iterations reached, path not found.", level='WARN',
                             payload={'max_iterations': self.config.max_iterations})
                return []
            iterations += 1

            current = state.nodes[current_index]
            debugger.record_current_expansion(current.location)

            # A. 按固定顺序 (东南西北) 扩展邻居
            for direction in DIRECTIONS:
                next_cell = current.location + direction.offset

                # A.1 越界检查
                if not bounds.contains(next_cell):
                    continue

                # A.2 终止条件：邻居就是终点 (终点本身不做障碍检查)
                if next_cell == destination:
                    path = self._reconstruct_path(state.nodes, current_index, destination)
                    debugger.log(f"Route found, {len(path)} cells.", level='INFO',
                                 payload={'length': len(path), 'expansions': iterations})
                    return path

                if self._grid_map.is_obstacle(next_cell.x, next_cell.y):
                    continue

                cost_g = current.cost_g + self._step_cost(current.location, direction)
                cost_h = self.h_fn.estimate(next_cell, destination)

                # A.3 已存在节点 (Open 或 Closed) 则尝试松弛，否则新建节点
                exist_index = state.lookup.get(next_cell)
                if exist_index is not None:
                    exist = state.nodes[exist_index]
                    if exist.cost_g > cost_g:
                        debugger.record_relaxation(next_cell, exist.cost_g, cost_g)
                        exist.reset_parent(current_index, cost_g)
                        debugger.record_edge(current.location, next_cell)
                        if exist_index in state.closed:
                            # 默认不重新打开已关闭节点
                            if self.config.reopen_closed:
                                state.reopen(exist_index)
                                debugger.record_open_set_node(next_cell, exist.cost_f, exist.cost_h)
                        else:
                            state.decrease_key(exist_index)
                            debugger.record_open_set_node(next_cell, exist.cost_f, exist.cost_h)
                else:
                    new_index = state.add_node(Node(next_cell, cost_g, cost_h, current_index))
                    state.push_open(new_index)
                    debugger.record_open_set_node(next_cell, cost_g + cost_h, cost_h)
                    debugger.record_edge(current.location, next_cell)

            # B. 当前节点从 OpenSet 移入 ClosedSet，取下一个 F 最小的节点
            state.close(current_index)
            current_index = state.pop_min()

        debugger.log("Open set is empty, no path found.", level='INFO',
                     payload={'expansions': iterations})
        return []

    def _step_cost(self, location: Point, direction: CompassDirection) -> int:
        cost = self._cost_model.get_cost(location, direction)
        if cost < 0:
            raise PlanningError(
                f"Cost model returned negative cost {cost} at {location} heading {direction.name}")
        return cost

    def _reconstruct_path(self, nodes: List[Node], index: Optional[int], destination: Point) -> List[Point]:
        """沿 parent_index 回溯，最后补上终点"""
        path = [destination]
        while index is not None:
            node = nodes[index]
            path.append(node.location)
            index = node.parent_index
        return path[::-1]
