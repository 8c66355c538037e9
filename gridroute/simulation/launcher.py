# gridroute/simulation/launcher.py
import time
from typing import List, Optional

from gridroute.types import Point
from gridroute.map.generator import MapGenerator
from gridroute.planning.planners.a_star import AStarRoutePlanner
from gridroute.visualization.observers import ExperimentObserver


class DemoLauncher:
    """
    演示驱动：放置一次随机障碍，然后每隔 interval 秒随机挑选起终点重新规划。
    渲染交给 Visualizer，这里只负责调度和保存最近一次结果。
    """
    def __init__(self,
                 planner: AStarRoutePlanner,
                 generator: MapGenerator,
                 interval: float = 0.5,
                 record_search: bool = False):
        self.planner = planner
        self.generator = generator
        self.interval = interval
        self.record_search = record_search

        self.counter = 0.0
        self.path: List[Point] = []
        self.start: Optional[Point] = None
        self.destination: Optional[Point] = None
        self.last_plan_seconds = 0.0
        self.plan_count = 0
        # record_search 为 True 时保存最近一次搜索的扩展记录
        self.observer: Optional[ExperimentObserver] = None

    def setup(self):
        grid_map = self.planner.grid_map
        obstacles = self.generator.generate_obstacles(grid_map.width, grid_map.height)
        self.planner.set_obstacles(obstacles)

    def update(self, dt: float) -> bool:
        """
        推进 dt 秒，到达间隔时重新规划。
        :return: 本次是否发生了规划
        """
        self.counter += dt
        if self.counter <= self.interval:
            return False
        self.counter = 0.0

        grid_map = self.planner.grid_map
        self.start = self.generator.random_free_cell(grid_map)
        self.destination = self.generator.random_free_cell(grid_map)

        self.observer = ExperimentObserver() if self.record_search else None

        t0 = time.perf_counter()
        self.path = self.planner.plan(self.start, self.destination, debugger=self.observer)
        self.last_plan_seconds = time.perf_counter() - t0
        self.plan_count += 1
        return True

    def path_contains(self, x: int, y: int) -> bool:
        return Point(x, y) in self.path
