# gridroute/planning/planners/base.py
from abc import ABC, abstractmethod
from typing import List, Optional

from gridroute.types import Point
from gridroute.planning.interfaces import IPlannerObserver


class PlannerBase(ABC):
    """
    所有栅格路径规划器的抽象基类
    """

    @abstractmethod
    def plan(self,
             start: Point,
             destination: Point,
             debugger: Optional[IPlannerObserver] = None) -> List[Point]:
        """
        执行路径规划
        :param start: 起点格子
        :param destination: 终点格子
        :param debugger: 观察者钩子 (用于记录/可视化搜索过程)
        :return: 从起点到终点的格子列表 (无路可走时返回空列表)
        """
        pass
