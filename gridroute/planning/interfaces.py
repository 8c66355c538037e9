# gridroute/planning/interfaces.py
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from gridroute.types import Point


class IPlannerObserver(ABC):
    """
    路径搜索的观察者接口，搜索循环只通过它对外汇报过程。
    三种实现见 gridroute.visualization.observers:
    1. Efficient: 空实现，无开销 (默认)
    2. Experiment: 记录 OpenSet / 扩展顺序 / 父子边 / 松弛，用于回放和绘图
    3. Debug: 在 Experiment 基础上写日志文件
    """

    @abstractmethod
    def record_open_set_node(self, node: Point, f: float = 0.0, h: float = 0.0):
        """格子 (重新) 进入 OpenSet，f/h 为此刻的代价"""

    @abstractmethod
    def record_current_expansion(self, node: Point):
        """格子被取出扩展"""

    @abstractmethod
    def record_edge(self, start_node: Point, end_node: Point):
        """end_node 的父格子被设为 start_node (新建或松弛)"""

    @abstractmethod
    def record_relaxation(self, node: Point, old_g: int, new_g: int):
        """已有节点找到更便宜的路径，G 由 old_g 降到 new_g"""

    @abstractmethod
    def set_map_info(self, map_info: Any):
        """本次规划使用的障碍地图"""

    @abstractmethod
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        """
        结构化日志
        :param level: 'INFO', 'WARN', 'ERROR', 'DEBUG'
        :param payload: 附加数据 (起终点、路径长度、扩展数等)
        """
