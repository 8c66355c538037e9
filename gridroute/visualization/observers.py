# gridroute/visualization/observers.py
import logging
import os
import time
from typing import Any, Dict, List, Optional, Tuple

from gridroute.types import Point
from gridroute.planning.interfaces import IPlannerObserver


class EfficientObserver(IPlannerObserver):
    """
    默认模式：搜索过程不留任何记录，只把 ERROR 打到控制台。
    """
    def record_open_set_node(self, node: Point, f: float = 0.0, h: float = 0.0): pass
    def record_current_expansion(self, node: Point): pass
    def record_edge(self, start_node: Point, end_node: Point): pass
    def record_relaxation(self, node: Point, old_g: int, new_g: int): pass
    def set_map_info(self, map_info: Any): pass

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if level == 'ERROR':
            print(f"[ERROR] {message}")


class ExperimentObserver(IPlannerObserver):
    """
    实验模式：把一次搜索完整记下来，供对比启发函数 / 代价模型和绘制扩展区域。
    同一个 observer 可以反复传给 plan()，记录会累加，需要时调用 reset()。
    """
    def __init__(self):
        self.reset()

    def reset(self):
        # (x, y, f, h)，按进入 OpenSet 的顺序
        self.open_set_history: List[Tuple[int, int, float, float]] = []
        self.expanded_nodes: List[Point] = []
        # (parent, child)
        self.edges: List[Tuple[Point, Point]] = []
        # (cell, old_g, new_g)
        self.relaxations: List[Tuple[Point, int, int]] = []
        # (level, message, payload)
        self.messages: List[Tuple[str, str, Optional[Dict]]] = []
        self.map_info = None

    def record_open_set_node(self, node: Point, f: float = 0.0, h: float = 0.0):
        self.open_set_history.append((node.x, node.y, f, h))

    def record_current_expansion(self, node: Point):
        self.expanded_nodes.append(node)

    def record_edge(self, start_node: Point, end_node: Point):
        self.edges.append((start_node, end_node))

    def record_relaxation(self, node: Point, old_g: int, new_g: int):
        self.relaxations.append((node, old_g, new_g))

    def set_map_info(self, map_info: Any):
        self.map_info = map_info

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        self.messages.append((level, message, payload))

    def summary(self) -> Dict[str, int]:
        return {
            'expansions': len(self.expanded_nodes),
            'unique_expansions': len(set(self.expanded_nodes)),
            'open_pushes': len(self.open_set_history),
            'relaxations': len(self.relaxations),
        }


class DebugObserver(IPlannerObserver):
    """
    Debug 模式：排查某次规划为什么没找到路线，或者路线和预期不一致。
    所有事件逐条写入 log_dir/plan_debug_<时间戳>.log，同时保留 Experiment 数据方便画图对照。
    """
    def __init__(self, log_dir: str = "logs/planning_debug"):
        self.viz_observer = ExperimentObserver()

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        timestamp = time.strftime("%Y%m%d_%H%M%S")
        self.log_file = os.path.join(self.log_dir, f"plan_debug_{timestamp}.log")

        # 同一秒内创建多个 observer 时，用 id 区分 logger，避免 Handler 串写
        self.logger = logging.getLogger(f"RouteDebug_{timestamp}_{id(self)}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        if not self.logger.handlers:
            handler = logging.FileHandler(self.log_file, encoding='utf-8')
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
            self.logger.addHandler(handler)

        self.logger.info("=== Route debug session ===")

    def record_open_set_node(self, node: Point, f: float = 0.0, h: float = 0.0):
        self.viz_observer.record_open_set_node(node, f, h)
        self.logger.debug(f"Open: {node} f={f} h={h}")

    def record_current_expansion(self, node: Point):
        self.viz_observer.record_current_expansion(node)
        self.logger.debug(f"Expanding: {node}")

    def record_edge(self, start_node: Point, end_node: Point):
        self.viz_observer.record_edge(start_node, end_node)
        self.logger.debug(f"Parent: {end_node} <- {start_node}")

    def record_relaxation(self, node: Point, old_g: int, new_g: int):
        self.viz_observer.record_relaxation(node, old_g, new_g)
        self.logger.debug(f"Relaxed: {node} g {old_g} -> {new_g}")

    def set_map_info(self, map_info: Any):
        self.viz_observer.set_map_info(map_info)
        self.logger.info(f"Map: {map_info}")

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        self.viz_observer.log(message, level, payload)
        if payload:
            message = f"{message} | Payload: {payload}"

        if level == 'DEBUG':
            self.logger.debug(message)
        elif level == 'WARN':
            self.logger.warning(message)
        elif level == 'ERROR':
            self.logger.error(message)
        else:
            self.logger.info(message)

    def close(self):
        """关闭文件句柄 (Windows 下删除日志文件前需要)"""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    # 与 ExperimentObserver 相同的读取接口，Visualizer 可以直接使用
    @property
    def expanded_nodes(self): return self.viz_observer.expanded_nodes
    @property
    def open_set_history(self): return self.viz_observer.open_set_history
    @property
    def edges(self): return self.viz_observer.edges
    @property
    def relaxations(self): return self.viz_observer.relaxations
    @property
    def messages(self): return self.viz_observer.messages
    @property
    def map_info(self): return self.viz_observer.map_info

    def summary(self) -> Dict[str, int]:
        return self.viz_observer.summary()
