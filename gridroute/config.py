# [关键] 全局配置定义

# gridroute/config.py
from dataclasses import dataclass
from typing import Optional

from gridroute.planning.errors import InvalidInputError


@dataclass
class PlannerConfig:
    # 扩展次数上限，None 表示不限制 (网格有限，搜索必然终止)
    max_iterations: Optional[int] = None
    # 已关闭节点被松弛后是否重新放回 OpenSet
    reopen_closed: bool = False
    # start == destination 时直接返回 [start]；关闭后走通用搜索，得到 起点->邻居->起点 的往返路线
    trivial_same_cell: bool = True
    # 目标检测发生在生成邻居时，不检查终点本身是否为障碍
    allow_blocked_destination: bool = True
    # 未传入 debugger 时使用 DebugObserver 写日志文件
    debug_mode: bool = False

    def __post_init__(self):
        if self.max_iterations is not None and self.max_iterations <= 0:
            raise InvalidInputError(f"max_iterations must be positive, got {self.max_iterations}")
