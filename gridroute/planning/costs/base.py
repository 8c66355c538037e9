# gridroute/planning/costs/base.py
from abc import ABC, abstractmethod
from gridroute.types import Point, CompassDirection


class CostModel(ABC):
    """
    代价模型基类 (Strategy Interface)
    定义从 location 向 direction 移动一步的增量代价。
    """
    @abstractmethod
    def get_cost(self, location: Point, direction: CompassDirection) -> int:
        """
        计算单步移动代价
        :param location: 当前格子
        :param direction: 移动方向 (NOT_SET 表示不移动，只用于起点)
        :return: 代价数值 (整数，必须 >= 0)
        """
        pass

    def check_map(self, grid_map):
        """
        规划器配置时调用，代价模型依赖地图尺寸时在这里校验。
        不匹配抛出 InvalidInputError。
        """
        pass
