# gridroute/planning/errors.py


class PlanningError(Exception):
    """规划模块的基础异常"""


class InvalidInputError(PlanningError, ValueError):
    """
    输入非法：起终点越界、障碍物越界、地图尺寸非法、配置参数非法等。
    在任何搜索工作开始之前抛出。
    """
