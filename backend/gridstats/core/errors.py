"""
异常定义。

- InvalidCoordinateError：坐标不在半度格网上或超出范围
- TraversalError：输入不满足栅格扫描顺序
- ConsistencyError：游标推进后与样本坐标不一致
"""


class GridStatsError(Exception):
    """所有致命错误的基类。"""


class InvalidCoordinateError(GridStatsError, ValueError):
    """坐标无效。"""

    def __init__(self, lat, lon):
        super().__init__(f"invalid grid coordinate: {lat}, {lon}")
        self.lat = lat
        self.lon = lon


class TraversalError(GridStatsError):
    """扫描步数无法确定（乱序输入或跨度超过整个网格）。"""

    def __init__(self, lat: float, lon: float, delta: int):
        super().__init__(f"wrong delta: {lat}, {lon} (delta={delta})")
        self.lat = lat
        self.lon = lon
        self.delta = delta


class ConsistencyError(GridStatsError):
    """游标位置与样本坐标不一致。"""

    def __init__(self, expected, actual):
        super().__init__(
            f"wrong next: expected {expected[0]}, {expected[1]}, "
            f"cursor at {actual[0]}, {actual[1]}"
        )
        self.expected = expected
        self.actual = actual
