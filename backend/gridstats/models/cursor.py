"""
栅格扫描游标。
"""

from gridstats.core.errors import InvalidCoordinateError
from gridstats.models.geometry import (
    FIRST_CELL,
    N_LAT,
    N_LON,
    GridCoordinate,
)

# steps_between 无法确定步数时的返回值
NOT_RELATED = -1


class ScanCursor:
    """
    栅格顺序中的当前位置。

    始终指向一个有效格点。advance() 每次前进一格，越过最后一格
    (0.0, 0.0) 后回到第一格 (80.0, -90.0) 并报告回绕（即一个快照结束）。
    """

    def __init__(self, start: GridCoordinate = FIRST_CELL):
        if not start.in_bounds():
            raise InvalidCoordinateError(start.lat, start.lon)
        self._row = start.row
        self._col = start.col

    @property
    def coordinate(self) -> GridCoordinate:
        return GridCoordinate.from_row_col(self._row, self._col)

    @property
    def index(self) -> int:
        return self._row * N_LON + self._col

    def advance(self) -> bool:
        """
        前进一格。

        Returns:
            是否发生回绕（越过网格末尾回到起点）
        """
        if self._col < N_LON - 1:
            self._col += 1
            return False
        if self._row < N_LAT - 1:
            self._row += 1
            self._col = 0
            return False
        self._row = 0
        self._col = 0
        return True

    def steps_to(self, target: GridCoordinate) -> int:
        return steps_between(self.coordinate, target)

    def __repr__(self) -> str:
        coord = self.coordinate
        return f"ScanCursor(lat={coord.lat}, lon={coord.lon})"


def steps_between(start: GridCoordinate, end: GridCoordinate) -> int:
    """
    计算从 start 到 end 所需的 advance() 次数。

    仅支持两种关系：
    - 同一行：列差
    - end 位于下一行（或从最后一行回绕到第一行）：到行尾的剩余列数 + 进入目标行的列数

    Args:
        start: 起始格点
        end: 目标格点

    Returns:
        步数；两点不满足上述关系（乱序输入）时返回 NOT_RELATED
    """
    if start.row == end.row:
        if end.col < start.col:
            return NOT_RELATED
        return end.col - start.col

    next_row = start.row + 1 if start.row < N_LAT - 1 else 0
    if end.row == next_row:
        return (N_LON - start.col) + end.col

    return NOT_RELATED
