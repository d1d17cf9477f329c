"""
网格几何定义。

固定的半度经纬度格网：
- 纬度 [0.0, 80.0]，步长 0.5，共 161 行
- 经度 [-90.0, 0.0]，步长 0.5，共 181 列

栅格顺序：纬度从 80.0 递减逐行扫描，行内经度从 -90.0 递增。
坐标内部以整数“半度”表示，避免浮点比较误差。
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from gridstats.core.errors import InvalidCoordinateError

# 以半度为单位的格网范围
LAT_MIN_HALF = 0
LAT_MAX_HALF = 160
LON_MIN_HALF = -180
LON_MAX_HALF = 0

N_LAT = LAT_MAX_HALF - LAT_MIN_HALF + 1  # 161
N_LON = LON_MAX_HALF - LON_MIN_HALF + 1  # 181
N_CELLS = N_LAT * N_LON  # 29141


def to_half_units(value) -> Optional[int]:
    """
    将度数转换为整数半度。

    乘以 2 对二进制浮点数是精确的，因此 float / Fraction / Decimal 均可。

    Args:
        value: 度数

    Returns:
        半度整数；不在半度格网上（或为 nan/inf）时返回 None
    """
    doubled = value * 2
    try:
        whole = int(doubled)
    except (ValueError, OverflowError, TypeError):
        return None
    if doubled != whole:
        return None
    return whole


@dataclass(frozen=True)
class GridCoordinate:
    """格网坐标（整数半度）。"""

    lat_half: int
    lon_half: int

    @classmethod
    def from_degrees(cls, lat, lon) -> "GridCoordinate":
        """由度数构造坐标，无效时抛出 InvalidCoordinateError。"""
        lat_half = to_half_units(lat)
        lon_half = to_half_units(lon)
        if lat_half is None or lon_half is None:
            raise InvalidCoordinateError(lat, lon)
        coord = cls(lat_half, lon_half)
        if not coord.in_bounds():
            raise InvalidCoordinateError(lat, lon)
        return coord

    @classmethod
    def from_row_col(cls, row: int, col: int) -> "GridCoordinate":
        return cls(LAT_MAX_HALF - row, LON_MIN_HALF + col)

    @property
    def lat(self) -> float:
        return self.lat_half / 2

    @property
    def lon(self) -> float:
        return self.lon_half / 2

    @property
    def row(self) -> int:
        """行号，0 对应纬度 80.0。"""
        return LAT_MAX_HALF - self.lat_half

    @property
    def col(self) -> int:
        """列号，0 对应经度 -90.0。"""
        return self.lon_half - LON_MIN_HALF

    @property
    def index(self) -> int:
        """栅格顺序线性索引。"""
        return self.row * N_LON + self.col

    def in_bounds(self) -> bool:
        return (
            LAT_MIN_HALF <= self.lat_half <= LAT_MAX_HALF
            and LON_MIN_HALF <= self.lon_half <= LON_MAX_HALF
        )

    def label(self) -> str:
        """CSV 表头中使用的 "lat_lon" 标签。"""
        return f"{self.lat:.1f}_{self.lon:.1f}"


FIRST_CELL = GridCoordinate(LAT_MAX_HALF, LON_MIN_HALF)  # (80.0, -90.0)
LAST_CELL = GridCoordinate(LAT_MIN_HALF, LON_MAX_HALF)  # (0.0, 0.0)


def is_valid_coordinate(lat, lon) -> bool:
    """
    判断坐标是否为有效格点。

    经纬度都必须落在半度格网上，且位于网格范围之内。

    Args:
        lat: 纬度（度）
        lon: 经度（度）

    Returns:
        是否有效
    """
    lat_half = to_half_units(lat)
    lon_half = to_half_units(lon)
    if lat_half is None or lon_half is None:
        return False
    return GridCoordinate(lat_half, lon_half).in_bounds()


def index_of(lat, lon) -> int:
    """
    计算坐标的栅格顺序线性索引。

    index = row(lat) * 181 + col(lon)。无效坐标抛出 InvalidCoordinateError。
    """
    return GridCoordinate.from_degrees(lat, lon).index


def coordinate_of(index: int) -> GridCoordinate:
    """index_of 的逆映射。"""
    if not 0 <= index < N_CELLS:
        raise IndexError(f"grid index out of range: {index}")
    row, col = divmod(index, N_LON)
    return GridCoordinate.from_row_col(row, col)


def iter_coordinates() -> Iterator[GridCoordinate]:
    """按栅格顺序遍历全部格点。"""
    for index in range(N_CELLS):
        yield coordinate_of(index)
