"""
内部数据模型模块。

包含网格几何、扫描游标、快照、海洋掩码、统计结果等内部数据结构。
"""

from gridstats.models.cursor import ScanCursor, steps_between
from gridstats.models.geometry import (
    N_CELLS,
    GridCoordinate,
    coordinate_of,
    index_of,
    is_valid_coordinate,
)
from gridstats.models.mask import OceanMask
from gridstats.models.snapshot import Sample, Snapshot
from gridstats.models.statistics import GridStatistics

__all__ = [
    "N_CELLS",
    "GridCoordinate",
    "is_valid_coordinate",
    "index_of",
    "coordinate_of",
    "ScanCursor",
    "steps_between",
    "Sample",
    "Snapshot",
    "OceanMask",
    "GridStatistics",
]
