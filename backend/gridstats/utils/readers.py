"""
输入读取工具。

- 样本流：每行 "lat lon value"，按栅格顺序排列
- 海洋分类：每行 "lat lon"，顺序任意

无法解析或坐标不在格网上的行直接跳过。
"""

import logging
import math
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

import numpy as np

from gridstats.models.geometry import GridCoordinate, is_valid_coordinate
from gridstats.models.mask import OceanMask
from gridstats.models.snapshot import Sample

logger = logging.getLogger(__name__)

# 快照缓冲区为 int64，超出范围的值视为无效行
_INT64 = np.iinfo(np.int64)


def parse_coordinate_line(line: str) -> Optional[GridCoordinate]:
    """
    解析 "lat lon ..." 行的前两个字段。

    Returns:
        有效格点坐标，否则 None
    """
    parts = line.split()
    if len(parts) < 2:
        return None
    try:
        lat = float(parts[0])
        lon = float(parts[1])
    except ValueError:
        return None
    if not is_valid_coordinate(lat, lon):
        return None
    return GridCoordinate.from_degrees(lat, lon)


def parse_sample_line(line: str) -> Optional[Sample]:
    """
    解析 "lat lon value" 行。

    Returns:
        样本，无法解析、值非有限、超出 int64 范围或坐标无效时返回 None
    """
    parts = line.split()
    if len(parts) < 3:
        return None
    coordinate = parse_coordinate_line(line)
    if coordinate is None:
        return None
    try:
        value = float(parts[2])
    except ValueError:
        return None
    if not math.isfinite(value) or not _INT64.min <= value < _INT64.max + 1:
        return None
    return Sample(coordinate=coordinate, value=value)


class SampleReader:
    """逐行读取样本并统计跳过的行数。"""

    def __init__(self, lines: Iterable[str]):
        self._lines = lines
        self.samples_read = 0
        self.lines_skipped = 0

    def __iter__(self) -> Iterator[Sample]:
        for lineno, line in enumerate(self._lines, start=1):
            sample = parse_sample_line(line)
            if sample is None:
                self.lines_skipped += 1
                logger.debug(f"Skipping sample line {lineno}: {line.rstrip()!r}")
                continue
            self.samples_read += 1
            yield sample


def load_ocean_mask(path: Union[str, Path]) -> OceanMask:
    """
    读取海洋格点列表并构造掩码。

    Args:
        path: 海洋分类文件路径

    Returns:
        海洋掩码
    """
    with open(path, "r") as fin:
        coordinates = [
            coord for coord in map(parse_coordinate_line, fin) if coord is not None
        ]
    mask = OceanMask.from_coordinates(coordinates)
    logger.info(f"Loaded {mask.count} ocean cells from {path}")
    return mask
