"""
CSV 输出工具。

表头为 ",lat_lon,lat_lon,..."（首列为空的行标签列），
每个快照一行：首字段为快照序号，其后按栅格顺序每格一个字段，
非海洋格点留空。
"""

import csv
from functools import lru_cache
from typing import Callable, List, TextIO

import numpy as np

from gridstats.models.geometry import iter_coordinates
from gridstats.models.mask import OceanMask


def format_integer(value) -> str:
    return str(int(value))


def format_real(value) -> str:
    return f"{value:.2f}"


@lru_cache(maxsize=1)
def header_row() -> List[str]:
    """CSV 表头（首字段为空）。"""
    return [""] + [coord.label() for coord in iter_coordinates()]


class GridCsvWriter:
    """把整网格数组逐行写入 CSV。"""

    def __init__(
        self,
        stream: TextIO,
        mask: OceanMask,
        formatter: Callable[[object], str] = format_integer,
    ):
        """
        初始化写入器并写出表头。

        Args:
            stream: 以 newline="" 打开的文本流
            mask: 海洋掩码，决定哪些格点输出
            formatter: 单个格点值的格式化函数
        """
        self._writer = csv.writer(stream, lineterminator="\n")
        self._eligible = mask.eligible.tolist()
        self._formatter = formatter
        self.rows_written = 0
        self._writer.writerow(header_row())

    def write_row(self, sequence: int, values: np.ndarray) -> None:
        """
        写出一行。

        Args:
            sequence: 快照序号
            values: 网格数组，shape: (N_CELLS,)
        """
        fmt = self._formatter
        fields = [str(sequence)]
        fields.extend(
            fmt(value) if eligible else ""
            for value, eligible in zip(values.tolist(), self._eligible)
        )
        self._writer.writerow(fields)
        self.rows_written += 1
