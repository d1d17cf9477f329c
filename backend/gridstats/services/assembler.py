"""
快照组装服务。

将按栅格顺序排列的 (lat, lon, value) 样本流重建为一系列完整的网格快照。
缺测格点按扫描路径线性插值填补，插值过程可能跨越快照边界。
"""

import logging
from typing import Iterable, Iterator, Optional

import numpy as np

from gridstats.core.config import settings
from gridstats.core.errors import ConsistencyError, TraversalError
from gridstats.models.cursor import NOT_RELATED, ScanCursor
from gridstats.models.geometry import LAST_CELL, N_CELLS
from gridstats.models.snapshot import Sample, Snapshot

logger = logging.getLogger(__name__)


def interpolate_gap(last_value: float, value: float, delta: int, i: int) -> float:
    """
    缺测格点的线性插值。

    Args:
        last_value: 上一个样本值
        value: 新样本值
        delta: 两个样本之间的步数
        i: 缺测格点序号，0 <= i < delta - 1

    Returns:
        (last_value * (delta - 1 - i) + value * (i + 1)) / delta
    """
    return (last_value * (delta - 1 - i) + value * (i + 1)) / delta


class SnapshotAssembler:
    """
    快照组装器。

    内部维护两个快照缓冲区（当前/上一个），通过下标交换实现双缓冲。
    游标指向最后写入的格点。每个输入流应使用一个新实例。
    """

    def __init__(self, default_value: Optional[int] = None):
        """
        初始化快照组装器。

        Args:
            default_value: 尾部未观测格点的哨兵值，默认取全局配置
        """
        if default_value is None:
            default_value = settings.default_value
        self.default_value = default_value

        self._buffers = (
            np.full(N_CELLS, default_value, dtype=np.int64),
            np.full(N_CELLS, default_value, dtype=np.int64),
        )
        self._current = 0  # 正在填充的缓冲区下标
        self._has_previous = False

        self._cursor: Optional[ScanCursor] = None
        self._last_value = 0.0
        self._finished = False

        self.sequence = 0
        self.interpolated_cells = 0
        self.default_filled_cells = 0

    @property
    def cursor(self) -> Optional[ScanCursor]:
        return self._cursor

    def assemble(self, samples: Iterable[Sample]) -> Iterator[Snapshot]:
        """
        消费样本流并逐个产出快照。

        产出的快照持有缓冲区的只读视图，仅在取下一个快照之前有效。
        第一个快照之后的每个快照都带有上一快照的值（previous）。

        Args:
            samples: 按栅格顺序排列的样本

        Yields:
            已完成的快照；最后一个快照可能是以哨兵值补齐的不完整快照

        Raises:
            TraversalError: 样本不满足扫描顺序
            ConsistencyError: 游标推进后未落在样本坐标上
        """
        if self._finished:
            raise RuntimeError("assembler already consumed a stream")

        for sample in samples:
            yield from self._feed(sample)

        self._finished = True
        if self._cursor is None:
            logger.warning("No valid samples in input stream")
            return
        yield self._finish()

    def _feed(self, sample: Sample) -> Iterator[Snapshot]:
        target = sample.coordinate

        # 第一个样本确定游标起点
        if self._cursor is None:
            self._cursor = ScanCursor(target)
            self._write(sample.value)
            return

        delta = self._cursor.steps_to(target)
        if delta == NOT_RELATED or delta > N_CELLS:
            raise TraversalError(target.lat, target.lon, delta)

        # 填补上一个样本与新样本之间的 delta - 1 个缺测格点
        for i in range(delta - 1):
            if self._cursor.advance():
                yield self._emit()
                self._rotate()
            coord = self._cursor.coordinate
            logger.warning(
                f"Missing data: {self.sequence}, {coord.lat}, {coord.lon}"
            )
            filled = interpolate_gap(self._last_value, sample.value, delta, i)
            self._buffer[self._cursor.index] = int(filled)
            self.interpolated_cells += 1

        if self._cursor.advance():
            yield self._emit()
            self._rotate()

        actual = self._cursor.coordinate
        if actual != target:
            raise ConsistencyError((target.lat, target.lon), (actual.lat, actual.lon))

        self._write(sample.value)

    def _finish(self) -> Snapshot:
        """以哨兵值补齐当前快照的剩余格点并产出。"""
        complete = self._cursor.coordinate == LAST_CELL
        if not complete:
            start = self._cursor.index + 1
            self._buffer[start:] = self.default_value
            self.default_filled_cells += N_CELLS - start
            logger.info(
                f"Input ended before grid end, filled {N_CELLS - start} cells "
                f"of snapshot {self.sequence} with default value"
            )
        return self._emit(complete=complete)

    @property
    def _buffer(self) -> np.ndarray:
        return self._buffers[self._current]

    def _write(self, value: float) -> None:
        self._buffer[self._cursor.index] = int(value)
        self._last_value = value

    def _emit(self, complete: bool = True) -> Snapshot:
        values = self._buffers[self._current].view()
        values.flags.writeable = False

        previous = None
        if self._has_previous:
            previous = self._buffers[1 - self._current].view()
            previous.flags.writeable = False

        logger.info(f"Snapshot {self.sequence} assembled")
        return Snapshot(
            sequence=self.sequence,
            values=values,
            previous=previous,
            complete=complete,
        )

    def _rotate(self) -> None:
        """刚完成的快照变为“上一个”，另一缓冲区开始接收新快照。"""
        self._current = 1 - self._current
        self._has_previous = True
        self.sequence += 1
