"""
快照与样本模型定义。
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from gridstats.models.geometry import GridCoordinate


@dataclass(frozen=True)
class Sample:
    """输入流中的单个观测。"""

    coordinate: GridCoordinate  # 格点
    value: float  # 观测值（原始浮点）


@dataclass
class Snapshot:
    """一次完整网格扫描的重建结果。"""

    sequence: int  # 快照序号，从 0 开始
    values: np.ndarray  # 格点值，shape: (N_CELLS,)，只读视图
    previous: Optional[np.ndarray] = None  # 上一快照的格点值（第一个快照为 None）
    complete: bool = True  # False 表示尾部由哨兵值填充

