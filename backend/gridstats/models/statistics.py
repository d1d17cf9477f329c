"""
分组统计结果模型定义。
"""

from dataclasses import dataclass

import numpy as np


@dataclass
class GridStatistics:
    """一对相邻快照之间每个格点的变化量统计。"""

    sequence: int  # 较新快照的序号
    mean: np.ndarray  # 组内变化量均值，shape: (N_CELLS,)，非海洋格点为 nan
    stdev: np.ndarray  # 组内变化量总体标准差，shape: (N_CELLS,)
    labels: np.ndarray  # 每个格点所属组号，非海洋格点为 -1
    n_groups: int  # 组数
