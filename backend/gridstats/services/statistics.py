"""
分组统计服务。

对相邻两个快照，把上一快照中取值完全相同的海洋格点归为一组，
计算组内变化量（当前值 - 上一值）的均值与总体标准差，
组内每个格点都取该组的统计值。
"""

import logging
from typing import Optional, Tuple

import numpy as np

from gridstats.models.geometry import N_CELLS
from gridstats.models.mask import OceanMask
from gridstats.models.snapshot import Snapshot
from gridstats.models.statistics import GridStatistics

logger = logging.getLogger(__name__)


def group_cells(previous: np.ndarray, eligible: np.ndarray) -> Tuple[np.ndarray, int]:
    """
    按上一快照的取值对海洋格点分组。

    两个格点同组当且仅当它们在上一快照中的取值完全相等。

    Args:
        previous: 上一快照的格点值，shape: (N_CELLS,)
        eligible: 海洋掩码，shape: (N_CELLS,)

    Returns:
        (labels, n_groups)，labels 中非海洋格点为 -1
    """
    indices = np.flatnonzero(eligible)
    _, inverse = np.unique(previous[indices], return_inverse=True)
    inverse = inverse.reshape(-1)

    labels = np.full(previous.shape, -1, dtype=np.int64)
    labels[indices] = inverse
    n_groups = int(inverse.max()) + 1 if inverse.size else 0
    return labels, n_groups


def compute_group_statistics(
    previous: np.ndarray,
    current: np.ndarray,
    eligible: np.ndarray,
    sequence: int = 0,
) -> GridStatistics:
    """
    计算每个格点所在组的变化量均值与标准差。

    mean = average(d)，stdev = sqrt(average(d^2) - mean^2)（总体标准差）。

    Args:
        previous: 上一快照的格点值
        current: 当前快照的格点值
        eligible: 海洋掩码
        sequence: 当前快照序号

    Returns:
        统计结果，非海洋格点为 nan
    """
    if previous.shape != (N_CELLS,) or current.shape != (N_CELLS,):
        raise ValueError("snapshots must cover the whole grid")

    labels, n_groups = group_cells(previous, eligible)
    indices = np.flatnonzero(labels >= 0)
    members = labels[indices]

    delta = current[indices].astype(np.float64) - previous[indices].astype(np.float64)
    counts = np.bincount(members, minlength=n_groups)
    sums = np.bincount(members, weights=delta, minlength=n_groups)
    squares = np.bincount(members, weights=delta * delta, minlength=n_groups)

    with np.errstate(invalid="ignore", divide="ignore"):
        group_mean = sums / counts
        group_var = squares / counts - group_mean * group_mean
    # 舍入误差可能使方差略小于 0
    group_stdev = np.sqrt(np.maximum(group_var, 0.0))

    mean = np.full(N_CELLS, np.nan)
    stdev = np.full(N_CELLS, np.nan)
    mean[indices] = group_mean[members]
    stdev[indices] = group_stdev[members]

    return GridStatistics(
        sequence=sequence,
        mean=mean,
        stdev=stdev,
        labels=labels,
        n_groups=n_groups,
    )


class StatisticsEngine:
    """持有海洋掩码，对每对相邻快照计算分组统计。"""

    def __init__(self, mask: OceanMask):
        self.mask = mask

    def compute(self, snapshot: Snapshot) -> Optional[GridStatistics]:
        """
        计算快照与其上一快照之间的统计。

        Returns:
            统计结果；第一个快照没有上一快照，返回 None
        """
        if snapshot.previous is None:
            return None

        stats = compute_group_statistics(
            snapshot.previous,
            snapshot.values,
            self.mask.eligible,
            sequence=snapshot.sequence,
        )
        logger.info(
            f"Statistics for snapshot {snapshot.sequence}: {stats.n_groups} groups"
        )
        return stats
