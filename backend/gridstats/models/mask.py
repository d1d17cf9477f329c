"""
海洋掩码模型定义。
"""

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from gridstats.models.geometry import N_CELLS, GridCoordinate


@dataclass
class OceanMask:
    """格点是否参与输出与统计（True 为海洋格点）。"""

    eligible: np.ndarray  # bool 数组，shape: (N_CELLS,)

    def __post_init__(self):
        eligible = np.array(self.eligible, dtype=bool)
        if eligible.shape != (N_CELLS,):
            raise ValueError(
                f"ocean mask must have shape ({N_CELLS},), got {eligible.shape}"
            )
        eligible.flags.writeable = False
        self.eligible = eligible

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[GridCoordinate]) -> "OceanMask":
        """由海洋格点列表构造掩码，重复坐标无影响。"""
        eligible = np.zeros(N_CELLS, dtype=bool)
        for coordinate in coordinates:
            eligible[coordinate.index] = True
        return cls(eligible)

    @classmethod
    def everywhere(cls) -> "OceanMask":
        return cls(np.ones(N_CELLS, dtype=bool))

    @property
    def count(self) -> int:
        return int(np.count_nonzero(self.eligible))
