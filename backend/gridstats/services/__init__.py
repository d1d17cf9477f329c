"""
业务服务模块。

包含快照组装、分组统计与完整处理流程。
"""

from gridstats.services.assembler import SnapshotAssembler
from gridstats.services.pipeline import run_pipeline
from gridstats.services.statistics import (
    StatisticsEngine,
    compute_group_statistics,
)

__all__ = [
    "SnapshotAssembler",
    "StatisticsEngine",
    "compute_group_statistics",
    "run_pipeline",
]
