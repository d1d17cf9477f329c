"""
运行结果 Schema 定义。
"""

from enum import Enum

from pydantic import BaseModel, Field


class RunStatus(str, Enum):
    """运行状态枚举。"""

    COMPLETED = "completed"
    EMPTY = "empty"  # 输入中没有任何有效样本


class RunSummary(BaseModel):
    """一次运行的汇总信息。"""

    status: RunStatus = Field(default=RunStatus.COMPLETED, description="运行状态")
    samples_read: int = Field(default=0, ge=0, description="有效样本数")
    lines_skipped: int = Field(default=0, ge=0, description="跳过的无效行数")
    snapshots: int = Field(default=0, ge=0, description="输出的快照数")
    statistics_rows: int = Field(default=0, ge=0, description="输出的统计行数")
    interpolated_cells: int = Field(default=0, ge=0, description="插值填补的格点数")
    default_filled_cells: int = Field(
        default=0, ge=0, description="尾部以哨兵值填充的格点数"
    )
    ocean_cells: int = Field(default=0, ge=0, description="海洋格点数")
