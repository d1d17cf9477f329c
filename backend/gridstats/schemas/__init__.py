"""
Pydantic Schema 模块。

包含运行配置与运行汇总模型。
"""

from gridstats.schemas.base import RunConfig
from gridstats.schemas.data import RunStatus, RunSummary

__all__ = [
    "RunConfig",
    "RunStatus",
    "RunSummary",
]
