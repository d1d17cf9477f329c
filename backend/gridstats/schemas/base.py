"""
运行配置 Schema 定义。
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from gridstats.core.config import Settings


class RunConfig(BaseModel):
    """单次处理运行的输入输出与参数。"""

    samples_path: Path = Field(..., description="(lat lon value) 扫描序列文件")
    ocean_path: Path = Field(..., description="(lat lon) 海洋格点列表文件")
    values_output: Path = Field(..., description="重建快照 CSV 输出路径")
    mean_output: Optional[Path] = Field(
        default=None, description="变化量均值 CSV 输出路径"
    )
    stdev_output: Optional[Path] = Field(
        default=None, description="变化量标准差 CSV 输出路径"
    )
    default_value: int = Field(
        default=Settings.model_fields["default_value"].default,
        description="未观测且未插值的尾部格点所填的哨兵值",
    )

    @model_validator(mode="after")
    def validate_paths(self):
        """验证统计输出成对出现，且输出路径互不相同、不覆盖输入。"""
        if (self.mean_output is None) != (self.stdev_output is None):
            raise ValueError("mean_output and stdev_output must be given together")

        outputs = [
            p for p in (self.values_output, self.mean_output, self.stdev_output)
            if p is not None
        ]
        if len(set(outputs)) != len(outputs):
            raise ValueError("output paths must be distinct")
        if {self.samples_path, self.ocean_path} & set(outputs):
            raise ValueError("output paths must not overwrite input files")
        return self

    @property
    def compute_statistics(self) -> bool:
        return self.mean_output is not None

    @classmethod
    def from_settings(cls, settings: Settings, **overrides) -> "RunConfig":
        """由全局配置构造，overrides 中值为 None 的项忽略。"""
        data = {
            "samples_path": settings.samples_path,
            "ocean_path": settings.ocean_path,
            "values_output": settings.values_output,
            "default_value": settings.default_value,
        }
        if settings.compute_statistics:
            data["mean_output"] = settings.mean_output
            data["stdev_output"] = settings.stdev_output
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)
