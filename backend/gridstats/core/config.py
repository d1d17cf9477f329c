"""
全局配置模块。

集中管理输入输出路径、缺测哨兵值、统计开关与日志级别。
所有字段均可通过 GRIDSTATS_ 前缀的环境变量覆盖。
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置。"""

    model_config = SettingsConfigDict(env_prefix="GRIDSTATS_")

    # 输入
    samples_path: str = "data10.txt"  # (lat lon value) 扫描序列
    ocean_path: str = "ocean.txt"  # (lat lon) 海洋格点列表

    # 输出
    values_output: str = "data10.csv"
    mean_output: str = "mean.csv"
    stdev_output: str = "stdev.csv"

    # 未观测且未插值的尾部格点所填的哨兵值
    default_value: int = 1_000_000_000

    compute_statistics: bool = True
    log_level: str = "INFO"


settings = Settings()
