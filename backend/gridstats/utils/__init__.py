"""
输入输出工具模块。
"""

from gridstats.utils.readers import SampleReader, load_ocean_mask
from gridstats.utils.writers import GridCsvWriter, format_integer, format_real

__all__ = [
    "SampleReader",
    "load_ocean_mask",
    "GridCsvWriter",
    "format_integer",
    "format_real",
]
