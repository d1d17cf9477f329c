"""
完整处理流程。

样本流 -> 快照组装 -> 相邻快照分组统计 -> CSV 输出。
"""

import logging
from contextlib import ExitStack

from gridstats.schemas.base import RunConfig
from gridstats.schemas.data import RunStatus, RunSummary
from gridstats.services.assembler import SnapshotAssembler
from gridstats.services.statistics import StatisticsEngine
from gridstats.utils.readers import SampleReader, load_ocean_mask
from gridstats.utils.writers import GridCsvWriter, format_real

logger = logging.getLogger(__name__)


def run_pipeline(config: RunConfig) -> RunSummary:
    """
    执行一次完整处理。

    Args:
        config: 运行配置

    Returns:
        运行汇总

    Raises:
        TraversalError: 样本不满足扫描顺序
        ConsistencyError: 游标与样本坐标不一致
        OSError: 输入输出文件无法访问
    """
    logger.info(f"Processing {config.samples_path}")

    # 1. 读取海洋掩码
    mask = load_ocean_mask(config.ocean_path)

    # 2. 组装器与统计引擎
    assembler = SnapshotAssembler(default_value=config.default_value)
    engine = StatisticsEngine(mask) if config.compute_statistics else None

    with ExitStack() as stack:
        fin = stack.enter_context(open(config.samples_path, "r"))
        values_writer = GridCsvWriter(
            stack.enter_context(open(config.values_output, "w", newline="")),
            mask,
        )
        if engine is not None:
            mean_writer = GridCsvWriter(
                stack.enter_context(open(config.mean_output, "w", newline="")),
                mask,
                formatter=format_real,
            )
            stdev_writer = GridCsvWriter(
                stack.enter_context(open(config.stdev_output, "w", newline="")),
                mask,
                formatter=format_real,
            )

        # 3. 逐个快照输出
        reader = SampleReader(fin)
        for snapshot in assembler.assemble(reader):
            values_writer.write_row(snapshot.sequence, snapshot.values)
            if engine is None:
                continue
            stats = engine.compute(snapshot)
            if stats is not None:
                mean_writer.write_row(stats.sequence, stats.mean)
                stdev_writer.write_row(stats.sequence, stats.stdev)

    summary = RunSummary(
        status=RunStatus.COMPLETED if reader.samples_read else RunStatus.EMPTY,
        samples_read=reader.samples_read,
        lines_skipped=reader.lines_skipped,
        snapshots=values_writer.rows_written,
        statistics_rows=mean_writer.rows_written if engine is not None else 0,
        interpolated_cells=assembler.interpolated_cells,
        default_filled_cells=assembler.default_filled_cells,
        ocean_cells=mask.count,
    )
    logger.info(f"Run summary: {summary.model_dump_json()}")
    return summary
