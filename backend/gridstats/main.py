"""
命令行入口。

示例：
    gridstats --samples data10.txt --ocean ocean.txt --output data10.csv
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from gridstats.core.config import settings
from gridstats.core.errors import GridStatsError
from gridstats.schemas.base import RunConfig
from gridstats.services.pipeline import run_pipeline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridstats",
        description=(
            "Reconstruct half-degree grids from a raster-ordered sample stream "
            "and compute per-cell change statistics over ocean cells."
        ),
    )
    parser.add_argument("--samples", dest="samples_path", help="Sample stream (lat lon value)")
    parser.add_argument("--ocean", dest="ocean_path", help="Ocean cells (lat lon)")
    parser.add_argument("--output", dest="values_output", help="Reconstructed grid CSV")
    parser.add_argument("--mean-output", dest="mean_output", help="Mean-of-change CSV")
    parser.add_argument("--stdev-output", dest="stdev_output", help="Stdev-of-change CSV")
    parser.add_argument("--default-value", type=int, help="Sentinel for unobserved trailing cells")
    parser.add_argument(
        "--no-statistics",
        action="store_true",
        help="Only write the reconstructed grid CSV",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    运行命令行程序。

    Returns:
        退出码：成功 0，致命错误 1
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    run_settings = settings
    if args.no_statistics:
        run_settings = settings.model_copy(update={"compute_statistics": False})

    overrides = {
        "samples_path": args.samples_path,
        "ocean_path": args.ocean_path,
        "values_output": args.values_output,
        "default_value": args.default_value,
    }
    if run_settings.compute_statistics:
        overrides["mean_output"] = args.mean_output
        overrides["stdev_output"] = args.stdev_output

    try:
        config = RunConfig.from_settings(run_settings, **overrides)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    try:
        run_pipeline(config)
    except GridStatsError as e:
        logger.error(str(e))
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
