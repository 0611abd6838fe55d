"""打印一组数值的中位数及其贡献下标。

用途：
- 快速查看某组数值的中位数来自原始输入的哪一个（或哪两个）位置。

说明：
- 计算逻辑位于 `packages/median_indices/src/median_indices/core.py`；本脚本仅提供 CLI。
- 输出为三行：values / median / indices。

运行示例：
    python tools/median_indices_report.py 1.2 1.1 -0.1 -0.2 0 1
    python tools/median_indices_report.py --drop-nonfinite 3 nan 1

"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path

from median_indices import (
    MedianConfig,
    NonFiniteInputError,
    compute_median_with_indices,
    default_logger,
    format_bracketed,
)
from median_indices.config_yaml import load_median_config_yaml


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print the median of VALUES and the input positions it comes from")
    p.add_argument("values", nargs="*", type=float, help="Input numbers (may be empty)")
    p.add_argument("--config", default="", help="Optional MedianConfig YAML path")
    p.add_argument(
        "--drop-nonfinite",
        action="store_true",
        help="Ignore NaN/Inf values instead of failing (overrides config)",
    )
    args = p.parse_args(argv)

    logger = default_logger()

    cfg = MedianConfig()
    if str(args.config).strip():
        cfg_path = Path(str(args.config)).resolve()
        if not cfg_path.exists():
            raise SystemExit(f"config not found: {cfg_path}")
        cfg = load_median_config_yaml(cfg_path)
    if bool(args.drop_nonfinite):
        cfg = replace(cfg, nonfinite_policy="drop")

    values = list(args.values)
    try:
        median, indices = compute_median_with_indices(values, cfg=cfg, logger=logger)
    except NonFiniteInputError as e:
        logger.error("%s (use --drop-nonfinite to ignore them)", e)
        return 2

    print(f"values: {format_bracketed(values)}")
    print(f"median: {'<empty>' if median is None else median}")
    print(f"indices: {format_bracketed(indices)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
