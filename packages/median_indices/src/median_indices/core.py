"""带贡献下标的中位数计算。

算法：
    1) 为每个元素保留原始下标（通过 argsort 的置换实现，不复制成对象列表）。
    2) 按数值降序做稳定排序；相等值保持原始输入顺序。
    3) n 为奇数时取名次 n//2；n 为偶数时取名次 n//2-1 与 n//2 并取算术平均。
    4) 返回不可变的 `MedianResult`。

说明：
    - 纯函数：每次调用只使用自己的工作副本，不修改输入，可被多个调用方并发使用。
    - 降序稳定排序与“升序 + 镜像名次”在有并列值时选中的下标不同，
      这里固定使用降序。
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from median_indices.config import MedianConfig
from median_indices.types import EMPTY_RESULT, MedianResult, NonFiniteInputError

_LOG = logging.getLogger(__name__)


def _as_values_1d(values: Sequence[float] | np.ndarray) -> np.ndarray:
    v = np.array(values, dtype=float)
    if v.ndim != 1:
        raise ValueError(f"Expected a 1-D sequence of numbers, got shape={tuple(v.shape)}")
    return v


def _descending_order(v: np.ndarray, positions: np.ndarray) -> np.ndarray:
    """返回按数值降序的稳定排列（元素为原始下标）。"""

    # 对有限值取负后做稳定升序，相等值（含 0.0 与 -0.0）保持原有相对顺序。
    rank = np.argsort(-v[positions], kind="stable")
    return positions[rank]


def compute_median_with_indices(
    values: Sequence[float] | np.ndarray,
    *,
    cfg: MedianConfig | None = None,
    logger: logging.Logger | None = None,
) -> MedianResult:
    """计算中位数，并给出参与计算的原始下标。

    Args:
        values: 一维数值序列（list/tuple/np.ndarray），可以为空。
        cfg: 可选配置；默认 `MedianConfig()`（遇到 NaN/Inf 直接报错）。
        logger: 可选 logger；默认使用本模块 logger。

    Returns:
        MedianResult。空输入返回 median=None、indices=()，不会抛异常。

    Raises:
        ValueError: 输入不是一维序列。
        NonFiniteInputError: 输入包含 NaN/Inf 且 nonfinite_policy="raise"。
    """

    cfg = cfg or MedianConfig()
    log = logger or _LOG

    v = _as_values_1d(values)
    if v.size == 0:
        log.debug("median of empty input requested; returning empty result")
        return EMPTY_RESULT

    finite = np.isfinite(v)
    positions = np.arange(v.size)
    if not bool(np.all(finite)):
        bad = np.flatnonzero(~finite)
        if cfg.nonfinite_policy == "raise":
            raise NonFiniteInputError(bad.tolist())

        log.debug("dropping %d non-finite value(s) at positions %s", int(bad.size), bad.tolist())
        positions = np.flatnonzero(finite)
        if positions.size == 0:
            return EMPTY_RESULT

    order = _descending_order(v, positions)
    n = int(order.size)
    mid = n // 2

    if n % 2 == 1:
        i = int(order[mid])
        return MedianResult(median=float(v[i]), indices=(i,))

    i0 = int(order[mid - 1])
    i1 = int(order[mid])
    # 先各自减半再相加：两个接近 float 上限的有限值相加会溢出为 inf。
    return MedianResult(median=float(v[i0] / 2.0 + v[i1] / 2.0), indices=(i0, i1))
