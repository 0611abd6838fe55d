"""median_indices：中位数及其贡献下标。

对外入口：
    - `compute_median_with_indices`: 计算中位数，并返回参与计算的原始下标（不可变结果）。
"""

from median_indices.config import MedianConfig
from median_indices.core import compute_median_with_indices
from median_indices.text import format_bracketed
from median_indices.types import EMPTY_RESULT, MedianResult, NonFiniteInputError
from median_indices.utils import default_logger

__all__ = [
    "EMPTY_RESULT",
    "MedianConfig",
    "MedianResult",
    "NonFiniteInputError",
    "compute_median_with_indices",
    "default_logger",
    "format_bracketed",
]
