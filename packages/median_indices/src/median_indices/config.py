"""中位数计算的配置。

约定：
    - 排序规则固定为“按数值降序的稳定排序”，相等值保持原始输入顺序。
    - 配置只影响非有限值（NaN/Inf）的处理方式，不改变选取名次的规则。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

NonFinitePolicy = Literal["raise", "drop"]

_NONFINITE_POLICIES = ("raise", "drop")


@dataclass(frozen=True)
class MedianConfig:
    """中位数计算配置。

    属性说明：
        nonfinite_policy: 输入包含 NaN/Inf 时的处理方式。
            - "raise"：抛出 `NonFiniteInputError`（默认）。
            - "drop"：剔除非有限值后再计算；返回的下标仍指向原始输入。
    """

    nonfinite_policy: NonFinitePolicy = "raise"

    def __post_init__(self) -> None:
        if self.nonfinite_policy not in _NONFINITE_POLICIES:
            raise ValueError(
                f"nonfinite_policy must be one of {list(_NONFINITE_POLICIES)}, got {self.nonfinite_policy!r}"
            )
