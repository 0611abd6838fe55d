"""中位数及其贡献下标的类型定义。"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np


class NonFiniteInputError(ValueError):
    """输入包含 NaN/Inf，且配置要求直接报错。

    属性:
        positions: 非有限值在原始输入中的下标（升序）。
    """

    def __init__(self, positions: Sequence[int]):
        self.positions = tuple(int(i) for i in positions)
        super().__init__(f"Input contains non-finite values at positions {list(self.positions)}")


@dataclass(frozen=True, slots=True)
class MedianResult:
    """中位数计算结果（不可变）。

    属性:
        median: 中位数；输入为空时为 None（显式“无结果”，而不是 NaN 哨兵）。
        indices: 参与计算中位数的元素在原始输入中的下标。
            - 奇数长度：1 个；偶数长度：2 个；空输入：0 个。
            - 顺序按排序后的名次（先 n/2-1，再 n/2），而不是按下标大小。

    用法：
        median, indices = compute_median_with_indices(values)

    说明：
        - dataclass 为 frozen，任何属性赋值都会抛 `dataclasses.FrozenInstanceError`。
        - indices 为 tuple[int, ...]，本身也不可变。
    """

    median: float | None
    indices: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        # 允许调用方传入 list/np.ndarray，统一收敛为 tuple[int, ...]，避免持有可变容器。
        object.__setattr__(self, "indices", tuple(int(i) for i in self.indices))
        if self.median is not None:
            object.__setattr__(self, "median", float(self.median))

    def __iter__(self) -> Iterator[float | tuple[int, ...] | None]:
        # 支持 `median, indices = result` 的解包写法。
        yield self.median
        yield self.indices

    @property
    def is_empty(self) -> bool:
        return self.median is None

    def median_or_nan(self) -> float:
        """返回中位数；空结果返回 NaN（供需要数值哨兵的调用方使用）。"""

        if self.median is None:
            return float("nan")
        return float(self.median)

    def contributing_values(self, values: Sequence[float] | np.ndarray) -> tuple[float, ...]:
        """取出原始输入中参与计算的数值（与 indices 对齐）。"""

        v = np.asarray(values, dtype=float).reshape(-1)
        return tuple(float(v[i]) for i in self.indices)


EMPTY_RESULT = MedianResult(median=None, indices=())
