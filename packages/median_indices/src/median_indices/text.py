"""文本输出相关的小工具。

这里只负责把序列渲染成 `[a b c]` 形式，供 tools/ 脚本打印；
格式本身不属于计算结果的一部分，不要在业务逻辑中解析它。
"""

from __future__ import annotations

from typing import Any, Iterable

import numpy as np


def _format_item(x: Any) -> str:
    # numpy 标量先转成 Python 原生类型，避免输出 `np.float64(1.0)`。
    if isinstance(x, np.generic):
        x = x.item()
    return str(x)


def format_bracketed(seq: Iterable[Any]) -> str:
    """把序列格式化为方括号包裹、空格分隔的字符串。

    Args:
        seq: 任意可迭代对象（list/tuple/np.ndarray 等）。

    Returns:
        例如 `[1.2 1.1 -0.1]`；空序列返回 `[]`。
    """

    return "[" + " ".join(_format_item(x) for x in seq) + "]"
