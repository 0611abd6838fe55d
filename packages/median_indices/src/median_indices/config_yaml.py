"""median_indices 的 YAML 配置加载入口。

约定：
    - YAML 顶层为 mapping，字段名与 `MedianConfig` 一致。
    - 未知字段会报错，避免拼写错误静默失效。
    - 空文件等价于全部使用默认值。

依赖：
    - 本模块依赖 PyYAML（`pyyaml`）。
"""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import Any, Mapping

import yaml

from median_indices.config import MedianConfig


def _as_mapping(x: Any) -> Mapping[str, Any]:
    if x is None:
        return {}
    if isinstance(x, Mapping):
        return x
    raise TypeError(f"YAML 根节点必须是 mapping，实际是：{type(x).__name__}")


def median_config_from_dict(data: Mapping[Any, Any]) -> MedianConfig:
    """从 dict（通常来自 YAML）构造 `MedianConfig`。"""

    allowed = {f.name for f in fields(MedianConfig)}
    # YAML 的键不一定是字符串（例如 `1: x`），按 str 排序，保证报错是 KeyError。
    unknown = sorted(set(data.keys()) - allowed, key=str)
    if unknown:
        raise KeyError(f"MedianConfig 出现未知字段：{unknown}")

    # 取值非法时由 MedianConfig.__post_init__ 抛 ValueError。
    return MedianConfig(**{str(k): v for k, v in data.items()})


def load_median_config_yaml(path: str | Path) -> MedianConfig:
    """从 YAML 文件加载 `MedianConfig`。"""

    p = Path(path)
    text = p.read_text(encoding="utf-8")
    payload = yaml.safe_load(text)
    return median_config_from_dict(_as_mapping(payload))
