"""median_indices 的通用工具模块。"""

from median_indices.utils.median_logging import LOGGER_NAME, default_logger

__all__ = [
    "LOGGER_NAME",
    "default_logger",
]
