"""median_indices 的日志工具。

说明：
    median_indices 作为轻依赖模块，库内部只通过 `logging.getLogger(__name__)` 打日志，
    不主动安装 handler。这里提供一个“可用即可”的默认 logger，供 tools/ 脚本或
    单测环境使用，避免无 handler 导致的静默。
"""

from __future__ import annotations

import logging

LOGGER_NAME = "median_indices"


def default_logger(level: int = logging.INFO) -> logging.Logger:
    """获取 median_indices 的默认 logger。

    Args:
        level: 首次安装 handler 时设置的日志级别。

    Returns:
        标准库 `logging.Logger` 实例。
    """

    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger
