"""日志管理器 - 统一的日志配置。

提供：
- 统一的日志配置（控制台 + 可选文件滚动）
"""

from __future__ import annotations

from loguru import logger


def setup_logging(log_level: str = "INFO", log_file: str | None = None) -> None:
    """设置日志配置。

    Args:
        log_level: 日志级别（默认：INFO）
        log_file: 日志文件路径（可选，不传则只输出到控制台）
    """
    log_level = log_level.upper()

    logger.remove()

    # 控制台输出
    logger.add(
        lambda msg: print(msg, end=""),
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=log_level,
        colorize=True,
    )

    # 文件输出
    if log_file:
        logger.add(
            log_file,
            rotation="00:00",
            retention="7 days",
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            encoding="utf-8",
            enqueue=True,  # 异步写入
        )

    logger.debug(f"日志系统初始化完成，级别: {log_level}")


__all__ = [
    "logger",
    "setup_logging",
]
