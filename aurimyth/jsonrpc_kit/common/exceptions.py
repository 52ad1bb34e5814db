"""基础异常定义。

所有 JSON-RPC Kit 异常的根基类。
"""

from __future__ import annotations


class FoundationError(Exception):
    """基础异常类。

    所有框架内异常都继承此类，便于调用方统一捕获。

    Attributes:
        message: 错误消息
    """

    def __init__(self, message: str = "", *args: object) -> None:
        super().__init__(message, *args)
        self.message = message

    def __str__(self) -> str:
        return self.message


__all__ = [
    "FoundationError",
]
