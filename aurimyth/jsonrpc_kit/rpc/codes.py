"""错误代码定义。

JSON-RPC 2.0 协议预定义的错误代码。
"""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """JSON-RPC 标准错误代码枚举。"""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    @classmethod
    def from_code(cls, code: object) -> ErrorCode | None:
        """查找已知错误代码，服务端自定义代码返回 None。"""
        if isinstance(code, bool) or not isinstance(code, int):
            return None
        try:
            return cls(code)
        except ValueError:
            return None


__all__ = [
    "ErrorCode",
]
