"""JSON-RPC 异常定义。

异常分为两类：
- ClientError: 本地产生的错误（前置条件、传输、响应格式、协议违规）
- RemoteError: 远端返回的 error 对象，原样保留
"""

from __future__ import annotations

from typing import Any

from aurimyth.jsonrpc_kit.common.exceptions import FoundationError

from .codes import ErrorCode


class JsonRpcError(FoundationError):
    """JSON-RPC 异常基类。"""

    pass


class ClientError(JsonRpcError):
    """本地错误基类。

    在客户端一侧检测到的所有错误都继承此类。
    """

    pass


class InvalidMethodError(ClientError, ValueError):
    """方法名为空或类型不正确，在任何 I/O 之前抛出。"""

    def __init__(self, method: Any = None) -> None:
        super().__init__(f"Method must be a non-empty string, got {method!r}.")
        self.method = method


class InvalidParamsError(ClientError, ValueError):
    """参数未通过注册表中声明的类型校验。"""

    def __init__(self, method: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(f"Invalid params for method {method!r}.")
        self.method = method
        self.errors = errors or []


class TransportError(ClientError):
    """传输层错误（严格模式下的非 2xx 状态码）。

    Attributes:
        status_code: HTTP 状态码
        response: 原始传输层响应
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class MalformedResponseError(ClientError):
    """响应体不是合法的 JSON。"""

    def __init__(self, message: str = "Response is not valid JSON.", content: bytes = b"") -> None:
        super().__init__(message)
        self.content = content


class ProtocolViolationError(ClientError):
    """响应不符合 JSON-RPC 2.0 规范。"""

    def __init__(
        self,
        message: str = 'Response must have "error" or "result" properties.',
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.payload = payload


class ResponseIdMismatchError(ProtocolViolationError):
    """响应 id 与请求 id 不一致。"""

    def __init__(self, expected: Any, actual: Any, payload: Any = None) -> None:
        super().__init__(
            f"Response id {actual!r} does not match request id {expected!r}.",
            payload=payload,
        )
        self.expected = expected
        self.actual = actual


class InvalidResultError(ClientError):
    """结果未通过注册表中声明的类型校验。"""

    def __init__(self, method: str, result: Any, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(f"Invalid result for method {method!r}.")
        self.method = method
        self.result = result
        self.errors = errors or []


class RemoteError(JsonRpcError):
    """远端过程返回的错误。

    error 对象原样保存在 ``error`` 属性中，code/message/data 从中读取。

    Attributes:
        error: 响应中的 error 字段（未做任何转换）
        code: 错误代码
        data: 附加数据（注册了 error_data 类型时为校验后的对象）
    """

    def __init__(self, error: Any, data: Any = None) -> None:
        self.error = error
        if isinstance(error, dict):
            self.code = error.get("code")
            message = error.get("message")
            self.data = data if data is not None else error.get("data")
        else:
            self.code = None
            message = None
            self.data = data
        super().__init__(message if isinstance(message, str) else str(error))

    @property
    def error_code(self) -> ErrorCode | None:
        """标准错误代码，服务端自定义代码返回 None。"""
        return ErrorCode.from_code(self.code)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} code={self.code} message={self.message}>"


__all__ = [
    "ClientError",
    "InvalidMethodError",
    "InvalidParamsError",
    "InvalidResultError",
    "JsonRpcError",
    "MalformedResponseError",
    "ProtocolViolationError",
    "RemoteError",
    "ResponseIdMismatchError",
    "TransportError",
]
