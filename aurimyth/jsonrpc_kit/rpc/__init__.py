"""JSON-RPC 2.0 客户端。

提供信封构建、单次传输交换和响应分类。
"""

from .base import BaseRPCClient, JsonRpcRequest, generate_id
from .client import RPCClient
from .codes import ErrorCode
from .exceptions import (
    ClientError,
    InvalidMethodError,
    InvalidParamsError,
    InvalidResultError,
    JsonRpcError,
    MalformedResponseError,
    ProtocolViolationError,
    RemoteError,
    ResponseIdMismatchError,
    TransportError,
)
from .registry import MethodRegistry, MethodSpec
from .transport import BaseTransport, HttpxTransport, TransportResponse

__all__ = [
    "BaseRPCClient",
    "BaseTransport",
    "ClientError",
    "ErrorCode",
    "HttpxTransport",
    "InvalidMethodError",
    "InvalidParamsError",
    "InvalidResultError",
    "JsonRpcError",
    "JsonRpcRequest",
    "MalformedResponseError",
    "MethodRegistry",
    "MethodSpec",
    "ProtocolViolationError",
    "RPCClient",
    "RemoteError",
    "ResponseIdMismatchError",
    "TransportError",
    "TransportResponse",
    "generate_id",
]
