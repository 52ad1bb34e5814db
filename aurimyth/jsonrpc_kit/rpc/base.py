"""JSON-RPC 客户端基础定义。

包含请求信封模型、id 生成器和客户端基类。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, Literal, Union
import uuid

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt

from aurimyth.jsonrpc_kit.config.settings import ClientOptions

from .exceptions import InvalidMethodError
from .registry import MethodRegistry
from .transport import BaseTransport, HttpxTransport

JSONRPC_VERSION = "2.0"
CONTENT_TYPE = "application/json"

RequestId = Union[str, StrictInt, StrictFloat, None]
IdFactory = Callable[[], RequestId]


def generate_id() -> str:
    """生成新的关联 id（32 位十六进制字符串）。"""
    return uuid.uuid4().hex


class JsonRpcRequest(BaseModel):
    """请求信封。

    是否携带 id 是区分调用（call）与通知（notification）的唯一依据；
    序列化时只输出显式设置过的字段，因此通知不含 id，未传参数时不含 params。
    """

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: RequestId = None
    method: str = Field(min_length=1)
    params: Any = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def call(cls, method: str, request_id: RequestId, params: Any = None) -> JsonRpcRequest:
        """构建调用信封。"""
        fields: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION, "id": request_id, "method": method}
        if params is not None:
            fields["params"] = params
        return cls(**fields)

    @classmethod
    def notification(cls, method: str, params: Any = None) -> JsonRpcRequest:
        """构建通知信封。"""
        fields: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION, "method": method}
        if params is not None:
            fields["params"] = params
        return cls(**fields)

    @property
    def is_notification(self) -> bool:
        return "id" not in self.model_fields_set

    def to_wire(self) -> bytes:
        """序列化为 JSON 请求体。"""
        return self.model_dump_json(exclude_unset=True).encode("utf-8")


def ensure_method(method: Any) -> str:
    """校验方法名。

    Raises:
        InvalidMethodError: 方法名为空或不是字符串
    """
    if not isinstance(method, str) or not method:
        raise InvalidMethodError(method)
    return method


class BaseRPCClient(ABC):
    """RPC客户端基类。

    保存端点地址和不可变的行为选项，负责请求头与信封的构建。
    每次调用彼此独立，除配置外不持有任何可变状态。
    """

    def __init__(
        self,
        rpc_url: str,
        settings: ClientOptions | Mapping[str, Any] | None = None,
        *,
        transport: BaseTransport | None = None,
        id_factory: IdFactory | None = None,
        registry: MethodRegistry | None = None,
    ) -> None:
        """初始化RPC客户端。

        Args:
            rpc_url: JSON-RPC 端点地址（不校验格式）
            settings: 行为选项，支持 ClientOptions 或等价的字典
            transport: 传输层，默认使用 HttpxTransport
            id_factory: 关联 id 生成函数，默认 generate_id
            registry: 方法类型注册表（可选）
        """
        self.rpc_url = rpc_url
        if settings is None:
            settings = ClientOptions()
        elif not isinstance(settings, ClientOptions):
            settings = ClientOptions(**settings)
        self.settings: ClientOptions = settings
        self.transport = transport or HttpxTransport()
        self.id_factory = id_factory or generate_id
        self.registry = registry

    def _prepare_headers(self) -> dict[str, str]:
        """准备请求头，Content-Type 始终为 application/json。"""
        headers = {
            key: value
            for key, value in self.settings.headers.items()
            if key.lower() != "content-type"
        }
        headers["Content-Type"] = CONTENT_TYPE
        return headers

    @abstractmethod
    async def call(self, method: str, params: Any = None) -> Any:
        """发起调用并返回结果。"""

    @abstractmethod
    async def notify(self, method: str, params: Any = None) -> None:
        """发送通知，不解析响应。"""

    async def close(self) -> None:
        """关闭传输层。"""
        await self.transport.close()

    async def __aenter__(self) -> BaseRPCClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} url={self.rpc_url} "
            f"strict={self.settings.strict_server_response}>"
        )


__all__ = [
    "BaseRPCClient",
    "CONTENT_TYPE",
    "IdFactory",
    "JSONRPC_VERSION",
    "JsonRpcRequest",
    "RequestId",
    "ensure_method",
    "generate_id",
]
