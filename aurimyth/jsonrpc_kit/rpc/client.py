"""RPC客户端实现。"""

from __future__ import annotations

from typing import Any

from aurimyth.jsonrpc_kit.common.logging import logger
from aurimyth.jsonrpc_kit.config.settings import RPCClientSettings

from .base import BaseRPCClient, JsonRpcRequest, RequestId, ensure_method
from .exceptions import (
    MalformedResponseError,
    ProtocolViolationError,
    RemoteError,
    ResponseIdMismatchError,
    TransportError,
)
from .registry import MethodSpec
from .transport import HttpxTransport, TransportResponse


class RPCClient(BaseRPCClient):
    """JSON-RPC 2.0 客户端。

    每次 call/notify 只做一次传输层交换，调用之间互不影响，可任意并发。
    所有错误都直接抛给调用方，不做重试、不记录错误日志。
    """

    @classmethod
    def from_settings(cls, settings: RPCClientSettings | None = None, **kwargs: Any) -> RPCClient:
        """从配置创建客户端。

        Args:
            settings: 客户端配置，默认从环境变量加载
            **kwargs: 透传给构造函数的其他参数（transport、id_factory、registry）

        Returns:
            RPCClient: 客户端实例
        """
        settings = settings or RPCClientSettings()
        kwargs.setdefault("transport", HttpxTransport(timeout=settings.timeout))
        return cls(settings.url, settings.to_options(), **kwargs)

    def _get_spec(self, method: str) -> MethodSpec | None:
        if self.registry is None:
            return None
        return self.registry.get(method)

    async def _dispatch(self, envelope: JsonRpcRequest) -> TransportResponse:
        """发送信封，严格模式下检查传输层状态。

        Raises:
            TransportError: 严格模式下状态码非 2xx
        """
        kind = "通知" if envelope.is_notification else "请求"
        logger.debug(f"JSON-RPC{kind}: {envelope.method} -> {self.rpc_url}")
        response = await self.transport.send(
            self.rpc_url,
            envelope.to_wire(),
            self._prepare_headers(),
        )
        if self.settings.strict_server_response and not response.is_success:
            raise TransportError(
                f"Server responded with status {response.status_code}.",
                status_code=response.status_code,
                response=response,
            )
        return response

    async def call(self, method: str, params: Any = None) -> Any:
        """调用远程过程并返回结果。

        Args:
            method: 方法名
            params: 参数，任意可 JSON 序列化的值

        Returns:
            Any: 响应中的 result

        Raises:
            InvalidMethodError: 方法名为空
            InvalidParamsError: 参数不符合注册的类型
            TransportError: 严格模式下状态码非 2xx
            MalformedResponseError: 响应体不是合法 JSON
            ProtocolViolationError: 响应既没有 error 也没有 result
            RemoteError: 远端返回了 error
        """
        method = ensure_method(method)
        spec = self._get_spec(method)
        if spec is not None:
            params = spec.dump_params(params)

        request_id = self.id_factory()
        response = await self._dispatch(JsonRpcRequest.call(method, request_id, params))

        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedResponseError(content=response.content) from exc

        return self._interpret(payload, request_id, spec)

    def _interpret(self, payload: Any, request_id: RequestId, spec: MethodSpec | None) -> Any:
        """按 result/error 互斥规则解析响应。"""
        if not isinstance(payload, dict):
            raise ProtocolViolationError("Response must be a JSON object.", payload=payload)

        if self.settings.verify_response_id:
            response_id = payload.get("id")
            # 服务端无法解析请求时，error 响应的 id 为 null
            unknown_id = response_id is None and "error" in payload
            if response_id != request_id and not unknown_id:
                raise ResponseIdMismatchError(request_id, response_id, payload=payload)

        if "error" in payload:
            error = payload["error"]
            data = None
            if spec is not None and isinstance(error, dict):
                data = spec.validate_error_data(error.get("data"))
            raise RemoteError(error, data=data)

        if "result" in payload:
            result = payload["result"]
            logger.debug(f"JSON-RPC响应: id={request_id}")
            if spec is not None:
                return spec.validate_result(result)
            return result

        raise ProtocolViolationError(payload=payload)

    async def notify(self, method: str, params: Any = None) -> None:
        """发送通知。

        通知不带 id，服务端不会返回 JSON-RPC 响应，因此不解析响应体。

        Raises:
            InvalidMethodError: 方法名为空
            InvalidParamsError: 参数不符合注册的类型
            TransportError: 严格模式下状态码非 2xx
        """
        method = ensure_method(method)
        spec = self._get_spec(method)
        if spec is not None:
            params = spec.dump_params(params)

        await self._dispatch(JsonRpcRequest.notification(method, params))
