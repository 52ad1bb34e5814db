"""传输层实现。

客户端只依赖 BaseTransport 接口：给定 URL、请求体和请求头，完成一次
POST 交换并返回 TransportResponse。默认实现基于 httpx，全异步无阻塞。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import json
from typing import Any

import httpx

from aurimyth.jsonrpc_kit.common.logging import logger


@dataclass
class TransportResponse:
    """传输层响应对象。"""

    status_code: int
    content: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        """是否成功响应（2xx）。"""
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """解析 JSON 响应。

        Raises:
            ValueError: 响应体不是合法 JSON
        """
        return json.loads(self.content)


class BaseTransport(ABC):
    """传输层接口。"""

    @abstractmethod
    async def send(
        self,
        url: str,
        content: bytes,
        headers: dict[str, str],
    ) -> TransportResponse:
        """发送一次 POST 请求。

        Args:
            url: 目标地址
            content: 已序列化的请求体
            headers: 请求头

        Returns:
            TransportResponse: 传输层响应
        """

    async def close(self) -> None:
        """释放传输层资源。"""
        return None


class HttpxTransport(BaseTransport):
    """基于 httpx 的默认传输层。

    httpx.AsyncClient 懒加载创建；外部注入的 client 由调用方负责关闭。
    网络异常（httpx.RequestError 等）原样向上抛出。
    """

    def __init__(
        self,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """初始化传输层。

        Args:
            timeout: 超时时间（秒），仅用于自动创建的 client
            client: 外部提供的 httpx.AsyncClient
        """
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """获取HTTP客户端（懒加载）。"""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def send(
        self,
        url: str,
        content: bytes,
        headers: dict[str, str],
    ) -> TransportResponse:
        client = await self._get_client()
        response = await client.post(url, content=content, headers=headers)
        logger.debug(f"HTTP响应: {response.status_code} {url}")
        return TransportResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    async def close(self) -> None:
        """关闭HTTP客户端。"""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def __repr__(self) -> str:
        return f"<HttpxTransport timeout={self.timeout}>"


__all__ = [
    "BaseTransport",
    "HttpxTransport",
    "TransportResponse",
]
