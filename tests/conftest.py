"""测试公共夹具。"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from aurimyth.jsonrpc_kit.rpc import HttpxTransport, RPCClient

RPC_URL = "http://rpc.test/jsonrpc"


def echo_result(payload: dict[str, Any]) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": payload.get("id"), "result": None}


class FakeServer:
    """记录收到的请求并返回预设响应。"""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = echo_result
        self.exception: Exception | None = None

    def respond(self, body: Any, status_code: int = 200) -> None:
        """设置响应：dict/list 按 JSON 返回，bytes 原样返回，callable 接收请求信封。"""
        self.body = body
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exception is not None:
            raise self.exception
        body = self.body
        if callable(body):
            body = body(json.loads(request.content))
        content = body if isinstance(body, bytes) else json.dumps(body).encode()
        return httpx.Response(
            self.status_code,
            content=content,
            headers={"Content-Type": "application/json"},
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_payload(self) -> dict[str, Any]:
        return json.loads(self.last_request.content)

    def transport(self) -> HttpxTransport:
        client = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        return HttpxTransport(client=client)


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def make_client(server):
    """创建接到 FakeServer 上的客户端。"""

    def _make(settings: Any = None, **kwargs: Any) -> RPCClient:
        kwargs.setdefault("transport", server.transport())
        return RPCClient(RPC_URL, settings, **kwargs)

    return _make


@pytest.fixture
def client(make_client) -> RPCClient:
    return make_client()
