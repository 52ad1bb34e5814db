"""命令行测试。"""

import httpx
import pytest
from typer.testing import CliRunner

from aurimyth.jsonrpc_kit.commands import app
from aurimyth.jsonrpc_kit.rpc import client as client_module

from .conftest import RPC_URL

runner = CliRunner()


@pytest.fixture(autouse=True)
def fake_transport(monkeypatch, server):
    """替换 from_settings 创建的默认传输层。"""

    def _factory(timeout: float = 30.0):
        return server.transport()

    monkeypatch.setattr(client_module, "HttpxTransport", _factory)
    monkeypatch.delenv("JSONRPC_CLIENT_URL", raising=False)
    monkeypatch.delenv("JSONRPC_CLIENT_STRICT_SERVER_RESPONSE", raising=False)


class TestCallCommand:
    """call 命令。"""

    def test_prints_result(self, server):
        server.respond(lambda payload: {"jsonrpc": "2.0", "id": payload["id"], "result": sum(payload["params"])})

        result = runner.invoke(app, ["call", "add", "--params", "[1, 2]", "--url", RPC_URL])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "3"
        assert server.last_payload["method"] == "add"

    def test_url_from_env(self, server, monkeypatch):
        monkeypatch.setenv("JSONRPC_CLIENT_URL", RPC_URL)
        server.respond({"jsonrpc": "2.0", "id": "1", "result": {"ok": True}})

        result = runner.invoke(app, ["call", "status"])

        assert result.exit_code == 0, result.output
        assert '"ok": true' in result.output
        assert str(server.last_request.url) == RPC_URL

    def test_remote_error(self, server):
        server.respond({"jsonrpc": "2.0", "id": "1", "error": {"code": -32601, "message": "Method not found"}})

        result = runner.invoke(app, ["call", "missing", "-u", RPC_URL])

        assert result.exit_code == 1
        assert "-32601" in result.output
        assert "Method not found" in result.output

    def test_strict_transport_error(self, server):
        server.respond(b"", status_code=500)

        result = runner.invoke(app, ["call", "add", "-u", RPC_URL, "--strict"])

        assert result.exit_code == 1
        assert "500" in result.output

    def test_invalid_params(self, server):
        result = runner.invoke(app, ["call", "add", "-p", "[1, 2", "-u", RPC_URL])

        assert result.exit_code == 2
        assert server.requests == []

    def test_missing_url(self, server):
        result = runner.invoke(app, ["call", "add"])

        assert result.exit_code == 2
        assert "JSONRPC_CLIENT_URL" in result.output


class TestNotifyCommand:
    """notify 命令。"""

    def test_sends_notification(self, server):
        result = runner.invoke(app, ["notify", "ping", "-u", RPC_URL])

        assert result.exit_code == 0, result.output
        assert "ping" in result.output
        assert server.last_payload == {"jsonrpc": "2.0", "method": "ping"}

    def test_strict_transport_error(self, server):
        server.respond(b"", status_code=503)

        result = runner.invoke(app, ["notify", "ping", "-u", RPC_URL, "--strict"])

        assert result.exit_code == 1
        assert "503" in result.output


class TestNetworkFailures:
    """传输层异常。"""

    @pytest.mark.parametrize("command", ["call", "notify"])
    def test_connect_error_exits_cleanly(self, server, command):
        server.exception = httpx.ConnectError("connection refused")

        result = runner.invoke(app, [command, "ping", "-u", RPC_URL])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "❌" in result.output
        assert "ConnectError" in result.output


class TestStrictOverride:
    """--strict/--no-strict 覆盖环境变量。"""

    def test_no_strict_overrides_env(self, server, monkeypatch):
        monkeypatch.setenv("JSONRPC_CLIENT_STRICT_SERVER_RESPONSE", "true")
        server.respond(b"", status_code=500)

        result = runner.invoke(app, ["notify", "ping", "-u", RPC_URL, "--no-strict"])

        assert result.exit_code == 0, result.output

    def test_env_strict_used_by_default(self, server, monkeypatch):
        monkeypatch.setenv("JSONRPC_CLIENT_STRICT_SERVER_RESPONSE", "true")
        server.respond(b"", status_code=500)

        result = runner.invoke(app, ["notify", "ping", "-u", RPC_URL])

        assert result.exit_code == 1
        assert "500" in result.output
