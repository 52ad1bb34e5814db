"""JSON-RPC 命令行接口。

使用 typer 实现 call / notify 命令，便于手工调试服务端。
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Optional

from rich.console import Console
from rich.table import Table
import httpx
import typer

from aurimyth.jsonrpc_kit.common.logging import setup_logging
from aurimyth.jsonrpc_kit.config.settings import RPCClientSettings
from aurimyth.jsonrpc_kit.rpc import ClientError, RemoteError, RPCClient

console = Console()

app = typer.Typer(
    name="jsonrpc",
    help="JSON-RPC 2.0 调试工具",
    add_completion=False,
)


def _parse_params(raw: str | None) -> Any:
    """解析 --params 传入的 JSON 文本。"""
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise typer.BadParameter(f"参数不是合法 JSON: {exc}", param_hint="--params") from exc


def _build_client(url: str | None, strict: bool | None) -> RPCClient:
    """根据命令行参数和环境变量创建客户端。"""
    settings = RPCClientSettings()
    overrides: dict[str, Any] = {}
    if url:
        overrides["url"] = url
    if strict is not None:
        overrides["strict_server_response"] = strict
    if overrides:
        settings = settings.model_copy(update=overrides)
    if not settings.url:
        typer.echo("❌ 未指定服务地址，请使用 --url 或设置 JSONRPC_CLIENT_URL", err=True)
        raise typer.Exit(2)
    return RPCClient.from_settings(settings)


def _print_remote_error(exc: RemoteError) -> None:
    table = Table(title="远端错误", show_header=False)
    table.add_column("字段", style="cyan")
    table.add_column("值")
    table.add_row("code", str(exc.code))
    table.add_row("message", exc.message)
    if exc.data is not None:
        table.add_row("data", json.dumps(exc.data, ensure_ascii=False, default=str))
    console.print(table)


@app.command()
def call(
    method: str = typer.Argument(..., help="方法名"),
    params: Optional[str] = typer.Option(None, "--params", "-p", help="JSON 格式的参数"),
    url: Optional[str] = typer.Option(None, "--url", "-u", help="服务地址（默认读取 JSONRPC_CLIENT_URL）"),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--no-strict",
        help="非 2xx 响应视为错误（默认读取 JSONRPC_CLIENT_STRICT_SERVER_RESPONSE）",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="输出调试日志"),
) -> None:
    """调用远程方法并输出结果。

    示例:
        aurimyth-jsonrpc call add -p "[1, 2]" -u http://localhost:8000/rpc
    """
    if verbose:
        setup_logging("DEBUG")
    parsed = _parse_params(params)
    client = _build_client(url, strict)

    async def _call() -> Any:
        async with client:
            return await client.call(method, parsed)

    try:
        result = asyncio.run(_call())
    except RemoteError as e:
        _print_remote_error(e)
        raise typer.Exit(1)
    except ClientError as e:
        typer.echo(f"❌ 调用失败: {e}", err=True)
        raise typer.Exit(1)
    except httpx.HTTPError as e:
        typer.echo(f"❌ 请求失败: {type(e).__name__}: {e}", err=True)
        raise typer.Exit(1)

    console.print_json(json.dumps(result, ensure_ascii=False))


@app.command()
def notify(
    method: str = typer.Argument(..., help="方法名"),
    params: Optional[str] = typer.Option(None, "--params", "-p", help="JSON 格式的参数"),
    url: Optional[str] = typer.Option(None, "--url", "-u", help="服务地址（默认读取 JSONRPC_CLIENT_URL）"),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--no-strict",
        help="非 2xx 响应视为错误（默认读取 JSONRPC_CLIENT_STRICT_SERVER_RESPONSE）",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="输出调试日志"),
) -> None:
    """发送通知（不等待 JSON-RPC 响应）。

    示例:
        aurimyth-jsonrpc notify ping -u http://localhost:8000/rpc
    """
    if verbose:
        setup_logging("DEBUG")
    parsed = _parse_params(params)
    client = _build_client(url, strict)

    async def _notify() -> None:
        async with client:
            await client.notify(method, parsed)

    try:
        asyncio.run(_notify())
    except ClientError as e:
        typer.echo(f"❌ 通知失败: {e}", err=True)
        raise typer.Exit(1)
    except httpx.HTTPError as e:
        typer.echo(f"❌ 请求失败: {type(e).__name__}: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✅ 通知已发送: {method}")


if __name__ == "__main__":
    app()
