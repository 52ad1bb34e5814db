"""客户端配置。

提供 JSON-RPC 客户端的配置结构。
使用 pydantic-settings 从环境变量和 .env 文件加载配置。
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientOptions(BaseModel):
    """客户端行为选项。

    在客户端构造时创建，之后不可修改，由该客户端发起的所有调用共享。
    """

    strict_server_response: bool = Field(
        default=False,
        alias="strictServerResponse",
        description="传输层返回非 2xx 状态码时直接报错，不再解析响应体",
    )
    verify_response_id: bool = Field(
        default=False,
        description="校验响应中的 id 与请求 id 一致",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="附加请求头（Content-Type 固定为 application/json，不可覆盖）",
    )

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class RPCClientSettings(BaseSettings):
    """JSON-RPC 客户端调用配置。

    环境变量前缀: JSONRPC_CLIENT_
    示例: JSONRPC_CLIENT_URL, JSONRPC_CLIENT_STRICT_SERVER_RESPONSE, JSONRPC_CLIENT_TIMEOUT
    """

    url: str = Field(
        default="",
        description="JSON-RPC 服务端点地址"
    )
    strict_server_response: bool = Field(
        default=False,
        description="非 2xx 响应是否直接视为传输错误"
    )
    timeout: float = Field(
        default=30.0,
        description="默认传输层超时时间（秒）"
    )
    verify_response_id: bool = Field(
        default=False,
        description="是否校验响应 id"
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="附加请求头"
    )

    model_config = SettingsConfigDict(
        env_prefix="JSONRPC_CLIENT_",
        case_sensitive=False,
    )

    def to_options(self) -> ClientOptions:
        """转换为客户端行为选项。"""
        return ClientOptions(
            strict_server_response=self.strict_server_response,
            verify_response_id=self.verify_response_id,
            headers=self.headers,
        )


class LogSettings(BaseSettings):
    """日志配置。

    环境变量前缀: LOG_
    示例: LOG_LEVEL, LOG_FILE
    """

    level: str = Field(
        default="INFO",
        description="日志级别"
    )
    file: str | None = Field(
        default=None,
        description="日志文件路径"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
    )


class BaseConfig(BaseSettings):
    """基础配置类。

    聚合客户端与日志配置，自动从环境变量和 .env 文件加载。
    """

    # 客户端配置
    client: RPCClientSettings = Field(default_factory=RPCClientSettings)

    # 日志配置
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


__all__ = [
    "BaseConfig",
    "ClientOptions",
    "LogSettings",
    "RPCClientSettings",
]
