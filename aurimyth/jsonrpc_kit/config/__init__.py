"""配置模块。

使用 pydantic-settings 进行配置管理。
"""

from .settings import BaseConfig, ClientOptions, LogSettings, RPCClientSettings

__all__ = [
    "BaseConfig",
    "ClientOptions",
    "LogSettings",
    "RPCClientSettings",
]
