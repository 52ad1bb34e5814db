"""AuriMyth JSON-RPC Kit - JSON-RPC 2.0 异步客户端工具包。

模块结构：
- common: 最基础层（异常基类、日志系统）
- config: 配置管理（pydantic-settings）
- rpc: JSON-RPC 客户端（信封、传输层、方法注册表、异常）
- commands: 命令行工具
"""

from . import common, config, rpc
from .rpc import MethodRegistry, RemoteError, RPCClient

__version__ = "0.1.0"
__all__ = [
    "MethodRegistry",
    "RPCClient",
    "RemoteError",
    "common",
    "config",
    "rpc",
]
