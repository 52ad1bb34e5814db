"""命令行工具。"""

from .cli import app

__all__ = [
    "app",
]
