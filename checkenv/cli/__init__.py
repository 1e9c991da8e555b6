"""
CLI Layer - 命令行接口层
"""

from checkenv.cli.app import app, check

__all__ = [
    "app",
    "check",
]
