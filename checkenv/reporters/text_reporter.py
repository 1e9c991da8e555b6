"""
文本报告器 - 逐行输出缺失的环境变量
"""

from typing import Iterable, Mapping

from rich.console import Console

from checkenv.core.scanner.models import DiscoverySet

MISSING_LINE = "Missing variable: {name}"


def find_missing(discovered: Iterable[str], environ: Mapping[str, str]) -> list[str]:
    """返回未设置或值为空字符串的变量名（排序仅为便于阅读）"""
    return sorted(name for name in discovered if not environ.get(name))


def format_missing(name: str) -> str:
    return MISSING_LINE.format(name=name)


class TextReporter:
    """文本报告器"""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def report(self, discovered: DiscoverySet, environ: Mapping[str, str]) -> None:
        """每个缺失的变量输出一行"""
        for name in find_missing(discovered, environ):
            self.console.print(
                format_missing(name),
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
