"""
报告器基类 - 定义报告器接口
"""

from typing import Mapping, Protocol

from checkenv.core.scanner.models import DiscoverySet


class Reporter(Protocol):
    """报告器协议"""

    def report(self, discovered: DiscoverySet, environ: Mapping[str, str]) -> None:
        """生成报告"""
        ...
