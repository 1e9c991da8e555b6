"""
数据模型定义

包含扫描器使用的所有数据类。
"""

import threading
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from checkenv.core.scanner.patterns import DEFAULT_IGNORE_DIRS, DEFAULT_WORKERS


def split_list(value: str) -> tuple[str, ...]:
    """按逗号拆分并去除每项两端空白"""
    return tuple(item.strip() for item in value.split(","))


@dataclass(frozen=True)
class ScanRequest:
    """
    单次扫描的配置

    Attributes:
        roots: 待扫描的根目录（按顺序）
        extensions: 文件扩展名，包含前导点，如 ".js"
        ignored_dirs: 忽略的路径前缀
        workers: 并发工作线程数
    """
    roots: tuple[str, ...]
    extensions: frozenset[str]
    ignored_dirs: tuple[str, ...] = DEFAULT_IGNORE_DIRS
    workers: int = DEFAULT_WORKERS

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    @classmethod
    def from_strings(
        cls,
        dirs: str,
        exts: str,
        ignore: str = ",".join(DEFAULT_IGNORE_DIRS),
        workers: int = DEFAULT_WORKERS,
    ) -> "ScanRequest":
        """从逗号分隔的命令行参数构建请求"""
        return cls(
            roots=split_list(dirs),
            extensions=frozenset(split_list(exts)),
            ignored_dirs=split_list(ignore),
            workers=workers,
        )


class DiscoverySet:
    """
    已发现的环境变量名集合

    扫描阶段由多个工作线程并发写入（加锁），扫描结束后只读。
    每次扫描独立创建，不在调用之间共享。
    """

    def __init__(self, names: Iterable[str] = ()):
        self._names: set[str] = set(names)
        self._lock = threading.Lock()

    def merge(self, names: Iterable[str]) -> None:
        """合并一批变量名"""
        names = set(names)
        if not names:
            return
        with self._lock:
            self._names.update(names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DiscoverySet):
            return self._names == other._names
        if isinstance(other, (set, frozenset)):
            return self._names == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"DiscoverySet({sorted(self._names)!r})"

    def as_set(self) -> frozenset[str]:
        return frozenset(self._names)


@dataclass
class ScanResult:
    """
    扫描结果

    Attributes:
        discovered: 发现的环境变量名
        files_scanned: 成功读取的文件数
        files_skipped: 读取失败被跳过的文件数
    """
    discovered: DiscoverySet = field(default_factory=DiscoverySet)
    files_scanned: int = 0
    files_skipped: int = 0
