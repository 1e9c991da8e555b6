"""
Scanner 模块 - 扫描代码库中的 process.env 引用

- models.py: 数据类定义
- patterns.py: 正则表达式模式与默认值
- extractor.py: 变量名提取
- filters.py: 候选文件过滤
- walker.py: 目录遍历
- pool.py: 工作线程池
- core.py: 主扫描函数
"""

from checkenv.core.scanner.models import (
    ScanRequest,
    ScanResult,
    DiscoverySet,
    split_list,
)
from checkenv.core.scanner.patterns import (
    ENV_VAR_PATTERN,
    DEFAULT_IGNORE_DIRS,
    DEFAULT_WORKERS,
)
from checkenv.core.scanner.extractor import (
    extract_env_vars,
    read_file_bytes,
)
from checkenv.core.scanner.filters import (
    file_extension,
    has_extension,
    is_ignored,
    is_candidate,
)
from checkenv.core.scanner.walker import (
    walk,
    ScanError,
    MissingRootError,
    TraversalError,
)
from checkenv.core.scanner.pool import WorkerPool, ProgressCallback
from checkenv.core.scanner.core import scan

__all__ = [
    # Models
    "ScanRequest",
    "ScanResult",
    "DiscoverySet",
    "split_list",
    # Patterns
    "ENV_VAR_PATTERN",
    "DEFAULT_IGNORE_DIRS",
    "DEFAULT_WORKERS",
    # Extraction
    "extract_env_vars",
    "read_file_bytes",
    # Filters
    "file_extension",
    "has_extension",
    "is_ignored",
    "is_candidate",
    # Walker
    "walk",
    "ScanError",
    "MissingRootError",
    "TraversalError",
    # Pool
    "WorkerPool",
    "ProgressCallback",
    # Core
    "scan",
]
