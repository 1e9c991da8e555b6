"""
核心扫描函数

遍历 -> 过滤 -> 并行提取 -> 去重汇总。
"""

from typing import Optional

from checkenv.core.scanner.models import ScanRequest, ScanResult
from checkenv.core.scanner.pool import ProgressCallback, WorkerPool
from checkenv.core.scanner.walker import walk


def scan(request: ScanRequest, on_file: Optional[ProgressCallback] = None) -> ScanResult:
    """
    执行一次扫描

    Args:
        request: 扫描配置
        on_file: 每读取一个文件后调用（在工作线程中执行）

    Returns:
        本次扫描独有的 ScanResult

    Raises:
        MissingRootError: 根目录不存在
        TraversalError: 遍历出错
    """
    paths = walk(request.roots, request.extensions, request.ignored_dirs)
    pool = WorkerPool(request.extensions, workers=request.workers, on_file=on_file)
    return pool.run(paths)
