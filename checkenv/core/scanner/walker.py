"""
目录遍历

按顺序遍历根目录，逐个产出符合条件的文件路径。
根目录不存在或遍历出错时抛出异常，由调用方决定如何终止。
"""

import os
import stat
from typing import Collection, Iterable, Iterator

from checkenv.core.scanner.filters import is_candidate


class ScanError(Exception):
    """扫描错误基类"""
    pass


class MissingRootError(ScanError):
    """根目录不存在"""

    def __init__(self, directory: str):
        self.directory = directory
        super().__init__(f"The specified directory '{directory}' does not exist.")


class TraversalError(ScanError):
    """遍历过程中的错误（如无权限读取目录）"""
    pass


def _raise_traversal_error(error: OSError) -> None:
    raise TraversalError(str(error)) from error


def _check_root(root: str) -> None:
    """根目录必须存在且为目录；无权限等其他错误按遍历错误处理"""
    try:
        info = os.stat(root)
    except (FileNotFoundError, NotADirectoryError):
        raise MissingRootError(root)
    except OSError as e:
        raise TraversalError(str(e)) from e
    if not stat.S_ISDIR(info.st_mode):
        raise MissingRootError(root)


def walk(
    roots: Iterable[str],
    extensions: Collection[str],
    ignored_dirs: Iterable[str],
) -> Iterator[str]:
    """
    遍历根目录，产出候选文件路径

    Args:
        roots: 根目录（按给定顺序遍历）
        extensions: 允许的扩展名
        ignored_dirs: 忽略的路径前缀

    Yields:
        规范化后的文件路径，如 ``src/app.js``

    Raises:
        MissingRootError: 根目录不存在或不是目录
        TraversalError: 遍历出错
    """
    ignored_dirs = tuple(ignored_dirs)
    for root in roots:
        _check_root(root)

        for dirpath, _, filenames in os.walk(root, onerror=_raise_traversal_error):
            for name in filenames:
                path = os.path.normpath(os.path.join(dirpath, name))
                if is_candidate(path, extensions, ignored_dirs):
                    yield path
