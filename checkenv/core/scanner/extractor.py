"""
环境变量提取

对文件原始字节做正则匹配，不解析 JavaScript 语法。
"""

import logging
from pathlib import Path
from typing import Optional

from checkenv.core.scanner.patterns import ENV_VAR_PATTERN

logger = logging.getLogger(__name__)


def extract_env_vars(content: bytes) -> set[str]:
    """从文件内容中提取 process.env.NAME 引用的变量名"""
    return {
        match.group(1).decode("ascii")
        for match in ENV_VAR_PATTERN.finditer(content)
    }


def read_file_bytes(file_path: str) -> Optional[bytes]:
    """读取文件字节，失败时返回 None（权限不足、文件已被删除等）"""
    try:
        return Path(file_path).read_bytes()
    except OSError as e:
        logger.debug(f"Skipping unreadable file {file_path}: {e}")
        return None
