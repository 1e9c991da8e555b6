"""
正则表达式模式与默认配置

环境变量引用的提取模式，以及扫描器的默认参数。
"""

import re

# process.env.NAME 引用（直接作用于文件字节）
ENV_VAR_PATTERN: re.Pattern[bytes] = re.compile(rb'process\.env\.([a-zA-Z0-9_]+)')

# 默认忽略的目录前缀
DEFAULT_IGNORE_DIRS: tuple[str, ...] = ("node_modules", "vendor")

# 默认工作线程数
DEFAULT_WORKERS = 10
