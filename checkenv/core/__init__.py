"""
Core Layer - 核心层

包含代码扫描器。
"""

from checkenv.core.scanner import (
    scan,
    walk,
    extract_env_vars,
    is_candidate,
    ScanRequest,
    ScanResult,
    DiscoverySet,
    ScanError,
    MissingRootError,
    TraversalError,
)

__all__ = [
    "scan",
    "walk",
    "extract_env_vars",
    "is_candidate",
    "ScanRequest",
    "ScanResult",
    "DiscoverySet",
    "ScanError",
    "MissingRootError",
    "TraversalError",
]
