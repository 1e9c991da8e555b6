"""
Reporters Layer - 报告层
"""

from checkenv.reporters.base import Reporter
from checkenv.reporters.text_reporter import TextReporter, find_missing, format_missing

__all__ = [
    "Reporter",
    "TextReporter",
    "find_missing",
    "format_missing",
]
