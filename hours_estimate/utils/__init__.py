"""
工具模块

提供结果格式化等辅助功能。
"""

from .formatters import (
    format_hours,
    format_seconds,
    format_display_lines,
    format_result,
    format_breakdown,
)

__all__ = [
    "format_hours",
    "format_seconds",
    "format_display_lines",
    "format_result",
    "format_breakdown",
]
