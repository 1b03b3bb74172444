"""
估算引擎模块

提供节省时长的核心计算：条件求值、功能项汇总和最终结果拆分。
"""

from .base import (
    EstimationEngine,
    EstimationResult,
    FeatureTotals,
    RuleEvaluation,
    parse_hour_value,
)

__all__ = [
    "EstimationEngine",
    "EstimationResult",
    "FeatureTotals",
    "RuleEvaluation",
    "parse_hour_value",
]
