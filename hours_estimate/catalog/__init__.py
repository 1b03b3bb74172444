"""
目录管理模块

提供分析类型、时间分段规则和功能项的固定配置，
以及对这些配置的只读查询功能。
"""

from .base import AnalysisType, FeatureDefinition, TimeBucketRule
from .registry import CatalogRegistry

__all__ = [
    "AnalysisType",
    "FeatureDefinition",
    "TimeBucketRule",
    "CatalogRegistry",
]
