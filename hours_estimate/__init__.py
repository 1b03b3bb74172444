"""
Hours-Estimate: 节省时长估算工具

根据选定的分析类型、小时输入和启用的功能项，
估算可节省的小时数并给出不足一小时部分的秒数。
"""

__version__ = "0.1.0"

from .catalog.base import AnalysisType, FeatureDefinition, TimeBucketRule
from .catalog.registry import CatalogRegistry
from .estimator.base import EstimationEngine, EstimationResult

__all__ = [
    "AnalysisType",
    "FeatureDefinition",
    "TimeBucketRule",
    "CatalogRegistry",
    "EstimationEngine",
    "EstimationResult",
]
