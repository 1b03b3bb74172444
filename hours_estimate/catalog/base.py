"""
基础目录类定义

定义分析类型、功能项和时间分段规则的基础结构。
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet


class AnalysisType(str, Enum):
    """分析类型枚举（固定12种，顺序即界面下拉顺序）"""
    FRAUD_DETECTION = "Fraud Detection"
    MA_ANALYSIS = "M&A Analysis"
    FINANCIAL_HEALTH = "Financial Health"
    COMPLIANCE_ANALYSIS = "Compliance Analysis"
    BENCHMARKING = "Benchmarking"
    CORPORATE_VULNERABILITIES = "Corporate Vulnerabilities"
    MANAGEMENT_GOVERNANCE = "Management & Governance"
    LEGAL_LITIGATION_REVIEW = "Legal & Litigation Review"
    REGULATORY_COMPLIANCE_REVIEW = "Regulatory Compliance Review"
    SEGMENT_REPORTING_ANALYSIS = "Segment Reporting Analysis"
    EARNINGS_QUALITY_ANALYSIS = "Earnings Quality & Impact Analysis"
    MATERIAL_CONTRACT_REVIEW = "Material Contract Review"

    @classmethod
    def parse(cls, value) -> "AnalysisType":
        """
        将标签或枚举值解析为分析类型

        Args:
            value: AnalysisType实例或其显示标签

        Returns:
            对应的分析类型

        Raises:
            ValueError: 无法识别的分析类型
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            label = value.strip()
            for member in cls:
                if member.value == label or member.name == label:
                    return member
        raise ValueError(f"Unsupported analysis type: {value!r}")


@dataclass(frozen=True)
class FeatureDefinition:
    """功能项定义"""
    name: str
    base_value: float  # 累加的基础小时数
    multiplier: float  # 累加到乘数因子 (1 + Σmultiplier)


@dataclass(frozen=True)
class TimeBucketRule:
    """时间分段规则"""
    key: str
    must_be: FrozenSet[AnalysisType]
    must_not_be: FrozenSet[AnalysisType]
    base_multiplier: float = 1.0

    def is_satisfied(self, analysis_type: AnalysisType) -> bool:
        """当前分析类型是否满足该规则"""
        return analysis_type in self.must_be and analysis_type not in self.must_not_be
