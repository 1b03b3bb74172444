"""
参考配置表

定义各分析类型的默认小时数、时间分段规则以及功能项的基础值和乘数。
"""

from .base import AnalysisType

# 小时输入的取值范围
MIN_HOURS = 0.0
MAX_HOURS = 40.0

# 每次计算固定扣除的小时数
FIXED_DEDUCTION_HOURS = 0.004

SECONDS_PER_HOUR = 3600

# 各分析类型的默认小时数
DEFAULT_HOURS = {
    AnalysisType.FRAUD_DETECTION: 16,
    AnalysisType.MA_ANALYSIS: 5,
    AnalysisType.FINANCIAL_HEALTH: 4,
    AnalysisType.COMPLIANCE_ANALYSIS: 8,
    AnalysisType.BENCHMARKING: 3,
    AnalysisType.CORPORATE_VULNERABILITIES: 6,
    AnalysisType.MANAGEMENT_GOVERNANCE: 5,
    AnalysisType.LEGAL_LITIGATION_REVIEW: 7,
    AnalysisType.REGULATORY_COMPLIANCE_REVIEW: 7,
    AnalysisType.SEGMENT_REPORTING_ANALYSIS: 7,
    AnalysisType.EARNINGS_QUALITY_ANALYSIS: 8,
    AnalysisType.MATERIAL_CONTRACT_REVIEW: 5,
}

# 时间分段规则，按 time1..time12 顺序求值
TIME_BUCKET_RULES = {
    "time1": {
        "must_be": [AnalysisType.FRAUD_DETECTION],
        "must_not_be": [AnalysisType.MA_ANALYSIS],
        "base_multiplier": 1,
    },
    "time2": {
        "must_be": [AnalysisType.MA_ANALYSIS, AnalysisType.FINANCIAL_HEALTH],
        "must_not_be": [AnalysisType.COMPLIANCE_ANALYSIS],
        "base_multiplier": 1,
    },
    "time3": {
        "must_be": [AnalysisType.FINANCIAL_HEALTH, AnalysisType.BENCHMARKING],
        "must_not_be": [AnalysisType.FRAUD_DETECTION],
        "base_multiplier": 1,
    },
    "time4": {
        "must_be": [AnalysisType.COMPLIANCE_ANALYSIS, AnalysisType.CORPORATE_VULNERABILITIES],
        "must_not_be": [AnalysisType.MA_ANALYSIS],
        "base_multiplier": 1,
    },
    "time5": {
        "must_be": [AnalysisType.BENCHMARKING, AnalysisType.MANAGEMENT_GOVERNANCE],
        "must_not_be": [AnalysisType.FINANCIAL_HEALTH],
        "base_multiplier": 1,
    },
    "time6": {
        "must_be": [AnalysisType.CORPORATE_VULNERABILITIES, AnalysisType.LEGAL_LITIGATION_REVIEW],
        "must_not_be": [AnalysisType.COMPLIANCE_ANALYSIS],
        "base_multiplier": 1,
    },
    "time7": {
        "must_be": [AnalysisType.MANAGEMENT_GOVERNANCE, AnalysisType.REGULATORY_COMPLIANCE_REVIEW],
        "must_not_be": [AnalysisType.BENCHMARKING],
        "base_multiplier": 1,
    },
    "time8": {
        "must_be": [AnalysisType.LEGAL_LITIGATION_REVIEW, AnalysisType.SEGMENT_REPORTING_ANALYSIS],
        "must_not_be": [AnalysisType.CORPORATE_VULNERABILITIES],
        "base_multiplier": 1,
    },
    "time9": {
        "must_be": [AnalysisType.REGULATORY_COMPLIANCE_REVIEW, AnalysisType.EARNINGS_QUALITY_ANALYSIS],
        "must_not_be": [AnalysisType.MANAGEMENT_GOVERNANCE],
        "base_multiplier": 1,
    },
    "time10": {
        "must_be": [AnalysisType.SEGMENT_REPORTING_ANALYSIS, AnalysisType.MATERIAL_CONTRACT_REVIEW],
        "must_not_be": [AnalysisType.LEGAL_LITIGATION_REVIEW],
        "base_multiplier": 1,
    },
    "time11": {
        "must_be": [AnalysisType.EARNINGS_QUALITY_ANALYSIS],
        "must_not_be": [AnalysisType.REGULATORY_COMPLIANCE_REVIEW],
        "base_multiplier": 1,
    },
    "time12": {
        "must_be": [AnalysisType.MATERIAL_CONTRACT_REVIEW],
        "must_not_be": [AnalysisType.SEGMENT_REPORTING_ANALYSIS],
        "base_multiplier": 1,
    },
}

# 功能项的基础值和乘数
FEATURES = {
    "Red Flag Detection": {"base_value": 3, "multiplier": 1},
    "Hidden Risks Identification": {"base_value": 2, "multiplier": 1},
    "Cross-Document Analysis": {"base_value": 5, "multiplier": 1},
    "Data Consistency": {"base_value": 3, "multiplier": 1},
}

# 初始状态
DEFAULT_ANALYSIS_TYPE = AnalysisType.FRAUD_DETECTION
DEFAULT_ENABLED_FEATURES = (
    "Red Flag Detection",
    "Hidden Risks Identification",
    "Cross-Document Analysis",
)
