"""
目录注册表

统一管理分析类型默认值、时间分段规则和功能项定义，
构造后以只读映射对外提供，运行期间不可修改。
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .base import AnalysisType, FeatureDefinition, TimeBucketRule
from .configs import DEFAULT_HOURS, FEATURES, TIME_BUCKET_RULES

logger = logging.getLogger(__name__)


class CatalogRegistry:
    """目录注册表类"""

    def __init__(self,
                 default_hours: Optional[Mapping[Any, float]] = None,
                 rules: Optional[Mapping[str, Mapping[str, Any]]] = None,
                 features: Optional[Mapping[str, Mapping[str, float]]] = None):
        self._default_hours = MappingProxyType(
            self._load_default_hours(DEFAULT_HOURS if default_hours is None else default_hours)
        )
        self._rules = MappingProxyType(
            self._load_rules(TIME_BUCKET_RULES if rules is None else rules)
        )
        self._features = MappingProxyType(
            self._load_features(FEATURES if features is None else features)
        )

    @staticmethod
    def _load_default_hours(table: Mapping[Any, float]) -> Dict[AnalysisType, float]:
        """加载默认小时数，每个分析类型都必须有默认值"""
        loaded = {}
        for key, hours in table.items():
            analysis_type = AnalysisType.parse(key)
            if hours < 0:
                raise ValueError(f"Default hours must be non-negative: {analysis_type.value}={hours}")
            loaded[analysis_type] = hours

        missing = [t.value for t in AnalysisType if t not in loaded]
        if missing:
            raise ValueError(f"Missing default hours for: {', '.join(missing)}")

        # 按枚举顺序保存
        return {t: loaded[t] for t in AnalysisType}

    @staticmethod
    def _load_rules(table: Mapping[str, Mapping[str, Any]]) -> Dict[str, TimeBucketRule]:
        """加载时间分段规则（保持给定顺序）"""
        loaded = {}
        for key, entry in table.items():
            loaded[key] = TimeBucketRule(
                key=key,
                must_be=frozenset(AnalysisType.parse(t) for t in entry.get("must_be", ())),
                must_not_be=frozenset(AnalysisType.parse(t) for t in entry.get("must_not_be", ())),
                base_multiplier=float(entry.get("base_multiplier", 1)),
            )
        return loaded

    @staticmethod
    def _load_features(table: Mapping[str, Mapping[str, float]]) -> Dict[str, FeatureDefinition]:
        """加载功能项定义"""
        loaded = {}
        for name, entry in table.items():
            base_value = float(entry["base_value"])
            multiplier = float(entry["multiplier"])
            if base_value < 0 or multiplier < 0:
                raise ValueError(f"Feature values must be non-negative: {name}")
            loaded[name] = FeatureDefinition(name=name, base_value=base_value, multiplier=multiplier)
        return loaded

    @property
    def default_hours(self) -> Mapping[AnalysisType, float]:
        """各分析类型的默认小时数（只读）"""
        return self._default_hours

    @property
    def rules(self) -> Mapping[str, TimeBucketRule]:
        """时间分段规则（只读，保持求值顺序）"""
        return self._rules

    @property
    def features(self) -> Mapping[str, FeatureDefinition]:
        """功能项定义（只读）"""
        return self._features

    def get_default_hours(self, analysis_type) -> float:
        """
        获取分析类型的默认小时数

        Args:
            analysis_type: 分析类型或其标签

        Returns:
            默认小时数
        """
        return self._default_hours[AnalysisType.parse(analysis_type)]

    def get_rule(self, rule_key: str) -> TimeBucketRule:
        """获取时间分段规则"""
        if rule_key not in self._rules:
            raise ValueError(f"Unknown time bucket rule: {rule_key}")
        return self._rules[rule_key]

    def get_feature(self, name: str) -> FeatureDefinition:
        """获取功能项定义"""
        if name not in self._features:
            raise ValueError(f"Unknown feature: {name}")
        return self._features[name]

    def has_feature(self, name: str) -> bool:
        return name in self._features

    def list_analysis_types(self) -> List[AnalysisType]:
        """获取所有分析类型（枚举顺序）"""
        return list(self._default_hours.keys())

    def list_features(self) -> List[str]:
        """获取所有功能项名称"""
        return list(self._features.keys())

    def list_rules(self) -> List[str]:
        """获取所有规则键（求值顺序）"""
        return list(self._rules.keys())

    def get_rule_info(self, rule_key: str) -> Dict[str, Any]:
        """
        获取规则信息

        Args:
            rule_key: 规则键

        Returns:
            规则信息字典，分析类型按枚举顺序排列
        """
        rule = self.get_rule(rule_key)
        return {
            "key": rule.key,
            "must_be": [t.value for t in AnalysisType if t in rule.must_be],
            "must_not_be": [t.value for t in AnalysisType if t in rule.must_not_be],
            "base_multiplier": rule.base_multiplier,
        }

    def search_features(self, query: str) -> List[str]:
        """
        搜索功能项

        Args:
            query: 搜索关键词

        Returns:
            匹配的功能项名称列表
        """
        query = query.lower()
        return [name for name in self._features if query in name.lower()]

    def split_known_features(self, names) -> Tuple[List[str], List[str]]:
        """将功能项名称分为已知和未知两组"""
        known, unknown = [], []
        for name in names:
            (known if name in self._features else unknown).append(name)
        if unknown:
            logger.debug("Features outside catalog: %s", unknown)
        return known, unknown
