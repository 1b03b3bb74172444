"""
测试目录注册表
"""

import pytest

from hours_estimate.catalog.base import AnalysisType, FeatureDefinition
from hours_estimate.catalog.configs import DEFAULT_HOURS
from hours_estimate.catalog.registry import CatalogRegistry


class TestAnalysisType:
    """测试分析类型解析"""

    def test_twelve_types(self):
        assert len(AnalysisType) == 12

    def test_parse_label(self):
        assert AnalysisType.parse("M&A Analysis") is AnalysisType.MA_ANALYSIS
        assert AnalysisType.parse(" Benchmarking ") is AnalysisType.BENCHMARKING
        assert AnalysisType.parse("FRAUD_DETECTION") is AnalysisType.FRAUD_DETECTION
        assert AnalysisType.parse(AnalysisType.BENCHMARKING) is AnalysisType.BENCHMARKING

    @pytest.mark.parametrize("value", ["fraud detection", "", None, 3])
    def test_parse_rejects_unknown(self, value):
        with pytest.raises(ValueError):
            AnalysisType.parse(value)


class TestDefaultCatalog:
    """测试参考配置"""

    def test_default_hours(self, registry):
        assert registry.get_default_hours("Fraud Detection") == 16
        assert registry.get_default_hours(AnalysisType.BENCHMARKING) == 3
        assert all(3 <= hours <= 16 for hours in registry.default_hours.values())

    def test_types_in_enum_order(self, registry):
        assert registry.list_analysis_types() == list(AnalysisType)

    def test_rules_in_order(self, registry):
        assert registry.list_rules() == [f"time{i}" for i in range(1, 13)]

    def test_rule_info(self, registry):
        info = registry.get_rule_info("time2")
        assert info == {
            "key": "time2",
            "must_be": ["M&A Analysis", "Financial Health"],
            "must_not_be": ["Compliance Analysis"],
            "base_multiplier": 1.0,
        }

    def test_features(self, registry):
        feature = registry.get_feature("Cross-Document Analysis")
        assert feature == FeatureDefinition("Cross-Document Analysis", 5.0, 1.0)
        assert len(registry.list_features()) == 4

    def test_unknown_lookups(self, registry):
        with pytest.raises(ValueError):
            registry.get_feature("Nonexistent Feature")
        with pytest.raises(ValueError):
            registry.get_rule("time0")
        with pytest.raises(ValueError):
            registry.get_default_hours("Astrology")

    def test_search_features(self, registry):
        assert registry.search_features("data") == ["Data Consistency"]
        assert registry.search_features("zzz") == []

    def test_split_known_features(self, registry):
        known, unknown = registry.split_known_features(
            ["Data Consistency", "Nonexistent Feature"]
        )
        assert known == ["Data Consistency"]
        assert unknown == ["Nonexistent Feature"]


class TestImmutability:
    """测试配置只读"""

    def test_tables_are_read_only(self, registry):
        with pytest.raises(TypeError):
            registry.default_hours[AnalysisType.BENCHMARKING] = 99
        with pytest.raises(TypeError):
            registry.features["New"] = None
        with pytest.raises(TypeError):
            del registry.rules["time1"]

    def test_records_are_frozen(self, registry):
        with pytest.raises(AttributeError):
            registry.get_feature("Data Consistency").base_value = 100
        with pytest.raises(AttributeError):
            registry.get_rule("time1").base_multiplier = 2

    def test_injected_tables_are_copied(self):
        hours = dict(DEFAULT_HOURS)
        registry = CatalogRegistry(default_hours=hours)
        hours[AnalysisType.BENCHMARKING] = 30
        assert registry.get_default_hours("Benchmarking") == 3


class TestValidation:
    """测试注入配置的校验"""

    def test_missing_default_hours(self):
        hours = dict(DEFAULT_HOURS)
        del hours[AnalysisType.BENCHMARKING]
        with pytest.raises(ValueError, match="Benchmarking"):
            CatalogRegistry(default_hours=hours)

    def test_negative_default_hours(self):
        hours = dict(DEFAULT_HOURS)
        hours[AnalysisType.BENCHMARKING] = -1
        with pytest.raises(ValueError):
            CatalogRegistry(default_hours=hours)

    def test_rule_with_unknown_type(self):
        with pytest.raises(ValueError):
            CatalogRegistry(rules={"time1": {"must_be": ["Astrology"], "must_not_be": []}})

    def test_negative_feature_values(self):
        with pytest.raises(ValueError):
            CatalogRegistry(features={"Broken": {"base_value": -1, "multiplier": 0}})

    def test_labels_accepted_as_keys(self):
        hours = {t.value: 1 for t in AnalysisType}
        registry = CatalogRegistry(default_hours=hours)
        assert registry.get_default_hours(AnalysisType.MATERIAL_CONTRACT_REVIEW) == 1
