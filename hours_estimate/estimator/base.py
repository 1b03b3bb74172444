"""
节省时长估算引擎

根据选定的分析类型、小时输入和启用的功能项计算节省的小时数，
并拆分出不足一小时部分的秒数。
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Any

from ..catalog.base import AnalysisType
from ..catalog.configs import (
    DEFAULT_ANALYSIS_TYPE,
    DEFAULT_ENABLED_FEATURES,
    FIXED_DEDUCTION_HOURS,
    MAX_HOURS,
    MIN_HOURS,
    SECONDS_PER_HOUR,
)
from ..catalog.registry import CatalogRegistry

logger = logging.getLogger(__name__)

# 与 parseFloat 一致：只取开头的数字部分
_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_LEADING_INFINITY = re.compile(r"^([+-]?)Infinity")


@dataclass(frozen=True)
class EstimationResult:
    """估算结果"""
    hours_saved: float        # 节省小时数，>= 0
    remainder_seconds: float  # 不足整小时部分的秒数，[0, 3600)

    def to_dict(self) -> Dict[str, float]:
        return {
            "hours_saved": self.hours_saved,
            "remainder_seconds": self.remainder_seconds,
        }


@dataclass(frozen=True)
class FeatureTotals:
    """已启用功能项的汇总"""
    base_sum: float = 0.0
    multiplier_sum: float = 0.0


@dataclass(frozen=True)
class RuleEvaluation:
    """单条时间分段规则的求值结果"""
    rule_key: str
    conditions_met: bool
    multiplier: float
    contribution: float = 0.0


ResultCallback = Callable[[EstimationResult], None]


def parse_hour_value(raw: Any) -> float:
    """
    将任意输入解析为小时数并限制在 [0, 40]

    Args:
        raw: 原始输入（字符串、数字或其他）

    Returns:
        限制范围后的小时数，无法解析时为0
    """
    value = None
    if isinstance(raw, str):
        text = raw.strip()
        match = _LEADING_NUMBER.match(text)
        if match:
            value = float(match.group(0))
        else:
            infinity = _LEADING_INFINITY.match(text)
            if infinity:
                value = -math.inf if infinity.group(1) == "-" else math.inf
    elif raw is not None:
        try:
            value = float(raw)
        except OverflowError:
            # 超出浮点范围的整数按符号视为无穷大
            value = -math.inf if raw < 0 else math.inf
        except (TypeError, ValueError):
            value = None

    if value is None or math.isnan(value):
        logger.warning("Unparseable hour input %r, using 0", raw)
        value = 0.0

    return min(max(value, MIN_HOURS), MAX_HOURS)


class EstimationEngine:
    """节省时长估算引擎主类"""

    def __init__(self,
                 registry: Optional[CatalogRegistry] = None,
                 analysis_type: Optional[Any] = None,
                 enabled_features: Optional[Iterable[str]] = None):
        self.registry = registry or CatalogRegistry()
        self._initial_type = AnalysisType.parse(
            DEFAULT_ANALYSIS_TYPE if analysis_type is None else analysis_type
        )
        self._initial_features = frozenset(
            DEFAULT_ENABLED_FEATURES if enabled_features is None else enabled_features
        )
        self._subscribers: List[ResultCallback] = []

        self._analysis_type = self._initial_type
        self._hours = parse_hour_value(self.registry.get_default_hours(self._initial_type))
        self._enabled_features = set(self._initial_features)
        self._last_result = self.compute_result()

    @property
    def last_result(self) -> EstimationResult:
        """最近一次状态变更后的估算结果"""
        return self._last_result

    @property
    def analysis_type(self) -> AnalysisType:
        """当前分析类型"""
        return self._analysis_type

    @property
    def hours(self) -> float:
        """当前小时输入"""
        return self._hours

    @property
    def enabled_features(self) -> FrozenSet[str]:
        """当前启用的功能项"""
        return frozenset(self._enabled_features)

    def subscribe(self, callback: ResultCallback) -> Callable[[], None]:
        """
        订阅结果变化

        每次状态变更后按订阅顺序推送新的估算结果。

        Args:
            callback: 接收 EstimationResult 的回调

        Returns:
            取消订阅的函数
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def set_analysis_type(self, analysis_type: Any) -> None:
        """
        设置分析类型，并将小时输入重置为该类型的默认值

        无法识别的类型会被忽略，状态保持不变。
        """
        try:
            selected = AnalysisType.parse(analysis_type)
        except ValueError:
            logger.warning("Ignoring unsupported analysis type %r", analysis_type)
            return

        self._analysis_type = selected
        self._hours = parse_hour_value(self.registry.get_default_hours(selected))
        self._notify()

    def set_hour_input(self, raw: Any) -> None:
        """设置小时输入（解析后限制在 [0, 40]）"""
        self._hours = parse_hour_value(raw)
        self._notify()

    def set_feature_enabled(self, name: str, enabled: bool) -> None:
        """启用或停用功能项，未知名称也会保存但不参与计算"""
        if enabled:
            self._enabled_features.add(name)
        else:
            self._enabled_features.discard(name)
        self._notify()

    def reset(self) -> None:
        """恢复到构造时的初始状态"""
        self._analysis_type = self._initial_type
        self._hours = parse_hour_value(self.registry.get_default_hours(self._initial_type))
        self._enabled_features = set(self._initial_features)
        self._notify()

    def check_conditions(self, rule_key: str) -> RuleEvaluation:
        """检查单条规则在当前分析类型下是否满足"""
        rule = self.registry.get_rule(rule_key)
        return RuleEvaluation(
            rule_key=rule_key,
            conditions_met=rule.is_satisfied(self._analysis_type),
            multiplier=rule.base_multiplier,
        )

    def calculate_feature_values(self) -> FeatureTotals:
        """汇总已启用功能项的基础值和乘数，忽略目录外的名称"""
        base_sum = 0.0
        multiplier_sum = 0.0

        for name in self._enabled_features:
            if self.registry.has_feature(name):
                feature = self.registry.get_feature(name)
                base_sum += feature.base_value
                multiplier_sum += feature.multiplier

        return FeatureTotals(base_sum=base_sum, multiplier_sum=multiplier_sum)

    def evaluate_rules(self) -> List[RuleEvaluation]:
        """
        按顺序求值所有时间分段规则

        Returns:
            每条规则的求值结果及其对总时长的贡献
        """
        totals = self.calculate_feature_values()
        evaluations = []

        # 逐条求值，不假设最多只有一条规则满足
        for rule_key in self.registry.list_rules():
            check = self.check_conditions(rule_key)
            contribution = 0.0
            if check.conditions_met:
                contribution = self._hours * check.multiplier * (1 + totals.multiplier_sum)
            evaluations.append(RuleEvaluation(
                rule_key=rule_key,
                conditions_met=check.conditions_met,
                multiplier=check.multiplier,
                contribution=contribution,
            ))

        return evaluations

    def compute_result(self) -> EstimationResult:
        """
        计算节省的小时数

        Returns:
            估算结果；计算出现异常时返回全零结果
        """
        try:
            totals = self.calculate_feature_values()
            time_based_total = sum(e.contribution for e in self.evaluate_rules())

            # 固定扣除 0.004 小时
            adjusted_total = max(0.0, time_based_total + totals.base_sum - FIXED_DEDUCTION_HOURS)

            total_seconds = adjusted_total * SECONDS_PER_HOUR
            whole_hours = math.floor(adjusted_total)
            remainder_seconds = total_seconds - whole_hours * SECONDS_PER_HOUR
            remainder_seconds = min(max(remainder_seconds, 0.0), math.nextafter(SECONDS_PER_HOUR, 0))

            logger.debug(
                "Computed %s: hours=%s base_sum=%s multiplier_sum=%s total=%s",
                self._analysis_type.value, self._hours, totals.base_sum,
                totals.multiplier_sum, adjusted_total,
            )
            return EstimationResult(hours_saved=adjusted_total, remainder_seconds=remainder_seconds)
        except (ArithmeticError, TypeError, ValueError):
            logger.exception("Calculation error")
            return EstimationResult(hours_saved=0.0, remainder_seconds=0.0)

    def get_state(self) -> Dict[str, Any]:
        """获取当前状态（供展示层同步控件）"""
        return {
            "analysis_type": self._analysis_type.value,
            "hours": self._hours,
            "enabled_features": sorted(self._enabled_features),
        }

    def _notify(self) -> None:
        """重新计算并推送给订阅者"""
        result = self.compute_result()
        self._last_result = result

        for callback in list(self._subscribers):
            try:
                callback(result)
            except Exception:
                logger.exception("Result subscriber %r failed", callback)
