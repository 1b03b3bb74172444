"""
数据格式化工具

提供估算结果的显示格式化功能。
"""

import json
from typing import Any, Dict, List, Optional
from tabulate import tabulate

from ..estimator.base import EstimationResult, FeatureTotals, RuleEvaluation

HOURS_SUFFIX = "Hours Saved"
SECONDS_SUFFIX = "seconds"


def format_hours(value: float, decimal_places: int = 3) -> str:
    """
    格式化小时数（千位分隔符，固定小数位）

    Args:
        value: 小时数
        decimal_places: 小数位数

    Returns:
        如 "1,234.500"
    """
    return f"{value:,.{decimal_places}f}"


def format_seconds(value: float, decimal_places: int = 3) -> str:
    """格式化秒数（无千位分隔符）"""
    return f"{value:.{decimal_places}f}"


def format_display_lines(result: EstimationResult, decimal_places: int = 3) -> List[str]:
    """生成界面显示的两行文本"""
    return [
        f"{format_hours(result.hours_saved, decimal_places)} {HOURS_SUFFIX}",
        f"{format_seconds(result.remainder_seconds, decimal_places)} {SECONDS_SUFFIX}",
    ]


def format_result(result: EstimationResult, format_type: str = "table",
                  state: Optional[Dict[str, Any]] = None,
                  decimal_places: int = 3) -> str:
    """
    格式化估算结果

    Args:
        result: 估算结果
        format_type: 输出格式 ("table", "json", "csv")
        state: 引擎状态，提供时一并输出
        decimal_places: 小数位数

    Returns:
        格式化后的字符串
    """
    if format_type == "json":
        payload = dict(state or {})
        payload.update(result.to_dict())
        return json.dumps(payload, indent=2, ensure_ascii=False)

    elif format_type == "csv":
        return format_result_csv(result, state)

    else:  # table format
        return format_result_table(result, state, decimal_places)


def format_result_table(result: EstimationResult,
                        state: Optional[Dict[str, Any]] = None,
                        decimal_places: int = 3) -> str:
    """格式化为表格形式"""
    lines = []

    lines.append("=== 节省时长估算结果 ===\n")

    if state:
        lines.append(f"分析类型: {state.get('analysis_type', 'N/A')}")
        lines.append(f"小时输入: {state.get('hours', 0):g}")
        features = state.get("enabled_features") or []
        lines.append(f"启用功能: {', '.join(features) if features else '无'}")
        lines.append("")

    data = [
        [HOURS_SUFFIX, format_hours(result.hours_saved, decimal_places)],
        [SECONDS_SUFFIX, format_seconds(result.remainder_seconds, decimal_places)],
    ]
    lines.append(tabulate(data, headers=["指标", "值"], tablefmt="grid", disable_numparse=True))

    return "\n".join(lines)


def format_result_csv(result: EstimationResult,
                      state: Optional[Dict[str, Any]] = None) -> str:
    """格式化为CSV形式"""
    state = state or {}
    headers = ["analysis_type", "hours", "enabled_features", "hours_saved", "remainder_seconds"]
    values = [
        _csv_field(state.get("analysis_type", "")),
        str(state.get("hours", "")),
        _csv_field(";".join(state.get("enabled_features", []))),
        str(result.hours_saved),
        str(result.remainder_seconds),
    ]
    return "\n".join([",".join(headers), ",".join(values)])


def format_breakdown(evaluations: List[RuleEvaluation], totals: FeatureTotals,
                     decimal_places: int = 3) -> str:
    """
    格式化规则求值明细和功能项汇总

    Args:
        evaluations: 各规则的求值结果
        totals: 功能项汇总

    Returns:
        明细表格字符串
    """
    rule_data = [
        [e.rule_key, "是" if e.conditions_met else "否", f"{e.multiplier:g}",
         format_hours(e.contribution, decimal_places)]
        for e in evaluations
    ]
    lines = [
        "规则求值明细:",
        tabulate(rule_data, headers=["规则", "满足", "基础乘数", "贡献(小时)"],
                 tablefmt="grid", disable_numparse=True),
        "",
        f"功能基础值合计: {totals.base_sum:g}",
        f"功能乘数合计: {totals.multiplier_sum:g}",
    ]
    return "\n".join(lines)


def _csv_field(value: str) -> str:
    """必要时为CSV字段加引号"""
    if any(ch in value for ch in ',"\n'):
        return '"' + value.replace('"', '""') + '"'
    return value
