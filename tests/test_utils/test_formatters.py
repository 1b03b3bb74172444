"""
测试结果格式化
"""

import json

from hours_estimate.estimator.base import EstimationResult
from hours_estimate.utils.formatters import (
    format_breakdown,
    format_display_lines,
    format_hours,
    format_result,
    format_seconds,
)


def test_format_hours():
    assert format_hours(73.996) == "73.996"
    assert format_hours(1234.5) == "1,234.500"
    assert format_hours(0) == "0.000"
    assert format_hours(2.5, decimal_places=1) == "2.5"


def test_format_seconds():
    assert format_seconds(3585.6000000000233) == "3585.600"
    assert format_seconds(0) == "0.000"


def test_display_lines():
    result = EstimationResult(hours_saved=73.996, remainder_seconds=3585.6)
    assert format_display_lines(result) == ["73.996 Hours Saved", "3585.600 seconds"]


def test_json_output():
    result = EstimationResult(hours_saved=4.5, remainder_seconds=1800.0)
    payload = json.loads(format_result(result, "json", {"analysis_type": "Benchmarking"}))
    assert payload == {
        "analysis_type": "Benchmarking",
        "hours_saved": 4.5,
        "remainder_seconds": 1800.0,
    }


def test_csv_output_quotes_fields():
    result = EstimationResult(hours_saved=4.5, remainder_seconds=1800.0)
    state = {
        "analysis_type": "M&A Analysis",
        "hours": 5.0,
        "enabled_features": ["Red Flag Detection", "Data, Consistency"],
    }
    lines = format_result(result, "csv", state).splitlines()
    assert lines[0] == "analysis_type,hours,enabled_features,hours_saved,remainder_seconds"
    assert lines[1] == 'M&A Analysis,5.0,"Red Flag Detection;Data, Consistency",4.5,1800.0'


def test_table_output():
    result = EstimationResult(hours_saved=1234.5, remainder_seconds=1800.0)
    output = format_result(result, "table", {
        "analysis_type": "Benchmarking",
        "hours": 3.0,
        "enabled_features": [],
    })
    assert "Hours Saved" in output
    assert "1,234.500" in output
    assert "1800.000" in output
    assert "Benchmarking" in output


def test_breakdown(engine):
    output = format_breakdown(engine.evaluate_rules(), engine.calculate_feature_values())
    assert "time1" in output
    assert "time12" in output
    assert "64.000" in output


def test_table_keeps_fixed_decimals():
    result = EstimationResult(hours_saved=2.0, remainder_seconds=0.0)
    output = format_result(result, "table")
    assert "| 2.000" in output
    assert "| 0.000" in output


def test_breakdown_keeps_fixed_decimals(empty_engine):
    empty_engine.set_analysis_type("M&A Analysis")
    output = format_breakdown(empty_engine.evaluate_rules(), empty_engine.calculate_feature_values())
    # 未满足的规则贡献也保持三位小数
    assert "0.000" in output
    assert "5.000" in output
