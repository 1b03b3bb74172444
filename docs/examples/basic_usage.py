#!/usr/bin/env python3
"""
Hours-Estimate 基本使用示例

演示如何使用估算引擎，以及如何以订阅方式接收结果。
"""

import sys
import os

# 添加项目根目录到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from hours_estimate import CatalogRegistry, EstimationEngine
from hours_estimate.utils.formatters import format_display_lines


def main():
    """主函数"""
    print("=== Hours-Estimate 基本使用示例 ===\n")

    # 1. 查看支持的分析类型
    registry = CatalogRegistry()
    print("支持的分析类型:")
    for analysis_type in registry.list_analysis_types():
        print(f"  - {analysis_type.value} ({registry.get_default_hours(analysis_type):g} 小时)")
    print()

    # 2. 创建估算引擎，并订阅结果变化
    engine = EstimationEngine(registry=registry)
    engine.subscribe(lambda result: print("  -> " + " / ".join(format_display_lines(result))))

    # 3. 模拟界面操作
    print("切换到 Compliance Analysis:")
    engine.set_analysis_type("Compliance Analysis")

    print("将小时数改为 12.5:")
    engine.set_hour_input("12.5")

    print("启用 Data Consistency:")
    engine.set_feature_enabled("Data Consistency", True)

    # 4. 主动拉取结果
    result = engine.compute_result()
    print(f"\n节省小时数: {result.hours_saved:.3f}")
    print(f"剩余秒数: {result.remainder_seconds:.3f}")

    print("\n=== 示例完成 ===")


if __name__ == "__main__":
    main()
