"""
CLI命令实现

提供命令行界面的具体命令实现，作为估算引擎的展示层。
"""

import logging
from typing import Optional, Tuple

import click
from tabulate import tabulate

from .. import __version__
from ..catalog.base import AnalysisType
from ..catalog.registry import CatalogRegistry
from ..config.settings import configure_logging, get_settings
from ..estimator.base import EstimationEngine
from ..utils.formatters import format_breakdown, format_display_lines, format_result

logger = logging.getLogger(__name__)

ANALYSIS_TYPE_CHOICES = [t.value for t in AnalysisType]


@click.group()
@click.version_option(version=__version__, prog_name="hours-estimate")
def cli():
    """节省时长估算工具

    根据分析类型、小时输入和启用的功能项估算节省的小时数。
    """
    configure_logging(get_settings())


@cli.command()
@click.option("--type", "-t", "analysis_type", type=click.Choice(ANALYSIS_TYPE_CHOICES),
              help="分析类型（默认取配置中的 default_analysis_type）")
@click.option("--hours", "-H", help="小时数 (0-40)，不指定时使用分析类型的默认值")
@click.option("--feature", "-F", "features", multiple=True, help="启用的功能项，可重复指定")
@click.option("--no-default-features", is_flag=True, help="不启用默认功能项")
@click.option("--output-file", type=click.Path(), help="输出文件路径")
@click.option("--format", "-f", "output_format", type=click.Choice(["table", "json", "csv", "text"]),
              help="输出格式")
@click.option("--verbose", "-v", is_flag=True, help="显示规则求值明细")
def estimate(analysis_type: Optional[str], hours: Optional[str], features: Tuple[str, ...],
             no_default_features: bool, output_file: Optional[str],
             output_format: Optional[str], verbose: bool):
    """估算节省的小时数"""
    settings = get_settings()
    output_format = output_format or settings.default_output_format

    try:
        registry = CatalogRegistry()
        engine = EstimationEngine(
            registry=registry,
            analysis_type=analysis_type or settings.default_analysis_type,
            enabled_features=() if no_default_features else None,
        )

        # 依次应用：分析类型、小时数、功能项
        if hours is not None:
            engine.set_hour_input(hours)

        _, unknown = registry.split_known_features(features)
        for name in unknown:
            click.echo(f"警告: 未知功能项 '{name}' 将被忽略", err=True)
        for name in features:
            engine.set_feature_enabled(name, True)

        result = engine.compute_result()
        state = engine.get_state()

        if output_format == "text":
            formatted = "\n".join(format_display_lines(result, settings.decimal_places))
        else:
            formatted = format_result(result, output_format, state, settings.decimal_places)

        if verbose and output_format in ("table", "text"):
            formatted += "\n\n" + format_breakdown(
                engine.evaluate_rules(), engine.calculate_feature_values(), settings.decimal_places
            )

        if output_file:
            with open(output_file, 'w', encoding='utf-8') as f:
                f.write(formatted)
            click.echo(f"结果已保存到: {output_file}")
        else:
            click.echo(formatted)

    except Exception as e:
        logger.debug("estimate failed", exc_info=True)
        click.echo(f"错误: {e}", err=True)
        raise click.Abort()


@cli.command()
def list_types():
    """列出支持的分析类型"""
    registry = CatalogRegistry()
    data = [
        [analysis_type.value, f"{registry.get_default_hours(analysis_type):g}"]
        for analysis_type in registry.list_analysis_types()
    ]
    headers = ["分析类型", "默认小时数"]
    click.echo(tabulate(data, headers=headers, tablefmt="grid", disable_numparse=True))


@cli.command()
@click.option("--search", "-s", help="按名称筛选")
def list_features(search: Optional[str]):
    """列出支持的功能项"""
    registry = CatalogRegistry()
    names = registry.search_features(search) if search else registry.list_features()

    if not names:
        click.echo("没有匹配的功能项")
        return

    data = []
    for name in names:
        feature = registry.get_feature(name)
        data.append([feature.name, f"{feature.base_value:g}", f"{feature.multiplier:g}"])

    headers = ["功能项", "基础值", "乘数"]
    click.echo(tabulate(data, headers=headers, tablefmt="grid", disable_numparse=True))


@cli.command()
def list_rules():
    """列出时间分段规则"""
    registry = CatalogRegistry()
    data = []
    for rule_key in registry.list_rules():
        info = registry.get_rule_info(rule_key)
        data.append([
            info["key"],
            "\n".join(info["must_be"]),
            "\n".join(info["must_not_be"]),
            f"{info['base_multiplier']:g}",
        ])

    headers = ["规则", "必须为", "必须不为", "基础乘数"]
    click.echo(tabulate(data, headers=headers, tablefmt="grid", disable_numparse=True))


def main():
    """主程序入口"""
    cli()


if __name__ == "__main__":
    main()
