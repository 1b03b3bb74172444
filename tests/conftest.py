"""
pytest配置文件

定义测试的全局配置和fixture。
"""

import os
import pytest
import sys
from pathlib import Path

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hours_estimate.catalog.registry import CatalogRegistry
from hours_estimate.config.settings import config_manager
from hours_estimate.estimator.base import EstimationEngine


@pytest.fixture
def registry():
    """默认目录注册表"""
    return CatalogRegistry()


@pytest.fixture
def engine(registry):
    """初始状态的估算引擎"""
    return EstimationEngine(registry=registry)


@pytest.fixture
def empty_engine(registry):
    """不启用任何功能项的估算引擎"""
    return EstimationEngine(registry=registry, enabled_features=())


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """每个测试使用干净的全局设置"""
    for key in list(os.environ):
        if key.startswith("HOURS_ESTIMATE_"):
            monkeypatch.delenv(key, raising=False)
    config_manager.reset()
    yield
    config_manager.reset()
