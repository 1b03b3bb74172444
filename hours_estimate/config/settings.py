"""
全局系统设置

定义系统级配置参数和默认值。
"""

import logging
import os
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

ENV_PREFIX = "HOURS_ESTIMATE_"


class Settings(BaseModel):
    """系统设置类"""

    # 日志配置
    log_level: str = Field(default="WARNING", description="日志级别")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="日志格式",
    )

    # 输出配置
    default_output_format: str = Field(default="table", description="默认输出格式")
    decimal_places: int = Field(default=3, ge=0, description="显示的小数位数")

    # 估算默认配置
    default_analysis_type: str = Field(default="Fraud Detection", description="默认分析类型")


class ConfigManager:
    """配置管理器"""

    def __init__(self, environ: Optional[Dict[str, str]] = None):
        self._settings: Optional[Settings] = None
        self._environ = environ

    def get_settings(self) -> Settings:
        """获取设置实例（单例模式）"""
        if self._settings is None:
            self._settings = Settings(**self._read_environment())
        return self._settings

    def _read_environment(self) -> Dict[str, Any]:
        """读取带前缀的环境变量"""
        environ = os.environ if self._environ is None else self._environ
        overrides = {}
        for name in Settings.model_fields:
            key = f"{ENV_PREFIX}{name.upper()}"
            if key in environ:
                overrides[name] = environ[key]
        return overrides

    def update_settings(self, **kwargs) -> None:
        """更新设置"""
        settings = self.get_settings()
        known = {key: value for key, value in kwargs.items() if key in Settings.model_fields}
        self._settings = settings.model_copy(update=known)

    def reset(self) -> None:
        """丢弃缓存的设置，下次读取时重新加载"""
        self._settings = None


# 全局配置管理器实例
config_manager = ConfigManager()


def get_settings() -> Settings:
    """获取全局设置"""
    return config_manager.get_settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """按设置初始化日志"""
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=settings.log_format)
