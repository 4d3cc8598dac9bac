#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一应用配置管理
所有配置统一从这里读取，避免配置分散
"""

from dataclasses import dataclass, field
from typing import Optional

from server.config.env_config import get_env_config

DEFAULT_HISTORY_LIMIT = 50


@dataclass
class ReportConfig:
    """报告生成配置"""
    random_seed: Optional[int] = None
    history_limit: int = DEFAULT_HISTORY_LIMIT

    @classmethod
    def from_env(cls) -> 'ReportConfig':
        """
        REPORT_RANDOM_SEED: 固定随机种子，未设置时每次报告使用新的随机源
        REPORT_HISTORY_LIMIT: 历史报告最多保留条数
        """
        env_config = get_env_config()
        limit = env_config.get_int_config('REPORT_HISTORY_LIMIT', default=DEFAULT_HISTORY_LIMIT)
        return cls(
            random_seed=env_config.get_optional_int_config('REPORT_RANDOM_SEED'),
            history_limit=limit if limit > 0 else DEFAULT_HISTORY_LIMIT,
        )


@dataclass
class AppConfig:
    """应用配置"""
    env: str = 'local'
    debug: bool = False
    log_level: str = 'INFO'

    report: ReportConfig = field(default_factory=ReportConfig)

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """从环境变量创建完整配置"""
        env_config = get_env_config()
        return cls(
            env=env_config.env,
            debug=env_config.get_bool_config('DEBUG', default=False),
            log_level=env_config.get_config('LOG_LEVEL', default='INFO').upper(),
            report=ReportConfig.from_env(),
        )


# 全局配置实例（单例模式）
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """获取全局配置实例（单例）"""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reload_config() -> AppConfig:
    """重新加载配置（测试或修改环境变量后调用）"""
    global _config
    _config = AppConfig.from_env()
    return _config
