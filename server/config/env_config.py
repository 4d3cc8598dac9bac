#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一环境配置管理

提供统一的环境判断和配置读取，所有环境变量从这里取值
"""

import os
from typing import Literal, Optional

# 环境类型定义
Environment = Literal["local", "staging", "production"]


class EnvConfig:
    """
    统一环境配置管理器

    提供统一的环境判断和配置读取接口
    """

    def __init__(self):
        self._env: Environment = self._detect_environment()

    @staticmethod
    def _detect_environment() -> Environment:
        """优先读取 ENV，其次 APP_ENV，默认 local"""
        env_value = os.getenv("ENV", os.getenv("APP_ENV", "local")).lower()
        if env_value in ("staging", "stage"):
            return "staging"
        if env_value in ("prod", "production"):
            return "production"
        # 未知环境按本地开发处理
        return "local"

    @property
    def env(self) -> Environment:
        return self._env

    @property
    def is_local_dev(self) -> bool:
        return self._env == "local"

    @property
    def is_production(self) -> bool:
        return self._env == "production"

    def get_config(self, key: str, default: str = None, required: bool = False) -> Optional[str]:
        """
        获取配置值（从环境变量）

        Raises:
            ValueError: 如果 required=True 且配置不存在
        """
        value = os.getenv(key, default)
        if required and value is None:
            raise ValueError(f"必需的环境变量 {key} 未设置")
        return value

    def get_bool_config(self, key: str, default: bool = False) -> bool:
        value = os.getenv(key, str(default)).lower()
        return value in ("true", "1", "yes", "on")

    def get_int_config(self, key: str, default: int = 0) -> int:
        """整数配置，无法解析时返回默认值"""
        value = os.getenv(key, str(default))
        try:
            return int(value)
        except ValueError:
            return default

    def get_optional_int_config(self, key: str) -> Optional[int]:
        """未设置或为空时返回 None"""
        value = os.getenv(key)
        if value is None or not value.strip():
            return None
        try:
            return int(value)
        except ValueError:
            return None


# 全局单例实例
_env_config: Optional[EnvConfig] = None


def get_env_config() -> EnvConfig:
    """获取环境配置实例（全局单例）"""
    global _env_config
    if _env_config is None:
        _env_config = EnvConfig()
    return _env_config


def reset_env_config():
    """丢弃缓存的环境判断，下次读取时重新检测"""
    global _env_config
    _env_config = None


def is_production() -> bool:
    return get_env_config().is_production
