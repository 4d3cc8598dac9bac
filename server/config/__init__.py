# -*- coding: utf-8 -*-
"""
配置模块
"""

from .app_config import AppConfig, ReportConfig, get_config, reload_config
from .env_config import EnvConfig, get_env_config, reset_env_config

__all__ = ['AppConfig', 'ReportConfig', 'get_config', 'reload_config',
           'EnvConfig', 'get_env_config', 'reset_env_config']
