#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字引擎共享日志工具

引擎各模块统一挂在 "bazi_engine" 日志树下，输出时吞掉 Broken pipe，
避免客户端断开连接时计算线程因写日志失败而中断。
"""

import logging

ENGINE_LOGGER_NAME = "bazi_engine"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class SafeStreamHandler(logging.StreamHandler):
    """安全的 StreamHandler，捕获 Broken pipe 异常"""
    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, OSError):
            pass


logger = logging.getLogger(ENGINE_LOGGER_NAME)
if not logger.handlers:
    _handler = SafeStreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False


def get_engine_logger(module_name: str) -> logging.Logger:
    """获取引擎子模块 logger，如 bazi_engine.dayun_liunian"""
    return logger.getChild(module_name.rsplit('.', 1)[-1])


def set_engine_log_level(level) -> None:
    """调整引擎日志级别（接受 'DEBUG' 之类的名称或 logging 常量）"""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)


def safe_log(level, message, module_name=None):
    """
    安全的日志输出函数，捕获 Broken pipe 等异常

    Args:
        level: info/warning/error/debug，未知级别按 info 处理
        message: 日志内容
        module_name: 子模块名，为空时写入根 logger
    """
    target = get_engine_logger(module_name) if module_name else logger
    log_func = getattr(target, level, None) if level in ('info', 'warning', 'error', 'debug') else None
    try:
        (log_func or target.info)(message)
    except (BrokenPipeError, OSError):
        pass
