# -*- coding: utf-8 -*-
"""
服务器工具模块
"""

from .base_models import BaseAPIResponse
from .exception_handler import (
    BusinessError,
    ExceptionHandlerMiddleware,
    NotFoundError,
    api_error_handler,
)

__all__ = [
    'BaseAPIResponse',
    'BusinessError',
    'ExceptionHandlerMiddleware',
    'NotFoundError',
    'api_error_handler',
]
