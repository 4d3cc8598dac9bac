#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
基础API响应模型

提供统一的API响应格式
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar('T')


class BaseAPIResponse(BaseModel, Generic[T]):
    """
    基础API响应模型

    使用示例：
        BaseAPIResponse[BaziReport](success=True, data=report)
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "data": {},
                "error": None,
                "message": None
            }
        }
    )

    success: bool = Field(..., description="是否成功")
    data: Optional[T] = Field(None, description="返回数据")
    error: Optional[str] = Field(None, description="错误信息")
    message: Optional[str] = Field(None, description="响应消息")
