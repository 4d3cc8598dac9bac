#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字报告请求 / 响应模型
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from core.models import BaziReport, UserInput


class BaziReportRequest(UserInput):
    """生成报告请求 - 在出生信息基础上可选指定随机种子"""
    seed: Optional[int] = Field(None, description="随机种子；指定后相同输入生成相同报告")


class BaziReportResponse(BaseModel):
    """报告响应"""
    success: bool
    data: Optional[BaziReport] = None
    message: Optional[str] = None


class HistorySaveRequest(BaseModel):
    """保存历史报告"""
    user_input: UserInput = Field(..., alias="userInput")
    report: BaziReport

    model_config = {"populate_by_name": True}


class HistoryItem(BaseModel):
    """历史报告摘要"""
    id: str
    created_at: datetime
    name: str
    birth_date: str
    birth_time: str
    gender: str
    pillars: List[str] = Field(..., description="四柱干支")
    total_score: int
