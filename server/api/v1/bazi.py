#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字报告API接口
"""

import asyncio
import logging
import os
import random
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from fastapi import APIRouter

from core.models import UserInput
from server.api.v1.models.bazi_base_models import (
    BaziReportRequest,
    BaziReportResponse,
    HistoryItem,
    HistorySaveRequest,
)
from server.config.app_config import get_config
from server.services.bazi_report_service import BaziReportService
from server.services.report_history_service import ReportRecord, get_history_repository
from server.utils.base_models import BaseAPIResponse
from server.utils.exception_handler import NotFoundError, api_error_handler

logger = logging.getLogger(__name__)

router = APIRouter()

# 线程池大小 = CPU核心数 * 2，但不超过100
cpu_count = os.cpu_count() or 4
executor = ThreadPoolExecutor(max_workers=min(cpu_count * 2, 100))

report_service = BaziReportService()


def build_rng(seed: Optional[int]) -> random.Random:
    """请求种子优先，其次 REPORT_RANDOM_SEED，均未设置时不固定种子"""
    if seed is None:
        seed = get_config().report.random_seed
    return random.Random(seed)


def to_history_item(record: ReportRecord) -> HistoryItem:
    chart = record.report.chart
    return HistoryItem(
        id=record.id,
        created_at=record.created_at,
        name=record.user_input.name,
        birth_date=record.user_input.birth_date,
        birth_time=record.user_input.birth_time,
        gender=record.user_input.gender,
        pillars=[p.ganzhi for p in chart.pillars()],
        total_score=record.report.life_energy.total_score,
    )


@router.post("/bazi/report", response_model=BaziReportResponse, summary="生成八字报告")
@api_error_handler
async def generate_bazi_report(request: BaziReportRequest):
    """
    生成完整八字报告

    - **birthDate**: 出生日期 (YYYY-MM-DD)，农历时也可写作 "2024年正月初一"
    - **birthTime**: 出生时间 (HH:MM)
    - **gender**: 性别 (male/female)
    - **isLunar**: 是否农历
    - **useSolarTime**: 是否按出生地经度校正真太阳时
    - **birthLocation**: 出生地（经纬度、省市）
    - **seed**: 随机种子（可选）
    """
    user_input = UserInput.model_validate(request.model_dump(exclude={'seed'}))
    rng = build_rng(request.seed)

    loop = asyncio.get_running_loop()
    report = await loop.run_in_executor(executor, report_service.generate_report, user_input, rng)
    return BaziReportResponse(success=True, data=report)


@router.get("/bazi/history", summary="历史报告列表")
@api_error_handler
async def list_history():
    items = [to_history_item(record) for record in get_history_repository().list()]
    return BaseAPIResponse[list](success=True, data=[item.model_dump(mode='json') for item in items])


@router.post("/bazi/history", summary="保存报告到历史")
@api_error_handler
async def save_history(request: HistorySaveRequest):
    record = get_history_repository().save(request.user_input, request.report)
    logger.info(f"保存历史报告: {record.id}")
    return BaseAPIResponse[dict](success=True, data=to_history_item(record).model_dump(mode='json'), message="保存成功")


@router.get("/bazi/history/{record_id}", summary="获取历史报告")
@api_error_handler
async def get_history(record_id: str):
    record = get_history_repository().get(record_id)
    if record is None:
        raise NotFoundError(f"历史报告不存在: {record_id}", resource="report_history")
    return BaseAPIResponse[dict](success=True, data=record.model_dump(mode='json'))


@router.delete("/bazi/history/{record_id}", summary="删除历史报告")
@api_error_handler
async def delete_history(record_id: str):
    if not get_history_repository().delete(record_id):
        raise NotFoundError(f"历史报告不存在: {record_id}", resource="report_history")
    return BaseAPIResponse[dict](success=True, message="删除成功")
