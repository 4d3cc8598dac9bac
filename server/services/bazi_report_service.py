#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字报告服务层

按固定流水线组装完整报告：
历法转换 -> 排盘 -> 旺衰 -> 大运 -> 流年 -> 五行统计 -> 人生能量 -> 文案

报告一次生成、整体返回，不做局部更新。
"""

import logging
import random
from datetime import datetime
from typing import Callable, List, Optional

from core.analyzers.bazi_text_analyzer import AnalysisRenderer, render_analysis
from core.analyzers.dayun_liunian_analyzer import DayunLiunianAnalyzer, YearGanzhiProvider
from core.analyzers.life_energy_analyzer import LifeEnergyAnalyzer
from core.analyzers.wangshuai_analyzer import WangShuaiAnalyzer
from core.analyzers.wuxing_balance_analyzer import WuxingBalanceAnalyzer
from core.calculators.bazi_core_calculator import BaziCoreCalculator
from core.calculators.LunarConverter import CalendarResult, DecennialCycle, LunarConverter
from core.exceptions import InvalidDateError
from core.models import BaziReport, UserInput

logger = logging.getLogger(__name__)

DecennialCycleProvider = Callable[[datetime, int], List[DecennialCycle]]


class BaziReportService:
    """八字报告服务类"""

    def __init__(
        self,
        cycle_provider: Optional[DecennialCycleProvider] = None,
        year_ganzhi_provider: Optional[YearGanzhiProvider] = None,
        renderer: AnalysisRenderer = render_analysis,
    ):
        """
        Args:
            cycle_provider: (出生时刻, 性别编码) -> 大运序列，默认 lunar_python
            year_ganzhi_provider: 年份 -> 流年干支，默认 lunar_python
            renderer: 文案渲染函数
        """
        self.cycle_provider = cycle_provider or LunarConverter.get_decennial_cycles
        self.year_ganzhi_provider = year_ganzhi_provider or LunarConverter.get_year_ganzhi
        self.renderer = renderer

    @staticmethod
    def resolve_calendar(user_input: UserInput) -> CalendarResult:
        """
        解析出生输入并转换为校正后的出生时刻

        Raises:
            InvalidDateError: 日期无法解析或不存在，或中文农历写法未设置 isLunar
        """
        parsed = LunarConverter.parse_date(user_input.birth_date)
        if parsed.lunar_text and not user_input.is_lunar:
            raise InvalidDateError.lunar_text_without_lunar_flag(user_input.birth_date)
        year, month, day, is_leap_month, _ = parsed
        hour, minute = LunarConverter.parse_time(user_input.birth_time)

        location = user_input.birth_location
        longitude = location.longitude if location is not None else None

        return LunarConverter.resolve_birth_moment(
            year, month, day, hour, minute,
            is_lunar=user_input.is_lunar,
            use_solar_time_correction=user_input.use_solar_time,
            longitude=longitude,
            is_leap_month=is_leap_month,
        )

    def generate_report(self, user_input: UserInput, rng: Optional[random.Random] = None) -> BaziReport:
        """
        生成完整报告

        Args:
            user_input: 出生信息
            rng: 随机源；相同输入与相同种子的随机源生成完全相同的报告

        Returns:
            BaziReport

        Raises:
            InvalidDateError: 日期不存在
            LuckCycleOrderError: 大运序列顺序异常
        """
        rng = rng if rng is not None else random.Random()
        logger.info(
            f"生成报告: date={user_input.birth_date} time={user_input.birth_time} "
            f"gender={user_input.gender} lunar={user_input.is_lunar} solar_time={user_input.use_solar_time}"
        )

        calendar = self.resolve_calendar(user_input)
        chart = BaziCoreCalculator(calendar, user_input.gender).calculate()

        day_master_element = chart.day_master_element
        is_strong = WangShuaiAnalyzer.is_strong(day_master_element, chart.month.branch)

        luck_analyzer = DayunLiunianAnalyzer(
            day_master_element, is_strong, rng=rng, year_ganzhi_provider=self.year_ganzhi_provider
        )
        cycles = self.cycle_provider(calendar.solar_datetime, user_input.gender_code)
        luck_pillars = luck_analyzer.build_luck_pillars(cycles)
        yearly_luck = luck_analyzer.build_yearly_luck(luck_pillars, calendar.solar_datetime.year)

        wuxing = WuxingBalanceAnalyzer.analyze(chart)
        life_energy = LifeEnergyAnalyzer(rng=rng).analyze(day_master_element, dict(wuxing.scores.items()), is_strong)
        analysis = self.renderer(chart, wuxing, is_strong, luck_pillars)

        report = BaziReport(
            chart=chart,
            wuxing=wuxing,
            luck_pillars=luck_pillars,
            yearly_luck=yearly_luck,
            life_energy=life_energy,
            analysis=analysis,
        )
        logger.info(
            f"报告完成: {' '.join(p.ganzhi for p in chart.pillars())} "
            f"{'身强' if is_strong else '身弱'} 总分={life_energy.total_score}"
        )
        return report


def generate_report(user_input: UserInput, rng: Optional[random.Random] = None) -> BaziReport:
    """使用默认历法数据源生成报告"""
    return BaziReportService().generate_report(user_input, rng)
