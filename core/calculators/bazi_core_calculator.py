#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
核心八字排盘计算逻辑

由历法转换结果构建四柱：藏干、天干十神、藏干十神、干支五行标签。
该模块仅负责基础排盘，不包含旺衰、大运、评分等扩展逻辑。
"""

from __future__ import annotations

from typing import Any, Dict

from core.calculators.bazi_core import get_branch_ten_gods, get_main_star
from core.calculators.bazi_logging import safe_log
from core.calculators.LunarConverter import CalendarResult
from core.data.stems_branches import BRANCH_ELEMENTS, HIDDEN_STEMS, STEM_ELEMENTS
from core.models import BaziChart, Pillar

PILLAR_TYPES = ('year', 'month', 'day', 'hour')


class BaziCoreCalculator:
    """核心八字排盘计算器 - 仅包含纯计算逻辑"""

    def __init__(self, calendar_result: CalendarResult, gender: str = 'male') -> None:
        self.calendar_result = calendar_result
        self.gender = gender
        self.bazi_pillars: Dict[str, Dict[str, str]] = {}
        self.details: Dict[str, Dict[str, Any]] = {}

    # === 公开方法 ==================================================================================

    def calculate(self) -> BaziChart:
        """执行八字排盘计算"""
        self._build_pillars()
        self._calculate_ten_gods()
        self._calculate_hidden_stems()
        self._calculate_element_labels()

        result = self._format_result()
        safe_log(
            'debug',
            "排盘完成: " + " ".join(p.ganzhi for p in result.pillars()),
            __name__,
        )
        return result

    @property
    def day_stem(self) -> str:
        return self.calendar_result.eight_char.day_stem

    # === 内部计算步骤 ===============================================================================

    def _build_pillars(self) -> None:
        eight_char = self.calendar_result.eight_char
        for pillar_type in PILLAR_TYPES:
            stem, branch = eight_char.pillar(pillar_type)
            self.bazi_pillars[pillar_type] = {'stem': stem, 'branch': branch}
            self.details[pillar_type] = {}

    def _calculate_ten_gods(self) -> None:
        day_stem = self.day_stem
        for pillar_type, pillar in self.bazi_pillars.items():
            self.details[pillar_type].update({
                'main_star': get_main_star(day_stem, pillar['stem'], pillar_type),
                'hidden_stars': tuple(get_branch_ten_gods(day_stem, pillar['branch'])),
            })

    def _calculate_hidden_stems(self) -> None:
        for pillar_type, pillar in self.bazi_pillars.items():
            self.details[pillar_type]['hidden_stems'] = HIDDEN_STEMS[pillar['branch']]

    def _calculate_element_labels(self) -> None:
        for pillar_type, pillar in self.bazi_pillars.items():
            self.details[pillar_type]['element_label'] = (
                STEM_ELEMENTS[pillar['stem']] + BRANCH_ELEMENTS[pillar['branch']]
            )

    def _build_pillar(self, pillar_type: str) -> Pillar:
        pillar = self.bazi_pillars[pillar_type]
        detail = self.details[pillar_type]
        return Pillar(
            stem=pillar['stem'],
            branch=pillar['branch'],
            hidden_stems=detail['hidden_stems'],
            ten_god=detail['main_star'],
            hidden_ten_gods=detail['hidden_stars'],
            element_label=detail['element_label'],
        )

    def _format_result(self) -> BaziChart:
        return BaziChart(
            year=self._build_pillar('year'),
            month=self._build_pillar('month'),
            day=self._build_pillar('day'),
            hour=self._build_pillar('hour'),
            day_master=self.day_stem,
            day_master_element=STEM_ELEMENTS[self.day_stem],
            gender=self.gender,
            solar_date=self.calendar_result.solar_date_str,
            lunar_date=self.calendar_result.lunar_date_str,
        )
