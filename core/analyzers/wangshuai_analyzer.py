#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命局旺衰分析器

只看月令：月支五行与日主相同（得令同气）或月支五行生日主（得令生扶）即判身强，
其余一律身弱。这是单因素的简化判断，不计得地、得势，结果仅作为大运评分与文案的开关。
"""

from typing import List

from core.calculators.bazi_core import ELEMENT_RELATIONS, generates
from core.data.stems_branches import BRANCH_ELEMENTS


class WangShuaiAnalyzer:
    """命局旺衰分析器"""

    @staticmethod
    def is_strong_by_element(day_master_element: str, month_element: str) -> bool:
        """月令五行同日主或生日主 -> 身强"""
        return day_master_element == month_element or generates(month_element, day_master_element)

    @staticmethod
    def is_strong(day_master_element: str, month_branch: str) -> bool:
        """
        判断日主旺衰

        Args:
            day_master_element: 日主五行
            month_branch: 月支

        Returns:
            bool: True 身强，False 身弱
        """
        return WangShuaiAnalyzer.is_strong_by_element(day_master_element, BRANCH_ELEMENTS[month_branch])

    @staticmethod
    def get_favorable_elements(day_master_element: str, is_strong: bool) -> List[str]:
        """
        喜用五行

        身强喜克泄耗：财（我克）、官杀（克我）、食伤（我生）；
        身弱喜生扶：印（生我）、比劫（同我）。
        首项为第一喜用。
        """
        relations = ELEMENT_RELATIONS[day_master_element]
        if is_strong:
            return [relations['controls'], relations['controlled_by'], relations['produces']]
        return [relations['produced_by'], day_master_element]
