#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行统计分析器

功能：
- 统计八字原局八个字的五行出现次数（合计恒为 8）
- 找出最旺、最弱、缺失的五行

并列时按固定顺序 金 木 水 火 土 做稳定排序：
最旺取排序后首位，最弱取排序后末位。
"""

import logging
from typing import Dict, Iterable, List, Tuple

from core.data.stems_branches import ELEMENTS, get_element
from core.models import BaziChart, ElementScores

logger = logging.getLogger(__name__)


class WuxingBalanceAnalyzer:
    """五行统计分析器"""

    @staticmethod
    def count_elements(characters: Iterable[str]) -> Dict[str, int]:
        """
        统计五行次数

        Args:
            characters: 干支字符序列

        Returns:
            {"金": n, "木": n, "水": n, "火": n, "土": n}
        """
        counts = {element: 0 for element in ELEMENTS}
        for char in characters:
            element = get_element(char)
            if element in counts:
                counts[element] += 1
        return counts

    @staticmethod
    def chart_characters(chart: BaziChart) -> List[str]:
        """命盘八字：年干 年支 月干 月支 日干 日支 时干 时支"""
        chars: List[str] = []
        for pillar in chart.pillars():
            chars.extend((pillar.stem, pillar.branch))
        return chars

    @staticmethod
    def rank_elements(scores: Dict[str, int]) -> List[Tuple[str, int]]:
        """按次数降序，并列保持固定五行顺序"""
        ordered = [(element, scores.get(element, 0)) for element in ELEMENTS]
        return sorted(ordered, key=lambda item: item[1], reverse=True)

    @staticmethod
    def summarize(scores: Dict[str, int]) -> ElementScores:
        """由五行次数得出最旺 / 最弱 / 缺失"""
        ranked = WuxingBalanceAnalyzer.rank_elements(scores)
        missing = tuple(element for element, count in ranked if count == 0)
        return ElementScores(
            scores={element: scores.get(element, 0) for element in ELEMENTS},
            strongest=ranked[0][0],
            weakest=ranked[-1][0],
            missing=missing,
        )

    @staticmethod
    def analyze(chart: BaziChart) -> ElementScores:
        """统计命盘五行"""
        scores = WuxingBalanceAnalyzer.count_elements(WuxingBalanceAnalyzer.chart_characters(chart))
        result = WuxingBalanceAnalyzer.summarize(scores)
        logger.debug(f"五行统计: {result.scores}, 最旺={result.strongest}, 最弱={result.weakest}, 缺={result.missing}")
        return result
