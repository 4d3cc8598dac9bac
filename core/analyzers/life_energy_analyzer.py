#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
人生能量评分

以日主五行为"我"，取四个相关五行：
- 食伤 output = 我生
- 财星 wealth = 我克
- 官杀 officer = 克我
- 印星 resource = 生我

按各五行在原局出现的次数折算五个维度（事业、财富、情感、健康、智慧）
以及贵人、桃花等副指标。
"""

import math
import random
from typing import Dict, Optional

from core.calculators.bazi_core import ELEMENT_RELATIONS
from core.models import LifeEnergyReport, LifeEnergyScores, LifeEnergySubScores

BASE_SCORE = 60
SCORE_PER_POINT = 8
SCORE_CAP = 95
NOISE_MAX = 5

HEALTH_BASE = 90
HEALTH_PENALTY = 5
EXCESSIVE_COUNT = 4

TIER_UPPER = 80
TIER_MIDDLE = 65


class LifeEnergyAnalyzer:
    """人生能量评分器"""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def base(self, value: float) -> float:
        """min(95, 60 + 8x + [0, 5) 随机)"""
        return min(SCORE_CAP, BASE_SCORE + value * SCORE_PER_POINT + self.rng.uniform(0, NOISE_MAX))

    @staticmethod
    def related_elements(day_master_element: str) -> Dict[str, str]:
        relations = ELEMENT_RELATIONS[day_master_element]
        return {
            'output': relations['produces'],
            'wealth': relations['controls'],
            'officer': relations['controlled_by'],
            'resource': relations['produced_by'],
        }

    @staticmethod
    def health_score(element_counts: Dict[str, int]) -> int:
        """90 - 5 * 缺失五行数 - 5 * 过旺(>=4)五行数，未截断"""
        missing_count = sum(1 for v in element_counts.values() if v == 0)
        excessive_count = sum(1 for v in element_counts.values() if v >= EXCESSIVE_COUNT)
        return HEALTH_BASE - missing_count * HEALTH_PENALTY - excessive_count * HEALTH_PENALTY

    @staticmethod
    def score_tier(total_score: int) -> str:
        if total_score > TIER_UPPER:
            return '上等'
        if total_score > TIER_MIDDLE:
            return '中等'
        return '潜力'

    @staticmethod
    def describe(
        total_score: int,
        day_master_element: str,
        is_strong: bool,
        has_missing: bool,
        career_over_wealth: bool,
    ) -> str:
        """按总分档位、旺衰、五行是否缺失、事业/财富高低选取描述模板"""
        return (
            f"根据您的生辰八字分析，您的整体运势评分为 {total_score}分，"
            f"属于{LifeEnergyAnalyzer.score_tier(total_score)}水平。"
            f"您的命格属于{day_master_element}命，性格{'刚毅果断' if is_strong else '温和内敛'}，"
            f"{'五行有所偏颇' if has_missing else '五行平衡'}，"
            f"{'适合追求事业成就，在职场中容易获得突破' if career_over_wealth else '适合追求财富积累，商业嗅觉敏锐'}。"
        )

    def analyze(self, day_master_element: str, element_counts: Dict[str, int], is_strong: bool) -> LifeEnergyReport:
        """
        计算人生能量

        Args:
            day_master_element: 日主五行
            element_counts: 五行次数
            is_strong: 是否身强

        Returns:
            LifeEnergyReport（健康分在此处截断到 [0, 100]）
        """
        related = self.related_elements(day_master_element)

        def count(key: str) -> int:
            return element_counts.get(related[key], 0)

        career = self.base(count('officer') * 1.5 + count('output') * 0.5)
        wealth = self.base(count('wealth') * 1.5 + count('output') * 0.5)
        wisdom = self.base(count('resource') * 1.5 + count('output') * 0.5)
        spouse_star = count('wealth') + count('officer')
        emotion = self.base(spouse_star * 0.8 + (count('wealth') if is_strong else count('officer')) * 0.5)
        health = self.health_score(element_counts)

        scores = LifeEnergyScores(
            career=math.floor(career),
            wealth=math.floor(wealth),
            emotion=math.floor(emotion),
            health=max(0, min(100, health)),
            wisdom=math.floor(wisdom),
        )
        total_score = math.floor(
            (scores.career + scores.wealth + scores.emotion + scores.health + scores.wisdom) / 5
        )

        nobleman = self.base(count('resource') * 1.2 + (2 if count('officer') > 0 else 0))
        peach_blossom = self.base(count('wealth') + count('output'))

        has_missing = any(v == 0 for v in element_counts.values())
        return LifeEnergyReport(
            scores=scores,
            total_score=total_score,
            description=self.describe(
                total_score, day_master_element, is_strong, has_missing, scores.career > scores.wealth
            ),
            sub_scores=LifeEnergySubScores(
                nobleman=math.floor(nobleman),
                peach_blossom=math.floor(peach_blossom),
                career=scores.career,
                wealth=scores.wealth,
            ),
        )
