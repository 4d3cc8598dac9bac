#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
大运流年分析器

功能：
- 过滤外部历法库返回的占位大运，保留前 8 步并校验顺序
- 大运评分：基准 60 分，天干权重 10、地支权重 15，按旺衰取喜忌方向
- 流年走势：自首步大运起 80 年，大运 60% + 流年 40% 加权，
  叠加正弦起伏与小幅随机扰动后截断到 [10, 95]

随机扰动仅用于走势图的观感，统一从注入的随机源取值，测试时可固定种子或替换。
"""

import math
import random
from typing import Callable, Iterable, Optional, Sequence, Tuple

from core.calculators.bazi_core import get_element_relation
from core.calculators.bazi_logging import safe_log
from core.calculators.LunarConverter import DecennialCycle, LunarConverter
from core.data.stems_branches import get_element
from core.exceptions import LuckCycleOrderError
from core.models import LuckPillar, YearlyLuckPoint

# 大运评分
LUCK_BASE_SCORE = 60
STEM_WEIGHT = 10
BRANCH_WEIGHT = 15
LUCK_NOISE_MAX = 5
LUCK_SCORE_MIN = 0
LUCK_SCORE_MAX = 100

MAX_LUCK_PILLARS = 8

# 流年走势
YEARLY_SPAN = 80
DAYUN_WEIGHT = 0.6
LIUNIAN_WEIGHT = 0.4
OSCILLATION_AMPLITUDE = 5
OSCILLATION_FREQUENCY = 0.5
YEARLY_NOISE = 3
YEARLY_SCORE_MIN = 10
YEARLY_SCORE_MAX = 95

# 身强时各关系的喜忌（+1 喜，-1 忌）；身弱取反
_STRONG_RELATION_SIGNS = {
    'same': -1,            # 比劫：身强忌
    'me_producing': 1,     # 食伤泄秀：身强喜
    'producing_me': -1,    # 印枭生身：身强忌
    'me_controlling': 1,   # 财星耗身：身强喜
    'controlling_me': 1,   # 官杀克身：身强有力制之为喜
}

YearGanzhiProvider = Callable[[int], Tuple[str, str]]


def clamp(value, lower, upper):
    return max(lower, min(upper, value))


class DayunLiunianAnalyzer:
    """大运流年分析器"""

    def __init__(
        self,
        day_master_element: str,
        is_strong: bool,
        rng: Optional[random.Random] = None,
        year_ganzhi_provider: Optional[YearGanzhiProvider] = None,
    ):
        """
        Args:
            day_master_element: 日主五行
            is_strong: 是否身强
            rng: 随机源，默认新建未固定种子的 random.Random
            year_ganzhi_provider: 年份 -> (流年天干, 流年地支)，默认走历法适配层
        """
        self.day_master_element = day_master_element
        self.is_strong = is_strong
        self.rng = rng if rng is not None else random.Random()
        self.year_ganzhi_provider = year_ganzhi_provider or LunarConverter.get_year_ganzhi

    # === 评分 ======================================================================================

    @staticmethod
    def relation_score(target_element: str, day_master_element: str, is_strong: bool) -> int:
        """单个五行对日主的喜忌：+1 / -1"""
        relation = get_element_relation(day_master_element, target_element)
        sign = _STRONG_RELATION_SIGNS.get(relation, 0)
        return sign if is_strong else -sign

    @staticmethod
    def base_luck_score(stem_element: str, branch_element: str, day_master_element: str, is_strong: bool) -> int:
        """不含随机扰动的大运分"""
        score = LUCK_BASE_SCORE
        score += DayunLiunianAnalyzer.relation_score(stem_element, day_master_element, is_strong) * STEM_WEIGHT
        score += DayunLiunianAnalyzer.relation_score(branch_element, day_master_element, is_strong) * BRANCH_WEIGHT
        return score

    def score_luck(self, stem_element: str, branch_element: str) -> int:
        """大运 / 流年原始分，整数，范围 [0, 100]"""
        score = self.base_luck_score(stem_element, branch_element, self.day_master_element, self.is_strong)
        score += self.rng.randint(0, LUCK_NOISE_MAX)
        return int(clamp(score, LUCK_SCORE_MIN, LUCK_SCORE_MAX))

    # === 大运 ======================================================================================

    @staticmethod
    def select_cycles(cycles: Iterable[DecennialCycle]) -> Tuple[DecennialCycle, ...]:
        """去掉干支为空的占位大运，取前 8 步，并校验起运年龄与年份严格递增"""
        valid = tuple(cycle for cycle in cycles if not cycle.is_placeholder)[:MAX_LUCK_PILLARS]
        for previous, current in zip(valid, valid[1:]):
            if current.start_age <= previous.start_age or current.start_year <= previous.start_year:
                raise LuckCycleOrderError(
                    f"大运顺序异常: {previous.ganzhi}({previous.start_age}岁/{previous.start_year}) "
                    f"-> {current.ganzhi}({current.start_age}岁/{current.start_year})"
                )
        return valid

    def build_luck_pillars(self, cycles: Iterable[DecennialCycle]) -> Tuple[LuckPillar, ...]:
        """由外部大运序列生成带评分的大运"""
        pillars = []
        for cycle in self.select_cycles(cycles):
            stem_element = get_element(cycle.stem)
            branch_element = get_element(cycle.branch)
            pillars.append(LuckPillar(
                stem=cycle.stem,
                branch=cycle.branch,
                start_age=cycle.start_age,
                start_year=cycle.start_year,
                stem_element=stem_element,
                branch_element=branch_element,
                score=self.score_luck(stem_element, branch_element),
            ))
        safe_log('debug', f"大运: {[(p.label, p.start_age, p.score) for p in pillars]}", __name__)
        return tuple(pillars)

    # === 流年 ======================================================================================

    @staticmethod
    def find_enclosing_pillar(luck_pillars: Sequence[LuckPillar], year: int) -> LuckPillar:
        """该年所在大运：起运年份不晚于该年的最后一步；早于首步时归入首步"""
        for pillar in reversed(luck_pillars):
            if year >= pillar.start_year:
                return pillar
        return luck_pillars[0]

    @staticmethod
    def oscillation(year: int) -> float:
        """走势起伏项 5 * sin(0.5 * year)"""
        return OSCILLATION_AMPLITUDE * math.sin(OSCILLATION_FREQUENCY * year)

    @staticmethod
    def blend_score(pillar_score: float, yearly_raw: float) -> float:
        """大运 60% + 流年 40%"""
        return pillar_score * DAYUN_WEIGHT + yearly_raw * LIUNIAN_WEIGHT

    @staticmethod
    def finalize_yearly_score(blended: float) -> int:
        """截断到 [10, 95] 后四舍五入"""
        return int(math.floor(clamp(blended, YEARLY_SCORE_MIN, YEARLY_SCORE_MAX) + 0.5))

    def build_yearly_luck(self, luck_pillars: Sequence[LuckPillar], birth_year: int) -> Tuple[YearlyLuckPoint, ...]:
        """
        生成流年走势

        Args:
            luck_pillars: 已排好序的大运
            birth_year: 出生年份（虚岁 = 年份 - 出生年 + 1，最小为 0）

        Returns:
            自首步大运起运年起连续 80 年的流年点；无大运时为空
        """
        if not luck_pillars:
            return ()

        start_year = luck_pillars[0].start_year
        points = []
        for year in range(start_year, start_year + YEARLY_SPAN):
            pillar = self.find_enclosing_pillar(luck_pillars, year)
            stem, branch = self.year_ganzhi_provider(year)
            yearly_raw = self.score_luck(get_element(stem), get_element(branch))

            blended = self.blend_score(pillar.score, yearly_raw)
            blended += self.oscillation(year) + self.rng.uniform(-YEARLY_NOISE, YEARLY_NOISE)

            points.append(YearlyLuckPoint(
                year=year,
                age=max(0, year - birth_year + 1),
                stem=stem,
                branch=branch,
                score=self.finalize_yearly_score(blended),
                luck_pillar=pillar.label,
            ))
        return tuple(points)
