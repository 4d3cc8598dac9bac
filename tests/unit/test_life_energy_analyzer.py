#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""人生能量评分单元测试"""

import random

import pytest

from core.analyzers.life_energy_analyzer import LifeEnergyAnalyzer

# 甲辰 丙寅 甲辰 庚午
COUNTS_2024 = {'金': 1, '木': 3, '水': 0, '火': 2, '土': 2}


class TestRelatedElements:
    def test_wood(self):
        assert LifeEnergyAnalyzer.related_elements('木') == {
            'output': '火', 'wealth': '土', 'officer': '金', 'resource': '水',
        }


class TestHealthScore:
    def test_balanced(self):
        assert LifeEnergyAnalyzer.health_score({'金': 2, '木': 2, '水': 2, '火': 1, '土': 1}) == 90

    def test_missing_and_excessive(self):
        assert LifeEnergyAnalyzer.health_score({'金': 0, '木': 4, '水': 0, '火': 4, '土': 0}) == 65


class TestAnalyze:
    def test_exact_scores_without_noise(self, fixed_random):
        report = LifeEnergyAnalyzer(rng=fixed_random(0.0)).analyze('木', COUNTS_2024, True)
        scores = report.scores
        assert scores.career == 80     # 60 + 8 * (1 * 1.5 + 2 * 0.5)
        assert scores.wealth == 92     # 60 + 8 * (2 * 1.5 + 2 * 0.5)
        assert scores.wisdom == 68     # 60 + 8 * (0 * 1.5 + 2 * 0.5)
        assert scores.emotion == 87    # 60 + 8 * (3 * 0.8 + 2 * 0.5)
        assert scores.health == 85
        assert report.total_score == 82
        assert report.sub_scores.nobleman == 76
        assert report.sub_scores.peach_blossom == 92
        assert report.sub_scores.career == scores.career
        assert report.sub_scores.wealth == scores.wealth

    def test_cap_at_95(self, fixed_random):
        counts = {'金': 4, '木': 1, '水': 0, '火': 3, '土': 0}
        report = LifeEnergyAnalyzer(rng=fixed_random(1.0)).analyze('木', counts, True)
        assert report.scores.career == 95

    def test_health_single_element_chart(self):
        counts = {'金': 0, '木': 8, '水': 0, '火': 0, '土': 0}
        report = LifeEnergyAnalyzer(rng=random.Random(1)).analyze('木', counts, True)
        assert report.scores.health == 65

    @pytest.mark.parametrize("seed", range(10))
    def test_scores_in_range(self, seed):
        report = LifeEnergyAnalyzer(rng=random.Random(seed)).analyze('金', COUNTS_2024, False)
        for value in report.scores.model_dump().values():
            assert 0 <= value <= 100
        assert 0 <= report.total_score <= 100

    def test_same_seed_same_report(self):
        a = LifeEnergyAnalyzer(rng=random.Random(3)).analyze('水', COUNTS_2024, False)
        b = LifeEnergyAnalyzer(rng=random.Random(3)).analyze('水', COUNTS_2024, False)
        assert a == b


class TestDescription:
    @pytest.mark.parametrize("total, tier", [(81, '上等'), (80, '中等'), (66, '中等'), (65, '潜力')])
    def test_tier(self, total, tier):
        assert LifeEnergyAnalyzer.score_tier(total) == tier

    def test_description_mentions_tier_and_element(self):
        text = LifeEnergyAnalyzer.describe(82, '木', True, True, False)
        assert '82分' in text
        assert '上等' in text
        assert '木命' in text
        assert '五行有所偏颇' in text
