#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""五行统计单元测试"""

from core.analyzers.wuxing_balance_analyzer import WuxingBalanceAnalyzer
from core.data.stems_branches import ELEMENTS


class TestCountElements:
    def test_counts(self):
        counts = WuxingBalanceAnalyzer.count_elements('甲辰丙寅甲辰庚午')
        assert counts == {'金': 1, '木': 3, '水': 0, '火': 2, '土': 2}

    def test_total_is_eight(self):
        counts = WuxingBalanceAnalyzer.count_elements('壬子癸亥辛酉戊午')
        assert sum(counts.values()) == 8

    def test_all_elements_present_as_keys(self):
        counts = WuxingBalanceAnalyzer.count_elements('')
        assert tuple(counts) == ELEMENTS
        assert all(v == 0 for v in counts.values())


class TestSummarize:
    def test_strongest_weakest_missing(self):
        result = WuxingBalanceAnalyzer.summarize({'金': 1, '木': 3, '水': 0, '火': 2, '土': 2})
        assert result.strongest == '木'
        assert result.weakest == '水'
        assert result.missing == ('水',)

    def test_tie_strongest_takes_first_in_order(self):
        result = WuxingBalanceAnalyzer.summarize({'金': 2, '木': 2, '水': 2, '火': 1, '土': 1})
        assert result.strongest == '金'

    def test_tie_weakest_takes_last_in_order(self):
        result = WuxingBalanceAnalyzer.summarize({'金': 0, '木': 4, '水': 0, '火': 4, '土': 0})
        assert result.strongest == '木'
        assert result.weakest == '土'
        assert result.missing == ('金', '水', '土')

    def test_no_missing(self):
        result = WuxingBalanceAnalyzer.summarize({'金': 2, '木': 2, '水': 2, '火': 1, '土': 1})
        assert result.missing == ()
