#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""旺衰判断单元测试"""

import pytest

from core.analyzers.wangshuai_analyzer import WangShuaiAnalyzer
from core.data.stems_branches import BRANCHES, BRANCH_ELEMENTS, ELEMENTS

# (日主五行, 月令五行) -> 身强
STRENGTH_TABLE = {
    ('木', '木'): True, ('木', '水'): True, ('木', '火'): False, ('木', '土'): False, ('木', '金'): False,
    ('火', '火'): True, ('火', '木'): True, ('火', '土'): False, ('火', '金'): False, ('火', '水'): False,
    ('土', '土'): True, ('土', '火'): True, ('土', '金'): False, ('土', '水'): False, ('土', '木'): False,
    ('金', '金'): True, ('金', '土'): True, ('金', '水'): False, ('金', '木'): False, ('金', '火'): False,
    ('水', '水'): True, ('水', '金'): True, ('水', '木'): False, ('水', '火'): False, ('水', '土'): False,
}


class TestIsStrong:
    def test_table_covers_all_combinations(self):
        assert len(STRENGTH_TABLE) == 25

    @pytest.mark.parametrize("pair", sorted(STRENGTH_TABLE), ids=lambda p: f"{p[0]}-{p[1]}")
    def test_by_element(self, pair):
        me, month = pair
        assert WangShuaiAnalyzer.is_strong_by_element(me, month) is STRENGTH_TABLE[pair]

    def test_wood_in_hai_month_is_strong(self):
        assert WangShuaiAnalyzer.is_strong('木', '亥') is True

    def test_wood_in_shen_month_is_weak(self):
        assert WangShuaiAnalyzer.is_strong('木', '申') is False

    def test_branch_form_matches_element_form(self):
        for me in ELEMENTS:
            for branch in BRANCHES:
                assert WangShuaiAnalyzer.is_strong(me, branch) == STRENGTH_TABLE[(me, BRANCH_ELEMENTS[branch])]


class TestFavorableElements:
    def test_strong_wood(self):
        assert WangShuaiAnalyzer.get_favorable_elements('木', True) == ['土', '金', '火']

    def test_weak_wood(self):
        assert WangShuaiAnalyzer.get_favorable_elements('木', False) == ['水', '木']

    def test_weak_metal(self):
        assert WangShuaiAnalyzer.get_favorable_elements('金', False) == ['土', '金']
