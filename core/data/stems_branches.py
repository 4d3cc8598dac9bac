#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
天干地支基础数据

- 十天干 / 十二地支顺序
- 干支五行对照
- 天干阴阳
- 地支藏干（本气在前）

所有表均为不可变常量，请勿在运行时修改。
"""

from types import MappingProxyType
from typing import Mapping, Tuple

# 十天干
STEMS: Tuple[str, ...] = ('甲', '乙', '丙', '丁', '戊', '己', '庚', '辛', '壬', '癸')

# 十二地支
BRANCHES: Tuple[str, ...] = ('子', '丑', '寅', '卯', '辰', '巳', '午', '未', '申', '酉', '戌', '亥')

# 五行（统计与并列排序时使用的固定顺序）
ELEMENTS: Tuple[str, ...] = ('金', '木', '水', '火', '土')

# 天干五行
STEM_ELEMENTS: Mapping[str, str] = MappingProxyType({
    '甲': '木', '乙': '木',
    '丙': '火', '丁': '火',
    '戊': '土', '己': '土',
    '庚': '金', '辛': '金',
    '壬': '水', '癸': '水',
})

# 地支五行
BRANCH_ELEMENTS: Mapping[str, str] = MappingProxyType({
    '子': '水', '丑': '土', '寅': '木', '卯': '木',
    '辰': '土', '巳': '火', '午': '火', '未': '土',
    '申': '金', '酉': '金', '戌': '土', '亥': '水',
})

# 天干阴阳（阳干为 True）
STEM_YINYANG: Mapping[str, bool] = MappingProxyType({
    stem: index % 2 == 0 for index, stem in enumerate(STEMS)
})

# 地支藏干
HIDDEN_STEMS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    '子': ('癸',),
    '丑': ('己', '癸', '辛'),
    '寅': ('甲', '丙', '戊'),
    '卯': ('乙',),
    '辰': ('戊', '乙', '癸'),
    '巳': ('丙', '戊', '庚'),
    '午': ('丁', '己'),
    '未': ('己', '丁', '乙'),
    '申': ('庚', '壬', '戊'),
    '酉': ('辛',),
    '戌': ('戊', '辛', '丁'),
    '亥': ('壬', '甲'),
})

# 地支六冲
BRANCH_CHONG: Mapping[str, str] = MappingProxyType({
    '子': '午', '午': '子',
    '丑': '未', '未': '丑',
    '寅': '申', '申': '寅',
    '卯': '酉', '酉': '卯',
    '辰': '戌', '戌': '辰',
    '巳': '亥', '亥': '巳',
})


def get_element(char: str) -> str:
    """干或支的五行，未知字符返回空串"""
    return STEM_ELEMENTS.get(char) or BRANCH_ELEMENTS.get(char, '')
