#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
十神计算模块

按"五行生克 + 阴阳异同"判定任一天干相对日主的十神。
五组关系互斥且覆盖全部天干组合，合法天干不会出现无法判定的情况。
"""

from typing import List

from core.data.stems_branches import STEM_ELEMENTS, STEM_YINYANG, HIDDEN_STEMS

from .element_relations import get_element_relation

# 日柱天干不参与十神判定，固定为日主
DAY_MASTER_LABEL = '日主'

# 关系类型 -> (同阴阳, 异阴阳)
_RELATION_TEN_GODS = {
    'same': ('比肩', '劫财'),
    'me_producing': ('食神', '伤官'),
    'producing_me': ('偏印', '正印'),
    'me_controlling': ('偏财', '正财'),
    'controlling_me': ('七杀', '正官'),
}


def resolve_ten_god(day_stem: str, target_stem: str) -> str:
    """
    计算目标天干相对日干的十神

    Args:
        day_stem: 日干
        target_stem: 目标天干

    Returns:
        str: 十神名称

    Raises:
        KeyError: 天干不在十天干之内
    """
    day_element = STEM_ELEMENTS[day_stem]
    target_element = STEM_ELEMENTS[target_stem]
    is_same_yinyang = STEM_YINYANG[day_stem] == STEM_YINYANG[target_stem]

    relation_type = get_element_relation(day_element, target_element)
    same_god, diff_god = _RELATION_TEN_GODS[relation_type]
    return same_god if is_same_yinyang else diff_god


def get_main_star(day_stem: str, target_stem: str, pillar_type: str) -> str:
    """
    计算主星（天干十神）

    Args:
        day_stem: 日干
        target_stem: 目标天干
        pillar_type: 柱类型（year/month/day/hour/hidden）

    Returns:
        str: 十神名称，日柱返回"日主"
    """
    if pillar_type == 'day':
        return DAY_MASTER_LABEL
    return resolve_ten_god(day_stem, target_stem)


def get_branch_ten_gods(day_stem: str, branch: str) -> List[str]:
    """
    计算地支藏干的十神（副星），顺序与藏干一致

    Args:
        day_stem: 日干
        branch: 地支

    Returns:
        List[str]: 十神列表
    """
    return [resolve_ten_god(day_stem, hidden_stem) for hidden_stem in HIDDEN_STEMS[branch]]
