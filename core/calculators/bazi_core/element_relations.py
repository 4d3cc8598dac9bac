#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行生克关系模块

提供五行生克关系的常量定义和计算函数。
每个五行恰有一个"所生"与一个"所克"目标。
"""

from types import MappingProxyType
from typing import Literal, Mapping

# 五行关系类型
RelationType = Literal['same', 'me_producing', 'me_controlling', 'producing_me', 'controlling_me', 'unknown']

# 五行生克关系定义
ELEMENT_RELATIONS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    '木': MappingProxyType({'produces': '火', 'controls': '土', 'produced_by': '水', 'controlled_by': '金'}),
    '火': MappingProxyType({'produces': '土', 'controls': '金', 'produced_by': '木', 'controlled_by': '水'}),
    '土': MappingProxyType({'produces': '金', 'controls': '水', 'produced_by': '火', 'controlled_by': '木'}),
    '金': MappingProxyType({'produces': '水', 'controls': '木', 'produced_by': '土', 'controlled_by': '火'}),
    '水': MappingProxyType({'produces': '木', 'controls': '火', 'produced_by': '金', 'controlled_by': '土'}),
})


def get_element_relation(day_element: str, target_element: str) -> RelationType:
    """
    判断五行生克关系

    Args:
        day_element: 日主五行（木/火/土/金/水）
        target_element: 目标五行

    Returns:
        RelationType: 关系类型
        - 'same': 同元素
        - 'me_producing': 我生
        - 'me_controlling': 我克
        - 'producing_me': 生我
        - 'controlling_me': 克我
        - 'unknown': 未知
    """
    if day_element == target_element:
        return 'same'

    if day_element not in ELEMENT_RELATIONS:
        return 'unknown'

    relations = ELEMENT_RELATIONS[day_element]

    if target_element == relations['produces']:
        return 'me_producing'
    elif target_element == relations['controls']:
        return 'me_controlling'
    elif target_element == relations['produced_by']:
        return 'producing_me'
    elif target_element == relations['controlled_by']:
        return 'controlling_me'

    return 'unknown'


def generates(source: str, target: str) -> bool:
    """source 是否生 target"""
    return ELEMENT_RELATIONS.get(source, {}).get('produces') == target


def controls(source: str, target: str) -> bool:
    """source 是否克 target"""
    return ELEMENT_RELATIONS.get(source, {}).get('controls') == target
