#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字核心计算模块

提供八字计算的核心功能：
- 五行关系计算
- 十神计算
"""

from .element_relations import (
    ELEMENT_RELATIONS,
    get_element_relation,
    generates,
    controls,
)
from .ten_gods import (
    DAY_MASTER_LABEL,
    get_main_star,
    get_branch_ten_gods,
    resolve_ten_god,
)

__all__ = [
    'ELEMENT_RELATIONS',
    'get_element_relation',
    'generates',
    'controls',
    'DAY_MASTER_LABEL',
    'get_main_star',
    'get_branch_ten_gods',
    'resolve_ten_god',
]
