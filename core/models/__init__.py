# -*- coding: utf-8 -*-
"""
八字报告数据模型
"""

from .report_models import (
    AnalysisSections,
    BaziChart,
    BaziReport,
    BirthLocation,
    ElementCounts,
    ElementScores,
    LifeEnergyReport,
    LifeEnergyScores,
    LifeEnergySubScores,
    LuckPillar,
    Pillar,
    UserInput,
    YearlyLuckPoint,
)

__all__ = [
    'AnalysisSections',
    'BaziChart',
    'BaziReport',
    'BirthLocation',
    'ElementCounts',
    'ElementScores',
    'LifeEnergyReport',
    'LifeEnergyScores',
    'LifeEnergySubScores',
    'LuckPillar',
    'Pillar',
    'UserInput',
    'YearlyLuckPoint',
]
