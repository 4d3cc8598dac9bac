#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字报告数据模型

引擎的输入（UserInput）与输出（BaziReport）。
报告一次生成、整体替换，所有模型均为冻结模型，可直接序列化持久化。
"""

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer

from core.data.stems_branches import ELEMENTS


class FrozenModel(BaseModel):
    """不可变模型基类"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ==================== 输入 ====================

class BirthLocation(FrozenModel):
    """出生地"""
    longitude: float = Field(..., ge=-180, le=180, description="经度（东经为正）", examples=[116.40])
    latitude: float = Field(..., ge=-90, le=90, description="纬度", examples=[39.90])
    province: str = Field("", description="省份", examples=["北京"])
    city: str = Field("", description="城市", examples=["北京"])
    area: Optional[str] = Field(None, description="区县")


class UserInput(FrozenModel):
    """排盘请求"""
    name: str = Field("", description="姓名")
    gender: str = Field(..., description="性别：male(男) 或 female(女)", examples=["male"])
    birth_date: str = Field(..., alias="birthDate", description="出生日期 YYYY-MM-DD（农历时为农历年月日）", examples=["1990-05-15"])
    birth_time: str = Field(..., alias="birthTime", description="出生时间 HH:MM", examples=["14:30"])
    is_lunar: bool = Field(False, alias="isLunar", description="是否为农历日期")
    use_solar_time: bool = Field(False, alias="useSolarTime", description="是否按经度校正真太阳时")
    birth_location: Optional[BirthLocation] = Field(None, alias="birthLocation", description="出生地")

    @field_validator('gender')
    @classmethod
    def validate_gender(cls, v):
        """验证性别"""
        if v not in ('male', 'female'):
            raise ValueError('性别必须为 male 或 female')
        return v

    @field_validator('birth_time')
    @classmethod
    def validate_time(cls, v):
        """验证时间格式"""
        parts = v.split(':')
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            raise ValueError('时间格式错误，应为 HH:MM')
        hour, minute = int(parts[0]), int(parts[1])
        if not (0 <= hour <= 23 and 0 <= minute <= 59):
            raise ValueError('时间格式错误，应为 HH:MM')
        return v

    @field_validator('birth_date')
    @classmethod
    def validate_date(cls, v):
        """只检查非空，格式与存在性由历法转换负责"""
        if not v or not v.strip():
            raise ValueError('日期不能为空')
        return v.strip()

    @property
    def gender_code(self) -> int:
        """大运起排使用的性别编码：男 1，女 0"""
        return 1 if self.gender == 'male' else 0


# ==================== 排盘 ====================

class Pillar(FrozenModel):
    """单柱"""
    stem: str = Field(..., description="天干")
    branch: str = Field(..., description="地支")
    hidden_stems: Tuple[str, ...] = Field(..., description="藏干（本气在前）")
    ten_god: str = Field(..., description="天干十神（日柱为日主）")
    hidden_ten_gods: Tuple[str, ...] = Field((), description="藏干十神")
    element_label: str = Field(..., description="干支五行，如 木火")

    @property
    def ganzhi(self) -> str:
        return f"{self.stem}{self.branch}"


class BaziChart(FrozenModel):
    """四柱命盘"""
    year: Pillar
    month: Pillar
    day: Pillar
    hour: Pillar
    day_master: str = Field(..., description="日主天干")
    day_master_element: str = Field(..., description="日主五行")
    gender: str
    solar_date: str = Field(..., description="公历（已校正）")
    lunar_date: str = Field(..., description="农历")

    def pillars(self) -> Tuple[Pillar, Pillar, Pillar, Pillar]:
        return self.year, self.month, self.day, self.hour


class ElementCounts(FrozenModel):
    """五行出现次数，按五行名取值，序列化为 {"金": n, ...}"""
    metal: int = Field(0, ge=0, alias="金")
    wood: int = Field(0, ge=0, alias="木")
    water: int = Field(0, ge=0, alias="水")
    fire: int = Field(0, ge=0, alias="火")
    earth: int = Field(0, ge=0, alias="土")

    def __getitem__(self, element: str) -> int:
        return getattr(self, _ELEMENT_FIELDS[element])

    def get(self, element: str, default: int = 0) -> int:
        field_name = _ELEMENT_FIELDS.get(element)
        return getattr(self, field_name) if field_name else default

    def keys(self) -> Tuple[str, ...]:
        return ELEMENTS

    def values(self) -> Tuple[int, ...]:
        return tuple(self[element] for element in ELEMENTS)

    def items(self) -> Tuple[Tuple[str, int], ...]:
        return tuple((element, self[element]) for element in ELEMENTS)

    @model_serializer
    def serialize_counts(self) -> Dict[str, int]:
        return dict(self.items())


_ELEMENT_FIELDS = {
    field.alias: name for name, field in ElementCounts.model_fields.items()
}


class ElementScores(FrozenModel):
    """五行统计"""
    scores: ElementCounts = Field(..., description="五行出现次数，合计为 8")
    strongest: str
    weakest: str
    missing: Tuple[str, ...] = ()


# ==================== 运势 ====================

class LuckPillar(FrozenModel):
    """大运"""
    stem: str
    branch: str
    start_age: int = Field(..., ge=0)
    start_year: int
    stem_element: str
    branch_element: str
    score: int = Field(..., ge=0, le=100)

    @property
    def label(self) -> str:
        return f"{self.stem}{self.branch}"


class YearlyLuckPoint(FrozenModel):
    """流年"""
    year: int
    age: int = Field(..., ge=0)
    stem: str
    branch: str
    score: int = Field(..., ge=10, le=95)
    luck_pillar: str = Field(..., description="所在大运干支")


# ==================== 人生能量 ====================

class LifeEnergyScores(FrozenModel):
    career: int = Field(..., ge=0, le=100)
    wealth: int = Field(..., ge=0, le=100)
    emotion: int = Field(..., ge=0, le=100)
    health: int = Field(..., ge=0, le=100)
    wisdom: int = Field(..., ge=0, le=100)


class LifeEnergySubScores(FrozenModel):
    nobleman: int = Field(..., ge=0, le=100, description="贵人")
    peach_blossom: int = Field(..., ge=0, le=100, description="桃花")
    career: int = Field(..., ge=0, le=100)
    wealth: int = Field(..., ge=0, le=100)


class LifeEnergyReport(FrozenModel):
    scores: LifeEnergyScores
    total_score: int = Field(..., ge=0, le=100)
    description: str
    sub_scores: LifeEnergySubScores


# ==================== 文案 ====================

class AnalysisSections(FrozenModel):
    personality: Tuple[str, ...] = ()
    career: Tuple[str, ...] = ()
    love: Tuple[str, ...] = ()
    health: Tuple[str, ...] = ()
    advice: Tuple[str, ...] = ()
    life_message: Tuple[str, ...] = ()


# ==================== 报告 ====================

class BaziReport(FrozenModel):
    """完整报告，展示层唯一消费的数据单元"""
    chart: BaziChart
    wuxing: ElementScores
    luck_pillars: Tuple[LuckPillar, ...]
    yearly_luck: Tuple[YearlyLuckPoint, ...]
    life_energy: LifeEnergyReport
    analysis: AnalysisSections
