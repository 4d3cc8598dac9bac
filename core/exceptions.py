#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字引擎异常定义

引擎中唯一可能失败的环节是历法转换；其余计算均为封闭域上的查表运算。
"""

from typing import Optional


class BaziError(Exception):
    """八字引擎异常基类"""

    error_type = "bazi_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidDateError(BaziError, ValueError):
    """公历或农历日期不存在 / 格式错误"""

    error_type = "invalid_date"

    def __init__(
        self,
        year: Optional[int],
        month: Optional[int],
        day: Optional[int],
        calendar_type: str = "solar",
        detail: Optional[str] = None,
        raw_input: Optional[str] = None,
    ):
        self.year = year
        self.month = month
        self.day = day
        self.calendar_type = calendar_type
        self.detail = detail
        self.raw_input = raw_input

        if raw_input is not None:
            message = f"日期 '{raw_input}' 无效"
        elif calendar_type == "lunar":
            message = f"农历日期 {year}年{month}月{day}日 不存在 (可能是该月只有29天，或该年没有此闰月)"
        else:
            message = f"公历日期 {year}年{month}月{day}日 无效"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    @classmethod
    def unparseable(cls, date_str: Optional[str]) -> "InvalidDateError":
        """无法识别的日期写法"""
        return cls(None, None, None, detail="无法解析日期字符串", raw_input=date_str or "")

    @classmethod
    def lunar_text_without_lunar_flag(cls, date_str: str) -> "InvalidDateError":
        """中文农历写法出现在公历输入中"""
        return cls(None, None, None, detail="农历写法的日期需要设置 isLunar", raw_input=date_str)


class LuckCycleOrderError(BaziError, ValueError):
    """大运序列未按起运年龄/年份严格递增"""

    error_type = "luck_cycle_order"
