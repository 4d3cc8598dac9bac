#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
历法转换适配层

封装 lunar_python 提供的公历/农历互转、八字干支、大运起排能力，并负责真太阳时校正。
引擎其余部分只通过本模块访问外部历法库。
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from functools import lru_cache
from typing import List, NamedTuple, Optional, Tuple

from lunar_python import Lunar, LunarYear, Solar

from core.calculators.bazi_logging import safe_log
from core.exceptions import InvalidDateError

# 标准经线（东八区，东经 120 度）
STANDARD_MERIDIAN = 120.0
# 每经度对应的时差秒数（4 分钟）
SECONDS_PER_DEGREE = 4 * 60

# 流年干支取值日：农历六月十五，避开年首年尾的交界
YEAR_GANZHI_MONTH = 6
YEAR_GANZHI_DAY = 15

LUNAR_MONTH_MAP = {
    '正': 1, '一': 1, '二': 2, '三': 3, '四': 4, '五': 5, '六': 6,
    '七': 7, '八': 8, '九': 9, '十': 10, '十一': 11, '冬': 11, '十二': 12, '腊': 12,
}

LUNAR_DAY_MAP = {
    '初一': 1, '初二': 2, '初三': 3, '初四': 4, '初五': 5,
    '初六': 6, '初七': 7, '初八': 8, '初九': 9, '初十': 10,
    '十一': 11, '十二': 12, '十三': 13, '十四': 14, '十五': 15,
    '十六': 16, '十七': 17, '十八': 18, '十九': 19, '二十': 20,
    '廿一': 21, '廿二': 22, '廿三': 23, '廿四': 24, '廿五': 25,
    '廿六': 26, '廿七': 27, '廿八': 28, '廿九': 29, '三十': 30,
}

_LUNAR_STRING_PATTERN = re.compile(
    r'^(\d{1,4})年(闰)?(十一|十二|[正一二三四五六七八九十冬腊])月'
    r'(初[一二三四五六七八九十]|十[一二三四五六七八九]|二十|廿[一二三四五六七八九]|三十)$'
)
_NUMERIC_DATE_PATTERN = re.compile(r'^(\d{1,4})-(\d{1,2})-(\d{1,2})$')


class ParsedDate(NamedTuple):
    """解析后的出生日期；lunar_text 表示输入为中文农历写法"""
    year: int
    month: int
    day: int
    is_leap_month: bool = False
    lunar_text: bool = False


@dataclass(frozen=True)
class EightChar:
    """八字：年、月、日、时四柱的天干地支"""
    year_stem: str
    year_branch: str
    month_stem: str
    month_branch: str
    day_stem: str
    day_branch: str
    hour_stem: str
    hour_branch: str

    def pillar(self, position: str) -> Tuple[str, str]:
        """按柱位取 (天干, 地支)，position 为 year/month/day/hour"""
        return getattr(self, f'{position}_stem'), getattr(self, f'{position}_branch')


@dataclass(frozen=True)
class DecennialCycle:
    """外部历法库给出的一步大运，首步可能是干支为空的占位项"""
    ganzhi: str
    start_age: int
    start_year: int

    @property
    def is_placeholder(self) -> bool:
        return len(self.ganzhi) < 2

    @property
    def stem(self) -> str:
        return self.ganzhi[:1]

    @property
    def branch(self) -> str:
        return self.ganzhi[1:2]


@dataclass(frozen=True)
class CalendarResult:
    """一次历法转换的结果：校正后的公历时刻与其农历、八字表示"""
    solar_datetime: datetime
    lunar_year: int
    lunar_month: int
    lunar_day: int
    is_leap_month: bool
    solar_date_str: str
    lunar_date_str: str
    eight_char: EightChar


class LunarConverter:
    """农历转换工具类 - 提供统一的公历/农历互转与真太阳时校正"""

    # === 输入解析 ===================================================================================

    @staticmethod
    def parse_date(date_str: str) -> ParsedDate:
        """
        解析日期字符串

        支持 "YYYY-MM-DD"（公历或农历年月日）以及 "2024年正月初一"、"2024年闰二月十五"。

        Returns:
            ParsedDate，中文农历写法的 lunar_text 为 True
        """
        text = (date_str or '').strip()

        match = _NUMERIC_DATE_PATTERN.match(text)
        if match:
            return ParsedDate(int(match.group(1)), int(match.group(2)), int(match.group(3)))

        match = _LUNAR_STRING_PATTERN.match(text)
        if match:
            return ParsedDate(
                int(match.group(1)),
                LUNAR_MONTH_MAP[match.group(3)],
                LUNAR_DAY_MAP[match.group(4)],
                is_leap_month=match.group(2) == '闰',
                lunar_text=True,
            )

        raise InvalidDateError.unparseable(date_str)

    @staticmethod
    def parse_time(time_str: str) -> Tuple[int, int]:
        """解析 "HH:MM" 时间"""
        hour, minute = map(int, time_str.split(':'))
        return hour, minute

    # === 公历 / 农历互转 ==============================================================================

    @staticmethod
    def lunar_to_solar(lunar_year: int, lunar_month: int, lunar_day: int, is_leap_month: bool = False) -> date:
        """
        将农历日期转换为公历日期

        Raises:
            InvalidDateError: 该农历年无此月（含闰月），或该月没有这一天
        """
        month_key = -lunar_month if is_leap_month else lunar_month
        try:
            lunar_month_obj = LunarYear.fromYear(lunar_year).getMonth(month_key)
        except Exception as e:
            raise InvalidDateError(lunar_year, lunar_month, lunar_day, 'lunar', detail=str(e)) from e

        if lunar_month_obj is None:
            raise InvalidDateError(lunar_year, lunar_month, lunar_day, 'lunar', detail="该年没有此月")
        if lunar_day < 1 or lunar_day > lunar_month_obj.getDayCount():
            raise InvalidDateError(
                lunar_year, lunar_month, lunar_day, 'lunar',
                detail=f"该月只有{lunar_month_obj.getDayCount()}天",
            )

        try:
            solar = Lunar.fromYmd(lunar_year, month_key, lunar_day).getSolar()
        except Exception as e:
            raise InvalidDateError(lunar_year, lunar_month, lunar_day, 'lunar', detail=str(e)) from e

        return date(solar.getYear(), solar.getMonth(), solar.getDay())

    @staticmethod
    def build_solar_datetime(year: int, month: int, day: int, hour: int, minute: int) -> datetime:
        """构造公历时刻，日期不存在时抛出 InvalidDateError"""
        try:
            return datetime(year, month, day, hour, minute, 0)
        except ValueError as e:
            raise InvalidDateError(year, month, day, 'solar', detail=str(e)) from e

    @staticmethod
    def apply_true_solar_time(solar_datetime: datetime, longitude: float) -> datetime:
        """
        真太阳时校正

        时差 = (经度 - 120) * 4 分钟，作用于完整时刻，可跨日、跨月、跨年。
        """
        offset_seconds = (longitude - STANDARD_MERIDIAN) * SECONDS_PER_DEGREE
        return solar_datetime + timedelta(seconds=offset_seconds)

    @staticmethod
    def solar_to_lunar(solar_datetime: datetime) -> CalendarResult:
        """将公历时刻转换为农历与八字"""
        solar = Solar.fromYmdHms(
            solar_datetime.year, solar_datetime.month, solar_datetime.day,
            solar_datetime.hour, solar_datetime.minute, solar_datetime.second,
        )
        lunar = solar.getLunar()
        eight_char = lunar.getEightChar()

        return CalendarResult(
            solar_datetime=solar_datetime,
            lunar_year=lunar.getYear(),
            lunar_month=abs(lunar.getMonth()),
            lunar_day=lunar.getDay(),
            is_leap_month=lunar.getMonth() < 0,
            solar_date_str=(
                f"{solar.getYear()}年{solar.getMonth()}月{solar.getDay()}日 {solar.getHour()}时"
            ),
            lunar_date_str=lunar.toString(),
            eight_char=EightChar(
                year_stem=eight_char.getYearGan(),
                year_branch=eight_char.getYearZhi(),
                month_stem=eight_char.getMonthGan(),
                month_branch=eight_char.getMonthZhi(),
                day_stem=eight_char.getDayGan(),
                day_branch=eight_char.getDayZhi(),
                hour_stem=eight_char.getTimeGan(),
                hour_branch=eight_char.getTimeZhi(),
            ),
        )

    @staticmethod
    def resolve_birth_moment(
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        is_lunar: bool = False,
        use_solar_time_correction: bool = False,
        longitude: Optional[float] = None,
        is_leap_month: bool = False,
    ) -> CalendarResult:
        """
        将出生输入统一为校正后的公历时刻及其农历表示

        Args:
            year/month/day: 出生日期（is_lunar 时为农历年月日）
            hour/minute: 出生时间
            is_lunar: 是否农历输入
            use_solar_time_correction: 是否按经度校正真太阳时
            longitude: 出生地经度
            is_leap_month: 农历输入是否为闰月

        Raises:
            InvalidDateError: 日期不存在
        """
        if is_lunar:
            solar_date = LunarConverter.lunar_to_solar(year, month, day, is_leap_month)
            solar_datetime = LunarConverter.build_solar_datetime(
                solar_date.year, solar_date.month, solar_date.day, hour, minute
            )
        else:
            solar_datetime = LunarConverter.build_solar_datetime(year, month, day, hour, minute)

        if use_solar_time_correction and longitude is not None:
            corrected = LunarConverter.apply_true_solar_time(solar_datetime, longitude)
            safe_log('debug', f"真太阳时校正: {solar_datetime} -> {corrected} (经度 {longitude})")
            solar_datetime = corrected

        return LunarConverter.solar_to_lunar(solar_datetime)

    # === 大运 / 流年 =================================================================================

    @staticmethod
    def get_decennial_cycles(solar_datetime: datetime, gender_code: int) -> List[DecennialCycle]:
        """
        起排大运

        Args:
            solar_datetime: 校正后的出生时刻
            gender_code: 1 男，0 女（决定顺逆排）

        Returns:
            按外部库顺序返回的大运列表，首项可能是干支为空的占位项
        """
        solar = Solar.fromYmdHms(
            solar_datetime.year, solar_datetime.month, solar_datetime.day,
            solar_datetime.hour, solar_datetime.minute, solar_datetime.second,
        )
        yun = solar.getLunar().getEightChar().getYun(gender_code)
        return [
            DecennialCycle(
                ganzhi=da_yun.getGanZhi() or '',
                start_age=da_yun.getStartAge(),
                start_year=da_yun.getStartYear(),
            )
            for da_yun in yun.getDaYun()
        ]

    @staticmethod
    def get_year_ganzhi(year: int) -> Tuple[str, str]:
        """
        获取指定年份的流年干支

        以农历该年六月十五取值，不受立春/春节边界影响。
        """
        return _year_ganzhi(year)


@lru_cache(maxsize=512)
def _year_ganzhi(year: int) -> Tuple[str, str]:
    lunar = Lunar.fromYmd(year, YEAR_GANZHI_MONTH, YEAR_GANZHI_DAY)
    return lunar.getYearGan(), lunar.getYearZhi()
