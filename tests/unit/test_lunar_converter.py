#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""历法转换单元测试"""

from datetime import date, datetime

import pytest
from lunar_python import LunarYear

from core.calculators.LunarConverter import LunarConverter
from core.exceptions import InvalidDateError


def find_month_with_days(year, day_count):
    """找出该农历年中天数为 day_count 的非闰月"""
    for month in range(1, 13):
        lunar_month = LunarYear.fromYear(year).getMonth(month)
        if lunar_month is not None and lunar_month.getDayCount() == day_count:
            return month
    raise AssertionError(f"{year} 年没有 {day_count} 天的月份")


class TestParseDate:
    def test_numeric(self):
        assert LunarConverter.parse_date("2024-02-10") == (2024, 2, 10, False, False)

    def test_single_digit_parts(self):
        assert LunarConverter.parse_date("2024-2-1") == (2024, 2, 1, False, False)

    def test_lunar_string(self):
        assert LunarConverter.parse_date("2024年正月初一") == (2024, 1, 1, False, True)

    def test_leap_lunar_string(self):
        assert LunarConverter.parse_date("2023年闰二月十五") == (2023, 2, 15, True, True)

    def test_numeric_is_not_lunar_text(self):
        assert LunarConverter.parse_date("2024-12-30").lunar_text is False

    def test_unparseable(self):
        with pytest.raises(InvalidDateError):
            LunarConverter.parse_date("not a date")

    def test_unparseable_message_uses_raw_input(self):
        with pytest.raises(InvalidDateError) as exc_info:
            LunarConverter.parse_date("2024/13/45")
        assert "2024/13/45" in exc_info.value.message
        assert "None" not in exc_info.value.message
        assert exc_info.value.raw_input == "2024/13/45"

    def test_parse_time(self):
        assert LunarConverter.parse_time("09:05") == (9, 5)


class TestSolarToLunar:
    def test_spring_festival_2024(self):
        result = LunarConverter.solar_to_lunar(datetime(2024, 2, 10, 12, 0))
        assert (result.lunar_year, result.lunar_month, result.lunar_day) == (2024, 1, 1)
        assert result.is_leap_month is False
        assert result.solar_date_str == "2024年2月10日 12时"
        eight_char = result.eight_char
        assert eight_char.pillar('year') == ('甲', '辰')
        assert eight_char.pillar('month') == ('丙', '寅')
        assert eight_char.pillar('day') == ('甲', '辰')
        assert eight_char.pillar('hour') == ('庚', '午')

    def test_round_trip(self):
        result = LunarConverter.solar_to_lunar(datetime(1990, 5, 15, 14, 30))
        back = LunarConverter.lunar_to_solar(
            result.lunar_year, result.lunar_month, result.lunar_day, result.is_leap_month
        )
        assert back == date(1990, 5, 15)


class TestLunarToSolar:
    @pytest.mark.parametrize("lunar", [(2024, 1, 1, False), (1990, 4, 21, False), (2023, 2, 15, True), (2000, 12, 29, False)])
    def test_lunar_round_trip(self, lunar):
        year, month, day, is_leap = lunar
        solar = LunarConverter.lunar_to_solar(year, month, day, is_leap)
        result = LunarConverter.solar_to_lunar(datetime(solar.year, solar.month, solar.day, 12, 0))
        assert (result.lunar_year, result.lunar_month, result.lunar_day, result.is_leap_month) == lunar

    def test_new_year(self):
        assert LunarConverter.lunar_to_solar(2024, 1, 1) == date(2024, 2, 10)

    def test_day_30_in_29_day_month(self):
        month = find_month_with_days(2024, 29)
        with pytest.raises(InvalidDateError) as exc_info:
            LunarConverter.lunar_to_solar(2024, month, 30)
        error = exc_info.value
        assert error.calendar_type == 'lunar'
        assert (error.year, error.month, error.day) == (2024, month, 30)
        assert '农历' in error.message

    def test_missing_leap_month(self):
        # 2024 年无闰月
        with pytest.raises(InvalidDateError):
            LunarConverter.lunar_to_solar(2024, 2, 15, is_leap_month=True)

    def test_leap_month_round_trip(self):
        solar = LunarConverter.lunar_to_solar(2023, 2, 15, is_leap_month=True)
        result = LunarConverter.solar_to_lunar(datetime(solar.year, solar.month, solar.day, 12, 0))
        assert result.is_leap_month is True
        assert (result.lunar_month, result.lunar_day) == (2, 15)

    def test_invalid_date_error_is_value_error(self):
        with pytest.raises(ValueError):
            LunarConverter.lunar_to_solar(2024, 13, 1)


class TestTrueSolarTime:
    def test_east_of_meridian(self):
        corrected = LunarConverter.apply_true_solar_time(datetime(2024, 2, 10, 12, 0), 135.0)
        assert corrected == datetime(2024, 2, 10, 13, 0)

    def test_west_of_meridian(self):
        corrected = LunarConverter.apply_true_solar_time(datetime(2024, 2, 10, 12, 0), 105.0)
        assert corrected == datetime(2024, 2, 10, 11, 0)

    def test_crosses_day_boundary(self):
        corrected = LunarConverter.apply_true_solar_time(datetime(2024, 12, 31, 23, 30), 135.0)
        assert corrected == datetime(2025, 1, 1, 0, 30)

    def test_resolve_with_correction(self):
        result = LunarConverter.resolve_birth_moment(
            2024, 2, 10, 23, 30, use_solar_time_correction=True, longitude=135.0,
        )
        assert result.solar_datetime == datetime(2024, 2, 11, 0, 30)

    def test_resolve_without_correction_ignores_longitude(self):
        result = LunarConverter.resolve_birth_moment(2024, 2, 10, 12, 0, longitude=135.0)
        assert result.solar_datetime == datetime(2024, 2, 10, 12, 0)


class TestResolveBirthMoment:
    def test_invalid_solar_date(self):
        with pytest.raises(InvalidDateError) as exc_info:
            LunarConverter.resolve_birth_moment(2023, 2, 30, 12, 0)
        assert exc_info.value.calendar_type == 'solar'

    def test_lunar_input(self):
        result = LunarConverter.resolve_birth_moment(2024, 1, 1, 12, 0, is_lunar=True)
        assert result.solar_datetime == datetime(2024, 2, 10, 12, 0)


class TestCycles:
    def test_decennial_cycles(self):
        cycles = LunarConverter.get_decennial_cycles(datetime(2024, 2, 10, 12, 0), 1)
        real = [cycle for cycle in cycles if not cycle.is_placeholder]
        assert len(real) >= 8
        assert all(len(cycle.ganzhi) == 2 for cycle in real)

    def test_year_ganzhi(self):
        assert LunarConverter.get_year_ganzhi(2024) == ('甲', '辰')
        assert LunarConverter.get_year_ganzhi(1984) == ('甲', '子')
