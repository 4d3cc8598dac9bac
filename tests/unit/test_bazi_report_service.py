#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""八字报告服务单元测试"""

import random
from datetime import datetime
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from core.calculators.LunarConverter import DecennialCycle
from core.exceptions import InvalidDateError, LuckCycleOrderError
from core.models import BaziReport, UserInput
from server.services.bazi_report_service import BaziReportService, generate_report


def make_input(**overrides):
    data = {
        "name": "测试",
        "gender": "male",
        "birthDate": "2024-02-10",
        "birthTime": "12:00",
    }
    data.update(overrides)
    return UserInput.model_validate(data)


class TestGenerateReport:
    def test_same_seed_same_report(self, sample_user_input):
        a = generate_report(sample_user_input, random.Random(42))
        b = generate_report(sample_user_input, random.Random(42))
        assert a.model_dump_json() == b.model_dump_json()

    def test_chart(self, sample_user_input, seeded_rng):
        report = generate_report(sample_user_input, seeded_rng)
        assert [p.ganzhi for p in report.chart.pillars()] == ['甲辰', '丙寅', '甲辰', '庚午']
        assert report.chart.gender == 'male'

    def test_wuxing(self, sample_user_input, seeded_rng):
        report = generate_report(sample_user_input, seeded_rng)
        assert sum(report.wuxing.scores.values()) == 8
        assert report.wuxing.strongest == '木'
        assert report.wuxing.missing == ('水',)

    def test_element_counts_are_immutable(self, sample_user_input, seeded_rng):
        report = generate_report(sample_user_input, seeded_rng)
        before = report.wuxing.scores['金']
        with pytest.raises(TypeError):
            report.wuxing.scores['金'] = 99
        with pytest.raises(ValidationError):
            report.wuxing.scores.metal = 99
        assert report.wuxing.scores['金'] == before

    def test_element_counts_serialize_as_mapping(self, sample_user_input, seeded_rng):
        report = generate_report(sample_user_input, seeded_rng)
        dumped = report.model_dump()['wuxing']['scores']
        assert list(dumped) == ['金', '木', '水', '火', '土']
        assert BaziReport.model_validate(report.model_dump()) == report

    def test_luck_pillars(self, sample_user_input, seeded_rng):
        report = generate_report(sample_user_input, seeded_rng)
        pillars = report.luck_pillars
        assert 0 < len(pillars) <= 8
        assert all(p.stem and p.branch for p in pillars)
        ages = [p.start_age for p in pillars]
        years = [p.start_year for p in pillars]
        assert ages == sorted(set(ages))
        assert years == sorted(set(years))

    def test_yearly_luck(self, sample_user_input, seeded_rng):
        report = generate_report(sample_user_input, seeded_rng)
        points = report.yearly_luck
        assert len(points) == 80
        assert points[0].year == report.luck_pillars[0].start_year
        assert all(10 <= p.score <= 95 for p in points)
        labels = {p.label for p in report.luck_pillars}
        assert all(p.luck_pillar in labels for p in points)
        assert points[0].age == points[0].year - 2024 + 1

    def test_life_energy(self, sample_user_input, seeded_rng):
        energy = generate_report(sample_user_input, seeded_rng).life_energy
        assert energy.scores.health == 85
        assert 0 <= energy.total_score <= 100
        assert energy.description

    def test_analysis_sections_present(self, sample_user_input, seeded_rng):
        analysis = generate_report(sample_user_input, seeded_rng).analysis
        for section in ('personality', 'career', 'love', 'health', 'advice', 'life_message'):
            assert getattr(analysis, section), section

    def test_lunar_input(self, seeded_rng):
        report = generate_report(make_input(birthDate="2024年正月初一", isLunar=True), seeded_rng)
        assert report.chart.day.ganzhi == '甲辰'

    def test_lunar_numeric_input(self, seeded_rng):
        report = generate_report(make_input(birthDate="2024-01-01", isLunar=True), seeded_rng)
        assert report.chart.solar_date.startswith("2024年2月10日")

    def test_solar_time_correction_uses_location(self, seeded_rng):
        user_input = make_input(
            birthTime="23:30",
            useSolarTime=True,
            birthLocation={"longitude": 135.0, "latitude": 35.0, "province": "", "city": ""},
        )
        report = generate_report(user_input, seeded_rng)
        assert report.chart.solar_date == "2024年2月11日 0时"

    def test_solar_time_without_location_is_ignored(self, seeded_rng):
        report = generate_report(make_input(useSolarTime=True), seeded_rng)
        assert report.chart.solar_date == "2024年2月10日 12时"

    def test_invalid_solar_date(self, seeded_rng):
        with pytest.raises(InvalidDateError):
            generate_report(make_input(birthDate="2023-02-30"), seeded_rng)

    def test_lunar_day_30_in_short_month(self, seeded_rng):
        from lunar_python import LunarYear
        month = next(m for m in range(1, 13) if LunarYear.fromYear(2024).getMonth(m).getDayCount() == 29)
        with pytest.raises(InvalidDateError):
            generate_report(make_input(birthDate=f"2024-{month:02d}-30", isLunar=True), seeded_rng)

    def test_invalid_lunar_date(self, seeded_rng):
        with pytest.raises(InvalidDateError):
            generate_report(make_input(birthDate="2024年闰二月十五", isLunar=True), seeded_rng)

    @pytest.mark.parametrize("birth_date", ["2024年腊月三十", "2023年闰二月十五"])
    def test_lunar_text_requires_lunar_flag(self, birth_date, seeded_rng):
        with pytest.raises(InvalidDateError) as exc_info:
            generate_report(make_input(birthDate=birth_date, isLunar=False), seeded_rng)
        assert birth_date in exc_info.value.message
        assert "isLunar" in exc_info.value.message


class TestCycleProvider:
    def test_out_of_order_cycles_raise(self, sample_user_input, seeded_rng):
        provider = MagicMock(return_value=[
            DecennialCycle('', 1, 2024),
            DecennialCycle('乙卯', 3, 2027),
            DecennialCycle('丙辰', 23, 2047),
            DecennialCycle('丁巳', 13, 2037),
        ])
        service = BaziReportService(cycle_provider=provider)
        with pytest.raises(LuckCycleOrderError):
            service.generate_report(sample_user_input, seeded_rng)

    def test_provider_receives_moment_and_gender(self, seeded_rng):
        provider = MagicMock(return_value=[DecennialCycle('乙卯', 3, 2027)])
        service = BaziReportService(cycle_provider=provider, year_ganzhi_provider=lambda year: ('甲', '子'))
        report = service.generate_report(make_input(gender="female"), seeded_rng)
        provider.assert_called_once_with(datetime(2024, 2, 10, 12, 0), 0)
        assert len(report.luck_pillars) == 1
        assert all((p.stem, p.branch) == ('甲', '子') for p in report.yearly_luck)

    def test_custom_renderer(self, sample_user_input, seeded_rng):
        from core.models import AnalysisSections
        renderer = MagicMock(return_value=AnalysisSections(personality=('x',)))
        report = BaziReportService(renderer=renderer).generate_report(sample_user_input, seeded_rng)
        assert report.analysis.personality == ('x',)
        renderer.assert_called_once()
