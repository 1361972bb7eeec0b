import os
import sys
from datetime import date
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))
from calc.service_segmentation import ServiceSegmentation, segment_service
from rules.SBRDetails import DEFAULT_AGE_BANDS


def test_single_band_service():
    service = ServiceSegmentation(date(2022, 6, 1), date(1992, 1, 1), date(2025, 8, 1), DEFAULT_AGE_BANDS)
    assert service.raw_service_months == 38
    assert service.raw_service_full_years == 3
    assert service.raw_service_remainder_months == 2
    assert len(service.segments) == 1
    assert service.weighted_years == 1.5


def test_without_birth_date_uses_lowest_weight():
    # 2015-03 to 2025-11 = 10y 8m, rounds up to 11 years at 0.5
    service = ServiceSegmentation(date(2015, 3, 1), None, date(2025, 11, 1), DEFAULT_AGE_BANDS)
    assert service.raw_service_months == 128
    assert len(service.segments) == 1
    assert service.segments[0].weight == 0.5
    assert service.weighted_years == 5.5


def test_segments_split_at_band_boundaries():
    # Born 1973: 35 in 2008, 45 in 2018. Employment starts at age 37.
    segments = segment_service(date(2010, 1, 1), date(1973, 1, 1), date(2025, 9, 1), DEFAULT_AGE_BANDS)
    assert [(s.weight, s.months) for s in segments] == [(1.0, 96), (1.5, 92)]
    assert segments[0].start_date == date(2010, 1, 1)
    assert segments[0].end_date == date(2018, 1, 1)
    assert segments[1].end_date == date(2025, 9, 1)


def test_extra_year_goes_to_last_segment_with_remainder():
    service = ServiceSegmentation(date(2010, 1, 1), date(1973, 1, 1), date(2025, 9, 1), DEFAULT_AGE_BANDS)
    # 15y 8m -> 16y; 7y 8m in the 45-55 band becomes 8y
    assert [s.full_years for s in service.segments] == [8, 8]
    assert service.weighted_years == 20.0


def test_extra_year_skips_whole_year_final_segment():
    # Born 1980 (35 on 2015-01-01). 2010-04..2015-01 = 4y 9m at 0.5, 2015-01..2020-01 = 5y 0m at 1.0.
    # Total 9y 9m rounds up; the year goes to the first segment, not the last.
    service = ServiceSegmentation(date(2010, 4, 1), date(1980, 1, 1), date(2020, 1, 1), DEFAULT_AGE_BANDS)
    assert [s.months for s in service.segments] == [57, 60]
    assert [s.full_years for s in service.segments] == [5, 5]
    assert service.weighted_years == 7.5


def test_extra_year_in_later_band_weight():
    # Born 1980: 2015-01..2025-01 is 10y at 1.0, then 9 months at 1.5 round the total up
    service = ServiceSegmentation(date(2015, 1, 1), date(1980, 1, 1), date(2025, 10, 30), DEFAULT_AGE_BANDS)
    assert service.raw_service_months == 129
    assert [s.full_years for s in service.segments] == [10, 1]
    assert service.weighted_years == 11.5


def test_three_bands_round_up():
    service = ServiceSegmentation(date(2005, 1, 1), date(1980, 1, 1), date(2025, 12, 31), DEFAULT_AGE_BANDS)
    assert service.raw_service_months == 251
    assert [s.weight for s in service.segments] == [0.5, 1.0, 1.5]
    assert service.weighted_years == 16.5


def test_remainder_of_six_rounds_down():
    service = ServiceSegmentation(date(2023, 1, 1), date(1993, 1, 1), date(2025, 7, 30), DEFAULT_AGE_BANDS)
    assert service.raw_service_months == 30
    assert service.raw_service_remainder_months == 6
    assert service.weighted_years == 1.0


def test_remainder_of_seven_rounds_up():
    service = ServiceSegmentation(date(2023, 1, 1), date(1993, 1, 1), date(2025, 8, 31), DEFAULT_AGE_BANDS)
    assert service.raw_service_months == 31
    assert service.raw_service_remainder_months == 7
    assert service.weighted_years == 1.5


def test_unbounded_band_reaches_exit():
    # Born 1960; service 1990-01 .. 2026-08 passes through all four bands
    service = ServiceSegmentation(date(1990, 1, 1), date(1960, 1, 1), date(2026, 8, 1), DEFAULT_AGE_BANDS)
    assert [s.weight for s in service.segments] == [0.5, 1.0, 1.5, 2.0]
    assert [s.months for s in service.segments] == [60, 120, 120, 139]
    assert service.weighted_years == 51.5


def test_no_service_gives_no_segments():
    service = ServiceSegmentation(date(2025, 8, 1), date(1990, 1, 1), date(2025, 8, 1), DEFAULT_AGE_BANDS)
    assert service.segments == []
    assert service.raw_service_months == 0
    assert service.weighted_years == 0


def test_birth_after_start_counts_only_from_birth():
    segments = segment_service(date(2000, 1, 1), date(2005, 1, 1), date(2010, 1, 1), DEFAULT_AGE_BANDS)
    assert len(segments) == 1
    assert segments[0].start_date == date(2005, 1, 1)
    assert segments[0].months == 60
