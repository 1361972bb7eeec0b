import os
import sys
from datetime import date
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))
from calc.scheme_calculator import age_at_month, service_years_at_month, derive_outplacement_months, derive_outplacement_scheme
from model.MonthId import MonthId
from rules.SBRDetails import SBRDetails


def test_age_at_month_uses_first_day_of_month():
    birth = date(1992, 11, 6)
    assert age_at_month(birth, MonthId(2025, 11)) == 32
    assert age_at_month(birth, MonthId(2025, 12)) == 33


def test_age_at_month_without_birth_date():
    assert age_at_month(None, MonthId(2026, 7)) == 0


def test_age_at_month_before_birth_is_zero():
    assert age_at_month(date(2030, 1, 1), MonthId(2026, 7)) == 0


def test_service_years_at_month():
    assert service_years_at_month(MonthId(2020, 6), MonthId(2025, 11)) == 5
    assert service_years_at_month(date(2020, 6, 1), MonthId(2026, 6)) == 6
    assert service_years_at_month(MonthId(2020, 6), MonthId(2019, 1)) == 0
    assert service_years_at_month(None, MonthId(2026, 7)) == 0


def test_standard_scheme():
    scheme = derive_outplacement_scheme(MonthId(2026, 7), date(1992, 11, 6), MonthId(2020, 6))
    assert scheme.outplacement_months == 4
    assert str(scheme.outplacement_start) == '2026-07'
    assert str(scheme.outplacement_end) == '2026-10'
    assert str(scheme.last_leave_month) == '2026-11'
    assert [str(m) for m in scheme.months()] == ['2026-07', '2026-08', '2026-09', '2026-10']


def test_extended_scheme_by_age():
    scheme = derive_outplacement_scheme(MonthId(2026, 7), date(1975, 1, 1), MonthId(2015, 1))
    assert scheme.outplacement_months == 6
    assert str(scheme.outplacement_end) == '2026-12'
    assert str(scheme.last_leave_month) == '2027-01'


def test_extended_scheme_by_service():
    assert derive_outplacement_months(MonthId(2026, 7), date(1985, 1, 1), MonthId(2006, 7)) == 6
    assert derive_outplacement_months(MonthId(2026, 7), date(1985, 1, 1), MonthId(2006, 8)) == 4


def test_scheme_without_birth_or_start():
    scheme = derive_outplacement_scheme(MonthId(2026, 7), None, None)
    assert scheme.outplacement_months == 4


def test_scheme_with_custom_details():
    details = SBRDetails(standard_outplacement_months=3, extended_outplacement_months=9)
    scheme = derive_outplacement_scheme(MonthId(2026, 7), date(1992, 11, 6), MonthId(2020, 6), details)
    assert scheme.outplacement_months == 3
    assert str(scheme.last_leave_month) == '2026-10'


def test_scheme_to_dict():
    scheme = derive_outplacement_scheme(MonthId(2026, 7), date(1992, 11, 6), MonthId(2020, 6))
    assert scheme.to_dict() == {
        'outplacement_months': 4,
        'outplacement_start': '2026-07',
        'outplacement_end': '2026-10',
        'last_leave_month': '2026-11',
    }
