"""Outplacement window for the timeline, derived from whole months.

Uses the same age/service rule as the benefit calculation, but works on
MonthIds and does not depend on any particular exit date.
"""

from datetime import date
from typing import Optional, Union

from calc.month_math import years_at
from model.MonthId import MonthId
from model.OutplacementScheme import OutplacementScheme
from rules.SBRDetails import SBRDetails


def age_at_month(birth_date: Optional[date], at: MonthId) -> int:
    """Age in completed years on the first day of the month, never negative."""
    if birth_date is None:
        return 0
    return max(0, years_at(at.first_day(), birth_date))


def service_years_at_month(employment_start: Union[MonthId, date, None], at: MonthId) -> int:
    """Full years of service from the start month to the given month, never negative."""
    if employment_start is None:
        return 0
    if isinstance(employment_start, date):
        employment_start = MonthId.from_date(employment_start)
    return max(employment_start.months_until(at) // 12, 0)


def derive_outplacement_months(role_lapse: MonthId,
                               birth_date: Optional[date],
                               employment_start: Union[MonthId, date, None],
                               details: Optional[SBRDetails] = None) -> int:
    details = details or SBRDetails()
    age = age_at_month(birth_date, role_lapse)
    service_years = service_years_at_month(employment_start, role_lapse)
    if age >= details.outplacement_age_threshold or service_years >= details.outplacement_service_years_threshold:
        return details.extended_outplacement_months
    return details.standard_outplacement_months


def derive_outplacement_scheme(role_lapse: MonthId,
                               birth_date: Optional[date],
                               employment_start: Union[MonthId, date, None],
                               details: Optional[SBRDetails] = None) -> OutplacementScheme:
    """Outplacement window starting at the role lapse month.

    Args:
        role_lapse: Month the role lapses; the window starts here.
        birth_date: Date of birth, or None (treated as age 0).
        employment_start: Start month of employment, or None (no service).
        details: Scheme constants; the built-in SBR scheme when None.
    """
    n = derive_outplacement_months(role_lapse, birth_date, employment_start, details)
    return OutplacementScheme(
        outplacement_months=n,
        outplacement_start=role_lapse,
        outplacement_end=role_lapse.plus(n - 1),
        last_leave_month=role_lapse.plus(n),
    )
