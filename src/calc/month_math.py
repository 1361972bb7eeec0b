"""Calendar date arithmetic shared by the SBR calculators.

All service and outplacement periods are counted in calendar months, never
by dividing elapsed days. Only (year, month, day) takes part in comparisons.
"""

import calendar
from datetime import date
from typing import List

from model.MonthId import MonthId


# Day-of-month ceiling applied when shifting a date by whole years
MAX_ANNIVERSARY_DAY = 28


def add_years(d: date, years: int) -> date:
    """Shift a date by whole years, clamping the day to 28.

    Feb 29 and the 29th-31st of any month all land on the 28th, so the
    anniversary always exists.
    """
    return date(d.year + years, d.month, min(d.day, MAX_ANNIVERSARY_DAY))


def add_months(d: date, months: int) -> date:
    """Shift a date by calendar months, clamping the day to the target month's length."""
    index = d.year * 12 + (d.month - 1) + months
    year, month0 = divmod(index, 12)
    last_day = calendar.monthrange(year, month0 + 1)[1]
    return date(year, month0 + 1, min(d.day, last_day))


def months_between(start: date, end: date) -> int:
    """Whole calendar months from start to end.

    A partial final month does not count: the raw month difference is reduced
    by one when end's day-of-month is before start's. Never negative.
    """
    months = (end.year * 12 + end.month) - (start.year * 12 + start.month)
    if end.day < start.day:
        months -= 1
    return max(0, months)


def years_at(at: date, birth_date: date) -> int:
    """Age in completed years on the given date."""
    years = at.year - birth_date.year
    if (at.month, at.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def same_month(a: date, b: date) -> bool:
    return a.year == b.year and a.month == b.month


def default_reference_date(exit_date: date, month: int = 7) -> date:
    """First day of the given month (July by default) in the exit date's year."""
    return date(exit_date.year, month, 1)


def month_range(start: MonthId, end_inclusive: MonthId) -> List[MonthId]:
    """List every month from start through end_inclusive (empty if end is before start)."""
    return [start.plus(i) for i in range(start.months_until(end_inclusive) + 1)]
