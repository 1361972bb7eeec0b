"""Parsers for the user-facing input strings.

Dates and salaries arrive the way the input form writes them:
- start of employment: "MM / YYYY"
- birthday:            "DD / MM / YYYY"
- yearly salary:       "60,000" or "60,000.50"
- months:              "YYYY-MM", or a short month name plus year ("Jul", "2026")

Each parser returns None for malformed text. load_scenario turns a scenario
dict into ScenarioInputs and raises InputParseError for a malformed field, so
malformed strings never reach the calculators.
"""

import re
from datetime import date
from typing import Optional, Union

from calc.month_math import MAX_ANNIVERSARY_DAY
from model.MonthId import MonthId
from model.ScenarioInputs import ScenarioInputs


# Role lapse used when a scenario does not specify one
DEFAULT_ROLE_LAPSE = MonthId(2026, 7)

MONTH_NAMES = {
    'Jan': 1, 'Feb': 2, 'Mar': 3, 'Apr': 4, 'May': 5, 'Jun': 6,
    'Jul': 7, 'Aug': 8, 'Sep': 9, 'Oct': 10, 'Nov': 11, 'Dec': 12,
    # Dutch/Portuguese spellings offered by the month picker
    'Dez': 12, 'Fev': 2, 'Mei': 5,
}

_START_RE = re.compile(r'^\s*(\d{2})\s*[/\s]\s*(\d{4})\s*$')
_BIRTHDAY_RE = re.compile(r'^\s*(\d{2})\s*/\s*(\d{2})\s*/\s*(\d{4})\s*$')
_MONTH_ID_RE = re.compile(r'^\s*(\d{4})-(\d{2})\s*$')
_SALARY_RE = re.compile(r'^\d+(\.\d+)?$')


class InputParseError(ValueError):
    """A scenario field could not be parsed."""

    def __init__(self, field: str, value):
        super().__init__(f"Invalid value for '{field}': {value!r}")
        self.field = field
        self.value = value


def parse_start_of_employment(text: str) -> Optional[date]:
    """Parse "MM / YYYY" (or "MM YYYY") to the first day of that month."""
    m = _START_RE.match(text or '')
    if not m:
        return None
    month, year = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        return None
    return date(year, month, 1)


def parse_birthday(text: str) -> Optional[date]:
    """Parse "DD / MM / YYYY"; days after the 28th are clamped to the 28th."""
    m = _BIRTHDAY_RE.match(text or '')
    if not m:
        return None
    day, month, year = int(m.group(1)), int(m.group(2)), int(m.group(3))
    if not 1 <= month <= 12 or day < 1:
        return None
    return date(year, month, min(day, MAX_ANNIVERSARY_DAY))


def parse_salary(text: Union[str, int, float, None]) -> Optional[float]:
    """Parse a salary with optional thousands commas, e.g. "60,000.50" -> 60000.5."""
    if text is None or isinstance(text, bool):
        return None
    if isinstance(text, (int, float)):
        return float(text)
    cleaned = text.replace(',', '').strip()
    if not _SALARY_RE.match(cleaned):
        return None
    return float(cleaned)


def parse_month_id(text: str) -> Optional[MonthId]:
    """Parse "YYYY-MM"."""
    m = _MONTH_ID_RE.match(text or '')
    if not m:
        return None
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        return None
    return MonthId(year, month)


def month_name_year_to_month_id(month_name: str, year: Union[str, int]) -> Optional[MonthId]:
    """Parse a short month name ("Jul") and a year ("2026")."""
    month = MONTH_NAMES.get((month_name or '').strip())
    try:
        year_num = int(year)
    except (TypeError, ValueError):
        return None
    if month is None:
        return None
    return MonthId(year_num, month)


def _optional_field(spec: dict, field: str, parser):
    raw = spec.get(field)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    value = parser(raw)
    if value is None:
        raise InputParseError(field, raw)
    return value


def _parse_role_lapse(spec: dict) -> MonthId:
    if spec.get('roleLapse'):
        role_lapse = parse_month_id(spec['roleLapse'])
        if role_lapse is None:
            raise InputParseError('roleLapse', spec['roleLapse'])
        return role_lapse
    month_name = spec.get('roleLapseMonth')
    year = spec.get('roleLapseYear')
    if not month_name and not year:
        return DEFAULT_ROLE_LAPSE
    role_lapse = month_name_year_to_month_id(month_name, year)
    if role_lapse is None:
        raise InputParseError('roleLapseMonth/roleLapseYear', f"{month_name} {year}")
    return role_lapse


def load_scenario(spec: dict, name: str = '') -> ScenarioInputs:
    """Build ScenarioInputs from a scenario spec dictionary.

    Empty or missing fields become None; malformed ones raise InputParseError.
    """
    exit_start = _optional_field(spec, 'exitMonth', parse_start_of_employment)
    timeline = spec.get('timeline', {}) or {}
    return ScenarioInputs(
        name=name,
        employment_start_date=_optional_field(spec, 'startOfEmployment', parse_start_of_employment),
        birth_date=_optional_field(spec, 'birthday', parse_birthday),
        yearly_salary=_optional_field(spec, 'yearlySalary', parse_salary),
        role_lapse=_parse_role_lapse(spec),
        exit_month=MonthId.from_date(exit_start) if exit_start else None,
        timeline_start=_optional_field(timeline, 'start', parse_month_id),
        timeline_end=_optional_field(timeline, 'end', parse_month_id),
    )
