"""Outplacement entitlement and the payment for unused outplacement months."""

import logging
from datetime import date
from typing import Optional

from calc.month_math import add_months, months_between, same_month, years_at
from calc.severance_calculator import round_half_up
from rules.SBRDetails import SBRDetails

logger = logging.getLogger(__name__)


class OutplacementCalculator:
    """Applies the outplacement rules of an SBRDetails scheme.

    The entitlement is fixed at the role lapse (reference) date; the exit
    date only decides how many of the entitled months go unused.
    """

    def __init__(self, details: SBRDetails):
        self.details = details

    def entitlement_months(self, employment_start_date: date, birth_date: Optional[date],
                           reference_date: date) -> int:
        """Outplacement months for the age and full service years on the reference date.

        A missing birth date counts as age 0, so only service can extend the entitlement.
        """
        full_service_years = months_between(employment_start_date, reference_date) // 12
        age = years_at(reference_date, birth_date) if birth_date else 0
        if (age >= self.details.outplacement_age_threshold
                or full_service_years >= self.details.outplacement_service_years_threshold):
            return self.details.extended_outplacement_months
        return self.details.standard_outplacement_months

    def remaining_months(self, reference_date: date, exit_date: date, entitlement_months: int) -> int:
        """Whole entitled months left unused when leaving on exit_date.

        Leaving at or after the end of the window, or at any point during its
        final month, uses the whole entitlement.
        """
        outplacement_end = add_months(reference_date, entitlement_months)
        last_month = add_months(reference_date, entitlement_months - 1)
        if exit_date >= outplacement_end or same_month(exit_date, last_month):
            return 0
        elapsed = months_between(reference_date, exit_date)
        return max(0, entitlement_months - elapsed)

    def base_monthly_salary(self, monthly_salary: float) -> float:
        """Monthly salary without the holiday allowance."""
        return monthly_salary / (1 + self.details.holiday_allowance_fraction)

    def additional_compensation(self, monthly_salary: float, remaining_months: int) -> int:
        """Payment for unused months: half the base monthly salary per month, rounded."""
        amount = self.details.unused_outplacement_fraction * self.base_monthly_salary(monthly_salary) * remaining_months
        return round_half_up(amount)
