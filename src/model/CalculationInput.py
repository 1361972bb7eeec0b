from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class CalculationInput:
    """Everything the benefit calculation needs for one exit date.

    Built fresh by the caller for every calculation; the calculators never
    read saved or global state.
    """
    employment_start_date: date
    birth_date: Optional[date]
    exit_date: date
    yearly_salary_with_holiday: float  # includes the 8% holiday allowance
    outplacement_reference_date: Optional[date] = None  # role lapse; July 1 of exit year if None

    def effective_reference_date(self, default_month: int = 7) -> date:
        """The role lapse date the outplacement entitlement is evaluated at."""
        if self.outplacement_reference_date is not None:
            return self.outplacement_reference_date
        return date(self.exit_date.year, default_month, 1)

    @property
    def monthly_salary(self) -> float:
        return self.yearly_salary_with_holiday / 12
