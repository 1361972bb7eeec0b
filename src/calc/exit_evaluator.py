"""Decides whether an exit date gets a numeric estimate, and runs it if so.

The benefit calculation itself accepts any dates; this module holds the
rules for when its result is meaningful:

- no salary, or salary <= 0            -> INSUFFICIENT_DATA
- no start date, or exit not after it  -> INSUFFICIENT_DATA
- exit before the role lapse date      -> BEFORE_REFERENCE
- exit on the role lapse date          -> ON_REFERENCE
- otherwise                            -> CALCULATED
"""

import logging
from datetime import date
from typing import List, Optional

from calc.benefit_calculator import BenefitCalculator
from calc.exit_classifier import classify_exit_relative_to_reference
from calc.month_math import month_range
from calc.scheme_calculator import derive_outplacement_scheme
from model.CalculationInput import CalculationInput
from model.ExitEvaluation import EvaluationStatus, ExitEvaluation, ExitPosition
from model.MonthId import MonthId
from model.ScenarioInputs import ScenarioInputs

logger = logging.getLogger(__name__)

# Months shown before the role lapse month when a scenario has no timeline
DEFAULT_MONTHS_BEFORE_ROLE_LAPSE = 8


def evaluate_exit(inputs: ScenarioInputs,
                  exit_date: date,
                  calculator: Optional[BenefitCalculator] = None) -> ExitEvaluation:
    """Evaluate a single exit date for a scenario.

    Args:
        inputs: Parsed scenario inputs.
        exit_date: Last day of employment to evaluate.
        calculator: BenefitCalculator to use; one with the built-in scheme when None.
    """
    if not inputs.yearly_salary or inputs.yearly_salary <= 0:
        return ExitEvaluation(exit_date, EvaluationStatus.INSUFFICIENT_DATA,
                              reason="Yearly salary is missing or not positive")
    if inputs.employment_start_date is None:
        return ExitEvaluation(exit_date, EvaluationStatus.INSUFFICIENT_DATA,
                              reason="Start of employment is missing")
    if exit_date <= inputs.employment_start_date:
        return ExitEvaluation(exit_date, EvaluationStatus.INSUFFICIENT_DATA,
                              reason="Exit date is not after the start of employment")

    reference_date = inputs.role_lapse_date
    position = classify_exit_relative_to_reference(exit_date, reference_date)
    if position == ExitPosition.BEFORE_REFERENCE:
        return ExitEvaluation(exit_date, EvaluationStatus.BEFORE_REFERENCE,
                              reason="Exit is before the role lapse date; the early leave scheme applies")
    if position == ExitPosition.ON_REFERENCE:
        return ExitEvaluation(exit_date, EvaluationStatus.ON_REFERENCE,
                              reason="Exit is on the role lapse date; the outcome depends on the outplacement choice")

    calculator = calculator or BenefitCalculator()
    details = calculator.calculate(CalculationInput(
        employment_start_date=inputs.employment_start_date,
        birth_date=inputs.birth_date,
        exit_date=exit_date,
        yearly_salary_with_holiday=inputs.yearly_salary,
        outplacement_reference_date=reference_date,
    ))
    return ExitEvaluation(exit_date, EvaluationStatus.CALCULATED, details=details)


def default_timeline(inputs: ScenarioInputs, calculator: Optional[BenefitCalculator] = None) -> List[MonthId]:
    """Months to show for a scenario: its own timeline, or from eight months before
    the role lapse through the last leave month of the outplacement window."""
    start = inputs.timeline_start or inputs.role_lapse.plus(-DEFAULT_MONTHS_BEFORE_ROLE_LAPSE)
    end = inputs.timeline_end
    if end is None:
        details = calculator.details if calculator else None
        scheme = derive_outplacement_scheme(inputs.role_lapse, inputs.birth_date,
                                            inputs.employment_start_date, details)
        end = scheme.last_leave_month
    return month_range(start, end)


def build_exit_schedule(inputs: ScenarioInputs,
                        months: Optional[List[MonthId]] = None,
                        calculator: Optional[BenefitCalculator] = None) -> List[ExitEvaluation]:
    """Evaluate leaving on the first day of each month.

    Args:
        inputs: Parsed scenario inputs.
        months: Exit months to evaluate; the scenario's timeline when None.
        calculator: BenefitCalculator to use; one with the built-in scheme when None.
    """
    calculator = calculator or BenefitCalculator()
    if months is None:
        months = default_timeline(inputs, calculator)
    schedule = [evaluate_exit(inputs, month.first_day(), calculator) for month in months]
    logger.debug("Built exit schedule for %s: %d month(s)", inputs.name, len(schedule))
    return schedule
