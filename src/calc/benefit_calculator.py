"""SBR benefit calculation: severance plus the payment for unused outplacement.

The calculation runs in a fixed order:
1. Split the service period into age-band segments (calc.service_segmentation)
2. Round the total service once and weight the whole years per band
3. Base severance = weighted years x monthly salary, capped
4. Outplacement entitlement (4 or 6 months) at the role lapse date
5. Unused outplacement months at the exit date
6. Additional compensation = 0.5 x base monthly salary x unused months
7. Total payout = base severance + additional compensation
"""

import logging
from datetime import date
from typing import Optional

from calc.outplacement_calculator import OutplacementCalculator
from calc.service_segmentation import ServiceSegmentation
from calc.severance_calculator import SeveranceCalculator
from model.BenefitDetails import BenefitDetails
from model.CalculationInput import CalculationInput
from rules.SBRDetails import SBRDetails

logger = logging.getLogger(__name__)


class BenefitCalculator:
    """Computes BenefitDetails for a CalculationInput under one SBR scheme.

    The calculator holds no per-call state; one instance can serve any number
    of calculations, from any thread.
    """

    def __init__(self, details: Optional[SBRDetails] = None):
        """Initialize with the scheme details.

        Args:
            details: Scheme constants; the built-in SBR scheme when omitted.
        """
        self.details = details or SBRDetails()
        self.severance_calculator = SeveranceCalculator(self.details.severance_cap)
        self.outplacement_calculator = OutplacementCalculator(self.details)

    def calculate(self, calc_input: CalculationInput) -> BenefitDetails:
        """Calculate severance, unused outplacement payment and total for one exit date.

        The caller must only pass an exit date after the employment start and
        a positive salary; see calc.exit_evaluator for that policy.
        """
        reference_date = calc_input.effective_reference_date(self.details.default_role_lapse_month)
        monthly_salary = calc_input.monthly_salary

        service = ServiceSegmentation(
            calc_input.employment_start_date,
            calc_input.birth_date,
            calc_input.exit_date,
            self.details.age_bands,
        )

        base_severance, is_capped = self.severance_calculator.calculate(service.weighted_years, monthly_salary)

        entitlement = self.outplacement_calculator.entitlement_months(
            calc_input.employment_start_date, calc_input.birth_date, reference_date)
        remaining = self.outplacement_calculator.remaining_months(
            reference_date, calc_input.exit_date, entitlement)
        additional_comp = self.outplacement_calculator.additional_compensation(monthly_salary, remaining)

        logger.debug("Exit %s: severance %d (capped=%s), outplacement %d months from %s, %d unused, additional %d",
                     calc_input.exit_date, base_severance, is_capped, entitlement, reference_date,
                     remaining, additional_comp)

        return BenefitDetails(
            raw_service_months=service.raw_service_months,
            raw_service_full_years=service.raw_service_full_years,
            raw_service_remainder_months=service.raw_service_remainder_months,
            weighted_years_a=service.weighted_years,
            base_severance=base_severance,
            is_severance_capped=is_capped,
            outplacement_entitlement_months=entitlement,
            outplacement_start_date=reference_date,
            remaining_full_outplacement_months=remaining,
            additional_comp=additional_comp,
            total_payout=base_severance + additional_comp,
            monthly_salary=monthly_salary,
            segments=tuple(service.segments),
        )


def compute_benefit_details(employment_start_date: date,
                            birth_date: Optional[date],
                            exit_date: date,
                            yearly_salary_with_holiday: float,
                            outplacement_reference_date: Optional[date] = None,
                            details: Optional[SBRDetails] = None) -> BenefitDetails:
    """Convenience function: build the input and run a BenefitCalculator.

    Args:
        employment_start_date: Start of service.
        birth_date: Date of birth, or None to weight all service at the lowest band.
        exit_date: Last day of employment being evaluated.
        yearly_salary_with_holiday: Yearly salary including the 8% holiday allowance.
        outplacement_reference_date: Role lapse date; July 1 of the exit year when None.
        details: Scheme constants; the built-in SBR scheme when None.

    Returns:
        BenefitDetails for the exit date.
    """
    calc_input = CalculationInput(
        employment_start_date=employment_start_date,
        birth_date=birth_date,
        exit_date=exit_date,
        yearly_salary_with_holiday=yearly_salary_with_holiday,
        outplacement_reference_date=outplacement_reference_date,
    )
    return BenefitCalculator(details).calculate(calc_input)
