"""Renderer classes for displaying SBR calculation results.

This module contains renderer classes that handle the presentation logic
for the command line program. Each renderer takes already-calculated data
(an ExitEvaluation, a list of them, or an OutplacementScheme) and prints
plain-text tables; no renderer calculates anything itself.
"""

from abc import ABC, abstractmethod
from typing import Any, List

from model.ExitEvaluation import EvaluationStatus, ExitEvaluation
from model.OutplacementScheme import OutplacementScheme


STATUS_LABELS = {
    EvaluationStatus.INSUFFICIENT_DATA: "Insufficient data",
    EvaluationStatus.BEFORE_REFERENCE: "Early leave scheme",
    EvaluationStatus.ON_REFERENCE: "Role lapse date",
    EvaluationStatus.CALCULATED: "Calculated",
}


class BaseRenderer(ABC):
    """Abstract base class for all renderers."""

    @abstractmethod
    def render(self, data: Any) -> None:
        """Render the data to output.

        Args:
            data: The calculated data to display
        """
        pass


class BenefitSummaryRenderer(BaseRenderer):
    """Renderer for the full breakdown of a single exit date."""

    def render(self, data: ExitEvaluation) -> None:
        """Render the severance and outplacement breakdown.

        Args:
            data: ExitEvaluation for the exit date
        """
        print()
        print("=" * 60)
        print(f"{'SBR PAYOUT FOR EXIT ON ' + data.exit_date.isoformat():^60}")
        print("=" * 60)

        if data.details is None:
            print()
            print(f"  {STATUS_LABELS[data.status]}: {data.reason}")
            print()
            return

        d = data.details
        print()
        print("-" * 60)
        print("SERVICE")
        print("-" * 60)
        print(f"  {'Service:':<40} {d.raw_service_full_years:>6}y {d.raw_service_remainder_months:>2}m")
        for seg in d.segments:
            label = f"{seg.start_date.isoformat()} - {seg.end_date.isoformat()}:"
            print(f"    {label:<38} {seg.full_years:>3}y x {seg.weight:.1f} = {seg.weighted_years:>5.1f}")
        print(f"  {'Weighted Years (A):':<40} {d.weighted_years_a:>15.1f}")

        print()
        print("-" * 60)
        print("SEVERANCE")
        print("-" * 60)
        print(f"  {'Monthly Salary (incl. holiday):':<40} {d.monthly_salary:>15,.2f}")
        capped = "  <- capped" if d.is_severance_capped else ""
        print(f"  {'Base Severance:':<40} {d.base_severance:>15,.0f}{capped}")

        print()
        print("-" * 60)
        print("OUTPLACEMENT")
        print("-" * 60)
        print(f"  {'Role Lapse Date:':<40} {d.outplacement_start_date.isoformat():>15}")
        print(f"  {'Entitlement (months):':<40} {d.outplacement_entitlement_months:>15}")
        print(f"  {'Unused Months:':<40} {d.remaining_full_outplacement_months:>15}")
        print(f"  {'Additional Compensation:':<40} {d.additional_comp:>15,.0f}")

        print()
        print("=" * 60)
        print(f"  {'TOTAL PAYOUT (before tax):':<40} {d.total_payout:>15,.0f}")
        print("=" * 60)
        print()


class ExitScheduleRenderer(BaseRenderer):
    """Renderer for the payout across a range of exit months."""

    def render(self, data: List[ExitEvaluation]) -> None:
        """Render one row per exit month.

        Args:
            data: ExitEvaluations in month order
        """
        print()
        print("=" * 78)
        print(f"{'PAYOUT BY EXIT MONTH':^78}")
        print("=" * 78)
        print(f"  {'Exit':<8} {'Status':<20} {'Severance':>12} {'Unused':>7} {'Additional':>12} {'Total':>12}")
        print(f"  {'-' * 8} {'-' * 20} {'-' * 12} {'-' * 7} {'-' * 12} {'-' * 12}")
        for evaluation in data:
            month = evaluation.exit_date.strftime('%Y-%m')
            label = STATUS_LABELS[evaluation.status]
            d = evaluation.details
            if d is None:
                print(f"  {month:<8} {label:<20} {'-':>12} {'-':>7} {'-':>12} {'-':>12}")
            else:
                print(f"  {month:<8} {label:<20} {d.base_severance:>12,.0f} "
                      f"{d.remaining_full_outplacement_months:>7} {d.additional_comp:>12,.0f} {d.total_payout:>12,.0f}")
        print()


class SchemeRenderer(BaseRenderer):
    """Renderer for the outplacement window derived from the role lapse month."""

    def render(self, data: OutplacementScheme) -> None:
        """Render the outplacement window.

        Args:
            data: OutplacementScheme for the scenario
        """
        print()
        print("=" * 60)
        print(f"{'OUTPLACEMENT SCHEME':^60}")
        print("=" * 60)
        print(f"  {'Outplacement Months:':<40} {data.outplacement_months:>15}")
        print(f"  {'Outplacement Start:':<40} {str(data.outplacement_start):>15}")
        print(f"  {'Outplacement End:':<40} {str(data.outplacement_end):>15}")
        print(f"  {'Last Leave Month:':<40} {str(data.last_leave_month):>15}")
        print(f"  {'Months:':<40} {', '.join(str(m) for m in data.months())}")
        print()


# Registry mapping mode names to renderer classes
RENDERER_REGISTRY = {
    'Summary': BenefitSummaryRenderer,
    'Schedule': ExitScheduleRenderer,
    'Scheme': SchemeRenderer,
}
