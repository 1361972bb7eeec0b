"""Result data model for the SBR benefit calculation.

BenefitDetails holds the severance, the unused outplacement payment and the
intermediate values behind them, so renderers and the MCP tools can explain
a total without recomputing anything.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Tuple


@dataclass(frozen=True)
class ServiceSegment:
    """Part of the employment period spent in a single age band."""
    weight: float
    months: int
    start_date: date
    end_date: date
    full_years: int = 0  # whole years credited after rounding the total service

    @property
    def weighted_years(self) -> float:
        return self.full_years * self.weight


@dataclass(frozen=True)
class BenefitDetails:
    """All calculated values for one exit date."""
    # Service
    raw_service_months: int
    raw_service_full_years: int
    raw_service_remainder_months: int
    weighted_years_a: float

    # Severance
    base_severance: int
    is_severance_capped: bool

    # Outplacement
    outplacement_entitlement_months: int
    outplacement_start_date: date
    remaining_full_outplacement_months: int
    additional_comp: int

    total_payout: int

    monthly_salary: float = 0.0
    segments: Tuple[ServiceSegment, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """JSON-friendly representation with ISO dates."""
        return {
            "raw_service_months": self.raw_service_months,
            "raw_service_full_years": self.raw_service_full_years,
            "raw_service_remainder_months": self.raw_service_remainder_months,
            "weighted_years_a": self.weighted_years_a,
            "monthly_salary": round(self.monthly_salary, 2),
            "base_severance": self.base_severance,
            "is_severance_capped": self.is_severance_capped,
            "outplacement_entitlement_months": self.outplacement_entitlement_months,
            "outplacement_start_date": self.outplacement_start_date.isoformat(),
            "remaining_full_outplacement_months": self.remaining_full_outplacement_months,
            "additional_comp": self.additional_comp,
            "total_payout": self.total_payout,
            "segments": [
                {
                    "start_date": s.start_date.isoformat(),
                    "end_date": s.end_date.isoformat(),
                    "months": s.months,
                    "full_years": s.full_years,
                    "weight": s.weight,
                }
                for s in self.segments
            ],
        }
