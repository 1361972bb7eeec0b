from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from model.BenefitDetails import BenefitDetails


class ExitPosition(Enum):
    """Where an exit date falls relative to the role lapse date."""
    BEFORE_REFERENCE = "before"
    ON_REFERENCE = "equal"
    NORMAL = "normal"


class EvaluationStatus(Enum):
    INSUFFICIENT_DATA = "insufficient_data"
    BEFORE_REFERENCE = "before_reference"
    ON_REFERENCE = "on_reference"
    CALCULATED = "calculated"


@dataclass(frozen=True)
class ExitEvaluation:
    """Outcome of evaluating one exit date.

    details is only set when status is CALCULATED; otherwise reason says why
    no amount was produced.
    """
    exit_date: date
    status: EvaluationStatus
    details: Optional[BenefitDetails] = None
    reason: Optional[str] = None

    @property
    def total_payout(self) -> Optional[int]:
        return self.details.total_payout if self.details else None

    def to_dict(self) -> dict:
        return {
            "exit_date": self.exit_date.isoformat(),
            "status": self.status.value,
            "reason": self.reason,
            "details": self.details.to_dict() if self.details else None,
        }
