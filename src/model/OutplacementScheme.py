from dataclasses import dataclass
from typing import List

from model.MonthId import MonthId


@dataclass(frozen=True)
class OutplacementScheme:
    """Outplacement window derived from the role lapse month.

    outplacement_end is the last month inside the window; last_leave_month is
    the first month after it.
    """
    outplacement_months: int
    outplacement_start: MonthId
    outplacement_end: MonthId
    last_leave_month: MonthId

    def months(self) -> List[MonthId]:
        """Every month of the outplacement window, in order."""
        return [self.outplacement_start.plus(i) for i in range(self.outplacement_months)]

    def to_dict(self) -> dict:
        return {
            "outplacement_months": self.outplacement_months,
            "outplacement_start": str(self.outplacement_start),
            "outplacement_end": str(self.outplacement_end),
            "last_leave_month": str(self.last_leave_month),
        }
