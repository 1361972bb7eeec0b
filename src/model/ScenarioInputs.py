from dataclasses import dataclass
from datetime import date
from typing import Optional

from model.MonthId import MonthId


@dataclass(frozen=True)
class ScenarioInputs:
    """Parsed inputs of one scenario (input-parameters/<name>/spec.json).

    Optional fields stay None when the scenario leaves them empty; the exit
    evaluator reports those cases as insufficient data.
    """
    name: str
    employment_start_date: Optional[date]
    birth_date: Optional[date]
    yearly_salary: Optional[float]
    role_lapse: MonthId
    exit_month: Optional[MonthId] = None
    timeline_start: Optional[MonthId] = None
    timeline_end: Optional[MonthId] = None

    @property
    def role_lapse_date(self) -> date:
        return self.role_lapse.first_day()
