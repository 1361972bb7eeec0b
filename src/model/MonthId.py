"""Calendar month identifier.

Timeline positions (role lapse, outplacement window, exit months) are whole
calendar months. MonthId replaces the "YYYY-MM" strings used for them with a
small ordered value type; parsing and printing of the string form happen only
at the input boundary and in output.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, order=True)
class MonthId:
    """A calendar month (year, month 1-12)."""
    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {self.month}")

    @property
    def index(self) -> int:
        """Months since year 0, used for month arithmetic."""
        return self.year * 12 + (self.month - 1)

    @classmethod
    def from_index(cls, index: int) -> 'MonthId':
        return cls(index // 12, index % 12 + 1)

    @classmethod
    def from_date(cls, d: date) -> 'MonthId':
        return cls(d.year, d.month)

    def plus(self, months: int) -> 'MonthId':
        """Return the month `months` calendar months later (or earlier if negative)."""
        return MonthId.from_index(self.index + months)

    def months_until(self, other: 'MonthId') -> int:
        """Signed number of months from this month to `other`."""
        return other.index - self.index

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
