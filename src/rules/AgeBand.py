from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AgeBand:
    """An age range [min_age, max_age) with the severance weight per service year.

    max_age is None for the open-ended top band.
    """
    min_age: int
    max_age: Optional[int]
    weight: float

    @property
    def is_unbounded(self) -> bool:
        return self.max_age is None
