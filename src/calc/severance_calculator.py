import logging
import math
from typing import Tuple

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest whole currency unit, halves rounding up.

    The built-in round() rounds halves to even, which would pay 2 for 2.5.
    """
    return int(math.floor(value + 0.5))


class SeveranceCalculator:
    """Computes the base severance: weighted years x monthly salary, capped.

    The monthly salary includes the holiday allowance.
    """

    def __init__(self, severance_cap: float = 300000):
        """Initialize with the severance cap.

        Args:
            severance_cap: Maximum base severance (the unused outplacement payment is not capped).
        """
        self.severance_cap = severance_cap

    def calculate(self, weighted_years: float, monthly_salary: float) -> Tuple[int, bool]:
        """Return (base severance, whether the cap applied).

        Args:
            weighted_years: Weighted service years from the service segmentation.
            monthly_salary: Yearly salary with holiday allowance divided by 12.
        """
        uncapped = weighted_years * monthly_salary
        if uncapped > self.severance_cap:
            logger.debug("Severance %.2f capped at %s", uncapped, self.severance_cap)
            return round_half_up(self.severance_cap), True
        return round_half_up(uncapped), False
