import json
import logging
import os
from typing import Optional, Sequence, Tuple

from rules.AgeBand import AgeBand

logger = logging.getLogger(__name__)


DEFAULT_AGE_BANDS: Tuple[AgeBand, ...] = (
    AgeBand(0, 35, 0.5),
    AgeBand(35, 45, 1.0),
    AgeBand(45, 55, 1.5),
    AgeBand(55, None, 2.0),
)

DEFAULT_REFERENCE_PATH = os.path.normpath(
    os.path.join(os.path.dirname(__file__), '..', '..', 'reference', 'sbr-details.json'))


class SBRDetails:
    """Holds the constants of the SBR severance scheme.

    Constructed with the scheme values; with no arguments it carries the
    built-in scheme (300,000 cap, 8% holiday allowance, 4/6 months of
    outplacement). The caller is responsible for reading reference data, see
    `from_reference_file`, so the calculators never touch the filesystem.
    """

    def __init__(self,
                 age_bands: Sequence[AgeBand] = DEFAULT_AGE_BANDS,
                 severance_cap: float = 300000,
                 holiday_allowance_fraction: float = 0.08,
                 unused_outplacement_fraction: float = 0.5,
                 outplacement_age_threshold: int = 50,
                 outplacement_service_years_threshold: int = 20,
                 standard_outplacement_months: int = 4,
                 extended_outplacement_months: int = 6,
                 default_role_lapse_month: int = 7):
        """Initialize with scheme details.

        Args:
            age_bands: Age bands in ascending order; only the last may be unbounded.
            severance_cap: Maximum base severance, excluding the unused outplacement payment.
            holiday_allowance_fraction: Uplift already included in the yearly salary (0.08 for 8%).
            unused_outplacement_fraction: Share of the base monthly salary paid per unused month.
            outplacement_age_threshold: Age at role lapse that grants the extended outplacement.
            outplacement_service_years_threshold: Full service years at role lapse that grant it.
            standard_outplacement_months: Outplacement months below both thresholds.
            extended_outplacement_months: Outplacement months at or above either threshold.
            default_role_lapse_month: Month of the exit year used when no reference date is given.
        """
        self.age_bands = tuple(age_bands)
        _validate_age_bands(self.age_bands)
        self.severance_cap = severance_cap
        self.holiday_allowance_fraction = holiday_allowance_fraction
        self.unused_outplacement_fraction = unused_outplacement_fraction
        self.outplacement_age_threshold = outplacement_age_threshold
        self.outplacement_service_years_threshold = outplacement_service_years_threshold
        self.standard_outplacement_months = standard_outplacement_months
        self.extended_outplacement_months = extended_outplacement_months
        self.default_role_lapse_month = default_role_lapse_month

    @property
    def lowest_band_weight(self) -> float:
        return self.age_bands[0].weight

    @classmethod
    def from_reference_file(cls, path: Optional[str] = None) -> 'SBRDetails':
        """Load scheme details from a reference JSON file (reference/sbr-details.json by default)."""
        ref_path = path or DEFAULT_REFERENCE_PATH
        with open(ref_path, 'r') as f:
            data = json.load(f)
        logger.debug("Loaded SBR reference data from %s", ref_path)
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> 'SBRDetails':
        """Build scheme details from the reference JSON structure."""
        raw_bands = data.get("ageBands", [])
        if not raw_bands:
            raise ValueError("sbr-details.json must contain an 'ageBands' array with at least one entry")

        bands = [
            AgeBand(b["minAge"], b.get("maxAge"), float(b["weight"]))
            for b in sorted(raw_bands, key=lambda b: b["minAge"])
        ]
        outplacement = data.get("outplacement", {})
        return cls(
            age_bands=bands,
            severance_cap=data.get("severanceCap", 300000),
            holiday_allowance_fraction=data.get("holidayAllowanceFraction", 0.08),
            unused_outplacement_fraction=data.get("unusedOutplacementFraction", 0.5),
            outplacement_age_threshold=outplacement.get("ageThreshold", 50),
            outplacement_service_years_threshold=outplacement.get("serviceYearsThreshold", 20),
            standard_outplacement_months=outplacement.get("standardMonths", 4),
            extended_outplacement_months=outplacement.get("extendedMonths", 6),
            default_role_lapse_month=data.get("defaultRoleLapseMonth", 7),
        )

    def to_dict(self) -> dict:
        return {
            "ageBands": [
                {"minAge": b.min_age, "maxAge": b.max_age, "weight": b.weight}
                for b in self.age_bands
            ],
            "severanceCap": self.severance_cap,
            "holidayAllowanceFraction": self.holiday_allowance_fraction,
            "unusedOutplacementFraction": self.unused_outplacement_fraction,
            "outplacement": {
                "ageThreshold": self.outplacement_age_threshold,
                "serviceYearsThreshold": self.outplacement_service_years_threshold,
                "standardMonths": self.standard_outplacement_months,
                "extendedMonths": self.extended_outplacement_months,
            },
            "defaultRoleLapseMonth": self.default_role_lapse_month,
        }


def _validate_age_bands(bands: Tuple[AgeBand, ...]) -> None:
    if not bands:
        raise ValueError("At least one age band is required")
    for i, band in enumerate(bands):
        if band.is_unbounded and i != len(bands) - 1:
            raise ValueError(f"Only the last age band may be unbounded (band starting at {band.min_age})")
        if band.max_age is not None and band.max_age <= band.min_age:
            raise ValueError(f"Age band {band.min_age}-{band.max_age} is empty")
        if i > 0 and bands[i - 1].max_age != band.min_age:
            raise ValueError(
                f"Age bands must be contiguous. Gap or overlap between {bands[i-1].max_age} and {band.min_age}")
