"""Split an employment period into age-band segments and weight the service years."""

import logging
from dataclasses import replace
from datetime import date
from typing import List, Optional, Sequence

from calc.month_math import add_years, months_between
from model.BenefitDetails import ServiceSegment
from rules.AgeBand import AgeBand

logger = logging.getLogger(__name__)


def segment_service(employment_start_date: date,
                    birth_date: Optional[date],
                    exit_date: date,
                    age_bands: Sequence[AgeBand]) -> List[ServiceSegment]:
    """Cut [employment_start_date, exit_date) into one segment per age band it overlaps.

    Without a birth date the whole period is a single segment at the lowest
    band's weight. Segments that would contain no whole month are dropped.
    """
    segments = []
    if birth_date is None:
        months = months_between(employment_start_date, exit_date)
        if months > 0:
            segments.append(ServiceSegment(age_bands[0].weight, months, employment_start_date, exit_date))
        return segments

    for band in age_bands:
        seg_start = max(employment_start_date, add_years(birth_date, band.min_age))
        if band.is_unbounded:
            seg_end = exit_date
        else:
            seg_end = min(exit_date, add_years(birth_date, band.max_age))
        if seg_end <= seg_start:
            continue
        months = months_between(seg_start, seg_end)
        if months > 0:
            segments.append(ServiceSegment(band.weight, months, seg_start, seg_end))
        if band.is_unbounded or seg_end == exit_date:
            break
    return segments


class ServiceSegmentation:
    """Weighted service years for the severance formula.

    Service is rounded once over the whole period: a remainder above six
    months adds one year, credited to the last segment whose month count is
    not a whole number of years (or the final segment if every count is).
    The band of that segment decides the weight of the extra year.
    """

    ROUND_UP_AFTER_MONTHS = 6

    def __init__(self,
                 employment_start_date: date,
                 birth_date: Optional[date],
                 exit_date: date,
                 age_bands: Sequence[AgeBand]):
        raw_segments = segment_service(employment_start_date, birth_date, exit_date, age_bands)

        self.raw_service_months = sum(s.months for s in raw_segments)
        self.raw_service_full_years = self.raw_service_months // 12
        self.raw_service_remainder_months = self.raw_service_months % 12

        full_years = [s.months // 12 for s in raw_segments]
        if self.raw_service_remainder_months > self.ROUND_UP_AFTER_MONTHS and raw_segments:
            target = len(raw_segments) - 1
            for i in range(len(raw_segments) - 1, -1, -1):
                if raw_segments[i].months % 12 != 0:
                    target = i
                    break
            full_years[target] += 1

        self.segments: List[ServiceSegment] = [
            replace(s, full_years=years) for s, years in zip(raw_segments, full_years)
        ]
        self.weighted_years = sum(s.weighted_years for s in self.segments)

        logger.debug("Service %d months (%dy %dm) in %d segment(s), weighted years %.1f",
                     self.raw_service_months, self.raw_service_full_years,
                     self.raw_service_remainder_months, len(self.segments), self.weighted_years)
