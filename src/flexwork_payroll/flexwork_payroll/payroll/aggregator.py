from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..attendance.extractor import DailyContribution, DailyWorkExtractor
from ..attendance.model import DailyWorkRecord
from ..core.enums import OvertimeAllocation, SubstituteUnit
from ..rules.model import DEFAULT_RULES, PayRules
from .model import BiweeklyCalculation

logger = logging.getLogger(__name__)


class BiweeklyAggregator:
    """Combines one pay period's daily records into categorized minute buckets.

    Overtime is whatever exceeds ``rules.standard_minutes`` over the whole
    period. Night minutes are then split between the night and night-overtime
    buckets according to ``rules.overtime_allocation``.
    """

    def __init__(
        self,
        rules: PayRules = DEFAULT_RULES,
        *,
        extractor: Optional[DailyWorkExtractor] = None,
    ):
        self._rules = rules
        self._extractor = extractor or DailyWorkExtractor(rules)

    def substitute_unit(self, worked_minutes: int) -> SubstituteUnit:
        if worked_minutes >= self._rules.substitute_full_day_minutes:
            return SubstituteUnit.FULL_DAY
        if worked_minutes >= self._rules.substitute_half_day_minutes:
            return SubstituteUnit.HALF_DAY
        return SubstituteUnit.NONE

    def aggregate(
        self,
        records: Iterable[DailyWorkRecord],
        period_start: str,
        period_end: str,
    ) -> BiweeklyCalculation:
        contributions = [self._extractor.extract(r) for r in records]

        total = 0
        raw_night = 0
        holiday = 0
        holiday_substituted = 0
        half_days = 0
        full_days = 0

        for c in contributions:
            total += c.worked_minutes
            raw_night += c.night_minutes

            if not c.record.is_holiday:
                continue
            if c.record.substitute_leave_granted:
                # Below the half-day threshold: no leave unit and no premium.
                holiday_substituted += c.worked_minutes
                unit = self.substitute_unit(c.worked_minutes)
                if unit == SubstituteUnit.FULL_DAY:
                    full_days += 1
                elif unit == SubstituteUnit.HALF_DAY:
                    half_days += 1
            else:
                holiday += c.worked_minutes

        overtime = max(0, total - self._rules.standard_minutes)
        regular = total - overtime

        if overtime <= 0:
            night_overtime = 0
        elif self._rules.overtime_allocation == OvertimeAllocation.CHRONOLOGICAL:
            night_overtime = self._chronological_night_overtime(contributions)
        else:
            night_overtime = raw_night
        night_overtime = min(night_overtime, overtime, raw_night)

        logger.debug(
            "aggregated %d records for %s..%s: total=%d overtime=%d night=%d",
            len(contributions),
            period_start,
            period_end,
            total,
            overtime,
            raw_night,
        )

        return BiweeklyCalculation(
            period_start=period_start,
            period_end=period_end,
            total_work_minutes=total,
            regular_minutes=regular,
            overtime_minutes=overtime,
            night_minutes=raw_night - night_overtime,
            night_overtime_minutes=night_overtime,
            holiday_minutes=holiday,
            holiday_substituted_minutes=holiday_substituted,
            substitute_half_days=half_days,
            substitute_full_days=full_days,
        )

    def _chronological_night_overtime(self, contributions: list[DailyContribution]) -> int:
        """Night minutes worked after the running total crossed the standard."""
        standard = self._rules.standard_minutes
        ordered = sorted(contributions, key=lambda c: (c.record.check_in, c.record.date))

        running = 0
        night_overtime = 0
        for c in ordered:
            if running >= standard:
                night_overtime += c.night_minutes
            elif running + c.worked_minutes > standard:
                tail = self._extractor.night_minutes_after(c.record, standard - running)
                night_overtime += min(tail, c.night_minutes)
            running += c.worked_minutes
        return night_overtime
