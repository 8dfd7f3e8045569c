from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from fractions import Fraction
from typing import Optional

from ..common.datetime_utils import minutes_between
from ..common.rounding import round_half_up
from ..common.validators import non_negative_minutes
from ..rules.model import DEFAULT_RULES, PayRules
from .factory import NightOverlapFactory
from .model import DailyWorkRecord
from .strategies.base import NightOverlapStrategy

logger = logging.getLogger(__name__)

Segment = tuple[datetime, datetime]


@dataclass(frozen=True)
class DailyContribution:
    """Per-record minutes fed into the biweekly aggregate."""

    record: DailyWorkRecord
    elapsed_minutes: int
    worked_minutes: int
    night_minutes: int


class DailyWorkExtractor:
    """Turns one attendance record into net worked and net night minutes.

    Rule: worked = (out - in) - breaks - training, not below 0. Night minutes
    are measured on the worked segments and scaled by the share of time that
    remains after unmeasured breaks and training.
    """

    def __init__(
        self,
        rules: PayRules = DEFAULT_RULES,
        *,
        night: Optional[NightOverlapStrategy] = None,
    ):
        self._rules = rules
        self._night = night or NightOverlapFactory().for_rules(rules)

    def elapsed_minutes(self, record: DailyWorkRecord) -> int:
        return minutes_between(record.check_in, record.check_out)

    def worked_minutes(self, record: DailyWorkRecord) -> int:
        minutes = self.elapsed_minutes(record)
        if record.breaks:
            minutes -= sum(minutes_between(lo, hi) for lo, hi in self._break_spans(record))
        else:
            minutes -= non_negative_minutes(record.break_minutes)
        minutes -= non_negative_minutes(record.training_minutes)
        return max(minutes, 0)

    def night_minutes(self, record: DailyWorkRecord) -> int:
        return self.night_minutes_after(record, 0)

    def night_minutes_after(self, record: DailyWorkRecord, worked_offset: int) -> int:
        """Night minutes in the part of the shift after ``worked_offset`` worked minutes."""
        worked = self.worked_minutes(record)
        if worked_offset >= worked:
            return 0

        segments = self.segments(record)
        scale = self._scale(segments, worked)
        if scale <= 0:
            return 0

        raw = 0
        skip = max(worked_offset, 0) / scale
        for start, end in segments:
            length = minutes_between(start, end)
            if skip >= length:
                skip -= length
                continue
            if skip > 0:
                start = start + timedelta(minutes=float(skip))
                skip = 0
            raw += self._night.night_minutes(start, end)

        return min(round_half_up(raw * scale), worked)

    def segments(self, record: DailyWorkRecord) -> list[Segment]:
        """Gross shift interval with measured breaks cut out."""
        if record.check_out <= record.check_in:
            return []
        if not record.breaks:
            return [(record.check_in, record.check_out)]

        pieces: list[Segment] = []
        cursor = record.check_in
        for lo, hi in self._break_spans(record):
            if lo > cursor:
                pieces.append((cursor, lo))
            cursor = max(cursor, hi)
        if cursor < record.check_out:
            pieces.append((cursor, record.check_out))
        return pieces

    def extract(self, record: DailyWorkRecord) -> DailyContribution:
        elapsed = self.elapsed_minutes(record)
        worked = self.worked_minutes(record)
        if elapsed == 0:
            logger.warning("record %s clamped: check-out is not after check-in", record.date)
        elif worked == 0:
            logger.warning("record %s clamped: breaks and training cover the whole shift", record.date)
        return DailyContribution(
            record=record,
            elapsed_minutes=elapsed,
            worked_minutes=worked,
            night_minutes=self.night_minutes(record) if worked else 0,
        )

    def _scale(self, segments: list[Segment], worked: int) -> Fraction:
        """Exact net-to-gross ratio, so half minutes round up."""
        gross = sum(minutes_between(start, end) for start, end in segments)
        if gross <= 0:
            return Fraction(0)
        return Fraction(worked, gross)

    def _break_spans(self, record: DailyWorkRecord) -> list[Segment]:
        """Breaks clipped to the shift, sorted and merged."""
        spans = sorted(
            (max(b.start, record.check_in), min(b.end, record.check_out))
            for b in record.breaks
        )
        merged: list[Segment] = []
        for lo, hi in spans:
            if hi <= lo:
                continue
            if merged and lo <= merged[-1][1]:
                merged[-1] = (merged[-1][0], max(merged[-1][1], hi))
            else:
                merged.append((lo, hi))
        return merged
