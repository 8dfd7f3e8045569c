from __future__ import annotations

from datetime import datetime, time, timedelta

from ...common.datetime_utils import minutes_between
from .base import NightOverlapStrategy


class ExactNightOverlap(NightOverlapStrategy):
    """Interval intersection against each calendar day's night window."""

    def night_minutes(self, start: datetime, end: datetime) -> int:
        if end <= start:
            return 0

        total = 0
        # A window opening the previous evening can still cover `start`.
        day = start.date() - timedelta(days=1)
        while True:
            win_start, win_end = self._window_for(day)
            if win_start >= end:
                break
            lo = max(start, win_start)
            hi = min(end, win_end)
            if hi > lo:
                total += minutes_between(lo, hi)
            day += timedelta(days=1)
        return total

    def _window_for(self, day) -> tuple[datetime, datetime]:
        rules = self._rules
        win_start = datetime.combine(day, time(rules.night_start_hour))
        if rules.night_start_hour > rules.night_end_hour:
            win_end = datetime.combine(day + timedelta(days=1), time(rules.night_end_hour))
        else:
            win_end = datetime.combine(day, time(rules.night_end_hour))
        return win_start, win_end
