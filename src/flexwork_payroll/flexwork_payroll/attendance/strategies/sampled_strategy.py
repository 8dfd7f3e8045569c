from __future__ import annotations

from datetime import datetime, timedelta

from .base import NightOverlapStrategy


class SampledNightOverlap(NightOverlapStrategy):
    """Fixed-step sampling: each step whose start hour is at night counts in full.

    Quantized to the step size, so an interval whose edges are off the step
    grid can be off by up to ``step - 1`` minutes.
    """

    def night_minutes(self, start: datetime, end: datetime) -> int:
        step = self._rules.sample_step_minutes
        delta = timedelta(minutes=step)
        total = 0
        current = start
        while current < end:
            if self._rules.is_night_hour(current.hour):
                total += step
            current += delta
        return total
