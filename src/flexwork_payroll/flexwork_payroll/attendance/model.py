from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class BreakInterval:
    """A measured break with its own start/end on the wall clock."""

    start: datetime
    end: datetime


@dataclass(frozen=True)
class DailyWorkRecord:
    """Domain entity: one day's attendance as supplied by the caller.

    ``break_minutes`` and ``training_minutes`` are spread uniformly over the
    shift. When ``breaks`` is given, those intervals are cut out of the shift
    directly and ``break_minutes`` is not used.
    """

    date: date
    check_in: datetime
    check_out: datetime
    break_minutes: int = 0
    training_minutes: int = 0
    is_holiday: bool = False
    substitute_leave_granted: bool = False
    breaks: tuple[BreakInterval, ...] = ()
