from __future__ import annotations

from enum import Enum


class NightOverlapMode(str, Enum):
    """How minutes inside the night window are measured."""

    SAMPLED = "SAMPLED"
    EXACT = "EXACT"


class OvertimeAllocation(str, Enum):
    """How night minutes are attributed to the overtime bucket."""

    SIZE_BASED = "SIZE_BASED"
    CHRONOLOGICAL = "CHRONOLOGICAL"


class SubstituteUnit(str, Enum):
    """Compensatory-leave unit earned by substituted holiday work."""

    NONE = "NONE"
    HALF_DAY = "HALF_DAY"
    FULL_DAY = "FULL_DAY"
