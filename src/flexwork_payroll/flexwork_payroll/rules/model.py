from __future__ import annotations

import math
from dataclasses import dataclass, field

from ..core import constants
from ..core.enums import NightOverlapMode, OvertimeAllocation
from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class PayMultipliers:
    """Statutory wage multipliers per minute bucket.

    ``night`` is an additional premium on top of base pay; ``night_overtime``
    is the stacked overtime + night rate.
    """

    regular: float = constants.REGULAR_MULTIPLIER
    overtime: float = constants.OVERTIME_MULTIPLIER
    night: float = constants.NIGHT_MULTIPLIER
    night_overtime: float = constants.NIGHT_OVERTIME_MULTIPLIER
    holiday: float = constants.HOLIDAY_MULTIPLIER

    def __post_init__(self) -> None:
        for name in ("regular", "overtime", "night", "night_overtime", "holiday"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"multiplier '{name}' must be a number")
            if not math.isfinite(value) or value < 0:
                raise ConfigurationError(f"multiplier '{name}' must be finite and non-negative")


@dataclass(frozen=True)
class PayRules:
    """Jurisdiction-specific rule set for the biweekly engine.

    Loaded once at startup and shared read-only by every calculation.
    """

    standard_minutes: int = constants.BIWEEKLY_STANDARD_MINUTES
    night_start_hour: int = constants.NIGHT_START_HOUR
    night_end_hour: int = constants.NIGHT_END_HOUR
    sample_step_minutes: int = constants.NIGHT_SAMPLE_STEP_MINUTES
    substitute_half_day_minutes: int = constants.SUBSTITUTE_HALF_DAY_MINUTES
    substitute_full_day_minutes: int = constants.SUBSTITUTE_FULL_DAY_MINUTES
    multipliers: PayMultipliers = field(default_factory=PayMultipliers)
    night_mode: NightOverlapMode = NightOverlapMode.SAMPLED
    overtime_allocation: OvertimeAllocation = OvertimeAllocation.SIZE_BASED

    def __post_init__(self) -> None:
        if self.standard_minutes < 0:
            raise ConfigurationError("standard_minutes must not be negative")
        for name in ("night_start_hour", "night_end_hour"):
            hour = getattr(self, name)
            if not 0 <= hour <= 23:
                raise ConfigurationError(f"{name} must be within 0..23")
        if self.night_start_hour == self.night_end_hour:
            raise ConfigurationError("night window must not be empty")
        if self.sample_step_minutes <= 0:
            raise ConfigurationError("sample_step_minutes must be positive")
        if not 0 < self.substitute_half_day_minutes <= self.substitute_full_day_minutes:
            raise ConfigurationError("substitute thresholds must satisfy 0 < half-day <= full-day")

    def is_night_hour(self, hour: int) -> bool:
        if self.night_start_hour > self.night_end_hour:
            return hour >= self.night_start_hour or hour < self.night_end_hour
        return self.night_start_hour <= hour < self.night_end_hour


DEFAULT_RULES = PayRules()
