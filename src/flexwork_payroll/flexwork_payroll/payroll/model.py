from __future__ import annotations

from dataclasses import dataclass, fields


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass(frozen=True)
class BiweeklyCalculation:
    """Minute buckets of one 14-day flexible-work period."""

    period_start: str
    period_end: str
    total_work_minutes: int
    regular_minutes: int
    overtime_minutes: int
    night_minutes: int
    night_overtime_minutes: int
    holiday_minutes: int
    holiday_substituted_minutes: int
    substitute_half_days: int
    substitute_full_days: int

    def to_dict(self) -> dict:
        """Interchange shape with camelCase keys (``totalWorkMinutes``, ...)."""
        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class PayrollCalculation(BiweeklyCalculation):
    """Biweekly buckets plus wage amounts in the currency's smallest unit."""

    hourly_wage: float
    regular_pay: int
    overtime_pay: int
    night_pay: int
    night_overtime_pay: int
    holiday_pay: int
    total_additional_pay: int
