from __future__ import annotations

from dataclasses import fields
from decimal import Decimal

from ...common.rounding import round_half_up
from ...common.validators import require_finite_non_negative
from ...core.constants import MINUTES_PER_HOUR
from ...rules.model import DEFAULT_RULES, PayRules
from ..model import BiweeklyCalculation, PayrollCalculation
from .base import PayrollCalculator


class StatutoryPayrollCalculator(PayrollCalculator):
    """Statutory rule: minutes x (hourly wage / 60) x multiplier, per bucket.

    Each amount is rounded half-up on its own. Overtime minutes already paid
    at the night-overtime rate are excluded from the plain overtime amount.
    """

    def __init__(self, rules: PayRules = DEFAULT_RULES):
        self._rules = rules

    def calculate(self, biweekly: BiweeklyCalculation, hourly_wage: float) -> PayrollCalculation:
        wage = require_finite_non_negative(hourly_wage, "hourly_wage")
        m = self._rules.multipliers

        plain_overtime = max(biweekly.overtime_minutes - biweekly.night_overtime_minutes, 0)

        regular_pay = self._amount(biweekly.regular_minutes, wage, m.regular)
        overtime_pay = self._amount(plain_overtime, wage, m.overtime)
        night_pay = self._amount(biweekly.night_minutes, wage, m.night)
        night_overtime_pay = self._amount(biweekly.night_overtime_minutes, wage, m.night_overtime)
        holiday_pay = self._amount(biweekly.holiday_minutes, wage, m.holiday)

        return PayrollCalculation(
            **{f.name: getattr(biweekly, f.name) for f in fields(BiweeklyCalculation)},
            hourly_wage=hourly_wage,
            regular_pay=regular_pay,
            overtime_pay=overtime_pay,
            night_pay=night_pay,
            night_overtime_pay=night_overtime_pay,
            holiday_pay=holiday_pay,
            total_additional_pay=overtime_pay + night_pay + night_overtime_pay + holiday_pay,
        )

    def _amount(self, minutes: int, wage: float, multiplier: float) -> int:
        value = Decimal(minutes) * Decimal(str(wage)) * Decimal(str(multiplier)) / MINUTES_PER_HOUR
        return round_half_up(value)
