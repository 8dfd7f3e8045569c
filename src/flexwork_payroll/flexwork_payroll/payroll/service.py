from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from ..attendance.model import BreakInterval, DailyWorkRecord
from ..common.datetime_utils import parse_iso_date, parse_iso_datetime
from ..common.formatters import format_krw, format_minutes_hm
from ..common.validators import require_flag, require_iso_date, require_minutes
from ..core.exceptions import ValidationError
from ..rules.model import DEFAULT_RULES, PayRules
from .aggregator import BiweeklyAggregator
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StatutoryPayrollCalculator
from .model import BiweeklyCalculation, PayrollCalculation

logger = logging.getLogger(__name__)


class PayrollService:
    """Facade over the pipeline: records -> biweekly buckets -> wage amounts."""

    def __init__(
        self,
        rules: PayRules = DEFAULT_RULES,
        *,
        aggregator: Optional[BiweeklyAggregator] = None,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._rules = rules
        self._aggregator = aggregator or BiweeklyAggregator(rules)
        self._calculator = calculator or StatutoryPayrollCalculator(rules)

    @property
    def rules(self) -> PayRules:
        return self._rules

    def calculate_biweekly(
        self,
        records: Iterable[DailyWorkRecord],
        period_start: str,
        period_end: str,
    ) -> BiweeklyCalculation:
        period_start = require_iso_date(period_start, "periodStart")
        period_end = require_iso_date(period_end, "periodEnd")
        records = list(records)
        logger.debug("biweekly calculation %s..%s (%d records)", period_start, period_end, len(records))
        return self._aggregator.aggregate(records, period_start, period_end)

    def calculate_payroll(
        self,
        records: Iterable[DailyWorkRecord],
        period_start: str,
        period_end: str,
        hourly_wage: float,
    ) -> PayrollCalculation:
        biweekly = self.calculate_biweekly(records, period_start, period_end)
        return self._calculator.calculate(biweekly, hourly_wage)

    def build_summary(self, calc: BiweeklyCalculation) -> dict[str, str]:
        """Display strings for a computed period ("8h 30m", "₩4,667")."""
        summary = {
            "total_work": format_minutes_hm(calc.total_work_minutes),
            "regular": format_minutes_hm(calc.regular_minutes),
            "overtime": format_minutes_hm(calc.overtime_minutes),
            "night": format_minutes_hm(calc.night_minutes),
            "night_overtime": format_minutes_hm(calc.night_overtime_minutes),
            "holiday": format_minutes_hm(calc.holiday_minutes),
            "holiday_substituted": format_minutes_hm(calc.holiday_substituted_minutes),
        }
        if isinstance(calc, PayrollCalculation):
            summary.update(
                {
                    "regular_pay": format_krw(calc.regular_pay),
                    "overtime_pay": format_krw(calc.overtime_pay),
                    "night_pay": format_krw(calc.night_pay),
                    "night_overtime_pay": format_krw(calc.night_overtime_pay),
                    "holiday_pay": format_krw(calc.holiday_pay),
                    "total_additional_pay": format_krw(calc.total_additional_pay),
                }
            )
        return summary

    @staticmethod
    def records_from_payload(items: Any) -> list[DailyWorkRecord]:
        """Parse camelCase JSON records into DailyWorkRecord objects."""
        if not isinstance(items, list):
            raise ValidationError("records must be a list")
        return [_record_from_dict(item, index) for index, item in enumerate(items)]


def _record_from_dict(item: Any, index: int) -> DailyWorkRecord:
    if not isinstance(item, Mapping):
        raise ValidationError(f"records[{index}] must be an object")

    try:
        check_in = parse_iso_datetime(str(item["checkIn"]))
        check_out = parse_iso_datetime(str(item["checkOut"]))
        work_date = parse_iso_date(str(item["date"])) if item.get("date") else check_in.date()
        breaks = tuple(
            BreakInterval(start=parse_iso_datetime(str(b["start"])), end=parse_iso_datetime(str(b["end"])))
            for b in item.get("breaks") or ()
        )
    except KeyError as e:
        raise ValidationError(f"records[{index}] is missing {e.args[0]}") from None
    except (TypeError, ValueError):
        raise ValidationError(f"records[{index}] has an invalid date/time") from None

    training_key = "trainingMinutes" if "trainingMinutes" in item else "ptMinutes"
    prefix = f"records[{index}]"
    return DailyWorkRecord(
        date=work_date,
        check_in=check_in,
        check_out=check_out,
        break_minutes=require_minutes(item.get("breakMinutes"), f"{prefix}.breakMinutes"),
        training_minutes=require_minutes(item.get(training_key), f"{prefix}.{training_key}"),
        is_holiday=require_flag(item.get("isHoliday", False), f"{prefix}.isHoliday"),
        substitute_leave_granted=require_flag(
            item.get("substituteLeaveGranted", False), f"{prefix}.substituteLeaveGranted"
        ),
        breaks=breaks,
    )
