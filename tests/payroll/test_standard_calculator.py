from datetime import date, datetime
from decimal import Decimal

import pytest

from src.flexwork_payroll.flexwork_payroll.attendance.model import DailyWorkRecord
from src.flexwork_payroll.flexwork_payroll.core.exceptions import ValidationError
from src.flexwork_payroll.flexwork_payroll.payroll.aggregator import BiweeklyAggregator
from src.flexwork_payroll.flexwork_payroll.payroll.calculator.standard_calculator import StatutoryPayrollCalculator
from src.flexwork_payroll.flexwork_payroll.payroll.model import BiweeklyCalculation
from src.flexwork_payroll.flexwork_payroll.rules.model import PayMultipliers, PayRules


def _biweekly(**overrides) -> BiweeklyCalculation:
    values = dict(
        period_start="2024-01-01",
        period_end="2024-01-14",
        total_work_minutes=5040,
        regular_minutes=4800,
        overtime_minutes=240,
        night_minutes=100,
        night_overtime_minutes=60,
        holiday_minutes=120,
        holiday_substituted_minutes=0,
        substitute_half_days=0,
        substitute_full_days=0,
    )
    values.update(overrides)
    return BiweeklyCalculation(**values)


def test_statutory_multipliers():
    # 6000/h -> 100 per minute
    pay = StatutoryPayrollCalculator().calculate(_biweekly(), 6000)

    assert pay.regular_pay == 480000
    assert pay.overtime_pay == 27000  # (240 - 60) * 100 * 1.5
    assert pay.night_pay == 5000
    assert pay.night_overtime_pay == 12000
    assert pay.holiday_pay == 18000
    assert pay.total_additional_pay == 62000


def test_end_to_end_night_pay():
    rec = DailyWorkRecord(
        date=date(2024, 1, 1),
        check_in=datetime(2024, 1, 1, 9, 0),
        check_out=datetime(2024, 1, 1, 23, 0),
        break_minutes=60,
    )
    biweekly = BiweeklyAggregator().aggregate([rec], "2024-01-01", "2024-01-14")

    pay = StatutoryPayrollCalculator().calculate(biweekly, 10000)

    assert pay.regular_pay == 130000
    assert pay.night_pay == 4667
    assert pay.overtime_pay == 0
    assert pay.total_additional_pay == 4667
    assert pay.hourly_wage == 10000
    assert pay.total_work_minutes == 780


def test_amounts_round_half_up():
    # 60/h -> 1 per minute; 1 night minute -> 0.5, 5 -> 2.5
    calc = StatutoryPayrollCalculator()

    assert calc.calculate(_biweekly(night_minutes=1), 60).night_pay == 1
    assert calc.calculate(_biweekly(night_minutes=5), 60).night_pay == 3


def test_total_additional_pay_sums_rounded_premiums():
    pay = StatutoryPayrollCalculator().calculate(_biweekly(), 10001)

    assert pay.total_additional_pay == pay.overtime_pay + pay.night_pay + pay.night_overtime_pay + pay.holiday_pay


def test_calculation_is_idempotent():
    calc = StatutoryPayrollCalculator()
    biweekly = _biweekly()

    assert calc.calculate(biweekly, 9860.5) == calc.calculate(biweekly, 9860.5)


def test_zero_wage_gives_zero_amounts():
    pay = StatutoryPayrollCalculator().calculate(_biweekly(), 0)

    assert pay.regular_pay == 0
    assert pay.total_additional_pay == 0


@pytest.mark.parametrize("wage", [float("nan"), float("inf"), -1, "10000", None, True])
def test_invalid_wage_is_rejected(wage):
    with pytest.raises(ValidationError):
        StatutoryPayrollCalculator().calculate(_biweekly(), wage)


def test_custom_multipliers_from_rules():
    rules = PayRules(multipliers=PayMultipliers(overtime=2.0, holiday=2.0))

    pay = StatutoryPayrollCalculator(rules).calculate(_biweekly(), 6000)

    assert pay.overtime_pay == 36000
    assert pay.holiday_pay == 24000


def test_payroll_serializes_with_camel_case_keys():
    data = StatutoryPayrollCalculator().calculate(_biweekly(), 6000).to_dict()

    assert data["totalWorkMinutes"] == 5040
    assert data["nightOvertimeMinutes"] == 60
    assert data["hourlyWage"] == 6000
    assert data["totalAdditionalPay"] == 62000
    assert "total_work_minutes" not in data


def test_decimal_wage_is_accepted():
    pay = StatutoryPayrollCalculator().calculate(_biweekly(), Decimal("6000"))

    assert pay.regular_pay == 480000
    assert pay.total_additional_pay == 62000
    assert pay.hourly_wage == Decimal("6000")


@pytest.mark.parametrize("wage", [Decimal("NaN"), Decimal("Infinity"), Decimal("-1")])
def test_invalid_decimal_wage_is_rejected(wage):
    with pytest.raises(ValidationError):
        StatutoryPayrollCalculator().calculate(_biweekly(), wage)
