from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.extractor import DailyWorkExtractor
from .attendance.factory import NightOverlapFactory
from .payroll.aggregator import BiweeklyAggregator
from .payroll.calculator.standard_calculator import StatutoryPayrollCalculator
from .payroll.service import PayrollService
from .rules.loader import load_pay_rules
from .rules.model import PayRules


@dataclass(frozen=True)
class Container:
    rules: PayRules

    extractor: DailyWorkExtractor
    aggregator: BiweeklyAggregator
    calculator: StatutoryPayrollCalculator

    payroll_service: PayrollService


def build_container(*, rules: Optional[PayRules] = None) -> Container:
    rules = rules or load_pay_rules()

    night = NightOverlapFactory().for_rules(rules)
    extractor = DailyWorkExtractor(rules, night=night)
    aggregator = BiweeklyAggregator(rules, extractor=extractor)
    calculator = StatutoryPayrollCalculator(rules)
    payroll_service = PayrollService(rules, aggregator=aggregator, calculator=calculator)

    return Container(
        rules=rules,
        extractor=extractor,
        aggregator=aggregator,
        calculator=calculator,
        payroll_service=payroll_service,
    )
