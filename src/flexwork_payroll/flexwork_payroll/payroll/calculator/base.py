from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import BiweeklyCalculation, PayrollCalculation


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, biweekly: BiweeklyCalculation, hourly_wage: float) -> PayrollCalculation:
        raise NotImplementedError
