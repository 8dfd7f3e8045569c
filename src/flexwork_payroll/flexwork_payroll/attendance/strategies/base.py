from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ...rules.model import PayRules


class NightOverlapStrategy(ABC):
    """Strategy Pattern: encapsulate how night-window minutes are measured."""

    def __init__(self, rules: PayRules):
        self._rules = rules

    @abstractmethod
    def night_minutes(self, start: datetime, end: datetime) -> int:
        """Minutes of ``[start, end)`` inside the night window."""
        raise NotImplementedError
