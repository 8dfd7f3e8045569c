from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import NightOverlapMode
from ..rules.model import PayRules
from .strategies.base import NightOverlapStrategy
from .strategies.exact_strategy import ExactNightOverlap
from .strategies.sampled_strategy import SampledNightOverlap


@dataclass
class NightOverlapFactory:
    """Factory Pattern: choose the night-overlap strategy configured in the rules."""

    def for_rules(self, rules: PayRules) -> NightOverlapStrategy:
        return self.for_mode(rules.night_mode, rules)

    def for_mode(self, mode: NightOverlapMode, rules: PayRules) -> NightOverlapStrategy:
        if mode == NightOverlapMode.EXACT:
            return ExactNightOverlap(rules)
        return SampledNightOverlap(rules)
