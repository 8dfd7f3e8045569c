from __future__ import annotations

import importlib
from types import SimpleNamespace

import pytest

from config import get_settings_module

from src.flexwork_payroll.flexwork_payroll.core.enums import NightOverlapMode, OvertimeAllocation
from src.flexwork_payroll.flexwork_payroll.core.exceptions import ConfigurationError
from src.flexwork_payroll.flexwork_payroll.rules.loader import load_pay_rules, rules_from_mapping
from src.flexwork_payroll.flexwork_payroll.rules.model import PayMultipliers, PayRules


def test_testing_settings_yield_statutory_defaults():
    settings = importlib.import_module("config.testing")

    rules = load_pay_rules(settings, environ={})

    assert rules == PayRules()
    assert rules.standard_minutes == 4800
    assert rules.multipliers.night_overtime == 2.0


def test_development_settings_match_defaults():
    settings = importlib.import_module("config.development")

    assert load_pay_rules(settings, environ={}) == PayRules()


def test_env_overrides_settings():
    settings = SimpleNamespace(PAY_RULES={"standard_minutes": 4800, "multipliers": {"night": 0.5}})
    environ = {
        "PAY_STANDARD_MINUTES": "4000",
        "PAY_NIGHT_MODE": "exact",
        "PAY_OVERTIME_ALLOCATION": "chronological",
        "PAY_MULTIPLIER_OVERTIME": "2",
        "UNRELATED": "x",
    }

    rules = load_pay_rules(settings, environ=environ)

    assert rules.standard_minutes == 4000
    assert rules.night_mode == NightOverlapMode.EXACT
    assert rules.overtime_allocation == OvertimeAllocation.CHRONOLOGICAL
    assert rules.multipliers == PayMultipliers(overtime=2.0, night=0.5)


@pytest.mark.parametrize(
    "data",
    [
        {"standard_hours": 80},
        {"night_mode": "ROUGH"},
        {"standard_minutes": "eighty"},
        {"multipliers": {"sunday": 2.0}},
        {"multipliers": {"overtime": "fast"}},
        {"night_start_hour": 24},
        {"night_start_hour": 6, "night_end_hour": 6},
        {"sample_step_minutes": 0},
        {"substitute_half_day_minutes": 600},
    ],
)
def test_invalid_rules_are_rejected(data):
    with pytest.raises(ConfigurationError):
        rules_from_mapping(data)


def test_negative_multiplier_is_rejected():
    with pytest.raises(ConfigurationError):
        PayMultipliers(overtime=-1.5)


def test_night_hour_predicate():
    rules = PayRules()

    assert rules.is_night_hour(22)
    assert rules.is_night_hour(5)
    assert not rules.is_night_hour(6)
    assert not rules.is_night_hour(21)


@pytest.mark.parametrize(
    "env, module",
    [
        ("prod", "config.production"),
        ("Production", "config.production"),
        ("test", "config.testing"),
        ("testing", "config.testing"),
        ("development", "config.development"),
        ("staging", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == module
