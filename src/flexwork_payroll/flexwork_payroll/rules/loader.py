from __future__ import annotations

import importlib
import logging
import os
from types import ModuleType
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

from config import get_settings_module

from ..core.enums import NightOverlapMode, OvertimeAllocation
from ..core.exceptions import ConfigurationError
from .model import PayMultipliers, PayRules

logger = logging.getLogger(__name__)

_INT_FIELDS = (
    "standard_minutes",
    "night_start_hour",
    "night_end_hour",
    "sample_step_minutes",
    "substitute_half_day_minutes",
    "substitute_full_day_minutes",
)
_MULTIPLIER_FIELDS = ("regular", "overtime", "night", "night_overtime", "holiday")

# Environment overrides: PAY_STANDARD_MINUTES, PAY_NIGHT_MODE, PAY_MULTIPLIER_OVERTIME, ...
_ENV_PREFIX = "PAY_"
_ENV_MULTIPLIER_PREFIX = "PAY_MULTIPLIER_"


def rules_from_mapping(data: Mapping[str, Any]) -> PayRules:
    """Build PayRules from a plain dict (settings module or parsed env)."""
    unknown = set(data) - set(_INT_FIELDS) - {"multipliers", "night_mode", "overtime_allocation"}
    if unknown:
        raise ConfigurationError(f"unknown pay rule keys: {', '.join(sorted(unknown))}")

    kwargs: dict[str, Any] = {}
    for name in _INT_FIELDS:
        if name in data:
            kwargs[name] = _to_int(data[name], name)

    multipliers = data.get("multipliers") or {}
    if isinstance(multipliers, PayMultipliers):
        kwargs["multipliers"] = multipliers
    else:
        bad = set(multipliers) - set(_MULTIPLIER_FIELDS)
        if bad:
            raise ConfigurationError(f"unknown multipliers: {', '.join(sorted(bad))}")
        kwargs["multipliers"] = PayMultipliers(**{k: _to_float(v, k) for k, v in multipliers.items()})

    if "night_mode" in data:
        kwargs["night_mode"] = _to_enum(NightOverlapMode, data["night_mode"], "night_mode")
    if "overtime_allocation" in data:
        kwargs["overtime_allocation"] = _to_enum(OvertimeAllocation, data["overtime_allocation"], "overtime_allocation")

    return PayRules(**kwargs)


def overrides_from_env(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    multipliers: dict[str, str] = {}
    for key, value in environ.items():
        if key.startswith(_ENV_MULTIPLIER_PREFIX):
            name = key[len(_ENV_MULTIPLIER_PREFIX):].lower()
            if name in _MULTIPLIER_FIELDS:
                multipliers[name] = value
        elif key.startswith(_ENV_PREFIX):
            name = key[len(_ENV_PREFIX):].lower()
            if name in _INT_FIELDS or name in ("night_mode", "overtime_allocation"):
                overrides[name] = value
    if multipliers:
        overrides["multipliers"] = multipliers
    return overrides


def load_pay_rules(
    settings: Optional[ModuleType] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> PayRules:
    """Load the process-wide rule set: settings module PAY_RULES, then PAY_* env vars."""
    if settings is None:
        load_dotenv(override=False)
        settings = importlib.import_module(get_settings_module())
    env = os.environ if environ is None else environ

    data: dict[str, Any] = dict(getattr(settings, "PAY_RULES", {}) or {})
    overrides = overrides_from_env(env)
    if "multipliers" in overrides:
        merged = dict(data.get("multipliers") or {})
        merged.update(overrides.pop("multipliers"))
        data["multipliers"] = merged
    data.update(overrides)

    rules = rules_from_mapping(data)
    logger.info(
        "pay rules loaded: standard=%s night=%02d-%02d mode=%s allocation=%s",
        rules.standard_minutes,
        rules.night_start_hour,
        rules.night_end_hour,
        rules.night_mode.value,
        rules.overtime_allocation.value,
    )
    return rules


def _to_int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be an integer") from None


def _to_float(value: Any, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"multiplier '{name}' must be a number") from None


def _to_enum(enum_cls, value: Any, name: str):
    try:
        return enum_cls(str(value).strip().upper())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ConfigurationError(f"{name} must be one of: {allowed}") from None
