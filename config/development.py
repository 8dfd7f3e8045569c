import os

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Statutory defaults for the biweekly (선택근로제) period.
# Any key may be overridden with PAY_* environment variables.
PAY_RULES = {
    "standard_minutes": 80 * 60,
    "night_start_hour": 22,
    "night_end_hour": 6,
    "sample_step_minutes": 15,
    "substitute_half_day_minutes": 4 * 60,
    "substitute_full_day_minutes": 8 * 60,
    "night_mode": "SAMPLED",
    "overtime_allocation": "SIZE_BASED",
    "multipliers": {
        "regular": 1.0,
        "overtime": 1.5,
        "night": 0.5,
        "night_overtime": 2.0,
        "holiday": 1.5,
    },
}
