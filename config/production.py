import os

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

PAY_RULES = {
    "standard_minutes": 80 * 60,
    "night_start_hour": 22,
    "night_end_hour": 6,
    "sample_step_minutes": 15,
    "substitute_half_day_minutes": 4 * 60,
    "substitute_full_day_minutes": 8 * 60,
    "night_mode": "SAMPLED",
    "overtime_allocation": "SIZE_BASED",
}
