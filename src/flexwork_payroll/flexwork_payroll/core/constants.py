"""Constants and statutory defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

BIWEEKLY_STANDARD_MINUTES = 80 * 60

NIGHT_START_HOUR = 22
NIGHT_END_HOUR = 6
NIGHT_SAMPLE_STEP_MINUTES = 15

SUBSTITUTE_HALF_DAY_MINUTES = 4 * 60
SUBSTITUTE_FULL_DAY_MINUTES = 8 * 60

REGULAR_MULTIPLIER = 1.0
OVERTIME_MULTIPLIER = 1.5
NIGHT_MULTIPLIER = 0.5
NIGHT_OVERTIME_MULTIPLIER = 2.0
HOLIDAY_MULTIPLIER = 1.5

MINUTES_PER_HOUR = 60
