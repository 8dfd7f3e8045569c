"""Human-readable formatting for minute counts and KRW amounts."""
from __future__ import annotations


def format_minutes_hm(minutes: int) -> str:
    """480 -> '8h', 510 -> '8h 30m'."""
    hours, rest = divmod(int(minutes), 60)
    return f"{hours}h {rest}m" if rest > 0 else f"{hours}h"


def format_krw(amount: int) -> str:
    """1234567 -> '₩1,234,567' (won has no fraction digits)."""
    value = int(amount)
    sign = "-" if value < 0 else ""
    return f"{sign}₩{abs(value):,}"
