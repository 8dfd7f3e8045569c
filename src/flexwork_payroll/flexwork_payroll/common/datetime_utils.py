from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO 8601 timestamp into a naive wall-clock datetime.

    Timestamps are interpreted as the workplace's local wall clock. An explicit
    offset (or trailing ``Z``) is accepted but dropped, keeping the written time.
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1]
    parsed = datetime.fromisoformat(text)
    return parsed.replace(tzinfo=None)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, never below 0."""
    minutes = int((end - start).total_seconds() // 60)
    return max(minutes, 0)
