from __future__ import annotations

from datetime import date, timedelta


def add_calendar_days(iso_date: str, days: int) -> str:
    """Add `days` calendar days to a YYYY-MM-DD date and return YYYY-MM-DD.

    `datetime.date` has no timezone or DST component, so the result never
    shifts with the host's local time. No business-day skipping.
    """
    return (date.fromisoformat(iso_date) + timedelta(days=days)).isoformat()
