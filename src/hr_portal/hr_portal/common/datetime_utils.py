from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date {value!r} (YYYY-MM-DD)")


def today_local() -> date:
    """Current date in the server's local time zone, not UTC.

    Requests are dated by the calendar day the portal runs in.
    Note: Wrapped so tests can patch it.
    """
    return date.today()
