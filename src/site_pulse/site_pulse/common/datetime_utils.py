from __future__ import annotations

from datetime import date, datetime
from typing import Callable

Clock = Callable[[], datetime]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def coerce_date(value) -> date:
    """Accept a date, datetime or ISO string (a trailing time part is ignored)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        return parse_iso_date(value.strip()[:10])
    raise ValueError(f"Invalid date value: {value!r}")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
