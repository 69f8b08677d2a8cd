"""Wall-clock window checks for report periods.

All checks look only at ``now.hour`` and ``now.minute``; the caller supplies
``now`` so tests can pin the clock.
"""

from __future__ import annotations

from datetime import datetime

from ..core.constants import EDIT_GRACE_MINUTES


def is_within_period(start_hour: int, end_hour: int, now: datetime) -> bool:
    hour, minute = now.hour, now.minute

    if start_hour < hour < end_hour:
        return True
    if hour == start_hour:
        return True
    # The closing instant belongs to the period only at minute 0.
    if hour == end_hour and minute == 0:
        return True
    return False


def is_within_editing_window(start_hour: int, end_hour: int, now: datetime) -> bool:
    if is_within_period(start_hour, end_hour, now):
        return True
    return now.hour == end_hour and now.minute <= EDIT_GRACE_MINUTES


def is_future_period(start_hour: int, now: datetime) -> bool:
    # NOTE: the minute clause never matches (minutes are never negative). It is
    # kept as a no-op; start hours are whole hours.
    return now.hour < start_hour or (now.hour == start_hour and now.minute < 0)
