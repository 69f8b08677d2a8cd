from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .model import ReportPeriod
from .strategies.active_strategy import ActiveStrategy
from .strategies.base import SessionStatusStrategy
from .strategies.missed_strategy import MissedStrategy
from .strategies.pending_strategy import PendingStrategy
from .strategies.submitted_strategy import SubmittedStrategy
from .windows import is_future_period, is_within_editing_window


@dataclass
class SessionStatusFactory:
    """Factory Pattern: choose the status strategy for one period.

    Rules are checked in order: submitted, future, open window, missed.
    """

    def for_period(self, *, period: ReportPeriod, now: datetime, submitted: bool) -> SessionStatusStrategy:
        if submitted:
            return SubmittedStrategy()
        if is_future_period(period.start_hour, now):
            return PendingStrategy()
        if is_within_editing_window(period.start_hour, period.end_hour, now):
            return ActiveStrategy()
        return MissedStrategy()
