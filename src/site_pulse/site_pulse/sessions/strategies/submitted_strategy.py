from __future__ import annotations

from datetime import datetime

from ...core.enums import SessionState
from ..model import ReportPeriod, SessionStatus
from ..windows import is_within_editing_window
from .base import SessionStatusStrategy


class SubmittedStrategy(SessionStatusStrategy):
    """Report exists; it stays correctable while the editing window is open."""

    def decide(self, *, period: ReportPeriod, now: datetime) -> SessionStatus:
        return SessionStatus(
            state=SessionState.SUBMITTED,
            can_edit=is_within_editing_window(period.start_hour, period.end_hour, now),
        )
