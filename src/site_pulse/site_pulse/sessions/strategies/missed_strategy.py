from __future__ import annotations

from datetime import datetime

from ...core.enums import SessionState
from ..model import ReportPeriod, SessionStatus
from .base import SessionStatusStrategy


class MissedStrategy(SessionStatusStrategy):
    """Window closed without a report."""

    def decide(self, *, period: ReportPeriod, now: datetime) -> SessionStatus:
        return SessionStatus(state=SessionState.MISSED, can_edit=False)
