from __future__ import annotations

from datetime import datetime

from ...core.enums import SessionState
from ..model import ReportPeriod, SessionStatus
from .base import SessionStatusStrategy


class PendingStrategy(SessionStatusStrategy):
    """Period has not started yet."""

    def decide(self, *, period: ReportPeriod, now: datetime) -> SessionStatus:
        return SessionStatus(state=SessionState.PENDING, can_edit=False)
