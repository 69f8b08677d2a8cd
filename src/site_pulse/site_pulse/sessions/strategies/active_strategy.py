from __future__ import annotations

from datetime import datetime

from ...core.enums import SessionState
from ..model import ReportPeriod, SessionStatus
from .base import SessionStatusStrategy


class ActiveStrategy(SessionStatusStrategy):
    """Period (or its grace interval) is open and nothing is submitted yet."""

    def decide(self, *, period: ReportPeriod, now: datetime) -> SessionStatus:
        return SessionStatus(state=SessionState.ACTIVE, can_edit=True)
