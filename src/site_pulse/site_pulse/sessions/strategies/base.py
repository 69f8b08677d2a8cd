from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ..model import ReportPeriod, SessionStatus


class SessionStatusStrategy(ABC):
    """Strategy Pattern: encapsulate how one session state is reported."""

    @abstractmethod
    def decide(self, *, period: ReportPeriod, now: datetime) -> SessionStatus:
        raise NotImplementedError
