from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import HourlyEntry, SubmittedReport


class HourlyReportRepository(Protocol):
    def list_for_user_and_date(self, user_id: int, report_date: date) -> Sequence[SubmittedReport]:
        raise NotImplementedError

    def get_by_id(self, report_id: int) -> Optional[SubmittedReport]:
        raise NotImplementedError

    def exists_for(self, *, user_id: int, report_date: date, time_period: str) -> bool:
        raise NotImplementedError

    def create(
        self,
        *,
        user_id: int,
        report_date: date,
        period_name: str,
        project_name: str,
        daily_target: str,
        daily_target_achieved: str,
        entry: HourlyEntry,
        employee_name: str = "",
    ) -> int:
        raise NotImplementedError

    def update(self, *, report_id: int, entry: HourlyEntry, daily_target_achieved: Optional[str] = None) -> bool:
        raise NotImplementedError

    def delete(self, *, report_id: int) -> bool:
        raise NotImplementedError
