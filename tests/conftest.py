from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from src.site_pulse.site_pulse.reports.model import HourlyEntry, SubmittedReport


class InMemoryHourlyReports:
    def __init__(self):
        self._by_id: dict[int, SubmittedReport] = {}
        self._id = 0

    def list_for_user_and_date(self, user_id: int, report_date: date):
        return [r for r in self._by_id.values() if r.user_id == user_id and r.report_date == report_date]

    def get_by_id(self, report_id: int) -> Optional[SubmittedReport]:
        return self._by_id.get(int(report_id))

    def exists_for(self, *, user_id: int, report_date: date, time_period: str) -> bool:
        return any(r.time_period == time_period for r in self.list_for_user_and_date(user_id, report_date))

    def create(
        self,
        *,
        user_id,
        report_date,
        period_name,
        project_name,
        daily_target,
        daily_target_achieved,
        entry: HourlyEntry,
        employee_name="",
    ) -> int:
        self._id += 1
        self._by_id[self._id] = SubmittedReport(
            report_id=self._id,
            user_id=user_id,
            report_date=report_date,
            time_period=entry.time_period,
            period_name=period_name,
            project_name=project_name,
            daily_target=daily_target,
            daily_target_achieved=daily_target_achieved,
            employee_name=employee_name,
            hourly_activity=entry.hourly_activity,
            hourly_achieved=entry.hourly_achieved,
            problem_faced=entry.problem_faced,
            problem_faced_by_engineer=entry.problem_faced_by_engineer,
            problem_resolved_or_not=entry.problem_resolved_or_not,
            problem_occur_start_time=entry.problem_occur_start_time,
            problem_resolved_end_time=entry.problem_resolved_end_time,
            created_at=datetime(2026, 2, 2, 9, 0),
        )
        return self._id

    def update(self, *, report_id: int, entry: HourlyEntry, daily_target_achieved=None) -> bool:
        r = self._by_id.get(int(report_id))
        if not r:
            return False
        self._by_id[r.report_id] = replace(
            r,
            hourly_activity=entry.hourly_activity,
            hourly_achieved=entry.hourly_achieved,
            problem_resolved_or_not=entry.problem_resolved_or_not,
            daily_target_achieved=daily_target_achieved if daily_target_achieved is not None else r.daily_target_achieved,
        )
        return True

    def delete(self, *, report_id: int) -> bool:
        return self._by_id.pop(int(report_id), None) is not None


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 30, 0)


@pytest.fixture
def reports_repo() -> InMemoryHourlyReports:
    return InMemoryHourlyReports()
