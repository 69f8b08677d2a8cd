from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, format_mysql_time
from .model import HourlyEntry, SubmittedReport
from .normalize import normalize_report_row
from .repository import HourlyReportRepository

_COLUMNS = """
    id, user_id, report_date, time_period, period_name, project_name, daily_target,
    hourly_activity, hourly_achieved, daily_target_achieved,
    problem_faced, problem_faced_by_engineer_hourly, problem_resolved_or_not,
    problem_occur_start_time, problem_resolved_end_time, reason_if_not_resolved,
    online_support_required_for_which_problem, online_support_time, online_support_end_time,
    engineer_name_who_gives_online_support, employee_name, created_at, updated_at
"""

_TIME_COLUMNS = (
    "problem_occur_start_time",
    "problem_resolved_end_time",
    "online_support_time",
    "online_support_end_time",
)


def _to_report(row: dict) -> SubmittedReport:
    row = dict(row)
    for col in _TIME_COLUMNS:
        row[col] = format_mysql_time(row.get(col))
    return normalize_report_row(row)


def _entry_params(entry: HourlyEntry) -> tuple:
    return (
        entry.hourly_activity,
        entry.hourly_achieved,
        entry.problem_faced or "No",
        entry.problem_faced_by_engineer,
        entry.problem_resolved_or_not,
        entry.problem_occur_start_time or None,
        entry.problem_resolved_end_time or None,
        entry.reason_if_not_resolved,
        entry.online_support_required_for_which_problem,
        entry.online_support_time or None,
        entry.online_support_end_time or None,
        entry.engineer_name_who_gives_online_support,
    )


class MySQLHourlyReportRepository(HourlyReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_user_and_date(self, user_id: int, report_date: date) -> Sequence[SubmittedReport]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM hourly_reports
                WHERE user_id=%s AND report_date=%s
                ORDER BY time_period
                """,
                (int(user_id), report_date),
            )
            return [_to_report(r) for r in fetchall(cur)]

    def get_by_id(self, report_id: int) -> Optional[SubmittedReport]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM hourly_reports WHERE id=%s", (int(report_id),))
            r = fetchone(cur)
            return _to_report(r) if r else None

    def exists_for(self, *, user_id: int, report_date: date, time_period: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id FROM hourly_reports
                WHERE user_id=%s AND report_date=%s AND time_period=%s
                """,
                (int(user_id), report_date, time_period),
            )
            return fetchone(cur) is not None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO hourly_reports(
                    user_id, report_date, time_period, period_name, project_name, daily_target,
                    daily_target_achieved, employee_name,
                    hourly_activity, hourly_achieved,
                    problem_faced, problem_faced_by_engineer_hourly, problem_resolved_or_not,
                    problem_occur_start_time, problem_resolved_end_time, reason_if_not_resolved,
                    online_support_required_for_which_problem, online_support_time, online_support_end_time,
                    engineer_name_who_gives_online_support
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(user_id),
                    report_date,
                    entry.time_period,
                    period_name,
                    project_name,
                    daily_target,
                    daily_target_achieved,
                    employee_name,
                    *_entry_params(entry),
                ),
            )
            return int(cur.lastrowid)

    def update(self, *, report_id: int, entry: HourlyEntry, daily_target_achieved: Optional[str] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE hourly_reports
                SET hourly_activity=%s, hourly_achieved=%s,
                    problem_faced=%s, problem_faced_by_engineer_hourly=%s, problem_resolved_or_not=%s,
                    problem_occur_start_time=%s, problem_resolved_end_time=%s, reason_if_not_resolved=%s,
                    online_support_required_for_which_problem=%s, online_support_time=%s,
                    online_support_end_time=%s, engineer_name_who_gives_online_support=%s,
                    daily_target_achieved=COALESCE(%s, daily_target_achieved),
                    updated_at=CURRENT_TIMESTAMP
                WHERE id=%s
                """,
                (*_entry_params(entry), daily_target_achieved, int(report_id)),
            )
            return cur.rowcount > 0

    def delete(self, *, report_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM hourly_reports WHERE id=%s", (int(report_id),))
            return cur.rowcount > 0
