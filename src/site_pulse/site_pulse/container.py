from __future__ import annotations

from dataclasses import dataclass

from .common.datetime_utils import Clock, now_local
from .core.constants import STATUS_REFRESH_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .reports.mysql_hourly_report_repository import MySQLHourlyReportRepository
from .reports.repository import HourlyReportRepository
from .reports.service import HourlyReportService
from .sessions.engine import SessionWindowEngine
from .sessions.model import DEFAULT_PERIODS
from .sessions.ticker import StatusTicker, UpdateCallback


@dataclass(frozen=True)
class Container:
    hourly_reports_repo: HourlyReportRepository
    engine: SessionWindowEngine
    hourly_report_service: HourlyReportService
    clock: Clock = now_local
    status_refresh_seconds: float = STATUS_REFRESH_SECONDS

    def status_ticker(self, user_id: int, *, on_update: UpdateCallback | None = None) -> StatusTicker:
        """Ticker recomputing today's session status for one user."""
        return StatusTicker(
            lambda: self.hourly_report_service.status_for(user_id),
            on_update=on_update,
            interval_seconds=self.status_refresh_seconds,
        )


def build_container(
    *,
    db_config: dict | None = None,
    reports_repo: HourlyReportRepository | None = None,
    clock: Clock = now_local,
    status_refresh_seconds: float = STATUS_REFRESH_SECONDS,
) -> Container:
    if reports_repo is None:
        if db_config is None:
            raise ValueError("db_config is required when no repository is supplied")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        reports_repo = MySQLHourlyReportRepository(conn)

    engine = SessionWindowEngine(DEFAULT_PERIODS)
    service = HourlyReportService(reports_repo, engine=engine, clock=clock)

    return Container(
        hourly_reports_repo=reports_repo,
        engine=engine,
        hourly_report_service=service,
        clock=clock,
        status_refresh_seconds=status_refresh_seconds,
    )
