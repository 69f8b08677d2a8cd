from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import Clock, now_local
from ..common.validators import is_blank, require_non_empty
from ..core.constants import ACTIVITY_PREFIX, DEFAULT_DAILY_TARGET, PROBLEM_PREFIX
from ..core.enums import RejectionReason
from ..core.exceptions import AuthorizationError, NotFoundError, SubmissionRejected, ValidationError
from ..sessions.engine import SessionWindowEngine
from ..sessions.model import ReportPeriod, SessionStatus, normalize_label
from .model import ConsolidatedReport, HourlyEntry, Rejection, SubmissionResult, SubmittedReport
from .repository import HourlyReportRepository
from .summary import compute_daily_achievement, consolidate
from .text import format_numbered, parse_numbered

logger = logging.getLogger(__name__)


def _entry_from_report(report: SubmittedReport) -> HourlyEntry:
    return HourlyEntry(
        time_period=report.time_period,
        hourly_activity=report.hourly_activity,
        hourly_achieved=report.hourly_achieved,
        problem_faced=report.problem_faced,
        problem_faced_by_engineer=report.problem_faced_by_engineer,
        problem_resolved_or_not=report.problem_resolved_or_not,
        problem_occur_start_time=report.problem_occur_start_time,
        problem_resolved_end_time=report.problem_resolved_end_time,
        reason_if_not_resolved=report.reason_if_not_resolved,
        online_support_required_for_which_problem=report.online_support_required_for_which_problem,
        online_support_time=report.online_support_time,
        online_support_end_time=report.online_support_end_time,
        engineer_name_who_gives_online_support=report.engineer_name_who_gives_online_support,
    )


def _numbered(entry: HourlyEntry) -> HourlyEntry:
    """Store activity and problem lines as 'Activity 1: ...' / 'Problem 1: ...'."""
    return replace(
        entry,
        hourly_activity=format_numbered(parse_numbered(entry.hourly_activity, ACTIVITY_PREFIX), ACTIVITY_PREFIX),
        problem_faced_by_engineer=format_numbered(
            parse_numbered(entry.problem_faced_by_engineer, PROBLEM_PREFIX), PROBLEM_PREFIX
        ),
    )


class HourlyReportService:
    """Applies session engine decisions against the report store."""

    def __init__(
        self,
        reports: HourlyReportRepository,
        *,
        engine: SessionWindowEngine | None = None,
        clock: Clock = now_local,
    ):
        self._reports = reports
        self._engine = engine or SessionWindowEngine()
        self._clock = clock

    @property
    def periods(self) -> tuple[ReportPeriod, ...]:
        return self._engine.periods

    def status_for(
        self, user_id: int, report_date: date | None = None, *, now: datetime | None = None
    ) -> dict[str, SessionStatus]:
        now = now or self._clock()
        existing = self._reports.list_for_user_and_date(user_id, report_date or now.date())
        return self._engine.compute_status(existing, now)

    def active_period(self, *, now: datetime | None = None) -> Optional[ReportPeriod]:
        return self._engine.active_period(now or self._clock())

    def list_for_day(self, user_id: int, report_date: date) -> list[SubmittedReport]:
        return list(self._reports.list_for_user_and_date(user_id, report_date))

    def submit_day(
        self,
        user_id: int,
        *,
        report_date: date,
        project_name: str,
        entries: Sequence[HourlyEntry],
        daily_target: str = "",
        employee_name: str = "",
        now: datetime | None = None,
    ) -> SubmissionResult:
        now = now or self._clock()
        if not isinstance(project_name, str) or not isinstance(daily_target or "", str):
            raise ValidationError("Project Name and Daily Target must be text")
        project_name = require_non_empty(project_name, "Project Name")
        daily_target = daily_target.strip() if not is_blank(daily_target) else DEFAULT_DAILY_TARGET

        if report_date != now.date():
            raise ValidationError("Reports can only be submitted for the current day")
        if not any(e.has_activity for e in entries):
            raise ValidationError("At least one Activity is required")
        for entry in entries:
            self._engine.period(entry.time_period)

        existing = self._reports.list_for_user_and_date(user_id, report_date)
        result = self._engine.submit_batch(entries, existing, now)

        # The engine rejects repeated periods, so the first entry per label is the accepted one.
        by_label: dict[str, HourlyEntry] = {}
        for e in entries:
            if e.has_activity:
                by_label.setdefault(self._engine.period(e.time_period).label, e)

        to_create: dict[str, HourlyEntry] = {}
        for label in result.accepted:
            # Uniqueness of (user, date, period) is enforced by the store; re-check
            # right before insert.
            if self._reports.exists_for(user_id=user_id, report_date=report_date, time_period=label):
                result.rejections.append(
                    Rejection(
                        time_period=label,
                        reason=RejectionReason.ALREADY_EXISTS,
                        message=f"Report for {label} already exists. Edit the existing report instead.",
                    )
                )
                continue
            to_create[label] = _numbered(replace(by_label[label], time_period=label))

        daily_achieved = self._day_summary(existing, to_create)
        result.accepted.clear()

        for label, entry in to_create.items():
            report_id = self._reports.create(
                user_id=user_id,
                report_date=report_date,
                period_name=self._engine.period(label).name,
                project_name=project_name,
                daily_target=daily_target,
                daily_target_achieved=daily_achieved,
                entry=entry,
                employee_name=employee_name,
            )
            result.accepted.append(label)
            result.report_ids[label] = report_id

        logger.info(
            "User %s submitted %s: accepted=%s rejected=%s",
            user_id,
            report_date,
            result.accepted,
            [r.reason.value for r in result.rejections],
        )
        return result

    def _day_summary(self, stored: Sequence[SubmittedReport], updates: Mapping[str, HourlyEntry]) -> str:
        """Running daily total over one slot per period, in period order.

        ``updates`` (keyed by period label) replace stored reports for the same
        period; empty slots keep "Session N" aligned with the period position.
        """
        by_label = {normalize_label(r.time_period): _entry_from_report(r) for r in stored}
        by_label.update({normalize_label(label): e for label, e in updates.items()})
        return compute_daily_achievement(
            [by_label.get(normalize_label(p.label)) or HourlyEntry.blank(p) for p in self._engine.periods]
        )

    def _get_owned(self, user_id: int, report_id: int) -> SubmittedReport:
        report = self._reports.get_by_id(report_id)
        if not report:
            raise NotFoundError("Hourly report not found")
        if int(report.user_id) != int(user_id):
            raise AuthorizationError("Not authorized to modify this hourly report")
        return report

    def edit(self, user_id: int, report_id: int, entry: HourlyEntry, *, now: datetime | None = None) -> SubmittedReport:
        now = now or self._clock()
        report = self._get_owned(user_id, report_id)
        entry = _numbered(replace(entry, time_period=report.time_period))

        if report.report_date != now.date():
            raise SubmissionRejected(
                "Reports from previous days can no longer be edited",
                [
                    Rejection(
                        time_period=report.time_period,
                        reason=RejectionReason.OUTSIDE_WINDOW,
                        message="Editing window has closed.",
                    )
                ],
            )

        day = self._reports.list_for_user_and_date(user_id, report.report_date)
        decision = self._engine.check_edit(report.time_period, entry, day, now)
        if not decision.accepted:
            logger.info("Edit of report %s refused: %s", report_id, [r.reason.value for r in decision.rejections])
            raise SubmissionRejected(decision.rejections[0].message, decision.rejections)

        self._reports.update(
            report_id=report.report_id,
            entry=entry,
            daily_target_achieved=self._day_summary(day, {self._engine.period(report.time_period).label: entry}),
        )
        logger.info("User %s edited report %s (%s)", user_id, report_id, report.time_period)

        updated = self._reports.get_by_id(report.report_id)
        if not updated:
            raise NotFoundError("Hourly report not found")
        return updated

    def draft_for_edit(self, user_id: int, report_id: int) -> HourlyEntry:
        """Load a stored report back into a draft, without the line numbering."""
        entry = _entry_from_report(self._get_owned(user_id, report_id))
        return replace(
            entry,
            hourly_activity="\n".join(parse_numbered(entry.hourly_activity, ACTIVITY_PREFIX)),
            problem_faced_by_engineer="\n".join(parse_numbered(entry.problem_faced_by_engineer, PROBLEM_PREFIX)),
        )

    def delete(self, user_id: int, report_id: int) -> None:
        self._get_owned(user_id, report_id)
        if not self._reports.delete(report_id=int(report_id)):
            raise NotFoundError("Hourly report not found")
        logger.info("User %s deleted report %s", user_id, report_id)

    def consolidated(self, user_id: int, report_date: date) -> ConsolidatedReport:
        reports = self.list_for_day(user_id, report_date)
        if not reports:
            raise NotFoundError("No hourly reports found for this date")
        return consolidate(reports)

    def daily_summary(self, entries: Sequence[HourlyEntry]) -> str:
        return compute_daily_achievement(entries)
