"""Session window engine.

Pure decisions over ``(periods, submitted reports, now)``: which period is
pending/active/submitted/missed, and whether a create or edit attempt is
allowed. Nothing here talks to storage.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..core.enums import RejectionReason
from ..reports.model import HourlyEntry, Rejection, SubmissionDecision, SubmissionResult, Violation
from ..reports.validation import validate_entry
from .factory import SessionStatusFactory
from .model import DEFAULT_PERIODS, ReportPeriod, SessionStatus, find_period, normalize_label
from .windows import is_within_editing_window


def submitted_labels(submitted_reports) -> set[str]:
    """Normalize the caller's snapshot into a set of period labels.

    Accepts a mapping keyed by period label, or an iterable of labels or of
    records carrying ``time_period``.
    """
    if submitted_reports is None:
        return set()
    if isinstance(submitted_reports, Mapping):
        keys: Iterable = submitted_reports.keys()
    else:
        keys = (getattr(r, "time_period", r) for r in submitted_reports)
    return {normalize_label(k) for k in keys}


class SessionWindowEngine:
    def __init__(
        self,
        periods: Sequence[ReportPeriod] = DEFAULT_PERIODS,
        *,
        status_factory: SessionStatusFactory | None = None,
    ):
        self._periods = tuple(periods)
        self._factory = status_factory or SessionStatusFactory()

    @property
    def periods(self) -> tuple[ReportPeriod, ...]:
        return self._periods

    def period(self, label: str) -> ReportPeriod:
        return find_period(self._periods, label)

    def compute_status(self, submitted_reports, now: datetime) -> dict[str, SessionStatus]:
        labels = submitted_labels(submitted_reports)
        status: dict[str, SessionStatus] = {}
        for period in self._periods:
            strategy = self._factory.for_period(
                period=period,
                now=now,
                submitted=normalize_label(period.label) in labels,
            )
            status[period.label] = strategy.decide(period=period, now=now)
        return status

    def active_period(self, now: datetime) -> Optional[ReportPeriod]:
        for period in self._periods:
            if is_within_editing_window(period.start_hour, period.end_hour, now):
                return period
        return None

    def submit(self, period_label: str, entry: HourlyEntry, submitted_reports, now: datetime) -> SubmissionDecision:
        period = self.period(period_label)
        rejections: list[Rejection] = []

        if normalize_label(period.label) in submitted_labels(submitted_reports):
            rejections.append(
                Rejection(
                    time_period=period.label,
                    reason=RejectionReason.ALREADY_EXISTS,
                    message=f"Report for {period.label} already exists. Edit the existing report instead.",
                )
            )

        if not is_within_editing_window(period.start_hour, period.end_hour, now):
            rejections.append(
                Rejection(
                    time_period=period.label,
                    reason=RejectionReason.OUTSIDE_WINDOW,
                    message=(
                        f"{period.name} reports can only be submitted during the session "
                        "or up to 30 minutes after it ends."
                    ),
                )
            )

        violations = validate_entry(entry)
        if violations:
            rejections.append(
                Rejection(
                    time_period=period.label,
                    reason=RejectionReason.VALIDATION_FAILED,
                    message=f"{period.label}: " + ", ".join(v.message for v in violations),
                    violations=tuple(violations),
                )
            )

        return SubmissionDecision(time_period=period.label, rejections=tuple(rejections))

    def submit_batch(self, entries: Sequence[HourlyEntry], submitted_reports, now: datetime) -> SubmissionResult:
        result = SubmissionResult()
        # Periods claimed by earlier entries of this batch count as submitted.
        taken = submitted_labels(submitted_reports)
        for entry in entries:
            if not entry.has_activity:
                continue
            decision = self.submit(entry.time_period, entry, taken, now)
            taken.add(normalize_label(self.period(entry.time_period).label))
            if decision.accepted:
                result.accepted.append(decision.time_period)
            else:
                result.rejections.extend(decision.rejections)
        return result

    def check_edit(self, period_label: str, entry: HourlyEntry, submitted_reports, now: datetime) -> SubmissionDecision:
        """Gate the edit path: the report must exist and its window be open."""
        period = self.period(period_label)
        rejections: list[Rejection] = []

        if normalize_label(period.label) not in submitted_labels(submitted_reports):
            rejections.append(
                Rejection(
                    time_period=period.label,
                    reason=RejectionReason.NOT_SUBMITTED,
                    message=f"No report for {period.label} to edit.",
                )
            )
        elif not is_within_editing_window(period.start_hour, period.end_hour, now):
            rejections.append(
                Rejection(
                    time_period=period.label,
                    reason=RejectionReason.OUTSIDE_WINDOW,
                    message=f"Editing window for {period.label} has closed.",
                )
            )

        # A blank draft is skipped on create, but an edit must not clear the activity.
        violations = validate_entry(entry) if entry.has_activity else [
            Violation("hourly_activity", "Activity is required")
        ]
        if violations:
            rejections.append(
                Rejection(
                    time_period=period.label,
                    reason=RejectionReason.VALIDATION_FAILED,
                    message=f"{period.label}: " + ", ".join(v.message for v in violations),
                    violations=tuple(violations),
                )
            )

        return SubmissionDecision(time_period=period.label, rejections=tuple(rejections))


def compute_session_status(
    periods: Sequence[ReportPeriod], submitted_reports, now: datetime
) -> dict[str, SessionStatus]:
    return SessionWindowEngine(periods).compute_status(submitted_reports, now)
