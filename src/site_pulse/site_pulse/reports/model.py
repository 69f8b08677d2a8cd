from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import RejectionReason


@dataclass
class HourlyEntry:
    """Draft report for one period, held by the client until submitted."""

    time_period: str
    hourly_activity: str = ""
    hourly_achieved: str = ""
    problem_faced: str = "No"
    problem_faced_by_engineer: str = ""
    problem_resolved_or_not: str = ""
    problem_occur_start_time: str = ""
    problem_resolved_end_time: str = ""
    reason_if_not_resolved: str = ""
    online_support_required_for_which_problem: str = ""
    online_support_time: str = ""
    online_support_end_time: str = ""
    engineer_name_who_gives_online_support: str = ""

    @classmethod
    def blank(cls, period) -> "HourlyEntry":
        return cls(time_period=period.label)

    @property
    def has_activity(self) -> bool:
        return bool(self.hourly_activity and self.hourly_activity.strip())

    def to_dict(self) -> dict:
        return {
            "timePeriod": self.time_period,
            "hourlyActivity": self.hourly_activity,
            "hourlyAchieved": self.hourly_achieved,
            "problemFaced": self.problem_faced,
            "problemFacedByEngineerHourly": self.problem_faced_by_engineer,
            "problemResolvedOrNot": self.problem_resolved_or_not,
            "problemOccurStartTime": self.problem_occur_start_time,
            "problemResolvedEndTime": self.problem_resolved_end_time,
            "reasonIfNotResolved": self.reason_if_not_resolved,
            "onlineSupportRequiredForWhichProblem": self.online_support_required_for_which_problem,
            "onlineSupportTime": self.online_support_time,
            "onlineSupportEndTime": self.online_support_end_time,
            "engineerNameWhoGivesOnlineSupport": self.engineer_name_who_gives_online_support,
        }


@dataclass(frozen=True)
class SubmittedReport:
    """Canonical persisted report for one (user, date, period)."""

    report_id: int
    user_id: int
    report_date: date
    time_period: str
    project_name: str
    daily_target: str = ""
    hourly_activity: str = ""
    hourly_achieved: str = ""
    daily_target_achieved: str = ""
    problem_faced: str = "No"
    problem_faced_by_engineer: str = ""
    problem_resolved_or_not: str = ""
    problem_occur_start_time: str = ""
    problem_resolved_end_time: str = ""
    reason_if_not_resolved: str = ""
    online_support_required_for_which_problem: str = ""
    online_support_time: str = ""
    online_support_end_time: str = ""
    engineer_name_who_gives_online_support: str = ""
    period_name: str = ""
    employee_name: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_filled(self) -> bool:
        return bool(self.hourly_activity or self.hourly_achieved or self.problem_faced_by_engineer)

    def to_dict(self) -> dict:
        return {
            "id": self.report_id,
            "userId": self.user_id,
            "reportDate": self.report_date.strftime("%Y-%m-%d"),
            "timePeriod": self.time_period,
            "periodName": self.period_name,
            "projectName": self.project_name,
            "dailyTarget": self.daily_target,
            "hourlyActivity": self.hourly_activity,
            "hourlyAchieved": self.hourly_achieved,
            "dailyTargetAchieved": self.daily_target_achieved,
            "problemFaced": self.problem_faced,
            "problemFacedByEngineerHourly": self.problem_faced_by_engineer,
            "problemResolvedOrNot": self.problem_resolved_or_not,
            "problemOccurStartTime": self.problem_occur_start_time,
            "problemResolvedEndTime": self.problem_resolved_end_time,
            "reasonIfNotResolved": self.reason_if_not_resolved,
            "onlineSupportRequiredForWhichProblem": self.online_support_required_for_which_problem,
            "onlineSupportTime": self.online_support_time,
            "onlineSupportEndTime": self.online_support_end_time,
            "engineerNameWhoGivesOnlineSupport": self.engineer_name_who_gives_online_support,
            "employeeName": self.employee_name,
            "isFilled": self.is_filled,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }


@dataclass(frozen=True)
class Violation:
    field: str
    message: str


@dataclass(frozen=True)
class Rejection:
    time_period: str
    reason: RejectionReason
    message: str
    violations: tuple[Violation, ...] = ()

    def to_dict(self) -> dict:
        return {
            "timePeriod": self.time_period,
            "reason": self.reason.value,
            "message": self.message,
            "violations": [{"field": v.field, "message": v.message} for v in self.violations],
        }


@dataclass(frozen=True)
class SubmissionDecision:
    """Engine verdict for a single period."""

    time_period: str
    rejections: tuple[Rejection, ...] = ()

    @property
    def accepted(self) -> bool:
        return not self.rejections


@dataclass
class SubmissionResult:
    """Outcome of a batch: every non-empty period is tried, none short-circuits."""

    accepted: list[str] = field(default_factory=list)
    rejections: list[Rejection] = field(default_factory=list)
    report_ids: dict[str, int] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.rejections

    def to_dict(self) -> dict:
        return {
            "accepted": list(self.accepted),
            "reportIds": dict(self.report_ids),
            "rejections": [r.to_dict() for r in self.rejections],
        }


@dataclass(frozen=True)
class ConsolidatedReport:
    achievements: str
    problems: str
    activities: str
    project_name: str
    count: int

    def to_dict(self) -> dict:
        return {
            "achievements": self.achievements,
            "problems": self.problems,
            "activities": self.activities,
            "projectName": self.project_name,
            "count": self.count,
        }
