"""Single normalization step at the storage/HTTP boundary.

Clients and legacy rows use camelCase or snake_case (and a few older column
names). Everything past this module sees one canonical shape.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_date
from .model import HourlyEntry, SubmittedReport

# canonical field -> accepted source keys, first non-empty wins
_ENTRY_ALIASES: dict[str, tuple[str, ...]] = {
    "time_period": ("timePeriod", "time_period"),
    "hourly_activity": ("hourlyActivity", "hourly_activity"),
    "hourly_achieved": ("hourlyAchieved", "hourly_achieved"),
    "problem_faced": ("problemFaced", "problem_faced"),
    "problem_faced_by_engineer": ("problemFacedByEngineerHourly", "problem_faced_by_engineer_hourly"),
    "problem_resolved_or_not": ("problemResolvedOrNot", "problem_resolved_or_not"),
    "problem_occur_start_time": ("problemOccurStartTime", "problem_occur_start_time"),
    "problem_resolved_end_time": ("problemResolvedEndTime", "problem_resolved_end_time"),
    "reason_if_not_resolved": ("reasonIfNotResolved", "reason_if_not_resolved"),
    "online_support_required_for_which_problem": (
        "onlineSupportRequiredForWhichProblem",
        "online_support_required_for_which_problem",
    ),
    "online_support_time": ("onlineSupportTime", "online_support_time"),
    "online_support_end_time": ("onlineSupportEndTime", "online_support_end_time"),
    "engineer_name_who_gives_online_support": (
        "engineerNameWhoGivesOnlineSupport",
        "engineer_name_who_gives_online_support",
    ),
}

_REPORT_ALIASES: dict[str, tuple[str, ...]] = {
    **_ENTRY_ALIASES,
    "report_id": ("id", "report_id", "reportId"),
    "user_id": ("user_id", "userId"),
    "report_date": ("reportDate", "report_date", "date"),
    "project_name": ("projectName", "project_name"),
    "daily_target": ("dailyTarget", "daily_target"),
    "daily_target_achieved": ("dailyTargetAchieved", "daily_target_achieved"),
    "period_name": ("periodName", "period_name"),
    "employee_name": ("employeeName", "employee_name"),
    "created_at": ("createdAt", "created_at"),
    "updated_at": ("updatedAt", "updated_at"),
}


def pick(data: Mapping[str, Any], *keys: str, default: Any = "") -> Any:
    for key in keys:
        value = data.get(key)
        if value is not None and value != "":
            return value
    return default


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _timestamp(value: Any) -> Optional[datetime]:
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def normalize_entry(data: Mapping[str, Any]) -> HourlyEntry:
    values = {name: _text(pick(data, *keys)) for name, keys in _ENTRY_ALIASES.items()}
    values["problem_faced"] = values["problem_faced"] or "No"
    return HourlyEntry(**values)


def normalize_report_row(row: Mapping[str, Any]) -> SubmittedReport:
    values: dict[str, Any] = {
        name: _text(pick(row, *keys)) for name, keys in _REPORT_ALIASES.items()
    }
    values["report_id"] = int(pick(row, *_REPORT_ALIASES["report_id"], default=0))
    values["user_id"] = int(pick(row, *_REPORT_ALIASES["user_id"], default=0))
    values["report_date"] = coerce_date(pick(row, *_REPORT_ALIASES["report_date"], default=None))
    values["problem_faced"] = values["problem_faced"] or "No"
    values["created_at"] = _timestamp(pick(row, *_REPORT_ALIASES["created_at"], default=None))
    values["updated_at"] = _timestamp(pick(row, *_REPORT_ALIASES["updated_at"], default=None))
    return SubmittedReport(**values)
