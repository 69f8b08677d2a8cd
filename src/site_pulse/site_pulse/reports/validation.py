from __future__ import annotations

from ..common.validators import is_blank
from ..core.enums import YesNo
from .model import HourlyEntry, Violation

_SUPPORT_FIELDS = (
    ("online_support_time", "Online support start time"),
    ("online_support_end_time", "Online support end time"),
    ("engineer_name_who_gives_online_support", "Engineer who gave online support"),
)


def validate_entry(entry: HourlyEntry) -> list[Violation]:
    """Check the conditional problem/online-support fields of one entry.

    An entry without activity text is not submitted at all, so it is never
    reported as invalid.
    """
    if not entry.has_activity:
        return []

    violations: list[Violation] = []

    if entry.problem_faced == YesNo.YES.value and is_blank(entry.problem_resolved_or_not):
        violations.append(
            Violation(
                field="problem_resolved_or_not",
                message="Problem Resolved or Not is required when problem faced is Yes",
            )
        )

    if entry.problem_resolved_or_not == YesNo.YES.value:
        if is_blank(entry.problem_occur_start_time):
            violations.append(
                Violation(
                    field="problem_occur_start_time",
                    message="Problem occur start time is required when problem is resolved",
                )
            )
        if is_blank(entry.problem_resolved_end_time):
            violations.append(
                Violation(
                    field="problem_resolved_end_time",
                    message="Problem resolved end time is required when problem is resolved",
                )
            )
        if not is_blank(entry.online_support_required_for_which_problem):
            missing = [label for name, label in _SUPPORT_FIELDS if is_blank(getattr(entry, name))]
            if missing:
                violations.append(
                    Violation(
                        field="online_support",
                        message="Online support details are required when support is requested: " + ", ".join(missing),
                    )
                )

    if entry.problem_resolved_or_not == YesNo.NO.value and is_blank(entry.reason_if_not_resolved):
        violations.append(
            Violation(
                field="reason_if_not_resolved",
                message="Reason for not resolving the problem is required when problem is not resolved",
            )
        )

    return violations
