from __future__ import annotations

from typing import Iterable, Sequence

from ..core.constants import (
    SUMMARY_JOINER,
    SUMMARY_MAX_LENGTH,
    SUMMARY_SESSION_JOINER,
    SUMMARY_SNIPPET_LENGTH,
)
from .model import ConsolidatedReport, HourlyEntry, SubmittedReport


def compute_daily_achievement(entries: Sequence[HourlyEntry]) -> str:
    """Roll the day's per-session achievements into one display string.

    Above SUMMARY_MAX_LENGTH the result is a lossy per-session digest; the
    full text stays on each entry.
    """
    achieved = [
        (index, entry.hourly_achieved.strip())
        for index, entry in enumerate(entries)
        if entry.hourly_achieved and entry.hourly_achieved.strip()
    ]

    joined = SUMMARY_JOINER.join(text for _, text in achieved)
    if len(joined) <= SUMMARY_MAX_LENGTH:
        return joined

    parts = []
    for index, text in achieved:
        snippet = text[:SUMMARY_SNIPPET_LENGTH]
        if len(text) > SUMMARY_SNIPPET_LENGTH:
            snippet += "..."
        parts.append(f"Session {index + 1}: {snippet}")
    return SUMMARY_SESSION_JOINER.join(parts)


def _join_present(values: Iterable[str]) -> str:
    return SUMMARY_JOINER.join(v for v in values if v)


def consolidate(reports: Sequence[SubmittedReport]) -> ConsolidatedReport:
    """Manager roll-up of one user's submitted reports for a day."""
    return ConsolidatedReport(
        achievements=_join_present(r.hourly_achieved or r.daily_target_achieved for r in reports),
        problems=_join_present(r.problem_faced_by_engineer for r in reports),
        activities=_join_present(r.hourly_activity for r in reports),
        project_name=reports[0].project_name if reports else "",
        count=len(reports),
    )
