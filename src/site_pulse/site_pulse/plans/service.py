from __future__ import annotations

import re
from typing import Iterable, Sequence

from .model import DailyPlan, PlanLink, PlanProgress

_NUMBERED = re.compile(r"^\d+\.\s*(.+)")


def parse_daily_plans(text: str) -> list[DailyPlan]:
    """'1. Setup\\n2. Test' -> two plans; blank lines are skipped."""
    plans: list[DailyPlan] = []
    for index, line in enumerate((text or "").split("\n")):
        match = _NUMBERED.match(line.strip())
        item = match.group(1).strip() if match else line.strip()
        if item:
            plans.append(DailyPlan(plan_id=index + 1, text=item))
    return plans


def plan_progress(plan_id: int, links: Iterable[PlanLink]) -> PlanProgress:
    linked = [l for l in links if l.plan_id == plan_id and l.activity.strip()]
    return PlanProgress(
        completed_activities=sum(1 for l in linked if l.achieved),
        total_activities=len(linked),
    )


def apply_links(plans: Sequence[DailyPlan], links: Iterable[PlanLink]) -> list[DailyPlan]:
    """Attach linked activity text to each plan and mark finished plans."""
    links = list(links)
    out = []
    for plan in plans:
        activities = list(dict.fromkeys(
            plan.activities + [l.activity.strip() for l in links if l.plan_id == plan.plan_id and l.activity.strip()]
        ))
        out.append(
            DailyPlan(
                plan_id=plan.plan_id,
                text=plan.text,
                activities=activities,
                completed=plan_progress(plan.plan_id, links).is_completed,
            )
        )
    return out
