from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DailyPlan:
    plan_id: int
    text: str
    activities: list[str] = field(default_factory=list)
    completed: bool = False


@dataclass(frozen=True)
class PlanLink:
    """An activity line of a session entry linked to a daily plan item."""

    plan_id: int
    session_index: int
    activity_index: int
    activity: str
    achieved: bool = False


@dataclass(frozen=True)
class PlanProgress:
    completed_activities: int
    total_activities: int

    @property
    def is_completed(self) -> bool:
        return self.total_activities > 0 and self.completed_activities == self.total_activities

    @property
    def percentage(self) -> int:
        if not self.total_activities:
            return 0
        return round(self.completed_activities * 100 / self.total_activities)

    def label(self) -> str:
        if not self.total_activities:
            return "No activities linked"
        if self.is_completed:
            return f"Completed ({self.completed_activities}/{self.total_activities})"
        return f"In progress ({self.completed_activities}/{self.total_activities})"

    def to_dict(self) -> dict:
        return {
            "completedActivities": self.completed_activities,
            "totalActivities": self.total_activities,
            "isCompleted": self.is_completed,
            "percentage": self.percentage,
            "label": self.label(),
        }
