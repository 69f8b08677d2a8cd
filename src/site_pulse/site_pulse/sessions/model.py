from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import require_hour, require_non_empty
from ..core.enums import SessionState
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ReportPeriod:
    """One fixed reporting window of the working day."""

    label: str
    name: str
    start_hour: int
    end_hour: int

    def __post_init__(self):
        require_non_empty(self.label, "Period label")
        start = require_hour(self.start_hour, "Start hour")
        end = require_hour(self.end_hour, "End hour")
        if end <= start:
            raise ValidationError(f"Period {self.label} must end after it starts")

    @property
    def key(self) -> str:
        """Short key used by dashboards, e.g. 'morning'."""
        return self.name.lower().replace(" session", "").strip()


@dataclass(frozen=True)
class SessionStatus:
    state: SessionState
    can_edit: bool = False

    def to_dict(self) -> dict:
        return {"status": self.state.value, "canEdit": self.can_edit}


DEFAULT_PERIODS: tuple[ReportPeriod, ...] = (
    ReportPeriod(label="9am-12pm", name="Morning Session", start_hour=9, end_hour=12),
    ReportPeriod(label="12pm-3pm", name="Afternoon Session", start_hour=12, end_hour=15),
    ReportPeriod(label="3pm-6pm", name="Evening Session", start_hour=15, end_hour=18),
)


def find_period(periods, label: str) -> ReportPeriod:
    wanted = normalize_label(label)
    for period in periods:
        if normalize_label(period.label) == wanted:
            return period
    raise ValidationError(f"Unknown time period: {label}")


def normalize_label(label: str) -> str:
    # Stored labels may differ in case/spacing ("9am - 12pm").
    return "".join(str(label or "").lower().split())
