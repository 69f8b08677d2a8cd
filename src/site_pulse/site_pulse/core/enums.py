from __future__ import annotations

from enum import Enum


class SessionState(str, Enum):
    """Lifecycle state of one report period for the current day."""

    PENDING = "pending"
    ACTIVE = "active"
    SUBMITTED = "submitted"
    MISSED = "missed"


class RejectionReason(str, Enum):
    """Why a submit/edit attempt was refused."""

    ALREADY_EXISTS = "ALREADY_EXISTS"
    OUTSIDE_WINDOW = "OUTSIDE_WINDOW"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    NOT_SUBMITTED = "NOT_SUBMITTED"


class YesNo(str, Enum):
    YES = "Yes"
    NO = "No"
