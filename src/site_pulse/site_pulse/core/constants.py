"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EDIT_GRACE_MINUTES = 30
STATUS_REFRESH_SECONDS = 60

SUMMARY_MAX_LENGTH = 500
SUMMARY_SNIPPET_LENGTH = 100
SUMMARY_JOINER = ". "
SUMMARY_SESSION_JOINER = " | "

DEFAULT_DAILY_TARGET = "Auto-generated from hourly session activities"

ACTIVITY_PREFIX = "Activity"
PROBLEM_PREFIX = "Problem"
