from datetime import date

from src.site_pulse.site_pulse.reports.model import HourlyEntry, SubmittedReport
from src.site_pulse.site_pulse.reports.summary import compute_daily_achievement, consolidate


def entries(*achieved: str) -> list[HourlyEntry]:
    return [HourlyEntry(time_period=f"p{i}", hourly_achieved=a) for i, a in enumerate(achieved)]


def test_short_achievements_are_joined():
    assert compute_daily_achievement(entries("Fixed sensor A", "Calibrated B")) == "Fixed sensor A. Calibrated B"


def test_blank_achievements_are_skipped_and_trimmed():
    assert compute_daily_achievement(entries("  Pulled cable ", "", "   ", "Tested")) == "Pulled cable. Tested"
    assert compute_daily_achievement(entries("", "")) == ""


def test_exactly_threshold_is_not_summarized():
    text = "x" * 500

    assert compute_daily_achievement(entries(text)) == text


def test_long_achievements_collapse_to_session_digest():
    first = "a" * 300
    third = "b" * 80

    summary = compute_daily_achievement(entries(first, "", third + "c" * 170))

    assert summary == f"Session 1: {'a' * 100}... | Session 3: {third}{'c' * 20}..."


def test_digest_keeps_short_sessions_whole():
    summary = compute_daily_achievement(entries("a" * 495, "short note"))

    assert summary == f"Session 1: {'a' * 100}... | Session 2: short note"


def test_consolidate_joins_present_fields():
    day = date(2026, 2, 2)
    reports = [
        SubmittedReport(report_id=1, user_id=1, report_date=day, time_period="9am-12pm", project_name="Substation",
                        hourly_activity="Cabling", hourly_achieved="Cable laid", problem_faced_by_engineer="Rain"),
        SubmittedReport(report_id=2, user_id=1, report_date=day, time_period="12pm-3pm", project_name="Substation",
                        hourly_activity="Testing", daily_target_achieved="Panel tested"),
    ]

    out = consolidate(reports)

    assert out.achievements == "Cable laid. Panel tested"
    assert out.problems == "Rain"
    assert out.activities == "Cabling. Testing"
    assert out.project_name == "Substation"
    assert out.count == 2
