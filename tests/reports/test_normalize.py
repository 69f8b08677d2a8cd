from datetime import date, datetime

import pytest

from src.site_pulse.site_pulse.reports.normalize import normalize_entry, normalize_report_row
from src.site_pulse.site_pulse.reports.text import format_numbered, parse_numbered


def test_entry_accepts_camel_and_snake_case():
    camel = normalize_entry({"timePeriod": "9am-12pm", "hourlyActivity": "Cabling", "problemResolvedOrNot": "Yes"})
    snake = normalize_entry({"time_period": "9am-12pm", "hourly_activity": "Cabling", "problem_resolved_or_not": "Yes"})

    assert camel == snake
    assert camel.problem_faced == "No"


def test_report_row_from_database_shape():
    row = {
        "id": 7,
        "user_id": "3",
        "report_date": date(2026, 2, 2),
        "time_period": "9am-12pm",
        "project_name": "Substation",
        "problem_faced_by_engineer_hourly": "Rain",
        "hourly_activity": None,
        "created_at": datetime(2026, 2, 2, 9, 40),
    }

    report = normalize_report_row(row)

    assert report.report_id == 7
    assert report.user_id == 3
    assert report.problem_faced_by_engineer == "Rain"
    assert report.hourly_activity == ""
    assert report.created_at == datetime(2026, 2, 2, 9, 40)


def test_report_row_from_api_shape_with_iso_timestamps():
    report = normalize_report_row(
        {"reportId": 2, "userId": 1, "reportDate": "2026-02-02T00:00:00.000Z", "timePeriod": "12pm-3pm",
         "projectName": "Substation", "updatedAt": "2026-02-02T13:05:00"}
    )

    assert report.report_date == date(2026, 2, 2)
    assert report.updated_at == datetime(2026, 2, 2, 13, 5)


def test_report_row_without_date_is_rejected():
    with pytest.raises(ValueError):
        normalize_report_row({"id": 1, "user_id": 1, "time_period": "9am-12pm"})


def test_numbered_text_helpers():
    text = format_numbered(["Lay cable", " ", "Terminate"], "Activity")

    assert text == "Activity 1: Lay cable\nActivity 2: Terminate"
    assert parse_numbered(text, "Activity") == ["Lay cable", "Terminate"]
    assert parse_numbered("plain line\n\nactivity 3: x", "Activity") == ["plain line", "x"]
