from __future__ import annotations

from datetime import datetime

import pytest

from src.site_pulse.site_pulse.container import build_container
from src.site_pulse.site_pulse.main import create_app


@pytest.fixture
def clock():
    return {"now": datetime(2026, 2, 2, 9, 30)}


@pytest.fixture
def client(monkeypatch, reports_repo, clock):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_container(reports_repo=reports_repo, clock=lambda: clock["now"])
    app = create_app(container)
    with app.test_client() as c:
        with c.session_transaction() as sess:
            sess["user_id"] = 1
            sess["name"] = "Asha"
        yield c


def submit_payload(**overrides):
    payload = {
        "reportDate": "2026-02-02",
        "projectName": "Substation",
        "dailyTarget": "1. Cable tray\n2. Terminations",
        "hourlyEntries": [
            {"timePeriod": "9am-12pm", "hourlyActivity": "Cable tray fixing", "hourlyAchieved": "Tray fixed"},
            {"timePeriod": "12pm-3pm", "hourlyActivity": ""},
        ],
    }
    payload.update(overrides)
    return payload


def test_requires_login(monkeypatch, reports_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(build_container(reports_repo=reports_repo))

    resp = app.test_client().get("/api/hourly-report/status")

    assert resp.status_code == 401


def test_status_endpoint(client):
    resp = client.get("/api/hourly-report/status")

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["activePeriod"] == "9am-12pm"
    assert body["sessions"]["morning"] == {
        "timePeriod": "9am-12pm",
        "name": "Morning Session",
        "status": "active",
        "canEdit": True,
    }
    assert body["sessions"]["evening"]["status"] == "pending"


def test_submit_then_duplicate(client):
    first = client.post("/api/hourly-report", json=submit_payload())
    second = client.post("/api/hourly-report", json=submit_payload())

    assert first.status_code == 201
    assert first.get_json()["accepted"] == ["9am-12pm"]
    assert second.status_code == 409
    assert second.get_json()["rejections"][0]["reason"] == "ALREADY_EXISTS"


def test_submit_validation_rejection_lists_fields(client):
    payload = submit_payload(
        hourlyEntries=[{"timePeriod": "9am-12pm", "hourlyActivity": "Loop check", "problemResolvedOrNot": "Yes"}]
    )

    resp = client.post("/api/hourly-report", json=payload)

    body = resp.get_json()
    assert resp.status_code == 400
    assert [v["field"] for v in body["rejections"][0]["violations"]] == [
        "problem_occur_start_time",
        "problem_resolved_end_time",
    ]


def test_submit_without_project_is_bad_request(client):
    resp = client.post("/api/hourly-report", json=submit_payload(projectName=""))

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Project Name is required"


def test_edit_list_and_consolidated(client, clock):
    rid = client.post("/api/hourly-report", json=submit_payload()).get_json()["reportIds"]["9am-12pm"]

    clock["now"] = datetime(2026, 2, 2, 12, 10)
    edited = client.put(f"/api/hourly-report/{rid}", json={"hourly_activity": "Cable tray fixing", "hourly_achieved": "Tray and glands"})
    listed = client.get("/api/hourly-report/2026-02-02")
    consolidated = client.get("/api/hourly-report/consolidated/2026-02-02")

    assert edited.status_code == 200
    assert edited.get_json()["report"]["hourlyAchieved"] == "Tray and glands"
    assert [r["timePeriod"] for r in listed.get_json()] == ["9am-12pm"]
    assert consolidated.get_json()["achievements"] == "Tray and glands"

    clock["now"] = datetime(2026, 2, 2, 12, 45)
    late = client.put(f"/api/hourly-report/{rid}", json={"hourlyActivity": "x"})
    assert late.status_code == 400
    assert late.get_json()["rejections"][0]["reason"] == "OUTSIDE_WINDOW"


def test_missing_report_and_empty_day(client):
    assert client.put("/api/hourly-report/42", json={"hourlyActivity": "x"}).status_code == 404
    assert client.get("/api/hourly-report/consolidated/2026-02-02").status_code == 404
    assert client.get("/api/hourly-report/not-a-date").status_code == 400


def test_daily_summary_and_plan_progress(client):
    summary = client.post(
        "/api/hourly-report/daily-summary",
        json={"hourlyEntries": [{"hourlyAchieved": "Fixed sensor A"}, {"hourly_achieved": "Calibrated B"}]},
    )
    progress = client.post(
        "/api/hourly-report/plans/progress",
        json={
            "dailyTargetPlanned": "1. Cable tray\n2. Terminations",
            "links": [{"planId": 1, "activity": "Tray fixing", "achieved": "Yes"}],
        },
    )

    assert summary.get_json() == {"dailyTargetAchieved": "Fixed sensor A. Calibrated B"}
    plans = progress.get_json()
    assert plans[0]["completed"] is True
    assert plans[0]["activities"] == ["Tray fixing"]
    assert plans[1]["progress"]["label"] == "No activities linked"


def test_non_text_daily_target_is_bad_request(client):
    resp = client.post("/api/hourly-report", json=submit_payload(dailyTarget=["Cable tray"]))

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Project Name and Daily Target must be text"


def test_draft_strips_numbering(client):
    rid = client.post("/api/hourly-report", json=submit_payload()).get_json()["reportIds"]["9am-12pm"]

    resp = client.get(f"/api/hourly-report/{rid}/draft")

    assert resp.status_code == 200
    assert resp.get_json()["hourlyActivity"] == "Cable tray fixing"
    assert client.get("/api/hourly-report/99/draft").status_code == 404
